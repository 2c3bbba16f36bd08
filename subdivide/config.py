# -*- coding: utf-8 -*-
"""
Config - Run parameters for a subdivision.

``SubdivideConfig`` collects the values a subdivision run needs beyond
its input grid. Defaults reproduce the reference behavior: upsample by
2, normalize displacements by 500 for images, and amplify the
Catmull-Rom minus bilinear difference by 500.

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-19

Modified
--------
2026-10-19
"""

# Standard library
import math
from dataclasses import dataclass

# subdivide internal
from subdivide.compare import DEFAULT_DIFFERENCE_SCALE
from subdivide.exceptions import ValidationError
from subdivide.grid import DEFAULT_SCALE_DIVISOR
from subdivide.interpolation.catmull_rom import DEFAULT_TENSION
from subdivide.resample import validate_factor

DEFAULT_UPSAMPLE_FACTOR = 2.0


@dataclass(frozen=True)
class SubdivideConfig:
    """Parameters for one subdivision run.

    Parameters
    ----------
    upsample_factor : float
        Resampling factor, > 0. Default 2.
    scale_divisor : float
        Displacement magnitude mapped to half the image channel range.
        Default 500.
    difference_scale : float
        Amplification of the Catmull-Rom minus bilinear difference.
        Default 500.
    tension : float
        Catmull-Rom spline tension. Default 0.5.

    Raises
    ------
    InvalidFactor
        If ``upsample_factor`` is not positive and finite.
    ValidationError
        If any other value is not finite, or ``scale_divisor`` is zero.
    """

    upsample_factor: float = DEFAULT_UPSAMPLE_FACTOR
    scale_divisor: float = DEFAULT_SCALE_DIVISOR
    difference_scale: float = DEFAULT_DIFFERENCE_SCALE
    tension: float = DEFAULT_TENSION

    def __post_init__(self) -> None:
        object.__setattr__(
            self, 'upsample_factor', validate_factor(self.upsample_factor),
        )
        for name in ('scale_divisor', 'difference_scale', 'tension'):
            value = getattr(self, name)
            try:
                value = float(value)
            except (TypeError, ValueError) as exc:
                raise ValidationError(
                    f"{name} must be a number, got {value!r}"
                ) from exc
            if not math.isfinite(value):
                raise ValidationError(f"{name} must be finite, got {value}")
            object.__setattr__(self, name, value)
        if self.scale_divisor == 0:
            raise ValidationError("scale_divisor must be non-zero")
