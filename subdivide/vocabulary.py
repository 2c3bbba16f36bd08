# -*- coding: utf-8 -*-
"""
Vocabulary - Canonical enums for subdivide.

Defines the closed set of interpolation kernels the resampler can
dispatch to. Kernel values double as the names accepted on the command
line and by ``resample()``.

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

from enum import Enum

from subdivide.exceptions import ValidationError


class Kernel(Enum):
    """Interpolation kernels available for grid resampling.

    Each member maps onto a sampler in :mod:`subdivide.interpolation`
    that shares the same clamp-to-edge neighborhood gathering.
    """

    LINEAR = "linear"
    CATMULL_ROM = "catmull_rom"

    @classmethod
    def parse(cls, value) -> "Kernel":
        """Coerce a ``Kernel`` or its string value to a ``Kernel``.

        Parameters
        ----------
        value : Kernel or str
            Kernel member, or its value (``'linear'``, ``'catmull_rom'``).
            Hyphens are accepted in place of underscores.

        Returns
        -------
        Kernel

        Raises
        ------
        ValidationError
            If ``value`` does not name a kernel.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower().replace('-', '_'))
            except ValueError:
                pass
        valid = ', '.join(repr(k.value) for k in cls)
        raise ValidationError(
            f"Unknown kernel {value!r}. Expected one of: {valid}"
        )
