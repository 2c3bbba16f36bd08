# -*- coding: utf-8 -*-
"""
Bilinear Interpolation - 2x2 clamp-to-edge linear reconstruction.

Each output is a convex combination of the four surrounding samples, so
it reproduces stored values at integer coordinates and never overshoots
the local value range.

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

# Third-party
import numpy as np

# subdivide internal
from subdivide.interpolation.base import KernelSampler


def lerp(t, p0, p1):
    """Linear interpolation ``(1 - t) * p0 + t * p1``."""
    return (1 - t) * p0 + t * p1


class BilinearSampler(KernelSampler):
    """Bilinear grid sampler (kernel radius 1, 2x2 neighborhood).

    Examples
    --------
    >>> sampler = BilinearSampler()
    >>> sampler(grid, 0.5, 0.5)
    Point2(x=5.0, y=5.0)
    """

    def __init__(self) -> None:
        super().__init__(radius=1)

    def _interpolate_1d(self, t: np.ndarray, *taps: np.ndarray) -> np.ndarray:
        p0, p1 = taps
        return lerp(t, p0, p1)

    def __repr__(self) -> str:
        return "BilinearSampler()"


_BILINEAR = BilinearSampler()


def linear_sample(grid, x, y):
    """Sample ``grid`` bilinearly at fractional ``(x, y)``.

    Convenience wrapper around a shared :class:`BilinearSampler`. See
    :class:`~subdivide.interpolation.base.Sampler` for the argument and
    return conventions.
    """
    return _BILINEAR(grid, x, y)
