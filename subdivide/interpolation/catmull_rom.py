# -*- coding: utf-8 -*-
"""
Catmull-Rom Interpolation - 4x4 clamp-to-edge cubic reconstruction.

Uniform cardinal spline with tension ``s`` (``s = 1/2`` is the
Catmull-Rom spline), applied separably: each of the four patch rows is
interpolated along x, then the four row values along y. Reproduces
stored values at integer coordinates. Unlike bilinear, results may
overshoot the local value range (cubic ringing).

Reference: CMU 15-462 (Spring 2009), lecture 10, cubic curves.

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

DEFAULT_TENSION = 0.5


def catmull_rom(t, p1, p2, p3, p4, s: float = DEFAULT_TENSION):
    """Evaluate the cardinal spline segment between ``p2`` and ``p3``.

    Parameters
    ----------
    t : float or np.ndarray
        Position in ``[0, 1]`` from ``p2`` (t=0) to ``p3`` (t=1).
    p1, p2, p3, p4 : float or np.ndarray
        Four consecutive control values.
    s : float
        Tension. Default 0.5 (Catmull-Rom).

    Returns
    -------
    float or np.ndarray
        ``t**3 * a + t**2 * b + t * c + d``.
    """
    a = -s * p1 + (2 - s) * p2 + (s - 2) * p3 + s * p4
    b = 2 * s * p1 + (s - 3) * p2 + (3 - 2 * s) * p3 - s * p4
    c = -s * p1 + s * p3
    d = p2
    return t * t * t * a + t * t * b + t * c + d


class CatmullRomSampler(KernelSampler):
    """Bicubic Catmull-Rom grid sampler (kernel radius 2, 4x4 neighborhood).

    Parameters
    ----------
    tension : float
        Spline tension ``s``. Default 0.5, the Catmull-Rom spline. Any
        finite value keeps exact reproduction at integer coordinates.

    Examples
    --------
    >>> sampler = CatmullRomSampler()
    >>> value = sampler(grid, 1.25, 0.5)
    """

    def __init__(self, tension: float = DEFAULT_TENSION) -> None:
        if not np.isfinite(tension):
            raise ValueError(f"tension must be finite, got {tension}")
        self.tension = float(tension)
        super().__init__(radius=2)

    def _interpolate_1d(self, t: np.ndarray, *taps: np.ndarray) -> np.ndarray:
        p1, p2, p3, p4 = taps
        return catmull_rom(t, p1, p2, p3, p4, s=self.tension)

    def __repr__(self) -> str:
        return f"CatmullRomSampler(tension={self.tension})"


_CATMULL_ROM = CatmullRomSampler()


def catmull_rom_sample(grid, x, y):
    """Sample ``grid`` with Catmull-Rom bicubic interpolation at ``(x, y)``.

    Convenience wrapper around a shared :class:`CatmullRomSampler` with
    the default tension.
    """
    return _CATMULL_ROM(grid, x, y)
