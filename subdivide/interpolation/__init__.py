# -*- coding: utf-8 -*-
"""
Interpolation - Clamp-to-edge 2D samplers for point grids.

Provides kernel-based samplers with a uniform callable signature
``(grid, x, y) -> Point2``, where ``(x, y)`` is a fractional
column/row position in the grid's index space. Both kernels interpolate
the ``x`` and ``y`` components of each stored point independently and
repeat edge values outside the grid.

Available samplers:

- ``BilinearSampler`` / ``linear_sample``: 2x2 linear reconstruction.
- ``CatmullRomSampler`` / ``catmull_rom_sample``: 4x4 cubic
  Catmull-Rom reconstruction with configurable tension.

Base classes:

- ``Sampler``: ABC for all samplers.
- ``KernelSampler``: Template for separable kernels (handles
  neighborhood gathering, edge clamping, row/column composition).

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

from subdivide.interpolation.base import (
    Sampler,
    KernelSampler,
    gather_neighborhood,
)
from subdivide.interpolation.linear import BilinearSampler, lerp, linear_sample
from subdivide.interpolation.catmull_rom import (
    CatmullRomSampler,
    catmull_rom,
    catmull_rom_sample,
)
from subdivide.vocabulary import Kernel


def get_sampler(kernel, **kwargs) -> Sampler:
    """Create the sampler for a kernel.

    Parameters
    ----------
    kernel : Kernel, str, or Sampler
        Kernel member or name. A ``Sampler`` instance is returned as is.
    **kwargs
        Forwarded to the sampler constructor (e.g. ``tension`` for
        Catmull-Rom).

    Returns
    -------
    Sampler

    Raises
    ------
    ValidationError
        If ``kernel`` does not name a kernel.
    """
    if isinstance(kernel, Sampler):
        return kernel
    kernel = Kernel.parse(kernel)
    if kernel is Kernel.LINEAR:
        return BilinearSampler(**kwargs)
    return CatmullRomSampler(**kwargs)


__all__ = [
    'Sampler',
    'KernelSampler',
    'gather_neighborhood',
    'BilinearSampler',
    'lerp',
    'linear_sample',
    'CatmullRomSampler',
    'catmull_rom',
    'catmull_rom_sample',
    'get_sampler',
]
