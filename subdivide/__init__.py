# -*- coding: utf-8 -*-
"""
Subdivide - Upsample mesh displacement grids.

Resamples a coarse 2D grid of ``(x, y)`` displacement points onto a
finer lattice with bilinear and Catmull-Rom interpolation, and compares
the two. The resampling core (``Grid``, the samplers, ``resample`` and
``difference``) works purely on in-memory grids; ``subdivide.IO`` and
the CLI handle the geometry XML documents and PNG renderings.

Dependencies
------------
numpy
Pillow (PNG output only)

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

__version__ = "0.1.0"

from subdivide.exceptions import (
    SubdivideError,
    ValidationError,
    ShapeError,
    ShapeMismatch,
    InvalidFactor,
    FlattenLengthMismatch,
    GeometryFormatError,
    DependencyError,
)
from subdivide.vocabulary import Kernel
from subdivide.grid import Grid, Point2
from subdivide.interpolation import (
    BilinearSampler,
    CatmullRomSampler,
    linear_sample,
    catmull_rom_sample,
    get_sampler,
)
from subdivide.resample import resample, target_dimension, build_lattice
from subdivide.compare import difference
from subdivide.config import SubdivideConfig

__all__ = [
    'SubdivideError',
    'ValidationError',
    'ShapeError',
    'ShapeMismatch',
    'InvalidFactor',
    'FlattenLengthMismatch',
    'GeometryFormatError',
    'DependencyError',
    'Kernel',
    'Grid',
    'Point2',
    'BilinearSampler',
    'CatmullRomSampler',
    'linear_sample',
    'catmull_rom_sample',
    'get_sampler',
    'resample',
    'target_dimension',
    'build_lattice',
    'difference',
    'SubdivideConfig',
]
