# -*- coding: utf-8 -*-
"""
Resample - Upsample a point grid onto a finer lattice.

Builds the target lattice for an upsample factor ``u`` and evaluates a
sampler at every lattice cell. Target size per axis is
``floor((original - 1) * u) + 1``; target cell ``(c, r)`` samples the
original grid at ``(c / u, r / u)``. With ``u = 1`` every sample lands on
an integer index and the original grid is reproduced exactly.

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
from typing import Tuple

# Third-party
import numpy as np

# subdivide internal
from subdivide.exceptions import InvalidFactor
from subdivide.grid import Grid
from subdivide.interpolation import get_sampler


def validate_factor(upsample_factor: float) -> float:
    """Return ``upsample_factor`` as a float, rejecting non-positive values.

    Raises
    ------
    InvalidFactor
        If the factor is not a finite number greater than zero.
    """
    try:
        factor = float(upsample_factor)
    except (TypeError, ValueError) as exc:
        raise InvalidFactor(
            f"Upsample factor must be a number, got {upsample_factor!r}"
        ) from exc
    if not math.isfinite(factor) or factor <= 0:
        raise InvalidFactor(
            f"Upsample factor must be a positive finite number, got {factor}"
        )
    return factor


def target_dimension(original_dimension: int, upsample_factor: float) -> int:
    """Number of lattice points along an axis after upsampling.

    Parameters
    ----------
    original_dimension : int
        Samples along the axis in the original grid. Must be >= 1.
    upsample_factor : float
        Positive scale factor.

    Returns
    -------
    int
        ``floor((original_dimension - 1) * upsample_factor) + 1``.

    Examples
    --------
    >>> target_dimension(3, 2)
    5
    >>> target_dimension(5, 1.5)
    7
    """
    factor = validate_factor(upsample_factor)
    if original_dimension < 1:
        raise ValueError(
            f"original_dimension must be >= 1, got {original_dimension}"
        )
    return math.floor((original_dimension - 1) * factor) + 1


def build_lattice(
    width: int,
    height: int,
    upsample_factor: float,
) -> Tuple[np.ndarray, np.ndarray]:
    """Source coordinates for every cell of the upsampled lattice.

    Parameters
    ----------
    width : int
        Original grid width (columns).
    height : int
        Original grid height (rows).
    upsample_factor : float
        Positive scale factor.

    Returns
    -------
    x : np.ndarray
        Fractional source columns, shape ``(target_height, target_width)``.
    y : np.ndarray
        Fractional source rows, same shape.
    """
    factor = validate_factor(upsample_factor)
    n_cols = target_dimension(width, factor)
    n_rows = target_dimension(height, factor)
    cols = np.arange(n_cols, dtype=np.float64) / factor
    rows = np.arange(n_rows, dtype=np.float64) / factor
    x, y = np.meshgrid(cols, rows)
    return x, y


def resample(grid: Grid, upsample_factor: float, kernel='linear') -> Grid:
    """Upsample ``grid`` by ``upsample_factor`` with the given kernel.

    Parameters
    ----------
    grid : Grid
        Original grid.
    upsample_factor : float
        Positive scale factor.
    kernel : Kernel, str, or Sampler
        ``Kernel.LINEAR`` / ``'linear'``, ``Kernel.CATMULL_ROM`` /
        ``'catmull_rom'``, or a configured sampler instance.

    Returns
    -------
    Grid
        Grid of ``floor((height - 1) * u) + 1`` rows and
        ``floor((width - 1) * u) + 1`` columns.

    Raises
    ------
    InvalidFactor
        If ``upsample_factor`` is not positive and finite. Checked before
        the lattice is built.
    ValidationError
        If ``kernel`` is not recognized.
    """
    factor = validate_factor(upsample_factor)
    if not isinstance(grid, Grid):
        grid = Grid(grid)
    sampler = get_sampler(kernel)
    x, y = build_lattice(grid.width, grid.height, factor)
    return Grid(sampler(grid, x, y))
