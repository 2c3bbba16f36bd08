# -*- coding: utf-8 -*-
"""
Compare - Scaled per-cell difference between two grids.

The difference signal is amplified for visualization; it has no
physical units.

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

# subdivide internal
from subdivide.exceptions import ShapeMismatch
from subdivide.grid import Grid

DEFAULT_DIFFERENCE_SCALE = 500.0


def difference(
    grid_a: Grid,
    grid_b: Grid,
    scale: float = DEFAULT_DIFFERENCE_SCALE,
) -> Grid:
    """Return ``(A - B) * scale`` cell by cell.

    Parameters
    ----------
    grid_a, grid_b : Grid
        Grids of identical shape.
    scale : float
        Amplification applied to both components. Default 500.

    Returns
    -------
    Grid
        Same shape as the inputs.

    Raises
    ------
    ShapeMismatch
        If the grids differ in shape.
    """
    if not isinstance(grid_a, Grid):
        grid_a = Grid(grid_a)
    if not isinstance(grid_b, Grid):
        grid_b = Grid(grid_b)
    if grid_a.shape != grid_b.shape:
        raise ShapeMismatch(
            f"Cannot compare grids of shape {grid_a.shape} and {grid_b.shape}"
        )
    return Grid((grid_a.values - grid_b.values) * scale)
