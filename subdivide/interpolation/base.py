# -*- coding: utf-8 -*-
"""
Interpolation Base Classes - ABCs for 2D grid sampling.

Defines the ``Sampler`` ABC (callable interface) and ``KernelSampler``
(template for separable kernel methods that share coordinate
decomposition, clamp-to-edge neighborhood gathering, and the
row-then-column composition of a 1D kernel).

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
from abc import ABC, abstractmethod
from typing import Tuple, Union

# Third-party
import numpy as np

# subdivide internal
from subdivide.exceptions import ValidationError
from subdivide.grid import Grid, Point2

Coordinate = Union[float, np.ndarray]


def gather_neighborhood(
    values: np.ndarray,
    col: np.ndarray,
    row: np.ndarray,
    radius: int,
) -> np.ndarray:
    """Gather the clamp-to-edge patch around integer base indices.

    Column offsets run ``col - (radius - 1) .. col + radius`` and row
    offsets likewise, giving a ``2 * radius`` square patch. Each fetched
    index is clamped to ``[0, dimension - 1]`` on its own axis, so
    samples past an edge repeat the edge value.

    Parameters
    ----------
    values : np.ndarray
        Grid values, shape ``(height, width, 2)``.
    col : np.ndarray
        Integer base column indices, shape ``(M,)``.
    row : np.ndarray
        Integer base row indices, shape ``(M,)``.
    radius : int
        Kernel radius. 1 gives a 2x2 patch, 2 gives 4x4.

    Returns
    -------
    np.ndarray
        Patch values, shape ``(M, 2 * radius, 2 * radius, 2)`` indexed
        ``[point, patch_row, patch_col, component]``.
    """
    height, width = values.shape[:2]
    offsets = np.arange(2 * radius) - (radius - 1)

    cols = np.clip(col[:, np.newaxis] + offsets[np.newaxis, :], 0, width - 1)
    rows = np.clip(row[:, np.newaxis] + offsets[np.newaxis, :], 0, height - 1)

    return values[rows[:, :, np.newaxis], cols[:, np.newaxis, :]]


class Sampler(ABC):
    """Abstract base class for 2D grid sampling.

    All samplers are callable with signature ``(grid, x, y) -> value``
    where ``x`` is a fractional column and ``y`` a fractional row in the
    grid's own 0-based index space.

    Parameters
    ----------
    grid : Grid
        Grid to sample.
    x : float or np.ndarray
        Fractional column coordinate(s).
    y : float or np.ndarray
        Fractional row coordinate(s), same shape as ``x``.

    Returns
    -------
    Point2 or np.ndarray
        A ``Point2`` for scalar coordinates, otherwise an array of shape
        ``x.shape + (2,)``.
    """

    @abstractmethod
    def __call__(
        self,
        grid: Grid,
        x: Coordinate,
        y: Coordinate,
    ) -> Union[Point2, np.ndarray]:
        """Sample ``grid`` at ``(x, y)``."""
        ...


class KernelSampler(Sampler):
    """Base class for separable kernel samplers.

    Handles the common boilerplate: coordinate validation and clamping,
    base index / fractional offset decomposition, neighborhood gathering
    via :func:`gather_neighborhood`, and separable composition (each
    patch row along x, then the row results along y). Both point
    components are interpolated independently. Subclasses only implement
    :meth:`_interpolate_1d`.

    Parameters
    ----------
    radius : int
        Kernel radius; the kernel reads ``2 * radius`` samples per axis.
        Must be >= 1.
    """

    def __init__(self, radius: int) -> None:
        if radius < 1:
            raise ValueError(f"radius must be >= 1, got {radius}")
        self._radius = radius

    @property
    def radius(self) -> int:
        """Kernel radius in samples."""
        return self._radius

    @abstractmethod
    def _interpolate_1d(self, t: np.ndarray, *taps: np.ndarray) -> np.ndarray:
        """Interpolate between ``2 * radius`` equally spaced taps.

        Parameters
        ----------
        t : np.ndarray
            Fractional offset in ``[0, 1)`` between the two central taps,
            broadcastable against each tap.
        *taps : np.ndarray
            ``2 * radius`` tap values in increasing index order.

        Returns
        -------
        np.ndarray
            Interpolated values, broadcast shape of ``t`` and the taps.
        """
        ...

    def _decompose(
        self,
        coord: np.ndarray,
        size: int,
    ) -> Tuple[np.ndarray, np.ndarray]:
        """Split clamped coordinates into base index and fractional offset."""
        coord = np.clip(coord, 0.0, size - 1)
        base = np.floor(coord)
        return base.astype(np.intp), coord - base

    def __call__(
        self,
        grid: Grid,
        x: Coordinate,
        y: Coordinate,
    ) -> Union[Point2, np.ndarray]:
        """Sample ``grid`` at fractional coordinates ``(x, y)``.

        Coordinates outside ``[0, width - 1]`` / ``[0, height - 1]`` are
        clamped to the grid, so they return the nearest edge value.

        Raises
        ------
        ValidationError
            If ``x`` and ``y`` differ in shape or contain non-finite values.
        """
        if not isinstance(grid, Grid):
            grid = Grid(grid)
        x = np.asarray(x, dtype=np.float64)
        y = np.asarray(y, dtype=np.float64)
        if x.shape != y.shape:
            raise ValidationError(
                f"x and y must have the same shape, got {x.shape} and {y.shape}"
            )
        if not (np.all(np.isfinite(x)) and np.all(np.isfinite(y))):
            raise ValidationError("Sample coordinates must be finite")

        out_shape = x.shape
        col, fx = self._decompose(x.ravel(), grid.width)
        row, fy = self._decompose(y.ravel(), grid.height)

        patch = gather_neighborhood(grid.values, col, row, self._radius)
        taps = 2 * self._radius

        # Along x within each patch row: (M, taps, 2)
        across = self._interpolate_1d(
            fx[:, np.newaxis, np.newaxis],
            *(patch[:, :, k, :] for k in range(taps)),
        )
        # Along y over the row results: (M, 2)
        result = self._interpolate_1d(
            fy[:, np.newaxis],
            *(across[:, k, :] for k in range(taps)),
        )

        if out_shape == ():
            return Point2(float(result[0, 0]), float(result[0, 1]))
        return result.reshape(out_shape + (2,))
