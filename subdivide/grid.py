# -*- coding: utf-8 -*-
"""
Grid - Immutable rectangular grid of 2-component displacement points.

A ``Grid`` holds ``height`` rows by ``width`` columns of ``(x, y)``
points in row-major order, backed by a read-only ``(rows, cols, 2)``
float64 array. Cell ``(col, row)`` holds the value for that lattice
position; cells do not store their own index. Every transformation
returns a new ``Grid``.

Also provides the flat-list conversions used at the file boundary
(``from_flat_points`` / ``to_flat_points``) and the per-cell channel
normalization handed to image writers.

Dependencies
------------
numpy

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
from typing import Callable, Iterator, NamedTuple, Optional, Sequence, Tuple

# Third-party
import numpy as np

# subdivide internal
from subdivide.exceptions import (
    FlattenLengthMismatch,
    ShapeError,
    ValidationError,
)

#: Displacement magnitude that maps to the full [0, 1] image range.
DEFAULT_SCALE_DIVISOR = 500.0


class Point2(NamedTuple):
    """An ``(x, y)`` displacement value."""

    x: float
    y: float


def _as_cell_array(rows) -> np.ndarray:
    """Validate ``rows`` and return a read-only ``(h, w, 2)`` float array."""
    if isinstance(rows, Grid):
        return rows.values

    if isinstance(rows, np.ndarray):
        if rows.ndim != 3 or rows.shape[2] != 2:
            raise ShapeError(
                f"Expected array of shape (rows, cols, 2), got {rows.shape}"
            )
        if rows.shape[0] < 1 or rows.shape[1] < 1:
            raise ShapeError(f"Grid must not be empty, got {rows.shape}")
        arr = np.array(rows, dtype=np.float64)
    else:
        rows = [list(r) for r in rows]
        if not rows:
            raise ShapeError("Grid requires at least one row")
        width = len(rows[0])
        if width == 0:
            raise ShapeError("Grid requires at least one column")
        for index, row in enumerate(rows):
            if len(row) != width:
                raise ShapeError(
                    f"Row {index} has {len(row)} cells, expected {width}"
                )
        try:
            arr = np.array(rows, dtype=np.float64)
        except (TypeError, ValueError) as exc:
            raise ShapeError(
                f"Grid cells must be (x, y) number pairs: {exc}"
            ) from exc
        if arr.ndim != 3 or arr.shape[2] != 2:
            raise ShapeError(
                "Grid cells must be (x, y) number pairs, got array of "
                f"shape {arr.shape}"
            )

    arr.flags.writeable = False
    return arr


class Grid:
    """Rectangular, row-major grid of ``Point2`` values.

    Parameters
    ----------
    rows : Sequence[Sequence[Tuple[float, float]]] or np.ndarray or Grid
        Nested rows of ``(x, y)`` pairs, or an array of shape
        ``(rows, cols, 2)``. The data is copied.

    Raises
    ------
    ShapeError
        If there are no rows or columns, the rows have unequal lengths,
        or a cell is not an ``(x, y)`` pair.

    Examples
    --------
    >>> g = Grid([[(0, 0), (10, 0)], [(0, 10), (10, 10)]])
    >>> g.width, g.height
    (2, 2)
    >>> g.cell(1, 0)
    Point2(x=10.0, y=0.0)
    """

    __slots__ = ('_values',)

    def __init__(self, rows) -> None:
        self._values = _as_cell_array(rows)

    # ── Shape ───────────────────────────────────────────────────────

    @property
    def values(self) -> np.ndarray:
        """Read-only ``(height, width, 2)`` array of cell values."""
        return self._values

    @property
    def width(self) -> int:
        """Number of columns (length of the first row)."""
        return self._values.shape[1]

    @property
    def height(self) -> int:
        """Number of rows."""
        return self._values.shape[0]

    @property
    def shape(self) -> Tuple[int, int]:
        """``(height, width)``."""
        return self._values.shape[0], self._values.shape[1]

    # ── Cell access ─────────────────────────────────────────────────

    def cell(self, col: int, row: int) -> Point2:
        """Return the value stored at column ``col``, row ``row``."""
        x, y = self._values[row, col]
        return Point2(float(x), float(y))

    def __getitem__(self, row: int) -> Tuple[Point2, ...]:
        return tuple(Point2(float(x), float(y)) for x, y in self._values[row])

    def __iter__(self) -> Iterator[Tuple[Point2, ...]]:
        for row in range(self.height):
            yield self[row]

    def __len__(self) -> int:
        return self.height

    def to_list(self):
        """Nested ``[row][col]`` lists of ``(x, y)`` tuples."""
        return [list(row) for row in self]

    # ── Traversal ───────────────────────────────────────────────────

    def map(self, fn: Callable[[Point2, int, int], Sequence[float]]) -> 'Grid':
        """Build a same-shaped grid from ``fn(value, col, row)``.

        Parameters
        ----------
        fn : Callable[[Point2, int, int], Sequence[float]]
            Called once per cell with the cell value, its column and its
            row. Must return an ``(x, y)`` pair.

        Returns
        -------
        Grid
            New grid; ``self`` is unchanged.
        """
        return Grid([
            [fn(value, col, row) for col, value in enumerate(cells)]
            for row, cells in enumerate(self)
        ])

    def for_each(self, fn: Callable[[Point2, int, int], None]) -> None:
        """Call ``fn(value, col, row)`` for every cell in row-major order.

        Row 0 is visited first, columns left to right. Consumers that
        flatten the grid rely on this order.
        """
        for row, cells in enumerate(self):
            for col, value in enumerate(cells):
                fn(value, col, row)

    # ── Comparison ──────────────────────────────────────────────────

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (self.shape == other.shape
                and bool(np.array_equal(self._values, other._values)))

    __hash__ = None

    def __repr__(self) -> str:
        return f"Grid(height={self.height}, width={self.width})"

    # ── Flat list boundary ──────────────────────────────────────────

    @classmethod
    def from_flat_points(
        cls,
        xs: Sequence[float],
        ys: Sequence[float],
        dimension: Optional[int] = None,
    ) -> 'Grid':
        """Reshape flat x and y coordinate lists into a square grid.

        Parameters
        ----------
        xs : Sequence[float]
            Row-major x components, length ``dimension ** 2``.
        ys : Sequence[float]
            Row-major y components, same length as ``xs``.
        dimension : int, optional
            Side length of the grid. Derived from ``len(xs)`` when
            omitted, in which case the length must be a perfect square.

        Returns
        -------
        Grid
            ``dimension x dimension`` grid.

        Raises
        ------
        FlattenLengthMismatch
            If ``xs`` and ``ys`` differ in length, are empty, or their
            length is not ``dimension ** 2``.
        """
        xs = np.asarray(xs, dtype=np.float64).ravel()
        ys = np.asarray(ys, dtype=np.float64).ravel()
        if xs.size != ys.size:
            raise FlattenLengthMismatch(
                f"x and y lists differ in length: {xs.size} != {ys.size}"
            )
        n = xs.size
        if dimension is None:
            dimension = math.isqrt(n)
            if n == 0 or dimension * dimension != n:
                raise FlattenLengthMismatch(
                    f"{n} points do not form a square grid"
                )
        elif dimension < 1 or dimension * dimension != n:
            raise FlattenLengthMismatch(
                f"{n} points cannot fill a {dimension}x{dimension} grid"
            )
        return cls(np.stack([xs, ys], axis=-1).reshape(dimension, dimension, 2))

    def to_flat_points(self) -> Tuple[np.ndarray, np.ndarray]:
        """Flatten row-major into separate x and y arrays."""
        return (
            np.array(self._values[..., 0]).ravel(),
            np.array(self._values[..., 1]).ravel(),
        )

    def to_normalized_channels(
        self,
        scale_divisor: float = DEFAULT_SCALE_DIVISOR,
    ) -> np.ndarray:
        """Map each cell to 4 image channels in ``[0, 1]``.

        Channels per cell are ``clip(x / scale_divisor + 0.5, 0, 1)``,
        the same for ``y``, then the constants ``0`` and ``1``.

        Parameters
        ----------
        scale_divisor : float
            Displacement magnitude mapped to half the channel range.
            Default is 500.

        Returns
        -------
        np.ndarray
            Flat row-major array of length ``4 * width * height``.

        Raises
        ------
        ValidationError
            If ``scale_divisor`` is zero or not finite.
        """
        if not np.isfinite(scale_divisor) or scale_divisor == 0:
            raise ValidationError(
                f"scale_divisor must be finite and non-zero, got {scale_divisor}"
            )
        channels = np.zeros(self.shape + (4,), dtype=np.float64)
        channels[..., :2] = np.clip(
            self._values / scale_divisor + 0.5, 0.0, 1.0,
        )
        channels[..., 3] = 1.0
        return channels.ravel()
