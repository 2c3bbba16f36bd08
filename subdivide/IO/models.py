# -*- coding: utf-8 -*-
"""
IO Models - Typed schema for the geometry document fields subdivide uses.

Only the two flattened parameter lists of the first geometry definition
are read and written; everything else in the document is carried along
untouched by the reader/writer.

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
from dataclasses import dataclass, field

# Third-party
import numpy as np

# subdivide internal
from subdivide.grid import Grid

#: Root element of a geometry document.
ROOT_TAG = 'GeometryFile'
#: Element holding one mesh parameterization; the first is used.
DEFINITION_TAG = 'GeometryDefinition'
#: Element whose text is the row-major x displacement list.
X_PARAMETERS_TAG = 'X-FlatParameters'
#: Element whose text is the row-major y displacement list.
Y_PARAMETERS_TAG = 'Y-FlatParameters'


@dataclass
class GeometryDefinition:
    """Flattened x/y displacement lists of a geometry definition.

    Parameters
    ----------
    x_points : numpy.ndarray
        Row-major x components, shape ``(N,)``.
    y_points : numpy.ndarray
        Row-major y components, shape ``(N,)``.
    """

    x_points: np.ndarray = field(
        default_factory=lambda: np.zeros(0, dtype=np.float64))
    y_points: np.ndarray = field(
        default_factory=lambda: np.zeros(0, dtype=np.float64))

    def __post_init__(self) -> None:
        self.x_points = np.asarray(self.x_points, dtype=np.float64).ravel()
        self.y_points = np.asarray(self.y_points, dtype=np.float64).ravel()

    @property
    def num_points(self) -> int:
        """Number of x values."""
        return self.x_points.size

    @property
    def dimension(self) -> int:
        """Side length of the square grid, rounded from ``sqrt(N)``."""
        return int(round(np.sqrt(self.num_points)))

    def to_grid(self) -> Grid:
        """Reshape into a square grid.

        Raises
        ------
        FlattenLengthMismatch
            If the lists differ in length or do not form a square.
        """
        return Grid.from_flat_points(self.x_points, self.y_points)

    @classmethod
    def from_grid(cls, grid: Grid) -> 'GeometryDefinition':
        """Flatten ``grid`` row-major."""
        xs, ys = grid.to_flat_points()
        return cls(x_points=xs, y_points=ys)
