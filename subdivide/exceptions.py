# -*- coding: utf-8 -*-
"""
Subdivide Exception Hierarchy - Domain-specific exceptions for grid resampling.

Provides a small exception hierarchy that lets callers (the CLI, the
subdivision pipeline, or a downstream application) catch subdivide
errors distinctly from Python built-in exceptions. All exceptions
subclass both ``SubdivideError`` and the appropriate built-in exception
for backward compatibility.

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


class SubdivideError(Exception):
    """Base exception for all subdivide errors."""


class ValidationError(SubdivideError, ValueError):
    """Invalid input data, parameters, or configuration.

    Raised for non-finite coordinates, out-of-range parameters, unknown
    kernel names, and other input validation failures.
    """


class ShapeError(ValidationError):
    """A grid is empty, has unequal row lengths, or non-2D cells.

    Raised at construction time; a grid is never silently truncated.
    """


class ShapeMismatch(ValidationError):
    """Two grids that must share a shape do not."""


class InvalidFactor(ValidationError):
    """Upsample factor is not a positive finite number."""


class FlattenLengthMismatch(ValidationError):
    """Flat coordinate lists cannot be reshaped into a square grid.

    Raised when the x and y lists differ in length, when their length is
    not a perfect square, or when it does not match the requested
    dimension.
    """


class GeometryFormatError(SubdivideError, ValueError):
    """Geometry XML document is malformed or missing required elements."""


class DependencyError(SubdivideError, ImportError):
    """Missing optional dependency required for a specific module.

    Raised when a module requires an optional package (Pillow) that is
    not installed.
    """
