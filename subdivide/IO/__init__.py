# -*- coding: utf-8 -*-
"""
IO Module - File boundary for geometry documents and grid images.

Reads and writes the mesh geometry XML format, and renders displacement
grids to PNG images. The resampling core never touches files; these
readers and writers convert between files and ``Grid`` objects.

Dependencies
------------
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

from subdivide.IO.base import ImageWriter
from subdivide.IO.models import GeometryDefinition
from subdivide.IO.geometry import (
    GeometryDocument,
    GeometryReader,
    GeometryWriter,
    read_geometry,
    write_geometry,
)
from subdivide.IO.png import PngWriter, write_grid_image

__all__ = [
    'ImageWriter',
    'GeometryDefinition',
    'GeometryDocument',
    'GeometryReader',
    'GeometryWriter',
    'read_geometry',
    'write_geometry',
    'PngWriter',
    'write_grid_image',
]
