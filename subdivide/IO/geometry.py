# -*- coding: utf-8 -*-
"""
Geometry XML - Read and write mesh geometry documents.

A geometry document is an XML file rooted at ``GeometryFile``. The
first ``GeometryDefinition`` child carries the mesh parameterization as
two whitespace-separated number lists, ``X-FlatParameters`` and
``Y-FlatParameters``, each holding one value per grid cell in row-major
order. Those two element texts are the only content subdivide reads or
rewrites; every other element and attribute of the document is
preserved on write.

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
import copy
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Tuple, Union
import xml.etree.ElementTree as ET

# Third-party
import numpy as np

# subdivide internal
from subdivide.exceptions import GeometryFormatError
from subdivide.grid import Grid
from subdivide.IO.models import (
    DEFINITION_TAG,
    ROOT_TAG,
    X_PARAMETERS_TAG,
    Y_PARAMETERS_TAG,
    GeometryDefinition,
)

logger = logging.getLogger(__name__)


# ===================================================================
# XML helpers
# ===================================================================

def _require(elem: ET.Element, path: str) -> ET.Element:
    """Return the first child at ``path``, raising if it is absent."""
    child = elem.find(path)
    if child is None:
        raise GeometryFormatError(
            f"Geometry document is missing <{path}> under <{elem.tag}>"
        )
    return child


def _flat_parameter_elements(
    root: ET.Element,
) -> Tuple[ET.Element, ET.Element]:
    """Locate the x and y flat parameter elements of the first definition."""
    if root.tag != ROOT_TAG:
        raise GeometryFormatError(
            f"Expected <{ROOT_TAG}> root element, got <{root.tag}>"
        )
    definition = _require(root, DEFINITION_TAG)
    return (
        _require(definition, X_PARAMETERS_TAG),
        _require(definition, Y_PARAMETERS_TAG),
    )


def _parse_numbers(elem: ET.Element) -> np.ndarray:
    """Parse the whitespace-separated numbers in ``elem``'s text."""
    tokens = (elem.text or '').split()
    try:
        return np.array([float(t) for t in tokens], dtype=np.float64)
    except ValueError as exc:
        raise GeometryFormatError(
            f"Non-numeric value in <{elem.tag}>: {exc}"
        ) from exc


def _apply_definition(
    tree: ET.ElementTree,
    definition: GeometryDefinition,
) -> None:
    """Write ``definition`` into the flat parameter elements of ``tree``."""
    x_elem, y_elem = _flat_parameter_elements(tree.getroot())
    x_elem.text = format_numbers(definition.x_points)
    y_elem.text = format_numbers(definition.y_points)


def format_number(value: float) -> str:
    """Shortest round-trip text for ``value``; integers drop ``.0``."""
    value = float(value)
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def format_numbers(values: Iterable[float]) -> str:
    """Space-join :func:`format_number` of each value."""
    return ' '.join(format_number(v) for v in values)


# ===================================================================
# Document
# ===================================================================

@dataclass
class GeometryDocument:
    """A parsed geometry document.

    Parameters
    ----------
    tree : xml.etree.ElementTree.ElementTree
        Full parsed document.
    definition : GeometryDefinition
        Flat parameter lists read from ``tree``.
    source : Path, optional
        File the document was read from.
    """

    tree: ET.ElementTree
    definition: GeometryDefinition
    source: Optional[Path] = None

    def to_grid(self) -> Grid:
        """Square grid built from the flat parameter lists."""
        return self.definition.to_grid()

    def with_grid(self, grid: Grid) -> 'GeometryDocument':
        """Copy of this document whose flat parameters hold ``grid``."""
        definition = GeometryDefinition.from_grid(grid)
        tree = copy.deepcopy(self.tree)
        _apply_definition(tree, definition)
        return GeometryDocument(tree=tree, definition=definition)


# ===================================================================
# Reader / writer
# ===================================================================

class GeometryReader:
    """Read the flat parameter lists of a geometry XML document.

    Parameters
    ----------
    filepath : str or Path
        Path to the geometry document.

    Raises
    ------
    FileNotFoundError
        If ``filepath`` does not exist.
    GeometryFormatError
        If the file is not well-formed XML, lacks the expected elements,
        or holds non-numeric parameter values.

    Examples
    --------
    >>> reader = GeometryReader('mesh.xml')
    >>> grid = reader.read_grid()
    """

    def __init__(self, filepath: Union[str, Path]) -> None:
        self.filepath = Path(filepath)
        if not self.filepath.exists():
            raise FileNotFoundError(f"File not found: {self.filepath}")

        try:
            self.tree = ET.parse(str(self.filepath))
        except ET.ParseError as exc:
            raise GeometryFormatError(
                f"Malformed geometry XML {self.filepath}: {exc}"
            ) from exc

        x_elem, y_elem = _flat_parameter_elements(self.tree.getroot())
        self.definition = GeometryDefinition(
            x_points=_parse_numbers(x_elem),
            y_points=_parse_numbers(y_elem),
        )
        logger.debug("Read %d x / %d y parameters from %s",
                     self.definition.x_points.size,
                     self.definition.y_points.size,
                     self.filepath)

    def read(self) -> GeometryDocument:
        """Return the parsed document."""
        return GeometryDocument(
            tree=self.tree,
            definition=self.definition,
            source=self.filepath,
        )

    def read_grid(self) -> Grid:
        """Return the parameter lists reshaped into a square grid.

        Raises
        ------
        FlattenLengthMismatch
            If the lists differ in length or do not form a square.
        """
        return self.definition.to_grid()


class GeometryWriter:
    """Write a geometry document with updated flat parameter lists.

    Parameters
    ----------
    filepath : str or Path
        Output path.
    """

    def __init__(self, filepath: Union[str, Path]) -> None:
        self.filepath = Path(filepath)

    def write(self, document: GeometryDocument) -> Path:
        """Serialize ``document`` as UTF-8 XML with a declaration.

        The flat parameter element texts are regenerated from
        ``document.definition``; all other content is written as parsed.

        Returns
        -------
        Path
            The written file path.
        """
        tree = copy.deepcopy(document.tree)
        _apply_definition(tree, document.definition)
        tree.write(str(self.filepath), encoding='UTF-8', xml_declaration=True)
        logger.debug("Wrote %d parameters to %s",
                     document.definition.num_points, self.filepath)
        return self.filepath


def read_geometry(filepath: Union[str, Path]) -> GeometryDocument:
    """Read a geometry document. See :class:`GeometryReader`."""
    return GeometryReader(filepath).read()


def write_geometry(
    filepath: Union[str, Path],
    document: GeometryDocument,
    grid: Optional[Grid] = None,
) -> Path:
    """Write ``document``, optionally replacing its parameters with ``grid``.

    Parameters
    ----------
    filepath : str or Path
        Output path.
    document : GeometryDocument
        Document to write, usually the one the input was read from.
    grid : Grid, optional
        Grid whose row-major flattening replaces the flat parameters.

    Returns
    -------
    Path
        The written file path.
    """
    if grid is not None:
        document = document.with_grid(grid)
    return GeometryWriter(filepath).write(document)
