# -*- coding: utf-8 -*-
"""
Pipeline - Full subdivision run from geometry file to outputs.

Resamples one grid with both kernels, computes their amplified
difference, and (for file runs) writes the four grid images plus the
Catmull-Rom geometry document. Each stage hands its grids to the next
as return values; nothing is kept between runs.

Output files for ``subdivide_file(input, output)``:

- ``<input>.png``: original grid
- ``<output>.linear.png``: bilinear grid
- ``<output>.png``: Catmull-Rom grid
- ``<output>.difference.png``: amplified Catmull-Rom minus bilinear
- ``<output>``: geometry document holding the Catmull-Rom grid

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
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Union

# subdivide internal
from subdivide.compare import difference
from subdivide.config import SubdivideConfig
from subdivide.grid import Grid
from subdivide.interpolation import BilinearSampler, CatmullRomSampler
from subdivide.IO.geometry import read_geometry, write_geometry
from subdivide.IO.png import write_grid_image
from subdivide.resample import resample

logger = logging.getLogger(__name__)


@dataclass
class SubdivisionResult:
    """Grids produced by one subdivision run.

    Parameters
    ----------
    original : Grid
        Input grid.
    linear : Grid
        Bilinear upsampling of ``original``.
    catmull_rom : Grid
        Catmull-Rom upsampling of ``original``.
    difference : Grid
        ``(catmull_rom - linear) * difference_scale``.
    """

    original: Grid
    linear: Grid
    catmull_rom: Grid
    difference: Grid


def run_subdivision(
    grid: Grid,
    config: Optional[SubdivideConfig] = None,
) -> SubdivisionResult:
    """Resample ``grid`` with both kernels and compare them.

    Parameters
    ----------
    grid : Grid
        Original grid.
    config : SubdivideConfig, optional
        Run parameters. Defaults to ``SubdivideConfig()``.

    Returns
    -------
    SubdivisionResult
    """
    if config is None:
        config = SubdivideConfig()
    factor = config.upsample_factor

    logger.debug("Resampling %dx%d grid by %g (bilinear)",
                 grid.width, grid.height, factor)
    linear = resample(grid, factor, BilinearSampler())

    logger.debug("Resampling %dx%d grid by %g (Catmull-Rom, tension %g)",
                 grid.width, grid.height, factor, config.tension)
    catmull_rom = resample(
        grid, factor, CatmullRomSampler(tension=config.tension),
    )

    diff = difference(catmull_rom, linear, config.difference_scale)

    logger.info("Upsampled %dx%d grid to %dx%d (factor %g)",
                grid.width, grid.height,
                catmull_rom.width, catmull_rom.height, factor)
    return SubdivisionResult(
        original=grid,
        linear=linear,
        catmull_rom=catmull_rom,
        difference=diff,
    )


def output_paths(
    input_path: Union[str, Path],
    output_path: Union[str, Path],
) -> Dict[str, Path]:
    """File names written by :func:`subdivide_file`.

    Returns
    -------
    Dict[str, Path]
        Keys ``'original'``, ``'linear'``, ``'catmull_rom'``,
        ``'difference'`` (images) and ``'geometry'``.
    """
    input_path = str(input_path)
    output_path = str(output_path)
    return {
        'original': Path(input_path + '.png'),
        'linear': Path(output_path + '.linear.png'),
        'catmull_rom': Path(output_path + '.png'),
        'difference': Path(output_path + '.difference.png'),
        'geometry': Path(output_path),
    }


def subdivide_file(
    input_path: Union[str, Path],
    output_path: Union[str, Path],
    config: Optional[SubdivideConfig] = None,
    write_images: bool = True,
) -> SubdivisionResult:
    """Subdivide the mesh in a geometry document and write the results.

    Parameters
    ----------
    input_path : str or Path
        Geometry document to read.
    output_path : str or Path
        Geometry document to write; image names derive from it.
    config : SubdivideConfig, optional
        Run parameters. Defaults to ``SubdivideConfig()``.
    write_images : bool
        Write the four PNG images. Default True.

    Returns
    -------
    SubdivisionResult

    Raises
    ------
    FileNotFoundError
        If ``input_path`` does not exist.
    GeometryFormatError
        If the input document is malformed.
    FlattenLengthMismatch
        If the flat parameter lists do not form a square grid.
    """
    if config is None:
        config = SubdivideConfig()
    paths = output_paths(input_path, output_path)

    logger.info("Reading geometry from %s", input_path)
    document = read_geometry(input_path)
    grid = document.to_grid()

    result = run_subdivision(grid, config)

    if write_images:
        images = (
            ('original', result.original),
            ('linear', result.linear),
            ('catmull_rom', result.catmull_rom),
            ('difference', result.difference),
        )
        for name, image_grid in images:
            write_grid_image(image_grid, paths[name], config.scale_divisor)
            logger.info("Wrote %s image %s", name, paths[name])

    write_geometry(paths['geometry'], document, result.catmull_rom)
    logger.info("Wrote geometry to %s", paths['geometry'])
    return result
