# -*- coding: utf-8 -*-
"""
Subdivide CLI - Upsample the mesh in a geometry document.

Reads a geometry XML document, resamples its displacement grid with
bilinear and Catmull-Rom interpolation, writes PNG renderings of the
original, both upsampled grids and their difference, and writes the
Catmull-Rom grid back into a copy of the document.

Usage
-----
    subdivide -i mesh.xml -o mesh_fine.xml -u 4
    python -m subdivide -i mesh.xml -o mesh_fine.xml

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
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

# subdivide internal
from subdivide import __version__
from subdivide.config import DEFAULT_UPSAMPLE_FACTOR, SubdivideConfig
from subdivide.exceptions import SubdivideError
from subdivide.pipeline import subdivide_file

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Parameters
    ----------
    argv : List[str], optional
        Arguments to parse. Defaults to ``sys.argv[1:]``.

    Returns
    -------
    argparse.Namespace
        Parsed arguments.
    """
    parser = argparse.ArgumentParser(
        prog='subdivide',
        description=(
            "Upsample the displacement grid of a geometry document with "
            "bilinear and Catmull-Rom interpolation."
        ),
    )
    parser.add_argument(
        "-i", "--input",
        type=Path,
        default=None,
        help="Input geometry document (XML).",
    )
    parser.add_argument(
        "-o", "--output",
        type=Path,
        default=None,
        help="Output geometry document; image names derive from it.",
    )
    parser.add_argument(
        "-u", "--upsample",
        type=float,
        default=None,
        help=f"Upsample factor (default: {DEFAULT_UPSAMPLE_FACTOR:g}).",
    )
    parser.add_argument(
        "--scale-divisor",
        type=float,
        default=SubdivideConfig.scale_divisor,
        help="Displacement mapped to half the image range (default: 500).",
    )
    parser.add_argument(
        "--difference-scale",
        type=float,
        default=SubdivideConfig.difference_scale,
        help="Amplification of the difference image (default: 500).",
    )
    parser.add_argument(
        "--tension",
        type=float,
        default=SubdivideConfig.tension,
        help="Catmull-Rom spline tension (default: 0.5).",
    )
    parser.add_argument(
        "--no-images",
        action="store_true",
        help="Only write the output geometry document.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log debug messages.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Run a subdivision from the command line.

    Returns
    -------
    int
        Process exit code: 0 on success, 1 on missing arguments or a
        failed run.
    """
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    if args.input is None:
        logger.error("No input file specified. Type --help for more info.")
        return 1
    if args.output is None:
        logger.error("No output file specified. Type --help for more info.")
        return 1

    upsample = args.upsample
    if upsample is None:
        logger.warning(
            "No upsampling factor specified. Defaulting to %g. "
            "Type --help for more info.", DEFAULT_UPSAMPLE_FACTOR,
        )
        upsample = DEFAULT_UPSAMPLE_FACTOR

    try:
        config = SubdivideConfig(
            upsample_factor=upsample,
            scale_divisor=args.scale_divisor,
            difference_scale=args.difference_scale,
            tension=args.tension,
        )
        subdivide_file(
            args.input,
            args.output,
            config=config,
            write_images=not args.no_images,
        )
    except (SubdivideError, FileNotFoundError) as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
