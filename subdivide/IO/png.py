# -*- coding: utf-8 -*-
"""
PNG Writer - Write grayscale, RGB and RGBA arrays and grids to PNG format.

Writes 2D grayscale or 3D RGB/RGBA arrays to PNG files using Pillow.
Float inputs in ``[0, 1]`` are scaled to 0-255; other float inputs are
auto-normalized to 0-255 with a warning. ``write_grid_image`` renders a
displacement ``Grid`` as RGBA, with the x displacement in red and the y
displacement in green.

Dependencies
------------
Pillow

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
import warnings
from pathlib import Path
from typing import Any, Dict, Optional, Union

# Third-party
import numpy as np

try:
    from PIL import Image
    _HAS_PIL = True
except ImportError:
    _HAS_PIL = False

# subdivide internal
from subdivide.exceptions import DependencyError, ValidationError
from subdivide.grid import DEFAULT_SCALE_DIVISOR, Grid
from subdivide.IO.base import ImageWriter

logger = logging.getLogger(__name__)

_CHANNELS = {3: 'RGB', 4: 'RGBA'}


def _to_uint8(data: np.ndarray) -> np.ndarray:
    """Convert ``data`` to uint8, scaling unit-range floats to 0-255."""
    if np.issubdtype(data.dtype, np.floating):
        finite = np.all(np.isfinite(data))
        if finite and data.min() >= 0.0 and data.max() <= 1.0:
            return np.round(data * 255.0).astype(np.uint8)
        warnings.warn(
            f"Float array (dtype={data.dtype}) auto-normalized to "
            f"uint8 [0, 255] for PNG output.",
            UserWarning,
            stacklevel=3,
        )
        data = np.nan_to_num(data)
        dmin = data.min()
        dmax = data.max()
        if dmax - dmin > 0:
            data = (data - dmin) / (dmax - dmin) * 255.0
        else:
            data = np.zeros_like(data)
        return np.round(data).astype(np.uint8)

    if data.dtype != np.uint8:
        data = data.astype(np.uint8)
    return data


class PngWriter(ImageWriter):
    """Write grayscale, RGB or RGBA arrays to PNG files.

    Accepts 2D ``(rows, cols)`` grayscale or 3D ``(rows, cols, 3)`` RGB /
    ``(rows, cols, 4)`` RGBA arrays. Float arrays with every value in
    ``[0, 1]`` are treated as unit-range channels; other float arrays
    are min-max normalized to ``[0, 255]`` with a warning.

    Parameters
    ----------
    filepath : str or Path
        Output PNG file path.
    metadata : Dict[str, Any], optional
        Writer bookkeeping (not embedded in the PNG).

    Raises
    ------
    DependencyError
        If Pillow is not installed.

    Examples
    --------
    >>> from subdivide.IO.png import PngWriter
    >>> import numpy as np
    >>> data = np.random.rand(64, 64, 4)
    >>> with PngWriter('output.png') as writer:
    ...     writer.write(data)
    """

    def __init__(
        self,
        filepath: Union[str, Path],
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        if not _HAS_PIL:
            raise DependencyError(
                "Pillow is required for PNG writing. "
                "Install with: pip install Pillow"
            )
        super().__init__(filepath, metadata)

    def write(self, data: np.ndarray) -> None:
        """Write image data to a PNG file.

        Parameters
        ----------
        data : np.ndarray
            Image data with shape ``(rows, cols)``, ``(rows, cols, 3)``
            or ``(rows, cols, 4)``. uint8, or float.

        Raises
        ------
        ValidationError
            If the array shape is not grayscale, RGB or RGBA.
        """
        data = np.asarray(data)
        if not (data.ndim == 2
                or (data.ndim == 3 and data.shape[2] in _CHANNELS)):
            raise ValidationError(
                f"Expected 2D grayscale (rows, cols), RGB (rows, cols, 3) "
                f"or RGBA (rows, cols, 4), got shape {data.shape}"
            )

        img = Image.fromarray(np.ascontiguousarray(_to_uint8(data)))
        img.save(str(self.filepath), format='PNG')
        logger.debug("Wrote %s image %s", img.mode, self.filepath)


def write_grid_image(
    grid: Grid,
    filepath: Union[str, Path],
    scale_divisor: float = DEFAULT_SCALE_DIVISOR,
) -> Path:
    """Render a displacement grid to an RGBA PNG.

    Each cell becomes one pixel whose channels are
    ``grid.to_normalized_channels(scale_divisor)``: red and green carry
    the x and y displacement centered on 0.5, blue is 0, alpha is 1.

    Parameters
    ----------
    grid : Grid
        Grid to render, ``width x height`` pixels.
    filepath : str or Path
        Output PNG file path.
    scale_divisor : float
        Displacement magnitude mapped to half the channel range.
        Default 500.

    Returns
    -------
    Path
        The written file path.
    """
    channels = grid.to_normalized_channels(scale_divisor)
    rgba = channels.reshape(grid.height, grid.width, 4)
    with PngWriter(filepath) as writer:
        writer.write(rgba)
    return writer.filepath
