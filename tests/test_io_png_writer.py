# -*- coding: utf-8 -*-
"""
PNG Writer Tests - Unit tests for PngWriter and grid rendering.

Tests uint8 grayscale/RGB/RGBA writes, unit-range float scaling, float
auto-normalization, RGBA grid images, and shape validation.

Dependencies
------------
pytest
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

import warnings

import numpy as np
import pytest

try:
    from PIL import Image
    _HAS_PIL = True
except ImportError:
    _HAS_PIL = False

from subdivide import Grid, ValidationError
from subdivide.IO.png import PngWriter, write_grid_image

pytestmark = pytest.mark.skipif(
    not _HAS_PIL, reason="Pillow not installed"
)


def _read(filepath):
    with Image.open(str(filepath)) as img:
        return img.mode, np.array(img)


class TestPngWriterArrays:
    """PngWriter array writes."""

    def test_uint8_grayscale_roundtrip(self, tmp_path):
        data = np.random.randint(0, 256, (16, 24), dtype=np.uint8)
        filepath = tmp_path / "gray.png"
        with PngWriter(filepath) as writer:
            writer.write(data)

        mode, result = _read(filepath)
        assert mode == 'L'
        np.testing.assert_array_equal(result, data)

    def test_uint8_rgb_roundtrip(self, tmp_path):
        data = np.random.randint(0, 256, (8, 8, 3), dtype=np.uint8)
        filepath = tmp_path / "rgb.png"
        with PngWriter(filepath) as writer:
            writer.write(data)

        mode, result = _read(filepath)
        assert mode == 'RGB'
        np.testing.assert_array_equal(result, data)

    def test_unit_float_rgba_scaled_without_warning(self, tmp_path):
        data = np.zeros((2, 2, 4))
        data[..., 0] = 1.0
        data[..., 3] = 1.0
        filepath = tmp_path / "rgba.png"

        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter("always")
            with PngWriter(filepath) as writer:
                writer.write(data)
            assert len(w) == 0

        mode, result = _read(filepath)
        assert mode == 'RGBA'
        np.testing.assert_array_equal(result[..., 0], 255)
        np.testing.assert_array_equal(result[..., 1], 0)
        np.testing.assert_array_equal(result[..., 3], 255)

    def test_float_out_of_range_auto_normalizes(self, tmp_path):
        data = np.array([[0.0, 2.0], [4.0, 8.0]])
        filepath = tmp_path / "float.png"

        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter("always")
            with PngWriter(filepath) as writer:
                writer.write(data)
            assert len(w) == 1
            assert "auto-normalized" in str(w[0].message)

        _, result = _read(filepath)
        assert result.dtype == np.uint8
        assert result.min() == 0
        assert result.max() == 255

    def test_constant_float_writes_zeros(self, tmp_path):
        filepath = tmp_path / "const.png"
        with pytest.warns(UserWarning):
            with PngWriter(filepath) as writer:
                writer.write(np.full((3, 3), 7.0))
        _, result = _read(filepath)
        np.testing.assert_array_equal(result, 0)

    @pytest.mark.parametrize("shape", [(4,), (4, 4, 2), (4, 4, 5),
                                       (2, 2, 2, 2)])
    def test_bad_shape(self, tmp_path, shape):
        with pytest.raises(ValidationError):
            with PngWriter(tmp_path / "bad.png") as writer:
                writer.write(np.zeros(shape, dtype=np.uint8))

    def test_filepath_and_metadata(self, tmp_path):
        writer = PngWriter(str(tmp_path / "m.png"), metadata={'k': 1})
        assert writer.filepath == tmp_path / "m.png"
        assert writer.metadata == {'k': 1}


class TestWriteGridImage:
    """write_grid_image() RGBA rendering."""

    def test_pixel_per_cell(self, tmp_path):
        grid = Grid(np.zeros((3, 5, 2)))
        path = write_grid_image(grid, tmp_path / "grid.png")
        assert path == tmp_path / "grid.png"

        mode, result = _read(path)
        assert mode == 'RGBA'
        assert result.shape == (3, 5, 4)

    def test_channel_values(self, tmp_path):
        grid = Grid([[(0, 0), (250, -250)], [(-600, 600), (0, 0)]])
        _, result = _read(write_grid_image(grid, tmp_path / "grid.png"))

        np.testing.assert_array_equal(result[0, 0], [128, 128, 0, 255])
        np.testing.assert_array_equal(result[0, 1], [255, 0, 0, 255])
        np.testing.assert_array_equal(result[1, 0], [0, 255, 0, 255])

    def test_scale_divisor(self, tmp_path):
        grid = Grid([[(50, -50)]])
        _, result = _read(write_grid_image(grid, tmp_path / "g.png", 100))
        np.testing.assert_array_equal(result[0, 0], [255, 0, 0, 255])

    def test_row_maps_to_image_row(self, tmp_path):
        grid = Grid([[(-500, 0), (-500, 0)], [(500, 0), (500, 0)]])
        _, result = _read(write_grid_image(grid, tmp_path / "rows.png"))
        np.testing.assert_array_equal(result[0, :, 0], 0)
        np.testing.assert_array_equal(result[1, :, 0], 255)
