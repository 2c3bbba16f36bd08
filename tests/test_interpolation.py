# -*- coding: utf-8 -*-
"""
Tests for the bilinear and Catmull-Rom grid samplers.

Dependencies
------------
pytest
scipy (reference bilinear comparison only)

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

import numpy as np
import pytest

from subdivide import Grid, Kernel, Point2, ValidationError
from subdivide.interpolation import (
    BilinearSampler,
    CatmullRomSampler,
    KernelSampler,
    Sampler,
    catmull_rom,
    catmull_rom_sample,
    gather_neighborhood,
    get_sampler,
    lerp,
    linear_sample,
)

try:
    from scipy.ndimage import map_coordinates
    _HAS_SCIPY = True
except ImportError:
    _HAS_SCIPY = False

SAMPLERS = [linear_sample, catmull_rom_sample]


# ── Fixtures ────────────────────────────────────────────────────────────


@pytest.fixture
def random_grid():
    """5x6 grid of random displacements."""
    rng = np.random.default_rng(1234)
    return Grid(rng.uniform(-200.0, 200.0, size=(5, 6, 2)))


@pytest.fixture
def ramp_grid():
    """4x4 grid whose x component is 3*col + 1 and y is -2*row."""
    rows, cols = np.mgrid[0:4, 0:4].astype(float)
    return Grid(np.stack([3 * cols + 1, -2 * rows], axis=-1))


# ── 1D kernels ──────────────────────────────────────────────────────────


class TestKernels1D:
    """lerp() and catmull_rom() scalar behavior."""

    def test_lerp_endpoints(self):
        assert lerp(0.0, 2.0, 8.0) == 2.0
        assert lerp(1.0, 2.0, 8.0) == 8.0
        assert lerp(0.25, 2.0, 8.0) == pytest.approx(3.5)

    def test_catmull_rom_endpoints(self):
        assert catmull_rom(0.0, 1.0, 2.0, 7.0, 3.0) == 2.0
        assert catmull_rom(1.0, 1.0, 2.0, 7.0, 3.0) == pytest.approx(7.0)

    def test_catmull_rom_linear_data(self):
        """Collinear control points reproduce the line."""
        for t in (0.1, 0.5, 0.9):
            assert catmull_rom(t, 0.0, 1.0, 2.0, 3.0) == pytest.approx(1.0 + t)

    def test_catmull_rom_midpoint(self):
        # 0.5 * (p2 + p3) + 0.125 * (p2 + p3 - p1 - p4)
        assert catmull_rom(0.5, 0.0, 0.0, 1.0, 1.0) == pytest.approx(0.5)
        assert catmull_rom(0.5, 0.0, 1.0, 1.0, 0.0) == pytest.approx(1.125)

    def test_catmull_rom_tangent_coefficient(self):
        """c = s * (p3 - p1): slope at t=0 follows the tension."""
        h = 1e-6
        for s in (0.5, 1.0):
            slope = (catmull_rom(h, 0.0, 1.0, 4.0, 0.0, s=s)
                     - catmull_rom(0.0, 0.0, 1.0, 4.0, 0.0, s=s)) / h
            assert slope == pytest.approx(s * 4.0, rel=1e-4)


# ── Neighborhood gathering ──────────────────────────────────────────────


class TestNeighborhood:
    """gather_neighborhood() patch layout and edge clamping."""

    def test_linear_patch_interior(self, random_grid):
        patch = gather_neighborhood(
            random_grid.values, np.array([2]), np.array([1]), radius=1,
        )
        assert patch.shape == (1, 2, 2, 2)
        np.testing.assert_array_equal(patch[0], random_grid.values[1:3, 2:4])

    def test_cubic_patch_interior(self, random_grid):
        patch = gather_neighborhood(
            random_grid.values, np.array([2]), np.array([2]), radius=2,
        )
        assert patch.shape == (1, 4, 4, 2)
        np.testing.assert_array_equal(patch[0], random_grid.values[1:5, 1:5])

    def test_cubic_patch_clamps_each_offset(self, random_grid):
        values = random_grid.values
        patch = gather_neighborhood(values, np.array([0]), np.array([4]), 2)
        # Columns -1, 0, 1, 2 -> 0, 0, 1, 2; rows 3, 4, 5, 6 -> 3, 4, 4, 4
        expected_cols = [0, 0, 1, 2]
        expected_rows = [3, 4, 4, 4]
        for a, r in enumerate(expected_rows):
            for b, c in enumerate(expected_cols):
                np.testing.assert_array_equal(patch[0, a, b], values[r, c])

    def test_batch(self, random_grid):
        patch = gather_neighborhood(
            random_grid.values, np.array([0, 5]), np.array([0, 4]), 1,
        )
        assert patch.shape == (2, 2, 2, 2)
        np.testing.assert_array_equal(patch[1, 1, 1], random_grid.values[4, 5])


# ── Identity at integer coordinates ─────────────────────────────────────


class TestIntegerIdentity:
    """Both kernels return stored values exactly at integer coordinates."""

    @pytest.mark.parametrize("sample", SAMPLERS)
    def test_every_cell(self, random_grid, sample):
        for row in range(random_grid.height):
            for col in range(random_grid.width):
                assert sample(random_grid, col, row) == random_grid[row][col]

    @pytest.mark.parametrize("sample", SAMPLERS)
    def test_vectorized(self, random_grid, sample):
        y, x = np.mgrid[0:5, 0:6].astype(float)
        result = sample(random_grid, x, y)
        np.testing.assert_array_equal(result, random_grid.values)

    def test_any_tension(self, random_grid):
        sampler = CatmullRomSampler(tension=0.9)
        assert sampler(random_grid, 3, 2) == random_grid.cell(3, 2)


# ── Bilinear ────────────────────────────────────────────────────────────


class TestBilinear:
    """Bilinear-specific behavior."""

    def test_center_of_square(self):
        grid = Grid([[(0, 0), (10, 0)], [(0, 10), (10, 10)]])
        assert linear_sample(grid, 0.5, 0.5) == Point2(5.0, 5.0)

    def test_x_then_y(self):
        grid = Grid([[(0, 0), (4, 8)], [(2, 0), (10, 4)]])
        # top: lerp(.25, 0, 4)=1, bottom: lerp(.25, 2, 10)=4 -> lerp(.5)=2.5
        result = linear_sample(grid, 0.25, 0.5)
        assert result.x == pytest.approx(2.5)
        assert result.y == pytest.approx(0.5 * 2.0 + 0.5 * 1.0)

    def test_convexity(self, random_grid):
        rng = np.random.default_rng(99)
        x = rng.uniform(0, 5, 500)
        y = rng.uniform(0, 4, 500)
        result = linear_sample(random_grid, x, y)
        patch = gather_neighborhood(
            random_grid.values,
            np.floor(x).astype(int), np.floor(y).astype(int), 1,
        )
        lo = patch.min(axis=(1, 2))
        hi = patch.max(axis=(1, 2))
        assert np.all(result >= lo - 1e-9)
        assert np.all(result <= hi + 1e-9)

    def test_reproduces_linear_field(self, ramp_grid):
        result = linear_sample(ramp_grid, 1.3, 2.7)
        assert result.x == pytest.approx(3 * 1.3 + 1)
        assert result.y == pytest.approx(-2 * 2.7)

    @pytest.mark.skipif(not _HAS_SCIPY, reason="scipy not installed")
    def test_matches_scipy_map_coordinates(self, random_grid):
        rng = np.random.default_rng(5)
        x = rng.uniform(0, 5, 200)
        y = rng.uniform(0, 4, 200)
        result = linear_sample(random_grid, x, y)
        for comp in range(2):
            expected = map_coordinates(
                random_grid.values[..., comp], [y, x], order=1, mode='nearest',
            )
            np.testing.assert_allclose(result[:, comp], expected, atol=1e-9)


# ── Catmull-Rom ─────────────────────────────────────────────────────────


class TestCatmullRom:
    """Catmull-Rom-specific behavior."""

    def test_reproduces_linear_field_interior(self, ramp_grid):
        result = catmull_rom_sample(ramp_grid, 1.4, 1.6)
        assert result.x == pytest.approx(3 * 1.4 + 1)
        assert result.y == pytest.approx(-2 * 1.6)

    def test_separable_matches_manual(self, random_grid):
        x, y = 2.3, 1.8
        v = random_grid.values
        rows = [
            catmull_rom(0.3, v[r, 1], v[r, 2], v[r, 3], v[r, 4])
            for r in range(0, 4)
        ]
        expected = catmull_rom(0.8, *rows)
        result = catmull_rom_sample(random_grid, x, y)
        np.testing.assert_allclose(result, expected, atol=1e-9)

    def test_overshoot_allowed(self):
        """A step edge rings past the local sample range."""
        row = [(0, 0), (0, 0), (100, 0), (100, 0)]
        grid = Grid([row, row, row, row])
        result = catmull_rom_sample(grid, 0.5, 1.0)
        assert result.x < 0.0

    def test_default_tension(self):
        assert CatmullRomSampler().tension == 0.5

    def test_non_finite_tension(self):
        with pytest.raises(ValueError):
            CatmullRomSampler(tension=float('nan'))


# ── Edge clamping ───────────────────────────────────────────────────────


class TestEdgeClamp:
    """Coordinates outside the grid repeat the nearest edge."""

    @pytest.mark.parametrize("sample", SAMPLERS)
    @pytest.mark.parametrize("x, y, edge_x, edge_y", [
        (-0.5, 2.0, 0.0, 2.0),
        (-7.25, 1.5, 0.0, 1.5),
        (5.75, 3.2, 5.0, 3.2),
        (2.5, -3.0, 2.5, 0.0),
        (1.1, 9.0, 1.1, 4.0),
        (-1.0, -1.0, 0.0, 0.0),
        (12.0, 12.0, 5.0, 4.0),
    ])
    def test_outside_equals_boundary(
        self, random_grid, sample, x, y, edge_x, edge_y,
    ):
        assert sample(random_grid, x, y) == sample(random_grid, edge_x, edge_y)

    @pytest.mark.parametrize("sample", SAMPLERS)
    def test_last_index_exact(self, random_grid, sample):
        assert sample(random_grid, 5.0, 4.0) == random_grid.cell(5, 4)

    @pytest.mark.parametrize("sample", SAMPLERS)
    def test_single_cell_grid(self, sample):
        grid = Grid([[(3.0, -4.0)]])
        assert sample(grid, 0.7, -2.0) == Point2(3.0, -4.0)


# ── Argument handling ───────────────────────────────────────────────────


class TestArguments:
    """Coordinate and grid argument validation."""

    def test_accepts_nested_lists(self):
        result = linear_sample([[(0, 0), (2, 2)]], 0.5, 0.0)
        assert result == Point2(1.0, 1.0)

    def test_shape_mismatch(self, random_grid):
        with pytest.raises(ValidationError):
            linear_sample(random_grid, np.zeros(3), np.zeros(4))

    def test_non_finite(self, random_grid):
        with pytest.raises(ValidationError):
            catmull_rom_sample(random_grid, np.nan, 1.0)
        with pytest.raises(ValidationError):
            linear_sample(random_grid, 1.0, np.inf)

    def test_output_shape(self, random_grid):
        x = np.full((3, 7), 1.5)
        assert catmull_rom_sample(random_grid, x, x).shape == (3, 7, 2)


# ── ABC and dispatch ────────────────────────────────────────────────────


class TestABC:
    """Abstract base class contracts and kernel dispatch."""

    def test_cannot_instantiate_sampler(self):
        with pytest.raises(TypeError):
            Sampler()

    def test_cannot_instantiate_kernel_sampler(self):
        with pytest.raises(TypeError):
            KernelSampler(radius=1)

    def test_radii(self):
        assert BilinearSampler().radius == 1
        assert CatmullRomSampler().radius == 2

    def test_samplers_are_kernel_samplers(self):
        assert isinstance(BilinearSampler(), KernelSampler)
        assert isinstance(CatmullRomSampler(), Sampler)

    def test_get_sampler(self):
        assert isinstance(get_sampler(Kernel.LINEAR), BilinearSampler)
        assert isinstance(get_sampler('catmull_rom'), CatmullRomSampler)
        assert isinstance(get_sampler('catmull-rom'), CatmullRomSampler)
        assert get_sampler('catmull_rom', tension=0.3).tension == 0.3

    def test_get_sampler_passthrough(self):
        sampler = CatmullRomSampler(tension=0.2)
        assert get_sampler(sampler) is sampler

    def test_get_sampler_unknown(self):
        with pytest.raises(ValidationError, match="Unknown kernel"):
            get_sampler('lanczos')
