"""Tests for metrics.py — coordinates, elevation and area."""

from __future__ import annotations

import math

import pytest

from worldgrid.builders import build_grid
from worldgrid.metrics import AREA_FRACTIONS, area_fraction, cell_areas, compute_metrics
from worldgrid.models import CellShape
from worldgrid.noise import ElevationSampler
from worldgrid.projection import AxisProjection


def _height(v):
    return 100.0 * v[1]


@pytest.fixture
def grid():
    g = build_grid(2)
    compute_metrics(g, 2.0, AxisProjection(), _height)
    return g


class TestAreaTable:
    def test_fifteen_levels(self):
        assert len(AREA_FRACTIONS) == 15

    def test_level_0_has_no_hexagons(self):
        assert area_fraction(0, CellShape.HEXAGON) == 0.0

    def test_level_6_values(self):
        assert area_fraction(6, CellShape.PENTAGON) == 0.000702568607242906
        assert area_fraction(6, CellShape.HEXAGON) == 0.00199468184049687

    @pytest.mark.parametrize("level", range(1, 15))
    def test_hexagons_larger_than_pentagons(self, level):
        pentagon, hexagon = AREA_FRACTIONS[level]
        assert hexagon > pentagon

    @pytest.mark.parametrize("level", [-1, 15])
    def test_unknown_level_raises(self, level):
        with pytest.raises(ValueError):
            area_fraction(level, CellShape.PENTAGON)

    def test_cell_areas_scale_with_radius_squared(self):
        areas = cell_areas(3, 10.0)
        assert areas[CellShape.PENTAGON] == pytest.approx(AREA_FRACTIONS[3][0] * 100.0)
        assert areas[CellShape.HEXAGON] == pytest.approx(AREA_FRACTIONS[3][1] * 100.0)


class TestComputeMetrics:
    def test_marks_grid(self, grid):
        assert grid.has_metrics is True
        assert grid.radius == 2.0

    def test_areas(self, grid):
        for cell in grid.cells:
            fraction = AREA_FRACTIONS[2][0 if cell.shape is CellShape.PENTAGON else 1]
            assert cell.area == pytest.approx(fraction * 4.0)

    def test_elevation_from_sampler(self, grid):
        for cell in grid.cells:
            assert cell.elevation == pytest.approx(100.0 * cell.position[1])
        for vertex in grid.vertices:
            assert vertex.elevation == pytest.approx(100.0 * vertex.position[1])

    def test_coordinates_in_range(self, grid):
        for item in list(grid.cells) + list(grid.vertices):
            assert -math.pi / 2 <= item.latitude <= math.pi / 2
            assert -math.pi <= item.longitude <= math.pi

    def test_latitude_matches_height(self, grid):
        """Untilted latitude is asin(y)."""
        for cell in grid.cells:
            assert cell.latitude == pytest.approx(math.asin(cell.position[1]), abs=1e-9)

    def test_topology_untouched(self):
        g = build_grid(1)
        before = g.to_dict()
        compute_metrics(g, 1.0, AxisProjection(), _height)
        after = g.to_dict()
        for key in ("cells", "vertices"):
            for old, new in zip(before[key], after[key]):
                for field in ("index", "position", "vertices", "edges"):
                    assert new[field] == old[field]
        assert after["edges"] == before["edges"]

    def test_idempotent(self):
        g = build_grid(2)
        sampler = ElevationSampler()
        compute_metrics(g, 6.371e6, AxisProjection(0.4), sampler)
        first = g.to_dict()
        compute_metrics(g, 6.371e6, AxisProjection(0.4), sampler)
        assert g.to_dict() == first

    @pytest.mark.parametrize("radius", [0.0, -1.0])
    def test_bad_radius_raises(self, radius):
        g = build_grid(0)
        with pytest.raises(ValueError):
            compute_metrics(g, radius, AxisProjection(), _height)
        assert g.has_metrics is False
