"""Tests for builders.py — level bounds, resuming and determinism."""

from __future__ import annotations

import logging

import pytest

from worldgrid.builders import DEFAULT_LEVEL, MAX_LEVEL, build_grid, validate_level


class TestLevelBounds:
    @pytest.mark.parametrize("level", [-1, MAX_LEVEL + 1, 20])
    def test_out_of_range_raises(self, level):
        with pytest.raises(ValueError):
            build_grid(level)

    @pytest.mark.parametrize("level", [0, 1, MAX_LEVEL])
    def test_in_range_accepted(self, level):
        validate_level(level)

    def test_defaults(self):
        assert DEFAULT_LEVEL == 6
        assert MAX_LEVEL == 14


class TestBuildGrid:
    def test_level_0_is_seed(self):
        grid = build_grid(0)
        assert grid.level == 0
        assert len(grid.cells) == 12
        assert grid.validate(strict=True) == []

    def test_level_2(self):
        grid = build_grid(2)
        assert (len(grid.cells), len(grid.vertices), len(grid.edges)) == (92, 180, 270)
        assert grid.validate(strict=True) == []

    @pytest.mark.parametrize("index", [-1, 32, 1000])
    def test_cell_lookup_bounds(self, index):
        grid = build_grid(1)
        with pytest.raises(IndexError, match="out of range 0..31"):
            grid.cell(index)

    def test_cell_lookup(self):
        grid = build_grid(1)
        assert grid.cell(31) is grid.cells[31]

    def test_positions_array(self):
        grid = build_grid(1)
        positions = grid.positions()
        assert positions.shape == (32, 3)
        assert positions[12].tolist() == list(grid.cells[12].position)

    def test_deterministic(self):
        assert build_grid(2).to_json() == build_grid(2).to_json()

    def test_logs_sizes(self, caplog):
        with caplog.at_level(logging.INFO, logger="worldgrid.builders"):
            build_grid(1)
        assert "Built level 1 grid: 32 cells (12 pentagons)" in caplog.text


class TestResume:
    def test_resume_from_base(self):
        base = build_grid(1)
        grid = build_grid(3, base=base)
        assert grid.level == 3
        assert grid.to_json() == build_grid(3).to_json()

    def test_base_untouched(self):
        base = build_grid(1)
        before = base.to_json()
        build_grid(2, base=base)
        assert base.level == 1
        assert base.to_json() == before

    def test_same_level_returns_base(self):
        base = build_grid(2)
        assert build_grid(2, base=base) is base

    def test_finer_base_reseeds(self):
        base = build_grid(2)
        grid = build_grid(1, base=base)
        assert grid.level == 1
        assert len(grid.cells) == 32
