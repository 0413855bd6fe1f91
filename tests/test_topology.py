"""Tests for topology.py — size formulas and slot bookkeeping."""

from __future__ import annotations

import math

import pytest

from worldgrid.icosahedron import build_icosahedron_grid
from worldgrid.models import UNSET, Cell, CellShape, Vertex
from worldgrid.topology import (
    add_vertex,
    allocate,
    cell_count,
    edge_count,
    vertex_count,
)


# ═══════════════════════════════════════════════════════════════════
# Size formulas
# ═══════════════════════════════════════════════════════════════════


class TestCounts:
    def test_level_0(self):
        assert (cell_count(0), vertex_count(0), edge_count(0)) == (12, 20, 30)

    def test_level_1(self):
        assert (cell_count(1), vertex_count(1), edge_count(1)) == (32, 60, 90)

    def test_level_6(self):
        assert cell_count(6) == 7292
        assert vertex_count(6) == 14580
        assert edge_count(6) == 21870

    @pytest.mark.parametrize("level", range(10))
    def test_euler(self, level):
        assert cell_count(level) - edge_count(level) + vertex_count(level) == 2

    @pytest.mark.parametrize("fn", [cell_count, vertex_count, edge_count])
    def test_negative_raises(self, fn):
        with pytest.raises(ValueError):
            fn(-1)


class TestAllocate:
    def test_sizes(self):
        cells, vertices, edges = allocate(2)
        assert len(cells) == 92
        assert len(vertices) == 180
        assert len(edges) == 270

    def test_shapes(self):
        cells, _, _ = allocate(1)
        assert all(c.shape is CellShape.PENTAGON for c in cells[:12])
        assert all(c.shape is CellShape.HEXAGON for c in cells[12:])
        assert all(len(c.neighbor_ids) == 6 for c in cells[12:])

    def test_all_unset(self):
        cells, vertices, edges = allocate(0)
        assert all(set(c.vertex_ids) == {UNSET} for c in cells)
        assert all(set(v.cell_ids) == {UNSET} for v in vertices)
        assert all(set(e.cell_ids) == {UNSET} for e in edges)


# ═══════════════════════════════════════════════════════════════════
# add_vertex — slot placement
# ═══════════════════════════════════════════════════════════════════


def _hand_built_triple():
    cells = [Cell.blank(0), Cell.blank(1), Cell.blank(2)]
    cells[0].neighbor_ids = [5, 1, 6, 2, 7]
    cells[1].neighbor_ids = [0, 8, 9, 10, 2]
    cells[2].neighbor_ids = [11, 1, 0, 12, 13]
    cells[0].position = (1.0, 0.0, 0.0)
    cells[1].position = (0.0, 1.0, 0.0)
    cells[2].position = (0.0, 0.0, 1.0)
    return cells, [Vertex(0)]


class TestAddVertex:
    def test_slot_is_two_positions_away(self):
        """Each cell stores the vertex at the slot of the cell two places on in the triple."""
        cells, vertices = _hand_built_triple()
        add_vertex(cells, vertices, 0, (0, 1, 2))

        # cell 0 → slot of cell 2; cell 1 → slot of cell 0; cell 2 → slot of cell 1
        assert cells[0].vertex_ids == [UNSET, UNSET, UNSET, 0, UNSET]
        assert cells[1].vertex_ids == [0, UNSET, UNSET, UNSET, UNSET]
        assert cells[2].vertex_ids == [UNSET, 0, UNSET, UNSET, UNSET]

    def test_not_insertion_order(self):
        cells, vertices = _hand_built_triple()
        add_vertex(cells, vertices, 0, (0, 1, 2))
        # Slot of the *second* triple member would be the mirrored placement.
        assert cells[0].vertex_ids[cells[0].index_of_neighbor(1)] == UNSET
        assert cells[1].vertex_ids[cells[1].index_of_neighbor(2)] == UNSET
        assert cells[2].vertex_ids[cells[2].index_of_neighbor(0)] == UNSET

    def test_vertex_fields(self):
        cells, vertices = _hand_built_triple()
        add_vertex(cells, vertices, 0, (0, 1, 2))
        v = vertices[0]
        assert v.cell_ids == [0, 1, 2]
        s = 1.0 / math.sqrt(3.0)
        assert v.position == pytest.approx((s, s, s))

    def test_non_neighbor_raises(self):
        cells, vertices = _hand_built_triple()
        cells[2].neighbor_ids = [11, 14, 0, 12, 13]
        with pytest.raises(ValueError):
            add_vertex(cells, vertices, 0, (0, 1, 2))


# ═══════════════════════════════════════════════════════════════════
# add_edge — checked on the seed grid
# ═══════════════════════════════════════════════════════════════════


class TestAddEdge:
    def test_first_edge(self):
        grid = build_icosahedron_grid()
        edge = grid.edges[0]
        assert edge.cell_ids == [0, 1]
        assert edge.vertex_ids == [grid.cells[0].vertex_ids[0], grid.cells[0].vertex_ids[1]]

    def test_edge_recorded_on_both_cells(self):
        grid = build_icosahedron_grid()
        for edge in grid.edges:
            a, b = (grid.cells[i] for i in edge.cell_ids)
            assert a.edge_ids[a.index_of_neighbor(b.index)] == edge.index
            assert b.edge_ids[b.index_of_neighbor(a.index)] == edge.index

    def test_edge_recorded_on_both_vertices(self):
        grid = build_icosahedron_grid()
        for edge in grid.edges:
            a, b = (grid.vertices[i] for i in edge.vertex_ids)
            assert a.edge_ids[a.index_of_vertex(b.index)] == edge.index
            assert b.edge_ids[b.index_of_vertex(a.index)] == edge.index
