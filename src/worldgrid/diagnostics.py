"""Topological invariant checks for a built :class:`~worldgrid.grid.WorldGrid`.

Each ``check_*`` function returns a list of error strings; an empty list
means the invariant holds.  They assume slot filling has already been
checked (see :meth:`WorldGrid.validate`).
"""

from __future__ import annotations

from typing import Dict, List, Set, Tuple

from .grid import WorldGrid
from .topology import cell_count, edge_count, vertex_count


def check_symmetry(grid: WorldGrid) -> List[str]:
    """Every neighbor of a cell lists that cell back."""
    errors: List[str] = []
    for cell in grid.cells:
        for other in cell.neighbor_ids:
            if cell.index not in grid.cells[other].neighbor_ids:
                errors.append(f"Cell {cell.index} lists {other} but not vice versa")
    return errors


def check_vertices(grid: WorldGrid) -> List[str]:
    """Every vertex has three mutual cells, vertices and edges."""
    errors: List[str] = []
    for vertex in grid.vertices:
        vi = vertex.index
        for cell_id in vertex.cell_ids:
            if vi not in grid.cells[cell_id].vertex_ids:
                errors.append(f"Vertex {vi} lists cell {cell_id} but not vice versa")
        for k, other in enumerate(vertex.vertex_ids):
            if vi not in grid.vertices[other].vertex_ids:
                errors.append(f"Vertex {vi} lists vertex {other} but not vice versa")
            edge = grid.edges[vertex.edge_ids[k]]
            if set(edge.vertex_ids) != {vi, other}:
                errors.append(
                    f"Vertex {vi} edge slot {k} is edge {edge.index} "
                    f"which does not join {vi} and {other}"
                )
    return errors


def check_edges(grid: WorldGrid) -> List[str]:
    """Every edge is recorded by its two cells and two vertices, once per cell pair."""
    errors: List[str] = []
    seen: Dict[Tuple[int, int], int] = {}
    for edge in grid.edges:
        a, b = edge.cell_ids
        pair = (min(a, b), max(a, b))
        if pair in seen:
            errors.append(f"Edges {seen[pair]} and {edge.index} both join cells {pair}")
        seen[pair] = edge.index

        for i in range(2):
            cell = grid.cells[edge.cell_ids[i]]
            other = edge.cell_ids[1 - i]
            if other not in cell.neighbor_ids:
                errors.append(f"Edge {edge.index} joins non-adjacent cells {a} and {b}")
                continue
            if cell.edge_ids[cell.index_of_neighbor(other)] != edge.index:
                errors.append(f"Cell {cell.index} does not record edge {edge.index} toward {other}")

            vertex = grid.vertices[edge.vertex_ids[i]]
            other_v = edge.vertex_ids[1 - i]
            if other_v not in vertex.vertex_ids:
                errors.append(f"Edge {edge.index} joins non-adjacent vertices")
                continue
            if vertex.edge_ids[vertex.index_of_vertex(other_v)] != edge.index:
                errors.append(f"Vertex {vertex.index} does not record edge {edge.index}")
    return errors


def check_winding(grid: WorldGrid) -> List[str]:
    """Adjacent cells see their two shared vertices in opposite order.

    For cell ``t`` with neighbor ``u`` in slot ``k`` the shared edge runs
    from ``t``'s vertex ``k`` to vertex ``k + 1``; seen from ``u`` the same
    two vertices appear in slots ``q + 1`` and ``q``, where ``q`` is the
    slot of ``t`` in ``u``.
    """
    errors: List[str] = []
    for cell in grid.cells:
        n = cell.neighbor_count
        for k, other_id in enumerate(cell.neighbor_ids):
            other = grid.cells[other_id]
            m = other.neighbor_count
            first = cell.vertex_ids[k]
            second = cell.vertex_ids[(k + 1) % n]

            shared: Set[int] = set(cell.vertex_ids) & set(other.vertex_ids)
            edge = grid.edges[cell.edge_ids[k]]
            if shared != {first, second} or set(edge.vertex_ids) != shared:
                errors.append(f"Cells {cell.index} and {other_id} do not share edge vertices")
                continue

            if cell.index not in other.neighbor_ids:
                errors.append(f"Cell {other_id} does not list {cell.index}; winding unchecked")
                continue
            q = other.index_of_neighbor(cell.index)
            if other.vertex_ids[q] != second or other.vertex_ids[(q + 1) % m] != first:
                errors.append(f"Cells {cell.index} and {other_id} wind in the same direction")
    return errors


def euler_characteristic(grid: WorldGrid) -> int:
    return grid.euler_characteristic()


def diagnostics_report(grid: WorldGrid) -> Dict[str, object]:
    """Summary of sizes and invariant checks, suitable for JSON output."""
    level = grid.level
    symmetry = check_symmetry(grid)
    vertices = check_vertices(grid)
    edges = check_edges(grid)
    winding = check_winding(grid)
    return {
        "level": level,
        "cells": len(grid.cells),
        "vertices": len(grid.vertices),
        "edges": len(grid.edges),
        "pentagons": len(grid.pentagons()),
        "expected": {
            "cells": cell_count(level),
            "vertices": vertex_count(level),
            "edges": edge_count(level),
        },
        "euler_characteristic": grid.euler_characteristic(),
        "symmetry_errors": len(symmetry),
        "vertex_errors": len(vertices),
        "edge_errors": len(edges),
        "winding_errors": len(winding),
        "ok": not (symmetry or vertices or edges or winding),
    }
