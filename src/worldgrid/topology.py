"""Slot bookkeeping shared by the seed builder and the subdivision engine.

Every operation here writes into pre-allocated cell / vertex / edge
arenas.  A vertex is always created from an ordered triple of mutually
adjacent cells, and an edge from an ordered pair; the ordering decides
which slot each index lands in, which is what keeps the winding of the
whole grid consistent.

Grid sizes for level *n* (``base = 3**n``)::

    cells    = 10 * base + 2      (12 pentagons, the rest hexagons)
    vertices = 20 * base
    edges    = 30 * base
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

from .geometry import normalized_sum
from .models import UNSET, Cell, Edge, Vertex


def cell_count(level: int) -> int:
    if level < 0:
        raise ValueError("level must be >= 0")
    return 10 * 3 ** level + 2


def vertex_count(level: int) -> int:
    if level < 0:
        raise ValueError("level must be >= 0")
    return 20 * 3 ** level


def edge_count(level: int) -> int:
    if level < 0:
        raise ValueError("level must be >= 0")
    return 30 * 3 ** level


def allocate(level: int) -> Tuple[List[Cell], List[Vertex], List[Edge]]:
    """Fresh, fully-unset arenas sized for *level*."""
    cells = [Cell.blank(i) for i in range(cell_count(level))]
    vertices = [Vertex(i) for i in range(vertex_count(level))]
    edges = [Edge(i) for i in range(edge_count(level))]
    return cells, vertices, edges


def add_vertex(
    cells: Sequence[Cell],
    vertices: Sequence[Vertex],
    index: int,
    triple: Sequence[int],
) -> None:
    """Create vertex *index* where the three cells in *triple* meet.

    Cell ``triple[i]`` records the vertex in the slot of
    ``triple[(i + 2) % 3]`` within its own neighbor list.  For a triple
    ``(c, n[k-1], n[k])`` taken from cell ``c`` this puts the vertex in
    slot ``k`` of ``c``, between neighbors ``k-1`` and ``k``.
    """
    vertex = vertices[index]
    vertex.position = normalized_sum(cells[t].position for t in triple)
    for i in range(3):
        vertex.cell_ids[i] = triple[i]
        cell = cells[triple[i]]
        cell.vertex_ids[cell.index_of_neighbor(triple[(i + 2) % 3])] = index


def add_vertices(cells: Sequence[Cell], vertices: Sequence[Vertex]) -> int:
    """Create one vertex per triangle of mutually adjacent cells.

    Walks every cell and every slot; a slot that is already filled was
    reached from another cell of the same triangle and is skipped.
    Returns the number of vertices created.
    """
    next_id = 0
    for cell in cells:
        n = cell.neighbor_count
        for k in range(n):
            if cell.vertex_ids[k] != UNSET:
                continue
            triple = (cell.index, cell.neighbor_ids[(k + n - 1) % n], cell.neighbor_ids[k])
            add_vertex(cells, vertices, next_id, triple)
            next_id += 1
    return next_id


def link_vertices(cells: Sequence[Cell], vertices: Sequence[Vertex]) -> None:
    """Fill each vertex's neighbor-vertex slots.

    Slot k is the vertex that follows this one around ``cell_ids[k]``.
    """
    for vertex in vertices:
        for k in range(3):
            cell = cells[vertex.cell_ids[k]]
            slot = (cell.index_of_vertex(vertex.index) + 1) % cell.neighbor_count
            vertex.vertex_ids[k] = cell.vertex_ids[slot]


def add_edge(
    cells: Sequence[Cell],
    vertices: Sequence[Vertex],
    edges: Sequence[Edge],
    index: int,
    cell_a: int,
    cell_b: int,
) -> None:
    """Create edge *index* between adjacent cells *cell_a* and *cell_b*."""
    edge = edges[index]
    a = cells[cell_a]
    p = a.index_of_neighbor(cell_b)
    edge.cell_ids[0] = cell_a
    edge.cell_ids[1] = cell_b
    edge.vertex_ids[0] = a.vertex_ids[p]
    edge.vertex_ids[1] = a.vertex_ids[(p + 1) % a.neighbor_count]
    for i in range(2):
        cell = cells[edge.cell_ids[i]]
        cell.edge_ids[cell.index_of_neighbor(edge.cell_ids[1 - i])] = index
        vertex = vertices[edge.vertex_ids[i]]
        vertex.edge_ids[vertex.index_of_vertex(edge.vertex_ids[1 - i])] = index


def add_edges(
    cells: Sequence[Cell],
    vertices: Sequence[Vertex],
    edges: Sequence[Edge],
) -> int:
    """Create one edge per adjacent cell pair; returns the number created."""
    next_id = 0
    for cell in cells:
        for k in range(cell.neighbor_count):
            if cell.edge_ids[k] != UNSET:
                continue
            add_edge(cells, vertices, edges, next_id, cell.index, cell.neighbor_ids[k])
            next_id += 1
    return next_id
