"""One refinement step: level *n* grid → level *n + 1* grid.

The old cells keep their indices and positions.  Every old vertex turns
into a new hexagonal cell, appended after the old cells, and the old
cells' neighbors become those vertex-derived cells.  Vertices and edges
are then rebuilt from scratch over the new cell graph::

    old cell i        → new cell i            (5 or 6 sides, unchanged)
    old vertex j      → new cell C + j        (always 6 sides)

where ``C`` is the old cell count.  Each new triangle of mutually
adjacent cells contains exactly one old cell, so the new vertices come
out numbered cell-by-cell over the old cells.
"""

from __future__ import annotations

import logging

from .grid import WorldGrid
from .topology import add_edges, add_vertices, allocate, link_vertices

logger = logging.getLogger(__name__)


def subdivide_grid(grid: WorldGrid) -> WorldGrid:
    """Return a new grid one level finer than *grid*; *grid* is not modified."""
    level = grid.level + 1
    cells, vertices, edges = allocate(level)
    offset = len(grid.cells)

    for old in grid.cells:
        cell = cells[old.index]
        cell.position = old.position
        for k in range(cell.neighbor_count):
            cell.neighbor_ids[k] = old.vertex_ids[k] + offset

    for old in grid.vertices:
        cell = cells[old.index + offset]
        cell.position = old.position
        for m in range(3):
            cell.neighbor_ids[2 * m] = old.vertex_ids[m] + offset
            cell.neighbor_ids[2 * m + 1] = old.cell_ids[m]

    created = add_vertices(cells, vertices)
    if created != len(vertices):
        raise RuntimeError(
            f"subdivision to level {level} created {created} vertices, expected {len(vertices)}"
        )
    link_vertices(cells, vertices)

    created = add_edges(cells, vertices, edges)
    if created != len(edges):
        raise RuntimeError(
            f"subdivision to level {level} created {created} edges, expected {len(edges)}"
        )

    logger.debug(
        "Subdivided level %d -> %d: %d cells, %d vertices, %d edges",
        grid.level, level, len(cells), len(vertices), len(edges),
    )
    return WorldGrid(level, cells, vertices, edges)
