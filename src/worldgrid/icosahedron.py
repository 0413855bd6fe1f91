"""Level-0 grid: one pentagonal cell per icosahedron vertex.

Cell positions and the neighbor table are fixed data; each of the 20
icosahedron faces becomes a vertex and each of its 30 edges an edge.
"""

from __future__ import annotations

from typing import List, Tuple

from .grid import WorldGrid
from .models import Vec3
from .topology import add_edges, add_vertex, allocate, link_vertices

_X = -0.525731112119133606
_Z = -0.850650808352039932

ICOSAHEDRON_POSITIONS: Tuple[Vec3, ...] = (
    (_X, 0.0, -_Z),
    (-_X, 0.0, -_Z),
    (_X, 0.0, _Z),
    (-_X, 0.0, _Z),
    (0.0, -_Z, -_X),
    (0.0, -_Z, _X),
    (0.0, _Z, -_X),
    (0.0, _Z, _X),
    (-_Z, -_X, 0.0),
    (_Z, -_X, 0.0),
    (-_Z, _X, 0.0),
    (_Z, _X, 0.0),
)

# Neighbors of each cell, in winding order.
ICOSAHEDRON_NEIGHBORS: Tuple[Tuple[int, int, int, int, int], ...] = (
    (1, 6, 11, 9, 4),
    (0, 4, 8, 10, 6),
    (3, 5, 9, 11, 7),
    (2, 7, 10, 8, 5),
    (0, 9, 5, 8, 1),
    (2, 3, 8, 4, 9),
    (0, 1, 10, 7, 11),
    (2, 11, 6, 10, 3),
    (1, 4, 5, 3, 10),
    (0, 11, 2, 5, 4),
    (1, 8, 3, 7, 6),
    (0, 6, 7, 2, 9),
)

# The ten faces not incident to cell 0 or cell 3.
_EQUATORIAL_FACES: Tuple[Tuple[int, int, int], ...] = (
    (10, 1, 8),
    (1, 10, 6),
    (6, 10, 7),
    (6, 7, 11),
    (11, 7, 2),
    (11, 2, 9),
    (9, 2, 5),
    (9, 5, 4),
    (4, 5, 8),
    (4, 8, 1),
)


def icosahedron_faces() -> List[Tuple[int, int, int]]:
    """The 20 face triples, in vertex-index order."""
    faces: List[Tuple[int, int, int]] = []
    for apex in (0, 3):
        ring = ICOSAHEDRON_NEIGHBORS[apex]
        for i in range(5):
            faces.append((apex, ring[(i + 4) % 5], ring[i]))
    faces.extend(_EQUATORIAL_FACES)
    return faces


def build_icosahedron_grid() -> WorldGrid:
    """Build the level-0 grid (12 cells, 20 vertices, 30 edges)."""
    cells, vertices, edges = allocate(0)

    for cell, position, neighbors in zip(cells, ICOSAHEDRON_POSITIONS, ICOSAHEDRON_NEIGHBORS):
        cell.position = position
        cell.neighbor_ids = list(neighbors)

    for index, triple in enumerate(icosahedron_faces()):
        add_vertex(cells, vertices, index, triple)

    link_vertices(cells, vertices)
    add_edges(cells, vertices, edges)

    return WorldGrid(0, cells, vertices, edges)
