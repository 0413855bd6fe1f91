from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

Vec3 = Tuple[float, float, float]

UNSET = -1
"""Slot sentinel used while a grid is under construction."""

PENTAGON_COUNT = 12


class CellShape(Enum):
    PENTAGON = 5
    HEXAGON = 6

    @property
    def sides(self) -> int:
        return self.value

    @classmethod
    def for_index(cls, index: int) -> "CellShape":
        """The 12 icosahedron-derived cells are pentagons, forever."""
        return cls.PENTAGON if index < PENTAGON_COUNT else cls.HEXAGON


def _unset_slots(count: int) -> List[int]:
    return [UNSET] * count


@dataclass
class Cell:
    """A pentagonal or hexagonal face of the grid.

    *neighbor_ids*, *vertex_ids* and *edge_ids* are parallel cyclic lists.
    The vertex in slot k sits between neighbors k-1 and k; the edge in
    slot k is the one shared with neighbor k.
    """

    index: int
    shape: CellShape
    position: Vec3 = (0.0, 0.0, 0.0)
    neighbor_ids: List[int] = field(default_factory=list)
    vertex_ids: List[int] = field(default_factory=list)
    edge_ids: List[int] = field(default_factory=list)
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    elevation: Optional[float] = None
    area: Optional[float] = None

    @classmethod
    def blank(cls, index: int) -> "Cell":
        shape = CellShape.for_index(index)
        n = shape.sides
        return cls(
            index=index,
            shape=shape,
            neighbor_ids=_unset_slots(n),
            vertex_ids=_unset_slots(n),
            edge_ids=_unset_slots(n),
        )

    @property
    def neighbor_count(self) -> int:
        return self.shape.sides

    def index_of_neighbor(self, cell_index: int) -> int:
        return self.neighbor_ids.index(cell_index)

    def index_of_vertex(self, vertex_index: int) -> int:
        return self.vertex_ids.index(vertex_index)

    def validate_slots(self) -> list[str]:
        errors: list[str] = []
        n = self.neighbor_count
        for name in ("neighbor_ids", "vertex_ids", "edge_ids"):
            slots = getattr(self, name)
            if len(slots) != n:
                errors.append(f"Cell {self.index} has {len(slots)} {name} but {n} sides")
            if UNSET in slots:
                errors.append(f"Cell {self.index} has unset {name}")
            elif len(set(slots)) != len(slots):
                errors.append(f"Cell {self.index} has repeated {name}")
        return errors


@dataclass
class Vertex:
    """A point where exactly three cells meet."""

    index: int
    position: Vec3 = (0.0, 0.0, 0.0)
    cell_ids: List[int] = field(default_factory=lambda: _unset_slots(3))
    vertex_ids: List[int] = field(default_factory=lambda: _unset_slots(3))
    edge_ids: List[int] = field(default_factory=lambda: _unset_slots(3))
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    elevation: Optional[float] = None

    def index_of_vertex(self, vertex_index: int) -> int:
        return self.vertex_ids.index(vertex_index)

    def validate_slots(self) -> list[str]:
        errors: list[str] = []
        for name in ("cell_ids", "vertex_ids", "edge_ids"):
            slots = getattr(self, name)
            if len(slots) != 3:
                errors.append(f"Vertex {self.index} has {len(slots)} {name}")
            if UNSET in slots:
                errors.append(f"Vertex {self.index} has unset {name}")
            elif len(set(slots)) != len(slots):
                errors.append(f"Vertex {self.index} has repeated {name}")
        return errors


@dataclass
class Edge:
    """The boundary between two cells, running between two vertices."""

    index: int
    cell_ids: List[int] = field(default_factory=lambda: _unset_slots(2))
    vertex_ids: List[int] = field(default_factory=lambda: _unset_slots(2))

    def validate_slots(self) -> list[str]:
        errors: list[str] = []
        for name in ("cell_ids", "vertex_ids"):
            slots = getattr(self, name)
            if len(slots) != 2 or UNSET in slots:
                errors.append(f"Edge {self.index} has unset {name}")
            elif slots[0] == slots[1]:
                errors.append(f"Edge {self.index} has repeated {name}")
        return errors
