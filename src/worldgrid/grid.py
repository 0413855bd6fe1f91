from __future__ import annotations

import json
from typing import Iterable, List, Optional

import numpy as np

from .models import UNSET, Cell, CellShape, Edge, Vertex
from .topology import cell_count, edge_count, vertex_count


class WorldGrid:
    """Index-addressed container for the cells, vertices and edges of one level.

    Topology is complete once a grid has been built; only the derived
    scalar fields (coordinates, elevation, area) change afterwards, and
    only through :func:`~worldgrid.metrics.compute_metrics`.
    """

    VERSION = "1.0"

    def __init__(
        self,
        level: int,
        cells: Iterable[Cell],
        vertices: Iterable[Vertex],
        edges: Iterable[Edge],
        *,
        radius: Optional[float] = None,
        has_metrics: bool = False,
    ) -> None:
        self.level = level
        self.cells: List[Cell] = list(cells)
        self.vertices: List[Vertex] = list(vertices)
        self.edges: List[Edge] = list(edges)
        self.radius = radius
        self.has_metrics = has_metrics

    def __repr__(self) -> str:
        return (
            f"WorldGrid(level={self.level}, cells={len(self.cells)}, "
            f"vertices={len(self.vertices)}, edges={len(self.edges)})"
        )

    # ── Queries ─────────────────────────────────────────────────────

    def cell(self, index: int) -> Cell:
        if not 0 <= index < len(self.cells):
            raise IndexError(f"cell index {index} out of range 0..{len(self.cells) - 1}")
        return self.cells[index]

    def pentagons(self) -> List[Cell]:
        return [c for c in self.cells if c.shape is CellShape.PENTAGON]

    def cell_vertices(self, index: int) -> List[Vertex]:
        return [self.vertices[v] for v in self.cell(index).vertex_ids]

    def positions(self) -> np.ndarray:
        """``(cell_count, 3)`` array of cell centre unit vectors."""
        return np.array([c.position for c in self.cells], dtype=float)

    def euler_characteristic(self) -> int:
        return len(self.cells) - len(self.edges) + len(self.vertices)

    def require_metrics(self) -> None:
        if not self.has_metrics:
            raise ValueError("grid metrics have not been computed; call compute_metrics first")

    # ── Validation ──────────────────────────────────────────────────

    def validate(self, strict: bool = False) -> list[str]:
        """Return a list of problems; an empty list means the grid is sound.

        The basic pass checks sizes, slot filling and id ranges.  *strict* adds the
        full adjacency checks from :mod:`~worldgrid.diagnostics`.
        """
        errors: list[str] = []

        expected = (cell_count(self.level), vertex_count(self.level), edge_count(self.level))
        actual = (len(self.cells), len(self.vertices), len(self.edges))
        for name, want, got in zip(("cells", "vertices", "edges"), expected, actual):
            if want != got:
                errors.append(f"Level {self.level} grid has {got} {name}, expected {want}")

        n_cells, n_vertices, n_edges = actual
        for i, cell in enumerate(self.cells):
            if cell.index != i:
                errors.append(f"Cell at position {i} carries index {cell.index}")
            if cell.shape is not CellShape.for_index(i):
                errors.append(f"Cell {i} is a {cell.shape.name.lower()}")
            errors.extend(cell.validate_slots())
            errors.extend(_out_of_range(f"Cell {i}", "neighbor", cell.neighbor_ids, n_cells))
            errors.extend(_out_of_range(f"Cell {i}", "vertex", cell.vertex_ids, n_vertices))
            errors.extend(_out_of_range(f"Cell {i}", "edge", cell.edge_ids, n_edges))
        for i, vertex in enumerate(self.vertices):
            if vertex.index != i:
                errors.append(f"Vertex at position {i} carries index {vertex.index}")
            errors.extend(vertex.validate_slots())
            errors.extend(_out_of_range(f"Vertex {i}", "cell", vertex.cell_ids, n_cells))
            errors.extend(_out_of_range(f"Vertex {i}", "vertex", vertex.vertex_ids, n_vertices))
            errors.extend(_out_of_range(f"Vertex {i}", "edge", vertex.edge_ids, n_edges))
        for i, edge in enumerate(self.edges):
            if edge.index != i:
                errors.append(f"Edge at position {i} carries index {edge.index}")
            errors.extend(edge.validate_slots())
            errors.extend(_out_of_range(f"Edge {i}", "cell", edge.cell_ids, n_cells))
            errors.extend(_out_of_range(f"Edge {i}", "vertex", edge.vertex_ids, n_vertices))

        if strict and not errors:
            from .diagnostics import check_edges, check_symmetry, check_vertices, check_winding

            errors.extend(check_symmetry(self))
            errors.extend(check_vertices(self))
            errors.extend(check_edges(self))
            errors.extend(check_winding(self))
            if self.euler_characteristic() != 2:
                errors.append(f"Euler characteristic is {self.euler_characteristic()}, expected 2")

        return errors

    # ── Serialisation ───────────────────────────────────────────────

    def to_dict(self) -> dict:
        cells_payload = []
        for cell in self.cells:
            payload = {
                "index": cell.index,
                "position": list(cell.position),
                "neighbors": list(cell.neighbor_ids),
                "vertices": list(cell.vertex_ids),
                "edges": list(cell.edge_ids),
            }
            if self.has_metrics:
                payload["latitude"] = cell.latitude
                payload["longitude"] = cell.longitude
                payload["elevation"] = cell.elevation
                payload["area"] = cell.area
            cells_payload.append(payload)

        vertices_payload = []
        for vertex in self.vertices:
            payload = {
                "index": vertex.index,
                "position": list(vertex.position),
                "cells": list(vertex.cell_ids),
                "vertices": list(vertex.vertex_ids),
                "edges": list(vertex.edge_ids),
            }
            if self.has_metrics:
                payload["latitude"] = vertex.latitude
                payload["longitude"] = vertex.longitude
                payload["elevation"] = vertex.elevation
            vertices_payload.append(payload)

        edges_payload = [
            {"index": e.index, "cells": list(e.cell_ids), "vertices": list(e.vertex_ids)}
            for e in self.edges
        ]

        return {
            "version": self.VERSION,
            "level": self.level,
            "radius": self.radius,
            "has_metrics": self.has_metrics,
            "cells": cells_payload,
            "vertices": vertices_payload,
            "edges": edges_payload,
        }

    @classmethod
    def from_dict(cls, payload: dict) -> "WorldGrid":
        cells = [
            Cell(
                index=c["index"],
                shape=CellShape.for_index(c["index"]),
                position=tuple(c["position"]),
                neighbor_ids=list(c["neighbors"]),
                vertex_ids=list(c["vertices"]),
                edge_ids=list(c["edges"]),
                latitude=c.get("latitude"),
                longitude=c.get("longitude"),
                elevation=c.get("elevation"),
                area=c.get("area"),
            )
            for c in payload.get("cells", [])
        ]
        vertices = [
            Vertex(
                index=v["index"],
                position=tuple(v["position"]),
                cell_ids=list(v["cells"]),
                vertex_ids=list(v["vertices"]),
                edge_ids=list(v["edges"]),
                latitude=v.get("latitude"),
                longitude=v.get("longitude"),
                elevation=v.get("elevation"),
            )
            for v in payload.get("vertices", [])
        ]
        edges = [
            Edge(index=e["index"], cell_ids=list(e["cells"]), vertex_ids=list(e["vertices"]))
            for e in payload.get("edges", [])
        ]
        return cls(
            payload["level"],
            cells,
            vertices,
            edges,
            radius=payload.get("radius"),
            has_metrics=payload.get("has_metrics", False),
        )

    def to_json(self, indent: Optional[int] = None) -> str:
        return json.dumps(self.to_dict(), indent=indent, sort_keys=True)

    @classmethod
    def from_json(cls, json_data: str) -> "WorldGrid":
        return cls.from_dict(json.loads(json_data))


def _out_of_range(owner: str, kind: str, ids: Iterable[int], limit: int) -> list[str]:
    """Errors for ids outside ``0..limit-1``; UNSET is reported by the slot checks."""
    return [
        f"{owner} references {kind} {i}, outside 0..{limit - 1}"
        for i in ids
        if i != UNSET and not 0 <= i < limit
    ]
