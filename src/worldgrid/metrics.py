"""Surface metrics pass — coordinates, elevation and area for every cell.

Topology is read-only here; the pass only fills the derived scalar
fields of cells and vertices, so running it again with the same inputs
leaves the grid unchanged.

>>> from worldgrid import build_grid, compute_metrics, AxisProjection
>>> grid = build_grid(3)
>>> compute_metrics(grid, 6.371e6, AxisProjection(), lambda v: 0.0)
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Tuple

from .grid import WorldGrid
from .models import CellShape, Vec3

logger = logging.getLogger(__name__)

ProjectFn = Callable[[Vec3], Tuple[float, float]]
SampleFn = Callable[[Vec3], float]

# Per-level (pentagon, hexagon) cell area for a unit radius.  Precomputed
# reference values; level 0 has no hexagons.
AREA_FRACTIONS: Tuple[Tuple[float, float], ...] = (
    (0.995824126333975, 0.0),
    (0.322738912263057, 0.485548584813836),
    (0.0968747328418699, 0.163326204596911),
    (0.028438388993119, 0.0542239003721041),
    (0.00829449492399518, 0.0180056505123057),
    (0.00241467010654058, 0.00598964349018147),
    (0.000702568607242906, 0.00199468184049687),
    (0.000204386152311142, 0.000664635858772887),
    (5.94556443995932e-5, 0.000221511187440615),
    (1.72954119217969e-5, 7.38325734291003e-5),
    (5.03114709002561e-6, 2.46103198069843e-5),
    (1.46354854869707e-6, 8.20335939396184e-6),
    (4.25716556080933e-7, 2.73444691845834e-6),
    (1.23824518242403e-7, 9.11480125925495e-7),
    (3.60144138460099e-8, 3.03826887009348e-7),
)


def area_fraction(level: int, shape: CellShape) -> float:
    """Unit-radius area of a *shape* cell at *level*."""
    if not 0 <= level < len(AREA_FRACTIONS):
        raise ValueError(f"no area data for level {level}")
    pentagon, hexagon = AREA_FRACTIONS[level]
    return pentagon if shape is CellShape.PENTAGON else hexagon


def cell_areas(level: int, radius: float) -> Dict[CellShape, float]:
    """Area of each cell shape at *level* on a sphere of *radius*."""
    r2 = radius * radius
    return {shape: area_fraction(level, shape) * r2 for shape in CellShape}


def compute_metrics(
    grid: WorldGrid,
    radius: float,
    project: ProjectFn,
    sample: SampleFn,
) -> None:
    """Fill latitude, longitude and elevation of every vertex and cell, and cell area.

    Parameters
    ----------
    grid : WorldGrid
        A fully built grid.  Modified in place.
    radius : float
        Sphere radius; areas scale with its square.
    project : callable
        ``(unit_vector) -> (latitude, longitude)``, e.g.
        :class:`~worldgrid.projection.AxisProjection`.
    sample : callable
        ``(unit_vector) -> elevation``, e.g.
        :class:`~worldgrid.noise.ElevationSampler`.
    """
    if radius <= 0:
        raise ValueError("radius must be > 0")
    areas = cell_areas(grid.level, radius)

    for vertex in grid.vertices:
        vertex.latitude, vertex.longitude = project(vertex.position)
        vertex.elevation = sample(vertex.position)

    for cell in grid.cells:
        cell.latitude, cell.longitude = project(cell.position)
        cell.elevation = sample(cell.position)
        cell.area = areas[cell.shape]

    grid.radius = radius
    grid.has_metrics = True
    logger.debug(
        "Computed metrics for level %d grid (radius=%g): %d cells, %d vertices",
        grid.level, radius, len(grid.cells), len(grid.vertices),
    )
