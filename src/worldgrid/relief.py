"""Terrain relief — slope and mountain classification per cell.

Works on a grid whose metrics have been computed (every cell and vertex
has an elevation).  All queries are read-only.

Usage
-----
>>> from worldgrid.relief import is_mountainous, max_elevation
>>> peak = max_elevation(grid)
>>> [i for i in range(len(grid.cells)) if is_mountainous(grid, i, peak)]
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .geometry import chord_distance
from .grid import WorldGrid
from .models import Vertex


# ═══════════════════════════════════════════════════════════════════
# Configuration
# ═══════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class ReliefConfig:
    """Thresholds for :func:`is_mountainous`, as fractions of the world's peak.

    Attributes
    ----------
    low_fraction : float
        Cells whose highest point is below this are never mountainous.
    high_fraction : float
        Cells whose highest point is above this are always mountainous.
    mid_fraction : float
        Splits the band in between into a gentle and a steep slope test.
    mid_slope : float
        Slope needed above *mid_fraction*.
    low_slope : float
        Slope needed at or below *mid_fraction*.
    """

    low_fraction: float = 0.035
    high_fraction: float = 0.085
    mid_fraction: float = 0.05
    mid_slope: float = 0.035
    low_slope: float = 0.0875


DEFAULT_RELIEF = ReliefConfig()


# ═══════════════════════════════════════════════════════════════════
# Queries
# ═══════════════════════════════════════════════════════════════════


def max_elevation(grid: WorldGrid) -> float:
    """Highest elevation over every cell and vertex of *grid*."""
    grid.require_metrics()
    return max(
        max(c.elevation for c in grid.cells),
        max(v.elevation for v in grid.vertices),
    )


def lowest_vertex(grid: WorldGrid, cell_index: int) -> Vertex:
    """The cell's lowest vertex; the first in winding order on ties."""
    grid.require_metrics()
    return min(grid.cell_vertices(cell_index), key=lambda v: v.elevation)


def highest_vertex(grid: WorldGrid, cell_index: int) -> Vertex:
    """The cell's highest vertex; the first in winding order on ties."""
    grid.require_metrics()
    return max(grid.cell_vertices(cell_index), key=lambda v: v.elevation)


def local_max_elevation(grid: WorldGrid, cell_index: int) -> float:
    cell = grid.cell(cell_index)
    return max(cell.elevation, highest_vertex(grid, cell_index).elevation)


def slope(grid: WorldGrid, cell_index: int) -> float:
    """Rise over run from the lowest to the highest point of a cell.

    The candidate points are the cell centre and its vertices.  When the
    centre is itself the lowest or highest point it replaces the
    corresponding vertex.  A perfectly flat cell has slope 0.
    """
    cell = grid.cell(cell_index)
    low = lowest_vertex(grid, cell_index)
    high = highest_vertex(grid, cell_index)

    if cell.elevation < low.elevation:
        rise = high.elevation - cell.elevation
        run = chord_distance(cell.position, high.position)
    elif cell.elevation > high.elevation:
        rise = cell.elevation - low.elevation
        run = chord_distance(cell.position, low.position)
    else:
        rise = high.elevation - low.elevation
        run = chord_distance(high.position, low.position)

    if run == 0:
        return 0.0
    return rise / run


def is_mountainous(
    grid: WorldGrid,
    cell_index: int,
    global_max_elevation: Optional[float] = None,
    config: ReliefConfig = DEFAULT_RELIEF,
) -> bool:
    """Whether a cell counts as mountainous.

    A cell is mountainous when its highest point is above 8.5% of the
    world's peak, or above 5% with a slope steeper than 0.035, or at
    least 3.5% with a slope steeper than 0.0875.

    Parameters
    ----------
    grid : WorldGrid
    cell_index : int
    global_max_elevation : float, optional
        The world's peak.  Computed with :func:`max_elevation` if omitted;
        pass it in when classifying many cells.
    config : ReliefConfig
    """
    if global_max_elevation is None:
        global_max_elevation = max_elevation(grid)
    peak = local_max_elevation(grid, cell_index)

    if peak < global_max_elevation * config.low_fraction:
        return False
    if peak > global_max_elevation * config.high_fraction:
        return True
    if peak > global_max_elevation * config.mid_fraction:
        return slope(grid, cell_index) > config.mid_slope
    return slope(grid, cell_index) > config.low_slope


def mountainous_cells(grid: WorldGrid, config: ReliefConfig = DEFAULT_RELIEF) -> List[int]:
    """Indices of every mountainous cell."""
    peak = max_elevation(grid)
    return [c.index for c in grid.cells if is_mountainous(grid, c.index, peak, config)]
