"""worldgrid — hierarchical hexagon/pentagon grids on the sphere.

Public API is organised into layers:

- **Core** — models, container, geometry
- **Building** — icosahedron seed, subdivision, level driver
- **Surface** — metrics pass, projection, elevation noise
- **Relief** — slope and mountain classification
- **Diagnostics / I/O** — invariant checks and JSON persistence
"""

# ── Core ────────────────────────────────────────────────────────────
from .models import Cell, CellShape, Edge, Vertex, UNSET
from .grid import WorldGrid
from .topology import cell_count, edge_count, vertex_count

# ── Building ────────────────────────────────────────────────────────
from .icosahedron import build_icosahedron_grid
from .subdivision import subdivide_grid
from .builders import DEFAULT_LEVEL, MAX_LEVEL, build_grid

# ── Surface ─────────────────────────────────────────────────────────
from .metrics import AREA_FRACTIONS, area_fraction, compute_metrics
from .projection import AxisProjection, lat_lon_to_vector
from .noise import (
    EARTHLIKE,
    ROUGH,
    ElevationConfig,
    ElevationSampler,
    fbm_3d,
    ridged_noise_3d,
)

# ── Relief ──────────────────────────────────────────────────────────
from .relief import (
    DEFAULT_RELIEF,
    ReliefConfig,
    is_mountainous,
    lowest_vertex,
    max_elevation,
    mountainous_cells,
    slope,
)

# ── Diagnostics / I/O ───────────────────────────────────────────────
from .diagnostics import (
    check_edges,
    check_symmetry,
    check_vertices,
    check_winding,
    diagnostics_report,
    euler_characteristic,
)
from .io import load_json, save_json

__all__ = [
    # Core
    "Cell",
    "CellShape",
    "Edge",
    "Vertex",
    "UNSET",
    "WorldGrid",
    "cell_count",
    "edge_count",
    "vertex_count",
    # Building
    "build_icosahedron_grid",
    "subdivide_grid",
    "build_grid",
    "DEFAULT_LEVEL",
    "MAX_LEVEL",
    # Surface
    "AREA_FRACTIONS",
    "area_fraction",
    "compute_metrics",
    "AxisProjection",
    "lat_lon_to_vector",
    "ElevationConfig",
    "ElevationSampler",
    "EARTHLIKE",
    "ROUGH",
    "fbm_3d",
    "ridged_noise_3d",
    # Relief
    "ReliefConfig",
    "DEFAULT_RELIEF",
    "slope",
    "is_mountainous",
    "lowest_vertex",
    "max_elevation",
    "mountainous_cells",
    # Diagnostics / I/O
    "check_symmetry",
    "check_vertices",
    "check_edges",
    "check_winding",
    "euler_characteristic",
    "diagnostics_report",
    "load_json",
    "save_json",
]
