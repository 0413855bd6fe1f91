"""Grid constructors.

:func:`build_grid` is the entry point: it seeds the icosahedron and
subdivides until the requested level is reached.  Every level is a
fresh :class:`~worldgrid.grid.WorldGrid`; intermediate levels are
discarded.
"""

from __future__ import annotations

import logging
from typing import Optional

from .grid import WorldGrid
from .icosahedron import build_icosahedron_grid
from .subdivision import subdivide_grid

logger = logging.getLogger(__name__)

MAX_LEVEL = 14
"""Highest supported level (about 48 million cells)."""

DEFAULT_LEVEL = 6


def validate_level(level: int) -> None:
    if level < 0:
        raise ValueError("level must be >= 0")
    if level > MAX_LEVEL:
        raise ValueError(f"level must be <= {MAX_LEVEL}, got {level}")


def build_grid(level: int = DEFAULT_LEVEL, *, base: Optional[WorldGrid] = None) -> WorldGrid:
    """Build the grid for *level*.

    Parameters
    ----------
    level : int
        Subdivision depth, ``0 <= level <= MAX_LEVEL``.  Level 0 is the
        bare icosahedron seed.
    base : WorldGrid, optional
        A previously built grid to continue subdividing from.  Ignored
        (the seed is rebuilt) when it is already finer than *level*.
        *base* itself is never modified.

    Returns
    -------
    WorldGrid
        Topology-complete grid; metrics are not computed.
    """
    validate_level(level)

    if base is not None and base.level <= level:
        grid = base
    else:
        grid = build_icosahedron_grid()

    while grid.level < level:
        grid = subdivide_grid(grid)

    logger.info(
        "Built level %d grid: %d cells (%d pentagons), %d vertices, %d edges",
        grid.level, len(grid.cells), len(grid.pentagons()), len(grid.vertices), len(grid.edges),
    )
    return grid
