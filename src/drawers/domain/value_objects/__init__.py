"""Value objects for the drawer layout domain.

Immutable data types used throughout the layout engine, re-exported from
sub-modules for convenience.
"""

from __future__ import annotations

from ._grid import (
    DEFAULT_BASE_THICKNESS_MM,
    DEFAULT_CELL_SIZE_MM,
    DEFAULT_DRAWER_HEIGHT_MM,
    DEFAULT_DRAWER_WIDTH_MM,
    DEFAULT_WALL_HEIGHT_MM,
    MIN_BIN_HEIGHT_MM,
    CellRect,
    GridSize,
    GridSpec,
    cell_count,
    recompute_grid,
)
from ._3d_geometry import BoundingBox3D, Position3D

__all__ = [
    "BoundingBox3D",
    "CellRect",
    "DEFAULT_BASE_THICKNESS_MM",
    "DEFAULT_CELL_SIZE_MM",
    "DEFAULT_DRAWER_HEIGHT_MM",
    "DEFAULT_DRAWER_WIDTH_MM",
    "DEFAULT_WALL_HEIGHT_MM",
    "GridSize",
    "GridSpec",
    "MIN_BIN_HEIGHT_MM",
    "Position3D",
    "cell_count",
    "recompute_grid",
]
