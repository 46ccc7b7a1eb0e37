"""Domain layer - grid model, bins and the layout engine."""

from .entities import Bin
from .services import (
    DrawerScene,
    DrawerSceneBuilder,
    PlacementEngine,
    ViewScale,
)
from .value_objects import (
    MIN_BIN_HEIGHT_MM,
    BoundingBox3D,
    CellRect,
    GridSize,
    GridSpec,
    Position3D,
    recompute_grid,
)

__all__ = [
    "Bin",
    "BoundingBox3D",
    "CellRect",
    "DrawerScene",
    "DrawerSceneBuilder",
    "GridSize",
    "GridSpec",
    "MIN_BIN_HEIGHT_MM",
    "PlacementEngine",
    "Position3D",
    "ViewScale",
    "recompute_grid",
]
