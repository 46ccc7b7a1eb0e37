"""Domain services for the drawer layout engine."""

from .collision import (
    collides_any,
    find_out_of_bounds,
    find_overlapping_pairs,
    overlaps,
    within_bounds,
)
from .coordinates import (
    DEFAULT_CELL_PX,
    ViewScale,
    cell_center_to_world,
    cell_to_pixel,
    mm_to_world,
    pixel_to_cell,
    world_to_cell,
    world_to_top_left_cell,
)
from .placement import PlacementEngine, ReconcileResult
from .scene import BinSolid, DrawerScene, DrawerSceneBuilder, GridGuide

__all__ = [
    "BinSolid",
    "DEFAULT_CELL_PX",
    "DrawerScene",
    "DrawerSceneBuilder",
    "GridGuide",
    "PlacementEngine",
    "ReconcileResult",
    "ViewScale",
    "cell_center_to_world",
    "cell_to_pixel",
    "collides_any",
    "find_out_of_bounds",
    "find_overlapping_pairs",
    "mm_to_world",
    "overlaps",
    "pixel_to_cell",
    "within_bounds",
    "world_to_cell",
    "world_to_top_left_cell",
]
