"""3D drawer scene derived from a layout.

The scene is a plain description of boxes in world space: baseplate, four
walls, one box per bin. Renderers and mesh exporters consume it; nothing
here knows about materials, cameras or lighting.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Sequence

from ..value_objects import MIN_BIN_HEIGHT_MM, BoundingBox3D, GridSpec, Position3D
from .coordinates import DEFAULT_CELL_PX, ViewScale, cell_center_to_world

if TYPE_CHECKING:
    from ..entities import Bin

logger = logging.getLogger(__name__)

__all__ = [
    "BinSolid",
    "DrawerScene",
    "DrawerSceneBuilder",
    "GridGuide",
    "LABEL_CLEARANCE_MM",
    "WALL_THICKNESS_MM",
]

WALL_THICKNESS_MM = 4.0
LABEL_CLEARANCE_MM = 6.0


@dataclass(frozen=True)
class GridGuide:
    """Square guide grid drawn on the drawer floor.

    Attributes:
        size: Edge length in world units (covers the longer grid side).
        divisions: Number of lines per side.
        elevation: Height above the world origin.
    """

    size: float
    divisions: int
    elevation: float = 0.01


@dataclass(frozen=True)
class BinSolid:
    """World-space solid for one bin.

    Attributes:
        bin_id: Id of the bin this solid represents.
        label: Bin label.
        color_variant: Whether the alternate colour applies.
        box: Bin volume, resting on the baseplate.
        label_anchor: Point above the bin where its label floats.
    """

    bin_id: str
    label: str
    color_variant: bool
    box: BoundingBox3D
    label_anchor: Position3D


@dataclass(frozen=True)
class DrawerScene:
    """Complete drawer scene in world units.

    Attributes:
        scale: Scale the scene was built with.
        width: Grid width in world units (X).
        depth: Grid depth in world units (Z).
        base: Baseplate box, or None when the base thickness is zero.
        walls: Left, right, front and back walls (empty when wall height is zero).
        bins: One solid per bin, in layout order.
        grid_guide: Floor guide grid.
    """

    scale: ViewScale
    width: float
    depth: float
    base: BoundingBox3D | None
    walls: tuple[BoundingBox3D, ...]
    bins: tuple[BinSolid, ...]
    grid_guide: GridGuide

    @property
    def drawer_boxes(self) -> tuple[BoundingBox3D, ...]:
        """Baseplate and walls."""
        return ((self.base,) if self.base is not None else ()) + self.walls

    @property
    def all_boxes(self) -> tuple[BoundingBox3D, ...]:
        """Every box in the scene, drawer first."""
        return self.drawer_boxes + tuple(solid.box for solid in self.bins)

    def solid_for(self, bin_id: str) -> BinSolid | None:
        """Look up the solid of a bin by id."""
        return next((s for s in self.bins if s.bin_id == bin_id), None)


class DrawerSceneBuilder:
    """Builds a DrawerScene from grid parameters and bins.

    Physical heights go through ``mm_to_world`` so one millimetre has the
    same world size as in the cell footprint, whatever the grid pitch.
    """

    def __init__(self, cell_px: float = DEFAULT_CELL_PX) -> None:
        self.cell_px = cell_px

    def build(self, grid: GridSpec, bins: Sequence[Bin]) -> DrawerScene:
        """Build the scene.

        Args:
            grid: Drawer and grid parameters.
            bins: Bins to place in the drawer.

        Returns:
            DrawerScene in world units.

        Raises:
            ValueError: If the grid cell size is not positive.
        """
        scale = ViewScale(cell_px=self.cell_px, grid_mm=grid.cell_size_mm)
        cols, rows = grid.cols, grid.rows
        width = cols * self.cell_px
        depth = rows * self.cell_px

        base_t = scale.mm_to_world(max(0.0, grid.base_thickness_mm))
        wall_h = scale.mm_to_world(max(0.0, grid.wall_height_mm))

        base = None
        if base_t > 0:
            base = BoundingBox3D.from_center(
                Position3D(0.0, base_t / 2, 0.0), width, base_t, depth
            )

        walls = self._build_walls(scale, width, depth, base_t, wall_h) if wall_h > 0 else ()

        solids = tuple(
            self._build_bin(b, scale, cols, rows, base_t) for b in bins
        )

        divisions = max(cols, rows)
        logger.debug(
            "Built scene %.1fx%.1f with %d bins", width, depth, len(solids)
        )
        return DrawerScene(
            scale=scale,
            width=width,
            depth=depth,
            base=base,
            walls=walls,
            bins=solids,
            grid_guide=GridGuide(size=divisions * self.cell_px, divisions=divisions),
        )

    def _build_walls(
        self,
        scale: ViewScale,
        width: float,
        depth: float,
        base_t: float,
        wall_h: float,
    ) -> tuple[BoundingBox3D, ...]:
        wall_t = scale.mm_to_world(WALL_THICKNESS_MM)
        y = (base_t + wall_h) / 2
        side_depth = depth + wall_t * 2
        end_width = width + wall_t * 2
        return (
            # Left
            BoundingBox3D.from_center(
                Position3D(-width / 2 - wall_t / 2, y, 0.0), wall_t, wall_h, side_depth
            ),
            # Right
            BoundingBox3D.from_center(
                Position3D(width / 2 + wall_t / 2, y, 0.0), wall_t, wall_h, side_depth
            ),
            # Front
            BoundingBox3D.from_center(
                Position3D(0.0, y, -depth / 2 - wall_t / 2), end_width, wall_h, wall_t
            ),
            # Back
            BoundingBox3D.from_center(
                Position3D(0.0, y, depth / 2 + wall_t / 2), end_width, wall_h, wall_t
            ),
        )

    def _build_bin(
        self,
        b: Bin,
        scale: ViewScale,
        cols: int,
        rows: int,
        base_t: float,
    ) -> BinSolid:
        height = scale.mm_to_world(max(MIN_BIN_HEIGHT_MM, b.height_mm))
        center_x, center_z = cell_center_to_world(
            b.x + b.w / 2, b.y + b.h / 2, cols, rows, self.cell_px
        )
        box = BoundingBox3D.from_center(
            Position3D(center_x, base_t + height / 2, center_z),
            b.w * self.cell_px,
            height,
            b.h * self.cell_px,
        )
        anchor = Position3D(
            center_x, base_t + height + scale.mm_to_world(LABEL_CLEARANCE_MM), center_z
        )
        return BinSolid(
            bin_id=b.id,
            label=b.label,
            color_variant=b.color_variant,
            box=box,
            label_anchor=anchor,
        )
