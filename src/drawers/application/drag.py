"""Drag sessions that turn continuous pointer input into bin moves.

A view starts a session when the pointer goes down on a bin, feeds it every
pointer position while the button is held, and ends it on release. Each
update is validated and committed on its own, so only valid intermediate
positions are ever visible; abandoning a drag simply leaves the bin at its
last committed position.
"""

from __future__ import annotations

from drawers.domain.services import (
    DEFAULT_CELL_PX,
    cell_center_to_world,
    pixel_to_cell,
    world_to_top_left_cell,
)

from .layout_state import BinNotFoundError, LayoutState
from .results import MoveResult


class PointerDragSession:
    """Drag of a bin in the 2D top-down view.

    Pixel deltas are measured from where the pointer went down and added
    to the bin's position at that moment, rather than accumulated step by
    step, so rejected steps do not drift the bin away from the pointer.
    """

    def __init__(
        self,
        state: LayoutState,
        bin_id: str,
        start_px: tuple[float, float],
        cell_px: float = DEFAULT_CELL_PX,
    ) -> None:
        """Start dragging a bin and select it.

        Args:
            state: Layout to move the bin in.
            bin_id: Bin under the pointer.
            start_px: Pointer position (x, y) in pixels when pressed.
            cell_px: Pixels per cell of the view.

        Raises:
            BinNotFoundError: If the bin does not exist.
        """
        bin = state.get_bin(bin_id)
        if bin is None:
            raise BinNotFoundError(bin_id)
        self.state = state
        self.bin_id = bin_id
        self.cell_px = cell_px
        self.start_px = start_px
        self.origin = (bin.x, bin.y)
        self.active = True
        state.select(bin_id)

    def update(self, pointer_px: tuple[float, float]) -> MoveResult | None:
        """Move the bin to follow the pointer.

        Returns:
            The move result, or None if the session has ended.
        """
        if not self.active:
            return None
        dx = pointer_px[0] - self.start_px[0]
        dy = pointer_px[1] - self.start_px[1]
        nx = self.origin[0] + pixel_to_cell(dx, self.cell_px)
        ny = self.origin[1] + pixel_to_cell(dy, self.cell_px)
        return self.state.move_bin(self.bin_id, nx, ny)

    def end(self) -> None:
        """Release the pointer."""
        self.active = False


class WorldDragSession:
    """Drag of a bin in the 3D view along the drawer floor plane.

    The offset between the bin center and the point where it was grabbed
    is kept for the whole drag so the bin does not jump under the pointer.
    """

    def __init__(
        self,
        state: LayoutState,
        bin_id: str,
        grab_point: tuple[float, float],
        cell_px: float = DEFAULT_CELL_PX,
    ) -> None:
        """Start dragging a bin and select it.

        Args:
            state: Layout to move the bin in.
            bin_id: Bin hit by the pointer ray.
            grab_point: World (x, z) where the ray met the floor plane.
            cell_px: World units per cell.

        Raises:
            BinNotFoundError: If the bin does not exist.
        """
        bin = state.get_bin(bin_id)
        if bin is None:
            raise BinNotFoundError(bin_id)
        self.state = state
        self.bin_id = bin_id
        self.cell_px = cell_px
        center_x, center_z = cell_center_to_world(
            bin.x + bin.w / 2, bin.y + bin.h / 2, state.cols, state.rows, cell_px
        )
        self.offset = (center_x - grab_point[0], center_z - grab_point[1])
        self.active = True
        state.select(bin_id)

    def update(self, hit_point: tuple[float, float]) -> MoveResult | None:
        """Move the bin so its center follows the floor-plane hit point.

        Returns:
            The move result, or None if the session has ended or the bin
            has been removed meanwhile.
        """
        if not self.active:
            return None
        bin = self.state.get_bin(self.bin_id)
        if bin is None:
            return None
        world_x = hit_point[0] + self.offset[0]
        world_z = hit_point[1] + self.offset[1]
        nx, ny = world_to_top_left_cell(
            world_x, world_z, bin.w, bin.h, self.state.cols, self.state.rows, self.cell_px
        )
        return self.state.move_bin(self.bin_id, nx, ny)

    def end(self) -> None:
        """Release the pointer."""
        self.active = False
