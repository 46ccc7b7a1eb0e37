"""Coordinate mapping between grid space and view spaces.

Views never talk to each other; each one translates its raw input through
these functions and talks to the layout state in cells. Two view spaces are
covered:

- 2D pixel space: a top-down canvas where one cell is ``cell_px`` pixels.
- 3D world space: Y-up, centered on the drawer midpoint, with one cell
  spanning ``cell_px`` world units along X and Z.

All functions are pure.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..value_objects import DEFAULT_CELL_SIZE_MM

__all__ = [
    "DEFAULT_CELL_PX",
    "ViewScale",
    "cell_center_to_world",
    "cell_to_pixel",
    "mm_to_world",
    "pixel_to_cell",
    "round_half_up",
    "world_to_cell",
    "world_to_top_left_cell",
]

# Visual scale of the top-down view.
DEFAULT_CELL_PX = 28.0


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity.

    Python's ``round`` rounds halves to even, which would make a drag of
    exactly half a cell register on some cells and not others.
    """
    return math.floor(value + 0.5)


def cell_to_pixel(cell: float, cell_px: float) -> float:
    """Convert a cell coordinate to pixels."""
    return cell * cell_px


def pixel_to_cell(px: float, cell_px: float) -> int:
    """Convert a pixel distance to the nearest whole number of cells.

    Rounding rather than truncation: a drag has to cross half a cell before
    it registers as a one-cell move.
    """
    return round_half_up(px / cell_px)


def mm_to_world(value_mm: float, cell_px: float, grid_mm: float) -> float:
    """Convert a physical length to world units.

    One cell is ``grid_mm`` millimetres and ``cell_px`` world units, so the
    ratio stays the same whatever grid pitch is configured.
    """
    return value_mm * cell_px / grid_mm


def cell_center_to_world(
    cell_x: float,
    cell_y: float,
    cols: int,
    rows: int,
    cell_px: float,
) -> tuple[float, float]:
    """Map a (possibly fractional) cell coordinate to world X/Z.

    The grid is centered at the world origin; cell columns run along +X and
    cell rows along +Z.

    Returns:
        Tuple of (world_x, world_z).
    """
    world_x = (cell_x - cols / 2) * cell_px
    world_z = (cell_y - rows / 2) * cell_px
    return world_x, world_z


def world_to_cell(
    world_x: float,
    world_z: float,
    cols: int,
    rows: int,
    cell_px: float,
) -> tuple[float, float]:
    """Inverse of ``cell_center_to_world``.

    Returns fractional cell coordinates; callers round or floor as needed.

    Returns:
        Tuple of (cell_x, cell_y).
    """
    cell_x = world_x / cell_px + cols / 2
    cell_y = world_z / cell_px + rows / 2
    return cell_x, cell_y


def world_to_top_left_cell(
    world_x: float,
    world_z: float,
    w: int,
    h: int,
    cols: int,
    rows: int,
    cell_px: float,
) -> tuple[int, int]:
    """Recover the top-left cell of a ``w`` x ``h`` bin from its world center.

    Used by 3D dragging, where the hit point tracks the bin center rather
    than its corner.
    """
    cell_x, cell_y = world_to_cell(world_x, world_z, cols, rows, cell_px)
    return round_half_up(cell_x - w / 2), round_half_up(cell_y - h / 2)


@dataclass(frozen=True)
class ViewScale:
    """Scale shared by the 2D and 3D views.

    Attributes:
        cell_px: Pixels (2D) or world units (3D) per cell.
        grid_mm: Physical cell pitch in millimetres.
    """

    cell_px: float = DEFAULT_CELL_PX
    grid_mm: float = DEFAULT_CELL_SIZE_MM

    def __post_init__(self) -> None:
        if self.cell_px <= 0:
            raise ValueError("cell_px must be positive")
        if self.grid_mm <= 0:
            raise ValueError("grid_mm must be positive")

    def mm_to_world(self, value_mm: float) -> float:
        """Convert millimetres to world units at this scale."""
        return mm_to_world(value_mm, self.cell_px, self.grid_mm)

    def to_pixels(self, cell: float) -> float:
        """Convert cells to pixels at this scale."""
        return cell_to_pixel(cell, self.cell_px)

    def to_cells(self, px: float) -> int:
        """Convert a pixel distance to whole cells at this scale."""
        return pixel_to_cell(px, self.cell_px)
