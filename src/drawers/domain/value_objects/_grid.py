"""Grid model value objects.

The drawer is described in physical millimetres and divided into square
cells. Everything the layout engine does happens in whole cells, so the
derived column/row counts are the only part of the grid the placement logic
ever looks at.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Any

# Standard Gridfinity pitch and the drawer the planner opens with.
DEFAULT_CELL_SIZE_MM = 42.0
DEFAULT_DRAWER_WIDTH_MM = 500.0
DEFAULT_DRAWER_HEIGHT_MM = 350.0
DEFAULT_WALL_HEIGHT_MM = 35.0
DEFAULT_BASE_THICKNESS_MM = 6.0

# Bins shorter than this are raised to it.
MIN_BIN_HEIGHT_MM = 5.0


def cell_count(length_mm: float, cell_size_mm: float) -> int:
    """Number of whole cells that fit along a length, never less than one.

    Degenerate input (zero or negative sizes, a cell larger than the drawer)
    produces a single cell instead of failing.

    Args:
        length_mm: Drawer length along one axis in millimetres.
        cell_size_mm: Grid cell pitch in millimetres.

    Returns:
        The floored cell count, clamped to at least 1.
    """
    if cell_size_mm <= 0 or not math.isfinite(length_mm / cell_size_mm):
        return 1
    return max(1, math.floor(length_mm / cell_size_mm))


@dataclass(frozen=True)
class GridSize:
    """Discrete grid dimensions in cells.

    Attributes:
        cols: Number of cell columns (always >= 1).
        rows: Number of cell rows (always >= 1).
    """

    cols: int
    rows: int

    def __post_init__(self) -> None:
        if self.cols < 1 or self.rows < 1:
            raise ValueError("Grid must have at least one column and one row")

    @property
    def cell_total(self) -> int:
        """Total number of cells in the grid."""
        return self.cols * self.rows


@dataclass(frozen=True)
class GridSpec:
    """Physical drawer and grid parameters.

    A GridSpec is immutable; changing any field means building a new spec
    (see ``with_changes``), which derives its own column and row counts.

    Attributes:
        cell_size_mm: Grid cell pitch in millimetres.
        drawer_width_mm: Inner drawer width in millimetres (columns axis).
        drawer_height_mm: Inner drawer depth in millimetres (rows axis).
        wall_height_mm: Height of the drawer walls drawn in 3D views.
        base_thickness_mm: Thickness of the baseplate drawn in 3D views.
    """

    cell_size_mm: float = DEFAULT_CELL_SIZE_MM
    drawer_width_mm: float = DEFAULT_DRAWER_WIDTH_MM
    drawer_height_mm: float = DEFAULT_DRAWER_HEIGHT_MM
    wall_height_mm: float = DEFAULT_WALL_HEIGHT_MM
    base_thickness_mm: float = DEFAULT_BASE_THICKNESS_MM

    @property
    def cols(self) -> int:
        """Number of whole cells across the drawer width."""
        return cell_count(self.drawer_width_mm, self.cell_size_mm)

    @property
    def rows(self) -> int:
        """Number of whole cells across the drawer depth."""
        return cell_count(self.drawer_height_mm, self.cell_size_mm)

    @property
    def size(self) -> GridSize:
        """Derived grid dimensions."""
        return GridSize(cols=self.cols, rows=self.rows)

    def with_changes(self, **changes: float) -> GridSpec:
        """Return a copy of this spec with the given fields replaced."""
        return replace(self, **changes)

    def describe(self) -> str:
        """One-line human readable summary of drawer and grid."""
        return (
            f"Drawer: {_fmt_mm(self.drawer_width_mm)}×{_fmt_mm(self.drawer_height_mm)} mm"
            f" • Grid: {_fmt_mm(self.cell_size_mm)} mm"
            f" • Cells: {self.cols}×{self.rows}"
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-compatible dictionary."""
        return {
            "cell_size_mm": self.cell_size_mm,
            "drawer_width_mm": self.drawer_width_mm,
            "drawer_height_mm": self.drawer_height_mm,
            "wall_height_mm": self.wall_height_mm,
            "base_thickness_mm": self.base_thickness_mm,
        }


def recompute_grid(spec: GridSpec) -> GridSize:
    """Derive the discrete grid for a spec.

    Pure function of the spec fields: columns and rows are floored and then
    clamped to at least 1.
    """
    return GridSize(
        cols=cell_count(spec.drawer_width_mm, spec.cell_size_mm),
        rows=cell_count(spec.drawer_height_mm, spec.cell_size_mm),
    )


def _fmt_mm(value: float) -> str:
    # 500.0 -> "500", 41.5 -> "41.5"
    return f"{value:g}"


@dataclass(frozen=True)
class CellRect:
    """Axis-aligned integer rectangle in grid space.

    Attributes:
        x: Left column.
        y: Top row.
        w: Width in cells.
        h: Height in cells.
    """

    x: int
    y: int
    w: int
    h: int

    def __post_init__(self) -> None:
        if self.w < 1 or self.h < 1:
            raise ValueError("Rectangle width and height must be at least one cell")

    @property
    def right(self) -> int:
        """Column just past the right edge."""
        return self.x + self.w

    @property
    def bottom(self) -> int:
        """Row just past the bottom edge."""
        return self.y + self.h

    @property
    def area(self) -> int:
        """Area in cells."""
        return self.w * self.h

    def moved_to(self, x: int, y: int) -> CellRect:
        """Same size rectangle with a new top-left cell."""
        return CellRect(x=x, y=y, w=self.w, h=self.h)
