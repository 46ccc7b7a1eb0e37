"""Pydantic schema for drawer layout configuration files.

A configuration file describes a drawer, the view scale, and a list of bins
to place. It is not a saved layout: bins are replayed through the layout
engine in order, exactly as if a user had added them one by one.
"""

from pydantic import BaseModel, ConfigDict, Field

from drawers.domain.services.coordinates import DEFAULT_CELL_PX
from drawers.domain.value_objects import (
    DEFAULT_BASE_THICKNESS_MM,
    DEFAULT_CELL_SIZE_MM,
    DEFAULT_DRAWER_HEIGHT_MM,
    DEFAULT_DRAWER_WIDTH_MM,
    DEFAULT_WALL_HEIGHT_MM,
)


class GridConfig(BaseModel):
    """Drawer dimensions and grid pitch, all in millimetres.

    Attributes:
        cell_size_mm: Grid cell pitch (must be positive)
        drawer_width_mm: Inner drawer width
        drawer_height_mm: Inner drawer depth
        wall_height_mm: Drawer wall height shown in 3D output
        base_thickness_mm: Baseplate thickness shown in 3D output
    """

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    cell_size_mm: float = Field(default=DEFAULT_CELL_SIZE_MM, gt=0, le=1000)
    drawer_width_mm: float = Field(default=DEFAULT_DRAWER_WIDTH_MM, gt=0, le=10000)
    drawer_height_mm: float = Field(default=DEFAULT_DRAWER_HEIGHT_MM, gt=0, le=10000)
    wall_height_mm: float = Field(default=DEFAULT_WALL_HEIGHT_MM, ge=0, le=1000)
    base_thickness_mm: float = Field(default=DEFAULT_BASE_THICKNESS_MM, ge=0, le=100)


class ViewConfig(BaseModel):
    """Scale used by the image exporters.

    Attributes:
        cell_px: Pixels (2D) or world units (3D) per grid cell
    """

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    cell_px: float = Field(default=DEFAULT_CELL_PX, gt=0, le=500)


class BinConfig(BaseModel):
    """A bin to add to the layout.

    When ``x`` and ``y`` are given, the bin is moved there after being
    placed; the move is clamped and collision-checked like a drag.

    Attributes:
        w: Width in cells
        h: Height (depth) in cells
        height_mm: Physical bin height
        label: Display label
        x: Optional target column
        y: Optional target row
    """

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    w: int = Field(default=1, ge=1, le=100)
    h: int = Field(default=1, ge=1, le=100)
    height_mm: float = Field(default=42.0, gt=0, le=1000)
    label: str = Field(default="Bin", max_length=200)
    x: int | None = Field(default=None, ge=0)
    y: int | None = Field(default=None, ge=0)


class LayoutConfiguration(BaseModel):
    """Root configuration model.

    Attributes:
        grid: Drawer and grid parameters
        view: Image export scale
        bins: Bins to place, in order
    """

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    grid: GridConfig = Field(default_factory=GridConfig)
    view: ViewConfig = Field(default_factory=ViewConfig)
    bins: list[BinConfig] = Field(default_factory=list, max_length=1000)
