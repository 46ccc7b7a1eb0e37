"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from drawers.domain.value_objects import (
    DEFAULT_BASE_THICKNESS_MM,
    DEFAULT_CELL_SIZE_MM,
    DEFAULT_DRAWER_HEIGHT_MM,
    DEFAULT_DRAWER_WIDTH_MM,
    DEFAULT_WALL_HEIGHT_MM,
)


class GridSpecRequest(BaseModel):
    """Request for changing the drawer and grid parameters.

    Sizes are not range-checked beyond being numbers: degenerate values
    collapse the grid to a single cell rather than failing. NaN and
    infinities are rejected.
    """

    model_config = ConfigDict(allow_inf_nan=False)

    cell_size_mm: float = Field(
        default=DEFAULT_CELL_SIZE_MM, description="Grid cell pitch in mm"
    )
    drawer_width_mm: float = Field(
        default=DEFAULT_DRAWER_WIDTH_MM, description="Inner drawer width in mm"
    )
    drawer_height_mm: float = Field(
        default=DEFAULT_DRAWER_HEIGHT_MM, description="Inner drawer depth in mm"
    )
    wall_height_mm: float = Field(
        default=DEFAULT_WALL_HEIGHT_MM, ge=0, description="Wall height in mm"
    )
    base_thickness_mm: float = Field(
        default=DEFAULT_BASE_THICKNESS_MM, ge=0, description="Baseplate thickness in mm"
    )


class AddBinRequest(BaseModel):
    """Request for adding a bin at the first free position."""

    model_config = ConfigDict(allow_inf_nan=False)

    w: int = Field(default=1, description="Width in cells (raised to 1)")
    h: int = Field(default=1, description="Depth in cells (raised to 1)")
    height_mm: float = Field(default=42.0, description="Bin height in mm (raised to 5)")
    label: str = Field(default="Bin", max_length=200, description="Display label")


class MoveBinRequest(BaseModel):
    """Request for moving a bin to a top-left cell."""

    x: int = Field(..., description="Proposed left column (clamped to the grid)")
    y: int = Field(..., description="Proposed top row (clamped to the grid)")


class SelectionRequest(BaseModel):
    """Request for changing the selection."""

    bin_id: str | None = Field(default=None, description="Bin to select, or null")


class ClientViewRequest(BaseModel):
    """Request for switching the presentation palette."""

    enabled: bool = Field(..., description="Whether client view is on")


class LoadConfigRequest(BaseModel):
    """Request for replacing the layout with a configuration."""

    config: dict[str, Any] = Field(..., description="Layout configuration JSON")
