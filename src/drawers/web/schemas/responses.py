"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from drawers.domain.entities import Bin


class GridSpecSchema(BaseModel):
    """Drawer and grid parameters."""

    cell_size_mm: float = Field(..., description="Grid cell pitch in mm")
    drawer_width_mm: float = Field(..., description="Inner drawer width in mm")
    drawer_height_mm: float = Field(..., description="Inner drawer depth in mm")
    wall_height_mm: float = Field(..., description="Wall height in mm")
    base_thickness_mm: float = Field(..., description="Baseplate thickness in mm")


class BinSchema(BaseModel):
    """A placed bin."""

    id: str = Field(..., description="Opaque bin id")
    x: int = Field(..., description="Left column")
    y: int = Field(..., description="Top row")
    w: int = Field(..., description="Width in cells")
    h: int = Field(..., description="Depth in cells")
    height_mm: float = Field(..., description="Bin height in mm")
    label: str = Field(..., description="Display label")
    color_variant: bool = Field(default=False, description="Alternate colour")
    tag: str = Field(..., description="Short display tag")

    @classmethod
    def from_bin(cls, b: Bin) -> "BinSchema":
        return cls(
            id=b.id,
            x=b.x,
            y=b.y,
            w=b.w,
            h=b.h,
            height_mm=b.height_mm,
            label=b.label,
            color_variant=b.color_variant,
            tag=b.tag,
        )


class LayoutSchema(BaseModel):
    """Response describing the whole layout."""

    grid_spec: GridSpecSchema = Field(..., description="Drawer and grid parameters")
    cols: int = Field(..., description="Grid columns")
    rows: int = Field(..., description="Grid rows")
    info: str = Field(..., description="One-line grid summary")
    bins: list[BinSchema] = Field(default_factory=list, description="Bins in order")
    selected_id: str | None = Field(default=None, description="Selected bin id")
    client_view: bool = Field(default=False, description="Client view flag")


class ConfigureResponse(BaseModel):
    """Response for a grid change."""

    cols: int = Field(..., description="New grid columns")
    rows: int = Field(..., description="New grid rows")
    dropped: list[str] = Field(
        default_factory=list, description="Ids of bins removed by reconciliation"
    )


class MoveResponse(BaseModel):
    """Response for a move request."""

    committed: bool = Field(..., description="Whether the move was applied")
    x: int = Field(..., description="Committed left column")
    y: int = Field(..., description="Committed top row")
    rejection: str | None = Field(default=None, description="Reason for refusal")


class SelectionSchema(BaseModel):
    """Current selection."""

    selected_id: str | None = Field(default=None, description="Selected bin id")


class ClientViewSchema(BaseModel):
    """Current presentation palette."""

    enabled: bool = Field(..., description="Whether client view is on")


class ReplayIssueSchema(BaseModel):
    """A configured bin that could not be placed as asked."""

    path: str = Field(..., description="JSON path of the bin entry")
    message: str = Field(..., description="What happened")
    suggestion: str | None = Field(default=None, description="Suggested fix")


class LoadConfigResponse(BaseModel):
    """Response for loading a configuration."""

    layout: LayoutSchema = Field(..., description="Resulting layout")
    issues: list[ReplayIssueSchema] = Field(
        default_factory=list, description="Bins skipped or moved"
    )


class ExportFormatsSchema(BaseModel):
    """Response for available export formats."""

    formats: list[str] = Field(..., description="Available format names")


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error type identifier")
    details: list[dict[str, Any]] | dict[str, Any] | None = Field(
        default=None, description="Additional error details"
    )
