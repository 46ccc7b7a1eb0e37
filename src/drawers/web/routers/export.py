"""Export format endpoints."""

from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import Response

from drawers.infrastructure.exporters import (
    DEFAULT_FILENAME,
    ExporterRegistry,
    create_exporter,
)
from drawers.web.dependencies import CellPxDep, LayoutStateDep
from drawers.web.exceptions import UnsupportedFormatError
from drawers.web.schemas import ExportFormatsSchema

router = APIRouter(prefix="/export", tags=["export"])


@router.get("/formats", response_model=ExportFormatsSchema)
async def list_export_formats() -> ExportFormatsSchema:
    """List all available export formats."""
    return ExportFormatsSchema(formats=ExporterRegistry.available_formats())


@router.get("/{format_name}")
async def export_layout(
    format_name: str,
    state: LayoutStateDep,
    default_cell_px: CellPxDep,
    cell_px: float | None = Query(
        default=None, gt=0, allow_inf_nan=False, description="Pixels per cell"
    ),
) -> Response:
    """Export the current layout as a file download.

    Args:
        format_name: Registered exporter name (json, svg, stl).
        cell_px: Optional scale override for image and mesh exports.

    Raises:
        UnsupportedFormatError: If the format is not registered (400).
    """
    if not ExporterRegistry.is_registered(format_name):
        raise UnsupportedFormatError(format_name, ExporterRegistry.available_formats())

    exporter = create_exporter(format_name, cell_px=cell_px or default_cell_px)
    snapshot = state.export_snapshot()
    try:
        content = exporter.export_bytes(snapshot)
    except ValueError as e:
        raise HTTPException(
            status_code=422,
            detail={"error": str(e), "error_type": "export"},
        )

    if format_name == "json":
        filename = DEFAULT_FILENAME
    else:
        filename = f"gridfinity-layout.{exporter.file_extension}"

    return Response(
        content=content,
        media_type=exporter.media_type,
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )
