"""SVG exporter for top-down layout images.

This module provides an SVG exporter that wraps TopViewRenderer to draw the
layout as the 2D editor shows it.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from drawers.domain.services import DEFAULT_CELL_PX
from drawers.infrastructure.exporters.base import ExporterRegistry
from drawers.infrastructure.top_view_renderer import TopViewRenderer

if TYPE_CHECKING:
    from drawers.application.dtos import LayoutSnapshot


@ExporterRegistry.register("svg")
class SvgExporter:
    """SVG exporter for the top-down layout view.

    Attributes:
        format_name: Identifier for this export format.
        file_extension: File extension for SVG files.
    """

    format_name: ClassVar[str] = "svg"
    file_extension: ClassVar[str] = "svg"
    media_type: ClassVar[str] = "image/svg+xml"
    accepted_options: ClassVar[tuple[str, ...]] = ("cell_px", "show_labels", "show_grid")

    def __init__(
        self,
        cell_px: float = DEFAULT_CELL_PX,
        show_labels: bool = True,
        show_grid: bool = True,
    ) -> None:
        """Initialize the SVG exporter.

        Args:
            cell_px: Pixels per grid cell (default 28).
            show_labels: Whether to draw bin labels (default True).
            show_grid: Whether to draw grid lines (default True).
        """
        self.renderer = TopViewRenderer(
            cell_px=cell_px,
            show_labels=show_labels,
            show_grid=show_grid,
        )

    def export(self, snapshot: LayoutSnapshot, path: Path) -> None:
        """Export the SVG image to a file."""
        path.write_text(self.export_string(snapshot), encoding="utf-8")

    def export_string(self, snapshot: LayoutSnapshot) -> str:
        return self.renderer.render_svg(snapshot)

    def export_bytes(self, snapshot: LayoutSnapshot) -> bytes:
        return self.export_string(snapshot).encode("utf-8")
