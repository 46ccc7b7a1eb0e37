"""Infrastructure layer - exporters, renderers and text formatters."""

from drawers.infrastructure.exporters import (
    ExportManager,
    ExporterRegistry,
    create_exporter,
)
from drawers.infrastructure.formatters import BinListFormatter, LayoutDiagramFormatter
from drawers.infrastructure.stl_exporter import StlExporter, StlMeshBuilder
from drawers.infrastructure.top_view_renderer import TopViewRenderer

__all__ = [
    "BinListFormatter",
    "ExportManager",
    "ExporterRegistry",
    "LayoutDiagramFormatter",
    "StlExporter",
    "StlMeshBuilder",
    "TopViewRenderer",
    "create_exporter",
]
