"""Exporter framework for drawer layout snapshots.

This package provides a unified exporter framework with:
- Exporter Protocol: Defines the interface for all exporters
- ExporterRegistry: Central registry for format discovery
- ExportManager: Coordinates multi-format export operations

Registered exporters:
- json: Layout snapshot, the planner's interchange format
- stl: STL mesh of the drawer and its bins
- svg: Top-down image of the layout

Usage:
    from drawers.infrastructure.exporters import ExportManager, ExporterRegistry

    # List available formats
    formats = ExporterRegistry.available_formats()

    # Export to multiple formats
    manager = ExportManager(output_dir=Path("./output"), cell_px=28)
    results = manager.export_all(["json", "svg", "stl"], snapshot, project_name="drawer")
"""

from drawers.infrastructure.exporters.base import (
    Exporter,
    ExporterRegistry,
    ExportManager,
    create_exporter,
)
from drawers.infrastructure.exporters.snapshot_json import (
    DEFAULT_FILENAME,
    SnapshotJsonExporter,
)
from drawers.infrastructure.exporters.stl import StlLayoutExporter
from drawers.infrastructure.exporters.svg import SvgExporter

__all__ = [
    "DEFAULT_FILENAME",
    "ExportManager",
    "Exporter",
    "ExporterRegistry",
    "SnapshotJsonExporter",
    "StlLayoutExporter",
    "SvgExporter",
    "create_exporter",
]
