"""STL format exporter for drawer layouts."""

from __future__ import annotations

import io
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from stl import Mode

from drawers.domain.services import DEFAULT_CELL_PX
from drawers.infrastructure.exporters.base import ExporterRegistry
from drawers.infrastructure.stl_exporter import StlExporter as StlExporterImpl
from drawers.infrastructure.stl_exporter import StlMeshBuilder

if TYPE_CHECKING:
    from drawers.application.dtos import LayoutSnapshot


@ExporterRegistry.register("stl")
class StlLayoutExporter:
    """Exports drawer layouts to STL format for 3D visualization.

    Wraps the StlExporter implementation to conform to the Exporter
    protocol. The mesh holds the baseplate, the walls and one box per bin,
    in world units of ``cell_px`` per cell.

    Attributes:
        format_name: "stl"
        file_extension: "stl"
    """

    format_name: ClassVar[str] = "stl"
    file_extension: ClassVar[str] = "stl"
    media_type: ClassVar[str] = "model/stl"
    accepted_options: ClassVar[tuple[str, ...]] = ("cell_px", "include_drawer")

    def __init__(
        self,
        mesh_builder: StlMeshBuilder | None = None,
        cell_px: float = DEFAULT_CELL_PX,
        include_drawer: bool = True,
    ) -> None:
        """Initialize the STL exporter.

        Args:
            mesh_builder: Optional mesh builder for dependency injection.
            cell_px: World units per grid cell (default 28).
            include_drawer: Whether to include the baseplate and walls.
        """
        self._exporter = StlExporterImpl(mesh_builder=mesh_builder, cell_px=cell_px)
        self._include_drawer = include_drawer

    def export(self, snapshot: LayoutSnapshot, path: Path) -> None:
        """Export the layout to a binary STL file."""
        self._exporter.export_to_file(
            snapshot.grid_spec,
            snapshot.bins,
            filepath=path,
            include_drawer=self._include_drawer,
        )

    def export_bytes(self, snapshot: LayoutSnapshot) -> bytes:
        """Export the layout as binary STL content."""
        combined = self._exporter.export(
            snapshot.grid_spec, snapshot.bins, include_drawer=self._include_drawer
        )
        buffer = io.BytesIO()
        combined.save("drawer.stl", fh=buffer, mode=Mode.BINARY)
        return buffer.getvalue()

    def export_string(self, snapshot: LayoutSnapshot) -> str:
        """STL format does not support string export.

        Raises:
            NotImplementedError: Always raises this exception.
        """
        raise NotImplementedError(
            "STL format is binary and does not support string export. "
            "Use export() or export_bytes() instead."
        )


__all__ = ["StlLayoutExporter", "StlExporterImpl", "StlMeshBuilder"]
