"""JSON exporter for layout snapshots.

The JSON document is the planner's only interchange format:

    {
      "grid_spec": {"cell_size_mm": 42, "drawer_width_mm": 500, ...},
      "cols": 11,
      "rows": 8,
      "bins": [{"id": "...", "x": 0, "y": 0, "w": 2, "h": 2,
                "height_mm": 42, "label": "Screws"}]
    }

Selection and the client view flag are not part of it.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from drawers.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from drawers.application.dtos import LayoutSnapshot

DEFAULT_FILENAME = "gridfinity-layout.json"


@ExporterRegistry.register("json")
class SnapshotJsonExporter:
    """Exports a layout snapshot as indented JSON.

    Attributes:
        format_name: "json"
        file_extension: "json"
        indent: Indentation passed to ``json.dumps``.
    """

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"
    media_type: ClassVar[str] = "application/json"
    accepted_options: ClassVar[tuple[str, ...]] = ("indent",)

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def export(self, snapshot: LayoutSnapshot, path: Path) -> None:
        """Write the snapshot JSON to a file."""
        path.write_text(self.export_string(snapshot), encoding="utf-8")

    def export_string(self, snapshot: LayoutSnapshot) -> str:
        return snapshot.to_json(indent=self.indent)

    def export_bytes(self, snapshot: LayoutSnapshot) -> bytes:
        return self.export_string(snapshot).encode("utf-8")
