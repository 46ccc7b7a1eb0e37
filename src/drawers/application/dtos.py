"""Data transfer objects for the application layer."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from drawers.domain.entities import Bin
from drawers.domain.value_objects import MIN_BIN_HEIGHT_MM, GridSpec

DEFAULT_BIN_LABEL = "Bin"
DEFAULT_BIN_HEIGHT_MM = 42.0


@dataclass(frozen=True)
class BinRequest:
    """Input for adding a bin.

    Values are normalized the way the editor's form inputs are: sizes are
    raised to one cell, the height to the minimum bin height, and a blank
    label becomes "Bin".

    Attributes:
        w: Requested width in cells.
        h: Requested height in cells.
        height_mm: Requested physical height in millimetres.
        label: Display label.
    """

    w: int = 1
    h: int = 1
    height_mm: float = DEFAULT_BIN_HEIGHT_MM
    label: str = DEFAULT_BIN_LABEL

    def normalized(self) -> BinRequest:
        """Return a copy with every field inside its legal range."""
        return BinRequest(
            w=max(1, int(self.w)),
            h=max(1, int(self.h)),
            height_mm=max(MIN_BIN_HEIGHT_MM, float(self.height_mm)),
            label=(self.label or "").strip() or DEFAULT_BIN_LABEL,
        )


@dataclass(frozen=True)
class LayoutSnapshot:
    """Read-only export record of a layout.

    This is the only interchange format of the planner. It has no version
    field.

    Attributes:
        grid_spec: Drawer and grid parameters.
        bins: Copies of the bins, in insertion order.
        selected_id: Id of the selected bin, if any (not exported).
        client_view: Presentation flag (not exported).
    """

    grid_spec: GridSpec
    bins: tuple[Bin, ...] = field(default_factory=tuple)
    selected_id: str | None = None
    client_view: bool = False

    @property
    def cols(self) -> int:
        return self.grid_spec.cols

    @property
    def rows(self) -> int:
        return self.grid_spec.rows

    def to_dict(self) -> dict[str, Any]:
        """Convert to the exported dictionary shape."""
        return {
            "grid_spec": self.grid_spec.to_dict(),
            "cols": self.cols,
            "rows": self.rows,
            "bins": [b.to_dict() for b in self.bins],
        }

    def to_json(self, indent: int = 2) -> str:
        """Serialize to JSON text.

        Raises:
            ValueError: If a grid value is NaN or infinite.
        """
        return json.dumps(
            self.to_dict(), indent=indent, ensure_ascii=False, allow_nan=False
        )
