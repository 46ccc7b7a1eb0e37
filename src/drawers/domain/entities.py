"""Domain entities for drawer layouts."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from typing import Any

from .value_objects import MIN_BIN_HEIGHT_MM, CellRect


def new_bin_id() -> str:
    """Generate an opaque unique bin identifier."""
    return uuid.uuid4().hex


@dataclass(eq=False)
class Bin:
    """A rectangular storage bin placed on the drawer grid.

    Identity is the ``id``: two bins are never the same entity even when
    every other field matches. Only the position (``x``, ``y``) changes after
    creation, and only through the layout state.

    Attributes:
        w: Width in cells.
        h: Height (depth) in cells.
        x: Left column of the bin.
        y: Top row of the bin.
        height_mm: Physical bin height in millimetres.
        label: Display label.
        color_variant: Whether the bin is drawn with the alternate colour.
        id: Opaque unique identifier.
    """

    w: int
    h: int
    x: int = 0
    y: int = 0
    height_mm: float = 42.0
    label: str = "Bin"
    color_variant: bool = False
    id: str = field(default_factory=new_bin_id)

    def __post_init__(self) -> None:
        if self.w < 1 or self.h < 1:
            raise ValueError("Bin width and height must be at least one cell")
        if self.height_mm < MIN_BIN_HEIGHT_MM:
            raise ValueError(f"Bin height must be at least {MIN_BIN_HEIGHT_MM:g} mm")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bin):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    @property
    def rect(self) -> CellRect:
        """Cells occupied by this bin."""
        return CellRect(x=self.x, y=self.y, w=self.w, h=self.h)

    @property
    def tag(self) -> str:
        """Short display tag derived from the id."""
        return f"#{self.id[:4]}"

    def copy(self) -> Bin:
        """Detached copy with the same id."""
        return replace(self)

    def to_dict(self) -> dict[str, Any]:
        """Export fields (the colour variant is presentation-only)."""
        return {
            "id": self.id,
            "x": self.x,
            "y": self.y,
            "w": self.w,
            "h": self.h,
            "height_mm": self.height_mm,
            "label": self.label,
        }
