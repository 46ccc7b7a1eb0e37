"""Output formatters for drawer layouts."""

from __future__ import annotations

from drawers.application.dtos import LayoutSnapshot
from drawers.domain.entities import Bin


class LayoutDiagramFormatter:
    """Formats ASCII diagrams of drawer layouts.

    Each cell is drawn as ``chars_per_cell`` characters wide and one line
    tall. Bins are outlined with ``+``, ``-`` and ``|`` and filled with the
    first letter of their label; empty cells show ``.``.
    """

    def __init__(self, chars_per_cell: int = 3) -> None:
        if chars_per_cell < 1:
            raise ValueError("chars_per_cell must be at least 1")
        self.chars_per_cell = chars_per_cell

    def format(self, snapshot: LayoutSnapshot) -> str:
        """Generate an ASCII diagram of the layout."""
        cols, rows = snapshot.cols, snapshot.rows
        width = cols * self.chars_per_cell

        lines = [
            "DRAWER LAYOUT DIAGRAM",
            "=" * max(width + 2, 21),
            "",
        ]

        grid = [["." for _ in range(width)] for _ in range(rows)]
        for b in snapshot.bins:
            self._draw_bin(grid, b)

        border = "+" + "-" * width + "+"
        lines.append(border)
        for row in grid:
            lines.append("|" + "".join(row) + "|")
        lines.append(border)

        lines.append("")
        lines.append(snapshot.grid_spec.describe())
        used = sum(b.w * b.h for b in snapshot.bins)
        lines.append(f"Bins: {len(snapshot.bins)}")
        lines.append(f"Cells used: {used}/{cols * rows}")

        return "\n".join(lines)

    def _draw_bin(self, grid: list[list[str]], b: Bin) -> None:
        """Draw one bin on the character grid."""
        x1 = b.x * self.chars_per_cell
        x2 = (b.x + b.w) * self.chars_per_cell - 1
        y1 = b.y
        y2 = b.y + b.h - 1
        fill = (b.label[:1] or "#").upper()

        for y in range(y1, y2 + 1):
            for x in range(x1, x2 + 1):
                grid[y][x] = fill

        if x2 - x1 < 1:
            return

        # Sides, then corners on top
        for y in range(y1, y2 + 1):
            grid[y][x1] = "|"
            grid[y][x2] = "|"
        if y2 > y1:
            for x in range(x1 + 1, x2):
                grid[y1][x] = "-"
                grid[y2][x] = "-"
            for x, y in ((x1, y1), (x2, y1), (x1, y2), (x2, y2)):
                grid[y][x] = "+"


class BinListFormatter:
    """Formats the bin list shown next to the editor."""

    def format(self, snapshot: LayoutSnapshot) -> str:
        if not snapshot.bins:
            return "No bins."

        lines = ["BINS", "-" * 40]
        for b in snapshot.bins:
            marker = "*" if b.id == snapshot.selected_id else " "
            lines.append(f"{marker} {self.format_bin(b)}")
        return "\n".join(lines)

    def format_bin(self, b: Bin) -> str:
        """One-line description of a bin."""
        return (
            f"{b.label} {b.w}×{b.h} {b.tag}, Pos: ({b.x}, {b.y}) • "
            f"Height: {b.height_mm:g}mm"
        )
