"""Top-down rendering of drawer layouts.

This module provides SVG rendering of a layout as seen from above: the grid,
one rectangle per bin with its label, size and short tag, and the current
selection.
"""

from __future__ import annotations

from html import escape

from drawers.application.dtos import LayoutSnapshot
from drawers.domain.entities import Bin
from drawers.domain.services import DEFAULT_CELL_PX, cell_to_pixel

BIN_FILL = "#2a72ff"  # Blue
BIN_FILL_ALT = "#20c997"  # Teal, for every other bin
BIN_FILL_CLIENT = "#3a475a"  # Slate, client view
GRID_LINE = "#22314a"
DRAWER_FILL = "#0f1522"
SELECTED_STROKE = "#ffd43b"  # Yellow


class TopViewRenderer:
    """Renders a layout snapshot as an SVG top view.

    Every coordinate goes through ``cell_to_pixel`` so the image matches the
    interactive 2D editor at the same ``cell_px``.

    Attributes:
        cell_px: Pixels per grid cell.
        header_height: Pixels reserved above the grid for the summary line.
        show_labels: Whether to draw label, size and tag text in each bin.
        show_grid: Whether to draw grid lines.
    """

    def __init__(
        self,
        cell_px: float = DEFAULT_CELL_PX,
        header_height: float = 24.0,
        show_labels: bool = True,
        show_grid: bool = True,
    ) -> None:
        self.cell_px = cell_px
        self.header_height = header_height
        self.show_labels = show_labels
        self.show_grid = show_grid

    def render_svg(self, snapshot: LayoutSnapshot) -> str:
        """Generate the SVG document for a snapshot.

        Args:
            snapshot: Layout to draw. Its ``selected_id`` and ``client_view``
                control highlighting and colours.

        Returns:
            SVG string.
        """
        grid_w = cell_to_pixel(snapshot.cols, self.cell_px)
        grid_h = cell_to_pixel(snapshot.rows, self.cell_px)
        top = self.header_height

        parts: list[str] = [
            f'<svg width="{_num(grid_w)}" height="{_num(grid_h + top)}" '
            f'xmlns="http://www.w3.org/2000/svg" '
            f'font-family="sans-serif">',
            "",
            "  <!-- Header -->",
            f'  <text x="4" y="{_num(top * 0.7)}" font-size="12" fill="#000000">'
            f"{escape(snapshot.grid_spec.describe())}</text>",
            "",
            "  <!-- Drawer floor -->",
            f'  <rect x="0" y="{_num(top)}" width="{_num(grid_w)}" '
            f'height="{_num(grid_h)}" fill="{DRAWER_FILL}"/>',
        ]

        if self.show_grid:
            parts.append("")
            parts.append("  <!-- Grid -->")
            parts.append(self._render_grid(snapshot.cols, snapshot.rows, top))

        parts.append("")
        parts.append("  <!-- Bins -->")
        for b in snapshot.bins:
            parts.append(
                self._render_bin(
                    b,
                    top,
                    selected=b.id == snapshot.selected_id,
                    client_view=snapshot.client_view,
                )
            )

        parts.append("")
        parts.append("</svg>")
        return "\n".join(parts)

    def _render_grid(self, cols: int, rows: int, top: float) -> str:
        width = cell_to_pixel(cols, self.cell_px)
        height = cell_to_pixel(rows, self.cell_px)
        lines: list[str] = []
        for c in range(cols + 1):
            x = cell_to_pixel(c, self.cell_px)
            lines.append(
                f'  <line x1="{_num(x)}" y1="{_num(top)}" x2="{_num(x)}" '
                f'y2="{_num(top + height)}" stroke="{GRID_LINE}" stroke-width="1"/>'
            )
        for r in range(rows + 1):
            y = top + cell_to_pixel(r, self.cell_px)
            lines.append(
                f'  <line x1="0" y1="{_num(y)}" x2="{_num(width)}" '
                f'y2="{_num(y)}" stroke="{GRID_LINE}" stroke-width="1"/>'
            )
        return "\n".join(lines)

    def _render_bin(
        self, b: Bin, top: float, selected: bool, client_view: bool
    ) -> str:
        x = cell_to_pixel(b.x, self.cell_px)
        y = top + cell_to_pixel(b.y, self.cell_px)
        w = cell_to_pixel(b.w, self.cell_px)
        h = cell_to_pixel(b.h, self.cell_px)

        if client_view:
            fill = BIN_FILL_CLIENT
        elif b.color_variant:
            fill = BIN_FILL_ALT
        else:
            fill = BIN_FILL

        stroke = SELECTED_STROKE if selected else "#ffffff"
        stroke_width = 3 if selected else 1
        css_class = "bin selected" if selected else "bin"

        parts = [
            f'  <g class="{css_class}" data-id="{escape(b.id)}">',
            f'    <rect x="{_num(x + 1)}" y="{_num(y + 1)}" '
            f'width="{_num(w - 2)}" height="{_num(h - 2)}" rx="4" '
            f'fill="{fill}" stroke="{stroke}" stroke-width="{stroke_width}"/>',
        ]

        if self.show_labels:
            parts.append(
                f'    <text x="{_num(x + 6)}" y="{_num(y + 15)}" font-size="11" '
                f'fill="#ffffff">{escape(b.label)}</text>'
            )
            parts.append(
                f'    <text x="{_num(x + 6)}" y="{_num(y + 27)}" font-size="9" '
                f'fill="#ffffff" opacity="0.8">'
                f"{b.w}×{b.h} cells • {_num(b.height_mm)}mm</text>"
            )
            parts.append(
                f'    <text x="{_num(x + w - 6)}" y="{_num(y + h - 6)}" font-size="9" '
                f'fill="#ffffff" opacity="0.6" text-anchor="end">{escape(b.tag)}</text>'
            )

        parts.append("  </g>")
        return "\n".join(parts)


def _num(value: float) -> str:
    """Format a coordinate without a trailing ``.0``."""
    return f"{value:g}"
