"""Placement engine for bins on the drawer grid.

Decides where bins may go. The engine never mutates bins itself; it answers
with a rectangle (or None) and the layout state commits the result, so a
rejected placement can never leave a bin half-moved.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Sequence

from ..value_objects import CellRect
from .collision import collides_any, overlaps, within_bounds

if TYPE_CHECKING:
    from ..entities import Bin

logger = logging.getLogger(__name__)

__all__ = ["PlacementEngine", "ReconcileResult"]


@dataclass(frozen=True)
class ReconcileResult:
    """Outcome of re-validating bins after a grid change.

    Attributes:
        kept: Bins that still satisfy every invariant, in original order.
        dropped_out_of_bounds: Bins that no longer fit inside the grid.
        dropped_overlapping: Bins that fit but overlap an earlier kept bin.
    """

    kept: tuple[Bin, ...] = ()
    dropped_out_of_bounds: tuple[Bin, ...] = ()
    dropped_overlapping: tuple[Bin, ...] = ()

    @property
    def dropped(self) -> tuple[Bin, ...]:
        """Every bin removed by reconciliation."""
        return self.dropped_out_of_bounds + self.dropped_overlapping


class PlacementEngine:
    """Finds legal cell positions for new and moved bins.

    Enforces the two layout invariants: every bin lies inside the grid, and
    no two bins overlap.
    """

    def find_first_fit(
        self,
        w: int,
        h: int,
        bins: Sequence[Bin],
        cols: int,
        rows: int,
    ) -> CellRect | None:
        """Find the first free position for a ``w`` x ``h`` bin.

        Candidates are scanned in row-major order (rows top to bottom, then
        columns left to right). This is first-fit, not best-fit: no attempt
        is made to reduce fragmentation.

        Args:
            w: Bin width in cells.
            h: Bin height in cells.
            bins: Bins already placed.
            cols: Grid columns.
            rows: Grid rows.

        Returns:
            The chosen rectangle, or None when there is no space.
        """
        for y in range(0, rows - h + 1):
            for x in range(0, cols - w + 1):
                candidate = CellRect(x=x, y=y, w=w, h=h)
                if within_bounds(candidate, cols, rows) and not collides_any(
                    candidate, None, bins
                ):
                    logger.debug("First fit for %dx%d at (%d, %d)", w, h, x, y)
                    return candidate
        logger.debug("No space for %dx%d bin in %dx%d grid", w, h, cols, rows)
        return None

    def resolve_move(
        self,
        bin: Bin,
        proposed_x: int,
        proposed_y: int,
        bins: Sequence[Bin],
        cols: int,
        rows: int,
    ) -> CellRect | None:
        """Validate a move of ``bin`` to a proposed top-left cell.

        The proposal is clamped to the grid first, so dragging past an edge
        sticks to the edge. The clamped rectangle is then rejected if it
        overlaps any other bin; neighbours are never pushed aside.

        Args:
            bin: The bin being moved.
            proposed_x: Requested left column (may lie outside the grid).
            proposed_y: Requested top row (may lie outside the grid).
            bins: All placed bins, including ``bin``.
            cols: Grid columns.
            rows: Grid rows.

        Returns:
            The clamped target rectangle, or None if it collides.
        """
        x = _clamp(proposed_x, 0, cols - bin.w)
        y = _clamp(proposed_y, 0, rows - bin.h)
        target = CellRect(x=x, y=y, w=bin.w, h=bin.h)
        if collides_any(target, bin.id, bins):
            logger.debug("Move of %s to (%d, %d) rejected: collision", bin.id, x, y)
            return None
        return target

    def reconcile(self, bins: Sequence[Bin], cols: int, rows: int) -> ReconcileResult:
        """Restore the invariants after the grid dimensions changed.

        Bins that no longer fit are dropped (never resized or moved). The
        survivors are then walked in insertion order and each is kept only if
        it overlaps none of the bins kept before it, so earlier bins win.
        No attempt is made to keep the largest possible subset.

        Args:
            bins: Bins in insertion order.
            cols: New grid columns.
            rows: New grid rows.

        Returns:
            ReconcileResult with kept and dropped bins.
        """
        in_bounds: list[Bin] = []
        out_of_bounds: list[Bin] = []
        for b in bins:
            (in_bounds if within_bounds(b, cols, rows) else out_of_bounds).append(b)

        kept: list[Bin] = []
        overlapping: list[Bin] = []
        for b in in_bounds:
            if any(overlaps(b, k) for k in kept):
                overlapping.append(b)
            else:
                kept.append(b)

        return ReconcileResult(
            kept=tuple(kept),
            dropped_out_of_bounds=tuple(out_of_bounds),
            dropped_overlapping=tuple(overlapping),
        )


def _clamp(value: int, low: int, high: int) -> int:
    return min(max(value, low), high)
