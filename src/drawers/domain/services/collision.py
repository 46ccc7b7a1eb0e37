"""Collision oracle for bins on the drawer grid.

Answers containment and overlap queries against the set of placed bins. All
queries are linear scans; a drawer holds tens of bins, never enough to need
a spatial tree.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Protocol

if TYPE_CHECKING:
    from ..entities import Bin

__all__ = [
    "CellRectLike",
    "collides_any",
    "find_out_of_bounds",
    "find_overlapping_pairs",
    "overlaps",
    "within_bounds",
]


class CellRectLike(Protocol):
    """Anything with an integer cell rectangle (CellRect, Bin)."""

    @property
    def x(self) -> int: ...

    @property
    def y(self) -> int: ...

    @property
    def w(self) -> int: ...

    @property
    def h(self) -> int: ...


def overlaps(a: CellRectLike, b: CellRectLike) -> bool:
    """Check whether two cell rectangles overlap.

    Uses the open-interval test: rectangles that only share an edge or a
    corner do not overlap.

    Args:
        a: First rectangle.
        b: Second rectangle.

    Returns:
        True if the interiors intersect.
    """
    return a.x < b.x + b.w and b.x < a.x + a.w and a.y < b.y + b.h and b.y < a.y + a.h


def within_bounds(rect: CellRectLike, cols: int, rows: int) -> bool:
    """Check that a rectangle lies fully inside a ``cols`` x ``rows`` grid."""
    return rect.x >= 0 and rect.y >= 0 and rect.x + rect.w <= cols and rect.y + rect.h <= rows


def collides_any(
    test: CellRectLike,
    excluding_id: str | None,
    bins: Iterable[Bin],
) -> bool:
    """Check a rectangle against every placed bin.

    Args:
        test: Candidate rectangle.
        excluding_id: Id of the bin being moved, which never collides with
            itself. None when placing a new bin.
        bins: Placed bins.

    Returns:
        True if ``test`` overlaps any bin other than ``excluding_id``.
    """
    return any(b.id != excluding_id and overlaps(test, b) for b in bins)


def find_overlapping_pairs(bins: Iterable[Bin]) -> list[tuple[str, str]]:
    """List every pair of distinct bins that overlap, by id."""
    placed = list(bins)
    pairs: list[tuple[str, str]] = []
    for i, a in enumerate(placed):
        for b in placed[i + 1 :]:
            if overlaps(a, b):
                pairs.append((a.id, b.id))
    return pairs


def find_out_of_bounds(bins: Iterable[Bin], cols: int, rows: int) -> list[str]:
    """List the ids of bins that do not fit inside the grid."""
    return [b.id for b in bins if not within_bounds(b, cols, rows)]
