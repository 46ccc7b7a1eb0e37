"""Authoritative layout state shared by every view.

LayoutState owns the grid parameters, the ordered bin collection and the
selection. Views hold a reference to one LayoutState, send it intents (add,
move, remove, configure) and redraw from it when notified. The state never
draws anything itself.

Every mutation is synchronous and atomic from the caller's perspective: the
placement engine validates against a full snapshot of the bins, and the
collection is only touched once the result is known to be legal.
Subscribers are notified once per successful mutation and never for a
rejected one.
"""

from __future__ import annotations

import logging
from typing import Callable

from drawers.domain.entities import Bin
from drawers.domain.services import PlacementEngine
from drawers.domain.value_objects import GridSize, GridSpec

from .dtos import BinRequest, LayoutSnapshot
from .results import AddBinResult, MoveRejection, MoveResult

logger = logging.getLogger(__name__)

Subscriber = Callable[["LayoutState"], None]


class BinNotFoundError(KeyError):
    """Raised when a bin id does not refer to a bin in the layout."""

    def __init__(self, bin_id: str) -> None:
        self.bin_id = bin_id
        super().__init__(bin_id)

    def __str__(self) -> str:
        return f"No bin with id '{self.bin_id}'"


class LayoutState:
    """Mutable layout of bins inside one drawer.

    Attributes:
        placement_engine: Engine used to validate every placement.
    """

    def __init__(
        self,
        grid_spec: GridSpec | None = None,
        placement_engine: PlacementEngine | None = None,
    ) -> None:
        """Create an empty layout.

        Args:
            grid_spec: Initial drawer and grid parameters (defaults to the
                standard 500x350 mm drawer with a 42 mm grid).
            placement_engine: Optional engine for dependency injection.
        """
        self.placement_engine = placement_engine or PlacementEngine()
        self._grid_spec = grid_spec or GridSpec()
        self._bins: list[Bin] = []
        self._selected_id: str | None = None
        self._client_view = False
        self._subscribers: list[Subscriber] = []

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def grid_spec(self) -> GridSpec:
        return self._grid_spec

    @property
    def cols(self) -> int:
        return self._grid_spec.cols

    @property
    def rows(self) -> int:
        return self._grid_spec.rows

    @property
    def selection(self) -> str | None:
        """Id of the selected bin, or None."""
        return self._selected_id

    @property
    def client_view(self) -> bool:
        """Whether views should draw the neutral presentation palette."""
        return self._client_view

    def get_selection(self) -> str | None:
        return self._selected_id

    def list_bins(self) -> tuple[Bin, ...]:
        """Copies of all bins in insertion order."""
        return tuple(b.copy() for b in self._bins)

    def get_bin(self, bin_id: str) -> Bin | None:
        """Copy of the bin with the given id, or None."""
        found = self._find(bin_id)
        return found.copy() if found is not None else None

    def __len__(self) -> int:
        return len(self._bins)

    def __contains__(self, bin_id: object) -> bool:
        return any(b.id == bin_id for b in self._bins)

    def export_snapshot(self) -> LayoutSnapshot:
        """Read-only snapshot of the whole layout."""
        return LayoutSnapshot(
            grid_spec=self._grid_spec,
            bins=self.list_bins(),
            selected_id=self._selected_id,
            client_view=self._client_view,
        )

    # ------------------------------------------------------------------
    # Notifications
    # ------------------------------------------------------------------

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register a callback fired after every successful mutation.

        Args:
            callback: Called with this state once per committed change.

        Returns:
            A function that removes the subscription.
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _notify(self) -> None:
        for callback in list(self._subscribers):
            try:
                callback(self)
            except Exception:
                # Remaining subscribers still run.
                logger.exception("Layout subscriber %r failed", callback)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def configure(self, grid_spec: GridSpec) -> GridSize:
        """Replace the grid parameters and reconcile the bins.

        Bins that no longer fit inside the new grid are dropped, then bins
        overlapping an earlier-inserted bin are dropped.

        Args:
            grid_spec: New drawer and grid parameters.

        Returns:
            The new grid dimensions.
        """
        size = grid_spec.size
        result = self.placement_engine.reconcile(self._bins, size.cols, size.rows)

        self._grid_spec = grid_spec
        self._bins = list(result.kept)
        if self._selected_id is not None and self._find(self._selected_id) is None:
            self._selected_id = None

        for dropped in result.dropped_out_of_bounds:
            logger.warning(
                "Dropped bin %s '%s': no longer fits in %dx%d grid",
                dropped.id,
                dropped.label,
                size.cols,
                size.rows,
            )
        for dropped in result.dropped_overlapping:
            logger.warning(
                "Dropped bin %s '%s': overlaps an earlier bin", dropped.id, dropped.label
            )
        logger.info("Configured grid: %s", grid_spec.describe())

        self._notify()
        return size

    def add_bin(self, request: BinRequest) -> AddBinResult:
        """Place a new bin at the first free position.

        The request is normalized first (see ``BinRequest.normalized``). On
        success the new bin becomes the selection.

        Args:
            request: Requested size, height and label.

        Returns:
            AddBinResult holding a copy of the new bin, or the NO_SPACE
            failure with the layout unchanged.
        """
        req = request.normalized()
        rect = self.placement_engine.find_first_fit(
            req.w, req.h, self._bins, self.cols, self.rows
        )
        if rect is None:
            logger.info("No space for %dx%d bin '%s'", req.w, req.h, req.label)
            return AddBinResult.no_space()

        new_bin = Bin(
            x=rect.x,
            y=rect.y,
            w=req.w,
            h=req.h,
            height_mm=req.height_mm,
            label=req.label,
            color_variant=len(self._bins) % 2 == 1,
        )
        self._bins.append(new_bin)
        self._selected_id = new_bin.id
        logger.debug("Added bin %s at (%d, %d)", new_bin.id, rect.x, rect.y)

        self._notify()
        return AddBinResult.placed(new_bin.copy())

    def move_bin(self, bin_id: str, x: int, y: int) -> MoveResult:
        """Move a bin to a proposed top-left cell.

        The proposal is clamped to the grid, then rejected if it collides
        with another bin. Rejection is silent: the bin keeps its last
        committed position.

        Args:
            bin_id: Id of the bin to move.
            x: Proposed left column.
            y: Proposed top row.

        Returns:
            MoveResult with the committed position.
        """
        target_bin = self._find(bin_id)
        if target_bin is None:
            return MoveResult(committed=False, rejection=MoveRejection.UNKNOWN_BIN)

        rect = self.placement_engine.resolve_move(
            target_bin, x, y, self._bins, self.cols, self.rows
        )
        if rect is None:
            return MoveResult(
                committed=False,
                x=target_bin.x,
                y=target_bin.y,
                rejection=MoveRejection.COLLISION,
            )

        if (rect.x, rect.y) != (target_bin.x, target_bin.y):
            target_bin.x = rect.x
            target_bin.y = rect.y
            self._notify()
        return MoveResult(committed=True, x=rect.x, y=rect.y)

    def remove_bin(self, bin_id: str) -> None:
        """Delete a bin. Unknown ids are ignored."""
        remaining = [b for b in self._bins if b.id != bin_id]
        if len(remaining) == len(self._bins):
            return
        self._bins = remaining
        if self._selected_id == bin_id:
            self._selected_id = None
        logger.debug("Removed bin %s", bin_id)
        self._notify()

    def remove_selected(self) -> bool:
        """Delete the selected bin, if any.

        Returns:
            True if a bin was removed.
        """
        if self._selected_id is None:
            return False
        self.remove_bin(self._selected_id)
        return True

    def clear(self) -> None:
        """Remove every bin and the selection."""
        if not self._bins and self._selected_id is None:
            return
        self._bins = []
        self._selected_id = None
        self._notify()

    def select(self, bin_id: str | None) -> None:
        """Select a bin by id, or clear the selection with None.

        Raises:
            BinNotFoundError: If ``bin_id`` is not in the layout.
        """
        if bin_id is not None and self._find(bin_id) is None:
            raise BinNotFoundError(bin_id)
        if bin_id == self._selected_id:
            return
        self._selected_id = bin_id
        self._notify()

    def set_client_view(self, enabled: bool) -> None:
        """Switch the presentation palette on or off."""
        if enabled == self._client_view:
            return
        self._client_view = enabled
        self._notify()

    def toggle_client_view(self) -> bool:
        """Flip the presentation palette and return the new value."""
        self.set_client_view(not self._client_view)
        return self._client_view

    def _find(self, bin_id: str) -> Bin | None:
        return next((b for b in self._bins if b.id == bin_id), None)
