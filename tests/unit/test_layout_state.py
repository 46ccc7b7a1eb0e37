"""Unit tests for LayoutState."""

from __future__ import annotations

from typing import Callable

import pytest

from drawers.application import (
    BinNotFoundError,
    BinRequest,
    LayoutState,
    MoveRejection,
    PlacementFailure,
)
from drawers.domain.value_objects import GridSpec


class Recorder:
    """Subscriber that counts notifications."""

    def __init__(self) -> None:
        self.calls: list[LayoutState] = []

    def __call__(self, state: LayoutState) -> None:
        self.calls.append(state)

    @property
    def count(self) -> int:
        return len(self.calls)


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


MakeState = Callable[[int], LayoutState]


class TestAddBin:
    """Tests for add_bin."""

    def test_first_fit_on_5x5_grid(self, make_state: MakeState) -> None:
        """Two 2x2 bins land at (0, 0) and then (2, 0)."""
        state = make_state(5)
        first = state.add_bin(BinRequest(w=2, h=2))
        second = state.add_bin(BinRequest(w=2, h=2))

        assert first.ok and first.bin is not None
        assert second.ok and second.bin is not None
        assert (first.bin.x, first.bin.y) == (0, 0)
        assert (second.bin.x, second.bin.y) == (2, 0)

    def test_no_space_on_2x2_grid(self, make_state: MakeState) -> None:
        """A full grid refuses further bins and is left unchanged."""
        state = make_state(2)
        assert state.add_bin(BinRequest(w=2, h=2)).ok

        result = state.add_bin(BinRequest(w=1, h=1))

        assert not result.ok
        assert result.bin is None
        assert result.failure is PlacementFailure.NO_SPACE
        assert len(state) == 1

    def test_new_bin_is_selected(self, state: LayoutState) -> None:
        result = state.add_bin(BinRequest(label="Screws"))
        assert result.bin is not None
        assert state.selection == result.bin.id

    def test_color_variant_alternates(self, state: LayoutState) -> None:
        variants = [state.add_bin(BinRequest()).bin.color_variant for _ in range(4)]
        assert variants == [False, True, False, True]

    def test_request_is_normalized(self, state: LayoutState) -> None:
        """Sizes, height and label are brought into range."""
        result = state.add_bin(BinRequest(w=0, h=-3, height_mm=1, label="   "))
        b = result.bin
        assert b is not None
        assert (b.w, b.h) == (1, 1)
        assert b.height_mm == 5.0
        assert b.label == "Bin"

    def test_label_is_stripped(self, state: LayoutState) -> None:
        result = state.add_bin(BinRequest(label="  Screws  "))
        assert result.bin is not None
        assert result.bin.label == "Screws"

    def test_returned_bin_is_a_copy(self, state: LayoutState) -> None:
        result = state.add_bin(BinRequest())
        assert result.bin is not None
        result.bin.x = 7
        assert state.get_bin(result.bin.id).x == 0


class TestMoveBin:
    """Tests for move_bin."""

    @pytest.fixture
    def grid3(self, make_state: MakeState) -> tuple[LayoutState, str, str]:
        """3x3 grid with 1x1 bins at (0, 0) and (2, 2)."""
        state = make_state(3)
        first = state.add_bin(BinRequest()).bin
        second = state.add_bin(BinRequest()).bin
        assert first is not None and second is not None
        state.move_bin(second.id, 2, 2)
        return state, first.id, second.id

    def test_collision_is_rejected(self, grid3: tuple[LayoutState, str, str]) -> None:
        state, first, _ = grid3
        result = state.move_bin(first, 2, 2)

        assert not result.committed
        assert result.rejection is MoveRejection.COLLISION
        assert (result.x, result.y) == (0, 0)
        assert (state.get_bin(first).x, state.get_bin(first).y) == (0, 0)

    def test_clamped_target_is_collision_checked(
        self, grid3: tuple[LayoutState, str, str]
    ) -> None:
        """(5, 5) clamps to (2, 2), which is occupied, so the move fails."""
        state, first, _ = grid3
        result = state.move_bin(first, 5, 5)

        assert not result.committed
        assert (state.get_bin(first).x, state.get_bin(first).y) == (0, 0)

    def test_clamped_move_commits(self, grid3: tuple[LayoutState, str, str]) -> None:
        state, first, _ = grid3
        result = state.move_bin(first, -3, 9)

        assert result.committed
        assert (result.x, result.y) == (0, 2)
        assert (state.get_bin(first).x, state.get_bin(first).y) == (0, 2)

    def test_unknown_bin(self, state: LayoutState) -> None:
        result = state.move_bin("missing", 1, 1)
        assert not result.committed
        assert result.rejection is MoveRejection.UNKNOWN_BIN


class TestRemoveAndClear:
    """Tests for remove_bin, remove_selected and clear."""

    def test_remove_clears_matching_selection(self, state: LayoutState) -> None:
        b = state.add_bin(BinRequest()).bin
        assert b is not None
        state.remove_bin(b.id)
        assert len(state) == 0
        assert state.selection is None

    def test_remove_keeps_other_selection(self, state: LayoutState) -> None:
        first = state.add_bin(BinRequest()).bin
        second = state.add_bin(BinRequest()).bin
        state.remove_bin(first.id)
        assert state.selection == second.id

    def test_remove_unknown_is_noop(self, state: LayoutState, recorder: Recorder) -> None:
        state.add_bin(BinRequest())
        state.subscribe(recorder)
        state.remove_bin("missing")
        assert len(state) == 1
        assert recorder.count == 0

    def test_remove_selected(self, state: LayoutState) -> None:
        state.add_bin(BinRequest())
        assert state.remove_selected() is True
        assert len(state) == 0
        assert state.remove_selected() is False

    def test_clear(self, state: LayoutState) -> None:
        state.add_bin(BinRequest())
        state.add_bin(BinRequest())
        state.clear()
        assert state.list_bins() == ()
        assert state.selection is None


class TestConfigure:
    """Tests for grid changes and reconciliation."""

    def test_returns_new_grid_size(self, state: LayoutState) -> None:
        size = state.configure(GridSpec(cell_size_mm=100))
        assert (size.cols, size.rows) == (5, 3)
        assert (state.cols, state.rows) == (5, 3)

    def test_drops_bins_outside_smaller_grid(self, make_state: MakeState) -> None:
        state = make_state(5)
        kept = state.add_bin(BinRequest(w=2, h=2)).bin
        lost = state.add_bin(BinRequest(w=2, h=2)).bin
        state.move_bin(lost.id, 3, 3)

        state.configure(GridSpec(cell_size_mm=42, drawer_width_mm=126, drawer_height_mm=126))

        assert [b.id for b in state.list_bins()] == [kept.id]

    def test_clears_selection_of_dropped_bin(self, make_state: MakeState) -> None:
        state = make_state(5)
        b = state.add_bin(BinRequest(w=1, h=1)).bin
        state.move_bin(b.id, 4, 4)
        assert state.selection == b.id

        state.configure(GridSpec(cell_size_mm=42, drawer_width_mm=84, drawer_height_mm=84))

        assert state.selection is None
        assert len(state) == 0

    def test_larger_grid_keeps_everything(self, make_state: MakeState) -> None:
        state = make_state(3)
        for _ in range(3):
            state.add_bin(BinRequest())
        state.configure(GridSpec())
        assert len(state) == 3

    def test_dropped_bins_are_logged(
        self, make_state: MakeState, caplog: pytest.LogCaptureFixture
    ) -> None:
        state = make_state(5)
        b = state.add_bin(BinRequest(label="Screws")).bin
        state.move_bin(b.id, 4, 4)
        with caplog.at_level("WARNING", logger="drawers.application.layout_state"):
            state.configure(GridSpec(cell_size_mm=42, drawer_width_mm=84, drawer_height_mm=84))
        assert "Screws" in caplog.text


class TestSelection:
    """Tests for select and the client view flag."""

    def test_select_and_clear(self, state: LayoutState) -> None:
        first = state.add_bin(BinRequest()).bin
        state.add_bin(BinRequest())
        state.select(first.id)
        assert state.get_selection() == first.id
        state.select(None)
        assert state.selection is None

    def test_select_unknown_raises(self, state: LayoutState) -> None:
        with pytest.raises(BinNotFoundError):
            state.select("missing")

    def test_bin_not_found_is_key_error(self, state: LayoutState) -> None:
        with pytest.raises(KeyError):
            state.select("missing")

    def test_toggle_client_view(self, state: LayoutState) -> None:
        assert state.client_view is False
        assert state.toggle_client_view() is True
        assert state.client_view is True
        assert state.toggle_client_view() is False


class TestNotifications:
    """Subscribers fire once per successful mutation and never otherwise."""

    def test_add_notifies_once(self, state: LayoutState, recorder: Recorder) -> None:
        state.subscribe(recorder)
        state.add_bin(BinRequest())
        assert recorder.count == 1
        assert recorder.calls[0] is state

    def test_no_space_does_not_notify(self, make_state: MakeState, recorder: Recorder) -> None:
        state = make_state(1)
        state.add_bin(BinRequest())
        state.subscribe(recorder)
        state.add_bin(BinRequest())
        assert recorder.count == 0

    def test_rejected_move_does_not_notify(
        self, make_state: MakeState, recorder: Recorder
    ) -> None:
        state = make_state(2)
        first = state.add_bin(BinRequest()).bin
        state.add_bin(BinRequest())
        state.subscribe(recorder)
        state.move_bin(first.id, 1, 0)
        assert recorder.count == 0

    def test_move_to_same_position_does_not_notify(
        self, state: LayoutState, recorder: Recorder
    ) -> None:
        b = state.add_bin(BinRequest()).bin
        state.subscribe(recorder)
        result = state.move_bin(b.id, 0, 0)
        assert result.committed
        assert recorder.count == 0

    def test_committed_move_notifies_once(self, state: LayoutState, recorder: Recorder) -> None:
        b = state.add_bin(BinRequest()).bin
        state.subscribe(recorder)
        state.move_bin(b.id, 3, 2)
        assert recorder.count == 1

    def test_configure_notifies_once(self, state: LayoutState, recorder: Recorder) -> None:
        state.subscribe(recorder)
        state.configure(GridSpec(cell_size_mm=50))
        assert recorder.count == 1

    def test_reselecting_does_not_notify(self, state: LayoutState, recorder: Recorder) -> None:
        b = state.add_bin(BinRequest()).bin
        state.subscribe(recorder)
        state.select(b.id)
        assert recorder.count == 0

    def test_clear_on_empty_layout_does_not_notify(
        self, state: LayoutState, recorder: Recorder
    ) -> None:
        state.subscribe(recorder)
        state.clear()
        assert recorder.count == 0

    def test_unsubscribe(self, state: LayoutState, recorder: Recorder) -> None:
        unsubscribe = state.subscribe(recorder)
        unsubscribe()
        state.add_bin(BinRequest())
        assert recorder.count == 0

    def test_failing_subscriber_does_not_block_others(
        self, state: LayoutState, recorder: Recorder, caplog: pytest.LogCaptureFixture
    ) -> None:
        def broken(_: LayoutState) -> None:
            raise RuntimeError("redraw failed")

        state.subscribe(broken)
        state.subscribe(recorder)
        result = state.add_bin(BinRequest())

        assert result.ok
        assert len(state) == 1
        assert recorder.count == 1
        assert "redraw failed" in caplog.text


class TestSnapshot:
    """Tests for queries and export_snapshot."""

    def test_list_bins_returns_copies(self, state: LayoutState) -> None:
        state.add_bin(BinRequest())
        copy = state.list_bins()[0]
        copy.x = 5
        assert state.list_bins()[0].x == 0

    def test_contains(self, state: LayoutState) -> None:
        b = state.add_bin(BinRequest()).bin
        assert b.id in state
        assert "missing" not in state

    def test_export_snapshot(self, make_state: MakeState) -> None:
        state = make_state(5)
        b = state.add_bin(BinRequest(w=2, h=1, height_mm=21, label="Bits")).bin

        data = state.export_snapshot().to_dict()

        assert data == {
            "grid_spec": {
                "cell_size_mm": 42.0,
                "drawer_width_mm": 210.0,
                "drawer_height_mm": 210.0,
                "wall_height_mm": 35.0,
                "base_thickness_mm": 6.0,
            },
            "cols": 5,
            "rows": 5,
            "bins": [
                {
                    "id": b.id,
                    "x": 0,
                    "y": 0,
                    "w": 2,
                    "h": 1,
                    "height_mm": 21.0,
                    "label": "Bits",
                }
            ],
        }

    def test_snapshot_carries_selection_and_view(self, state: LayoutState) -> None:
        b = state.add_bin(BinRequest()).bin
        state.set_client_view(True)
        snapshot = state.export_snapshot()
        assert snapshot.selected_id == b.id
        assert snapshot.client_view is True
        assert "selected_id" not in snapshot.to_dict()

    def test_snapshot_is_detached(self, state: LayoutState) -> None:
        b = state.add_bin(BinRequest()).bin
        snapshot = state.export_snapshot()
        state.move_bin(b.id, 4, 4)
        assert (snapshot.bins[0].x, snapshot.bins[0].y) == (0, 0)
