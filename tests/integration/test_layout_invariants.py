"""Randomized operation sequences against LayoutState.

Whatever users do, the layout must never contain overlapping bins or bins
outside the grid, and the selection must always name an existing bin.
"""

from __future__ import annotations

import random

import pytest

from drawers.application import BinRequest, LayoutState, MoveRejection
from drawers.domain.services import find_out_of_bounds, find_overlapping_pairs
from drawers.domain.value_objects import GridSpec


def assert_consistent(state: LayoutState) -> None:
    bins = state.list_bins()
    assert find_overlapping_pairs(bins) == []
    assert find_out_of_bounds(bins, state.cols, state.rows) == []
    selection = state.selection
    assert selection is None or selection in state
    assert len({b.id for b in bins}) == len(bins)


def random_step(state: LayoutState, rng: random.Random) -> None:
    op = rng.choice(["add", "add", "move", "move", "move", "remove", "select", "grid"])
    bins = state.list_bins()

    if op == "add":
        request = BinRequest(w=rng.randint(0, 4), h=rng.randint(0, 4), label="r")
        before = len(state)
        result = state.add_bin(request)
        assert len(state) == before + (1 if result.ok else 0)
    elif op == "move" and bins:
        target = rng.choice(bins)
        result = state.move_bin(target.id, rng.randint(-3, 14), rng.randint(-3, 11))
        moved = state.get_bin(target.id)
        assert moved is not None
        assert (moved.x, moved.y) == (result.x, result.y)
        if not result.committed:
            assert result.rejection is MoveRejection.COLLISION
            assert (moved.x, moved.y) == (target.x, target.y)
    elif op == "remove" and bins:
        target = rng.choice(bins)
        state.remove_bin(target.id)
        assert target.id not in state
    elif op == "select" and bins:
        state.select(rng.choice(bins).id)
    elif op == "grid":
        state.configure(
            GridSpec(
                cell_size_mm=rng.choice([30.0, 42.0, 50.0]),
                drawer_width_mm=rng.uniform(40, 520),
                drawer_height_mm=rng.uniform(40, 380),
            )
        )


class TestLayoutInvariants:
    """Invariants hold across random operation sequences."""

    @pytest.mark.parametrize("seed", range(20))
    def test_random_sequences(self, seed: int) -> None:
        rng = random.Random(seed)
        state = LayoutState()
        for _ in range(200):
            random_step(state, rng)
            assert_consistent(state)

    @pytest.mark.slow
    def test_long_sequence(self) -> None:
        rng = random.Random(1234)
        state = LayoutState()
        for _ in range(5000):
            random_step(state, rng)
            assert_consistent(state)

    def test_fill_then_shrink(self) -> None:
        state = LayoutState()
        while state.add_bin(BinRequest(w=1, h=1)).ok:
            pass
        assert len(state) == 88
        assert_consistent(state)

        state.configure(GridSpec(drawer_width_mm=126, drawer_height_mm=126))
        assert len(state) == 9
        assert_consistent(state)
