"""Pytest configuration and shared fixtures for drawer layout tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest

from drawers.application import LayoutState
from drawers.domain.value_objects import GridSpec


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Grid and state fixtures
# =============================================================================


def square_grid(cells: int, cell_size_mm: float = 42.0) -> GridSpec:
    """GridSpec for a ``cells`` x ``cells`` grid of 42 mm cells."""
    return GridSpec(
        cell_size_mm=cell_size_mm,
        drawer_width_mm=cells * cell_size_mm,
        drawer_height_mm=cells * cell_size_mm,
    )


@pytest.fixture
def default_spec() -> GridSpec:
    """The planner's default 500x350 mm drawer with a 42 mm grid (11x8)."""
    return GridSpec()


@pytest.fixture
def state() -> LayoutState:
    """Empty layout on the default drawer."""
    return LayoutState()


@pytest.fixture
def make_state() -> Callable[[int], LayoutState]:
    """Factory for an empty layout on a square grid of the given size."""

    def _make(cells: int) -> LayoutState:
        return LayoutState(square_grid(cells))

    return _make


# =============================================================================
# Configuration files
# =============================================================================


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[dict[str, Any]], Path]:
    """Write a configuration dictionary to a JSON file and return its path."""

    def _write(data: dict[str, Any], name: str = "drawer.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_config_data() -> dict[str, Any]:
    """A small configuration that replays without issues."""
    return {
        "grid": {
            "cell_size_mm": 42,
            "drawer_width_mm": 210,
            "drawer_height_mm": 168,
            "wall_height_mm": 35,
            "base_thickness_mm": 6,
        },
        "view": {"cell_px": 28},
        "bins": [
            {"w": 2, "h": 2, "height_mm": 42, "label": "Screws"},
            {"w": 1, "h": 2, "height_mm": 21, "label": "Bits"},
            {"w": 2, "h": 1, "height_mm": 42, "label": "Tape", "x": 3, "y": 3},
        ],
    }
