"""Integration tests for the validate CLI command.

These tests verify the validate command works end-to-end, including:
- Clean configuration files pass validation
- Broken files and schema violations produce errors
- Layout advisories (no space, collisions, clamping, margins) are warnings
- Exit codes are correct
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import pytest
from typer.testing import CliRunner

from drawers.cli.main import app

FIVE_BY_FOUR = {"drawer_width_mm": 210, "drawer_height_mm": 168}


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestValidateCommand:
    """Tests for the validate command."""

    def test_clean_config(
        self,
        runner: CliRunner,
        write_config: Callable[..., Path],
        sample_config_data: dict[str, Any],
    ) -> None:
        """A config that replays exactly passes with exit code 0."""
        result = runner.invoke(app, ["validate", str(write_config(sample_config_data))])

        assert result.exit_code == 0
        assert "Validation passed. Configuration is valid." in result.output

    def test_empty_object_uses_defaults(
        self, runner: CliRunner, write_config: Callable[..., Path]
    ) -> None:
        """An empty file validates cleanly against the default drawer."""
        result = runner.invoke(app, ["validate", str(write_config({}))])

        assert result.exit_code == 0
        assert "Drawer: 500×350 mm • Grid: 42 mm • Cells: 11×8" in result.output
        assert "Bin entries: 0" in result.output

    def test_explicit_drawer_with_wasted_margin(
        self, runner: CliRunner, write_config: Callable[..., Path]
    ) -> None:
        data = {"grid": {"drawer_width_mm": 500, "drawer_height_mm": 350}}
        result = runner.invoke(app, ["validate", str(write_config(data))])

        assert result.exit_code == 2
        assert "grid.drawer_width_mm: 38 mm of drawer width" in result.output
        assert "grid.drawer_height_mm" not in result.output
        assert "Validation passed with 1 warning(s)" in result.output

    def test_file_not_found(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(app, ["validate", str(tmp_path / "nope.json")])

        assert result.exit_code == 1
        assert "File not found" in result.output
        assert "Validation failed." in result.output

    def test_invalid_json_syntax(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text('{"grid": {"cell_size_mm": 42,}}', encoding="utf-8")

        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 1
        assert "Invalid JSON syntax" in result.output
        assert "Line 1" in result.output

    def test_unknown_field_rejected(
        self, runner: CliRunner, write_config: Callable[..., Path]
    ) -> None:
        result = runner.invoke(
            app, ["validate", str(write_config({"grid": {"depth_mm": 30}}))]
        )

        assert result.exit_code == 1
        assert "Cannot load configuration:" in result.output
        assert "[grid]" in result.output
        assert "grid.depth_mm" in result.output

    def test_non_positive_cell_size_rejected(
        self, runner: CliRunner, write_config: Callable[..., Path]
    ) -> None:
        result = runner.invoke(
            app, ["validate", str(write_config({"grid": {"cell_size_mm": 0}}))]
        )

        assert result.exit_code == 1
        assert "grid.cell_size_mm" in result.output

    def test_bin_without_space(
        self, runner: CliRunner, write_config: Callable[..., Path]
    ) -> None:
        data = {
            "grid": FIVE_BY_FOUR,
            "bins": [{"w": 5, "h": 4, "label": "Tray"}, {"w": 1, "h": 1, "label": "Extra"}],
        }
        result = runner.invoke(app, ["validate", str(write_config(data))])

        assert result.exit_code == 2
        assert "bins[1]: No space for 1x1 bin 'Extra'" in result.output
        assert "Suggestion: Use a smaller bin or a larger drawer" in result.output

    def test_colliding_target(
        self, runner: CliRunner, write_config: Callable[..., Path]
    ) -> None:
        data = {
            "grid": FIVE_BY_FOUR,
            "bins": [
                {"w": 2, "h": 2, "label": "A"},
                {"w": 2, "h": 2, "label": "B", "x": 1, "y": 0},
            ],
        }
        result = runner.invoke(app, ["validate", str(write_config(data))])

        assert result.exit_code == 2
        assert "Bin 'B' collides at (1, 0); left at (2, 0)" in result.output

    def test_clamped_target(
        self, runner: CliRunner, write_config: Callable[..., Path]
    ) -> None:
        data = {"grid": FIVE_BY_FOUR, "bins": [{"w": 2, "h": 1, "label": "A", "x": 10}]}
        result = runner.invoke(app, ["validate", str(write_config(data))])

        assert result.exit_code == 2
        assert "clamped to (3, 0)" in result.output

    def test_low_bin_height(
        self, runner: CliRunner, write_config: Callable[..., Path]
    ) -> None:
        data = {"grid": FIVE_BY_FOUR, "bins": [{"w": 1, "h": 1, "height_mm": 2}]}
        result = runner.invoke(app, ["validate", str(write_config(data))])

        assert result.exit_code == 2
        assert "bins[0].height_mm" in result.output

    def test_schema_errors_grouped_by_section(
        self, runner: CliRunner, write_config: Callable[..., Path]
    ) -> None:
        data = {"grid": {"cell_size_mm": 0}, "bins": [{"w": 1}, {"h": 0}]}
        result = runner.invoke(app, ["validate", str(write_config(data))])

        assert result.exit_code == 1
        output = result.output
        assert output.index("[grid]") < output.index("grid.cell_size_mm")
        assert output.index("[bins]") < output.index("bins[1].h")
        assert "Value: 0" in output

    def test_bin_larger_than_grid_fails(
        self, runner: CliRunner, write_config: Callable[..., Path]
    ) -> None:
        """A file that loads can still fail when a bin can never be placed."""
        data = {
            "grid": FIVE_BY_FOUR,
            "bins": [{"w": 2, "h": 2, "label": "A"}, {"w": 6, "h": 1, "label": "Rail"}],
        }
        result = runner.invoke(app, ["validate", str(write_config(data))])

        assert result.exit_code == 1
        assert "Errors:" in result.output
        assert "bins[1].w: Bin 'Rail' is 6 cells wide; the grid has 5 columns" in result.output
        assert "Suggestion: Use w <= 5 or a wider drawer" in result.output
        assert "No space for 6x1" not in result.output
        assert "Validation failed: 1 error(s), 0 warning(s)" in result.output
