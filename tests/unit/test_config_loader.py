"""Unit tests for configuration schema and loading."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import pytest

from drawers.application.config import (
    ConfigError,
    LayoutConfiguration,
    load_config,
    load_config_from_dict,
)
from drawers.application.config.loader import _json_path

WriteConfig = Callable[..., Path]


class TestSchema:
    """Tests for the pydantic configuration models."""

    def test_empty_config_uses_defaults(self) -> None:
        config = LayoutConfiguration()
        assert config.grid.cell_size_mm == 42
        assert config.grid.drawer_width_mm == 500
        assert config.grid.drawer_height_mm == 350
        assert config.view.cell_px == 28
        assert config.bins == []

    def test_bin_defaults(self) -> None:
        config = load_config_from_dict({"bins": [{}]})
        entry = config.bins[0]
        assert (entry.w, entry.h) == (1, 1)
        assert entry.height_mm == 42
        assert entry.label == "Bin"
        assert entry.x is None and entry.y is None

    def test_unknown_fields_are_rejected(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict({"grid": {"cell_size": 42}})
        assert exc_info.value.error_type == "validation"
        assert exc_info.value.details[0]["path"] == "grid.cell_size"

    def test_zero_cell_size_is_rejected(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict({"grid": {"cell_size_mm": 0}})
        detail = exc_info.value.details[0]
        assert detail["path"] == "grid.cell_size_mm"
        assert detail["value"] == 0

    def test_bin_path_includes_index(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict({"bins": [{"w": 1}, {"w": 0}]})
        assert exc_info.value.details[0]["path"] == "bins[1].w"

    def test_non_numeric_size_is_rejected(self) -> None:
        with pytest.raises(ConfigError):
            load_config_from_dict({"grid": {"drawer_width_mm": "wide"}})

    def test_zero_wall_and_base_are_allowed(self) -> None:
        config = load_config_from_dict({"grid": {"wall_height_mm": 0, "base_thickness_mm": 0}})
        assert config.grid.wall_height_mm == 0


class TestJsonPath:
    """Tests for _json_path."""

    @pytest.mark.parametrize(
        "loc,expected",
        [
            (("grid", "cell_size_mm"), "grid.cell_size_mm"),
            (("bins", 2, "label"), "bins[2].label"),
            ((0,), "[0]"),
        ],
    )
    def test_format(self, loc: tuple[Any, ...], expected: str) -> None:
        assert _json_path(loc) == expected


class TestLoadConfig:
    """Tests for load_config."""

    def test_loads_valid_file(
        self, write_config: WriteConfig, sample_config_data: dict[str, Any]
    ) -> None:
        config = load_config(write_config(sample_config_data))
        assert config.grid.drawer_width_mm == 210
        assert [b.label for b in config.bins] == ["Screws", "Bits", "Tape"]

    def test_missing_file(self, tmp_path: Path) -> None:
        path = tmp_path / "missing.json"
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        assert exc_info.value.error_type == "file_not_found"
        assert exc_info.value.path == path

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text('{"grid": {', encoding="utf-8")
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        error = exc_info.value
        assert error.error_type == "json_parse"
        assert error.details[0]["line"] == 1
        assert "Invalid JSON" in str(error)

    def test_validation_error_message_lists_paths(self, write_config: WriteConfig) -> None:
        path = write_config({"bins": [{"w": -1}]})
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        assert exc_info.value.error_type == "validation"
        assert "bins[0].w" in str(exc_info.value)

    def test_directory_is_a_read_error(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path)
        assert exc_info.value.error_type in ("file_read_error", "permission_denied")


class TestSchemaErrorDetails:
    """Schema errors name the configuration section and bin entry."""

    def test_grid_section(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict({"grid": {"cell_size_mm": -1}})
        detail = exc_info.value.details[0]
        assert detail["section"] == "grid"
        assert detail["bin_index"] is None
        assert exc_info.value.sections == ["grid"]

    def test_bin_entry_index(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict({"bins": [{}, {}, {"h": 0}]})
        detail = exc_info.value.details[0]
        assert detail["section"] == "bins"
        assert detail["bin_index"] == 2
        assert detail["path"] == "bins[2].h"

    def test_sections_in_first_seen_order(self) -> None:
        data = {"view": {"cell_px": 0}, "bins": [{"w": 0}], "grid": {"cell_size_mm": 0}}
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(data)
        assert sorted(exc_info.value.sections) == ["bins", "grid", "view"]
        assert "Configuration has 3 problem(s) in:" in str(exc_info.value)

    def test_top_level_must_be_an_object(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict([1, 2])  # type: ignore[arg-type]
        assert exc_info.value.sections == ["root"]
        assert exc_info.value.details[0]["path"] == "root"

    @pytest.mark.parametrize("value", [float("nan"), float("inf")])
    def test_non_finite_sizes_rejected(self, value: float) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict({"grid": {"drawer_width_mm": value}})
        assert exc_info.value.details[0]["path"] == "grid.drawer_width_mm"

    def test_file_errors_keep_path(self, write_config: WriteConfig) -> None:
        path = write_config({"bins": [{"label": 5}]})
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        assert exc_info.value.path == path
        assert exc_info.value.details[0]["section"] == "bins"


class TestReadErrors:
    def test_not_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "latin1.json"
        path.write_bytes(b'{"bins": [{"label": "\xe9"}]}')
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        assert exc_info.value.error_type == "file_read_error"
