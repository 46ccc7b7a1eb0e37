"""Loading of drawer layout configuration files.

A configuration has three sections: ``grid``, ``view`` and ``bins``. Every
failure is raised as a ConfigError whose ``error_type`` names what went
wrong; schema failures also say which section and, for bins, which entry.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from drawers.application.config.schema import LayoutConfiguration

logger = logging.getLogger(__name__)

ROOT_SECTION = "root"


class ConfigError(Exception):
    """A configuration that could not be read or does not fit the schema.

    Attributes:
        message: Summary shown to users.
        error_type: One of file_not_found, permission_denied,
            file_read_error, json_parse, validation.
        path: Configuration file, when loading from disk.
        details: One dictionary per problem. JSON errors carry ``line``,
            ``column`` and ``message``; schema errors carry ``section``,
            ``bin_index``, ``path``, ``message``, ``value`` and ``error_type``.
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []

    def __str__(self) -> str:
        return self.message

    @property
    def sections(self) -> list[str]:
        """Configuration sections with schema problems, in first-seen order."""
        return _sections(self.details)

    @classmethod
    def not_found(cls, path: Path) -> ConfigError:
        return cls(f"Config file not found: {path}", "file_not_found", path)

    @classmethod
    def unreadable(cls, path: Path, error: OSError | UnicodeDecodeError) -> ConfigError:
        if isinstance(error, PermissionError):
            return cls(
                f"Permission denied reading config file: {path}",
                "permission_denied",
                path,
            )
        return cls(f"Cannot read config file {path}: {error}", "file_read_error", path)

    @classmethod
    def bad_json(cls, path: Path, error: json.JSONDecodeError) -> ConfigError:
        return cls(
            f"Invalid JSON in {path} at line {error.lineno}, "
            f"column {error.colno}: {error.msg}",
            "json_parse",
            path,
            [{"line": error.lineno, "column": error.colno, "message": error.msg}],
        )

    @classmethod
    def from_schema_error(
        cls, error: PydanticValidationError, path: Path | None = None
    ) -> ConfigError:
        details = [_schema_detail(err) for err in error.errors()]
        return cls(_summarize(details), "validation", path, details)


def _json_path(loc: tuple[str | int, ...]) -> str:
    """Render a pydantic location as ``bins[2].label``."""
    path = ""
    for segment in loc:
        if isinstance(segment, int):
            path += f"[{segment}]"
        else:
            path += f".{segment}" if path else str(segment)
    return path


def _schema_detail(err: Any) -> dict[str, Any]:
    loc = tuple(err["loc"])
    section = str(loc[0]) if loc else ROOT_SECTION
    bin_index = None
    if section == "bins" and len(loc) > 1 and isinstance(loc[1], int):
        bin_index = loc[1]
    return {
        "section": section,
        "bin_index": bin_index,
        "path": _json_path(loc) or ROOT_SECTION,
        "message": err["msg"],
        "value": err.get("input"),
        "error_type": err["type"],
    }


def _sections(details: list[dict[str, Any]]) -> list[str]:
    return list(dict.fromkeys(d["section"] for d in details if "section" in d))


def _summarize(details: list[dict[str, Any]]) -> str:
    lines = [
        f"Configuration has {len(details)} problem(s) in: {', '.join(_sections(details))}"
    ]
    for detail in details:
        line = f"  - {detail['path']}: {detail['message']}"
        if detail["value"] is not None and not isinstance(detail["value"], (dict, list)):
            line += f" (got: {detail['value']!r})"
        lines.append(line)
    return "\n".join(lines)


def _parse(data: Any, path: Path | None = None) -> LayoutConfiguration:
    try:
        config = LayoutConfiguration.model_validate(data)
    except PydanticValidationError as e:
        raise ConfigError.from_schema_error(e, path) from e
    logger.debug(
        "Loaded configuration%s with %d bin entries",
        f" {path}" if path else "",
        len(config.bins),
    )
    return config


def load_config(path: Path) -> LayoutConfiguration:
    """Load and validate a layout configuration from a JSON file.

    Args:
        path: Path to the JSON configuration file.

    Returns:
        The validated configuration.

    Raises:
        ConfigError: If the file is missing or unreadable, is not JSON, or
            does not match the schema.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ConfigError.not_found(path) from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError.unreadable(path, e) from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError.bad_json(path, e) from e

    return _parse(data, path)


def load_config_from_dict(data: dict[str, Any]) -> LayoutConfiguration:
    """Validate a configuration that is already parsed, e.g. an API body.

    Raises:
        ConfigError: If the data does not match the schema.
    """
    return _parse(data)
