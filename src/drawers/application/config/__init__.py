"""Configuration schema and loading for drawer layouts.

Public API:
    - LayoutConfiguration: Root configuration model
    - GridConfig, ViewConfig, BinConfig: Section models
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - ConfigError: Exception for configuration errors
    - build_layout: Replay a configuration into a LayoutState
    - validate_config: Report bins that can never fit and layout advisories

Example:
    >>> from pathlib import Path
    >>> from drawers.application.config import load_config, build_layout
    >>>
    >>> config = load_config(Path("my-drawer.json"))
    >>> build = build_layout(config)
    >>> print(build.state.grid_spec.describe())
"""

from drawers.application.config.adapter import (
    LayoutBuild,
    ReplayIssue,
    build_layout,
    config_to_bin_request,
    config_to_grid_spec,
)
from drawers.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from drawers.application.config.schema import (
    BinConfig,
    GridConfig,
    LayoutConfiguration,
    ViewConfig,
)
from drawers.application.config.validator import (
    ValidationResult,
    validate_config,
)

__all__ = [
    "BinConfig",
    "ConfigError",
    "GridConfig",
    "LayoutBuild",
    "LayoutConfiguration",
    "ReplayIssue",
    "ValidationResult",
    "ViewConfig",
    "build_layout",
    "config_to_bin_request",
    "config_to_grid_spec",
    "load_config",
    "load_config_from_dict",
    "validate_config",
]
