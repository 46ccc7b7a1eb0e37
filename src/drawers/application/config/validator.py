"""Layout checks for configurations that already passed the schema.

Schema problems are reported by the loader. This module covers what only
shows up when the configuration meets the layout rules:

- errors: bins larger than the whole grid, which no layout can hold
- warnings: bins the replay could not place or left away from their target,
  drawer sizes that leave more than half a cell uncovered, bin heights below
  the minimum
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from drawers.application.config.adapter import (
    ReplayIssue,
    build_layout,
    config_to_grid_spec,
)
from drawers.application.config.schema import LayoutConfiguration
from drawers.domain.value_objects import MIN_BIN_HEIGHT_MM, GridSpec

# Margin advisories apply only when one of these is set.
SIZE_FIELDS = frozenset({"cell_size_mm", "drawer_width_mm", "drawer_height_mm"})

_BIN_PATH = re.compile(r"^bins\[(\d+)\]")


@dataclass
class ValidationResult:
    """Outcome of validating a configuration.

    Attributes:
        errors: Problems that make the configuration unusable as written.
        warnings: Entries the layout engine adjusts or skips.
    """

    errors: list[ReplayIssue] = field(default_factory=list)
    warnings: list[ReplayIssue] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)

    @property
    def exit_code(self) -> int:
        """CLI exit code: 0 clean, 1 errors, 2 warnings only."""
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0


def find_oversized_bins(config: LayoutConfiguration, spec: GridSpec) -> list[ReplayIssue]:
    """Bins wider or deeper than the whole grid."""
    issues: list[ReplayIssue] = []
    for index, entry in enumerate(config.bins):
        if entry.w > spec.cols:
            issues.append(
                ReplayIssue(
                    path=f"bins[{index}].w",
                    message=(
                        f"Bin '{entry.label}' is {entry.w} cells wide; "
                        f"the grid has {spec.cols} columns"
                    ),
                    suggestion=f"Use w <= {spec.cols} or a wider drawer",
                )
            )
        if entry.h > spec.rows:
            issues.append(
                ReplayIssue(
                    path=f"bins[{index}].h",
                    message=(
                        f"Bin '{entry.label}' is {entry.h} cells deep; "
                        f"the grid has {spec.rows} rows"
                    ),
                    suggestion=f"Use h <= {spec.rows} or a deeper drawer",
                )
            )
    return issues


def check_grid_advisories(config: LayoutConfiguration, spec: GridSpec) -> list[ReplayIssue]:
    """Warn about drawer and grid combinations that waste space."""
    grid = config.grid
    issues: list[ReplayIssue] = []

    if grid.cell_size_mm > grid.drawer_width_mm or grid.cell_size_mm > grid.drawer_height_mm:
        issues.append(
            ReplayIssue(
                path="grid.cell_size_mm",
                message=(
                    f"Cell size {grid.cell_size_mm:g} mm is larger than the drawer; "
                    f"the grid collapses to {spec.cols}x{spec.rows}"
                ),
                suggestion="Use a smaller cell size",
            )
        )

    if grid.model_fields_set & SIZE_FIELDS:
        half_cell = grid.cell_size_mm / 2
        for name, length, count, axis in (
            ("drawer_width_mm", grid.drawer_width_mm, spec.cols, "width"),
            ("drawer_height_mm", grid.drawer_height_mm, spec.rows, "depth"),
        ):
            unused = length - count * grid.cell_size_mm
            if unused > half_cell:
                issues.append(
                    ReplayIssue(
                        path=f"grid.{name}",
                        message=f"{unused:g} mm of drawer {axis} is not covered by the grid",
                    )
                )

    for index, entry in enumerate(config.bins):
        if entry.height_mm < MIN_BIN_HEIGHT_MM:
            issues.append(
                ReplayIssue(
                    path=f"bins[{index}].height_mm",
                    message=(
                        f"Bin height {entry.height_mm:g} mm is raised to the "
                        f"{MIN_BIN_HEIGHT_MM:g} mm minimum"
                    ),
                )
            )
    return issues


def validate_config(config: LayoutConfiguration) -> ValidationResult:
    """Validate a configuration against the layout rules.

    Replays the configuration and reports every bin the engine refused or
    moved, plus grid advisories. A bin larger than the grid is an error;
    its replay failure is not repeated as a warning.

    Args:
        config: Configuration already validated against the schema.

    Returns:
        ValidationResult with errors and warnings.
    """
    spec = config_to_grid_spec(config.grid)
    result = ValidationResult(errors=find_oversized_bins(config, spec))
    oversized = {_bin_index(issue.path) for issue in result.errors}

    result.warnings.extend(check_grid_advisories(config, spec))
    result.warnings.extend(
        issue
        for issue in build_layout(config).issues
        if _bin_index(issue.path) not in oversized
    )
    return result


def _bin_index(path: str) -> int | None:
    match = _BIN_PATH.match(path)
    return int(match.group(1)) if match else None
