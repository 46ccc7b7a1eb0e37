"""Adapters from configuration models to domain objects.

``build_layout`` replays a configuration through a fresh LayoutState: each
bin entry is an add intent, optionally followed by a move intent. Entries
the engine refuses are collected as issues instead of raising, because a
refused placement is an ordinary outcome of the layout rules.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from drawers.application.config.schema import BinConfig, GridConfig, LayoutConfiguration
from drawers.application.dtos import BinRequest
from drawers.application.layout_state import LayoutState
from drawers.domain.value_objects import GridSpec

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReplayIssue:
    """A configured bin the engine refused or could not place as asked.

    Attributes:
        path: JSON path of the bin entry (e.g. "bins[3]").
        message: What happened.
        suggestion: Optional hint for fixing the configuration.
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class LayoutBuild:
    """Result of replaying a configuration.

    Attributes:
        state: Layout holding every bin that could be placed.
        cell_px: View scale from the configuration.
        issues: Bins that were skipped or left away from their target.
    """

    state: LayoutState
    cell_px: float
    issues: list[ReplayIssue] = field(default_factory=list)


def config_to_grid_spec(grid: GridConfig) -> GridSpec:
    """Convert grid configuration to a GridSpec."""
    return GridSpec(
        cell_size_mm=grid.cell_size_mm,
        drawer_width_mm=grid.drawer_width_mm,
        drawer_height_mm=grid.drawer_height_mm,
        wall_height_mm=grid.wall_height_mm,
        base_thickness_mm=grid.base_thickness_mm,
    )


def config_to_bin_request(entry: BinConfig) -> BinRequest:
    """Convert a bin entry to an add request."""
    return BinRequest(w=entry.w, h=entry.h, height_mm=entry.height_mm, label=entry.label)


def build_layout(config: LayoutConfiguration) -> LayoutBuild:
    """Replay a configuration into a new layout.

    Args:
        config: Validated configuration.

    Returns:
        LayoutBuild with the resulting state and any replay issues.
    """
    state = LayoutState(config_to_grid_spec(config.grid))
    build = LayoutBuild(state=state, cell_px=config.view.cell_px)

    for index, entry in enumerate(config.bins):
        path = f"bins[{index}]"
        result = state.add_bin(config_to_bin_request(entry))
        if not result.ok or result.bin is None:
            build.issues.append(
                ReplayIssue(
                    path=path,
                    message=f"No space for {entry.w}x{entry.h} bin '{entry.label}'",
                    suggestion="Use a smaller bin or a larger drawer",
                )
            )
            continue

        if entry.x is None and entry.y is None:
            continue

        placed = result.bin
        target_x = entry.x if entry.x is not None else placed.x
        target_y = entry.y if entry.y is not None else placed.y
        move = state.move_bin(placed.id, target_x, target_y)
        if not move.committed:
            build.issues.append(
                ReplayIssue(
                    path=path,
                    message=(
                        f"Bin '{entry.label}' collides at ({target_x}, {target_y}); "
                        f"left at ({move.x}, {move.y})"
                    ),
                )
            )
        elif (move.x, move.y) != (target_x, target_y):
            build.issues.append(
                ReplayIssue(
                    path=path,
                    message=(
                        f"Bin '{entry.label}' target ({target_x}, {target_y}) is outside "
                        f"the grid; clamped to ({move.x}, {move.y})"
                    ),
                )
            )

    state.select(None)
    logger.debug(
        "Replayed %d bin entries: %d placed, %d issues",
        len(config.bins),
        len(state),
        len(build.issues),
    )
    return build
