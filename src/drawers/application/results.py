"""Result types for layout mutations.

Rejections during interactive editing are normal outcomes, not faults, so
they are reported through these values instead of exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from drawers.domain.entities import Bin


class PlacementFailure(str, Enum):
    """Why an add request was refused."""

    NO_SPACE = "no_space"


class MoveRejection(str, Enum):
    """Why a move request left the bin where it was."""

    COLLISION = "collision"
    UNKNOWN_BIN = "unknown_bin"


@dataclass(frozen=True)
class AddBinResult:
    """Outcome of an add request.

    Attributes:
        bin: Copy of the placed bin, or None on failure.
        failure: Failure reason, or None on success.
    """

    bin: Bin | None = None
    failure: PlacementFailure | None = None

    @property
    def ok(self) -> bool:
        """True if the bin was placed."""
        return self.failure is None

    @classmethod
    def placed(cls, bin: Bin) -> AddBinResult:
        return cls(bin=bin)

    @classmethod
    def no_space(cls) -> AddBinResult:
        return cls(failure=PlacementFailure.NO_SPACE)


@dataclass(frozen=True)
class MoveResult:
    """Outcome of a move request.

    ``x`` and ``y`` always hold the bin's committed position after the
    request, whether it moved or not.

    Attributes:
        committed: True if the requested (clamped) position was applied.
        x: Committed left column.
        y: Committed top row.
        rejection: Reason the move was refused, or None.
    """

    committed: bool
    x: int | None = None
    y: int | None = None
    rejection: MoveRejection | None = None
