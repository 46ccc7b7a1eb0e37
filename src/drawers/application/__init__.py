"""Application layer - layout state, drag sessions and configuration."""

from .drag import PointerDragSession, WorldDragSession
from .dtos import BinRequest, LayoutSnapshot
from .layout_state import BinNotFoundError, LayoutState
from .results import AddBinResult, MoveRejection, MoveResult, PlacementFailure

__all__ = [
    "AddBinResult",
    "BinNotFoundError",
    "BinRequest",
    "LayoutSnapshot",
    "LayoutState",
    "MoveRejection",
    "MoveResult",
    "PlacementFailure",
    "PointerDragSession",
    "WorldDragSession",
]
