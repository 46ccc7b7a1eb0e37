"""FastAPI dependency injection for the shared layout state."""

from typing import Annotated

from fastapi import Depends, Request

from drawers.application import LayoutState


def get_layout_state(request: Request) -> LayoutState:
    """Dependency for the application's LayoutState."""
    return request.app.state.layout_state


def get_cell_px(request: Request) -> float:
    """Dependency for the view scale used by image exports."""
    return request.app.state.cell_px


# Type aliases for cleaner endpoint signatures
LayoutStateDep = Annotated[LayoutState, Depends(get_layout_state)]
CellPxDep = Annotated[float, Depends(get_cell_px)]
