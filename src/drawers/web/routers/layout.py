"""Layout endpoints: grid, bins, selection and presentation."""

from fastapi import APIRouter, Request, Response, status

from drawers.application import BinNotFoundError, BinRequest, LayoutState, MoveRejection
from drawers.application.config import build_layout, load_config_from_dict
from drawers.domain.value_objects import GridSpec
from drawers.web.dependencies import LayoutStateDep
from drawers.web.exceptions import NoSpaceError
from drawers.web.schemas import (
    AddBinRequest,
    BinSchema,
    ClientViewRequest,
    ClientViewSchema,
    ConfigureResponse,
    GridSpecRequest,
    GridSpecSchema,
    LayoutSchema,
    LoadConfigRequest,
    LoadConfigResponse,
    MoveBinRequest,
    MoveResponse,
    ReplayIssueSchema,
    SelectionRequest,
    SelectionSchema,
)

router = APIRouter(prefix="/layout", tags=["layout"])


def _layout_schema(state: LayoutState) -> LayoutSchema:
    spec = state.grid_spec
    return LayoutSchema(
        grid_spec=GridSpecSchema(**spec.to_dict()),
        cols=state.cols,
        rows=state.rows,
        info=spec.describe(),
        bins=[BinSchema.from_bin(b) for b in state.list_bins()],
        selected_id=state.selection,
        client_view=state.client_view,
    )


@router.get("", response_model=LayoutSchema)
async def get_layout(state: LayoutStateDep) -> LayoutSchema:
    """Return the grid, the bins, the selection and the view flag."""
    return _layout_schema(state)


@router.put("/grid", response_model=ConfigureResponse)
async def configure_grid(
    request: GridSpecRequest, state: LayoutStateDep
) -> ConfigureResponse:
    """Change the drawer and grid parameters.

    Bins that no longer fit, or that overlap an earlier bin after the
    change, are removed and listed in the response.
    """
    before = [b.id for b in state.list_bins()]
    size = state.configure(GridSpec(**request.model_dump()))
    remaining = {b.id for b in state.list_bins()}
    return ConfigureResponse(
        cols=size.cols,
        rows=size.rows,
        dropped=[bin_id for bin_id in before if bin_id not in remaining],
    )


@router.post("/config", response_model=LoadConfigResponse)
async def load_layout_config(
    request: LoadConfigRequest, http_request: Request
) -> LoadConfigResponse:
    """Replace the layout with one replayed from a configuration.

    Raises:
        ConfigError: If the configuration fails validation (422).
    """
    config = load_config_from_dict(request.config)
    build = build_layout(config)
    http_request.app.state.layout_state = build.state
    http_request.app.state.cell_px = build.cell_px
    return LoadConfigResponse(
        layout=_layout_schema(build.state),
        issues=[
            ReplayIssueSchema(path=i.path, message=i.message, suggestion=i.suggestion)
            for i in build.issues
        ],
    )


@router.get("/bins", response_model=list[BinSchema])
async def list_bins(state: LayoutStateDep) -> list[BinSchema]:
    """List bins in insertion order."""
    return [BinSchema.from_bin(b) for b in state.list_bins()]


@router.post("/bins", response_model=BinSchema, status_code=status.HTTP_201_CREATED)
async def add_bin(request: AddBinRequest, state: LayoutStateDep) -> BinSchema:
    """Add a bin at the first free position and select it.

    Raises:
        NoSpaceError: If the bin fits nowhere (409).
    """
    bin_request = BinRequest(
        w=request.w, h=request.h, height_mm=request.height_mm, label=request.label
    )
    result = state.add_bin(bin_request)
    if result.bin is None:
        normalized = bin_request.normalized()
        raise NoSpaceError(normalized.w, normalized.h, state.cols, state.rows)
    return BinSchema.from_bin(result.bin)


@router.get("/bins/{bin_id}", response_model=BinSchema)
async def get_bin(bin_id: str, state: LayoutStateDep) -> BinSchema:
    """Return one bin."""
    b = state.get_bin(bin_id)
    if b is None:
        raise BinNotFoundError(bin_id)
    return BinSchema.from_bin(b)


@router.patch("/bins/{bin_id}/position", response_model=MoveResponse)
async def move_bin(
    bin_id: str, request: MoveBinRequest, state: LayoutStateDep
) -> MoveResponse:
    """Move a bin.

    The target is clamped into the grid. A collision is not an error: the
    response reports ``committed: false`` and the unchanged position.
    """
    result = state.move_bin(bin_id, request.x, request.y)
    if result.rejection is MoveRejection.UNKNOWN_BIN:
        raise BinNotFoundError(bin_id)
    return MoveResponse(
        committed=result.committed,
        x=result.x,
        y=result.y,
        rejection=result.rejection.value if result.rejection else None,
    )


@router.delete("/bins/{bin_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_bin(bin_id: str, state: LayoutStateDep) -> Response:
    """Remove a bin."""
    if bin_id not in state:
        raise BinNotFoundError(bin_id)
    state.remove_bin(bin_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/bins", status_code=status.HTTP_204_NO_CONTENT)
async def clear_bins(state: LayoutStateDep) -> Response:
    """Remove every bin."""
    state.clear()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/selection", response_model=SelectionSchema)
async def get_selection(state: LayoutStateDep) -> SelectionSchema:
    return SelectionSchema(selected_id=state.selection)


@router.put("/selection", response_model=SelectionSchema)
async def set_selection(
    request: SelectionRequest, state: LayoutStateDep
) -> SelectionSchema:
    """Select a bin, or clear the selection with ``null``."""
    state.select(request.bin_id)
    return SelectionSchema(selected_id=state.selection)


@router.put("/client-view", response_model=ClientViewSchema)
async def set_client_view(
    request: ClientViewRequest, state: LayoutStateDep
) -> ClientViewSchema:
    """Switch the presentation palette used by image exports."""
    state.set_client_view(request.enabled)
    return ClientViewSchema(enabled=state.client_view)
