"""Pydantic schemas for the REST API."""

from drawers.web.schemas.requests import (
    AddBinRequest,
    ClientViewRequest,
    GridSpecRequest,
    LoadConfigRequest,
    MoveBinRequest,
    SelectionRequest,
)
from drawers.web.schemas.responses import (
    BinSchema,
    ClientViewSchema,
    ConfigureResponse,
    ErrorResponseSchema,
    ExportFormatsSchema,
    GridSpecSchema,
    LayoutSchema,
    LoadConfigResponse,
    MoveResponse,
    ReplayIssueSchema,
    SelectionSchema,
)

__all__ = [
    # Requests
    "AddBinRequest",
    "ClientViewRequest",
    "GridSpecRequest",
    "LoadConfigRequest",
    "MoveBinRequest",
    "SelectionRequest",
    # Responses
    "BinSchema",
    "ClientViewSchema",
    "ConfigureResponse",
    "ErrorResponseSchema",
    "ExportFormatsSchema",
    "GridSpecSchema",
    "LayoutSchema",
    "LoadConfigResponse",
    "MoveResponse",
    "ReplayIssueSchema",
    "SelectionSchema",
]
