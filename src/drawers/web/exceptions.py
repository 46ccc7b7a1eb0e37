"""Custom exceptions and error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from drawers.application import BinNotFoundError
from drawers.application.config import ConfigError


class NoSpaceError(Exception):
    """Raised when a new bin has no free position in the grid."""

    def __init__(self, w: int, h: int, cols: int, rows: int) -> None:
        self.w = w
        self.h = h
        self.cols = cols
        self.rows = rows
        super().__init__(f"No space for a {w}x{h} bin in the {cols}x{rows} grid")


class UnsupportedFormatError(Exception):
    """Raised when requested export format is not supported."""

    def __init__(self, format_name: str, available: list[str]) -> None:
        self.format_name = format_name
        self.available = available
        super().__init__(
            f"Unsupported format: {format_name}. Available: {', '.join(available)}"
        )


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(NoSpaceError)
    async def no_space_handler(request: Request, exc: NoSpaceError) -> JSONResponse:
        return JSONResponse(
            status_code=409,
            content={
                "error": str(exc),
                "error_type": "no_space",
                "details": {"w": exc.w, "h": exc.h, "cols": exc.cols, "rows": exc.rows},
            },
        )

    @app.exception_handler(BinNotFoundError)
    async def bin_not_found_handler(
        request: Request, exc: BinNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={
                "error": str(exc),
                "error_type": "not_found",
                "details": {"bin_id": exc.bin_id},
            },
        )

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Invalid configuration",
                "error_type": exc.error_type,
                "details": exc.details,
            },
        )

    @app.exception_handler(UnsupportedFormatError)
    async def unsupported_format_handler(
        request: Request, exc: UnsupportedFormatError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={
                "error": str(exc),
                "error_type": "unsupported_format",
                "details": {"format": exc.format_name, "available": exc.available},
            },
        )
