"""FastAPI application factory."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from drawers import __version__
from drawers.application import LayoutState
from drawers.domain.services import DEFAULT_CELL_PX
from drawers.web.exceptions import register_exception_handlers
from drawers.web.routers import export_router, layout_router


def create_app(
    state: LayoutState | None = None,
    cell_px: float = DEFAULT_CELL_PX,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        state: Layout to serve. A fresh default layout is created if omitted.
        cell_px: View scale for image exports.

    Returns:
        Configured FastAPI application instance.
    """
    app = FastAPI(
        title="Drawer Layout API",
        description="REST API for planning Gridfinity bin layouts in drawers",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # All handlers are async, so mutations of the shared state run one at a
    # time on the event loop.
    app.state.layout_state = state if state is not None else LayoutState()
    app.state.cell_px = cell_px

    # CORS middleware for browser access
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(layout_router, prefix="/api/v1")
    app.include_router(export_router, prefix="/api/v1")

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


# Application instance for ASGI servers (uvicorn)
app = create_app()
