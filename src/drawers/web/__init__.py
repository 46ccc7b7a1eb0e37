"""FastAPI REST API for drawer layouts.

This module provides a REST API for editing a layout, loading
configurations, and exporting to the supported formats.

Usage:
    uvicorn drawers.web:app --reload
    drawers serve --reload
"""

from drawers.web.app import app, create_app

__all__ = ["app", "create_app"]
