"""
Route registration for the plugin feed server.
"""

from fastapi import FastAPI

from . import health, pages, plugins


def register_routes(app: FastAPI) -> None:
    """Register all routes with the FastAPI application."""
    app.include_router(pages.router)
    app.include_router(health.router)
    plugins.register_routes(app)
