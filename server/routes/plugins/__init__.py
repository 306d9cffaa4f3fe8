"""
Plugin route registration.
"""

from fastapi import FastAPI

from . import create, delete, list, stream


def register_routes(app: FastAPI) -> None:
    """Register all plugin routes."""
    app.include_router(stream.router)
    app.include_router(list.router)
    app.include_router(create.router)
    app.include_router(delete.router)
