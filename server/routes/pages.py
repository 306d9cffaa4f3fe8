"""
Static page endpoints: landing page, stream demo page and stylesheet.
"""

from functools import lru_cache

from fastapi import APIRouter, Request, Response
from fastapi.responses import HTMLResponse

from ..views import load_stylesheet, render_home, render_stream_page


router = APIRouter()


@lru_cache(maxsize=1)
def _stylesheet() -> str:
    return load_stylesheet()


@router.get("/", response_class=HTMLResponse)
async def home(request: Request) -> HTMLResponse:
    """Landing page with the plugin form and list."""
    return render_home(request)


@router.get("/stream", response_class=HTMLResponse)
async def stream_page(request: Request) -> HTMLResponse:
    """Page that renders live plugin events."""
    return render_stream_page(request)


@router.get("/styles.css")
async def styles() -> Response:
    return Response(content=_stylesheet(), status_code=200, media_type="text/css")
