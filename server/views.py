"""
Jinja2 view rendering for pages and HTML fragments.
"""

from collections.abc import Sequence
from pathlib import Path

from fastapi import Request
from fastapi.templating import Jinja2Templates
from starlette.responses import HTMLResponse

from core import Plugin

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
STYLESHEET_PATH = TEMPLATES_DIR / "styles.css"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def render_home(request: Request) -> HTMLResponse:
    return templates.TemplateResponse(request, "index.html")


def render_stream_page(request: Request) -> HTMLResponse:
    return templates.TemplateResponse(request, "stream.html")


def render_plugin_list(request: Request, plugins: Sequence[Plugin]) -> HTMLResponse:
    return templates.TemplateResponse(request, "plugins.html", {"plugins": plugins})


def render_plugin(request: Request, plugin: Plugin) -> HTMLResponse:
    return templates.TemplateResponse(request, "plugin.html", {"plugin": plugin})


def load_stylesheet() -> str:
    return STYLESHEET_PATH.read_text(encoding="utf-8")
