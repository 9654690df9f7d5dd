"""Jinja2 template environment for the server-rendered pages."""

from pathlib import Path
from typing import Any

from fastapi import Request, status
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from app.config import get_settings

_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

# Autoescaping is on for every .html template; rich article content opts out with |safe.
templates = Jinja2Templates(directory=str(_TEMPLATES_DIR))


def render_page(
    request: Request,
    template_name: str,
    status_code: int = status.HTTP_200_OK,
    **context: Any,
) -> HTMLResponse:
    """Render a page inside the shared layout."""
    context.setdefault("settings", get_settings())
    return templates.TemplateResponse(
        request,
        template_name,
        context,
        status_code=status_code,
    )
