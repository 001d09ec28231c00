from __future__ import annotations

from pathlib import Path
from typing import Any

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


def create_templates() -> Jinja2Templates:
    return Jinja2Templates(directory=str(TEMPLATES_DIR))


def render(
    request: Request,
    name: str,
    context: dict[str, Any] | None = None,
    *,
    status_code: int = 200,
) -> HTMLResponse:
    templates: Jinja2Templates | None = getattr(request.app.state, "templates", None)
    if templates is None:
        raise RuntimeError("Templates not configured")
    settings = getattr(request.app.state, "settings", None)
    ctx: dict[str, Any] = {"app_title": settings.app_title if settings else "Animal Catalog"}
    ctx.update(context or {})
    return templates.TemplateResponse(request, name, ctx, status_code=status_code)
