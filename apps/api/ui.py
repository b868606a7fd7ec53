"""Browser UI for choosing a video, editing metadata and uploading."""

from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from services.metadata.generator import llm_configured
from shared.types import LANGUAGE_NAMES, Category

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
STATIC_DIR = Path(__file__).resolve().parent / "static"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
router = APIRouter(tags=["ui"])

ERROR_MESSAGES = {
    "no_code": "Google sign-in was cancelled before an authorization code was issued.",
    "auth_failed": "Could not link your Google account. Please try again.",
    "oauth_not_configured": "Google sign-in is not configured on this server.",
}


@router.get("/", response_class=HTMLResponse)
def index(request: Request, error: str | None = None):
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "categories": [c.value for c in Category],
            "languages": [(lang.value, name) for lang, name in LANGUAGE_NAMES.items()],
            "error": ERROR_MESSAGES.get(error or "", error or ""),
            "demo_mode": not llm_configured(),
        },
    )


__all__ = ["router", "templates", "STATIC_DIR"]
