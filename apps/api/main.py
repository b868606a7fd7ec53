"""FastAPI application serving the upload UI and its API endpoints."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.staticfiles import StaticFiles
from starlette.middleware.base import BaseHTTPMiddleware
from time import monotonic

from shared.logging import log_info

from .auth import router as auth_router
from .errors import ApiError, api_error_handler
from .metadata import router as metadata_router
from .ui import STATIC_DIR, router as ui_router
from .upload import router as upload_router


app = FastAPI(title="tubeseo")


class LogRequestsMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start = monotonic()
        response = await call_next(request)
        duration_ms = int((monotonic() - start) * 1000)
        log_info(
            "request",
            method=request.method,
            path=request.url.path,
            status=response.status_code,
            duration_ms=duration_ms,
        )
        return response


app.add_middleware(LogRequestsMiddleware)
app.add_exception_handler(ApiError, api_error_handler)
app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")
app.include_router(auth_router)
app.include_router(metadata_router)
app.include_router(upload_router)
app.include_router(ui_router)


@app.get("/healthz")
async def health() -> dict[str, str]:
    """Liveness probe."""
    return {"status": "ok"}
