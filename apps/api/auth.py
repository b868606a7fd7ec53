"""Google account linking endpoints."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, RedirectResponse

from services.auth import google_oauth
from shared.logging import log_error, log_info

from .session import CredentialSession, get_credential_session

router = APIRouter(prefix="/api/auth", tags=["auth"])


def _home(error: str | None = None) -> RedirectResponse:
    url = f"/?error={error}" if error else "/"
    return RedirectResponse(url, status_code=302)


@router.get("/google")
def google_login() -> RedirectResponse:
    """Redirect the browser to the Google consent screen."""
    if not google_oauth.oauth_configured():
        log_error("oauth_not_configured")
        return _home("oauth_not_configured")
    return RedirectResponse(google_oauth.authorization_url(), status_code=302)


@router.get("/callback")
def callback(
    code: Optional[str] = None,
    session: CredentialSession = Depends(get_credential_session),
) -> RedirectResponse:
    """Exchange the authorization code and store the tokens in cookies."""
    if not code:
        return _home("no_code")
    try:
        credentials = google_oauth.exchange_code(code)
    except Exception as exc:
        log_error("oauth_callback_error", error=str(exc))
        return _home("auth_failed")
    session.save(credentials)
    log_info("oauth_linked")
    return session.commit(_home())


@router.get("/status")
def status(session: CredentialSession = Depends(get_credential_session)) -> dict[str, bool]:
    """Report whether an access token cookie is present."""
    return {"authenticated": session.authenticated}


@router.post("/logout")
def logout(session: CredentialSession = Depends(get_credential_session)) -> JSONResponse:
    """Revoke the stored access token and clear the token cookies."""
    credentials = session.load()
    if credentials:
        google_oauth.revoke(credentials.access_token)
    session.clear()
    return session.commit(JSONResponse({"authenticated": False}))


__all__ = ["router"]
