"""Google OAuth web flow used to link a YouTube account."""

from __future__ import annotations

import requests
from google_auth_oauthlib.flow import Flow

from shared.config import settings
from shared.logging import log_error, log_info
from shared.types import Credentials

SCOPES = [
    "https://www.googleapis.com/auth/youtube.upload",
    "https://www.googleapis.com/auth/youtube.readonly",
]


class OAuthExchangeError(RuntimeError):
    """Raised when an authorization code cannot be exchanged for tokens."""


def client_config() -> dict:
    """Return the ``web`` client configuration expected by ``Flow``."""
    return {
        "web": {
            "client_id": settings.GOOGLE_CLIENT_ID,
            "client_secret": settings.GOOGLE_CLIENT_SECRET,
            "auth_uri": settings.GOOGLE_AUTH_URI,
            "token_uri": settings.GOOGLE_TOKEN_URI,
            "redirect_uris": [settings.GOOGLE_REDIRECT_URI],
        }
    }


def _flow() -> Flow:
    # The callback builds a fresh flow, so no PKCE verifier can be carried over.
    return Flow.from_client_config(
        client_config(),
        scopes=SCOPES,
        redirect_uri=settings.GOOGLE_REDIRECT_URI,
        autogenerate_code_verifier=False,
    )


def oauth_configured() -> bool:
    return bool(settings.GOOGLE_CLIENT_ID)


def authorization_url() -> str:
    """Return the Google consent screen URL requesting offline access."""
    url, _ = _flow().authorization_url(access_type="offline", prompt="consent")
    return url


def exchange_code(code: str) -> Credentials:
    """Exchange an authorization ``code`` for access and refresh tokens."""
    flow = _flow()
    try:
        flow.fetch_token(code=code)
    except Exception as exc:
        raise OAuthExchangeError(str(exc)) from exc
    creds = flow.credentials
    if not creds.token:
        raise OAuthExchangeError("token response carried no access token")
    log_info("oauth_exchange", has_refresh_token=bool(creds.refresh_token))
    return Credentials(access_token=creds.token, refresh_token=creds.refresh_token)


def revoke(token: str, session: requests.sessions.Session | None = None) -> bool:
    """Revoke ``token`` at Google. Returns False instead of raising."""
    sess = session or requests
    try:
        resp = sess.post(
            settings.GOOGLE_REVOKE_URI,
            params={"token": token},
            headers={"Content-Type": "application/x-www-form-urlencoded"},
            timeout=10,
        )
        resp.raise_for_status()
    except Exception as exc:
        log_error("oauth_revoke_error", error=str(exc))
        return False
    log_info("oauth_revoked")
    return True


__all__ = [
    "SCOPES",
    "OAuthExchangeError",
    "authorization_url",
    "client_config",
    "exchange_code",
    "oauth_configured",
    "revoke",
]
