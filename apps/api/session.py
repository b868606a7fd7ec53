"""Per-request credential session backed by browser cookies.

Endpoints never touch cookies directly. They receive a
:class:`CredentialSession` that wraps a :class:`CredentialStore`, so the
cookie store can be replaced with a server-side one without changing the
routers.
"""

from __future__ import annotations

from typing import Optional, Protocol

from fastapi import Request
from starlette.responses import Response

from shared.config import settings
from shared.types import Credentials

ACCESS_TOKEN_KEY = "google_access_token"
REFRESH_TOKEN_KEY = "google_refresh_token"


class CredentialStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str, ttl: int) -> None: ...

    def delete(self, key: str) -> None: ...


class CookieStore:
    """Read cookies from the request and stage writes for the response."""

    def __init__(self, cookies: dict[str, str], *, secure: bool = False) -> None:
        self._cookies = dict(cookies)
        self._secure = secure
        self._pending: list[tuple[str, Optional[str], int]] = []

    def get(self, key: str) -> Optional[str]:
        return self._cookies.get(key)

    def set(self, key: str, value: str, ttl: int) -> None:
        self._cookies[key] = value
        self._pending.append((key, value, ttl))

    def delete(self, key: str) -> None:
        self._cookies.pop(key, None)
        self._pending.append((key, None, 0))

    def commit(self, response: Response) -> Response:
        """Write staged cookie changes onto ``response``."""
        for key, value, ttl in self._pending:
            if value is None:
                response.delete_cookie(
                    key, path="/", secure=self._secure, httponly=True, samesite="lax"
                )
            else:
                response.set_cookie(
                    key,
                    value,
                    max_age=ttl,
                    path="/",
                    secure=self._secure,
                    httponly=True,
                    samesite="lax",
                )
        self._pending.clear()
        return response


class CredentialSession:
    """OAuth credentials for the current client."""

    def __init__(self, store: CredentialStore) -> None:
        self.store = store

    def load(self) -> Optional[Credentials]:
        access = self.store.get(ACCESS_TOKEN_KEY)
        if not access:
            return None
        return Credentials(
            access_token=access,
            refresh_token=self.store.get(REFRESH_TOKEN_KEY) or None,
        )

    @property
    def authenticated(self) -> bool:
        return bool(self.store.get(ACCESS_TOKEN_KEY))

    def save(self, credentials: Credentials) -> None:
        ttl = settings.COOKIE_MAX_AGE
        self.store.set(ACCESS_TOKEN_KEY, credentials.access_token, ttl)
        if credentials.refresh_token:
            self.store.set(REFRESH_TOKEN_KEY, credentials.refresh_token, ttl)

    def clear(self) -> None:
        self.store.delete(ACCESS_TOKEN_KEY)
        self.store.delete(REFRESH_TOKEN_KEY)

    def commit(self, response: Response) -> Response:
        commit = getattr(self.store, "commit", None)
        if commit is not None:
            commit(response)
        return response


def get_credential_session(request: Request) -> CredentialSession:
    """FastAPI dependency returning the cookie-backed session."""
    return CredentialSession(CookieStore(request.cookies, secure=settings.is_production))


__all__ = [
    "ACCESS_TOKEN_KEY",
    "REFRESH_TOKEN_KEY",
    "CredentialStore",
    "CookieStore",
    "CredentialSession",
    "get_credential_session",
]
