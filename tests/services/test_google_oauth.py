from unittest.mock import Mock

import pytest

from services.auth import google_oauth


class FakeFlow:
    def __init__(self, token="access", refresh_token="refresh", error=None):
        self.credentials = Mock(token=token, refresh_token=refresh_token)
        self.error = error
        self.codes = []

    def fetch_token(self, code):
        self.codes.append(code)
        if self.error is not None:
            raise self.error


def test_exchange_code_returns_credentials(monkeypatch):
    flow = FakeFlow()
    monkeypatch.setattr(google_oauth, "_flow", lambda: flow)

    creds = google_oauth.exchange_code("the-code")

    assert flow.codes == ["the-code"]
    assert creds.access_token == "access"
    assert creds.refresh_token == "refresh"


def test_exchange_code_wraps_provider_errors(monkeypatch):
    monkeypatch.setattr(google_oauth, "_flow", lambda: FakeFlow(error=ValueError("invalid_grant")))

    with pytest.raises(google_oauth.OAuthExchangeError):
        google_oauth.exchange_code("bad")


def test_exchange_code_requires_access_token(monkeypatch):
    monkeypatch.setattr(google_oauth, "_flow", lambda: FakeFlow(token=None))

    with pytest.raises(google_oauth.OAuthExchangeError):
        google_oauth.exchange_code("code")


def test_client_config_uses_settings():
    config = google_oauth.client_config()["web"]
    assert config["client_id"] == "client-id.apps.googleusercontent.com"
    assert config["redirect_uris"] == ["http://testserver/api/auth/callback"]


def test_revoke_posts_token():
    resp = Mock()
    resp.raise_for_status = lambda: None
    session = Mock()
    session.post.return_value = resp

    assert google_oauth.revoke("tok", session=session) is True
    _, kwargs = session.post.call_args
    assert kwargs["params"] == {"token": "tok"}


def test_revoke_failure_is_reported_not_raised():
    session = Mock()
    session.post.side_effect = ConnectionError("offline")

    assert google_oauth.revoke("tok", session=session) is False
