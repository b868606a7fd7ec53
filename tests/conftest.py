import pytest
from fastapi.testclient import TestClient

from apps.api.main import app
from shared.config import settings


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    """Keep tests independent of any real keys in the environment."""
    monkeypatch.setattr(settings, "OPENAI_API_KEY", "")
    monkeypatch.setattr(settings, "GOOGLE_CLIENT_ID", "client-id.apps.googleusercontent.com")
    monkeypatch.setattr(settings, "GOOGLE_CLIENT_SECRET", "client-secret")
    monkeypatch.setattr(settings, "GOOGLE_REDIRECT_URI", "http://testserver/api/auth/callback")
    monkeypatch.setattr(settings, "ENVIRONMENT", "development")


@pytest.fixture(name="client")
def client_fixture():
    with TestClient(app) as client:
        yield client


class FakeYouTube:
    """Stand-in for the YouTube Data API resource."""

    def __init__(self, video_id="abc123", error=None, response=None):
        self.video_id = video_id
        self.error = error
        self.response = response
        self.calls = []

    def videos(self):
        return self

    def insert(self, **kwargs):
        self.calls.append(kwargs)
        return self

    def execute(self):
        if self.error is not None:
            raise self.error
        if self.response is not None:
            return self.response
        return {"id": self.video_id}


@pytest.fixture
def fake_youtube(monkeypatch):
    from services.uploader import upload_youtube

    youtube = FakeYouTube()
    built = []

    def fake_build(credentials):
        built.append(credentials)
        return youtube

    monkeypatch.setattr(upload_youtube, "build_youtube", fake_build)
    youtube.built = built
    return youtube
