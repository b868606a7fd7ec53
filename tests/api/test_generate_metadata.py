import json
from types import SimpleNamespace

from services.metadata import fallback, generator
from shared.config import settings
from shared.types import Category


class FakeCompletions:
    def __init__(self, content=None, error=None):
        self.content = content
        self.error = error
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def _fake_openai(monkeypatch, **kwargs):
    completions = FakeCompletions(**kwargs)
    client = SimpleNamespace(chat=SimpleNamespace(completions=completions))
    monkeypatch.setattr(settings, "OPENAI_API_KEY", "sk-test")
    monkeypatch.setattr(generator, "_client", lambda: client)
    return completions


def test_fallback_metadata_for_gaming(client):
    res = client.post("/api/generate-metadata", data={"category": "gaming", "language": "en"})

    assert res.status_code == 200
    metadata = res.json()["metadata"]
    assert metadata["title"] == fallback.TITLES[Category.GAMING]
    assert metadata["hashtags"] == fallback.HASHTAGS[Category.GAMING]
    assert set(metadata) == {"title", "description", "tags", "hashtags", "thumbnailPrompt"}


def test_unknown_category_uses_tech_fallback(client):
    unknown = client.post("/api/generate-metadata", data={"category": "cooking"}).json()
    tech = client.post("/api/generate-metadata", data={"category": "tech"}).json()
    assert unknown == tech


def test_missing_fields_default_to_tech(client):
    res = client.post("/api/generate-metadata", data={})
    assert res.json()["metadata"]["title"] == fallback.TITLES[Category.TECH]


def test_llm_prompt_uses_file_name_over_url(client, monkeypatch):
    payload = {
        "title": "Generated",
        "description": "Body",
        "tags": ["a", "b"],
        "hashtags": ["#a"],
        "thumbnailPrompt": "A thumbnail",
    }
    completions = _fake_openai(monkeypatch, content=json.dumps(payload))

    res = client.post(
        "/api/generate-metadata",
        data={"category": "music", "language": "ja", "videoUrl": "https://example.com/v"},
        files={"video": ("concert.mp4", b"\x00\x01", "video/mp4")},
    )

    assert res.status_code == 200
    assert res.json() == {"metadata": payload}
    call = completions.calls[0]
    assert call["response_format"] == {"type": "json_object"}
    assert call["temperature"] == settings.OPENAI_TEMPERATURE
    system, user = call["messages"]
    assert system["role"] == "system"
    assert "music video in Japanese" in system["content"]
    assert "video file: concert.mp4" in user["content"]
    assert "example.com" not in user["content"]


def test_llm_malformed_response_is_generic_500(client, monkeypatch):
    _fake_openai(monkeypatch, content=json.dumps({"title": "only a title"}))

    res = client.post("/api/generate-metadata", data={"category": "tech"})

    assert res.status_code == 500
    assert res.json() == {"error": "Failed to generate metadata"}


def test_llm_non_json_response_is_generic_500(client, monkeypatch):
    _fake_openai(monkeypatch, content="Sure! Here is your metadata:")

    res = client.post("/api/generate-metadata", data={"category": "tech"})

    assert res.status_code == 500
    assert res.json() == {"error": "Failed to generate metadata"}


def test_llm_provider_error_is_generic_500(client, monkeypatch):
    completions = _fake_openai(monkeypatch, error=RuntimeError("rate limited"))

    res = client.post("/api/generate-metadata", data={"videoUrl": "https://example.com/v"})

    assert res.status_code == 500
    assert res.json() == {"error": "Failed to generate metadata"}
    assert len(completions.calls) == 1
