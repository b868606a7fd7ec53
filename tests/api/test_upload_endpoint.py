import json

import httplib2
from googleapiclient.errors import HttpError

from apps.api.session import ACCESS_TOKEN_KEY, REFRESH_TOKEN_KEY
from apps.api.upload import URL_UPLOAD_UNSUPPORTED
from services.uploader.upload_youtube import GENERIC_FAILURE

METADATA = {
    "title": "My video",
    "description": "All about it",
    "tags": ["one", "two"],
    "hashtags": ["#one", "#two"],
    "thumbnailPrompt": "Bright thumbnail",
}
VIDEO = {"video": ("clip.mp4", b"fake-video-bytes", "video/mp4")}


def _login(client, refresh=None):
    client.cookies.set(ACCESS_TOKEN_KEY, "access-token")
    if refresh:
        client.cookies.set(REFRESH_TOKEN_KEY, refresh)


def test_upload_requires_authentication(client, fake_youtube):
    res = client.post("/api/upload", data={"metadata": json.dumps(METADATA)}, files=VIDEO)

    assert res.status_code == 401
    assert res.json() == {"error": "Not authenticated"}
    assert fake_youtube.built == []
    assert fake_youtube.calls == []


def test_upload_requires_metadata(client, fake_youtube):
    _login(client)
    res = client.post("/api/upload", data={"monetization": "true"}, files=VIDEO)

    assert res.status_code == 400
    assert res.json() == {"error": "Metadata required"}
    assert fake_youtube.calls == []


def test_upload_rejects_invalid_metadata(client, fake_youtube):
    _login(client)
    res = client.post("/api/upload", data={"metadata": "{not json"}, files=VIDEO)

    assert res.status_code == 400
    assert res.json() == {"error": "Invalid metadata"}
    assert fake_youtube.calls == []


def test_upload_from_url_not_implemented(client, fake_youtube):
    _login(client)
    res = client.post(
        "/api/upload",
        data={"metadata": json.dumps(METADATA), "videoUrl": "https://example.com/v.mp4"},
    )

    assert res.status_code == 400
    assert res.json() == {"error": URL_UPLOAD_UNSUPPORTED}
    assert fake_youtube.built == []
    assert fake_youtube.calls == []


def test_upload_requires_video(client, fake_youtube):
    _login(client)
    res = client.post("/api/upload", data={"metadata": json.dumps(METADATA)})

    assert res.status_code == 400
    assert res.json() == {"error": "Video file or URL required"}


def test_upload_rejects_bad_schedule_time(client, fake_youtube):
    _login(client)
    res = client.post(
        "/api/upload",
        data={"metadata": json.dumps(METADATA), "scheduleTime": "next tuesday"},
        files=VIDEO,
    )

    assert res.status_code == 400
    assert res.json() == {"error": "Invalid schedule time"}
    assert fake_youtube.calls == []


def test_upload_publishes_immediately(client, fake_youtube):
    _login(client, refresh="refresh-token")
    res = client.post(
        "/api/upload",
        data={"metadata": json.dumps(METADATA), "monetization": "true", "category": "gaming"},
        files=VIDEO,
    )

    assert res.status_code == 200
    assert res.json() == {
        "videoId": "abc123",
        "videoUrl": "https://www.youtube.com/watch?v=abc123",
        "metadata": METADATA,
        "scheduledTime": None,
        "status": "Published",
    }
    creds = fake_youtube.built[0]
    assert creds.access_token == "access-token"
    assert creds.refresh_token == "refresh-token"
    call = fake_youtube.calls[0]
    assert call["part"] == "snippet,status"
    body = call["body"]
    assert body["snippet"]["description"] == "All about it\n\n#one #two"
    assert body["snippet"]["categoryId"] == "20"
    assert body["status"]["privacyStatus"] == "public"
    assert "publishAt" not in body["status"]
    assert call["media_body"].size() == len(b"fake-video-bytes")


def test_upload_scheduled(client, fake_youtube):
    _login(client)
    res = client.post(
        "/api/upload",
        data={"metadata": json.dumps(METADATA), "scheduleTime": "2030-01-02T03:04"},
        files=VIDEO,
    )

    assert res.status_code == 200
    data = res.json()
    assert data["status"] == "Scheduled"
    assert data["scheduledTime"] == "2030-01-02T03:04"
    status = fake_youtube.calls[0]["body"]["status"]
    assert status["privacyStatus"] == "private"
    assert status["publishAt"] == "2030-01-02T03:04:00.000Z"
    assert fake_youtube.calls[0]["body"]["snippet"]["categoryId"] == "28"


def test_upload_passes_through_youtube_error_message(client, fake_youtube):
    _login(client)
    content = json.dumps({"error": {"code": 403, "message": "The user has exceeded the upload quota."}})
    fake_youtube.error = HttpError(httplib2.Response({"status": "403"}), content.encode("utf-8"))

    res = client.post("/api/upload", data={"metadata": json.dumps(METADATA)}, files=VIDEO)

    assert res.status_code == 403
    assert res.json() == {"error": "The user has exceeded the upload quota."}


def test_upload_unstructured_failure_is_generic_500(client, fake_youtube):
    _login(client)
    fake_youtube.error = ConnectionError("socket closed")

    res = client.post("/api/upload", data={"metadata": json.dumps(METADATA)}, files=VIDEO)

    assert res.status_code == 500
    assert res.json() == {"error": GENERIC_FAILURE}


def test_upload_response_without_video_id_is_generic_500(client, fake_youtube):
    _login(client)
    fake_youtube.response = {"kind": "youtube#video"}

    res = client.post("/api/upload", data={"metadata": json.dumps(METADATA)}, files=VIDEO)

    assert res.status_code == 500
    assert res.headers["content-type"].startswith("application/json")
    assert res.json() == {"error": GENERIC_FAILURE}


def test_upload_client_build_failure_is_generic_500(client, monkeypatch):
    from services.uploader import upload_youtube

    def broken_build(credentials):
        raise ValueError("discovery document unavailable")

    monkeypatch.setattr(upload_youtube, "build_youtube", broken_build)
    _login(client)

    res = client.post("/api/upload", data={"metadata": json.dumps(METADATA)}, files=VIDEO)

    assert res.status_code == 500
    assert res.json() == {"error": GENERIC_FAILURE}


def test_upload_scheduled_with_utc_instant(client, fake_youtube):
    _login(client)
    res = client.post(
        "/api/upload",
        data={"metadata": json.dumps(METADATA), "scheduleTime": "2030-01-02T01:04:00.000Z"},
        files=VIDEO,
    )

    assert res.status_code == 200
    assert res.json()["scheduledTime"] == "2030-01-02T01:04:00.000Z"
    assert fake_youtube.calls[0]["body"]["status"]["publishAt"] == "2030-01-02T01:04:00.000Z"
