from __future__ import annotations

"""Upload a single video to YouTube with its SEO metadata."""

from datetime import datetime, timezone
import io
import json
from typing import Any, Optional

from google.oauth2.credentials import Credentials as GoogleCredentials
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError
from googleapiclient.http import MediaIoBaseUpload

from services.auth.google_oauth import SCOPES
from shared.config import settings
from shared.logging import log_error, log_info
from shared.types import Category, Credentials, UploadResult, VideoMetadata

GENERIC_FAILURE = (
    "Failed to upload video. Make sure your Google account has access to YouTube."
)

# YouTube Data API video category ids
YOUTUBE_CATEGORY_IDS: dict[Category, str] = {
    Category.TECH: "28",
    Category.VLOG: "22",
    Category.SHORTS: "22",
    Category.GAMING: "20",
    Category.TUTORIAL: "26",
    Category.ENTERTAINMENT: "24",
    Category.EDUCATION: "27",
    Category.MUSIC: "10",
}


class UploadError(RuntimeError):
    """Upload failure carrying the message and HTTP status to report."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def category_id(category: Category | None) -> str:
    """Return the YouTube categoryId for ``category``."""
    if category is None:
        return settings.YOUTUBE_DEFAULT_CATEGORY_ID
    return YOUTUBE_CATEGORY_IDS[category]


def compose_description(metadata: VideoMetadata) -> str:
    """Append the hashtags to the description, separated by a blank line."""
    return f"{metadata.description}\n\n{' '.join(metadata.hashtags)}"


def parse_schedule_time(value: str | None) -> Optional[datetime]:
    """Parse an ISO-8601 schedule time; naive values are taken as UTC.

    Raises ``ValueError`` for unparseable input.
    """
    if not value or not value.strip():
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    when = datetime.fromisoformat(text)
    if when.tzinfo is None:
        when = when.replace(tzinfo=timezone.utc)
    return when.astimezone(timezone.utc)


def resolve_visibility(publish_at: datetime | None) -> tuple[str, Optional[str]]:
    """Return ``(privacyStatus, publishAt)`` for the upload."""
    if publish_at is None:
        return "public", None
    stamp = publish_at.astimezone(timezone.utc).isoformat(timespec="milliseconds")
    return "private", stamp.replace("+00:00", "Z")


def build_request_body(
    metadata: VideoMetadata,
    *,
    category: str,
    publish_at: datetime | None = None,
) -> dict[str, Any]:
    """Build the ``videos.insert`` request body."""
    privacy_status, publish_stamp = resolve_visibility(publish_at)
    status: dict[str, Any] = {
        "privacyStatus": privacy_status,
        "selfDeclaredMadeForKids": False,
        "embeddable": True,
        "publicStatsViewable": True,
    }
    if publish_stamp:
        status["publishAt"] = publish_stamp
    return {
        "snippet": {
            "title": metadata.title,
            "description": compose_description(metadata),
            "tags": metadata.tags,
            "categoryId": category,
        },
        "status": status,
    }


def watch_url(video_id: str) -> str:
    return f"https://www.youtube.com/watch?v={video_id}"


def build_youtube(credentials: Credentials):
    """Return a YouTube Data API client authorized with ``credentials``."""
    creds = GoogleCredentials(
        token=credentials.access_token,
        refresh_token=credentials.refresh_token,
        token_uri=settings.GOOGLE_TOKEN_URI,
        client_id=settings.GOOGLE_CLIENT_ID or None,
        client_secret=settings.GOOGLE_CLIENT_SECRET or None,
        scopes=SCOPES,
    )
    return build("youtube", "v3", credentials=creds, cache_discovery=False)


def _http_error_message(exc: HttpError) -> Optional[str]:
    """Extract ``error.message`` from a Google API error body, if any."""
    try:
        payload = json.loads(exc.content.decode("utf-8"))
    except (ValueError, AttributeError):
        return None
    error = payload.get("error") if isinstance(payload, dict) else None
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])
    return None


def upload(
    credentials: Credentials,
    metadata: VideoMetadata,
    data: bytes,
    *,
    mimetype: str | None = None,
    schedule_time: str | None = None,
    category: Category | None = None,
    monetization: bool = False,
    youtube: Any | None = None,
) -> UploadResult:
    """Upload ``data`` as a new video and return the resulting record.

    The whole payload is held in memory and sent in a single request.
    ``monetization`` is recorded in the log only; the Data API call does
    not carry it.
    """
    publish_at = parse_schedule_time(schedule_time)
    body = build_request_body(metadata, category=category_id(category), publish_at=publish_at)
    media = MediaIoBaseUpload(
        io.BytesIO(data),
        mimetype=mimetype or "application/octet-stream",
        resumable=False,
    )
    log_info(
        "upload_start",
        title=metadata.title,
        bytes=len(data),
        privacy=body["status"]["privacyStatus"],
        monetization=monetization,
    )
    try:
        client = youtube or build_youtube(credentials)
        response = client.videos().insert(
            part="snippet,status",
            body=body,
            media_body=media,
        ).execute()
    except HttpError as exc:
        message = _http_error_message(exc)
        status = getattr(exc.resp, "status", None) or 500
        log_error("upload_error", status=status, error=message or str(exc))
        if message:
            raise UploadError(message, int(status)) from exc
        raise UploadError(GENERIC_FAILURE) from exc
    except Exception as exc:
        log_error("upload_error", status=500, error=str(exc))
        raise UploadError(GENERIC_FAILURE) from exc

    video_id = response.get("id") if isinstance(response, dict) else None
    if not video_id:
        log_error("upload_error", status=500, error="insert response carried no video id")
        raise UploadError(GENERIC_FAILURE)
    scheduled = schedule_time if publish_at else None
    result = UploadResult(
        video_id=video_id,
        video_url=watch_url(video_id),
        metadata=metadata,
        scheduled_time=scheduled,
        status="Scheduled" if scheduled else "Published",
    )
    log_info("upload_done", video_id=video_id, status=result.status)
    return result


__all__ = [
    "GENERIC_FAILURE",
    "UploadError",
    "build_request_body",
    "build_youtube",
    "category_id",
    "compose_description",
    "parse_schedule_time",
    "resolve_visibility",
    "upload",
    "watch_url",
]
