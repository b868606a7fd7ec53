"""Video upload endpoint."""

from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile
from pydantic import ValidationError

from services.uploader import upload_youtube
from shared.types import Category, VideoMetadata

from .errors import ApiError
from .session import CredentialSession, get_credential_session

router = APIRouter(prefix="/api", tags=["upload"])

URL_UPLOAD_UNSUPPORTED = "Video URL upload not yet implemented. Please upload a file."


@router.post("/upload")
def upload(
    metadata: Optional[str] = Form(None),
    monetization: Optional[str] = Form(None),
    scheduleTime: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    video: Optional[UploadFile] = File(None),
    videoUrl: Optional[str] = Form(None),
    session: CredentialSession = Depends(get_credential_session),
) -> dict[str, Any]:
    """Upload the submitted file to YouTube using the session's tokens."""
    credentials = session.load()
    if credentials is None:
        raise ApiError(401, "Not authenticated")
    if not metadata:
        raise ApiError(400, "Metadata required")
    try:
        parsed = VideoMetadata.model_validate_json(metadata)
    except ValidationError as exc:
        raise ApiError(400, "Invalid metadata") from exc

    if video is None or not video.filename:
        if videoUrl:
            raise ApiError(400, URL_UPLOAD_UNSUPPORTED)
        raise ApiError(400, "Video file or URL required")

    try:
        upload_youtube.parse_schedule_time(scheduleTime)
    except ValueError as exc:
        raise ApiError(400, "Invalid schedule time") from exc

    data = video.file.read()
    try:
        result = upload_youtube.upload(
            credentials,
            parsed,
            data,
            mimetype=video.content_type,
            schedule_time=scheduleTime or None,
            category=Category.parse(category) if category else None,
            monetization=monetization == "true",
        )
    except upload_youtube.UploadError as exc:
        raise ApiError(exc.status_code, exc.message) from exc
    return result.model_dump(by_alias=True)


__all__ = ["router", "URL_UPLOAD_UNSUPPORTED"]
