"""SEO metadata generation endpoint."""

from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, File, Form, UploadFile

from services.metadata import generator
from services.metadata.prompts import video_context
from shared.logging import log_error
from shared.types import Category, Language

from .errors import ApiError

router = APIRouter(prefix="/api", tags=["metadata"])


@router.post("/generate-metadata")
def generate_metadata(
    category: Optional[str] = Form(None),
    language: Optional[str] = Form(None),
    video: Optional[UploadFile] = File(None),
    videoUrl: Optional[str] = Form(None),
) -> dict[str, Any]:
    """Generate title, description, tags, hashtags and a thumbnail prompt.

    Only the file name of an uploaded video is used as context; its bytes
    are never read.
    """
    cat = Category.parse(category)
    lang = Language.parse(language)
    filename = video.filename if video is not None else None
    context = video_context(filename=filename, url=videoUrl)
    try:
        metadata = generator.generate(cat, lang, context)
    except Exception as exc:
        log_error("generate_metadata_error", category=cat.value, error=str(exc))
        raise ApiError(500, "Failed to generate metadata") from exc
    return {"metadata": metadata.model_dump(by_alias=True)}


__all__ = ["router"]
