"""OpenAI-backed SEO metadata generator with a static demo fallback."""

from __future__ import annotations

from typing import Any

from openai import OpenAI
from pydantic import ValidationError

from shared.config import settings
from shared.logging import log_error, log_info
from shared.types import Category, Language, VideoMetadata

from .fallback import demo_metadata
from .prompts import build_messages


DEMO_KEY = "demo-key"


class MetadataGenerationError(RuntimeError):
    """Raised when the language model call or its decoding fails."""


def llm_configured() -> bool:
    """Return True when a real OpenAI key is configured."""
    key = settings.OPENAI_API_KEY
    return bool(key) and key != DEMO_KEY


def _client() -> OpenAI:
    return OpenAI(api_key=settings.OPENAI_API_KEY)


def decode_metadata(content: str | None) -> VideoMetadata:
    """Strictly decode model output into :class:`VideoMetadata`."""
    if not content:
        raise MetadataGenerationError("empty completion")
    try:
        return VideoMetadata.model_validate_json(content)
    except ValidationError as exc:
        raise MetadataGenerationError(f"malformed metadata: {exc.error_count()} errors") from exc


def generate(
    category: Category,
    language: Language,
    context: str,
    *,
    client: Any | None = None,
) -> VideoMetadata:
    """Generate metadata for a video described by ``context``.

    Without a configured key the deterministic demo metadata for
    ``category`` is returned and no network call is made.
    """
    if not llm_configured():
        log_info("metadata_fallback", category=category.value, language=language.value)
        return demo_metadata(category)

    messages = build_messages(category, language, context)
    api = client or _client()
    try:
        completion = api.chat.completions.create(
            model=settings.OPENAI_MODEL,
            messages=messages,
            temperature=settings.OPENAI_TEMPERATURE,
            response_format={"type": "json_object"},
        )
        content = completion.choices[0].message.content
    except Exception as exc:
        log_error("metadata_llm_error", category=category.value, error=str(exc))
        raise MetadataGenerationError("language model request failed") from exc

    metadata = decode_metadata(content)
    log_info(
        "metadata_generated",
        category=category.value,
        language=language.value,
        model=settings.OPENAI_MODEL,
        tags=len(metadata.tags),
    )
    return metadata


__all__ = ["MetadataGenerationError", "decode_metadata", "generate", "llm_configured"]
