"""Shared data types for the tubeseo app."""

from __future__ import annotations

from enum import Enum
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class Category(str, Enum):
    """Closed set of video categories offered by the UI."""

    TECH = "tech"
    VLOG = "vlog"
    SHORTS = "shorts"
    GAMING = "gaming"
    TUTORIAL = "tutorial"
    ENTERTAINMENT = "entertainment"
    EDUCATION = "education"
    MUSIC = "music"

    @classmethod
    def parse(cls, value: str | None) -> "Category":
        """Return the category for ``value``, defaulting to ``TECH``."""
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return cls.TECH


class Language(str, Enum):
    """Closed set of metadata languages."""

    EN = "en"
    ES = "es"
    FR = "fr"
    DE = "de"
    PT = "pt"
    IT = "it"
    JA = "ja"
    KO = "ko"
    ZH = "zh"
    HI = "hi"
    AR = "ar"

    @classmethod
    def parse(cls, value: str | None) -> "Language":
        """Return the language for ``value``, defaulting to ``EN``."""
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return cls.EN

    @property
    def display_name(self) -> str:
        return LANGUAGE_NAMES[self]


LANGUAGE_NAMES: dict[Language, str] = {
    Language.EN: "English",
    Language.ES: "Spanish",
    Language.FR: "French",
    Language.DE: "German",
    Language.PT: "Portuguese",
    Language.IT: "Italian",
    Language.JA: "Japanese",
    Language.KO: "Korean",
    Language.ZH: "Chinese",
    Language.HI: "Hindi",
    Language.AR: "Arabic",
}


class VideoMetadata(BaseModel):
    """SEO metadata attached to an uploaded video.

    Decoding is strict: every field must be present with the exact JSON type,
    so malformed language-model output is rejected instead of coerced.
    """

    model_config = ConfigDict(strict=True, populate_by_name=True)

    title: str
    description: str
    tags: List[str]
    hashtags: List[str]
    thumbnail_prompt: str = Field(alias="thumbnailPrompt")


class UploadResult(BaseModel):
    """Outcome of a successful upload, returned to the UI for display."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    video_id: str = Field(alias="videoId")
    video_url: str = Field(alias="videoUrl")
    metadata: VideoMetadata
    scheduled_time: Optional[str] = Field(default=None, alias="scheduledTime")
    status: Literal["Published", "Scheduled"]


class Credentials(BaseModel):
    """OAuth tokens held for the current browser session."""

    model_config = ConfigDict(frozen=True)

    access_token: str
    refresh_token: Optional[str] = None


__all__ = [
    "Category",
    "Language",
    "LANGUAGE_NAMES",
    "VideoMetadata",
    "UploadResult",
    "Credentials",
]
