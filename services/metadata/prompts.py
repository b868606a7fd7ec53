"""Prompt construction for SEO metadata generation."""

from __future__ import annotations

from shared.types import Category, Language


CATEGORY_KEYWORDS: dict[Category, str] = {
    Category.TECH: "technology, software, programming, coding, hardware, innovation, review",
    Category.VLOG: "daily life, lifestyle, personal, behind the scenes, day in the life",
    Category.SHORTS: "quick tips, viral, trending, short form, bite-sized",
    Category.GAMING: "gameplay, walkthrough, gaming tips, let's play, game review",
    Category.TUTORIAL: "how to, step by step, guide, learn, educational, tips and tricks",
    Category.ENTERTAINMENT: "funny, entertaining, comedy, reaction, interesting",
    Category.EDUCATION: "educational, learning, knowledge, informative, academic",
    Category.MUSIC: "music, song, cover, performance, audio, beats",
}

SYSTEM_TEMPLATE = """You are an expert YouTube SEO specialist. Generate optimized metadata for a {category} video in {language}.

Requirements:
1. Title: 60-70 characters, attention-grabbing, includes main keywords
2. Description: 150-200 words, keyword-rich, includes call-to-action, timestamps if applicable
3. Tags: 15-20 relevant tags, mix of broad and specific keywords
4. Hashtags: 3-5 trending hashtags relevant to the content
5. Thumbnail prompt: Detailed description for creating an eye-catching thumbnail

Focus on: {keywords}

Return ONLY a valid JSON object with this exact structure:
{{
  "title": "string",
  "description": "string",
  "tags": ["string"],
  "hashtags": ["#string"],
  "thumbnailPrompt": "string"
}}"""

USER_TEMPLATE = """Generate SEO-optimized YouTube metadata for this {category} video: {context}

Make it compelling, searchable, and optimized for the YouTube algorithm. Use {language} language for all content."""


def video_context(filename: str | None = None, url: str | None = None) -> str:
    """Describe the video for the prompt; a file name wins over a URL."""
    if filename:
        return f"video file: {filename}"
    if url:
        return f"video URL: {url}"
    return "video content"


def build_messages(category: Category, language: Language, context: str) -> list[dict[str, str]]:
    """Return the system and user chat messages for one generation request."""
    system = SYSTEM_TEMPLATE.format(
        category=category.value,
        language=language.display_name,
        keywords=CATEGORY_KEYWORDS[category],
    )
    user = USER_TEMPLATE.format(
        category=category.value,
        context=context,
        language=language.display_name,
    )
    return [
        {"role": "system", "content": system},
        {"role": "user", "content": user},
    ]


__all__ = ["CATEGORY_KEYWORDS", "video_context", "build_messages"]
