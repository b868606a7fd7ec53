"""SEO metadata generation components."""

from . import fallback, generator, prompts

__all__ = ["fallback", "generator", "prompts"]
