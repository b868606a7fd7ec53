"""Google account linking."""

from . import google_oauth

__all__ = ["google_oauth"]
