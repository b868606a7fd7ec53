"""Application configuration loaded from environment variables."""

from __future__ import annotations

from dotenv import load_dotenv
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings

load_dotenv()


class Settings(BaseSettings):
    """Application settings read from environment variables."""

    ENVIRONMENT: str = Field(
        default="development",
        description="Deployment environment; 'production' enables secure cookies",
        validation_alias=AliasChoices("ENVIRONMENT", "APP_ENV"),
    )
    LOG_LEVEL: str = Field(
        default="INFO", description="Logging level"
    )

    # Google OAuth client used for account linking and YouTube uploads
    GOOGLE_CLIENT_ID: str = Field(
        default="", description="Google OAuth client id"
    )
    GOOGLE_CLIENT_SECRET: str = Field(
        default="", description="Google OAuth client secret"
    )
    GOOGLE_REDIRECT_URI: str = Field(
        default="http://localhost:8000/api/auth/callback",
        description="Redirect URI registered for the OAuth client",
    )
    GOOGLE_AUTH_URI: str = Field(
        default="https://accounts.google.com/o/oauth2/auth",
        description="Google authorization endpoint",
    )
    GOOGLE_TOKEN_URI: str = Field(
        default="https://oauth2.googleapis.com/token",
        description="Google token endpoint",
    )
    GOOGLE_REVOKE_URI: str = Field(
        default="https://oauth2.googleapis.com/revoke",
        description="Google token revocation endpoint",
    )
    COOKIE_MAX_AGE: int = Field(
        default=60 * 60 * 24 * 30,
        description="Lifetime of the OAuth token cookies in seconds",
    )

    # OpenAI metadata generation
    OPENAI_API_KEY: str = Field(
        default="",
        description="OpenAI API key; demo metadata is served when unset",
    )
    OPENAI_MODEL: str = Field(
        default="gpt-4o-mini", description="Chat model used for metadata"
    )
    OPENAI_TEMPERATURE: float = Field(
        default=0.8, description="Sampling temperature for metadata generation"
    )

    YOUTUBE_DEFAULT_CATEGORY_ID: str = Field(
        default="28",
        description="YouTube categoryId used when the upload names no category",
    )

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"


settings = Settings()

__all__ = ["Settings", "settings"]
