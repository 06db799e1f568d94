"""Pydantic Settings model for application configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment variable settings for the application."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Generic application-wide settings
    DEBUG: bool = False
    DEMO_MODE: bool = False
    TIMEOUT: float = 30.0

    # Gitea settings
    GITEA_URL: str | None = None
    GITEA_TOKEN: str | None = None
    GITEA_USERNAME: str | None = None

    # GitHub settings
    GITHUB_URL: str = "https://api.github.com"
    GITHUB_TOKEN: str | None = None
    GITHUB_USERNAME: str | None = None

    # Generic single-provider settings
    PROVIDER: str | None = None
    API_URL: str | None = None
    API_TOKEN: str | None = None
    USERNAME: str | None = None

    # Multi-provider settings
    DEFAULT_PROVIDER: str | None = None
    PROVIDERS_JSON: str | None = None
