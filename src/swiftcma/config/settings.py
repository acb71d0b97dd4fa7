from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Environment variables are prefixed with ``SWIFTCMA_``. Example:
        set SWIFTCMA_EXPORT_DIR=reports
    """

    EXPORT_DIR: str = "Exports"
    # Upper bound on data rows accepted from one uploaded table; unset = no cap
    MAX_ROWS: int | None = None

    # Report branding defaults, overridable per report via the subject payload
    AGENT_NAME: str = "Your Name"
    AGENT_PHONE: str = ""
    LOGO_URL: str = "https://via.placeholder.com/160x40?text=SwiftCMA"
    ACCENT: str = "#0ea5e9"

    # pydantic-settings v2 configuration
    model_config = SettingsConfigDict(env_prefix="SWIFTCMA_", case_sensitive=False)


_settings: Settings | None = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next ``get_settings`` re-reads the env."""
    global _settings
    _settings = None
