"""Application settings loaded from environment variables.

Uses Pydantic Settings v2.  Every field has a default, so the scraper runs
with no environment configured at all; variables are read with the
``BYLINE_SCRAPER_`` prefix (e.g. ``BYLINE_SCRAPER_REQUEST_TIMEOUT=10``).

Usage::

    from byline_scraper.config.settings import get_settings

    settings = get_settings()
    timeout = settings.request_timeout
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from byline_scraper.scraper.config import DEFAULT_TIMEOUT


class Settings(BaseSettings):
    """Scraper configuration backed by environment variables and an optional .env file."""

    model_config = SettingsConfigDict(
        env_prefix="BYLINE_SCRAPER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ------------------------------------------------------------------
    # HTTP
    # ------------------------------------------------------------------

    request_timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    """Seconds to wait for the page request before giving up."""

    allowed_domains: list[str] = []
    """Host names the scraper may visit.  Empty means unrestricted.

    Supplied from the environment as a JSON list, e.g.::

        BYLINE_SCRAPER_ALLOWED_DOMAINS='["apnews.com"]'
    """

    user_agent: Optional[str] = None
    """``User-Agent`` header to send.  ``None`` keeps the httpx default."""

    # ------------------------------------------------------------------
    # Application behaviour
    # ------------------------------------------------------------------

    log_level: str = "WARNING"
    """Logging verbosity.  One of: DEBUG, INFO, WARNING, ERROR, CRITICAL."""

    @field_validator("allowed_domains")
    @classmethod
    def _normalise_domains(cls, value: list[str]) -> list[str]:
        return [d.strip().lower() for d in value if d.strip()]


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings singleton.

    In tests, call ``get_settings.cache_clear()`` after patching environment
    variables.
    """
    return Settings()
