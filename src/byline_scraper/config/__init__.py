"""Configuration package for Byline Scraper.

Re-exports the settings accessor so callers can write::

    from byline_scraper.config import get_settings
"""

from byline_scraper.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
