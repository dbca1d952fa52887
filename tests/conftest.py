"""Shared pytest fixtures for Byline Scraper tests.

Fixture summary
---------------
clean_settings   — (autouse) strips ``BYLINE_SCRAPER_*`` variables from the
                   environment and clears the cached settings around each test.
restore_logging  — (autouse) removes handlers added by ``configure_logging``.
article_html     — Synthetic AP-style article page with a combined byline.

No test performs real network I/O; HTTP is mocked with ``respx``.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator

import pytest
import structlog

from byline_scraper.config.settings import get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for key in list(os.environ):
        if key.startswith("BYLINE_SCRAPER_"):
            monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def restore_logging() -> Iterator[None]:
    """Remove handlers installed by ``configure_logging`` during a test."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(handler)
    root.setLevel(level)
    structlog.reset_defaults()


@pytest.fixture
def article_html() -> str:
    return """
<!DOCTYPE html>
<html lang="en">
<head><title>Storm hits coast | AP News</title></head>
<body>
  <div class="Page-authors">By <a href="/author/jane-doe">Jane Doe</a></div>
  <article>
    <p>The storm made landfall early Tuesday.</p>
    <p>Officials urged residents to <b>stay indoors</b>.</p>
  </article>
</body>
</html>
"""
