"""Fetch one article page and extract its content and byline."""

from __future__ import annotations

import logging

import httpx

from byline_scraper.config.settings import Settings, get_settings
from byline_scraper.scraper.content_extractor import ArticleResult, extract_from_html
from byline_scraper.scraper.http_fetcher import FetchResult, fetch_html

logger = logging.getLogger(__name__)


def extract(
    url: str,
    *,
    settings: Settings | None = None,
    client: httpx.Client | None = None,
) -> ArticleResult:
    """Fetch ``url`` and return the article content and byline.

    Args:
        url: Article URL.
        settings: Overrides the cached :func:`get_settings` instance.
        client: Optional caller-owned :class:`httpx.Client`.  When omitted a
            client is created for this call and closed afterwards.

    Returns:
        An :class:`ArticleResult`.

    Raises:
        FetchError: If the page could not be fetched.  No partial result is
            produced.
    """
    settings = settings or get_settings()
    logger.info("scraper: extracting %s", url)

    if client is None:
        with httpx.Client() as own_client:
            fetched = _fetch(url, own_client, settings)
    else:
        fetched = _fetch(url, client, settings)

    return extract_from_html(fetched.html, fetched.final_url)


def _fetch(url: str, client: httpx.Client, settings: Settings) -> FetchResult:
    return fetch_html(
        url,
        client=client,
        timeout=settings.request_timeout,
        allowed_domains=settings.allowed_domains,
        user_agent=settings.user_agent,
    )
