"""Synchronous HTTP fetcher for a single article page.

Uses ``httpx`` for the request.  Every way the request can fail is mapped to
:class:`~byline_scraper.core.exceptions.FetchError`; callers never see raw
``httpx`` exceptions.
"""

from __future__ import annotations

import logging
import urllib.parse
from collections.abc import Iterable
from dataclasses import dataclass

import httpx

from byline_scraper.core.exceptions import DomainNotAllowedError, FetchError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Result dataclass
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FetchResult:
    """A successfully fetched page.

    Attributes:
        html: Decoded response body.
        status_code: HTTP status code of the final response.
        final_url: URL after following redirects.
    """

    html: str
    status_code: int
    final_url: str


# ---------------------------------------------------------------------------
# Allowed-domain check
# ---------------------------------------------------------------------------


def _check_allowed_domain(url: str, allowed_domains: Iterable[str]) -> None:
    """Raise :class:`DomainNotAllowedError` if ``url``'s host is not allowed.

    An empty ``allowed_domains`` disables the check.  Host names are compared
    exactly, ignoring case.
    """
    allowed = {d.lower() for d in allowed_domains}
    if not allowed:
        return
    try:
        host = (urllib.parse.urlparse(url).hostname or "").lower()
    except ValueError as exc:
        raise FetchError(f"invalid URL: {exc}", url=url) from exc
    if host not in allowed:
        raise DomainNotAllowedError(url, host)


# ---------------------------------------------------------------------------
# Public fetch function
# ---------------------------------------------------------------------------


def fetch_html(
    url: str,
    *,
    client: httpx.Client,
    timeout: float,
    allowed_domains: Iterable[str] = (),
    user_agent: str | None = None,
) -> FetchResult:
    """Fetch ``url`` and return its decoded body.

    Performs the following steps in order:

    1. **Allowed domains**: rejects the URL before any request if an
       allow-list is configured and the host is not on it, or if the URL
       is too malformed to yield a host.
    2. **HTTP GET**: follows redirects; sends ``user_agent`` if given.
    3. **Status check**: any non-2xx final status is a failure.

    Args:
        url: Target URL to fetch.
        client: :class:`httpx.Client` used for the request.
        timeout: Request timeout in seconds.
        allowed_domains: Optional host allow-list; empty means unrestricted.
        user_agent: Optional ``User-Agent`` header value.

    Returns:
        A :class:`FetchResult` instance.

    Raises:
        FetchError: If the request cannot be completed or returns a
            non-2xx status.
        DomainNotAllowedError: If the host is outside ``allowed_domains``.
    """
    # 1. Allowed-domain check
    try:
        _check_allowed_domain(url, allowed_domains)
    except FetchError as exc:
        logger.warning("scraper: %s", exc)
        raise

    # 2. HTTP GET
    headers = {"User-Agent": user_agent} if user_agent else None
    try:
        response = client.get(
            url,
            timeout=timeout,
            follow_redirects=True,
            headers=headers,
        )
    except httpx.TimeoutException as exc:
        logger.warning("scraper: timeout fetching %s", url)
        raise FetchError("timeout", url=url) from exc
    except httpx.TooManyRedirects as exc:
        logger.warning("scraper: too many redirects for %s", url)
        raise FetchError("too many redirects", url=url) from exc
    except httpx.RequestError as exc:
        logger.warning("scraper: request error for %s: %s", url, exc)
        raise FetchError(f"request error: {exc}", url=url) from exc
    except httpx.InvalidURL as exc:
        logger.warning("scraper: invalid URL %r: %s", url, exc)
        raise FetchError(f"invalid URL: {exc}", url=url) from exc

    final_url = str(response.url)

    # 3. HTTP error status
    if not response.is_success:
        logger.warning("scraper: HTTP %d for %s", response.status_code, url)
        raise FetchError(
            f"HTTP {response.status_code}",
            url=url,
            status_code=response.status_code,
        )

    logger.info(
        "scraper: fetched %s (status=%d, bytes=%d)",
        final_url,
        response.status_code,
        len(response.content),
    )
    return FetchResult(
        html=response.text,
        status_code=response.status_code,
        final_url=final_url,
    )
