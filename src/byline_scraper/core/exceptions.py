"""Application-wide exception hierarchy for Byline Scraper.

All custom exceptions subclass ``BylineScraperError`` so that the CLI can
report any failure with a single ``except`` clause.

Hierarchy::

    BylineScraperError
    ├── ConfigurationError
    └── FetchError               (url, status_code)
        └── DomainNotAllowedError (domain)
"""

from __future__ import annotations


class BylineScraperError(Exception):
    """Base class for all Byline Scraper exceptions."""


# ---------------------------------------------------------------------------
# Configuration exceptions
# ---------------------------------------------------------------------------


class ConfigurationError(BylineScraperError):
    """Raised when required input is missing or invalid.

    Raised before any network activity takes place (e.g. no ``-url`` flag).
    """


# ---------------------------------------------------------------------------
# Fetch exceptions
# ---------------------------------------------------------------------------


class FetchError(BylineScraperError):
    """Raised when the HTTP request for a page cannot be completed.

    Covers DNS failures, refused connections, timeouts, redirect loops and
    non-2xx responses.  The underlying ``httpx`` exception, if any, is
    chained as ``__cause__``.

    Args:
        message: Human-readable description of the failure.
        url: The URL that was being fetched.
        status_code: HTTP status code, or ``None`` if no response arrived.
    """

    def __init__(
        self,
        message: str,
        url: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(f"{message} at {url}")
        self.reason = message
        self.url = url
        self.status_code = status_code


class DomainNotAllowedError(FetchError):
    """Raised when the URL's host is outside the configured allow-list.

    Args:
        url: The rejected URL.
        domain: Host name extracted from ``url``.
    """

    def __init__(self, url: str, domain: str) -> None:
        super().__init__(f"domain '{domain}' is not allowed", url=url)
        self.domain = domain
