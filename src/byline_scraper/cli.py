"""Command-line entry point: scrape one article and print its content and byline.

Run::

    byline-scraper -url https://apnews.com/article/...

Options:
    -url, --url        (required) URL of the news article to scrape.
    --timeout          Request timeout in seconds (overrides settings).
    --allowed-domain   Restrict fetching to this host; repeatable.
    --log-level        Logging verbosity written to stderr.

Exit codes:
    0 — Success (even if no content or byline was found).
    1 — Missing URL, invalid configuration, or fetch failure.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import TextIO

from pydantic import ValidationError

from byline_scraper.config.settings import Settings, get_settings
from byline_scraper.core.exceptions import ConfigurationError, FetchError
from byline_scraper.core.logging_config import configure_logging
from byline_scraper.scraper.content_extractor import ArticleResult
from byline_scraper.scraper.page_extractor import extract


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="byline-scraper",
        description="Scrape the article text and byline from a news article URL.",
    )
    parser.add_argument(
        "-url",
        "--url",
        dest="url",
        default="",
        help="The URL of the news article to scrape",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Request timeout in seconds",
    )
    parser.add_argument(
        "--allowed-domain",
        dest="allowed_domains",
        action="append",
        default=None,
        metavar="DOMAIN",
        help="Only fetch URLs on this host (may be given more than once)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging verbosity (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def _resolve_settings(args: argparse.Namespace) -> Settings:
    """Merge CLI overrides into the environment-backed settings.

    Raises:
        ConfigurationError: If the URL is missing or a setting is invalid.
    """
    if not args.url or not args.url.strip():
        raise ConfigurationError("Please provide a URL using the -url flag")

    try:
        base = get_settings()
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid settings: {exc}") from exc

    overrides: dict[str, object] = {}
    if args.timeout is not None:
        if args.timeout <= 0:
            raise ConfigurationError("--timeout must be greater than zero")
        overrides["request_timeout"] = args.timeout
    if args.allowed_domains:
        overrides["allowed_domains"] = [d.strip().lower() for d in args.allowed_domains]
    if args.log_level:
        overrides["log_level"] = args.log_level
    return base.model_copy(update=overrides) if overrides else base


def print_result(result: ArticleResult, out: TextIO = sys.stdout) -> None:
    """Write the scraped content and byline in the console report format."""
    if result.content:
        print("Scraped Article Content:", file=out)
        print(result.content, file=out)
    else:
        print("No article content found.", file=out)

    if result.byline:
        print(f"Byline: {result.byline}", file=out)
    else:
        print("No author information found.", file=out)


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, scrape the URL and print the result.

    Returns:
        The process exit status.
    """
    args = _build_parser().parse_args(argv)

    try:
        settings = _resolve_settings(args)
    except ConfigurationError as exc:
        print(exc, file=sys.stderr)
        return 1

    configure_logging(settings.log_level)

    try:
        result = extract(args.url.strip(), settings=settings)
    except FetchError as exc:
        print(f"Error scraping article: {exc}", file=sys.stderr)
        return 1

    print_result(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
