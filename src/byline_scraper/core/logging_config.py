"""Diagnostic logging for the scraper, rendered by structlog on stderr.

The CLI's stdout is the article report and nothing else, so every log
record goes to stderr.  Scraper modules keep to the stdlib API::

    import logging
    logger = logging.getLogger(__name__)
    logger.warning("scraper: request error for %s: %s", url, exc)

and ``configure_logging()`` decides how those records look: one JSON object
per line normally, or readable console lines at ``DEBUG`` when debugging a
page by hand.
"""

from __future__ import annotations

import logging
import sys

import structlog

#: Loggers that narrate every request; kept at WARNING unless debugging.
_HTTP_LOGGERS: tuple[str, ...] = ("httpx", "httpcore")


def _pre_chain() -> list[structlog.types.Processor]:
    """Processors applied to every record before rendering."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


def _renderer(debug: bool) -> structlog.types.Processor:
    if debug:
        return structlog.dev.ConsoleRenderer(colors=False)
    return structlog.processors.JSONRenderer()


def configure_logging(log_level: str = "WARNING") -> None:
    """Install a single stderr handler on the root logger.

    Stdlib records are formatted through structlog's ``ProcessorFormatter``
    so ``logging.getLogger(__name__)`` and ``structlog.get_logger()`` render
    the same way.  A second call replaces the first.

    Args:
        log_level: ``"DEBUG"``, ``"INFO"``, ``"WARNING"``, ``"ERROR"`` or
            ``"CRITICAL"``, any case.  Unknown names mean ``WARNING``.
    """
    name = log_level.upper()
    level = getattr(logging, name, logging.WARNING)
    debug = name == "DEBUG"
    pre_chain = _pre_chain()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(debug),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    http_level = logging.DEBUG if debug else logging.WARNING
    for http_logger in _HTTP_LOGGERS:
        logging.getLogger(http_logger).setLevel(http_level)

    structlog.configure(
        processors=pre_chain + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
