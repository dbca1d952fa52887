"""Article content and byline extraction from raw HTML.

The page is parsed once into a BeautifulSoup tree; two independent queries
then run over it in document order:

- every ``<p>`` contributes its text plus a newline to the content;
- every ``div.Page-authors`` contributes a combined byline and the names
  of its nested ``<a>`` links.

The combined byline is the block's full trimmed text, but only when the
block has text outside its links (``"By <a>Jane Doe</a>"``).  A block made
of links alone yields the link names joined with ``" and "``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from bs4 import BeautifulSoup, Tag

from byline_scraper.scraper.config import (
    AUTHOR_LINK_SELECTOR,
    AUTHOR_LINK_TAG,
    AUTHOR_SEPARATOR,
    AUTHORS_SELECTOR,
    HTML_PARSER,
    PARAGRAPH_SELECTOR,
)

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Output dataclass
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ArticleResult:
    """Result of extracting one article page.

    Attributes:
        content: Text of every paragraph in document order, each followed by
            a newline.  Empty if the page has no ``<p>`` elements.
        byline: Author attribution, or ``""`` if none was found.
    """

    content: str
    byline: str


# ---------------------------------------------------------------------------
# Transient traversal state
# ---------------------------------------------------------------------------


@dataclass
class _ExtractionState:
    paragraphs: list[str] = field(default_factory=list)
    combined_byline: str | None = None
    author_names: list[str] = field(default_factory=list)

    def final_byline(self) -> str:
        if not self.combined_byline and self.author_names:
            return AUTHOR_SEPARATOR.join(self.author_names)
        return self.combined_byline or ""


def _has_text_outside_links(block: Tag) -> bool:
    """Return ``True`` if ``block`` has visible text not inside an ``<a>``."""
    for text in block.strings:
        if not text.strip():
            continue
        parent = text.parent
        while parent is not None and parent is not block and parent.name != AUTHOR_LINK_TAG:
            parent = parent.parent
        if parent is block:
            return True
    return False


def _collect_authors(soup: BeautifulSoup, state: _ExtractionState) -> None:
    # Combined text is last-match-wins; link names accumulate over all matches.
    # A block made up only of links has no combined text of its own.
    for block in soup.select(AUTHORS_SELECTOR):
        if _has_text_outside_links(block):
            state.combined_byline = block.get_text().strip()
        for link in block.select(AUTHOR_LINK_SELECTOR):
            name = link.get_text().strip()
            if name:
                state.author_names.append(name)


def _collect_paragraphs(soup: BeautifulSoup, state: _ExtractionState) -> None:
    for paragraph in soup.select(PARAGRAPH_SELECTOR):
        state.paragraphs.append(paragraph.get_text() + "\n")


# ---------------------------------------------------------------------------
# Public extraction function
# ---------------------------------------------------------------------------


def extract_from_html(html: str, url: str | None = None) -> ArticleResult:
    """Extract article content and byline from raw HTML.

    Args:
        html: Raw HTML string (may be partial or malformed).
        url: Page URL, used only for log context.

    Returns:
        An :class:`ArticleResult`.  Both fields may be empty strings.
    """
    soup = BeautifulSoup(html, HTML_PARSER)
    state = _ExtractionState()

    _collect_authors(soup, state)
    _collect_paragraphs(soup, state)

    result = ArticleResult(
        content="".join(state.paragraphs),
        byline=state.final_byline(),
    )
    logger.debug(
        "scraper: extracted %d paragraphs, %d author links from %s",
        len(state.paragraphs),
        len(state.author_names),
        url or "<html>",
    )
    return result
