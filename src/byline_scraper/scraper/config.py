"""Constants for the page extractor."""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Selectors
# ---------------------------------------------------------------------------

#: Byline container used by AP News article pages.
AUTHORS_SELECTOR: str = "div.Page-authors"

#: Individual author links inside the byline container.
AUTHOR_LINK_SELECTOR: str = "a"

#: Tag name of an author link; text inside it is not byline text of its own.
AUTHOR_LINK_TAG: str = "a"

#: Elements whose text makes up the article content.
PARAGRAPH_SELECTOR: str = "p"

#: Joins individual author names when the byline container has no text of
#: its own.
AUTHOR_SEPARATOR: str = " and "

#: BeautifulSoup parser backend.  lxml closes an open <p> when the next
#: block element starts, as browsers do; html.parser nests them instead.
HTML_PARSER: str = "lxml"

# ---------------------------------------------------------------------------
# HTTP
# ---------------------------------------------------------------------------

#: Default HTTP request timeout in seconds.
DEFAULT_TIMEOUT: float = 30.0
