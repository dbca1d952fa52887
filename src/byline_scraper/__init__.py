"""Byline Scraper: fetch a news article page and extract its text and byline.

Sub-packages:
- ``scraper`` — HTTP fetcher, HTML extraction and the ``extract`` entry point
- ``config``  — environment-backed settings
- ``core``    — exceptions and logging configuration
"""

from byline_scraper.scraper.content_extractor import ArticleResult
from byline_scraper.scraper.page_extractor import extract

__version__ = "0.1.0"

__all__ = ["ArticleResult", "extract"]
