"""Single-page article scraper.

Sub-modules:
- ``config``             — selectors and fetch constants
- ``http_fetcher``       — synchronous httpx-based page fetcher
- ``content_extractor``  — BeautifulSoup paragraph and byline extraction
- ``page_extractor``     — ``extract(url)``: fetch then extract
"""
