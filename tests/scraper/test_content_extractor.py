"""Unit tests for the content extractor module.

Tests paragraph collection and byline derivation on synthetic HTML fixtures
modelled on AP News article pages.
"""

from __future__ import annotations

import dataclasses

import pytest

from byline_scraper.scraper.content_extractor import ArticleResult, extract_from_html


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

_LINKS_ONLY_BYLINE_HTML = """
<html><body>
  <div class="Page-authors">
    <a href="/author/jane-doe">Jane Doe</a>
    <a href="/author/john-smith">John Smith</a>
  </div>
  <p>Body text.</p>
</body></html>
"""

_NO_PARAGRAPHS_HTML = """
<html><body>
  <div class="Page-authors">By Jane Doe</div>
  <div>Not a paragraph</div>
</body></html>
"""


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


class TestArticleResultDataclass:
    def test_fields(self) -> None:
        result = ArticleResult(content="text\n", byline="By Jane Doe")
        assert result.content == "text\n"
        assert result.byline == "By Jane Doe"

    def test_is_immutable(self) -> None:
        result = ArticleResult(content="", byline="")
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.byline = "someone"  # type: ignore[misc]


class TestParagraphContent:
    def test_paragraphs_joined_in_document_order(self, article_html: str) -> None:
        result = extract_from_html(article_html)
        assert result.content == (
            "The storm made landfall early Tuesday.\n"
            "Officials urged residents to stay indoors.\n"
        )

    def test_no_paragraphs_yields_empty_content(self) -> None:
        result = extract_from_html(_NO_PARAGRAPHS_HTML)
        assert result.content == ""

    def test_empty_html(self) -> None:
        result = extract_from_html("")
        assert result == ArticleResult(content="", byline="")

    def test_paragraph_text_is_not_trimmed(self) -> None:
        result = extract_from_html("<p>  padded  </p>")
        assert result.content == "  padded  \n"

    def test_empty_paragraph_still_contributes_newline(self) -> None:
        result = extract_from_html("<p>one</p><p></p><p>two</p>")
        assert result.content == "one\n\ntwo\n"

    def test_unclosed_paragraphs_not_duplicated(self) -> None:
        result = extract_from_html("<p>one<p>two")
        assert result.content == "one\ntwo\n"

    def test_block_element_closes_open_paragraph(self) -> None:
        result = extract_from_html("<p>one<p>two<div>x</div>three")
        assert result.content == "one\ntwo\n"

    def test_unclosed_paragraphs_in_article_page(self) -> None:
        html = (
            "<html><body><article>"
            "<p>First paragraph."
            "<p>Second <b>bold</b> paragraph."
            "</article></body></html>"
        )
        result = extract_from_html(html)
        assert result.content == "First paragraph.\nSecond bold paragraph.\n"

    def test_content_independent_of_byline_blocks(self) -> None:
        html = (
            '<div class="Page-authors">By A</div>'
            "<p>first</p>"
            '<div class="Page-authors">By B</div>'
            "<p>second</p>"
        )
        result = extract_from_html(html)
        assert result.content == "first\nsecond\n"


class TestByline:
    def test_combined_text_used_verbatim(self) -> None:
        html = '<div class="Page-authors">  By Jane Doe  </div><p>x</p>'
        result = extract_from_html(html)
        assert result.byline == "By Jane Doe"

    def test_combined_text_with_link_ignores_link_names(self, article_html: str) -> None:
        result = extract_from_html(article_html)
        assert result.byline == "By Jane Doe"

    def test_links_only_joined_with_and(self) -> None:
        result = extract_from_html(_LINKS_ONLY_BYLINE_HTML)
        assert result.byline == "Jane Doe and John Smith"

    def test_single_link_only(self) -> None:
        html = '<div class="Page-authors"><a href="/a">Jane Doe</a></div>'
        assert extract_from_html(html).byline == "Jane Doe"

    def test_blank_links_skipped(self) -> None:
        html = (
            '<div class="Page-authors">'
            '<a href="/a">  </a><a href="/b"> Jane Doe </a><a href="/c"></a>'
            "</div>"
        )
        assert extract_from_html(html).byline == "Jane Doe"

    def test_no_authors_block(self) -> None:
        html = "<html><body><p>Only text.</p></body></html>"
        assert extract_from_html(html).byline == ""

    def test_empty_authors_block(self) -> None:
        html = '<div class="Page-authors">   </div>'
        assert extract_from_html(html).byline == ""

    def test_other_class_not_matched(self) -> None:
        html = '<div class="Page-author">By Nobody</div><span class="Page-authors">By Nobody</span>'
        assert extract_from_html(html).byline == ""

    def test_last_combined_text_wins(self) -> None:
        html = (
            '<div class="Page-authors">By First Author</div>'
            '<div class="Page-authors">By Second Author</div>'
        )
        assert extract_from_html(html).byline == "By Second Author"

    def test_link_names_accumulate_across_blocks(self) -> None:
        html = (
            '<div class="Page-authors"><a href="/a">Jane Doe</a></div>'
            "<p>middle</p>"
            '<div class="Page-authors"><a href="/b">John Smith</a></div>'
        )
        assert extract_from_html(html).byline == "Jane Doe and John Smith"

    def test_nested_link_markup(self) -> None:
        html = (
            '<div class="Page-authors">'
            '<span><a href="/a"><span>Jane</span> Doe</a></span>'
            '<a href="/b">John Smith</a>'
            "</div>"
        )
        assert extract_from_html(html).byline == "Jane Doe and John Smith"

    def test_malformed_markup_does_not_raise(self) -> None:
        html = '<div class="Page-authors"><a href="/a">Jane Doe<p>Unclosed'
        result = extract_from_html(html)
        assert isinstance(result, ArticleResult)
