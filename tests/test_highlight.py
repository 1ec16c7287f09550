"""Hit highlighting tests."""

from __future__ import annotations

from docsearch_core.highlight import Segment, highlight_hit
from docsearch_core.index.document import Document, Section

T = Segment.plain
M = Segment.mark


def test_absent_fields_have_no_segments() -> None:
    document = Document(id="1", title="Guide", text="Body")

    highlight = highlight_hit({}, None, document)

    assert highlight.section_title == []
    assert highlight.page_keyword == []
    assert highlight.page_content == [T("Body")]


def test_empty_fields_still_produce_a_segment() -> None:
    document = Document(id="1", title="Guide", text="", keyword="")

    highlight = highlight_hit({}, Section("1", "", "top"), document)

    assert highlight.page_content == [T("")]
    assert highlight.page_keyword == [T("")]
    assert highlight.section_title == [T("")]


def test_title_terms_highlight_page_and_section_titles() -> None:
    document = Document(id="1", title="Install Guide", text="Run the installer")
    section = Section("2", "Install on Linux", "linux")

    highlight = highlight_hit({"install": {"title": {}}}, section, document)

    assert highlight.page_title == [M("Install"), T(" Guide")]
    assert highlight.section_title == [M("Install"), T(" on Linux")]
    assert highlight.page_content == [T("Run the installer")]


def test_keyword_terms_highlight_keywords() -> None:
    document = Document(id="1", title="Guide", text="Body", keyword="setup, install")

    highlight = highlight_hit({"install": {"keyword": {}}}, None, document)

    assert highlight.page_keyword == [T("setup, "), M("install")]
    assert highlight.has_keyword_match
