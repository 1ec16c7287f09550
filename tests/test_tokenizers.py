"""Term location and tokenization tests."""

from __future__ import annotations

import re

from docsearch_core.analyzers import (
    DEFAULT_SEPARATOR,
    SeparatorTokenizer,
    Span,
    find_term_position,
    get_term_positions,
    standard_analyzer,
)


def test_find_term_position_returns_whole_token() -> None:
    assert find_term_position("quick", "The quick brown fox") == Span(4, 5)


def test_find_term_position_is_case_insensitive() -> None:
    assert find_term_position("quick", "The QUICK brown fox") == Span(4, 5)
    assert find_term_position("QUICK", "the quick brown fox") == Span(4, 5)


def test_find_term_position_matches_substring_of_token() -> None:
    # stemmed terms such as "configur" still land on their token
    assert find_term_position("configur", "Configure the server") == Span(0, 9)
    assert find_term_position("qui", "The quick brown") == Span(4, 5)


def test_find_term_position_returns_first_match_only() -> None:
    assert find_term_position("fox", "fox and another fox") == Span(0, 3)


def test_find_term_position_splits_on_hyphen() -> None:
    assert find_term_position("brown", "quick-brown fox") == Span(6, 5)


def test_find_term_position_no_match_sentinel() -> None:
    assert find_term_position("xyz", "abc def ghi", DEFAULT_SEPARATOR) == Span(0, 0)


def test_find_term_position_on_empty_text() -> None:
    assert find_term_position("a", "") == Span(0, 0)


def test_find_term_position_accepts_separator_string() -> None:
    assert find_term_position("b", "a,b", r",") == Span(2, 1)
    assert find_term_position("b", "a,b", re.compile(r",")) == Span(2, 1)


def test_find_term_position_spans_stay_inside_text() -> None:
    texts = ["The quick brown fox", "  leading and trailing  ", "a-b-c", "x"]
    terms = ["the", "ing", "b", "x", "c", "missing"]
    for text in texts:
        for term in terms:
            span = find_term_position(term, text)
            assert span.start >= 0
            assert span.end <= len(text)


def test_get_term_positions_drops_misses_and_sorts() -> None:
    positions = get_term_positions("alpha beta gamma", ["gamma", "zzz", "alpha"])
    assert positions == [Span(0, 5), Span(11, 5)]


def test_get_term_positions_merges_terms_in_same_token() -> None:
    assert get_term_positions("quick fox", ["qu", "quick"]) == [Span(0, 5)]


def test_separator_tokenizer_keeps_offsets() -> None:
    tokens = SeparatorTokenizer().tokenize("foo  bar-baz").to_list()
    assert [t.text for t in tokens] == ["foo", "bar", "baz"]
    assert [(t.start_offset, t.end_offset) for t in tokens] == [(0, 3), (5, 8), (9, 12)]


def test_standard_analyzer_trims_and_lowercases() -> None:
    stream = standard_analyzer().analyze("Hello, World-wide")
    assert stream.get_texts() == ["hello", "world", "wide"]
    assert stream[0].span == Span(0, 6)
