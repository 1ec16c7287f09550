"""Highlight segmentation tests."""

from __future__ import annotations

from typing import List

from docsearch_core.analyzers import Span
from docsearch_core.highlight import (
    ELLIPSIS,
    Segment,
    SegmentType,
    build_highlighted_text,
    compute_window,
)

T = Segment.plain
M = Segment.mark

LONG_TEXT = "".join(chr(ord("a") + i % 26) for i in range(500))


def joined(segments: List[Segment]) -> str:
    text = "".join(s.text for s in segments)
    if text.startswith(ELLIPSIS):
        text = text[len(ELLIPSIS):]
    if text.endswith(ELLIPSIS):
        text = text[:-len(ELLIPSIS)]
    return text


def test_no_spans_returns_whole_short_text() -> None:
    assert build_highlighted_text("short text", [], 100) == [T("short text")]


def test_no_spans_truncates_to_snippet_length() -> None:
    assert build_highlighted_text("abcdefghij", [], 4) == [T("abcd...")]


def test_invalid_spans_are_dropped() -> None:
    spans = [Span(0, 0), Span(8, 5), Span(3, -1)]
    assert build_highlighted_text("abcdefghij", spans, 100) == [T("abcdefghij")]


def test_short_text_keeps_whole_window() -> None:
    segments = build_highlighted_text("The quick brown fox", [Span(4, 5)], 100)
    assert segments == [T("The "), M("quick"), T(" brown fox")]


def test_span_at_start_has_no_leading_segment() -> None:
    assert build_highlighted_text("quick fox", [Span(0, 5)], 100) == [M("quick"), T(" fox")]


def test_span_at_end_has_no_trailing_segment() -> None:
    assert build_highlighted_text("the fox", [Span(4, 3)], 100) == [T("the "), M("fox")]


def test_spans_are_sorted_and_gaps_filled() -> None:
    segments = build_highlighted_text("alpha beta gamma", [Span(11, 5), Span(0, 5)], 100)
    assert segments == [M("alpha"), T(" beta "), M("gamma")]


def test_window_around_first_match_is_truncated_both_sides() -> None:
    segments = build_highlighted_text(LONG_TEXT, [Span(400, 3)], 50)

    assert compute_window(len(LONG_TEXT), Span(400, 3), 50) == Span(350, 103)
    assert segments == [
        T("..." + LONG_TEXT[350:400]),
        M(LONG_TEXT[400:403]),
        T(LONG_TEXT[403:453] + "..."),
    ]


def test_window_is_clamped_at_text_start() -> None:
    text = LONG_TEXT[:200]
    segments = build_highlighted_text(text, [Span(10, 5)], 50)
    assert segments == [T(text[0:10]), M(text[10:15]), T(text[15:65] + "...")]


def test_spans_outside_window_are_not_highlighted() -> None:
    segments = build_highlighted_text(LONG_TEXT, [Span(460, 5), Span(400, 3)], 50)
    assert [s for s in segments if s.type is SegmentType.MARK] == [M(LONG_TEXT[400:403])]
    assert segments[-1] == T(LONG_TEXT[403:453] + "...")


def test_segments_reconstruct_window() -> None:
    spans = [Span(400, 3), Span(420, 4), Span(440, 2)]
    segments = build_highlighted_text(LONG_TEXT, spans, 50)
    assert joined(segments) == LONG_TEXT[350:453]


def test_no_snippet_length_keeps_whole_text() -> None:
    assert build_highlighted_text("hello world", [], None) == [T("hello world")]
    assert build_highlighted_text("hello world", [Span(0, 5)], None) == [M("hello"), T(" world")]


def test_zero_snippet_length_means_no_window() -> None:
    segments = build_highlighted_text(LONG_TEXT, [Span(400, 3)], 0)
    assert joined(segments) == LONG_TEXT
    assert not segments[0].text.startswith(ELLIPSIS)


def test_overlapping_spans_are_highlighted_once() -> None:
    segments = build_highlighted_text("quickly done", [Span(0, 7), Span(2, 3)], 100)
    assert segments == [M("quickly"), T(" done")]


def test_segment_to_dict() -> None:
    assert M("fox").to_dict() == {"type": "mark", "text": "fox"}
