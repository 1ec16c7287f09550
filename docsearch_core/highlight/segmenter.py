"""DocSearch Highlight Segmenter - Snippet Construction.

Splits a field text into alternating plain and highlighted segments,
bounded to a window around the first match.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional

from docsearch_core.analyzers.base import Span

ELLIPSIS = "..."


class SegmentType(Enum):
    """Segment kinds."""

    TEXT = "text"
    MARK = "mark"


@dataclass(frozen=True)
class Segment:
    """A piece of displayed text.

    Attributes:
        type: ``TEXT`` for plain text, ``MARK`` for a highlighted match
        text: Segment text, possibly carrying an ellipsis marker
    """

    type: SegmentType
    text: str

    @classmethod
    def plain(cls, text: str) -> "Segment":
        return cls(SegmentType.TEXT, text)

    @classmethod
    def mark(cls, text: str) -> "Segment":
        return cls(SegmentType.MARK, text)

    @property
    def is_mark(self) -> bool:
        return self.type is SegmentType.MARK

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {"type": self.type.value, "text": self.text}


def _truncate(text: str, snippet_length: Optional[int]) -> str:
    if snippet_length is not None and snippet_length < len(text):
        return text[:snippet_length] + ELLIPSIS
    return text


def compute_window(
    text_length: int,
    first: Span,
    snippet_length: Optional[int],
) -> Span:
    """Compute the display window around the first match.

    The window is the whole text when no snippet length is set or the
    text already fits. Otherwise it extends ``snippet_length`` characters
    on each side of the first match, clamped to the text.
    """
    if not snippet_length or text_length <= snippet_length:
        return Span(0, text_length)
    start = max(first.start - snippet_length, 0)
    end = min(first.end + snippet_length, text_length)
    return Span(start, end - start)


def build_highlighted_text(
    text: str,
    positions: Iterable[Span],
    snippet_length: Optional[int],
) -> List[Segment]:
    """Split ``text`` into plain and highlighted segments.

    Spans that are empty or run past the end of the text are dropped.
    Without any valid span the result is a single plain segment holding
    the text truncated to ``snippet_length``, or the whole text when it is
    ``None``. Otherwise only matches fully inside the window around the
    first match are highlighted; ``...`` marks text cut off on either side
    of the window.

    Args:
        text: Field text
        positions: Match spans, in any order
        snippet_length: Characters of context kept on each side of the
            first match

    Returns:
        Ordered list of segments
    """
    text_length = len(text)
    valid = [position for position in positions if position.fits(text_length)]

    if not valid:
        return [Segment.plain(_truncate(text, snippet_length))]

    ordered = sorted(valid, key=lambda position: position.start)
    first = ordered[0]
    window = compute_window(text_length, first, snippet_length)

    segments: List[Segment] = []
    if first.start > 0:
        prefix = ELLIPSIS if window.start > 0 else ""
        segments.append(Segment.plain(prefix + text[window.start:first.start]))

    last_end = 0
    for position in ordered:
        if position.start < window.start or position.end > window.end:
            continue
        if position.start < last_end:
            # overlaps the previous mark
            continue
        if last_end > 0:
            segments.append(Segment.plain(text[last_end:position.start]))
        segments.append(Segment.mark(text[position.start:position.end]))
        last_end = position.end

    if last_end < window.end:
        suffix = ELLIPSIS if window.end < text_length else ""
        segments.append(Segment.plain(text[last_end:window.end] + suffix))

    return segments


__all__ = [
    "ELLIPSIS",
    "Segment",
    "SegmentType",
    "build_highlighted_text",
    "compute_window",
]
