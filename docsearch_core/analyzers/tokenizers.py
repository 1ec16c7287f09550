"""DocSearch Tokenizers - Separator Tokenization and Term Location.

The index splits field text wherever a character matches its separator
pattern. Highlighting has to reuse that exact pattern, otherwise the
token boundaries it finds will not line up with the terms the index
reports as matched.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Pattern, Union

from docsearch_core.analyzers.base import (
    NO_MATCH,
    Span,
    Token,
    TokenStream,
    Tokenizer,
)

# Whitespace and hyphen, the separator the documentation index is built with.
DEFAULT_SEPARATOR: Pattern[str] = re.compile(r"[\s\-]+")

SeparatorLike = Union[str, Pattern[str]]


def compile_separator(separator: SeparatorLike) -> Pattern[str]:
    """Accept a pattern string or a compiled pattern."""
    if isinstance(separator, str):
        return re.compile(separator)
    return separator


def _iter_slices(text: str, separator: Pattern[str]) -> Iterable[Span]:
    """Yield the span of every maximal run of non-separator characters.

    Characters are tested one at a time, and the end of the string is an
    implicit boundary.
    """
    length = len(text)
    slice_start = 0
    for slice_end in range(length + 1):
        if slice_end == length or separator.search(text[slice_end]):
            if slice_end > slice_start:
                yield Span(slice_start, slice_end - slice_start)
            slice_start = slice_end + 1


class SeparatorTokenizer(Tokenizer):
    """Splits text on every character matching the separator pattern."""

    def __init__(self, separator: SeparatorLike = DEFAULT_SEPARATOR):
        """Initialize tokenizer.

        Args:
            separator: Regex matched against single characters
        """
        self.separator = compile_separator(separator)

    def tokenize(self, text: str) -> TokenStream:
        """Tokenize text, keeping original character offsets."""
        tokens = []
        for position, span in enumerate(_iter_slices(text, self.separator)):
            tokens.append(Token(
                text=text[span.start:span.end],
                position=position,
                start_offset=span.start,
                end_offset=span.end,
            ))
        return TokenStream(tokens)


def find_term_position(
    term: str,
    text: str,
    separator: SeparatorLike = DEFAULT_SEPARATOR,
) -> Span:
    """Find the first token of ``text`` that contains ``term``.

    The comparison is case-insensitive and uses substring containment, so
    stemmed or partial terms reported by the index still land on the
    token they came from. The returned span covers the whole token.

    Args:
        term: Matched index term
        text: Field text
        separator: The index tokenizer separator

    Returns:
        Span of the first matching token, or ``Span(0, 0)`` if none matches
    """
    pattern = compile_separator(separator)
    needle = term.lower()
    for span in _iter_slices(text, pattern):
        if needle in text[span.start:span.end].lower():
            return span
    return NO_MATCH


def get_term_positions(
    text: str,
    terms: Iterable[str],
    separator: SeparatorLike = DEFAULT_SEPARATOR,
) -> List[Span]:
    """Locate every term in ``text``.

    Terms that are not found are dropped. The result is ordered by start
    offset.
    """
    pattern = compile_separator(separator)
    positions = {find_term_position(term, text, pattern) for term in terms}
    return sorted(
        (position for position in positions if position.length > 0),
        key=lambda position: position.start,
    )


__all__ = [
    "DEFAULT_SEPARATOR",
    "SeparatorTokenizer",
    "compile_separator",
    "find_term_position",
    "get_term_positions",
]
