"""DocSearch Analyzer Base - Core Text Analysis Components.

Provides the token types shared by the index adapter and the highlighter:
tokens with character offsets, spans, and the analysis pipeline that turns
field text into index terms.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterator, List, Optional


@dataclass(frozen=True)
class Span:
    """A half-open character range ``[start, start + length)`` in a field.

    The zero-length span at offset 0 is the "no match" sentinel returned
    by the term locator.
    """

    start: int = 0
    length: int = 0

    @property
    def end(self) -> int:
        """Offset one past the last character."""
        return self.start + self.length

    def fits(self, text_length: int) -> bool:
        """Check that the span is non-empty and inside a text of given length."""
        return self.length > 0 and self.start >= 0 and self.end <= text_length


NO_MATCH = Span(0, 0)


@dataclass
class Token:
    """A token in the analysis stream.

    Attributes:
        text: Token text (normalized once filters have run)
        position: Ordinal position in the token stream
        start_offset: Start character offset in the original text
        end_offset: End character offset in the original text
    """

    text: str
    position: int = 0
    start_offset: int = 0
    end_offset: int = 0

    def __repr__(self) -> str:
        return f"Token({self.text!r}, pos={self.position})"

    def clone(self) -> "Token":
        """Create a copy of this token."""
        return Token(
            text=self.text,
            position=self.position,
            start_offset=self.start_offset,
            end_offset=self.end_offset,
        )

    @property
    def span(self) -> Span:
        """Character span of the token in the original text."""
        return Span(self.start_offset, self.end_offset - self.start_offset)


class TokenStream:
    """A stream of tokens."""

    def __init__(self, tokens: Optional[List[Token]] = None):
        """Initialize token stream.

        Args:
            tokens: Initial tokens
        """
        self._tokens: List[Token] = tokens or []

    def __iter__(self) -> Iterator[Token]:
        """Iterate over tokens."""
        return iter(self._tokens)

    def __len__(self) -> int:
        """Get token count."""
        return len(self._tokens)

    def __getitem__(self, index: int) -> Token:
        """Get token by index."""
        return self._tokens[index]

    def to_list(self) -> List[Token]:
        """Convert to list of tokens."""
        return list(self._tokens)

    def get_texts(self) -> List[str]:
        """Get list of token texts."""
        return [t.text for t in self._tokens]


class Tokenizer(ABC):
    """Base class for tokenizers."""

    @abstractmethod
    def tokenize(self, text: str) -> TokenStream:
        """Tokenize text.

        Args:
            text: Input text

        Returns:
            Token stream
        """
        pass


class TokenFilter(ABC):
    """Base class for token filters.

    Token filters transform or remove tokens in the stream.
    """

    @abstractmethod
    def filter(self, stream: TokenStream) -> TokenStream:
        """Filter token stream.

        Args:
            stream: Input token stream

        Returns:
            Filtered token stream
        """
        pass

    def filter_term(self, term: str) -> str:
        """Apply the filter to a single query term."""
        stream = self.filter(TokenStream([Token(text=term)]))
        return stream[0].text if len(stream) else ""


class Analyzer:
    """Text analysis pipeline: a tokenizer followed by token filters.

    The same pipeline is run over field text at index time and over
    query terms at query time, unless a query clause opts out of it.
    """

    def __init__(
        self,
        tokenizer: Tokenizer,
        token_filters: Optional[List[TokenFilter]] = None,
    ):
        """Initialize analyzer.

        Args:
            tokenizer: Tokenizer to use
            token_filters: Token filters to apply, in order
        """
        self.tokenizer = tokenizer
        self._token_filters = token_filters or []

    def analyze(self, text: str) -> TokenStream:
        """Analyze text into tokens.

        Args:
            text: Input text

        Returns:
            Token stream
        """
        stream = self.tokenizer.tokenize(text)
        for token_filter in self._token_filters:
            stream = token_filter.filter(stream)
        return stream

    def run_pipeline(self, term: str) -> str:
        """Run the token filters over a single query term."""
        for token_filter in self._token_filters:
            term = token_filter.filter_term(term)
            if not term:
                break
        return term


__all__ = [
    "Analyzer",
    "NO_MATCH",
    "Span",
    "Token",
    "TokenStream",
    "Tokenizer",
    "TokenFilter",
]
