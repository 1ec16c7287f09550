"""DocSearch Token Filters - Index Pipeline Filters.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import re

from docsearch_core.analyzers.base import (
    TokenFilter,
    TokenStream,
)


class LowercaseFilter(TokenFilter):
    """Converts tokens to lowercase."""

    def filter(self, stream: TokenStream) -> TokenStream:
        """Convert all tokens to lowercase."""
        tokens = []
        for token in stream:
            new_token = token.clone()
            new_token.text = token.text.lower()
            tokens.append(new_token)
        return TokenStream(tokens)


class TrimmerFilter(TokenFilter):
    """Strips non-word characters from both ends of each token.

    Tokens left empty are dropped. Offsets keep pointing at the untrimmed
    token so highlighting covers what the reader sees.
    """

    LEADING = re.compile(r"^\W+")
    TRAILING = re.compile(r"\W+$")

    def filter(self, stream: TokenStream) -> TokenStream:
        """Trim tokens."""
        tokens = []
        for token in stream:
            text = self.TRAILING.sub("", self.LEADING.sub("", token.text))
            if not text:
                continue
            new_token = token.clone()
            new_token.text = text
            tokens.append(new_token)
        return TokenStream(tokens)


__all__ = ["LowercaseFilter", "TrimmerFilter"]
