"""DocSearch Analyzer Components.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from docsearch_core.analyzers.base import (
    Analyzer,
    NO_MATCH,
    Span,
    Token,
    TokenStream,
    Tokenizer,
    TokenFilter,
)
from docsearch_core.analyzers.filters import (
    LowercaseFilter,
    TrimmerFilter,
)
from docsearch_core.analyzers.tokenizers import (
    DEFAULT_SEPARATOR,
    SeparatorTokenizer,
    compile_separator,
    find_term_position,
    get_term_positions,
)


def standard_analyzer(separator=DEFAULT_SEPARATOR) -> Analyzer:
    """Build the analyzer the documentation index uses."""
    return Analyzer(
        tokenizer=SeparatorTokenizer(separator),
        token_filters=[TrimmerFilter(), LowercaseFilter()],
    )


__all__ = [
    "Analyzer",
    "NO_MATCH",
    "Span",
    "Token",
    "TokenStream",
    "Tokenizer",
    "TokenFilter",
    "LowercaseFilter",
    "TrimmerFilter",
    "DEFAULT_SEPARATOR",
    "SeparatorTokenizer",
    "compile_separator",
    "find_term_position",
    "get_term_positions",
    "standard_analyzer",
]
