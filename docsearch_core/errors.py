"""DocSearch Errors - Search Failure Taxonomy.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from typing import Optional


class SearchError(Exception):
    """Base class for search failures."""


class QueryParseError(SearchError, ValueError):
    """Raised when a query string is not valid in the index query grammar.

    Attributes:
        query: Query string that failed to parse
        position: Character offset of the offending lexeme, if known
    """

    def __init__(
        self,
        message: str,
        query: str = "",
        position: Optional[int] = None,
    ):
        super().__init__(message)
        self.query = query
        self.position = position


class UnexpectedSearchFailure(SearchError):
    """Raised for any failure during search other than a parse error."""


__all__ = ["SearchError", "QueryParseError", "UnexpectedSearchFailure"]
