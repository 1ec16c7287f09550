"""DocSearch Index Interface.

The index is an external, read-only dependency. The core only needs two
things from it: turning a query string into clauses with the index's own
grammar, and executing a clause list.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Pattern

from docsearch_core.index.document import split_ref

if TYPE_CHECKING:
    from docsearch_core.query.clause import Clause

# term -> field -> match info (positions, frequencies)
MatchMetadata = Dict[str, Dict[str, Any]]


@dataclass
class MatchResult:
    """A matched document or section.

    Attributes:
        ref: ``documentId`` or ``documentId-sectionId``
        metadata: Per-term, per-field match metadata
        score: Relevance score assigned by the index
    """

    ref: str
    metadata: MatchMetadata = field(default_factory=dict)
    score: float = 0.0

    @property
    def document_id(self) -> str:
        return split_ref(self.ref)[0]

    @property
    def section_id(self) -> Optional[str]:
        ids = split_ref(self.ref)
        return ids[1] if len(ids) > 1 else None

    @property
    def terms(self) -> List[str]:
        """Matched index terms."""
        return list(self.metadata)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "ref": self.ref,
            "score": self.score,
            "matchData": {"metadata": self.metadata},
        }


class SearchIndex(ABC):
    """Abstract full-text index.

    Attributes:
        separator: Tokenizer separator the index was built with
    """

    separator: Pattern[str]

    @abstractmethod
    def parse(self, query: str) -> List[Clause]:
        """Parse a query string with the index grammar.

        Raises:
            QueryParseError: If the query is malformed
        """
        pass

    @abstractmethod
    def execute(self, clauses: List[Clause]) -> List[MatchResult]:
        """Execute clauses, returning results in relevance order."""
        pass

    def query(self, query: str) -> List[MatchResult]:
        """Parse and execute a query string."""
        return self.execute(self.parse(query))


__all__ = ["MatchMetadata", "MatchResult", "SearchIndex"]
