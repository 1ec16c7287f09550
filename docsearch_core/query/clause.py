"""DocSearch Query Clauses - Native Query Model.

A query is a flat, ordered list of clauses. Each clause names one term,
whether documents must, may, or must not contain it, where wildcards
apply, and whether the term still has to go through the index pipeline.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum, Flag
from typing import Any, Dict, List, Optional, Tuple


class Presence(Enum):
    """Clause presence."""

    OPTIONAL = 1
    REQUIRED = 2
    PROHIBITED = 3


class Wildcard(Flag):
    """Where a clause term carries a ``*`` wildcard."""

    NONE = 0
    LEADING = 1
    TRAILING = 2


WILDCARD_CHAR = "*"


def wildcard_of(term: str) -> Wildcard:
    """Derive wildcard flags from the position of ``*`` in a term."""
    flags = Wildcard.NONE
    if term.startswith(WILDCARD_CHAR):
        flags |= Wildcard.LEADING
    if term.endswith(WILDCARD_CHAR) and term != WILDCARD_CHAR:
        flags |= Wildcard.TRAILING
    return flags


@dataclass(frozen=True)
class Clause:
    """A single query clause.

    Attributes:
        term: Term text, including any ``*`` wildcards
        fields: Fields to search, ``None`` for all index fields
        presence: Whether the term is optional, required or prohibited
        wildcard: Wildcard flags of the term
        use_pipeline: Run the term through the index pipeline
        boost: Relevance boost
        edit_distance: Maximum edit distance for fuzzy matching
    """

    term: str
    fields: Optional[Tuple[str, ...]] = None
    presence: Presence = Presence.OPTIONAL
    wildcard: Wildcard = Wildcard.NONE
    use_pipeline: bool = True
    boost: int = 1
    edit_distance: int = 0

    @property
    def is_prohibited(self) -> bool:
        return self.presence is Presence.PROHIBITED

    @property
    def has_wildcard(self) -> bool:
        return WILDCARD_CHAR in self.term

    def with_term(self, term: str, wildcard: Wildcard) -> "Clause":
        """Copy of the clause matching ``term`` verbatim (no pipeline)."""
        return replace(self, term=term, wildcard=wildcard, use_pipeline=False)

    def to_string(self) -> str:
        """Convert back to query string syntax."""
        result = self.term
        if self.fields:
            result = f"{','.join(self.fields)}:{result}"
        if self.presence is Presence.REQUIRED:
            result = f"+{result}"
        elif self.presence is Presence.PROHIBITED:
            result = f"-{result}"
        if self.boost != 1:
            result = f"{result}^{self.boost}"
        if self.edit_distance:
            result = f"{result}~{self.edit_distance}"
        return result

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "term": self.term,
            "fields": list(self.fields) if self.fields else None,
            "presence": self.presence.name,
            "wildcard": self.wildcard.value,
            "use_pipeline": self.use_pipeline,
            "boost": self.boost,
            "edit_distance": self.edit_distance,
        }


def query_to_string(clauses: List[Clause]) -> str:
    """Render a clause list as a query string."""
    return " ".join(clause.to_string() for clause in clauses)


__all__ = [
    "Clause",
    "Presence",
    "WILDCARD_CHAR",
    "Wildcard",
    "query_to_string",
    "wildcard_of",
]
