"""DocSearch Memory Index - In-Memory Reference Index.

A small index over a document store, for local use and tests. It
understands the clause model fully (presence, fields, wildcards, edit
distance, pipeline opt-out) but scores by nothing more than the boosted
count of matched terms per field.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional

from docsearch_core.analyzers import Analyzer, Token, standard_analyzer
from docsearch_core.index.base import MatchMetadata, MatchResult, SearchIndex
from docsearch_core.index.document import REF_SEPARATOR, Document, DocumentStore
from docsearch_core.query.clause import WILDCARD_CHAR, Clause, Presence
from docsearch_core.query.parser import QueryParser

logger = logging.getLogger(__name__)

DEFAULT_FIELDS = ("title", "text", "keyword")

TermMatcher = Callable[[str], bool]


def edit_distance(a: str, b: str) -> int:
    """Levenshtein distance between two strings."""
    if len(a) < len(b):
        a, b = b, a
    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, 1):
        current = [i]
        for j, char_b in enumerate(b, 1):
            current.append(min(
                previous[j] + 1,
                current[j - 1] + 1,
                previous[j - 1] + (char_a != char_b),
            ))
        previous = current
    return previous[-1]


class MemoryIndex(SearchIndex):
    """In-memory index keyed by result ref."""

    def __init__(
        self,
        analyzer: Optional[Analyzer] = None,
        fields: Iterable[str] = DEFAULT_FIELDS,
    ):
        """Initialize index.

        Args:
            analyzer: Pipeline applied to field text and query terms
            fields: Indexed field names
        """
        self.analyzer = analyzer or standard_analyzer()
        self.separator = self.analyzer.tokenizer.separator
        self.fields = tuple(fields)
        self._parser = QueryParser(self.fields)
        # ref -> field -> analyzed tokens
        self._entries: Dict[str, Dict[str, List[Token]]] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def add(self, ref: str, values: Mapping[str, Optional[str]]) -> None:
        """Index the fields of one entry. Unknown fields are ignored."""
        self._entries[ref] = {
            name: self.analyzer.analyze(text).to_list()
            for name, text in values.items()
            if name in self.fields and text
        }

    def add_document(self, document: Document) -> None:
        """Index a page and each of its section titles."""
        self.add(document.id, {name: document.get(name) for name in self.fields})
        for section in document.titles:
            self.add(f"{document.id}{REF_SEPARATOR}{section.id}", {"title": section.text})

    @classmethod
    def from_store(
        cls,
        store: DocumentStore,
        analyzer: Optional[Analyzer] = None,
        fields: Iterable[str] = DEFAULT_FIELDS,
    ) -> "MemoryIndex":
        """Build an index over every document in the store."""
        index = cls(analyzer=analyzer, fields=fields)
        for document in store.documents.values():
            index.add_document(document)
        logger.info(f"Built memory index: {len(index)} entries")
        return index

    @classmethod
    def load(cls, data: Optional[Mapping[str, Any]], store: DocumentStore) -> "MemoryIndex":
        """Index loader for serialized payloads; only the field list is read."""
        fields = (data or {}).get("fields") or DEFAULT_FIELDS
        return cls.from_store(store, fields=fields)

    def parse(self, query: str) -> List[Clause]:
        return self._parser.parse(query)

    def _matcher(self, clause: Clause) -> Optional[TermMatcher]:
        """Build the token test for a clause, ``None`` if it cannot match."""
        term = clause.term
        if clause.use_pipeline:
            term = self.analyzer.run_pipeline(term)
        if not term:
            return None
        if WILDCARD_CHAR in term:
            pattern = re.compile(".*".join(re.escape(part) for part in term.split(WILDCARD_CHAR)))
            return lambda token: pattern.fullmatch(token) is not None
        if clause.edit_distance:
            return lambda token: edit_distance(term, token) <= clause.edit_distance
        return lambda token: token == term

    def _match_clause(
        self,
        entry: Dict[str, List[Token]],
        clause: Clause,
        matcher: Optional[TermMatcher],
    ) -> MatchMetadata:
        matches: MatchMetadata = {}
        if matcher is None:
            return matches
        for field_name in clause.fields or self.fields:
            for token in entry.get(field_name, []):
                if matcher(token.text):
                    positions = (
                        matches.setdefault(token.text, {})
                        .setdefault(field_name, {"position": []})["position"]
                    )
                    positions.append([token.start_offset, token.end_offset - token.start_offset])
        return matches

    def execute(self, clauses: List[Clause]) -> List[MatchResult]:
        """Execute clauses against every entry.

        Required clauses must all match and prohibited ones must not. When
        there is no required clause, at least one optional clause has to
        match; a query of only prohibited clauses matches everything else.
        """
        if not clauses:
            return []

        compiled = [(clause, self._matcher(clause)) for clause in clauses]
        has_required = any(c.presence is Presence.REQUIRED for c in clauses)
        has_optional = any(c.presence is Presence.OPTIONAL for c in clauses)

        results = []
        for ref, entry in self._entries.items():
            result = self._execute_entry(ref, entry, compiled, has_required, has_optional)
            if result is not None:
                results.append(result)

        # stable: equal scores keep index order
        results.sort(key=lambda result: result.score, reverse=True)
        return results

    def _execute_entry(
        self,
        ref: str,
        entry: Dict[str, List[Token]],
        compiled: List[tuple],
        has_required: bool,
        has_optional: bool,
    ) -> Optional[MatchResult]:
        metadata: MatchMetadata = {}
        score = 0.0
        optional_hits = 0

        for clause, matcher in compiled:
            matches = self._match_clause(entry, clause, matcher)
            if clause.presence is Presence.PROHIBITED:
                if matches:
                    return None
                continue
            if not matches:
                if clause.presence is Presence.REQUIRED:
                    return None
                continue
            if clause.presence is Presence.OPTIONAL:
                optional_hits += 1
            for term, matched_fields in matches.items():
                term_fields = metadata.setdefault(term, {})
                for field_name, info in matched_fields.items():
                    if field_name not in term_fields:
                        term_fields[field_name] = info
                    score += clause.boost * len(info["position"])

        if has_optional and not has_required and optional_hits == 0:
            return None
        return MatchResult(ref=ref, metadata=metadata, score=score)


__all__ = ["DEFAULT_FIELDS", "MemoryIndex", "edit_distance"]
