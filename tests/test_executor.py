"""Tiered search execution tests."""

from __future__ import annotations

from typing import List

import pytest

from docsearch_core.analyzers.tokenizers import DEFAULT_SEPARATOR
from docsearch_core.errors import QueryParseError
from docsearch_core.index.base import MatchResult, SearchIndex
from docsearch_core.index.document import DocumentStore
from docsearch_core.index.memory import MemoryIndex
from docsearch_core.query.clause import Clause, Presence, Wildcard
from docsearch_core.query.executor import (
    SearchTier,
    TieredSearchExecutor,
    prefix_clauses,
    substring_clauses,
)


class StaticIndex(SearchIndex):
    """Returns the same results for every query."""

    separator = DEFAULT_SEPARATOR

    def __init__(self, results: List[MatchResult]):
        self.results = results

    def parse(self, query: str) -> List[Clause]:
        return [Clause(query)]

    def execute(self, clauses: List[Clause]) -> List[MatchResult]:
        return list(self.results)


def test_exact_tier_stops_escalation(recording_index, store: DocumentStore) -> None:
    executor = TieredSearchExecutor(recording_index)
    results = executor.search(store.documents, "fox")

    assert [r.ref for r in results] == ["1", "3"]
    assert len(recording_index.calls) == 1
    assert executor.last_stats.tier is SearchTier.EXACT


def test_escalates_to_prefix(recording_index, store: DocumentStore) -> None:
    executor = TieredSearchExecutor(recording_index)
    results = executor.search(store.documents, "qui")

    assert [r.ref for r in results] == ["1", "1-1"]
    assert executor.last_stats.tier is SearchTier.PREFIX
    assert executor.last_stats.tiers_tried == [SearchTier.EXACT, SearchTier.PREFIX]
    prefix = recording_index.calls[1][0]
    assert prefix.term == "qui*"
    assert prefix.wildcard is Wildcard.TRAILING
    assert prefix.use_pipeline is False


def test_prefix_match_on_single_document() -> None:
    store = DocumentStore.from_dict({
        "documents": {"1": {"id": 1, "title": "", "text": "The quick brown fox"}},
    })
    executor = TieredSearchExecutor(MemoryIndex.from_store(store))

    results = executor.search(store.documents, "qui")

    assert [r.ref for r in results] == ["1"]
    assert executor.last_stats.tier is SearchTier.PREFIX


def test_escalates_to_substring(recording_index, store: DocumentStore) -> None:
    executor = TieredSearchExecutor(recording_index)
    results = executor.search(store.documents, "uick")

    assert [r.ref for r in results] == ["1", "1-1"]
    assert executor.last_stats.tier is SearchTier.SUBSTRING
    substring = recording_index.calls[2][0]
    assert substring.term == "*uick*"
    assert substring.wildcard == Wildcard.LEADING | Wildcard.TRAILING


def test_no_tier_matches(recording_index, store: DocumentStore) -> None:
    executor = TieredSearchExecutor(recording_index)

    assert executor.search(store.documents, "zzzz") == []
    assert len(recording_index.calls) == 3
    assert executor.last_stats.tier is None
    assert executor.last_stats.tiers_tried == list(SearchTier)


def test_parse_error_runs_no_tier(recording_index, store: DocumentStore) -> None:
    executor = TieredSearchExecutor(recording_index)

    with pytest.raises(QueryParseError):
        executor.search(store.documents, "title:")
    assert recording_index.calls == []


def test_rewrites_keep_prohibited_clauses() -> None:
    clauses = [
        Clause("foo"),
        Clause("bar", presence=Presence.PROHIBITED),
    ]

    prefixed = prefix_clauses(clauses)
    widened = substring_clauses(clauses)

    assert [c.term for c in prefixed] == ["foo*", "bar"]
    assert [c.term for c in widened] == ["*foo*", "bar"]
    assert prefixed[1] is clauses[1]
    assert widened[1].wildcard is Wildcard.NONE
    assert clauses[0].term == "foo"
    assert clauses[0].use_pipeline is True


def test_facets_apply_at_every_tier(recording_index, store: DocumentStore) -> None:
    executor = TieredSearchExecutor(recording_index)

    assert [r.ref for r in executor.search(store.documents, "fox", ["component:b"])] == ["3"]

    assert executor.search(store.documents, "qui", ["component:b"]) == []
    assert len(executor.last_stats.tiers_tried) == 3


def test_facet_filtering_drives_escalation(store: DocumentStore) -> None:
    executor = TieredSearchExecutor(MemoryIndex.from_store(store))

    results = executor.search(store.documents, "fox", ["component:a;version:2"])

    assert results == []
    assert executor.last_stats.total_hits == 2
    assert executor.last_stats.filtered_hits == 0


def test_unknown_document_fails_only_with_facets(store: DocumentStore) -> None:
    executor = TieredSearchExecutor(StaticIndex([MatchResult("99")]))

    assert [r.ref for r in executor.search(store.documents, "x")] == ["99"]
    with pytest.raises(KeyError):
        executor.search(store.documents, "x", ["component:a"])
