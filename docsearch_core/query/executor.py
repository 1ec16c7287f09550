"""DocSearch Query Executor - Tiered Query Execution.

A query is tried in up to three tiers, each looser than the last, and the
first tier that leaves any result after facet filtering wins:

1. exact: the query as parsed by the index grammar
2. prefix: every non-prohibited term gets a trailing wildcard
3. substring: every non-prohibited term gets wildcards on both ends

Prohibited terms never widen. Tier rewrites build new clause lists; the
parsed query is never modified.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Callable, Dict, List, Mapping, Optional, Sequence

from docsearch_core.facets.filters import Predicate, compile_facet_filters
from docsearch_core.query.clause import (
    WILDCARD_CHAR,
    Clause,
    Wildcard,
    query_to_string,
)

if TYPE_CHECKING:
    from docsearch_core.index.base import MatchResult, SearchIndex
    from docsearch_core.index.document import Document

logger = logging.getLogger(__name__)


class SearchTier(Enum):
    """Query escalation tiers, in the order they are tried."""

    EXACT = "exact"
    PREFIX = "prefix"
    SUBSTRING = "substring"


ClauseRewrite = Callable[[Sequence[Clause]], List[Clause]]


def prefix_clauses(clauses: Sequence[Clause]) -> List[Clause]:
    """Append a trailing wildcard to every non-prohibited term."""
    return [
        clause if clause.is_prohibited
        else clause.with_term(clause.term + WILDCARD_CHAR, Wildcard.TRAILING)
        for clause in clauses
    ]


def substring_clauses(clauses: Sequence[Clause]) -> List[Clause]:
    """Wrap every non-prohibited term in leading and trailing wildcards."""
    return [
        clause if clause.is_prohibited
        else clause.with_term(
            WILDCARD_CHAR + clause.term + WILDCARD_CHAR,
            Wildcard.LEADING | Wildcard.TRAILING,
        )
        for clause in clauses
    ]


TIER_REWRITES: Dict[SearchTier, Optional[ClauseRewrite]] = {
    SearchTier.EXACT: None,
    SearchTier.PREFIX: prefix_clauses,
    SearchTier.SUBSTRING: substring_clauses,
}


@dataclass
class ExecutionStats:
    """Statistics about the last tiered execution.

    Attributes:
        tier: Tier that produced the results, ``None`` if none did
        tiers_tried: Tiers executed, in order
        total_hits: Index hits of the last tier, before facet filtering
        filtered_hits: Hits left after facet filtering
        took_ms: Wall time of the whole execution
    """

    tier: Optional[SearchTier] = None
    tiers_tried: List[SearchTier] = field(default_factory=list)
    total_hits: int = 0
    filtered_hits: int = 0
    took_ms: float = 0.0


def filter_results(
    results: List[MatchResult],
    documents: Mapping[str, Document],
    active_facets: Sequence[str],
) -> List[MatchResult]:
    """Keep results whose document passes the active facet filters.

    With no active filters the results are returned untouched and the
    documents are never consulted.

    Raises:
        KeyError: If a filtered result refers to an unknown document
    """
    if not active_facets:
        return results
    predicate: Predicate = compile_facet_filters(active_facets)
    return [result for result in results if predicate(documents[result.document_id])]


class TieredSearchExecutor:
    """Runs a query through the escalation tiers against an index."""

    def __init__(self, index: SearchIndex):
        """Initialize executor.

        Args:
            index: Index to query
        """
        self.index = index
        self.last_stats = ExecutionStats()

    def search(
        self,
        documents: Mapping[str, Document],
        raw_query: str,
        active_facets: Optional[Sequence[str]] = None,
    ) -> List[MatchResult]:
        """Execute a query, relaxing it until something matches.

        Args:
            documents: Documents by id, used for facet filtering
            raw_query: Query string in the index grammar
            active_facets: Active facet filter strings

        Returns:
            Results of the first tier with a non-empty filtered result
            set, or an empty list if no tier matches

        Raises:
            QueryParseError: If ``raw_query`` is malformed; no tier runs
        """
        start = time.time()
        active_facets = list(active_facets or [])
        stats = ExecutionStats()
        self.last_stats = stats

        parsed = self.index.parse(raw_query)

        results: List[MatchResult] = []
        for tier, rewrite in TIER_REWRITES.items():
            clauses = rewrite(parsed) if rewrite else list(parsed)
            hits = self.index.execute(clauses)
            results = filter_results(hits, documents, active_facets)

            stats.tiers_tried.append(tier)
            stats.total_hits = len(hits)
            stats.filtered_hits = len(results)
            logger.debug(
                f"Tier {tier.value}: {query_to_string(clauses)!r} -> "
                f"{len(hits)} hits, {len(results)} after facets"
            )
            if results:
                stats.tier = tier
                break

        stats.took_ms = (time.time() - start) * 1000
        return results


__all__ = [
    "ExecutionStats",
    "SearchTier",
    "TIER_REWRITES",
    "TieredSearchExecutor",
    "filter_results",
    "prefix_clauses",
    "substring_clauses",
]
