"""DocSearch Query Components.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from docsearch_core.query.clause import (
    Clause,
    Presence,
    Wildcard,
    query_to_string,
    wildcard_of,
)
from docsearch_core.query.parser import (
    QueryLexer,
    QueryParser,
)
from docsearch_core.query.executor import (
    ExecutionStats,
    SearchTier,
    TieredSearchExecutor,
    filter_results,
    prefix_clauses,
    substring_clauses,
)

__all__ = [
    "Clause",
    "Presence",
    "Wildcard",
    "query_to_string",
    "wildcard_of",
    "QueryLexer",
    "QueryParser",
    "ExecutionStats",
    "SearchTier",
    "TieredSearchExecutor",
    "filter_results",
    "prefix_clauses",
    "substring_clauses",
]
