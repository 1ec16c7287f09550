"""DocSearch - Search Box Core for Documentation Sites.

Turns the text typed into a documentation search box into ranked,
highlighted excerpts from a pre-built full-text index.

Architecture:
┌─────────────────────────────────────────────────────────────────────────────┐
│                            DocSearch Engine                                 │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                             │
│   ┌─────────────────────────────────────────────────────────────────────┐   │
│   │                      Tiered Query Execution                         │   │
│   │  ┌────────────┐  ┌────────────┐  ┌────────────┐  ┌────────────┐    │   │
│   │  │   Parse    │→ │   Exact    │→ │   Prefix   │→ │ Substring  │    │   │
│   │  └────────────┘  └────────────┘  └────────────┘  └────────────┘    │   │
│   │                each tier filtered by active facets                  │   │
│   └─────────────────────────────────────────────────────────────────────┘   │
│                                                                             │
│   ┌─────────────────────────────────────────────────────────────────────┐   │
│   │                          Highlighting                               │   │
│   │  ┌────────────┐  ┌────────────┐  ┌────────────────────────────┐    │   │
│   │  │   Term     │→ │   Span     │→ │  Windowed text/mark        │    │   │
│   │  │  Locator   │  │  Sorting   │  │  segments                  │    │   │
│   │  └────────────┘  └────────────┘  └────────────────────────────┘    │   │
│   └─────────────────────────────────────────────────────────────────────┘   │
│                                                                             │
│   ┌─────────────────────────────────────────────────────────────────────┐   │
│   │                     Collaborators (pluggable)                       │   │
│   │  ┌────────────┐  ┌────────────┐  ┌────────────┐                    │   │
│   │  │   Index    │  │  Document  │  │ Key-Value  │                    │   │
│   │  │            │  │   Store    │  │   Store    │                    │   │
│   │  └────────────┘  └────────────┘  └────────────┘                    │   │
│   └─────────────────────────────────────────────────────────────────────┘   │
│                                                                             │
└─────────────────────────────────────────────────────────────────────────────┘

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

__version__ = "1.0.0"
__author__ = "BlackRoad OS"
__license__ = "Proprietary"

# Core engine
from docsearch_core.engine import (
    SearchEngine,
    SearchConfig,
    SearchHit,
    SearchResult,
)

# Errors
from docsearch_core.errors import (
    SearchError,
    QueryParseError,
    UnexpectedSearchFailure,
)

# Analyzers
from docsearch_core.analyzers import (
    DEFAULT_SEPARATOR,
    Span,
    find_term_position,
    get_term_positions,
)

# Highlighting
from docsearch_core.highlight import (
    HitHighlight,
    Segment,
    SegmentType,
    build_highlighted_text,
    highlight_hit,
)

# Facets
from docsearch_core.facets import (
    FilterState,
    combine_predicates,
    compile_facet_filter,
    compile_facet_filters,
    build_facet_options,
)

# Query
from docsearch_core.query import (
    Clause,
    Presence,
    QueryParser,
    SearchTier,
    TieredSearchExecutor,
    Wildcard,
)

# Index
from docsearch_core.index import (
    ComponentVersion,
    Document,
    DocumentStore,
    MatchResult,
    MemoryIndex,
    SearchIndex,
    Section,
)

# Storage
from docsearch_core.storage import KeyValueStore, MemoryStorage

__all__ = [
    # Version
    "__version__",
    "__author__",
    "__license__",
    # Core
    "SearchEngine",
    "SearchConfig",
    "SearchHit",
    "SearchResult",
    # Errors
    "SearchError",
    "QueryParseError",
    "UnexpectedSearchFailure",
    # Analyzers
    "DEFAULT_SEPARATOR",
    "Span",
    "find_term_position",
    "get_term_positions",
    # Highlighting
    "HitHighlight",
    "Segment",
    "SegmentType",
    "build_highlighted_text",
    "highlight_hit",
    # Facets
    "FilterState",
    "combine_predicates",
    "compile_facet_filter",
    "compile_facet_filters",
    "build_facet_options",
    # Query
    "Clause",
    "Presence",
    "QueryParser",
    "SearchTier",
    "TieredSearchExecutor",
    "Wildcard",
    # Index
    "ComponentVersion",
    "Document",
    "DocumentStore",
    "MatchResult",
    "MemoryIndex",
    "SearchIndex",
    "Section",
    # Storage
    "KeyValueStore",
    "MemoryStorage",
]
