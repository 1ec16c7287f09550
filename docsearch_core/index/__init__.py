"""DocSearch Index Components.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from docsearch_core.index.document import (
    ComponentVersion,
    Document,
    DocumentStore,
    Section,
    split_ref,
)
from docsearch_core.index.base import (
    MatchMetadata,
    MatchResult,
    SearchIndex,
)
from docsearch_core.index.memory import MemoryIndex

__all__ = [
    "ComponentVersion",
    "Document",
    "DocumentStore",
    "Section",
    "split_ref",
    "MatchMetadata",
    "MatchResult",
    "SearchIndex",
    "MemoryIndex",
]
