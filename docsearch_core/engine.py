"""DocSearch Core Engine - Search Box Backend.

The SearchEngine class is the interface a search UI talks to. It runs
tiered queries, applies facet filters, and turns matches into hits with
highlighted title, section, body and keyword snippets. Rendering is left
to the caller.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import itertools
import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generator, List, Mapping, Optional, Pattern

from docsearch_core.analyzers.tokenizers import DEFAULT_SEPARATOR, compile_separator
from docsearch_core.errors import QueryParseError, SearchError, UnexpectedSearchFailure
from docsearch_core.facets.builder import Facet, build_facet_options
from docsearch_core.facets.filters import Predicate, compile_facet_filters
from docsearch_core.facets.state import FilterState
from docsearch_core.highlight.hit import HitHighlight, highlight_hit
from docsearch_core.index.base import MatchMetadata, MatchResult, SearchIndex
from docsearch_core.index.document import Document, DocumentStore, Section
from docsearch_core.index.memory import MemoryIndex
from docsearch_core.query.executor import SearchTier, TieredSearchExecutor
from docsearch_core.storage.backend import KeyValueStore

logger = logging.getLogger(__name__)

IndexLoader = Callable[[Any, DocumentStore], SearchIndex]


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return bool(value)


def _as_int(value: Any, default: int) -> int:
    if isinstance(value, str) and not value.strip():
        return default
    return int(value)


@dataclass
class SearchConfig:
    """Search configuration.

    Attributes:
        snippet_length: Characters of context kept around the first match
        site_root_path: Prefix prepended to every hit URL
        additional_filters: Show the component filter panel
        debug: Log invalid queries
        separator: Tokenizer separator override; by default the index's
            own separator is used
    """

    snippet_length: int = 100
    site_root_path: str = ""
    additional_filters: bool = False
    debug: bool = False
    separator: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SearchConfig":
        """Create from a settings mapping.

        Accepts snake_case keys as well as the camelCase keys of the
        search script's data attributes, with string values.
        """
        def pick(*keys: str, default: Any = None) -> Any:
            for key in keys:
                if key in data and data[key] is not None:
                    return data[key]
            return default

        debug = pick("debug", default=False)
        if "lunr-debug" in data:
            debug = True

        return cls(
            snippet_length=_as_int(pick("snippet_length", "snippetLength", default=100), 100),
            site_root_path=pick("site_root_path", "siteRootPath", default="") or "",
            additional_filters=_as_bool(pick("additional_filters", "additionalFilters", default=False)),
            debug=_as_bool(debug),
            separator=pick("separator"),
        )


@dataclass
class SearchHit:
    """Single search result hit.

    Attributes:
        ref: Index ref of the hit
        document: Matched document
        section: Matched section, if the hit is a section title
        highlight: Highlighted field segments
        url: Link to the page, with the section anchor if any
        score: Relevance score from the index
        component_header: Component version heading, set on the first hit
            of each run of hits from the same component version
    """

    ref: str
    document: Document
    section: Optional[Section] = None
    highlight: HitHighlight = field(default_factory=HitHighlight)
    url: str = ""
    score: float = 0.0
    component_header: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "ref": self.ref,
            "url": self.url,
            "score": self.score,
            "componentHeader": self.component_header,
            "highlight": self.highlight.to_dict(),
        }


@dataclass
class SearchResult:
    """Search result container.

    Attributes:
        query: Query string as typed
        hits: Assembled hits, in relevance order
        took_ms: Search time in milliseconds
        tier: Tier that produced the hits
        error: Failure that emptied the result, if any
        sequence: Number of the search that produced this result; a
            caller receiving results out of order keeps the highest
        facets: Component filter panel, set only when additional filters
            are enabled
    """

    query: str = ""
    hits: List[SearchHit] = field(default_factory=list)
    took_ms: float = 0.0
    tier: Optional[SearchTier] = None
    error: Optional[SearchError] = None
    sequence: int = 0
    facets: Optional[List[Facet]] = None

    def __len__(self) -> int:
        """Return number of hits."""
        return len(self.hits)

    def __iter__(self) -> Generator[SearchHit, None, None]:
        """Iterate over hits."""
        yield from self.hits

    def __getitem__(self, index: int) -> SearchHit:
        """Get hit by index."""
        return self.hits[index]

    @property
    def is_empty(self) -> bool:
        return not self.hits

    @property
    def no_results_message(self) -> str:
        return f'No results found for query "{self.query}"'


class SearchEngine:
    """Search engine over a loaded index and document store.

    All operations are synchronous and read-only with respect to the index
    and store.
    """

    def __init__(
        self,
        index: SearchIndex,
        store: DocumentStore,
        config: Optional[SearchConfig] = None,
        state_store: Optional[KeyValueStore] = None,
        components: Optional[List[Dict[str, Any]]] = None,
    ):
        """Initialize search engine.

        Args:
            index: Loaded full-text index
            store: Documents the index was built from
            config: Engine configuration
            state_store: Where filter selections are persisted, if anywhere
            components: Site component metadata
                ``[{name, title, versions: [{version, displayVersion}]}]``
                for the component filter panel
        """
        self.index = index
        self.store = store
        self.config = config or SearchConfig()
        self.state_store = state_store
        self.components = list(components or [])
        self.executor = TieredSearchExecutor(index)
        self.filter_state = FilterState.restore(state_store) if state_store else FilterState()
        self._sequence = itertools.count(1)

    @classmethod
    def load(
        cls,
        data: Mapping[str, Any],
        index_loader: IndexLoader = MemoryIndex.load,
        config: Optional[SearchConfig] = None,
        state_store: Optional[KeyValueStore] = None,
        components: Optional[List[Dict[str, Any]]] = None,
    ) -> "SearchEngine":
        """Load an engine from a serialized ``{"index": ..., "store": ...}`` payload.

        Args:
            data: Serialized index and store
            index_loader: Builds the index from its serialized form and the store
            config: Engine configuration
            state_store: Where filter selections are persisted
            components: Site component metadata for the filter panel

        Returns:
            Ready search engine
        """
        start = time.time()
        store = DocumentStore.from_dict(data.get("store", {}))
        index = index_loader(data.get("index"), store)
        engine = cls(
            index, store, config=config, state_store=state_store, components=components
        )
        logger.info(
            f"Loaded search index: {len(store)} documents in "
            f"{(time.time() - start) * 1000:.1f}ms"
        )
        return engine

    @property
    def separator(self) -> Pattern[str]:
        """Tokenizer separator used to locate terms for highlighting."""
        if self.config.separator:
            return compile_separator(self.config.separator)
        return getattr(self.index, "separator", DEFAULT_SEPARATOR)

    def search(
        self,
        query_string: str,
        facets: Optional[List[str]] = None,
    ) -> List[MatchResult]:
        """Run a tiered, facet-filtered search.

        Args:
            query_string: Query in the index grammar
            facets: Active facet filter strings

        Returns:
            Matching results; empty when nothing matches

        Raises:
            QueryParseError: If the query is malformed
        """
        return self.executor.search(self.store.documents, query_string, facets or [])

    def highlight_hit(
        self,
        metadata: MatchMetadata,
        section: Optional[Section],
        document: Document,
    ) -> HitHighlight:
        """Highlight matched terms in the displayed fields of a hit."""
        return highlight_hit(
            metadata,
            section,
            document,
            snippet_length=self.config.snippet_length,
            separator=self.separator,
        )

    @staticmethod
    def compile_facet_filters(filter_strings: List[str]) -> Predicate:
        """Compile active facet filters into one document predicate."""
        return compile_facet_filters(filter_strings)

    def facet_options(
        self,
        components: Optional[List[Dict[str, Any]]] = None,
        filter_state: Optional[FilterState] = None,
    ) -> List[Facet]:
        """Build the component filter panel.

        Args:
            components: Component metadata; defaults to the engine's own
            filter_state: Selection to reflect; defaults to the engine's own
        """
        if components is None:
            components = self.components
        return build_facet_options(components, filter_state or self.filter_state)

    def build_url(self, document: Document, section: Optional[Section]) -> str:
        anchor = f"#{section.hash}" if section else ""
        return f"{self.config.site_root_path}{document.url}{anchor}"

    def assemble_hits(self, results: List[MatchResult]) -> List[SearchHit]:
        """Resolve results against the store and highlight them.

        Raises:
            KeyError: If a result refers to an unknown document
        """
        hits = []
        current_component = None
        for result in results:
            document, section = self.store.resolve(result.ref)
            hit = SearchHit(
                ref=result.ref,
                document=document,
                section=section,
                highlight=self.highlight_hit(result.metadata, section, document),
                url=self.build_url(document, section),
                score=result.score,
            )

            component_version = self.store.get_component_version(document)
            component_key = f"{document.component}/{document.version}"
            if component_version is not None and component_key != current_component:
                hit.component_header = component_version.title
                if document.version and component_version.display_version:
                    hit.component_header += f" {component_version.display_version}"
                current_component = component_key

            hits.append(hit)
        return hits

    def search_index(
        self,
        query_string: str,
        filter_state: Optional[FilterState] = None,
    ) -> SearchResult:
        """Run the full search pipeline for the text in the search box.

        Never raises: a malformed query or any other failure produces an
        empty result carrying the error.

        Args:
            query_string: Text typed by the user
            filter_state: Facet selection; defaults to the engine's own

        Returns:
            Search result with assembled hits
        """
        start = time.time()
        sequence = next(self._sequence)
        result = SearchResult(query=query_string, sequence=sequence)

        if not query_string or not query_string.strip():
            return result

        filter_state = filter_state or self.filter_state
        try:
            if self.state_store is not None:
                filter_state.save(self.state_store)
            matches = self.search(query_string, filter_state.active_facets())
            result.hits = self.assemble_hits(matches)
            result.tier = self.executor.last_stats.tier
        except QueryParseError as e:
            if self.config.debug:
                logger.debug(f"Invalid search query: {query_string} ({e})")
            result.error = e
        except Exception as e:
            logger.exception(f"Something went wrong while searching for {query_string!r}")
            failure = UnexpectedSearchFailure(f"search failed: {e}")
            failure.__cause__ = e
            result.error = failure

        if self.config.additional_filters:
            result.facets = self.facet_options(filter_state=filter_state)

        result.took_ms = (time.time() - start) * 1000
        return result


__all__ = [
    "IndexLoader",
    "SearchConfig",
    "SearchEngine",
    "SearchHit",
    "SearchResult",
]
