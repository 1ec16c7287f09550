"""DocSearch Faceted Filtering Components.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from docsearch_core.facets.filters import (
    Predicate,
    combine_predicates,
    compile_facet_filter,
    compile_facet_filters,
    parse_facet_filter,
)
from docsearch_core.facets.state import (
    FilterState,
    component_filter,
)
from docsearch_core.facets.builder import (
    Facet,
    FacetBuilder,
    FacetOption,
    build_facet_options,
)

__all__ = [
    "Predicate",
    "combine_predicates",
    "compile_facet_filter",
    "compile_facet_filters",
    "parse_facet_filter",
    "FilterState",
    "component_filter",
    "Facet",
    "FacetBuilder",
    "FacetOption",
    "build_facet_options",
]
