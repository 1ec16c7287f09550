"""DocSearch Facet Filters - Facet Predicate Compilation.

A facet filter is a string ``field1:value1;field2:value2``. Every clause
of one filter must match (AND), while a document passes a set of active
filters if any one of them matches (OR). With no active filters every
document passes.

Values are split on the first ``:`` and cannot contain ``;``; there is no
escaping.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Iterable, List, Optional, Sequence, Tuple

if TYPE_CHECKING:
    from docsearch_core.index.document import Document

Predicate = Callable[["Document"], bool]

CLAUSE_SEPARATOR = ";"
FIELD_SEPARATOR = ":"


def parse_facet_filter(filter_string: str) -> List[Tuple[str, Optional[str]]]:
    """Split a filter string into ``(field, value)`` clauses.

    Each clause is split on its first ``:``. A clause without one has a
    ``None`` value and can never match.
    """
    clauses = []
    for clause in filter_string.split(CLAUSE_SEPARATOR):
        field_name, sep, value = clause.partition(FIELD_SEPARATOR)
        clauses.append((field_name, value if sep else None))
    return clauses


def compile_facet_filter(filter_string: str) -> Predicate:
    """Compile one facet filter into a predicate over documents.

    Args:
        filter_string: ``field:value`` clauses joined with ``;``

    Returns:
        Predicate true iff every clause's field exists on the document
        and equals its value (case-sensitive)
    """
    clauses = parse_facet_filter(filter_string)

    def predicate(document: Document) -> bool:
        return all(
            document.has(field_name) and document.get(field_name) == value
            for field_name, value in clauses
        )

    return predicate


def combine_predicates(predicates: Sequence[Predicate]) -> Predicate:
    """OR predicates together; an empty sequence accepts everything."""
    predicates = list(predicates)
    if not predicates:
        return lambda document: True
    return lambda document: any(predicate(document) for predicate in predicates)


def compile_facet_filters(filter_strings: Iterable[str]) -> Predicate:
    """Compile and combine a set of active facet filters."""
    return combine_predicates([compile_facet_filter(f) for f in filter_strings])


__all__ = [
    "Predicate",
    "combine_predicates",
    "compile_facet_filter",
    "compile_facet_filters",
    "parse_facet_filter",
]
