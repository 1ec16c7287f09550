"""DocSearch Hit Highlighting.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from docsearch_core.analyzers.tokenizers import (
    DEFAULT_SEPARATOR,
    SeparatorLike,
    get_term_positions,
)
from docsearch_core.highlight.segmenter import Segment, build_highlighted_text
from docsearch_core.index.base import MatchMetadata
from docsearch_core.index.document import Document, Section


@dataclass
class HitHighlight:
    """Highlighted segments for each displayed field of a hit.

    A field that is absent from the document (no section, no keywords)
    gets an empty list.
    """

    page_title: List[Segment] = field(default_factory=list)
    section_title: List[Segment] = field(default_factory=list)
    page_content: List[Segment] = field(default_factory=list)
    page_keyword: List[Segment] = field(default_factory=list)

    @property
    def has_keyword_match(self) -> bool:
        """True when the keyword field got at least one highlight."""
        return len(self.page_keyword) > 1 or any(s.is_mark for s in self.page_keyword)

    def to_dict(self) -> Dict[str, List[Dict[str, Any]]]:
        """Convert to dictionary."""
        return {
            "pageTitleNodes": [s.to_dict() for s in self.page_title],
            "sectionTitleNodes": [s.to_dict() for s in self.section_title],
            "pageContentNodes": [s.to_dict() for s in self.page_content],
            "pageKeywordNodes": [s.to_dict() for s in self.page_keyword],
        }


def group_terms_by_field(metadata: MatchMetadata) -> Dict[str, List[str]]:
    """Invert ``{term: {field: ...}}`` into ``{field: [term, ...]}``."""
    terms: Dict[str, List[str]] = {}
    for term, matched_fields in metadata.items():
        for field_name in matched_fields:
            terms.setdefault(field_name, []).append(term)
    return terms


def highlight_field(
    text: Optional[str],
    terms: List[str],
    snippet_length: int,
    separator: SeparatorLike = DEFAULT_SEPARATOR,
) -> List[Segment]:
    """Highlight ``terms`` in one field; empty list when the field is absent."""
    if text is None:
        return []
    positions = get_term_positions(text, terms, separator)
    return build_highlighted_text(text, positions, snippet_length)


def highlight_hit(
    metadata: MatchMetadata,
    section: Optional[Section],
    document: Document,
    snippet_length: int = 100,
    separator: SeparatorLike = DEFAULT_SEPARATOR,
) -> HitHighlight:
    """Compute highlighted segments for a matched document.

    Terms that matched the ``title`` field highlight both the page title
    and the section title; ``text`` terms highlight the body and
    ``keyword`` terms the keywords.

    Args:
        metadata: Per-term, per-field match metadata from the index
        section: Matched section, if the hit is a section
        document: Matched document
        snippet_length: Context characters around the first match
        separator: The index tokenizer separator

    Returns:
        Highlight segments for the four displayed fields
    """
    terms = group_terms_by_field(metadata)
    title_terms = terms.get("title", [])

    page_title = build_highlighted_text(
        document.title,
        get_term_positions(document.title, title_terms, separator),
        snippet_length,
    )
    return HitHighlight(
        page_title=page_title,
        section_title=highlight_field(
            section.text if section else None, title_terms, snippet_length, separator
        ),
        page_content=highlight_field(
            document.text, terms.get("text", []), snippet_length, separator
        ),
        page_keyword=highlight_field(
            document.keyword, terms.get("keyword", []), snippet_length, separator
        ),
    )


__all__ = [
    "HitHighlight",
    "group_terms_by_field",
    "highlight_field",
    "highlight_hit",
]
