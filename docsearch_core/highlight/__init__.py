"""DocSearch Highlighting Components.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from docsearch_core.highlight.segmenter import (
    ELLIPSIS,
    Segment,
    SegmentType,
    build_highlighted_text,
    compute_window,
)
from docsearch_core.highlight.hit import (
    HitHighlight,
    group_terms_by_field,
    highlight_field,
    highlight_hit,
)

__all__ = [
    "ELLIPSIS",
    "Segment",
    "SegmentType",
    "build_highlighted_text",
    "compute_window",
    "HitHighlight",
    "group_terms_by_field",
    "highlight_field",
    "highlight_hit",
]
