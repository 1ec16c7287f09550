"""Shared pytest fixtures."""

from __future__ import annotations

from typing import List

import pytest

from docsearch_core.index.base import MatchResult, SearchIndex
from docsearch_core.index.document import DocumentStore
from docsearch_core.index.memory import MemoryIndex
from docsearch_core.query.clause import Clause

STORE_DATA = {
    "documents": {
        "1": {
            "id": 1,
            "title": "Getting Started",
            "text": "The quick brown fox jumps over the lazy dog",
            "keyword": "install, setup",
            "component": "a",
            "version": "1",
            "url": "/a/1/start.html",
            "titles": [{"id": 1, "text": "Install the quick tool", "hash": "install"}],
        },
        "2": {
            "id": 2,
            "title": "Configuration Reference",
            "text": "Configure the server with environment variables",
            "component": "a",
            "version": "2",
            "url": "/a/2/config.html",
            "titles": [],
        },
        "3": {
            "id": 3,
            "title": "Release Notes",
            "text": "Bug fixes and performance improvements for the fox release",
            "component": "b",
            "version": "9",
            "url": "/b/9/notes.html",
        },
    },
    "componentVersions": {
        "a/1": {"title": "Component A", "displayVersion": "1.0"},
        "a/2": {"title": "Component A", "displayVersion": "2.0"},
        "b/9": {"title": "Component B", "displayVersion": ""},
    },
}


class RecordingIndex(SearchIndex):
    """Wraps an index and records every executed clause list."""

    def __init__(self, inner: SearchIndex):
        self.inner = inner
        self.separator = inner.separator
        self.calls: List[List[Clause]] = []

    def parse(self, query: str) -> List[Clause]:
        return self.inner.parse(query)

    def execute(self, clauses: List[Clause]) -> List[MatchResult]:
        self.calls.append(list(clauses))
        return self.inner.execute(clauses)


@pytest.fixture
def store() -> DocumentStore:
    return DocumentStore.from_dict(STORE_DATA)


@pytest.fixture
def index(store: DocumentStore) -> MemoryIndex:
    return MemoryIndex.from_store(store)


@pytest.fixture
def recording_index(index: MemoryIndex) -> RecordingIndex:
    return RecordingIndex(index)


@pytest.fixture
def store_data() -> dict:
    return STORE_DATA
