"""DocSearch Document Store - Stored Documents for Result Assembly.

The store holds the original page content the index was built from. It
is loaded once with the index and only read afterwards: results refer to
documents by id and the store supplies the text to highlight.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)

REF_SEPARATOR = "-"


@dataclass(frozen=True)
class Section:
    """A subsection of a page with its own anchor.

    Attributes:
        id: Section identifier, unique within the page
        text: Section title
        hash: URL fragment of the section anchor
    """

    id: str
    text: str
    hash: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Section":
        """Create from dictionary."""
        return cls(
            id=str(data["id"]),
            text=data.get("text", ""),
            hash=data.get("hash", ""),
        )


@dataclass(frozen=True)
class Document:
    """A documentation page.

    Attributes:
        id: Document identifier
        title: Page title
        text: Page body text
        keyword: Page keywords, if any
        component: Documentation component name
        version: Component version
        url: Page URL relative to the site root
        titles: Section titles of the page
    """

    id: str
    title: str = ""
    text: str = ""
    keyword: Optional[str] = None
    component: Optional[str] = None
    version: Optional[str] = None
    url: str = ""
    titles: List[Section] = field(default_factory=list)

    def get(self, field_name: str, default: Any = None) -> Any:
        """Get field value, ``default`` when the field is absent or unset."""
        if field_name not in _DOCUMENT_FIELDS:
            return default
        value = getattr(self, field_name)
        return default if value is None else value

    def has(self, field_name: str) -> bool:
        return self.get(field_name) is not None

    def get_section(self, section_id: str) -> Optional[Section]:
        """Find a section by id. Ids are compared as strings."""
        for section in self.titles:
            if section.id == str(section_id):
                return section
        return None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Document":
        """Create from dictionary."""
        version = data.get("version")
        return cls(
            id=str(data["id"]),
            title=data.get("title", ""),
            text=data.get("text", ""),
            keyword=data.get("keyword"),
            component=data.get("component"),
            version=str(version) if version is not None else None,
            url=data.get("url", ""),
            titles=[Section.from_dict(t) for t in data.get("titles", [])],
        )


_DOCUMENT_FIELDS = frozenset(f.name for f in fields(Document))


@dataclass(frozen=True)
class ComponentVersion:
    """Display information for a component version."""

    title: str
    display_version: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ComponentVersion":
        return cls(
            title=data.get("title", ""),
            display_version=data.get("displayVersion", data.get("display_version", "")) or "",
        )


def split_ref(ref: str) -> List[str]:
    """Split a result ref into ``[document_id]`` or ``[document_id, section_id]``."""
    return ref.split(REF_SEPARATOR)


class DocumentStore:
    """Read-only lookup of documents and component versions."""

    def __init__(
        self,
        documents: Optional[Dict[str, Document]] = None,
        component_versions: Optional[Dict[str, ComponentVersion]] = None,
    ):
        """Initialize store.

        Args:
            documents: Documents by id
            component_versions: Display info keyed by ``component/version``
        """
        self.documents: Dict[str, Document] = documents or {}
        self.component_versions: Dict[str, ComponentVersion] = component_versions or {}

    def __len__(self) -> int:
        return len(self.documents)

    def __contains__(self, doc_id: str) -> bool:
        return doc_id in self.documents

    def get_document(self, doc_id: str) -> Optional[Document]:
        return self.documents.get(doc_id)

    def resolve(self, ref: str) -> Tuple[Document, Optional[Section]]:
        """Resolve a result ref to ``(document, section)``.

        Raises:
            KeyError: If the document is not in the store
        """
        ids = split_ref(ref)
        document = self.documents[ids[0]]
        section = document.get_section(ids[1]) if len(ids) > 1 else None
        return document, section

    def get_component_version(self, document: Document) -> Optional[ComponentVersion]:
        """Look up display info for the document's component version."""
        return self.component_versions.get(f"{document.component}/{document.version}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DocumentStore":
        """Create from the serialized store.

        Args:
            data: ``{"documents": {...}, "componentVersions": {...}}``
        """
        documents = {
            str(doc_id): Document.from_dict({"id": doc_id, **doc})
            for doc_id, doc in data.get("documents", {}).items()
        }
        component_versions = {
            key: ComponentVersion.from_dict(value)
            for key, value in data.get("componentVersions", {}).items()
        }
        logger.debug(
            f"Loaded store: {len(documents)} documents, "
            f"{len(component_versions)} component versions"
        )
        return cls(documents=documents, component_versions=component_versions)


__all__ = [
    "ComponentVersion",
    "Document",
    "DocumentStore",
    "REF_SEPARATOR",
    "Section",
    "split_ref",
]
