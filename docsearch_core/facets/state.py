"""DocSearch Filter State - User Facet Selection.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List

from docsearch_core.storage.backend import KeyValueStore

logger = logging.getLogger(__name__)

COMPONENTS_KEY = "filter-components"
COMPONENT_VERSION_KEY = "filter-components-version"


def component_filter(component: str, version: str = "") -> str:
    """Build the facet filter string for a component, optionally pinned to a version."""
    if version:
        return f"component:{component};version:{version}"
    return f"component:{component}"


@dataclass
class FilterState:
    """Facet selection made in the search UI.

    Attributes:
        facets: Facet filter strings selected directly
        components: Component name -> checked
        component_version: Component name -> selected version
    """

    facets: List[str] = field(default_factory=list)
    components: Dict[str, bool] = field(default_factory=dict)
    component_version: Dict[str, str] = field(default_factory=dict)

    def select_component(self, name: str, checked: bool = True) -> None:
        self.components[name] = checked

    def select_version(self, name: str, version: str) -> None:
        self.component_version[name] = version

    def active_facets(self) -> List[str]:
        """Facet filter strings currently in effect.

        Explicit facets come first, followed by one filter per checked
        component (pinned to its selected version when there is one).
        Duplicates are dropped.
        """
        active = list(self.facets)
        for name, checked in self.components.items():
            if checked:
                active.append(component_filter(name, self.component_version.get(name, "")))
        return list(dict.fromkeys(active))

    def save(self, store: KeyValueStore) -> None:
        """Persist component selections."""
        store.set(COMPONENTS_KEY, json.dumps(self.components))
        store.set(COMPONENT_VERSION_KEY, json.dumps(self.component_version))

    @classmethod
    def restore(cls, store: KeyValueStore) -> "FilterState":
        """Load component selections, starting empty if they are missing or invalid."""
        try:
            components = _load_mapping(store.get(COMPONENTS_KEY))
            component_version = _load_mapping(store.get(COMPONENT_VERSION_KEY))
        except (TypeError, ValueError) as e:
            logger.debug(f"Discarding stored filter state: {e}")
            return cls()
        return cls(components=components, component_version=component_version)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "facets": list(self.facets),
            "components": dict(self.components),
            "componentVersion": dict(self.component_version),
        }


def _load_mapping(raw: Any) -> Dict[str, Any]:
    if raw is None:
        return {}
    value = json.loads(raw)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise TypeError(f"expected a JSON object, got {type(value).__name__}")
    return value


__all__ = [
    "COMPONENTS_KEY",
    "COMPONENT_VERSION_KEY",
    "FilterState",
    "component_filter",
]
