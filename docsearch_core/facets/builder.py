"""DocSearch Facet Builder - Component Filter Options.

Turns site component metadata into the options of the component filter
panel, reflecting the current filter selection.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from docsearch_core.facets.state import FilterState, component_filter

ALL_VERSIONS_LABEL = "All (*)"


@dataclass
class FacetOption:
    """A selectable facet value.

    Attributes:
        label: Displayed label
        facet_filter: Facet filter string applied when selected
        version: Component version, ``None`` for the all-versions option
        selected: Whether this is the selected version
    """

    label: str
    facet_filter: str
    version: Optional[str] = None
    selected: bool = False


@dataclass
class Facet:
    """Filter options for one component.

    Attributes:
        name: Component name
        title: Component display title
        checked: Whether the component filter is active
        options: All-versions option followed by one option per version
    """

    name: str
    title: str
    checked: bool = False
    options: List[FacetOption] = field(default_factory=list)


class FacetBuilder:
    """Builds the component filter panel from site metadata."""

    def __init__(self, filter_state: Optional[FilterState] = None):
        """Initialize builder.

        Args:
            filter_state: Selection the options reflect
        """
        self.filter_state = filter_state or FilterState()

    def build_facet(self, component: Dict[str, Any]) -> Facet:
        """Build the facet for one component.

        Args:
            component: ``{name, title, versions: [{version, displayVersion}]}``

        Returns:
            Facet with its options
        """
        name = component["name"]
        selected_version = self.filter_state.component_version.get(name)

        options = [FacetOption(label=ALL_VERSIONS_LABEL, facet_filter=component_filter(name))]
        for version_data in component.get("versions", []):
            version = str(version_data["version"])
            options.append(FacetOption(
                label=version_data.get("displayVersion") or version,
                facet_filter=component_filter(name, version),
                version=version,
                selected=version == selected_version,
            ))

        return Facet(
            name=name,
            title=component.get("title", name),
            checked=bool(self.filter_state.components.get(name)),
            options=options,
        )

    def build(self, components: List[Dict[str, Any]]) -> List[Facet]:
        """Build facets for every component, in metadata order."""
        return [self.build_facet(component) for component in components]


def build_facet_options(
    components: List[Dict[str, Any]],
    filter_state: Optional[FilterState] = None,
) -> List[Facet]:
    """Build component facets from ``[{name, title, versions}]`` metadata."""
    return FacetBuilder(filter_state).build(components)


__all__ = [
    "ALL_VERSIONS_LABEL",
    "Facet",
    "FacetBuilder",
    "FacetOption",
    "build_facet_options",
]
