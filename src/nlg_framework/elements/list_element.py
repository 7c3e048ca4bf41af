"""ListElement: an ordered, semantically inert group of constituents."""

from __future__ import annotations

from collections.abc import Iterable

from nlg_framework.elements.base import NLGElement, format_features
from nlg_framework.features.names import InternalFeature

__all__ = ["ListElement"]


class ListElement(NLGElement):
    """Constituents kept under the ``components`` feature.

    Stages use lists to hand back "several things where one was expected",
    e.g. a clause turned into the sequence of its inflected words.  The list
    has no category and imposes no grammar.
    """

    def __init__(
        self, components: NLGElement | Iterable[NLGElement] | None = None
    ) -> None:
        super().__init__()
        if isinstance(components, NLGElement):
            self.add_component(components)
        elif components is not None:
            self.add_components(components)

    @property
    def children(self) -> list[NLGElement]:
        return self.get_feature_as_element_list(InternalFeature.COMPONENTS)

    def add_component(self, new_component: NLGElement | None) -> None:
        if new_component is None:
            return
        components = self.children
        components.append(new_component)
        self.set_feature(InternalFeature.COMPONENTS, components)

    def add_components(self, new_components: Iterable[NLGElement]) -> None:
        components = self.children
        components.extend(
            component for component in new_components if component is not None
        )
        self.set_feature(InternalFeature.COMPONENTS, components)

    def set_components(self, new_components: Iterable[NLGElement]) -> None:
        self.set_feature(InternalFeature.COMPONENTS, list(new_components))

    @property
    def size(self) -> int:
        return len(self.children)

    def __len__(self) -> int:
        return self.size

    @property
    def first(self) -> NLGElement | None:
        components = self.children
        return components[0] if components else None

    def tree_header(self) -> str:
        return f"ListElement: features={format_features(self.features)}"

    def __str__(self) -> str:
        return "[" + ", ".join(str(child) for child in self.children) + "]"
