"""CoordinatedPhraseElement: two or more constituents joined by a conjunction."""

from __future__ import annotations

from typing import Any

from nlg_framework.categories import PhraseCategory
from nlg_framework.elements.base import NLGElement
from nlg_framework.elements.string import StringElement
from nlg_framework.features.names import Feature, InternalFeature
from nlg_framework.features.values import NumberAgreement

__all__ = ["CoordinatedPhraseElement"]

# Conjunctions that make a multi-coordinate phrase plural ("the dog and the cat are").
PLURAL_COORDINATORS = frozenset({"and"})


class CoordinatedPhraseElement(NLGElement):
    """Coordinates stored under ``coordinates``; conjunction defaults to "and".

    The node has no category of its own.  Its children are the coordinates;
    modifiers and complements shared by all coordinates are kept in the usual
    features for the coordination stage to distribute.

    Example::

        coord = CoordinatedPhraseElement("apples", "pears")
        coord.conjunction              # "and"
        [str(c) for c in coord.children]   # ["apples", "pears"]
    """

    def __init__(self, *coordinates: NLGElement | str) -> None:
        super().__init__()
        for coordinate in coordinates:
            self.add_coordinate(coordinate)
        self.set_feature(Feature.CONJUNCTION, "and")

    @property
    def children(self) -> list[NLGElement]:
        return self.get_feature_as_element_list(InternalFeature.COORDINATES)

    def add_coordinate(self, new_coordinate: Any) -> None:
        """Append a coordinate.

        A clause joining existing coordinates gets ``suppressed_complementiser``
        (only the first clause keeps its "that").  A string becomes a
        StringElement with the same flag.  Other values are ignored.
        """
        coordinates = self.get_feature_as_element_list(InternalFeature.COORDINATES)
        if isinstance(new_coordinate, NLGElement):
            if new_coordinate.is_a(PhraseCategory.CLAUSE) and coordinates:
                new_coordinate.set_feature(Feature.SUPPRESSED_COMPLEMENTISER, True)
            coordinates.append(new_coordinate)
        elif isinstance(new_coordinate, str):
            element = StringElement(new_coordinate)
            element.set_feature(Feature.SUPPRESSED_COMPLEMENTISER, True)
            coordinates.append(element)
        self.set_feature(InternalFeature.COORDINATES, coordinates)

    def clear_coordinates(self) -> None:
        self.remove_feature(InternalFeature.COORDINATES)

    @property
    def last_coordinate(self) -> NLGElement | None:
        coordinates = self.children
        return coordinates[-1] if coordinates else None

    @property
    def conjunction(self) -> str | None:
        return self.get_feature_as_string(Feature.CONJUNCTION)

    @conjunction.setter
    def conjunction(self, conjunction: str | None) -> None:
        self.set_feature(Feature.CONJUNCTION, conjunction)

    # ------------------------------------------------------------------
    # Shared modifiers and complements
    # ------------------------------------------------------------------

    @property
    def pre_modifiers(self) -> list[NLGElement]:
        return self.get_feature_as_element_list(InternalFeature.PREMODIFIERS)

    @property
    def post_modifiers(self) -> list[NLGElement]:
        return self.get_feature_as_element_list(InternalFeature.POSTMODIFIERS)

    @property
    def complements(self) -> list[NLGElement]:
        return self.get_feature_as_element_list(InternalFeature.COMPLEMENTS)

    def add_pre_modifier(self, new_pre_modifier: NLGElement | str) -> None:
        self._append(InternalFeature.PREMODIFIERS, new_pre_modifier)

    def add_post_modifier(self, new_post_modifier: NLGElement | str) -> None:
        self._append(InternalFeature.POSTMODIFIERS, new_post_modifier)

    def add_complement(self, new_complement: NLGElement | str) -> None:
        self._append(InternalFeature.COMPLEMENTS, new_complement)

    def _append(self, name: str, value: NLGElement | str) -> None:
        items = self.get_feature_as_element_list(name)
        items.append(value if isinstance(value, NLGElement) else StringElement(value))
        self.set_feature(name, items)

    def check_if_plural(self) -> bool:
        """True if the coordination agrees as a plural.

        A single coordinate decides by its own number; several coordinates are
        plural when the conjunction is a plural coordinator.
        """
        coordinates = self.children
        if len(coordinates) == 1:
            return coordinates[0].get_feature(Feature.NUMBER) == NumberAgreement.PLURAL
        return self.conjunction in PLURAL_COORDINATORS

    def tree_header(self) -> str:
        return f"CoordinatedPhraseElement: conjunction={self.conjunction}"
