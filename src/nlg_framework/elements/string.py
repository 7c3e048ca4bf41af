"""StringElement: a leaf holding literal, already-realised text."""

from __future__ import annotations

from nlg_framework.categories import PhraseCategory
from nlg_framework.elements.base import NLGElement, format_features

__all__ = ["StringElement"]


class StringElement(NLGElement):
    """Canned text.  Its content is its realisation; it never has children.

    Any getter that expects a node and finds a plain string wraps it in one of
    these, so stages can store text wherever a constituent is allowed.
    """

    def __init__(self, value: str | None) -> None:
        super().__init__(PhraseCategory.CANNED_TEXT)
        self.realisation = value

    def tree_header(self) -> str:
        return (
            f'StringElement: content="{self.realisation}", '
            f"features={format_features(self.features)}"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StringElement):
            return False if isinstance(other, NLGElement) else NotImplemented
        return super().__eq__(other) and self.realisation == other.realisation

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.realisation
