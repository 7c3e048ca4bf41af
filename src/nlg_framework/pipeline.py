"""NLGModule: base class for realisation pipeline stages.

A stage (syntax, morphology, orthography, ...) takes a tree and returns a
tree of the same abstract shape, often substituting different node kinds on
the way.  Stages talk to each other only through conventional feature names
on the nodes; the only shared long-lived object is the lexicon.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from nlg_framework.elements.base import NLGElement
from nlg_framework.lexicon.base import Lexicon

__all__ = ["NLGModule"]


class NLGModule(ABC):
    """One stage of the realisation pipeline.

    Example::

        class Upcase(NLGModule):
            def initialise(self) -> None:
                pass

            def realise(self, element):
                if element is not None:
                    element.realisation = element.realisation.upper()
                return element
    """

    def __init__(self, lexicon: Lexicon | None = None) -> None:
        self.lexicon = lexicon

    @abstractmethod
    def initialise(self) -> None:
        """Prepare the stage for use (load rules, warm caches)."""

    @abstractmethod
    def realise(self, element: NLGElement | None) -> NLGElement | None:
        """Transform one subtree and return its replacement."""

    def realise_list(
        self, elements: Iterable[NLGElement | None] | None
    ) -> list[NLGElement]:
        """Realise each element in order, dropping those realised to None."""
        if elements is None:
            return []
        realised = (self.realise(element) for element in elements)
        return [element for element in realised if element is not None]
