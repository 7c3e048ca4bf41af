"""MultipleLexicon: several lexicons searched in order."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from nlg_framework.categories import LexicalCategory
from nlg_framework.elements.word import WordElement
from nlg_framework.lexicon.base import Lexicon

__all__ = ["MultipleLexicon"]


class MultipleLexicon(Lexicon):
    """Chain of lexicons.

    By default a query stops at the first lexicon that returns anything.  With
    ``always_search_all`` the results of every lexicon are concatenated, in
    search order.

    Example::

        lexicon = MultipleLexicon(domain_terms, general_english)
        lexicon.lookup_word("ablation")   # found in domain_terms first
    """

    def __init__(self, *lexicons: Lexicon, always_search_all: bool = False) -> None:
        self._lexicons: list[Lexicon] = list(lexicons)
        self.always_search_all = always_search_all

    @property
    def lexicons(self) -> list[Lexicon]:
        """The lexicons in search order (a copy)."""
        return list(self._lexicons)

    def add_initial_lexicon(self, lexicon: Lexicon) -> None:
        """Search ``lexicon`` before all others."""
        self._lexicons.insert(0, lexicon)

    def add_final_lexicon(self, lexicon: Lexicon) -> None:
        """Search ``lexicon`` after all others."""
        self._lexicons.append(lexicon)

    def get_words(
        self, base_form: str, category: Any = LexicalCategory.ANY
    ) -> list[WordElement]:
        return self._search(lambda lexicon: lexicon.get_words(base_form, category))

    def get_words_by_id(self, id: str) -> list[WordElement]:
        return self._search(lambda lexicon: lexicon.get_words_by_id(id))

    def get_words_from_variant(
        self, variant: str, category: Any = LexicalCategory.ANY
    ) -> list[WordElement]:
        return self._search(
            lambda lexicon: lexicon.get_words_from_variant(variant, category)
        )

    def _search(
        self, query: Callable[[Lexicon], list[WordElement]]
    ) -> list[WordElement]:
        results: list[WordElement] = []
        for lexicon in self._lexicons:
            found = query(lexicon)
            if found:
                results.extend(found)
                if not self.always_search_all:
                    break
        return results

    def close(self) -> None:
        for lexicon in self._lexicons:
            lexicon.close()
