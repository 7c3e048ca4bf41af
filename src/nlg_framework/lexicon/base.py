"""Lexicon: the shape every word store must provide.

A concrete lexicon implements three primitive queries, each returning a
(possibly empty) list of WordElements:

- ``get_words(base_form, category)``
- ``get_words_by_id(id)``
- ``get_words_from_variant(variant, category)``

Everything else (single-word getters, ``has_*`` checks and the
``lookup_word`` cascade) is derived from those three.  Subclasses may
override the derived methods for speed but never have to.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from nlg_framework.categories import LexicalCategory
from nlg_framework.elements.word import WordElement

__all__ = ["Lexicon"]

logger = logging.getLogger(__name__)


class Lexicon(ABC):
    """Abstract word store.

    Missing words are never an error: the single-word getters fall back to a
    fresh WordElement built from the query, so callers always get a word.
    """

    def create_word(
        self, base_form: str, category: Any = LexicalCategory.ANY
    ) -> WordElement:
        """Word handed out when the lexicon has no entry for ``base_form``."""
        return WordElement(base_form, category)

    # ------------------------------------------------------------------
    # Primitive queries
    # ------------------------------------------------------------------

    @abstractmethod
    def get_words(
        self, base_form: str, category: Any = LexicalCategory.ANY
    ) -> list[WordElement]:
        """Words with this base form; ``LexicalCategory.ANY`` matches every category."""

    @abstractmethod
    def get_words_by_id(self, id: str) -> list[WordElement]:
        """Words carrying this lexicon id."""

    @abstractmethod
    def get_words_from_variant(
        self, variant: str, category: Any = LexicalCategory.ANY
    ) -> list[WordElement]:
        """Words that have ``variant`` as an inflected or spelling variant."""

    # ------------------------------------------------------------------
    # Derived lookups
    # ------------------------------------------------------------------

    def lookup_word(
        self, base_form: str, category: Any = LexicalCategory.ANY
    ) -> WordElement:
        """Best-effort lookup.

        Tries, in order: a word with this base form, a word with this
        variant, a word with this id.  Falls back to ``create_word``.
        """
        if self.has_word(base_form, category):
            return self.get_word(base_form, category)
        if self.has_word_from_variant(base_form, category):
            return self.get_word_from_variant(base_form, category)
        if self.has_word_by_id(base_form):
            return self.get_word_by_id(base_form)
        logger.debug("No lexicon entry for %r (%s); creating one", base_form, category)
        return self.create_word(base_form, category)

    def get_word(
        self, base_form: str, category: Any = LexicalCategory.ANY
    ) -> WordElement:
        """One word with this base form.

        Some stores match case-insensitively, so an exact base-form match is
        preferred over the first result.
        """
        words = self.get_words(base_form, category)
        if not words:
            return self.create_word(base_form, category)
        for word in words:
            if word.base_form == base_form:
                return word
        return words[0]

    def has_word(self, base_form: str, category: Any = LexicalCategory.ANY) -> bool:
        return bool(self.get_words(base_form, category))

    def get_word_by_id(self, id: str) -> WordElement:
        words = self.get_words_by_id(id)
        return words[0] if words else self.create_word(id)

    def has_word_by_id(self, id: str) -> bool:
        return bool(self.get_words_by_id(id))

    def get_word_from_variant(
        self, variant: str, category: Any = LexicalCategory.ANY
    ) -> WordElement:
        words = self.get_words_from_variant(variant, category)
        return words[0] if words else self.create_word(variant, category)

    def has_word_from_variant(
        self, variant: str, category: Any = LexicalCategory.ANY
    ) -> bool:
        return bool(self.get_words_from_variant(variant, category))

    def close(self) -> None:
        """Release any resources held by the store.  The default holds none."""
