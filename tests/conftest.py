"""Shared fixtures: a small in-memory lexicon used by the lexicon and pipeline tests."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import pytest

from nlg_framework.categories import LexicalCategory
from nlg_framework.elements.word import WordElement
from nlg_framework.lexicon.base import Lexicon


class DictLexicon(Lexicon):
    """Lexicon over a plain list of words, recording every primitive query.

    Base forms match case-insensitively, like some database-backed stores.
    A word's variants are the string values of its features.
    """

    def __init__(self, words: Iterable[WordElement] = ()) -> None:
        self.words = list(words)
        self.calls: list[tuple[Any, ...]] = []
        self.closed = False

    @staticmethod
    def _category_matches(word: WordElement, category: Any) -> bool:
        return category is LexicalCategory.ANY or word.category is category

    def get_words(
        self, base_form: str, category: Any = LexicalCategory.ANY
    ) -> list[WordElement]:
        self.calls.append(("base", base_form, category))
        return [
            word
            for word in self.words
            if word.base_form is not None
            and word.base_form.lower() == base_form.lower()
            and self._category_matches(word, category)
        ]

    def get_words_by_id(self, id: str) -> list[WordElement]:
        self.calls.append(("id", id))
        return [word for word in self.words if word.id == id]

    def get_words_from_variant(
        self, variant: str, category: Any = LexicalCategory.ANY
    ) -> list[WordElement]:
        self.calls.append(("variant", variant, category))
        return [
            word
            for word in self.words
            if variant in word.features.values()
            and self._category_matches(word, category)
        ]

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def make_lexicon() -> Any:
    """Return a factory ``make_lexicon(*words) -> DictLexicon``."""

    def _make(*words: WordElement) -> DictLexicon:
        return DictLexicon(words)

    return _make


@pytest.fixture
def dog() -> WordElement:
    """Noun 'dog' with id E0001 and plural form 'dogs'."""
    word = WordElement("dog", LexicalCategory.NOUN, "E0001")
    word.set_feature("plural", "dogs")
    return word
