"""Category families for constituents: document structure, lexical, phrase.

Each family is a closed StrEnum.  StrEnum values are the lowercased member
names (``DocumentCategory.LIST_ITEM == "list_item"``), which is also the form
used for the case-insensitive name match in ``equal_to``.

Only ``DocumentCategory`` carries a nesting grammar.  The table below is the
whole of it; ``has_sub_part`` answers one cell:

    document         -> anything except document, list_item
    section          -> paragraph, section
    paragraph        -> sentence, list
    list             -> list_item
    enumerated_list  -> list_item
    sentence         -> ordinary content, list_item
    list_item        -> ordinary content, list_item

"Ordinary content" is any category that is not a DocumentCategory.
"""

from __future__ import annotations

from enum import StrEnum, auto
from typing import Any

__all__ = ["DocumentCategory", "LexicalCategory", "PhraseCategory"]


def _names_match(category: StrEnum, other: Any) -> bool:
    # Same-family comparisons are identity only; anything else matches by name.
    if other is None:
        return False
    if isinstance(other, type(category)):
        return category is other
    return str(category).lower() == str(other).lower()


class DocumentCategory(StrEnum):
    """Structural categories of a document tree."""

    DOCUMENT = auto()
    SECTION = auto()
    PARAGRAPH = auto()
    SENTENCE = auto()
    LIST = auto()
    ENUMERATED_LIST = auto()
    LIST_ITEM = auto()

    def equal_to(self, other: Any) -> bool:
        """Return True for this exact member or any object with the same name."""
        return _names_match(self, other)

    def has_sub_part(self, category: Any) -> bool:
        """Return True if this category may directly contain ``category``.

        Args:
            category: Any category (of any family) or ``None``.

        Returns:
            The cell of the nesting table for (self, category).  ``None`` is
            never a sub part.
        """
        if category is None:
            return False

        if not isinstance(category, DocumentCategory):
            return self in _CONTENT_HOLDERS

        return category in _ACCEPTS[self]


_CONTENT_HOLDERS = frozenset({DocumentCategory.SENTENCE, DocumentCategory.LIST_ITEM})

_ACCEPTS: dict[DocumentCategory, frozenset[DocumentCategory]] = {
    DocumentCategory.DOCUMENT: frozenset(DocumentCategory)
    - {DocumentCategory.DOCUMENT, DocumentCategory.LIST_ITEM},
    DocumentCategory.SECTION: frozenset(
        {DocumentCategory.PARAGRAPH, DocumentCategory.SECTION}
    ),
    DocumentCategory.PARAGRAPH: frozenset(
        {DocumentCategory.SENTENCE, DocumentCategory.LIST}
    ),
    DocumentCategory.LIST: frozenset({DocumentCategory.LIST_ITEM}),
    DocumentCategory.ENUMERATED_LIST: frozenset({DocumentCategory.LIST_ITEM}),
    DocumentCategory.SENTENCE: frozenset({DocumentCategory.LIST_ITEM}),
    DocumentCategory.LIST_ITEM: frozenset({DocumentCategory.LIST_ITEM}),
}


class LexicalCategory(StrEnum):
    """Parts of speech.  ``ANY`` is the wildcard used by lexicon lookups."""

    ANY = auto()
    SYMBOL = auto()
    NOUN = auto()
    ADJECTIVE = auto()
    ADVERB = auto()
    VERB = auto()
    DETERMINER = auto()
    PRONOUN = auto()
    CONJUNCTION = auto()
    PREPOSITION = auto()
    COMPLEMENTISER = auto()
    MODAL = auto()
    AUXILIARY = auto()

    def equal_to(self, other: Any) -> bool:
        """Return True for this exact member or any object with the same name."""
        return _names_match(self, other)

    def has_sub_part(self, category: Any) -> bool:
        """Words have no internal constituents."""
        return False


class PhraseCategory(StrEnum):
    """Syntactic phrase categories, plus canned (pre-realised) text."""

    CLAUSE = auto()
    ADJECTIVE_PHRASE = auto()
    ADVERB_PHRASE = auto()
    NOUN_PHRASE = auto()
    PREPOSITIONAL_PHRASE = auto()
    VERB_PHRASE = auto()
    CANNED_TEXT = auto()

    def equal_to(self, other: Any) -> bool:
        """Return True for this exact member or any object with the same name."""
        return _names_match(self, other)

    def has_sub_part(self, category: Any) -> bool:
        """Phrase structure is computed from features, not a nesting grammar."""
        return False
