"""CachedLexicon: LRU-backed caching proxy for any Lexicon.

Wraps a lexicon and memoises its three primitive queries in memory.  A
repeated query is served from the cache without touching the wrapped
lexicon.  LRU eviction is silent when ``max_size`` is exceeded.

Each ``CachedLexicon`` keeps its own ``LRUCache``; two instances never share
entries.

Cached results are the wrapped lexicon's own WordElement objects.  Words are
mutable, so a stage that changes a looked-up word changes it for every later
lookup as well, exactly as it would without the cache.

Example::

    lexicon = CachedLexicon(slow_lexicon, max_size=512)

    lexicon.get_words("dog")   # hits slow_lexicon
    lexicon.get_words("dog")   # served from memory
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable
from typing import Any

from cachetools import LRUCache

from nlg_framework.categories import LexicalCategory
from nlg_framework.elements.word import WordElement
from nlg_framework.lexicon.base import Lexicon

__all__ = ["CachedLexicon"]

logger = logging.getLogger(__name__)


class CachedLexicon(Lexicon):
    """Caching proxy around another Lexicon.

    Args:
        lexicon:  The lexicon to query on a cache miss.
        max_size: Maximum number of query results held in memory.  Defaults
            to 512.  Must be positive.
    """

    def __init__(self, lexicon: Lexicon, max_size: int = 512) -> None:
        if max_size < 1:
            msg = f"max_size must be positive, got {max_size}"
            raise ValueError(msg)
        self._lexicon = lexicon
        self._cache: LRUCache[Hashable, list[WordElement]] = LRUCache(maxsize=max_size)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def lexicon(self) -> Lexicon:
        """The wrapped lexicon."""
        return self._lexicon

    @property
    def max_size(self) -> int:
        """The maximum number of entries this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of entries stored in the cache."""
        return int(self._cache.currsize)

    def clear(self) -> None:
        """Drop every cached result."""
        self._cache.clear()

    # ------------------------------------------------------------------
    # Lexicon surface
    # ------------------------------------------------------------------

    def get_words(
        self, base_form: str, category: Any = LexicalCategory.ANY
    ) -> list[WordElement]:
        return self._cached(
            ("base", base_form, category),
            lambda: self._lexicon.get_words(base_form, category),
        )

    def get_words_by_id(self, id: str) -> list[WordElement]:
        return self._cached(("id", id), lambda: self._lexicon.get_words_by_id(id))

    def get_words_from_variant(
        self, variant: str, category: Any = LexicalCategory.ANY
    ) -> list[WordElement]:
        return self._cached(
            ("variant", variant, category),
            lambda: self._lexicon.get_words_from_variant(variant, category),
        )

    def create_word(
        self, base_form: str, category: Any = LexicalCategory.ANY
    ) -> WordElement:
        return self._lexicon.create_word(base_form, category)

    def close(self) -> None:
        self._cache.clear()
        self._lexicon.close()

    def _cached(
        self, key: Hashable, query: Callable[[], list[WordElement]]
    ) -> list[WordElement]:
        # Callers get a fresh list so appending to a result never edits the cache.
        if key not in self._cache:
            logger.debug("Lexicon cache miss for %r", key)
            self._cache[key] = list(query())
        return list(self._cache[key])
