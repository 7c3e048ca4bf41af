"""Lexicon interface and composable lexicon wrappers.

Concrete stores (XML, database) live outside this package; they subclass
``Lexicon`` and provide the three primitive queries.
"""

from __future__ import annotations

from nlg_framework.lexicon.base import Lexicon
from nlg_framework.lexicon.cache import CachedLexicon
from nlg_framework.lexicon.multiple import MultipleLexicon

__all__: list[str] = ["CachedLexicon", "Lexicon", "MultipleLexicon"]
