"""nlg-framework - constituent trees shared by natural-language realisation stages."""

from __future__ import annotations

from nlg_framework.categories import DocumentCategory, LexicalCategory, PhraseCategory
from nlg_framework.config import DEFAULT_PRINT_CONFIG, TreePrintConfig
from nlg_framework.diff import TreeComparison, compare_trees
from nlg_framework.elements import (
    CoordinatedPhraseElement,
    DocumentElement,
    InflectedWordElement,
    ListElement,
    NLGElement,
    PhraseElement,
    StringElement,
    WordElement,
)
from nlg_framework.lexicon import CachedLexicon, Lexicon, MultipleLexicon
from nlg_framework.pipeline import NLGModule
from nlg_framework.protocols import ElementCategory

__version__: str = "0.1.0"
__all__: list[str] = [
    "DEFAULT_PRINT_CONFIG",
    "CachedLexicon",
    "CoordinatedPhraseElement",
    "DocumentCategory",
    "DocumentElement",
    "ElementCategory",
    "InflectedWordElement",
    "LexicalCategory",
    "Lexicon",
    "ListElement",
    "MultipleLexicon",
    "NLGElement",
    "NLGModule",
    "PhraseCategory",
    "PhraseElement",
    "StringElement",
    "TreeComparison",
    "TreePrintConfig",
    "WordElement",
    "compare_trees",
]
