"""Constituent node kinds of the realisation tree."""

from __future__ import annotations

from nlg_framework.elements.base import NLGElement, format_features
from nlg_framework.elements.coordinated import CoordinatedPhraseElement
from nlg_framework.elements.document import DocumentElement
from nlg_framework.elements.linearization import SLOT_ORDER, linearize
from nlg_framework.elements.list_element import ListElement
from nlg_framework.elements.phrase import PhraseElement
from nlg_framework.elements.string import StringElement
from nlg_framework.elements.word import InflectedWordElement, WordElement

__all__: list[str] = [
    "SLOT_ORDER",
    "CoordinatedPhraseElement",
    "DocumentElement",
    "InflectedWordElement",
    "ListElement",
    "NLGElement",
    "PhraseElement",
    "StringElement",
    "WordElement",
    "format_features",
    "linearize",
]
