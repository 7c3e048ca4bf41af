"""Tests for the canonical constituent order of each phrase category."""

from __future__ import annotations

from nlg_framework.categories import DocumentCategory, PhraseCategory
from nlg_framework.elements.base import NLGElement
from nlg_framework.elements.linearization import SLOT_ORDER, linearize
from nlg_framework.elements.phrase import PhraseElement
from nlg_framework.elements.string import StringElement
from nlg_framework.features import Feature, InternalFeature


def _leaf(text: str) -> StringElement:
    return StringElement(text)


def _texts(elements: list[NLGElement]) -> list[str]:
    return [element.realisation for element in elements]


class TestSlotOrder:
    def test_clause(self) -> None:
        """cue phrase, front mods, pre mods, subjects, verb phrase, complements."""
        clause = PhraseElement(PhraseCategory.CLAUSE)
        clause.set_feature(InternalFeature.COMPLEMENTS, [_leaf("c1"), _leaf("c2")])
        clause.set_feature(InternalFeature.VERB_PHRASE, _leaf("vp"))
        clause.set_feature(InternalFeature.SUBJECTS, [_leaf("s1"), _leaf("s2")])
        clause.set_feature(InternalFeature.PREMODIFIERS, [_leaf("pre")])
        clause.set_feature(InternalFeature.FRONT_MODIFIERS, [_leaf("front")])
        clause.set_feature(Feature.CUE_PHRASE, "however")
        assert _texts(clause.children) == [
            "however", "front", "pre", "s1", "s2", "vp", "c1", "c2",
        ]

    def test_clause_ignores_head_and_post_modifiers(self) -> None:
        """Slots outside the clause order are not children of a clause."""
        clause = PhraseElement(PhraseCategory.CLAUSE)
        clause.set_feature(InternalFeature.HEAD, _leaf("head"))
        clause.set_feature(InternalFeature.POSTMODIFIERS, [_leaf("post")])
        assert clause.children == []

    def test_noun_phrase(self) -> None:
        """specifier, pre mods, head, complements, post mods."""
        phrase = PhraseElement(PhraseCategory.NOUN_PHRASE)
        phrase.set_feature(InternalFeature.POSTMODIFIERS, [_leaf("post")])
        phrase.set_feature(InternalFeature.COMPLEMENTS, [_leaf("comp")])
        phrase.set_feature(InternalFeature.HEAD, _leaf("dog"))
        phrase.set_feature(InternalFeature.PREMODIFIERS, [_leaf("big")])
        phrase.set_feature(InternalFeature.SPECIFIER, _leaf("the"))
        assert _texts(phrase.children) == ["the", "big", "dog", "comp", "post"]

    def test_verb_phrase(self) -> None:
        """pre mods, head, complements, post mods."""
        phrase = PhraseElement(PhraseCategory.VERB_PHRASE)
        phrase.set_feature(InternalFeature.POSTMODIFIERS, _leaf("today"))
        phrase.set_feature(InternalFeature.COMPLEMENTS, _leaf("ball"))
        phrase.set_feature(InternalFeature.HEAD, "kick")
        phrase.set_feature(InternalFeature.PREMODIFIERS, _leaf("quickly"))
        phrase.set_feature(InternalFeature.SPECIFIER, _leaf("ignored"))
        assert _texts(phrase.children) == ["quickly", "kick", "ball", "today"]

    def test_default_order_for_other_phrases(self) -> None:
        """Adjective, adverb and prepositional phrases use the default order."""
        for category in (
            PhraseCategory.ADJECTIVE_PHRASE,
            PhraseCategory.ADVERB_PHRASE,
            PhraseCategory.PREPOSITIONAL_PHRASE,
        ):
            phrase = PhraseElement(category)
            phrase.set_feature(InternalFeature.HEAD, _leaf("head"))
            phrase.set_feature(InternalFeature.PREMODIFIERS, _leaf("very"))
            assert _texts(phrase.children) == ["very", "head"]

    def test_canned_text_has_no_children(self) -> None:
        """Canned text never has children, whatever its features say."""
        phrase = PhraseElement(PhraseCategory.CANNED_TEXT)
        phrase.set_feature(InternalFeature.HEAD, _leaf("head"))
        assert phrase.children == []

    def test_every_phrase_category_has_an_order(self) -> None:
        """The order table is exhaustive over phrase categories."""
        assert set(SLOT_ORDER) == set(PhraseCategory)


class TestLinearize:
    def test_optional_slots_contribute_nothing_when_absent(self) -> None:
        """Missing single slots add no placeholder."""
        phrase = PhraseElement(PhraseCategory.NOUN_PHRASE)
        phrase.set_feature(InternalFeature.COMPLEMENTS, [_leaf("of paper")])
        assert _texts(linearize(phrase)) == ["of paper"]

    def test_non_phrase_category(self) -> None:
        """Nodes without a phrase category have no slots."""
        node = NLGElement(DocumentCategory.SENTENCE)
        node.set_feature(InternalFeature.HEAD, _leaf("x"))
        assert linearize(node) == []
        assert linearize(NLGElement()) == []

    def test_fresh_list_each_call(self) -> None:
        """The result is rebuilt on every call."""
        phrase = PhraseElement(PhraseCategory.NOUN_PHRASE)
        phrase.set_feature(InternalFeature.HEAD, _leaf("dog"))
        first = linearize(phrase)
        first.clear()
        assert _texts(linearize(phrase)) == ["dog"]
