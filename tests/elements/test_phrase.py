"""Tests for PhraseElement slot management.

Covers:
- Head and specifier setters (string coercion, tagging, removal)
- Complement tagging: OBJECT default, SUBORDINATE for clauses and coordinations
- set_complement replaces by discourse function only
- Modifier adders and clear-then-add setters
- Children follow the current features
"""

from __future__ import annotations

from nlg_framework.categories import LexicalCategory, PhraseCategory
from nlg_framework.elements.coordinated import CoordinatedPhraseElement
from nlg_framework.elements.phrase import PhraseElement
from nlg_framework.elements.string import StringElement
from nlg_framework.elements.word import WordElement
from nlg_framework.features import ClauseStatus, DiscourseFunction, InternalFeature

FUNCTION = InternalFeature.DISCOURSE_FUNCTION


def _np(head: str) -> PhraseElement:
    phrase = PhraseElement(PhraseCategory.NOUN_PHRASE)
    phrase.set_head(head)
    return phrase


class TestConstruction:
    def test_category_only(self) -> None:
        """The constructor records the category and sets no features."""
        phrase = PhraseElement(PhraseCategory.VERB_PHRASE)
        assert phrase.category is PhraseCategory.VERB_PHRASE
        assert phrase.features == {}
        assert phrase.children == []


class TestHeadAndSpecifier:
    def test_string_head_is_wrapped(self) -> None:
        """A string head becomes a StringElement."""
        phrase = _np("dog")
        assert isinstance(phrase.head, StringElement)
        assert phrase.head.realisation == "dog"

    def test_node_head_kept(self) -> None:
        """A node head is stored as is."""
        word = WordElement("dog", LexicalCategory.NOUN)
        phrase = PhraseElement(PhraseCategory.NOUN_PHRASE)
        phrase.set_head(word)
        assert phrase.head is word

    def test_none_head_removes(self) -> None:
        """Setting None removes the head."""
        phrase = _np("dog")
        phrase.set_head(None)
        assert phrase.head is None
        assert not phrase.has_feature(InternalFeature.HEAD)

    def test_string_specifier_becomes_determiner(self) -> None:
        """A string specifier is a determiner word tagged SPECIFIER."""
        phrase = _np("dog")
        phrase.set_specifier("the")
        specifier = phrase.specifier
        assert isinstance(specifier, WordElement)
        assert specifier.base_form == "the"
        assert specifier.category is LexicalCategory.DETERMINER
        assert (
            specifier.get_feature(FUNCTION)
            is DiscourseFunction.SPECIFIER
        )
        assert specifier.parent is phrase

    def test_node_specifier_tagged(self) -> None:
        """A node specifier is tagged and parented too."""
        phrase = _np("dog")
        possessor = _np("John")
        phrase.set_specifier(possessor)
        assert phrase.specifier is possessor
        assert (
            possessor.get_feature(FUNCTION)
            is DiscourseFunction.SPECIFIER
        )
        assert possessor.parent is phrase

    def test_none_specifier_removes(self) -> None:
        """Setting None removes the specifier."""
        phrase = _np("dog")
        phrase.set_specifier("a")
        phrase.set_specifier(None)
        assert phrase.specifier is None


class TestComplements:
    def test_untagged_complement_becomes_object(self) -> None:
        """A complement without a discourse function is an OBJECT."""
        vp = PhraseElement(PhraseCategory.VERB_PHRASE)
        x = _np("ball")
        vp.add_complement(x)
        assert x.get_feature(FUNCTION) is DiscourseFunction.OBJECT
        assert vp.complements[0] is x

    def test_existing_function_kept(self) -> None:
        """A preset discourse function is not overwritten."""
        vp = PhraseElement(PhraseCategory.VERB_PHRASE)
        y = _np("Mary")
        y.set_feature(FUNCTION, DiscourseFunction.INDIRECT_OBJECT)
        vp.add_complement(y)
        assert (
            y.get_feature(FUNCTION)
            is DiscourseFunction.INDIRECT_OBJECT
        )

    def test_set_complement_keeps_other_functions(self) -> None:
        """Setting an indirect object leaves the direct object in place."""
        vp = PhraseElement(PhraseCategory.VERB_PHRASE)
        x = _np("ball")
        vp.add_complement(x)
        y = _np("Mary")
        y.set_feature(FUNCTION, DiscourseFunction.INDIRECT_OBJECT)
        vp.set_complement(y)
        complements = vp.complements
        assert len(complements) == 2
        assert complements[0] is x
        assert complements[1] is y
        assert x.get_feature(FUNCTION) is DiscourseFunction.OBJECT

    def test_set_complement_replaces_same_function(self) -> None:
        """Setting a second OBJECT replaces the first."""
        vp = PhraseElement(PhraseCategory.VERB_PHRASE)
        vp.add_complement(_np("ball"))
        indirect = _np("Mary")
        indirect.set_feature(
            FUNCTION, DiscourseFunction.INDIRECT_OBJECT
        )
        vp.add_complement(indirect)
        replacement = _np("bat")
        replacement.set_feature(FUNCTION, DiscourseFunction.OBJECT)
        vp.set_complement(replacement)
        complements = vp.complements
        assert len(complements) == 2
        assert complements[0] is indirect
        assert complements[1] is replacement

    def test_set_untagged_complement_appends(self) -> None:
        """A complement without a function replaces nothing."""
        vp = PhraseElement(PhraseCategory.VERB_PHRASE)
        vp.add_complement(_np("ball"))
        vp.set_complement(_np("bat"))
        assert len(vp.complements) == 2

    def test_clause_complement_is_subordinate(self) -> None:
        """An embedded clause is marked SUBORDINATE and OBJECT."""
        vp = PhraseElement(PhraseCategory.VERB_PHRASE)
        clause = PhraseElement(PhraseCategory.CLAUSE)
        vp.add_complement(clause)
        status = clause.get_feature(InternalFeature.CLAUSE_STATUS)
        assert status is ClauseStatus.SUBORDINATE
        assert (
            clause.get_feature(FUNCTION)
            is DiscourseFunction.OBJECT
        )

    def test_coordinated_complement_is_subordinate(self) -> None:
        """A coordination as complement is marked SUBORDINATE."""
        vp = PhraseElement(PhraseCategory.VERB_PHRASE)
        coordination = CoordinatedPhraseElement(_np("tea"), _np("coffee"))
        vp.add_complement(coordination)
        assert (
            coordination.get_feature(InternalFeature.CLAUSE_STATUS)
            is ClauseStatus.SUBORDINATE
        )

    def test_noun_phrase_complement_not_subordinate(self) -> None:
        """Ordinary phrases get no clause status."""
        vp = PhraseElement(PhraseCategory.VERB_PHRASE)
        x = _np("ball")
        vp.add_complement(x)
        assert not x.has_feature(InternalFeature.CLAUSE_STATUS)

    def test_string_complement_untagged(self) -> None:
        """A string complement is wrapped but not tagged."""
        vp = PhraseElement(PhraseCategory.VERB_PHRASE)
        vp.add_complement("quickly")
        (complement,) = vp.complements
        assert isinstance(complement, StringElement)
        assert not complement.has_feature(FUNCTION)

    def test_set_string_complement_clears_all(self) -> None:
        """Setting a string complement replaces every complement."""
        vp = PhraseElement(PhraseCategory.VERB_PHRASE)
        vp.add_complement(_np("ball"))
        vp.add_complement("away")
        vp.set_complement("home")
        assert [c.realisation for c in vp.complements] == ["home"]

    def test_clear_complements(self) -> None:
        """clear_complements removes the slot."""
        vp = PhraseElement(PhraseCategory.VERB_PHRASE)
        vp.add_complement(_np("ball"))
        vp.clear_complements()
        assert vp.complements == []


class TestModifiers:
    def test_adders_append_in_order(self) -> None:
        """Adders create the list on first use and append."""
        phrase = _np("dog")
        phrase.add_pre_modifier("big")
        phrase.add_pre_modifier("black")
        assert [m.realisation for m in phrase.pre_modifiers] == ["big", "black"]

    def test_setters_clear_then_add(self) -> None:
        """Setters leave exactly the new modifier."""
        phrase = _np("dog")
        phrase.add_pre_modifier("big")
        phrase.set_pre_modifier("small")
        phrase.add_front_modifier("however")
        phrase.set_front_modifier("still")
        phrase.add_post_modifier("in the park")
        phrase.set_post_modifier("at home")
        assert [m.realisation for m in phrase.pre_modifiers] == ["small"]
        assert [m.realisation for m in phrase.front_modifiers] == ["still"]
        assert [m.realisation for m in phrase.post_modifiers] == ["at home"]

    def test_post_modifier_node_tagged(self) -> None:
        """A node post-modifier is tagged POST_MODIFIER."""
        phrase = _np("dog")
        pp = PhraseElement(PhraseCategory.PREPOSITIONAL_PHRASE)
        phrase.add_post_modifier(pp)
        assert (
            pp.get_feature(FUNCTION)
            is DiscourseFunction.POST_MODIFIER
        )

    def test_generic_modifier(self) -> None:
        """add_modifier pre-modifies and ignores None."""
        phrase = _np("dog")
        phrase.add_modifier(None)
        assert phrase.pre_modifiers == []
        phrase.add_modifier("old")
        assert [m.realisation for m in phrase.pre_modifiers] == ["old"]


class TestChildren:
    def test_children_follow_features(self) -> None:
        """Children are recomputed from the features on every access."""
        phrase = _np("dog")
        assert [c.realisation for c in phrase.children] == ["dog"]
        phrase.set_feature(InternalFeature.HEAD, "cat")
        assert [c.realisation for c in phrase.children] == ["cat"]
        phrase.add_pre_modifier("fat")
        assert [c.realisation for c in phrase.children] == ["fat", "cat"]

    def test_print_tree_shows_slots(self) -> None:
        """The printed tree lists the linearised constituents."""
        phrase = _np("dog")
        phrase.set_specifier("the")
        lines = phrase.print_tree().splitlines()
        assert lines[0].startswith("PhraseElement: category=noun_phrase")
        assert lines[1].startswith(" |-WordElement: base=the, category=determiner")
        assert lines[2] == ' \\-StringElement: content="dog", features={}'
