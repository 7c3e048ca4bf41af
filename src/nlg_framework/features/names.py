"""Conventional feature names shared by pipeline stages.

The attribute store accepts any string as a feature name; these StrEnums only
fix the spelling of the names that stages agree on.  Members are ``str``
instances, so ``element.get_feature(Feature.NUMBER)`` and
``element.get_feature("number")`` address the same entry.

- ``Feature``:         user-settable grammatical features (tense, number, ...)
- ``InternalFeature``: structural slots written by factories and stages
  (head, complements, components, ...)
- ``LexicalFeature``:  lexicon-level word properties and inflected forms
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from nlg_framework.categories import LexicalCategory, PhraseCategory

__all__ = ["Feature", "InternalFeature", "LexicalFeature", "inflectional_features"]


class Feature(StrEnum):
    """Grammatical features set by clients and read by the syntax stages."""

    ADJECTIVE_ORDERING = "adjective_ordering"
    AGGREGATE_AUXILIARY = "aggregate_auxiliary"
    APPOSITIVE = "appositive"
    COMPLEMENTISER = "complementiser"
    CONJUNCTION = "conjunction"
    CONJUNCTION_TYPE = "conjunction_type"
    CUE_PHRASE = "cue_phrase"
    ELIDED = "elided"
    FORM = "form"
    INTERROGATIVE_TYPE = "interrogative_type"
    IS_COMPARATIVE = "is_comparative"
    IS_SUPERLATIVE = "is_superlative"
    MODAL = "modal"
    NEGATED = "negated"
    NUMBER = "number"
    PARTICLE = "particle"
    PASSIVE = "passive"
    PERFECT = "perfect"
    PERSON = "person"
    POSSESSIVE = "possessive"
    PROGRESSIVE = "progressive"
    PRONOMINAL = "pronominal"
    RAISE_SPECIFIER = "raise_specifier"
    SUPPRESS_GENITIVE_IN_GERUND = "suppress_genitive_in_gerund"
    SUPPRESSED_COMPLEMENTISER = "suppressed_complementiser"
    TENSE = "tense"


class InternalFeature(StrEnum):
    """Structural slots; the children of a node are read from these."""

    ACRONYM = "acronym"
    BASE_WORD = "base_word"
    CLAUSE_STATUS = "clause_status"
    COMPLEMENTS = "complements"
    COMPONENTS = "components"
    COORDINATES = "coordinates"
    DISCOURSE_FUNCTION = "discourse_function"
    FRONT_MODIFIERS = "front_modifiers"
    HEAD = "head"
    IGNORE_MODAL = "ignore_modal"
    INTERROGATIVE = "interrogative"
    NON_MORPH = "non_morph"
    POSTMODIFIERS = "postmodifiers"
    PREMODIFIERS = "premodifiers"
    RAISED = "raised"
    REALISE_AUXILIARY = "realise_auxiliary"
    SPECIFIER = "specifier"
    SUBJECTS = "subjects"
    VERB_PHRASE = "verb_phrase"


class LexicalFeature(StrEnum):
    """Lexicon-level word properties, including the inflected surface forms."""

    ACRONYM_OF = "acronym_of"
    ACRONYMS = "acronyms"
    BASE_FORM = "base_form"
    CLASSIFYING = "classifying"
    COLOUR = "colour"
    COMPARATIVE = "comparative"
    DEFAULT_INFL = "default_infl"
    DEFAULT_SPELL = "default_spell"
    DITRANSITIVE = "ditransitive"
    EXPLETIVE_SUBJECT = "expletive_subject"
    GENDER = "gender"
    INTENSIFIER = "intensifier"
    INTRANSITIVE = "intransitive"
    PAST = "past"
    PAST_PARTICIPLE = "pastParticiple"
    PLURAL = "plural"
    PREDICATIVE = "predicative"
    PRESENT3S = "present3s"
    PRESENT_PARTICIPLE = "presentParticiple"
    PROPER = "proper"
    QUALITATIVE = "qualitative"
    REFLEXIVE = "reflexive"
    SENTENCE_MODIFIER = "sentence_modifier"
    SPELL_VARS = "spell_vars"
    SUPERLATIVE = "superlative"
    TRANSITIVE = "transitive"
    VERB_MODIFIER = "verb_modifier"


_NOUN_FORMS = (LexicalFeature.PLURAL,)
_VERB_FORMS = (
    LexicalFeature.PAST,
    LexicalFeature.PAST_PARTICIPLE,
    LexicalFeature.PRESENT_PARTICIPLE,
    LexicalFeature.PRESENT3S,
)
_ADJECTIVE_FORMS = (LexicalFeature.COMPARATIVE, LexicalFeature.SUPERLATIVE)


def inflectional_features(category: Any) -> tuple[LexicalFeature, ...]:
    """Return the inflected-form feature names that apply to ``category``.

    These are the features a word's selected inflectional variant writes onto
    the word itself.  Nouns and noun phrases inflect for the plural; verbs and
    verb phrases for past, past participle, present participle and third
    person singular present; adjectives and adjective phrases for the
    comparative and superlative.  Every other category (or ``None``) has no
    inflected forms and yields an empty tuple.
    """
    if category is PhraseCategory.NOUN_PHRASE or category is LexicalCategory.NOUN:
        return _NOUN_FORMS
    if category is PhraseCategory.VERB_PHRASE or category is LexicalCategory.VERB:
        return _VERB_FORMS
    if (
        category is PhraseCategory.ADJECTIVE_PHRASE
        or category is LexicalCategory.ADJECTIVE
    ):
        return _ADJECTIVE_FORMS
    return ()
