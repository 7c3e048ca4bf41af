"""Closed value vocabularies for conventional features.

Every enum here is a StrEnum whose values are the lowercased member names, so
a stage that stored ``"object"`` and one that stored
``DiscourseFunction.OBJECT`` still compare equal.
"""

from __future__ import annotations

from enum import StrEnum, auto

__all__ = [
    "ClauseStatus",
    "DiscourseFunction",
    "Form",
    "Gender",
    "Inflection",
    "InterrogativeType",
    "NumberAgreement",
    "Person",
    "Tense",
]


class DiscourseFunction(StrEnum):
    """Grammatical role of a constituent relative to its parent."""

    AUXILIARY = auto()
    COMPLEMENT = auto()
    CONJUNCTION = auto()
    CUE_PHRASE = auto()
    FRONT_MODIFIER = auto()
    HEAD = auto()
    INDIRECT_OBJECT = auto()
    OBJECT = auto()
    PRE_MODIFIER = auto()
    POST_MODIFIER = auto()
    SPECIFIER = auto()
    SUBJECT = auto()
    VERB_PHRASE = auto()


class ClauseStatus(StrEnum):
    """Whether a clause is the main clause or embedded in another."""

    MATRIX = auto()
    SUBORDINATE = auto()


class NumberAgreement(StrEnum):
    BOTH = auto()
    PLURAL = auto()
    SINGULAR = auto()


class Tense(StrEnum):
    FUTURE = auto()
    PAST = auto()
    PRESENT = auto()


class Gender(StrEnum):
    MASCULINE = auto()
    FEMININE = auto()
    NEUTER = auto()


class Person(StrEnum):
    FIRST = auto()
    SECOND = auto()
    THIRD = auto()


class Form(StrEnum):
    """Verb form requested of the morphology stage."""

    BARE_INFINITIVE = auto()
    GERUND = auto()
    IMPERATIVE = auto()
    INFINITIVE = auto()
    NORMAL = auto()
    PAST_PARTICIPLE = auto()
    PRESENT_PARTICIPLE = auto()


class InterrogativeType(StrEnum):
    """Question kinds a clause can be turned into."""

    HOW = auto()
    HOW_PREDICATE = auto()
    WHAT_OBJECT = auto()
    WHAT_SUBJECT = auto()
    WHERE = auto()
    WHO_INDIRECT_OBJECT = auto()
    WHO_OBJECT = auto()
    WHO_SUBJECT = auto()
    WHY = auto()
    YES_NO = auto()
    HOW_MANY = auto()

    def is_object(self) -> bool:
        """True for questions about the direct object."""
        return self in (InterrogativeType.WHO_OBJECT, InterrogativeType.WHAT_OBJECT)

    def is_indirect_object(self) -> bool:
        """True for questions about the indirect object."""
        return self is InterrogativeType.WHO_INDIRECT_OBJECT


class Inflection(StrEnum):
    """Inflectional paradigms a word can follow.

    A word may carry several of these as named variants (e.g. a noun with both
    a regular and a Greco-Latin plural).
    """

    GRECO_LATIN_REGULAR = auto()
    IRREGULAR = auto()
    REGULAR = auto()
    REGULAR_DOUBLE = auto()
    UNCOUNT = auto()
    INVARIANT = auto()

    @classmethod
    def from_code(cls, code: str) -> Inflection | None:
        """Map a lexicon inflection code (``"reg"``, ``"irreg"``, ...) to a member.

        Codes are matched case-insensitively after trimming.  Unknown codes
        return ``None``.
        """
        return _INFLECTION_CODES.get(code.strip().lower())


_INFLECTION_CODES: dict[str, Inflection] = {
    "reg": Inflection.REGULAR,
    "irreg": Inflection.IRREGULAR,
    "regd": Inflection.REGULAR_DOUBLE,
    "glreg": Inflection.GRECO_LATIN_REGULAR,
    "uncount": Inflection.UNCOUNT,
    "noncount": Inflection.UNCOUNT,
    "groupuncount": Inflection.UNCOUNT,
    "inv": Inflection.INVARIANT,
}
