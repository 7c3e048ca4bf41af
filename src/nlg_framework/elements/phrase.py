"""PhraseElement: a syntactic phrase whose parts live in named features.

Head, complements, modifiers and specifier are features, not fields.  The
visible children are produced by ``linearize`` from the category and the
current features (see ``nlg_framework.elements.linearization``).

Complement bookkeeping:
- a new complement without a discourse function becomes an OBJECT;
- a clause or coordinated complement is additionally marked SUBORDINATE,
  which is how later stages recognise embedded clauses;
- ``set_complement`` replaces only complements sharing the new one's
  discourse function, so an OBJECT and an INDIRECT_OBJECT coexist.
"""

from __future__ import annotations

from typing import Any

from nlg_framework.categories import LexicalCategory, PhraseCategory
from nlg_framework.elements.base import NLGElement
from nlg_framework.elements.coordinated import CoordinatedPhraseElement
from nlg_framework.elements.linearization import linearize
from nlg_framework.elements.string import StringElement
from nlg_framework.elements.word import WordElement
from nlg_framework.features.names import InternalFeature
from nlg_framework.features.values import ClauseStatus, DiscourseFunction

__all__ = ["PhraseElement"]


def _coerce(value: NLGElement | str) -> NLGElement:
    if isinstance(value, NLGElement):
        return value
    return StringElement(str(value))


class PhraseElement(NLGElement):
    """A phrase of a given PhraseCategory.

    The constructor only records the category; default features such as
    ``elided`` are the business of factories.

    Example::

        np = PhraseElement(PhraseCategory.NOUN_PHRASE)
        np.set_head("dog")
        np.add_pre_modifier("big")
        [str(c) for c in np.children]   # ["big", "dog"]
    """

    def __init__(self, category: PhraseCategory | None = None) -> None:
        super().__init__(category)

    @property
    def children(self) -> list[NLGElement]:
        return linearize(self)

    # ------------------------------------------------------------------
    # Head and specifier
    # ------------------------------------------------------------------

    @property
    def head(self) -> NLGElement | None:
        return self.get_feature_as_element(InternalFeature.HEAD)

    def set_head(self, new_head: NLGElement | str | None) -> None:
        """Set the head; strings become StringElements, None removes it."""
        if new_head is None:
            self.remove_feature(InternalFeature.HEAD)
            return
        self.set_feature(InternalFeature.HEAD, _coerce(new_head))

    @property
    def specifier(self) -> NLGElement | None:
        return self.get_feature_as_element(InternalFeature.SPECIFIER)

    def set_specifier(self, new_specifier: NLGElement | str | None) -> None:
        """Set the specifier (determiner slot of a noun phrase).

        A string becomes a determiner WordElement.  The specifier is tagged
        with the SPECIFIER discourse function and parented to this phrase.
        """
        if new_specifier is None:
            self.remove_feature(InternalFeature.SPECIFIER)
            return
        if isinstance(new_specifier, NLGElement):
            specifier = new_specifier
        else:
            specifier = WordElement(str(new_specifier), LexicalCategory.DETERMINER)
        specifier.set_feature(
            InternalFeature.DISCOURSE_FUNCTION, DiscourseFunction.SPECIFIER
        )
        specifier.parent = self
        self.set_feature(InternalFeature.SPECIFIER, specifier)

    # ------------------------------------------------------------------
    # Complements
    # ------------------------------------------------------------------

    @property
    def complements(self) -> list[NLGElement]:
        return self.get_feature_as_element_list(InternalFeature.COMPLEMENTS)

    def add_complement(self, new_complement: NLGElement | str) -> None:
        """Append a complement.

        A node without a discourse function is tagged OBJECT; a clause or
        coordinated phrase is also tagged SUBORDINATE.  A string is appended
        as an untagged StringElement.
        """
        complements = self.complements
        if not isinstance(new_complement, NLGElement):
            complements.append(StringElement(str(new_complement)))
            self.set_feature(InternalFeature.COMPLEMENTS, complements)
            return

        if not new_complement.has_feature(InternalFeature.DISCOURSE_FUNCTION):
            new_complement.set_feature(
                InternalFeature.DISCOURSE_FUNCTION, DiscourseFunction.OBJECT
            )
        complements.append(new_complement)
        self.set_feature(InternalFeature.COMPLEMENTS, complements)

        if new_complement.is_a(PhraseCategory.CLAUSE) or isinstance(
            new_complement, CoordinatedPhraseElement
        ):
            new_complement.set_feature(
                InternalFeature.CLAUSE_STATUS, ClauseStatus.SUBORDINATE
            )
            if not new_complement.has_feature(InternalFeature.DISCOURSE_FUNCTION):
                new_complement.set_feature(
                    InternalFeature.DISCOURSE_FUNCTION, DiscourseFunction.OBJECT
                )

    def set_complement(self, new_complement: NLGElement | str) -> None:
        """Replace complements that share the new one's discourse function.

        For a string, every complement is cleared first.
        """
        if not isinstance(new_complement, NLGElement):
            self.clear_complements()
            self.add_complement(new_complement)
            return

        function = new_complement.get_feature(InternalFeature.DISCOURSE_FUNCTION)
        self._remove_complements(function)
        self.add_complement(new_complement)

    def _remove_complements(self, function: Any) -> None:
        if function is None:
            return
        complements = self.complements
        kept = [
            complement
            for complement in complements
            if complement.get_feature(InternalFeature.DISCOURSE_FUNCTION) != function
        ]
        if len(kept) != len(complements):
            self.set_feature(InternalFeature.COMPLEMENTS, kept)

    def clear_complements(self) -> None:
        self.remove_feature(InternalFeature.COMPLEMENTS)

    # ------------------------------------------------------------------
    # Modifiers
    # ------------------------------------------------------------------

    @property
    def pre_modifiers(self) -> list[NLGElement]:
        return self.get_feature_as_element_list(InternalFeature.PREMODIFIERS)

    @property
    def post_modifiers(self) -> list[NLGElement]:
        return self.get_feature_as_element_list(InternalFeature.POSTMODIFIERS)

    @property
    def front_modifiers(self) -> list[NLGElement]:
        return self.get_feature_as_element_list(InternalFeature.FRONT_MODIFIERS)

    def add_pre_modifier(self, new_pre_modifier: NLGElement | str) -> None:
        self._append(InternalFeature.PREMODIFIERS, _coerce(new_pre_modifier))

    def set_pre_modifier(self, new_pre_modifier: NLGElement | str) -> None:
        self.set_feature(InternalFeature.PREMODIFIERS, None)
        self.add_pre_modifier(new_pre_modifier)

    def add_post_modifier(self, new_post_modifier: NLGElement | str) -> None:
        """Append a post-modifier; nodes are tagged POST_MODIFIER."""
        if isinstance(new_post_modifier, NLGElement):
            new_post_modifier.set_feature(
                InternalFeature.DISCOURSE_FUNCTION, DiscourseFunction.POST_MODIFIER
            )
        self._append(InternalFeature.POSTMODIFIERS, _coerce(new_post_modifier))

    def set_post_modifier(self, new_post_modifier: NLGElement | str) -> None:
        self.set_feature(InternalFeature.POSTMODIFIERS, None)
        self.add_post_modifier(new_post_modifier)

    def add_front_modifier(self, new_front_modifier: NLGElement | str) -> None:
        self._append(InternalFeature.FRONT_MODIFIERS, _coerce(new_front_modifier))

    def set_front_modifier(self, new_front_modifier: NLGElement | str) -> None:
        self.set_feature(InternalFeature.FRONT_MODIFIERS, None)
        self.add_front_modifier(new_front_modifier)

    def add_modifier(self, modifier: NLGElement | str | None) -> None:
        """Generic modifier: added as a pre-modifier.  None is ignored.

        Phrase-specific placement (e.g. adverbs after the verb) is decided by
        the syntax stages, not here.
        """
        if modifier is None:
            return
        self.add_pre_modifier(modifier)

    def _append(self, name: str, element: NLGElement) -> None:
        # get_feature_as_element_list hands back a fresh list, so the first
        # append creates the backing list.
        items = self.get_feature_as_element_list(name)
        items.append(element)
        self.set_feature(name, items)
