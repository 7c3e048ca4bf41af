"""Canonical constituent order per phrase category.

The table ``SLOT_ORDER`` is the small grammar that decides in which order a
phrase's parts are emitted:

    clause        cue_phrase? front_modifiers premodifiers subjects
                  verb_phrase complements
    noun_phrase   specifier? premodifiers head? complements postmodifiers
    verb_phrase   premodifiers head? complements postmodifiers
    canned_text   (nothing)
    other phrase  premodifiers head? complements postmodifiers

Single-valued slots (``?``) contribute zero or one element; list slots go
through the element-list normaliser, so "one complement" and "many
complements" read the same.  ``linearize`` is a pure function of the node's
category and current features: nothing is cached.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from nlg_framework.categories import PhraseCategory
from nlg_framework.features.names import Feature, InternalFeature

if TYPE_CHECKING:
    from nlg_framework.elements.base import NLGElement

__all__ = ["DEFAULT_SLOT_ORDER", "SINGLE_SLOTS", "SLOT_ORDER", "linearize"]

# Slots holding at most one constituent.
SINGLE_SLOTS: frozenset[str] = frozenset(
    {Feature.CUE_PHRASE, InternalFeature.SPECIFIER, InternalFeature.HEAD}
)

DEFAULT_SLOT_ORDER: tuple[str, ...] = (
    InternalFeature.PREMODIFIERS,
    InternalFeature.HEAD,
    InternalFeature.COMPLEMENTS,
    InternalFeature.POSTMODIFIERS,
)

SLOT_ORDER: dict[PhraseCategory, tuple[str, ...]] = {
    PhraseCategory.CLAUSE: (
        Feature.CUE_PHRASE,
        InternalFeature.FRONT_MODIFIERS,
        InternalFeature.PREMODIFIERS,
        InternalFeature.SUBJECTS,
        InternalFeature.VERB_PHRASE,
        InternalFeature.COMPLEMENTS,
    ),
    PhraseCategory.NOUN_PHRASE: (
        InternalFeature.SPECIFIER,
        InternalFeature.PREMODIFIERS,
        InternalFeature.HEAD,
        InternalFeature.COMPLEMENTS,
        InternalFeature.POSTMODIFIERS,
    ),
    PhraseCategory.VERB_PHRASE: DEFAULT_SLOT_ORDER,
    PhraseCategory.ADJECTIVE_PHRASE: DEFAULT_SLOT_ORDER,
    PhraseCategory.ADVERB_PHRASE: DEFAULT_SLOT_ORDER,
    PhraseCategory.PREPOSITIONAL_PHRASE: DEFAULT_SLOT_ORDER,
    PhraseCategory.CANNED_TEXT: (),
}


def linearize(element: NLGElement) -> list[NLGElement]:
    """Return the children of a phrase in canonical order.

    Args:
        element: Any node.  Only nodes whose category is a PhraseCategory have
            slots; every other node yields an empty list.

    Returns:
        A new list built from the node's current features.
    """
    category = element.category
    if not isinstance(category, PhraseCategory):
        return []

    children: list[NLGElement] = []
    for slot in SLOT_ORDER.get(category, DEFAULT_SLOT_ORDER):
        if slot in SINGLE_SLOTS:
            part = element.get_feature_as_element(slot)
            if part is not None:
                children.append(part)
        else:
            children.extend(element.get_feature_as_element_list(slot))
    return children
