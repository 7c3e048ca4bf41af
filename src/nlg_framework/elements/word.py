"""WordElement and InflectedWordElement: lexicon entries and their inflections.

A WordElement is what a lexicon hands out: a base form, an optional lexicon
id, a lexical category and any number of named inflectional variants.  Each
variant is an independent mapping from lexical feature name (``plural``,
``past``, ...) to surface form.

Selecting a default variant copies that variant's forms onto the word's own
features, overwriting what was there::

    word = WordElement("fish", LexicalCategory.NOUN)
    word.add_inflectional_variant(Inflection.REGULAR, LexicalFeature.PLURAL, "fishes")
    word.add_inflectional_variant(Inflection.UNCOUNT, LexicalFeature.PLURAL, "fish")

    word.set_default_inflectional_variant(Inflection.REGULAR)
    word.get_feature(LexicalFeature.PLURAL)   # "fishes"
    word.set_default_inflectional_variant(Inflection.UNCOUNT)
    word.get_feature(LexicalFeature.PLURAL)   # "fish"

An InflectedWordElement is the morphology stage's view of a word: it carries
the base form as a feature plus a link back to the WordElement it came from.
"""

from __future__ import annotations

from typing import Any

from nlg_framework.categories import LexicalCategory
from nlg_framework.elements.base import NLGElement, format_features
from nlg_framework.features.names import (
    InternalFeature,
    LexicalFeature,
    inflectional_features,
)

__all__ = ["InflectedWordElement", "WordElement"]


class WordElement(NLGElement):
    """A word as stored in a lexicon.

    Args:
        base_form: Uninflected form, e.g. ``"dog"`` or ``"be"``.
        category:  Lexical category; defaults to ``LexicalCategory.ANY``.
        id:        Lexicon identifier, if the lexicon has one.
    """

    def __init__(
        self,
        base_form: str | None = None,
        category: Any = LexicalCategory.ANY,
        id: str | None = None,
    ) -> None:
        super().__init__(category)
        self.base_form = base_form
        self.id = id
        self._inflectional_variants: dict[Any, dict[str, str]] = {}
        self._default_inflection: Any = None

    # ------------------------------------------------------------------
    # Inflectional variants
    # ------------------------------------------------------------------

    def add_inflectional_variant(
        self,
        variant: Any,
        lexical_feature: str | None = None,
        form: str | None = None,
    ) -> None:
        """Register ``variant``, optionally with one form.

        With a lexical feature, the form is added to the variant's form set
        (the set is created on first use).  Without one, the variant is
        (re-)registered with an empty form set.
        """
        if lexical_feature is None:
            self._inflectional_variants[variant] = {}
            return
        forms = self._inflectional_variants.setdefault(variant, {})
        if form is None:
            forms.pop(lexical_feature, None)
        else:
            forms[lexical_feature] = form

    def has_inflectional_variant(self, variant: Any) -> bool:
        return variant in self._inflectional_variants

    def inflectional_variant_forms(self, variant: Any) -> dict[str, str]:
        """Copy of the forms registered for ``variant`` ({} when unknown)."""
        return dict(self._inflectional_variants.get(variant, {}))

    @property
    def inflectional_variants(self) -> list[Any]:
        """Registered variant names in registration order."""
        return list(self._inflectional_variants)

    @property
    def default_inflectional_variant(self) -> Any:
        return self._default_inflection

    def set_default_inflectional_variant(self, variant: Any) -> None:
        """Select ``variant`` and copy its forms onto this word.

        Every inflected-form feature applicable to the word's category is
        overwritten from the variant's form set; a form the variant lacks
        clears the feature.  A variant with no registered form set is
        recorded but copies nothing.
        """
        self.set_feature(LexicalFeature.DEFAULT_INFL, variant)
        self._default_inflection = variant

        forms = self._inflectional_variants.get(variant)
        if forms is None:
            return
        for feature in inflectional_features(self.category):
            self.set_feature(feature, forms.get(feature))

    # ------------------------------------------------------------------
    # Spelling variants
    # ------------------------------------------------------------------

    @property
    def default_spelling_variant(self) -> str | None:
        """The selected spelling, falling back to the base form."""
        spelling = self.get_feature_as_string(LexicalFeature.DEFAULT_SPELL)
        return self.base_form if spelling is None else spelling

    def set_default_spelling_variant(self, variant: str | None) -> None:
        self.set_feature(LexicalFeature.DEFAULT_SPELL, variant)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def to_xml(self) -> str:
        """Serialise as a lexicon ``<word>`` record.

        Features are written in name order.  True booleans become empty tags,
        False booleans are omitted.
        """
        lines = ["<word>"]
        if self.base_form is not None:
            lines.append(f"  <base>{self.base_form}</base>")
        if self.category is not None and self.category is not LexicalCategory.ANY:
            lines.append(f"  <category>{str(self.category).lower()}</category>")
        if self.id is not None:
            lines.append(f"  <id>{self.id}</id>")
        for name in sorted(self.features):
            value = self.features[name]
            if isinstance(value, bool):
                if value:
                    lines.append(f"  <{name}/>")
            else:
                lines.append(f"  <{name}>{value}</{name}>")
        lines.append("</word>")
        return "\n".join(lines) + "\n"

    def tree_header(self) -> str:
        return (
            f"WordElement: base={self.base_form}, category={self.category}, "
            f"features={format_features(self.features)}"
        )

    def __str__(self) -> str:
        category = "no category" if self.category is None else self.category
        return f"WordElement[{self.base_form}:{category}]"

    def __eq__(self, other: object) -> bool:
        # Absent ids compare equal only to absent ids.
        if not isinstance(other, WordElement):
            return False if isinstance(other, NLGElement) else NotImplemented
        return (
            self.base_form == other.base_form
            and self.id == other.id
            and self.features == other.features
        )

    __hash__ = None  # type: ignore[assignment]


class InflectedWordElement(NLGElement):
    """A word prepared for morphology.

    Built either from a bare string and category, or from a WordElement, in
    which case the word's default spelling becomes the base form and the word
    itself is kept under ``base_word``.
    """

    def __init__(
        self,
        word: WordElement | str | None,
        category: Any = None,
    ) -> None:
        if isinstance(word, WordElement):
            super().__init__(word.category)
            self.set_feature(InternalFeature.BASE_WORD, word)
            self.set_feature(LexicalFeature.BASE_FORM, word.default_spelling_variant)
        else:
            super().__init__(category)
            self.set_feature(LexicalFeature.BASE_FORM, word)

    @property
    def base_form(self) -> str | None:
        return self.get_feature_as_string(LexicalFeature.BASE_FORM)

    @property
    def base_word(self) -> WordElement | None:
        word = self.get_feature(InternalFeature.BASE_WORD)
        return word if isinstance(word, WordElement) else None

    @base_word.setter
    def base_word(self, word: WordElement | None) -> None:
        self.set_feature(InternalFeature.BASE_WORD, word)

    def tree_header(self) -> str:
        return (
            f"InflectedWordElement: base={self.base_form}, category={self.category}, "
            f"features={format_features(self.features)}"
        )

    def __str__(self) -> str:
        return f"InflectedWordElement[{self.base_form}:{self.category}]"
