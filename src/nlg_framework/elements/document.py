"""DocumentElement: structural containers with automatic tree repair.

A document node whose category is a ``DocumentCategory`` only accepts
components the nesting grammar allows (see ``nlg_framework.categories``).
``add_component`` repairs an illegal insertion by *promotion*: it wraps the
element in the smallest chain of synthesised containers that the target
accepts.

    any non-document node -> sentence(node) -> paragraph(sentence(node))
    sentence              -> paragraph(sentence)
    anything else         -> promotion fails

What counts as a document node is decided by type (``DocumentElement``), not
by category, so a bare node tagged ``list_item`` is still wrapped.

At most two wrappers are ever synthesised, so promotion always terminates.
When promotion fails the original element is attached anyway and a warning
is logged: the tree then violates the grammar, but no content is lost.

``add_components`` is deliberately stricter: it attaches only directly
acceptable elements and drops the rest without promoting them.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from nlg_framework.categories import DocumentCategory
from nlg_framework.elements.base import NLGElement

__all__ = ["COMPONENTS_FEATURE", "DocumentElement", "TITLE_FEATURE"]

logger = logging.getLogger(__name__)

TITLE_FEATURE = "textTitle"
COMPONENTS_FEATURE = "textComponents"


class DocumentElement(NLGElement):
    """A document, section, paragraph, sentence, list or list item.

    Args:
        category: Usually a ``DocumentCategory``.  With any other category (or
            None) nesting is unconstrained.
        title:    Optional title, stored in the ``textTitle`` feature.

    Example::

        paragraph = DocumentElement(DocumentCategory.PARAGRAPH)
        paragraph.add_component(StringElement("It rained."))
        paragraph.components[0].category   # DocumentCategory.SENTENCE
    """

    def __init__(self, category: Any = None, title: str | None = None) -> None:
        super().__init__(category)
        self.title = title

    @property
    def title(self) -> str | None:
        return self.get_feature_as_string(TITLE_FEATURE)

    @title.setter
    def title(self, text_title: str | None) -> None:
        self.set_feature(TITLE_FEATURE, text_title)

    @property
    def components(self) -> list[NLGElement]:
        """The stored components, in insertion order (a new list)."""
        return self.get_feature_as_element_list(COMPONENTS_FEATURE)

    @property
    def children(self) -> list[NLGElement]:
        return self.components

    # ------------------------------------------------------------------
    # Adding components
    # ------------------------------------------------------------------

    def add_component(self, element: NLGElement | None) -> None:
        """Attach ``element``, promoting it if the grammar requires.

        None is ignored.  Elements without a category, and every element of a
        container whose category is not a ``DocumentCategory``, are attached
        as they are.
        """
        if element is None:
            return
        category = self.category
        if element.category is None or not isinstance(category, DocumentCategory):
            self._attach(element)
            return
        if category.has_sub_part(element.category):
            self._attach(element)
            return

        promoted = self._promote(element)
        if promoted is None:
            logger.warning(
                "Cannot promote %s into %s; attaching it unchanged",
                element.category,
                category,
            )
            self._attach(element)
        else:
            self._attach(promoted)

    def add_components(self, elements: Iterable[Any] | None) -> None:
        """Attach every directly acceptable element; drop the others.

        No promotion is attempted.  Non-node items, elements without a
        category, and every element when this container has no document
        category, are dropped.
        """
        if elements is None:
            return
        category = self.category
        components = self.components
        for element in elements:
            if (
                isinstance(element, NLGElement)
                and element.category is not None
                and isinstance(category, DocumentCategory)
                and category.has_sub_part(element.category)
            ):
                components.append(element)
                element.parent = self
            else:
                logger.debug(
                    "Dropping %r from bulk add to %s",
                    element.category
                    if isinstance(element, NLGElement)
                    else type(element).__name__,
                    category,
                )
        self.set_feature(COMPONENTS_FEATURE, components)

    def set_components(self, elements: Iterable[NLGElement]) -> None:
        """Replace the component list wholesale, without grammar checks."""
        self.set_feature(COMPONENTS_FEATURE, list(elements))

    def _attach(self, element: NLGElement) -> None:
        components = self.components
        components.append(element)
        element.parent = self
        self.set_feature(COMPONENTS_FEATURE, components)

    def _promote(self, element: NLGElement) -> NLGElement | None:
        """Wrap ``element`` until this container accepts it, or return None."""
        category = self.category
        if category.has_sub_part(element.category):
            return element
        if not isinstance(element, DocumentElement):
            sentence = DocumentElement(DocumentCategory.SENTENCE)
            sentence.add_component(element)
            logger.debug("Promoted %s into a new sentence", element.category)
            return self._promote(sentence)
        if element.category is DocumentCategory.SENTENCE:
            paragraph = DocumentElement(DocumentCategory.PARAGRAPH)
            paragraph.add_component(element)
            logger.debug("Promoted sentence into a new paragraph")
            return self._promote(paragraph)
        return None

    # ------------------------------------------------------------------
    # Removing components
    # ------------------------------------------------------------------

    def remove_component(self, element: NLGElement) -> bool:
        """Remove ``element`` from the immediate component list.

        The element itself is matched first; failing that, the first equal
        component is removed.  Promoted wrappers are not searched.

        Returns:
            True if a component was removed.
        """
        components = self.components
        for index, component in enumerate(components):
            if component is element:
                break
        else:
            try:
                index = components.index(element)
            except ValueError:
                return False
        del components[index]
        self.set_feature(COMPONENTS_FEATURE, components)
        return True

    def clear_components(self) -> None:
        self.remove_feature(COMPONENTS_FEATURE)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def tree_header(self) -> str:
        header = f"DocumentElement: category={self.category}"
        if self.realisation:
            header += f" realisation={self.realisation}"
        return header
