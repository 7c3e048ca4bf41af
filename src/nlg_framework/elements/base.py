"""NLGElement: base constituent with a schema-less feature store.

Every node of the realisation tree is an NLGElement.  A node holds:

- one category (any object satisfying the ElementCategory protocol, or None),
- a feature map from name to arbitrary value, the only channel through
  which independently-written pipeline stages communicate,
- a non-owning parent handle (``weakref.ref``), informational only,
- a realisation string, filled in late in the pipeline.

Children are never stored in a dedicated field.  Each concrete node kind
computes its ``children`` on demand from specific named features, so a stage
that rewrites a feature immediately changes the visible tree.

Coercion contract of the typed getters (none of them raise):

    absent            -> None (boolean getter: False; list getters: [])
    numeric -> number -> converted (bool is not a number)
    str -> number     -> parsed, None on failure
    str -> element    -> wrapped in a StringElement
    one value -> list -> one-element list
"""

from __future__ import annotations

import weakref
from collections.abc import Iterable, Sequence, Set
from enum import Enum
from numbers import Number
from typing import TYPE_CHECKING, Any

from nlg_framework.config import DEFAULT_PRINT_CONFIG
from nlg_framework.elements.printer import render_tree
from nlg_framework.features.names import Feature
from nlg_framework.features.values import NumberAgreement

if TYPE_CHECKING:
    from nlg_framework.config import TreePrintConfig

__all__ = ["NLGElement"]


def _is_collection(value: Any) -> bool:
    """True for list-like feature values (sequences and sets, never strings)."""
    return isinstance(value, (Sequence, Set)) and not isinstance(
        value, (str, bytes, bytearray)
    )


def _is_plain_string(value: Any) -> bool:
    # StrEnum members are str instances but name a vocabulary value, not text.
    return isinstance(value, str) and not isinstance(value, Enum)


def _is_number(value: Any) -> bool:
    return isinstance(value, Number) and not isinstance(value, bool)


class NLGElement:
    """A constituent of the realisation tree.

    The base class is usable on its own as a bare feature holder (it has no
    children); concrete kinds override ``children`` and ``tree_header``.

    Example::

        element = NLGElement()
        element.set_feature("number", 3)
        element.get_feature_as_string("number")   # "3"
        element.set_feature("number", None)
        element.has_feature("number")             # False
    """

    def __init__(self, category: Any = None) -> None:
        self._category: Any = category
        self._features: dict[str, Any] = {}
        self._parent_ref: weakref.ref[NLGElement] | None = None
        self._realisation: str | None = None

    # ------------------------------------------------------------------
    # Category
    # ------------------------------------------------------------------

    @property
    def category(self) -> Any:
        """The node's category, or None."""
        return self._category

    @category.setter
    def category(self, new_category: Any) -> None:
        self._category = new_category

    def is_a(self, category: Any) -> bool:
        """Return True if this node's category ``equal_to`` ``category``.

        A node without a category is only "a" ``None`` category.
        """
        if self._category is not None:
            return bool(self._category.equal_to(category))
        return category is None

    # ------------------------------------------------------------------
    # Feature store
    # ------------------------------------------------------------------

    @property
    def features(self) -> dict[str, Any]:
        """The live feature map.  Mutations are visible to every reader."""
        return self._features

    @property
    def feature_names(self) -> set[str]:
        """Snapshot of the names currently set on this node."""
        return set(self._features)

    def set_feature(self, name: str | None, value: Any) -> None:
        """Store ``value`` under ``name``; a ``None`` value deletes the entry.

        "Explicitly cleared" and "never set" are indistinguishable afterwards.
        A ``None`` name is ignored.
        """
        if name is None:
            return
        if value is None:
            self._features.pop(name, None)
        else:
            self._features[name] = value

    def get_feature(self, name: str | None) -> Any:
        """Return the stored value, or None when absent."""
        if name is None:
            return None
        return self._features.get(name)

    def has_feature(self, name: str | None) -> bool:
        return name is not None and name in self._features

    def remove_feature(self, name: str) -> None:
        self._features.pop(name, None)

    def clear_all_features(self) -> None:
        self._features.clear()

    # ------------------------------------------------------------------
    # Typed accessors
    # ------------------------------------------------------------------

    def get_feature_as_string(self, name: str) -> str | None:
        value = self.get_feature(name)
        return None if value is None else str(value)

    def get_feature_as_integer(self, name: str) -> int | None:
        """Return the feature as an ``int``.

        Numbers are truncated towards zero; strings are parsed as integers
        ("3.5" does not parse).  Anything else, including booleans, is None.
        """
        value = self.get_feature(name)
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        if _is_number(value):
            try:
                return int(value)
            except (TypeError, ValueError, OverflowError):
                return None
        if _is_plain_string(value):
            try:
                return int(value)
            except ValueError:
                return None
        return None

    def get_feature_as_long(self, name: str) -> int | None:
        """Same as ``get_feature_as_integer``; Python ints are unbounded."""
        return self.get_feature_as_integer(name)

    def get_feature_as_float(self, name: str) -> float | None:
        """Return the feature as a ``float``; strings are parsed, else None."""
        value = self.get_feature(name)
        if _is_number(value):
            try:
                return float(value)
            except (TypeError, ValueError, OverflowError):
                return None
        if _is_plain_string(value):
            try:
                return float(value)
            except ValueError:
                return None
        return None

    def get_feature_as_double(self, name: str) -> float | None:
        """Same as ``get_feature_as_float``; Python floats are doubles."""
        return self.get_feature_as_float(name)

    def get_feature_as_boolean(self, name: str) -> bool:
        """Return the feature as a ``bool``, defaulting to False.

        A stored bool is returned as-is; the string ``"true"`` (any case) is
        True.  Absent or any other value is False, never None.
        """
        value = self.get_feature(name)
        if isinstance(value, bool):
            return value
        if _is_plain_string(value):
            return value.strip().lower() == "true"
        return False

    def get_feature_as_element(self, name: str) -> NLGElement | None:
        """Return the feature as a node; a plain string becomes a StringElement."""
        return _as_element(self.get_feature(name))

    def get_feature_as_element_list(self, name: str) -> list[NLGElement]:
        """Return the feature as a list of nodes.

        Absent -> ``[]``; a single node -> ``[node]``; a collection -> its
        node members in their original order (other members are dropped).
        The returned list is new; store it back with ``set_feature`` to keep
        changes.
        """
        value = self.get_feature(name)
        if isinstance(value, NLGElement):
            return [value]
        if _is_collection(value):
            return [item for item in value if isinstance(item, NLGElement)]
        return []

    def get_feature_as_list(self, name: str) -> list[Any]:
        """Return the feature as a list: absent -> [], single -> [value]."""
        value = self.get_feature(name)
        if value is None:
            return []
        if _is_collection(value):
            return list(value)
        return [value]

    def get_feature_as_string_list(self, name: str) -> list[str]:
        """Return the feature as a list of strings, stringifying each member."""
        return [str(item) for item in self.get_feature_as_list(name)]

    # ------------------------------------------------------------------
    # Parent handle
    # ------------------------------------------------------------------

    @property
    def parent(self) -> NLGElement | None:
        """The node this one was last attached to, or None.

        Informational only: stages replace subtrees wholesale without updating
        it, and the handle does not keep the parent alive.
        """
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @parent.setter
    def parent(self, new_parent: NLGElement | None) -> None:
        self._parent_ref = None if new_parent is None else weakref.ref(new_parent)

    # ------------------------------------------------------------------
    # Realisation
    # ------------------------------------------------------------------

    @property
    def realisation(self) -> str:
        """The realised text with surrounding spaces trimmed; "" when unset.

        Trimming happens on read.  A value made only of spaces is discarded.
        """
        if self._realisation is not None and not self._realisation.strip(" "):
            self._realisation = None
        if self._realisation is None:
            return ""
        return self._realisation.strip(" ")

    @realisation.setter
    def realisation(self, realised: str | None) -> None:
        self._realisation = realised

    def matches_realisation(self, text: str | None) -> bool:
        """Compare ``text`` with the raw (untrimmed) realisation; None matches None."""
        if text is None or self._realisation is None:
            return text is None and self._realisation is None
        return text == self._realisation

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------

    @property
    def children(self) -> list[NLGElement]:
        """Direct constituents, recomputed from features on every access."""
        return []

    def tree_header(self) -> str:
        """One-line description used as this node's line in ``print_tree``."""
        return (
            f"{type(self).__name__}: category={self._category}, "
            f"features={format_features(self._features)}"
        )

    def print_tree(
        self,
        indent: str | None = None,
        config: TreePrintConfig | None = None,
    ) -> str:
        """Render this subtree for debugging.

        The header line comes first, then each child on its own branch; the
        last child uses the terminal marker.  Not a stable output format.
        """
        return render_tree(self, indent, config or DEFAULT_PRINT_CONFIG)

    # ------------------------------------------------------------------
    # Number convenience
    # ------------------------------------------------------------------

    def set_plural(self, is_plural: bool) -> None:
        self.set_feature(
            Feature.NUMBER,
            NumberAgreement.PLURAL if is_plural else NumberAgreement.SINGULAR,
        )

    def is_plural(self) -> bool:
        return self.get_feature(Feature.NUMBER) == NumberAgreement.PLURAL

    # ------------------------------------------------------------------
    # Dunder methods
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        # Category identity plus feature-map equality; children are compared
        # only through the features that hold them.
        if not isinstance(other, NLGElement):
            return NotImplemented
        return self._category is other._category and self._features == other._features

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(category={self._category!r}, "
            f"realisation={self._realisation!r}, features={self._features!r})"
        )


def _as_element(value: Any) -> NLGElement | None:
    from nlg_framework.elements.string import StringElement

    if isinstance(value, NLGElement):
        return value
    if _is_plain_string(value):
        return StringElement(value)
    return None


def _describe_value(value: Any) -> str:
    if isinstance(value, NLGElement):
        return f"<{type(value).__name__}>"
    if _is_collection(value):
        return "[" + ", ".join(_describe_value(item) for item in value) + "]"
    return str(value)


def format_features(features: dict[str, Any]) -> str:
    """Render a feature map as ``{name=value ...}`` sorted by name.

    Nested nodes are abbreviated to their kind; they appear as children in the
    printed tree.
    """
    items: Iterable[str] = (
        f"{name}={_describe_value(features[name])}" for name in sorted(features)
    )
    return "{" + " ".join(items) + "}"
