"""Structural comparison of two constituent trees.

``compare_trees`` walks both trees through their ``children`` (so it sees
exactly what the tree printer shows) and reports every position where they
disagree.  Two nodes agree when they have the same concrete kind, the same
category, the same base form and realisation, the same non-structural
features and the same number of children.  Features holding nodes are not
compared directly; those nodes are reached as children instead.

Positions are child-index paths: ``"/"`` is the root, ``"/0/2"`` is the
third child of the root's first child.

Example::

    result = compare_trees(expected_tree, stage_output)
    if not result.equivalent:
        print(result.mismatched_paths)   # ["/1/0"]
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from nlg_framework.elements.base import NLGElement
from nlg_framework.elements.word import WordElement

__all__ = ["TreeComparison", "compare_trees"]


@dataclass(frozen=True, slots=True)
class TreeComparison:
    """Result of a ``compare_trees`` call.

    Attributes:
        equivalent: True when no position mismatches.
        mismatched_paths: Child-index paths where the trees disagree, in
            depth-first order.  A node whose children differ in number is
            reported once; its common children are still compared.
        left_size: Number of nodes in the left tree.
        right_size: Number of nodes in the right tree.
    """

    equivalent: bool
    mismatched_paths: list[str]
    left_size: int
    right_size: int


def _holds_nodes(value: Any) -> bool:
    if isinstance(value, NLGElement):
        return True
    if isinstance(value, (list, tuple, set, frozenset)):
        return any(isinstance(item, NLGElement) for item in value)
    return False


def _plain_features(element: NLGElement) -> dict[str, Any]:
    return {
        name: value
        for name, value in element.features.items()
        if not _holds_nodes(value)
    }


def _node_matches(left: NLGElement, right: NLGElement) -> bool:
    if type(left) is not type(right):
        return False
    if left.category is not right.category:
        return False
    if left.realisation != right.realisation:
        return False
    if isinstance(left, WordElement) and isinstance(right, WordElement):
        if left.base_form != right.base_form or left.id != right.id:
            return False
    if _plain_features(left) != _plain_features(right):
        return False
    return len(left.children) == len(right.children)


def _size(element: NLGElement) -> int:
    return 1 + sum(_size(child) for child in element.children)


def _join(path: str, index: int) -> str:
    return f"{path.rstrip('/')}/{index}"


def _walk(left: NLGElement, right: NLGElement, path: str, out: list[str]) -> None:
    if not _node_matches(left, right):
        out.append(path)
    for index, (left_child, right_child) in enumerate(
        zip(left.children, right.children)
    ):
        _walk(left_child, right_child, _join(path, index), out)


def compare_trees(left: NLGElement, right: NLGElement) -> TreeComparison:
    """Compare two trees position by position.

    Args:
        left:  The first tree, typically the expected one.
        right: The second tree.

    Returns:
        A TreeComparison listing every mismatching position.

    Raises:
        TypeError: If either argument is not an NLGElement.
    """
    for name, value in (("left", left), ("right", right)):
        if not isinstance(value, NLGElement):
            msg = f"{name} must be an NLGElement, got {type(value).__name__}"
            raise TypeError(msg)

    mismatched: list[str] = []
    _walk(left, right, "/", mismatched)
    return TreeComparison(
        equivalent=not mismatched,
        mismatched_paths=mismatched,
        left_size=_size(left),
        right_size=_size(right),
    )
