"""Diagnostic tree printer shared by every node kind.

Output shape (default markers)::

    PhraseElement: category=clause, features={...}
     |-PhraseElement: category=noun_phrase, features={...}
     | \\-StringElement: content="dog", features={}
     \\-PhraseElement: category=verb_phrase, features={...}

Each node contributes its ``tree_header()`` line; children come from the
node's ``children`` property, so the printout always reflects the current
features.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from nlg_framework.config import TreePrintConfig
    from nlg_framework.elements.base import NLGElement

__all__ = ["render_tree"]


def render_tree(
    element: NLGElement,
    indent: str | None,
    config: TreePrintConfig,
) -> str:
    """Render ``element`` and its descendants, one node per line.

    Args:
        element: Root of the subtree to print.
        indent:  Prefix accumulated from the ancestors; None at the root.
        config:  Branch markers.

    Returns:
        The rendered subtree, every line terminated by a newline.
    """
    prefix = indent or ""
    parts = [element.tree_header(), "\n"]

    children = element.children
    last_index = len(children) - 1
    for index, child in enumerate(children):
        if index == last_index:
            marker, nested = config.last_branch, config.last_continuation
        else:
            marker, nested = config.branch, config.continuation
        parts.append(prefix + marker)
        parts.append(render_tree(child, prefix + nested, config))

    return "".join(parts)
