"""TreePrintConfig for the diagnostic tree printer.

TreePrintConfig is a frozen (immutable) dataclass holding the markers that
``NLGElement.print_tree`` draws in front of each child.  The printed tree is a
debugging aid, not a stable output format; formatters live outside this
package.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["DEFAULT_PRINT_CONFIG", "TreePrintConfig"]


@dataclass(frozen=True, slots=True)
class TreePrintConfig:
    """Immutable marker set for ``print_tree``.

    Attributes:
        branch: Drawn before every child except the last.
        continuation: Prefix for the nested lines of a non-last child
            (keeps the vertical bar running).  Same width as ``branch``.
        last_branch: Drawn before the last child.  Must differ from
            ``branch`` so the end of a child list is visible.
        last_continuation: Prefix for the nested lines of the last child.
            Same width as ``last_branch``.
    """

    branch: str = " |-"
    continuation: str = " | "
    last_branch: str = " \\-"
    last_continuation: str = "   "

    def __post_init__(self) -> None:
        for name in ("branch", "continuation", "last_branch", "last_continuation"):
            if not getattr(self, name):
                msg = f"{name} must be a non-empty marker"
                raise ValueError(msg)
        if self.last_branch == self.branch:
            msg = f"last_branch must differ from branch, both are {self.branch!r}"
            raise ValueError(msg)
        if len(self.branch) != len(self.continuation):
            msg = (
                f"branch and continuation must have the same width, got "
                f"{self.branch!r} and {self.continuation!r}"
            )
            raise ValueError(msg)
        if len(self.last_branch) != len(self.last_continuation):
            msg = (
                f"last_branch and last_continuation must have the same width, got "
                f"{self.last_branch!r} and {self.last_continuation!r}"
            )
            raise ValueError(msg)


DEFAULT_PRINT_CONFIG = TreePrintConfig()
