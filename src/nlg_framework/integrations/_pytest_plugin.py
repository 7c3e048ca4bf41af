"""pytest plugin for nlg-framework.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.
"""

from __future__ import annotations

from typing import Any

import pytest

from nlg_framework.diff import compare_trees
from nlg_framework.elements.base import NLGElement


@pytest.fixture(scope="session")
def assert_tree_equivalent() -> Any:
    """Fixture that returns a callable tree equivalence asserter.

    Session-scoped: the returned callable keeps no state between calls.

    Usage in tests::

        def test_stage_keeps_shape(assert_tree_equivalent):
            assert_tree_equivalent(stage.realise(tree), expected)

    Returns:
        A callable ``_assert(actual, expected) -> None`` that raises
        ``AssertionError`` when ``compare_trees`` finds a mismatch.
    """

    def _assert(actual: NLGElement, expected: NLGElement) -> None:
        """Assert that two constituent trees are structurally equivalent.

        Raises:
            AssertionError: With the mismatching paths and both printed trees.
        """
        result = compare_trees(actual, expected)
        if not result.equivalent:
            raise AssertionError(
                f"Trees not equivalent at {result.mismatched_paths}\n"
                f"  actual ({result.left_size} nodes):\n{actual.print_tree()}"
                f"  expected ({result.right_size} nodes):\n{expected.print_tree()}"
            )

    return _assert
