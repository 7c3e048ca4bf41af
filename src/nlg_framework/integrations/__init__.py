"""Integrations subpackage for nlg-framework.

Contains the pytest plugin (auto-discovered via the pytest11 entry point).
It is not imported here, so the package loads without pytest installed.
"""

from __future__ import annotations

__all__: list[str] = []
