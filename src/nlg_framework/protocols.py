"""ElementCategory Protocol shared by every category family.

Categories come in three closed families (document structure, lexical,
phrase).  They never inherit from a common base class: any object with
conformant ``equal_to`` and ``has_sub_part`` methods passes ``isinstance``
checks, so pipeline stages can compare categories across families.

Example::

    from nlg_framework.categories import DocumentCategory
    from nlg_framework.protocols import ElementCategory

    assert isinstance(DocumentCategory.SENTENCE, ElementCategory)  # True
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ElementCategory(Protocol):
    """Structural protocol for constituent categories.

    ``equal_to`` must accept any object (another category, a plain string,
    ``None``) and never raise.  ``has_sub_part`` answers whether an instance
    of this category may directly contain an instance of ``category``.
    """

    def equal_to(self, other: Any) -> bool: ...

    def has_sub_part(self, category: Any) -> bool: ...
