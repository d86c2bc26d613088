"""
Core Models Package

Immutable Pandoc block models shared by the filter and the editor bridge.

**DESIGN RATIONALE:**

All models in this package are frozen dataclasses. This ensures:
1. The filter never mutates its input document
2. Can be compared by value in tests
3. Easier to reason about data flow

Exam structure (question/part/subpart) is never stored on a block; it is
derived from nesting depth by ``examclass_toolkit.common.roles``.
"""

from .attrs import Attr
from .blocks import Block, CONTAINER_CLASS, SOLUTION_CLASSES
from .document import Document

__all__ = [
    "Attr",
    "Block",
    "CONTAINER_CLASS",
    "SOLUTION_CLASSES",
    "Document",
]
