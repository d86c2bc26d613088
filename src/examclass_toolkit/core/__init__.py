"""
examclass-toolkit Core Package

Shared data models, schema validation and serialization.

**DESIGN NOTES:**

1. **Immutable Data Models**
   - Frozen dataclasses, new instances created for any change

2. **Derived Roles (Never Stored)**
   - Whether a ``part`` Div is a question, part, subpart or subsubpart
     is computed from its depth each time it is needed

3. **Verbatim Pass-Through**
   - Blocks the toolkit does not understand keep their Pandoc content
     unchanged, so a filter run only touches exam structure
"""

from .models import Attr, Block, Document

__all__ = [
    "Attr",
    "Block",
    "Document",
]
