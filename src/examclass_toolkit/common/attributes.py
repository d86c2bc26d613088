"""
Module: common.attributes

Purpose:
    Normalization of container/solution attributes. The same functions
    are used when emitting LaTeX and when reading or writing the editor
    tree, so a value means the same thing on both sides.

Key Functions:
    - normalize_title(): Trimmed title, None when blank
    - normalize_points(): Plain integer/decimal points, None otherwise
    - normalize_space(): Trimmed answer-space length, None when blank

Dependencies:
    - re (std)

Used By:
    - latex.transformer
    - editor.bridge
    - editor.commands
"""

from __future__ import annotations

import re
from typing import Any, Optional

# Attribute keys accepted for points/space, in lookup order.
POINTS_KEYS = ("points", "point", "pts", "p")
SPACE_KEYS = ("space", "data-space", "sp")

POINTS_PATTERN = re.compile(r"^[0-9]+(\.[0-9]+)?$")


def _trimmed(raw: Any) -> Optional[str]:
    if raw is None:
        return None
    if not isinstance(raw, str):
        raw = str(raw)
    return raw.strip()


def normalize_title(raw: Any) -> Optional[str]:
    """
    Normalize a container title.

    Returns:
        The trimmed title, or None if missing or whitespace only.

    Example:
        >>> normalize_title("  Warm-up ")
        'Warm-up'
        >>> normalize_title("   ") is None
        True
    """
    value = _trimmed(raw)
    return value or None


def normalize_points(raw: Any) -> Optional[str]:
    """
    Normalize a points value.

    Only unsigned integers or decimals (``3``, ``2.5``) are accepted.
    Anything carrying a unit, sign, letter or stray punctuation is
    dropped rather than reported.

    Example:
        >>> normalize_points(" 2.5 ")
        '2.5'
        >>> normalize_points("3in") is None
        True
    """
    value = _trimmed(raw)
    if value and POINTS_PATTERN.match(value):
        return value
    return None


def normalize_space(raw: Any) -> Optional[str]:
    """Trim an answer-space length; units are not validated here."""
    value = _trimmed(raw)
    return value or None
