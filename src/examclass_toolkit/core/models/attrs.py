"""
Module: attrs

Purpose:
    Provides the Attr dataclass - the Pandoc attribute triple
    (identifier, classes, key/value pairs) carried by Div blocks.

Key Functions:
    - Attr.get(key): Look up a key/value attribute
    - Attr.get_first(keys): First present attribute among aliases
    - Attr.has_class(name): Class membership
    - Attr.to_list() / Attr.from_list(): Pandoc JSON form

Dependencies:
    - dataclasses (std)
    - typing (std)

Used By:
    - core.models.blocks.Block
    - editor.bridge
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Optional, Tuple


@dataclass(frozen=True, slots=True)
class Attr:
    """
    Pandoc attribute triple (immutable).

    Attributes:
        identifier: Element id, empty string when absent
        classes: Class names in document order
        attributes: Ordered (key, value) pairs

    Example:
        >>> attr = Attr.from_list(["", ["part"], [["points", "3"]]])
        >>> attr.has_class("part"), attr.get("points")
        (True, '3')
    """

    identifier: str = ""
    classes: Tuple[str, ...] = ()
    attributes: Tuple[Tuple[str, str], ...] = ()

    def __post_init__(self) -> None:
        for pair in self.attributes:
            if len(pair) != 2:
                raise ValueError(f"Attribute pairs must be (key, value), got {pair!r}")

    def has_class(self, name: str) -> bool:
        return name in self.classes

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Value of the first attribute named ``key``."""
        for k, v in self.attributes:
            if k == key:
                return v
        return default

    def get_first(self, keys: Iterable[str]) -> Optional[str]:
        """
        Value of the first key in ``keys`` that is present.

        Keys are tried in the order given, so aliases can be listed in
        priority order (e.g. ``points`` before ``pts``).
        """
        for key in keys:
            value = self.get(key)
            if value is not None:
                return value
        return None

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_list(self) -> list:
        """Serialize to the Pandoc JSON ``[id, [classes], [[k, v]]]`` form."""
        return [
            self.identifier,
            list(self.classes),
            [[k, v] for k, v in self.attributes],
        ]

    @classmethod
    def from_list(cls, data: Any) -> Attr:
        """
        Deserialize from the Pandoc JSON form.

        Raises:
            ValueError: If ``data`` is not an attribute triple
        """
        if not isinstance(data, (list, tuple)) or len(data) != 3:
            raise ValueError(f"Expected Pandoc attribute triple, got {data!r}")
        identifier, classes, attributes = data
        return cls(
            identifier=identifier or "",
            classes=tuple(classes or ()),
            attributes=tuple((k, v) for k, v in (attributes or ())),
        )

    def __repr__(self) -> str:
        return f"Attr({self.identifier!r}, {list(self.classes)!r}, {dict(self.attributes)!r})"
