"""
Module: blocks

Purpose:
    Provides the Block dataclass - an immutable Pandoc block node. Div
    and BlockQuote are composite (their children are blocks), RawBlock
    keeps its format/text, and every other block keeps its Pandoc
    content verbatim so it can pass through the filter untouched.

Key Functions:
    - Block.div() / Block.raw_tex() / Block.para(): Factories
    - Block.is_container / Block.is_solution: Exam structure predicates
    - Block.iter_all(): Pre-order iteration
    - Block.to_dict() / Block.from_dict(): Pandoc JSON form

Dependencies:
    - dataclasses (std)
    - typing (std)
    - .attrs.Attr

Used By:
    - core.models.document.Document
    - latex.transformer / latex.preface
    - editor.bridge
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Iterable, Iterator, Optional, Tuple

from .attrs import Attr

# Marker class (or identifier) that tags a Div as a question/part container.
CONTAINER_CLASS = "part"
SOLUTION_CLASSES = ("solution", "examsolution")

COMPOSITE_TYPES = ("Div", "BlockQuote")


@dataclass(frozen=True, slots=True)
class Block:
    """
    Pandoc block node (immutable tree structure).

    Attributes:
        t: Pandoc block type ("Div", "RawBlock", "Para", ...)
        attr: Attribute triple (Div only)
        children: Child blocks (Div and BlockQuote only)
        format: Raw format (RawBlock only), e.g. "tex"
        text: Raw text (RawBlock only)
        payload: Verbatim Pandoc ``c`` value for every other block type

    Invariants:
        - Only composite types carry children
        - Only Div carries attr

    Example:
        >>> q = Block.div([Block.para("Hello")], classes=["part"])
        >>> q.is_container
        True
    """

    t: str
    attr: Optional[Attr] = None
    children: Tuple[Block, ...] = ()
    format: str = ""
    text: str = ""
    payload: Any = None

    def __post_init__(self) -> None:
        if self.children and self.t not in COMPOSITE_TYPES:
            raise ValueError(f"{self.t} blocks cannot have child blocks")
        if self.attr is not None and self.t != "Div":
            raise ValueError(f"{self.t} blocks do not carry attributes")

    # ─────────────────────────────────────────────────────────────────────────
    # Factories
    # ─────────────────────────────────────────────────────────────────────────

    @classmethod
    def div(
        cls,
        children: Iterable[Block] = (),
        *,
        identifier: str = "",
        classes: Iterable[str] = (),
        attributes: Iterable[Tuple[str, str]] = (),
    ) -> Block:
        attr = Attr(identifier, tuple(classes), tuple(tuple(p) for p in attributes))
        return cls("Div", attr=attr, children=tuple(children))

    @classmethod
    def raw_tex(cls, text: str) -> Block:
        """Raw LaTeX block - the token type emitted by the filter."""
        return cls("RawBlock", format="tex", text=text)

    @classmethod
    def para(cls, text: str) -> Block:
        """Paragraph of plain words (Str/Space inlines)."""
        return cls("Para", payload=text_to_inlines(text))

    # ─────────────────────────────────────────────────────────────────────────
    # Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def is_composite(self) -> bool:
        return self.t in COMPOSITE_TYPES

    @property
    def is_container(self) -> bool:
        """Div tagged with class ``part`` or identifier ``part``."""
        if self.t != "Div" or self.attr is None:
            return False
        return self.attr.has_class(CONTAINER_CLASS) or self.attr.identifier == CONTAINER_CLASS

    @property
    def is_solution(self) -> bool:
        """Div tagged ``solution``/``examsolution`` (other classes ignored)."""
        if self.t != "Div" or self.attr is None:
            return False
        return any(self.attr.has_class(name) for name in SOLUTION_CLASSES)

    @property
    def is_raw_tex(self) -> bool:
        return self.t == "RawBlock" and self.format in ("tex", "latex")

    def raw_tex_matches(self, *prefixes: str) -> bool:
        """True for a raw TeX block whose text starts with any prefix."""
        return self.is_raw_tex and self.text.startswith(prefixes)

    # ─────────────────────────────────────────────────────────────────────────
    # Iteration / Updates
    # ─────────────────────────────────────────────────────────────────────────

    def iter_all(self) -> Iterator[Block]:
        """Iterate over this block and all descendants (pre-order)."""
        yield self
        for child in self.children:
            yield from child.iter_all()

    def with_children(self, children: Iterable[Block]) -> Block:
        """Copy of this block with new children, same type and attributes."""
        return replace(self, children=tuple(children))

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> dict:
        """Serialize to a Pandoc JSON block."""
        if self.t == "Div":
            attr = self.attr or Attr()
            return {"t": "Div", "c": [attr.to_list(), [b.to_dict() for b in self.children]]}
        if self.t == "BlockQuote":
            return {"t": "BlockQuote", "c": [b.to_dict() for b in self.children]}
        if self.t == "RawBlock":
            return {"t": "RawBlock", "c": [self.format, self.text]}
        d: dict = {"t": self.t}
        if self.payload is not None:
            d["c"] = self.payload
        return d

    @classmethod
    def from_dict(cls, data: dict) -> Block:
        """
        Deserialize from a Pandoc JSON block.

        Raises:
            ValueError: If a composite block is malformed
        """
        t = data["t"]
        c = data.get("c")
        if t == "Div":
            if not isinstance(c, list) or len(c) != 2:
                raise ValueError(f"Malformed Div content: {c!r}")
            return cls(
                "Div",
                attr=Attr.from_list(c[0]),
                children=tuple(cls.from_dict(b) for b in c[1]),
            )
        if t == "BlockQuote":
            return cls("BlockQuote", children=tuple(cls.from_dict(b) for b in c or ()))
        if t == "RawBlock":
            fmt, text = c
            return cls("RawBlock", format=fmt, text=text)
        return cls(t, payload=c)

    def __repr__(self) -> str:
        if self.is_raw_tex:
            return f"Block(RawBlock {self.text!r})"
        child_str = f", children={len(self.children)}" if self.children else ""
        return f"Block({self.t}{child_str})"


def text_to_inlines(text: str) -> list:
    """Split plain text into Pandoc Str/Space inlines."""
    inlines: list = []
    for i, word in enumerate(text.split(" ")):
        if i:
            inlines.append({"t": "Space"})
        if word:
            inlines.append({"t": "Str", "c": word})
    return inlines


PLAIN_INLINE_TYPES = ("Str", "Space", "SoftBreak")


def inlines_to_text(inlines: Iterable[dict]) -> Optional[str]:
    """
    Flatten plain inlines back to text.

    Returns:
        The text, or None if any inline is not plain (emphasis, math,
        raw inline, ...), since it could not be rebuilt from text alone.
    """
    parts = []
    for inline in inlines:
        kind = inline.get("t")
        if kind not in PLAIN_INLINE_TYPES:
            return None
        parts.append(inline["c"] if kind == "Str" else " ")
    return "".join(parts)
