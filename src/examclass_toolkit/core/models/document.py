"""
Module: document

Purpose:
    Provides the Document dataclass - a complete Pandoc document
    (API version, metadata, top-level blocks). This is what the LaTeX
    filter reads from stdin and writes back to stdout.

Key Functions:
    - Document.iter_blocks(): Pre-order iteration over every block
    - Document.question_count: Number of question commands present
    - Document.to_dict() / Document.from_dict(): Pandoc JSON form

Dependencies:
    - dataclasses (std)
    - .blocks.Block

Used By:
    - core.utils.serialization
    - latex.pipeline
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterable, Iterator, Tuple

from .blocks import Block

DEFAULT_API_VERSION: Tuple[int, ...] = (1, 23, 1)

QUESTION_COMMANDS = ("\\question", "\\titledquestion")


@dataclass(frozen=True)
class Document:
    """
    Pandoc document (immutable).

    Attributes:
        blocks: Top-level blocks in document order
        meta: Document metadata, kept verbatim
        api_version: ``pandoc-api-version`` of the producer

    Example:
        >>> doc = Document(blocks=(Block.para("Hi"),))
        >>> doc.to_dict()["blocks"][0]["t"]
        'Para'
    """

    blocks: Tuple[Block, ...] = ()
    meta: Dict[str, Any] = field(default_factory=dict)
    api_version: Tuple[int, ...] = DEFAULT_API_VERSION

    def iter_blocks(self) -> Iterator[Block]:
        for block in self.blocks:
            yield from block.iter_all()

    @property
    def question_count(self) -> int:
        """
        Count emitted question commands.

        Only meaningful after the filter has run: before that the
        questions are still ``part`` Divs.
        """
        return sum(1 for b in self.iter_blocks() if b.raw_tex_matches(*QUESTION_COMMANDS))

    def with_blocks(self, blocks: Iterable[Block]) -> Document:
        return replace(self, blocks=tuple(blocks))

    def to_dict(self) -> dict:
        return {
            "pandoc-api-version": list(self.api_version),
            "meta": self.meta,
            "blocks": [b.to_dict() for b in self.blocks],
        }

    @classmethod
    def from_dict(cls, data: dict) -> Document:
        return cls(
            blocks=tuple(Block.from_dict(b) for b in data.get("blocks", [])),
            meta=dict(data.get("meta", {})),
            api_version=tuple(data.get("pandoc-api-version", DEFAULT_API_VERSION)),
        )

    def __repr__(self) -> str:
        version = ".".join(str(v) for v in self.api_version)
        return f"Document(api={version}, blocks={len(self.blocks)})"
