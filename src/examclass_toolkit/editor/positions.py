"""
Module: editor.positions

Purpose:
    Resolves a flat document position into its ancestor path, so that
    commands can ask "which part is the cursor in, at what index of its
    parent, and where does it start".

Key Functions:
    - resolve(doc, pos): Build a ResolvedPos

Key Classes:
    - ResolvedPos: Position with depth-indexed ancestor queries

Used By:
    - editor.commands
    - editor.state
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .nodes import Node, Path


@dataclass(frozen=True)
class _Step:
    node: Node
    index: int
    offset: int  # absolute position of child ``index`` within ``node``


@dataclass(frozen=True)
class ResolvedPos:
    """
    A position together with the chain of nodes enclosing it.

    Depth 0 is the document; ``depth`` is the innermost node whose
    content contains the position.

    Attributes:
        pos: Absolute position
        steps: One step per depth, from the document down
        parent_offset: Offset of ``pos`` inside the innermost node
    """

    pos: int
    steps: Tuple[_Step, ...]
    parent_offset: int

    @property
    def depth(self) -> int:
        return len(self.steps) - 1

    @property
    def parent(self) -> Node:
        return self.node(self.depth)

    def node(self, depth: int) -> Node:
        """Ancestor node at ``depth``."""
        return self.steps[depth].node

    def index(self, depth: int) -> int:
        """Index into ``node(depth)`` of the child on the path."""
        return self.steps[depth].index

    def before(self, depth: int) -> int:
        """Position just before ``node(depth)``."""
        if depth < 1:
            raise ValueError("The document has no position before it")
        return self.steps[depth - 1].offset

    def path_to(self, depth: int) -> Path:
        """Child-index path from the document to ``node(depth)``."""
        return tuple(self.steps[d].index for d in range(depth))

    def find_depth(self, predicate) -> Optional[int]:
        """Innermost depth (>= 1) whose node satisfies ``predicate``."""
        for depth in range(self.depth, 0, -1):
            if predicate(self.node(depth)):
                return depth
        return None

    def __repr__(self) -> str:
        return f"ResolvedPos({self.pos}, depth={self.depth})"


def resolve(doc: Node, pos: int) -> ResolvedPos:
    """
    Resolve ``pos`` within ``doc``.

    Raises:
        ValueError: If ``pos`` is outside the document
    """
    if not 0 <= pos <= doc.content_size:
        raise ValueError(f"Position {pos} out of range (0..{doc.content_size})")

    steps = []
    node = doc
    start = 0
    parent_offset = pos
    while True:
        index, offset = node.find_index(parent_offset)
        remainder = parent_offset - offset
        steps.append(_Step(node, index, start + offset))
        if not remainder:
            break
        node = node.children[index]
        if node.is_text:
            break
        parent_offset = remainder - 1
        start += offset + 1

    return ResolvedPos(pos, tuple(steps), parent_offset)
