"""
Module: editor.structure

Purpose:
    Derives the structural level of every part in the live tree. Levels
    are never stored on nodes; they are recomputed from the ancestor
    chain with the same resolver the LaTeX filter uses, so a part shown
    as a subpart in the editor is emitted as ``\\subpart``.

Key Functions:
    - structure_levels(): Level and role for every part in a document
    - part_level(): Level of the part at an index path
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from examclass_toolkit.common.roles import Role, container_depth, role_for_depth
from .nodes import Node, node_at


def _is_part(node: Node) -> bool:
    return node.is_part


@dataclass(frozen=True)
class StructureLevel:
    """
    Derived level of one part.

    Attributes:
        pos: Position before the part
        end: Position after the part
        level: Unclamped container depth (1 = question)
        role: Role for the level (clamped)
    """
    pos: int
    end: int
    level: int
    role: Role


def structure_levels(doc: Node) -> List[StructureLevel]:
    """
    Compute levels for every part, in document order.

    Example:
        >>> doc = Node.doc([Node.part([Node.part([Node.paragraph("x")])])])
        >>> [s.role.value for s in structure_levels(doc)]
        ['question', 'part']
    """
    levels = []
    for node, pos, ancestors in doc.descendants():
        if node.is_part:
            level = container_depth(ancestors + (node,), _is_part)
            levels.append(StructureLevel(pos, pos + node.node_size, level, role_for_depth(level)))
    return levels


def part_level(doc: Node, path: Sequence[int]) -> int:
    """Number of parts on the chain from ``doc`` to the node at ``path``."""
    chain = [node_at(doc, path[:k]) for k in range(len(path) + 1)]
    return container_depth(chain, _is_part)
