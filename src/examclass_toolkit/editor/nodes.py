"""
Module: editor.nodes

Purpose:
    Provides the Node dataclass - an immutable node of the live editing
    tree - and the pure splice helpers used by the structural commands.

    Positions are flat integer offsets: a text node is as long as its
    text, an atom (opaque block) counts 1, and every other node counts
    its content plus one token for its opening and one for its closing
    boundary. The document counts only its content, so the first
    top-level position is 0.

Key Functions:
    - Node.part() / Node.solution() / Node.paragraph(): Factories
    - Node.node_size / Node.content_size: Position arithmetic
    - node_at(), position_before(): Address nodes by index path
    - remove_node(), insert_node(), replace_node(): Pure splices

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - editor.positions, editor.commands, editor.structure, editor.bridge
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Iterable, Iterator, Optional, Sequence, Tuple

Path = Tuple[int, ...]


class NodeType(str, Enum):
    """Kind of editor node."""
    DOC = "doc"
    PART = "part"
    SOLUTION = "solution"
    PARAGRAPH = "paragraph"
    TEXT = "text"
    BLOCK = "block"  # Opaque Pandoc block kept verbatim

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Node:
    """
    Editor tree node (immutable).

    Attributes:
        type: Node kind
        children: Child nodes (doc, part, solution, paragraph)
        text: Text content (text nodes only)
        identifier: Pandoc identifier (part, solution)
        classes: Extra Pandoc classes besides the role marker
        keyvalue: Extra Pandoc key/values besides title/points/space
        title: Part title, stored at every level
        points: Part points
        space: Solution answer space
        collapsed: Solution presentation flag
        payload: Verbatim Pandoc block (opaque block nodes only)

    Invariants:
        - Text nodes have no children; opaque blocks have neither
          children nor text
        - Paragraphs contain only text nodes
    """

    type: NodeType
    children: Tuple[Node, ...] = ()
    text: str = ""
    identifier: str = ""
    classes: Tuple[str, ...] = ()
    keyvalue: Tuple[Tuple[str, str], ...] = ()
    title: str = ""
    points: str = ""
    space: str = ""
    collapsed: bool = False
    payload: Any = None

    def __post_init__(self) -> None:
        if self.type in (NodeType.TEXT, NodeType.BLOCK) and self.children:
            raise ValueError(f"{self.type} nodes cannot have children")
        if self.type == NodeType.PARAGRAPH:
            for child in self.children:
                if child.type != NodeType.TEXT:
                    raise ValueError("Paragraphs can only contain text")

    # ─────────────────────────────────────────────────────────────────────────
    # Factories
    # ─────────────────────────────────────────────────────────────────────────

    @classmethod
    def doc(cls, children: Iterable[Node] = ()) -> Node:
        return cls(NodeType.DOC, children=tuple(children))

    @classmethod
    def part(cls, children: Iterable[Node] = (), **attrs: Any) -> Node:
        return cls(NodeType.PART, children=tuple(children), **attrs)

    @classmethod
    def solution(cls, children: Iterable[Node] = (), **attrs: Any) -> Node:
        return cls(NodeType.SOLUTION, children=tuple(children), **attrs)

    @classmethod
    def paragraph(cls, text: str = "") -> Node:
        children = (cls(NodeType.TEXT, text=text),) if text else ()
        return cls(NodeType.PARAGRAPH, children=children)

    @classmethod
    def block(cls, payload: dict) -> Node:
        return cls(NodeType.BLOCK, payload=payload)

    # ─────────────────────────────────────────────────────────────────────────
    # Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def is_text(self) -> bool:
        return self.type == NodeType.TEXT

    @property
    def is_atom(self) -> bool:
        return self.type == NodeType.BLOCK

    @property
    def is_part(self) -> bool:
        return self.type == NodeType.PART

    @property
    def is_solution(self) -> bool:
        return self.type == NodeType.SOLUTION

    @property
    def is_textblock(self) -> bool:
        return self.type == NodeType.PARAGRAPH

    @property
    def content_size(self) -> int:
        if self.is_text:
            return len(self.text)
        return sum(child.node_size for child in self.children)

    @property
    def node_size(self) -> int:
        """Number of positions this node spans in its parent."""
        if self.is_text:
            return len(self.text)
        if self.is_atom:
            return 1
        if self.type == NodeType.DOC:
            return self.content_size
        return self.content_size + 2

    @property
    def text_content(self) -> str:
        if self.is_text:
            return self.text
        return "".join(child.text_content for child in self.children)

    def find_index(self, offset: int) -> Tuple[int, int]:
        """
        Child index at a content offset.

        Returns:
            (index, child_start): the child that contains ``offset`` or
            starts at it; an offset at a child's end belongs to the next
            child, and the content end gives ``(len(children), size)``.
        """
        pos = 0
        for index, child in enumerate(self.children):
            end = pos + child.node_size
            if end > offset:
                return index, pos
            pos = end
        return len(self.children), pos

    def descendants(self) -> Iterator[Tuple[Node, int, Tuple[Node, ...]]]:
        """
        Iterate over all descendants (pre-order).

        Yields:
            (node, position_before_node, ancestors) where ancestors runs
            from this node down to the descendant's parent
        """
        yield from self._descendants(0 if self.type == NodeType.DOC else 1, (self,))

    def _descendants(self, start: int, ancestors: Tuple[Node, ...]):
        pos = start
        for child in self.children:
            yield child, pos, ancestors
            if child.children:
                yield from child._descendants(pos + 1, ancestors + (child,))
            pos += child.node_size

    def with_children(self, children: Iterable[Node]) -> Node:
        return replace(self, children=tuple(children))

    def __repr__(self) -> str:
        if self.is_text:
            return f"Node(text {self.text!r})"
        label = f" {self.title!r}" if self.title else ""
        child_str = f", children={len(self.children)}" if self.children else ""
        return f"Node({self.type.value}{label}{child_str})"


# ─────────────────────────────────────────────────────────────────────────────
# Path-addressed splices
# ─────────────────────────────────────────────────────────────────────────────

def node_at(root: Node, path: Sequence[int]) -> Node:
    """Node reached by following child indices from ``root``."""
    node = root
    for index in path:
        node = node.children[index]
    return node


def position_before(root: Node, path: Sequence[int]) -> int:
    """
    Absolute position just before the node at ``path``.

    ``root`` must be the document node.
    """
    pos = 0
    node = root
    for level, index in enumerate(path):
        if level:
            pos += 1  # opening boundary of the enclosing node
        pos += sum(child.node_size for child in node.children[:index])
        node = node.children[index]
    return pos


def replace_node(root: Node, path: Sequence[int], new: Optional[Node]) -> Node:
    """
    Copy of ``root`` with the node at ``path`` replaced.

    Passing ``None`` removes the node instead.
    """
    if not path:
        raise ValueError("Cannot replace the root node")
    index, rest = path[0], path[1:]
    children = list(root.children)
    if rest:
        children[index] = replace_node(children[index], rest, new)
    elif new is None:
        del children[index]
    else:
        children[index] = new
    return root.with_children(children)


def remove_node(root: Node, path: Sequence[int]) -> Tuple[Node, Node]:
    """
    Remove the node at ``path``.

    Returns:
        (new_root, removed_node)
    """
    removed = node_at(root, path)
    return replace_node(root, path, None), removed


def insert_node(root: Node, parent_path: Sequence[int], index: int, node: Node) -> Node:
    """Copy of ``root`` with ``node`` inserted as child ``index`` of ``parent_path``."""
    parent = node_at(root, parent_path)
    if not 0 <= index <= len(parent.children):
        raise IndexError(f"Insert index {index} out of range for {parent!r}")
    children = list(parent.children)
    children.insert(index, node)
    updated = parent.with_children(children)
    if not parent_path:
        return updated
    return replace_node(root, parent_path, updated)
