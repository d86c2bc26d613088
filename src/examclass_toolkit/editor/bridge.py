"""
Module: editor.bridge

Purpose:
    Converts between the Pandoc block model and the live editing tree.
    Container Divs become parts, solution Divs become solutions, plain
    paragraphs become editable paragraphs, and every other block is kept
    verbatim as an opaque node so nothing is lost on the way back.

Key Functions:
    - block_to_node() / node_to_block(): One block
    - document_to_editor() / editor_to_blocks(): Whole block lists
    - state_from_document() / document_from_state(): Document-level glue

Used By:
    - Applications loading a document for interactive editing
"""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, List, Optional

from examclass_toolkit.common.attributes import (
    POINTS_KEYS,
    SPACE_KEYS,
    normalize_points,
    normalize_space,
    normalize_title,
)
from examclass_toolkit.core.models import CONTAINER_CLASS, SOLUTION_CLASSES, Block, Document
from examclass_toolkit.core.models.blocks import inlines_to_text
from .nodes import Node, NodeType
from .state import EditorState

COLLAPSED_CLASS = "collapsed"

_PART_KEYS = ("title",) + POINTS_KEYS


def block_to_node(block: Block) -> Node:
    if block.is_container:
        attr = block.attr
        return Node.part(
            (block_to_node(child) for child in block.children),
            identifier=attr.identifier,
            classes=tuple(c for c in attr.classes if c != CONTAINER_CLASS),
            keyvalue=tuple(kv for kv in attr.attributes if kv[0] not in _PART_KEYS),
            title=normalize_title(attr.get("title")) or "",
            points=normalize_points(attr.get_first(POINTS_KEYS)) or "",
        )

    if block.is_solution:
        attr = block.attr
        dropped = SOLUTION_CLASSES + (COLLAPSED_CLASS,)
        return Node.solution(
            (block_to_node(child) for child in block.children),
            identifier=attr.identifier,
            classes=tuple(c for c in attr.classes if c not in dropped),
            keyvalue=tuple(kv for kv in attr.attributes if kv[0] not in SPACE_KEYS),
            space=normalize_space(attr.get_first(SPACE_KEYS)) or "",
            collapsed=attr.has_class(COLLAPSED_CLASS),
        )

    if block.t == "Para":
        text = inlines_to_text(block.payload or [])
        if text is not None:
            return Node.paragraph(text)

    return Node.block(block.to_dict())


def node_to_block(node: Node) -> Block:
    if node.type == NodeType.PART:
        attributes = []
        if node.title:
            attributes.append(("title", node.title))
        if node.points:
            attributes.append(("points", node.points))
        return Block.div(
            [node_to_block(child) for child in node.children],
            identifier=node.identifier,
            classes=(CONTAINER_CLASS,) + node.classes,
            attributes=attributes + list(node.keyvalue),
        )

    if node.type == NodeType.SOLUTION:
        classes = (SOLUTION_CLASSES[0],) + node.classes
        if node.collapsed:
            classes += (COLLAPSED_CLASS,)
        attributes = [("space", node.space)] if node.space else []
        return Block.div(
            [node_to_block(child) for child in node.children],
            identifier=node.identifier,
            classes=classes,
            attributes=attributes + list(node.keyvalue),
        )

    if node.type == NodeType.PARAGRAPH:
        return Block.para(node.text_content)

    if node.type == NodeType.BLOCK:
        return Block.from_dict(node.payload)

    raise ValueError(f"Cannot convert {node!r} to a block")


def document_to_editor(blocks: Iterable[Block]) -> Node:
    """Build the editor document node for a block list."""
    return Node.doc(block_to_node(block) for block in blocks)


def editor_to_blocks(doc: Node) -> List[Block]:
    """Serialize an editor document back to blocks."""
    return [node_to_block(child) for child in doc.children]


def state_from_document(document: Document) -> EditorState:
    return EditorState(document_to_editor(document.blocks))


def document_from_state(state: EditorState, base: Optional[Document] = None) -> Document:
    """Document for the state's tree, keeping ``base`` metadata if given."""
    blocks = editor_to_blocks(state.doc)
    if base is None:
        return Document(blocks=tuple(blocks))
    return replace(base, blocks=tuple(blocks))
