"""
Module: editor.commands

Purpose:
    Structural editing commands for the live tree. Every command has the
    signature ``command(state, dispatch=None) -> bool``: it reports
    whether it applies to ``state`` and, when ``dispatch`` is given,
    dispatches exactly one Transaction. Called without ``dispatch`` it is
    a pure applicability check.

    Nodes are immutable, so a command either dispatches a complete new
    document or nothing at all; there is no half-applied move.

Key Functions:
    - indent_part(): Make the current part the last child of its
      nearest preceding sibling part
    - outdent_part(): Move the current part out to follow its parent part
    - insert_part() / delete_part(): Add or remove a part
    - set_part_attributes(): Command factory for title/points
    - insert_solution() / toggle_solution_collapsed(): Solution editing

Dependencies:
    - examclass_toolkit.common.attributes: Value normalization

Used By:
    - editor.history.Editor
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional, Sequence, Tuple

from examclass_toolkit.common.attributes import normalize_points, normalize_title
from .nodes import Node, Path, insert_node, position_before, remove_node, replace_node
from .positions import ResolvedPos
from .state import Command, Dispatch, EditorState, Selection, Transaction
from .structure import part_level

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Lookup helpers
# ─────────────────────────────────────────────────────────────────────────────

def find_part_depth(rpos: ResolvedPos) -> Optional[int]:
    """Depth of the innermost part enclosing ``rpos``, or None."""
    return rpos.find_depth(lambda node: node.is_part)


def find_solution_depth(rpos: ResolvedPos) -> Optional[int]:
    """Depth of the innermost solution enclosing ``rpos``, or None."""
    return rpos.find_depth(lambda node: node.is_solution)


def _previous_part_index(parent: Node, index: int) -> Optional[int]:
    for candidate in range(index - 1, -1, -1):
        if parent.children[candidate].is_part:
            return candidate
    return None


def _remap(pos: int, old_start: int, new_start: int, moved: Node) -> int:
    """Carry a position inside a moved node to the node's new location."""
    base = new_start + 1
    relative = pos - (old_start + 1)
    return min(max(base + relative, base), base + moved.content_size)


def _move(
    state: EditorState,
    path: Path,
    target_parent: Sequence[int],
    target_index: int,
    label: str,
) -> Tuple[Transaction, Path]:
    """
    Move the node at ``path`` under ``target_parent`` at ``target_index``.

    ``target_parent`` must address the same node before and after the
    removal, which holds for both indent and outdent.
    """
    old_start = position_before(state.doc, path)
    doc, moved = remove_node(state.doc, path)
    doc = insert_node(doc, target_parent, target_index, moved)
    new_path = tuple(target_parent) + (target_index,)
    new_start = position_before(doc, new_path)
    selection = state.selection.map(lambda pos: _remap(pos, old_start, new_start, moved))
    return state.apply(doc, selection, label), new_path


# ─────────────────────────────────────────────────────────────────────────────
# Nesting
# ─────────────────────────────────────────────────────────────────────────────

def indent_part(state: EditorState, dispatch: Optional[Dispatch] = None) -> bool:
    """
    Nest the current part inside its nearest preceding sibling part.

    Applies only when the selection is inside a part and some earlier
    sibling of that part is itself a part. The moved part is appended as
    the sibling's last child and the selection follows it.
    """
    rpos = state.resolved_from
    depth = find_part_depth(rpos)
    if depth is None:
        return False
    parent = rpos.node(depth - 1)
    sibling = _previous_part_index(parent, rpos.index(depth - 1))
    if sibling is None:
        return False

    if dispatch is not None:
        path = rpos.path_to(depth)
        target_parent = path[:-1] + (sibling,)
        target_index = len(parent.children[sibling].children)
        transaction, new_path = _move(state, path, target_parent, target_index, "indent_part")
        logger.debug(f"Indented part to level {part_level(transaction.after.doc, new_path)}")
        dispatch(transaction)
    return True


def outdent_part(state: EditorState, dispatch: Optional[Dispatch] = None) -> bool:
    """
    Move the current part out of its parent part.

    Applies only when the part's parent is itself a part. The moved part
    becomes the sibling immediately after its former parent.
    """
    rpos = state.resolved_from
    depth = find_part_depth(rpos)
    if depth is None or depth < 2 or not rpos.node(depth - 1).is_part:
        return False

    if dispatch is not None:
        path = rpos.path_to(depth)
        transaction, new_path = _move(state, path, path[:-2], path[-2] + 1, "outdent_part")
        logger.debug(f"Outdented part to level {part_level(transaction.after.doc, new_path)}")
        dispatch(transaction)
    return True


# ─────────────────────────────────────────────────────────────────────────────
# Insertion and removal
# ─────────────────────────────────────────────────────────────────────────────

def _insertion_point(rpos: ResolvedPos) -> Tuple[Path, int, bool]:
    """
    Where a new block goes for a cursor at ``rpos``.

    Returns:
        (parent_path, index, replace_empty_paragraph)
    """
    if rpos.parent.is_textblock:
        path = rpos.path_to(rpos.depth)
        if rpos.parent.content_size == 0:
            return path[:-1], path[-1], True
        return path[:-1], path[-1] + 1, False
    return rpos.path_to(rpos.depth), rpos.index(rpos.depth), False


def _insert_block(state: EditorState, node: Node, label: str) -> Transaction:
    parent_path, index, replace_empty = _insertion_point(state.resolved_from)
    doc = state.doc
    if replace_empty:
        doc, _ = remove_node(doc, parent_path + (index,))
    doc = insert_node(doc, parent_path, index, node)
    start = position_before(doc, parent_path + (index,))
    # Inside the new node's leading empty paragraph
    return state.apply(doc, Selection.cursor(start + 2), label)


def insert_part(state: EditorState, dispatch: Optional[Dispatch] = None) -> bool:
    """Insert an empty part at the cursor (replacing an empty paragraph)."""
    if dispatch is not None:
        dispatch(_insert_block(state, Node.part([Node.paragraph()]), "insert_part"))
    return True


def delete_part(state: EditorState, dispatch: Optional[Dispatch] = None) -> bool:
    """Remove the innermost part around the selection, with its content."""
    rpos = state.resolved_from
    depth = find_part_depth(rpos)
    if depth is None:
        return False

    if dispatch is not None:
        path = rpos.path_to(depth)
        doc, removed = remove_node(state.doc, path)
        pos = min(rpos.before(depth), doc.content_size)
        logger.debug(f"Deleted {removed!r}")
        dispatch(state.apply(doc, Selection.cursor(pos), "delete_part"))
    return True


def insert_solution(state: EditorState, dispatch: Optional[Dispatch] = None) -> bool:
    """
    Insert an empty solution at the cursor.

    Applies only inside a part, and never inside another solution.
    """
    rpos = state.resolved_from
    if find_part_depth(rpos) is None or find_solution_depth(rpos) is not None:
        return False
    if dispatch is not None:
        dispatch(_insert_block(state, Node.solution([Node.paragraph()]), "insert_solution"))
    return True


def toggle_solution_collapsed(state: EditorState, dispatch: Optional[Dispatch] = None) -> bool:
    """Flip the collapsed flag of the solution around the selection."""
    rpos = state.resolved_from
    depth = find_solution_depth(rpos)
    if depth is None:
        return False
    if dispatch is not None:
        node = rpos.node(depth)
        doc = replace_node(state.doc, rpos.path_to(depth), replace(node, collapsed=not node.collapsed))
        dispatch(state.apply(doc, state.selection, "toggle_solution_collapsed"))
    return True


# ─────────────────────────────────────────────────────────────────────────────
# Attributes
# ─────────────────────────────────────────────────────────────────────────────

def set_part_attributes(*, title: Optional[str] = None, points: Optional[str] = None) -> Command:
    """
    Build a command that updates the current part's title and/or points.

    Arguments left as None are untouched. Values are normalized the same
    way the LaTeX filter reads them; a points value that is not a plain
    number clears the stored points.

    Example:
        >>> editor.run(set_part_attributes(title="Warm-up", points="2.5"))
        True
    """

    def command(state: EditorState, dispatch: Optional[Dispatch] = None) -> bool:
        rpos = state.resolved_from
        depth = find_part_depth(rpos)
        if depth is None:
            return False
        if dispatch is not None:
            changes = {}
            if title is not None:
                changes["title"] = normalize_title(title) or ""
            if points is not None:
                changes["points"] = normalize_points(points) or ""
            node = replace(rpos.node(depth), **changes)
            doc = replace_node(state.doc, rpos.path_to(depth), node)
            dispatch(state.apply(doc, state.selection, "set_part_attributes"))
        return True

    return command
