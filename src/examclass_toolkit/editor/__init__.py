"""
Module: editor

Purpose:
    Interactive editing of exam structure over an immutable tree.
    Commands move, insert and annotate parts and solutions; levels are
    always derived from nesting, never stored.

Key Modules:
    - nodes / positions / state: Tree, position model and editor state
    - commands: Structural commands
    - history: Editor session with undo/redo
    - structure: Derived part levels
    - bridge: Conversion to and from Pandoc blocks
"""

from .bridge import (
    block_to_node,
    document_from_state,
    document_to_editor,
    editor_to_blocks,
    node_to_block,
    state_from_document,
)
from .commands import (
    delete_part,
    indent_part,
    insert_part,
    insert_solution,
    outdent_part,
    set_part_attributes,
    toggle_solution_collapsed,
)
from .config import EditorConfig
from .history import Editor, History
from .nodes import Node, NodeType
from .positions import ResolvedPos, resolve
from .state import EditorState, Selection, Transaction
from .structure import StructureLevel, part_level, structure_levels

__all__ = [
    # bridge
    "block_to_node",
    "document_from_state",
    "document_to_editor",
    "editor_to_blocks",
    "node_to_block",
    "state_from_document",
    # commands
    "delete_part",
    "indent_part",
    "insert_part",
    "insert_solution",
    "outdent_part",
    "set_part_attributes",
    "toggle_solution_collapsed",
    # session
    "Editor",
    "EditorConfig",
    "History",
    # model
    "EditorState",
    "Node",
    "NodeType",
    "ResolvedPos",
    "Selection",
    "StructureLevel",
    "Transaction",
    "part_level",
    "resolve",
    "structure_levels",
]
