"""
Module: editor.state

Purpose:
    Immutable editor state: a document plus a selection. Commands never
    modify a state; they dispatch a Transaction carrying the next one.

Key Classes:
    - Selection: Anchor/head pair of positions
    - EditorState: Document + selection
    - Transaction: One committed edit (before/after states)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

from .nodes import Node
from .positions import ResolvedPos, resolve


@dataclass(frozen=True)
class Selection:
    """
    Text selection.

    Attributes:
        anchor: Fixed end of the selection
        head: Moving end (the caret)
    """

    anchor: int
    head: int

    @classmethod
    def cursor(cls, pos: int) -> Selection:
        return cls(pos, pos)

    @property
    def from_(self) -> int:
        return min(self.anchor, self.head)

    @property
    def to(self) -> int:
        return max(self.anchor, self.head)

    @property
    def empty(self) -> bool:
        return self.anchor == self.head

    def map(self, fn: Callable[[int], int]) -> Selection:
        """Selection with both ends passed through ``fn``."""
        return Selection(fn(self.anchor), fn(self.head))


@dataclass(frozen=True)
class EditorState:
    """
    Document and selection (immutable).

    Invariants:
        - Both selection ends lie within the document
    """

    doc: Node
    selection: Selection = field(default_factory=lambda: Selection.cursor(0))

    def __post_init__(self) -> None:
        size = self.doc.content_size
        for pos in (self.selection.anchor, self.selection.head):
            if not 0 <= pos <= size:
                raise ValueError(f"Selection position {pos} outside document (0..{size})")

    @property
    def resolved_from(self) -> ResolvedPos:
        return resolve(self.doc, self.selection.from_)

    def apply(self, doc: Node, selection: Selection, label: str) -> Transaction:
        """Build a transaction moving from this state to ``doc``/``selection``."""
        return Transaction(before=self, after=EditorState(doc, selection), label=label)


@dataclass(frozen=True)
class Transaction:
    """
    A committed edit.

    Attributes:
        before: State the edit was computed from
        after: Resulting state
        label: Command name, e.g. "indent_part"
    """

    before: EditorState
    after: EditorState
    label: str = ""

    @property
    def doc_changed(self) -> bool:
        return self.before.doc != self.after.doc


Dispatch = Callable[[Transaction], None]
Command = Callable[[EditorState, Optional[Dispatch]], bool]
