"""
Module: editor.history

Purpose:
    Editing session with bounded undo/redo. Because states are immutable,
    history is just the list of committed transactions.

Key Classes:
    - History: Undo and redo stacks
    - Editor: Runs commands against the current state
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Deque, List, Optional

from .config import EditorConfig
from .state import Command, EditorState, Transaction

logger = logging.getLogger(__name__)


class History:
    """Undo/redo stacks holding at most ``limit`` undoable transactions."""

    def __init__(self, limit: int = 100):
        self._done: Deque[Transaction] = deque(maxlen=limit)
        self._undone: List[Transaction] = []

    @property
    def can_undo(self) -> bool:
        return bool(self._done)

    @property
    def can_redo(self) -> bool:
        return bool(self._undone)

    def record(self, transaction: Transaction) -> None:
        self._done.append(transaction)
        self._undone.clear()

    def undo(self) -> Optional[Transaction]:
        if not self._done:
            return None
        transaction = self._done.pop()
        self._undone.append(transaction)
        return transaction

    def redo(self) -> Optional[Transaction]:
        if not self._undone:
            return None
        transaction = self._undone.pop()
        self._done.append(transaction)
        return transaction


class Editor:
    """
    A live editing session.

    Example:
        >>> editor = Editor(EditorState(doc, Selection.cursor(5)))
        >>> editor.run(indent_part)
        True
        >>> editor.undo()
        True
    """

    def __init__(self, state: EditorState, config: Optional[EditorConfig] = None):
        self.config = config or EditorConfig()
        self._state = state
        self.history = History(self.config.history_limit)

    @property
    def state(self) -> EditorState:
        return self._state

    def can_run(self, command: Command) -> bool:
        return command(self._state, None)

    def run(self, command: Command) -> bool:
        """
        Run ``command`` against the current state.

        Returns:
            True if the command applied. Nothing changes otherwise.
        """
        dispatched: List[Transaction] = []
        if not command(self._state, dispatched.append):
            return False
        if not dispatched:
            return True

        label = dispatched[-1].label
        transaction = Transaction(self._state, dispatched[-1].after, label)
        self._state = transaction.after
        if transaction.doc_changed:
            self.history.record(transaction)
        logger.debug(f"Committed {label or 'transaction'}")
        return True

    def undo(self) -> bool:
        transaction = self.history.undo()
        if transaction is None:
            return False
        self._state = transaction.before
        return True

    def redo(self) -> bool:
        transaction = self.history.redo()
        if transaction is None:
            return False
        self._state = transaction.after
        return True
