"""
Unit Tests for the Editor Session and History
"""

import pytest

from examclass_toolkit.editor.commands import indent_part, insert_part, outdent_part
from examclass_toolkit.editor.config import EditorConfig
from examclass_toolkit.editor.history import Editor, History
from examclass_toolkit.editor.nodes import Node
from examclass_toolkit.editor.state import EditorState, Selection


@pytest.fixture
def state() -> EditorState:
    doc = Node.doc([
        Node.part([Node.paragraph("ab")], title="A"),
        Node.part([Node.paragraph("cd")], title="B"),
    ])
    return EditorState(doc, Selection.cursor(9))


class TestEditor:
    """Tests for Editor.run/undo/redo."""

    def test_run_when_applicable_then_state_advances(self, state):
        editor = Editor(state)

        assert editor.run(indent_part) is True
        assert len(editor.state.doc.children) == 1
        assert editor.history.can_undo

    def test_run_when_not_applicable_then_nothing_recorded(self, state):
        editor = Editor(state)

        assert editor.run(outdent_part) is False
        assert editor.state is state
        assert not editor.history.can_undo

    def test_undo_when_after_indent_then_exact_previous_state(self, state):
        editor = Editor(state)
        editor.run(indent_part)

        assert editor.undo() is True
        assert editor.state == state

    def test_redo_when_after_undo_then_edit_reapplied(self, state):
        editor = Editor(state)
        editor.run(indent_part)
        indented = editor.state
        editor.undo()

        assert editor.redo() is True
        assert editor.state == indented

    def test_undo_when_history_empty_then_false(self, state):
        editor = Editor(state)
        assert editor.undo() is False
        assert editor.redo() is False

    def test_run_when_new_edit_after_undo_then_redo_cleared(self, state):
        editor = Editor(state)
        editor.run(indent_part)
        editor.undo()

        editor.run(insert_part)

        assert not editor.history.can_redo

    def test_history_when_limit_reached_then_oldest_dropped(self, state):
        editor = Editor(state, EditorConfig(history_limit=1))
        editor.run(insert_part)
        editor.run(insert_part)

        assert editor.undo() is True
        assert editor.undo() is False

    def test_can_run_when_checked_then_state_untouched(self, state):
        editor = Editor(state)
        assert editor.can_run(indent_part) is True
        assert editor.state is state


class TestHistory:
    """Tests for the History stacks."""

    def test_undo_when_popped_then_available_for_redo(self, state):
        history = History()
        transaction = state.apply(state.doc, state.selection, "noop")
        history.record(transaction)

        assert history.undo() is transaction
        assert history.redo() is transaction


class TestEditorConfig:
    """Tests for EditorConfig."""

    def test_config_when_limit_not_positive_then_raises_error(self):
        with pytest.raises(ValueError, match="history_limit"):
            EditorConfig(history_limit=0)
