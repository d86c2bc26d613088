"""
Unit Tests for the questions-environment passes
"""

from examclass_toolkit.core.models import Block
from examclass_toolkit.latex.preface import (
    ensure_questions_environment,
    relocate_questions_preface,
)
from examclass_toolkit.latex.transformer import tex_lines


BEGIN = Block.raw_tex("\\begin{questions}")
END = Block.raw_tex("\\end{questions}")


class TestRelocateQuestionsPreface:
    """Tests for relocate_questions_preface."""

    def test_relocate_when_preface_then_begin_moves_to_first_question(self):
        blocks = [BEGIN, Block.para("Instructions"), Block.raw_tex("\\question[2]"), Block.para("Q"), END]

        lines = tex_lines(relocate_questions_preface(blocks))

        assert lines == ["<Para>", "\\begin{questions}", "\\question[2]", "<Para>", "\\end{questions}"]

    def test_relocate_when_titled_question_then_treated_as_question(self):
        blocks = [BEGIN, Block.para("Preface"), Block.raw_tex("\\titledquestion{A}"), END]
        assert tex_lines(relocate_questions_preface(blocks))[:2] == ["<Para>", "\\begin{questions}"]

    def test_relocate_when_question_first_then_unchanged(self):
        blocks = [BEGIN, Block.raw_tex("\\question"), END]
        assert relocate_questions_preface(blocks) == blocks

    def test_relocate_when_no_question_then_unchanged(self):
        blocks = [BEGIN, Block.para("Only text"), END]
        assert relocate_questions_preface(blocks) == blocks

    def test_relocate_when_no_environment_then_unchanged(self):
        blocks = [Block.para("a"), Block.raw_tex("\\question")]
        assert relocate_questions_preface(blocks) == blocks

    def test_relocate_when_applied_twice_then_same_as_once(self):
        blocks = [Block.para("Title"), BEGIN, Block.para("Read carefully"),
                  Block.raw_tex("\\question"), Block.para("Q1"), END]
        once = relocate_questions_preface(blocks)
        assert relocate_questions_preface(once) == once

    def test_relocate_when_unterminated_then_runs_to_end(self):
        blocks = [BEGIN, Block.para("Preface"), Block.raw_tex("\\question")]
        assert tex_lines(relocate_questions_preface(blocks)) == ["<Para>", "\\begin{questions}", "\\question"]


class TestEnsureQuestionsEnvironment:
    """Tests for ensure_questions_environment."""

    def test_ensure_when_missing_then_wraps_from_first_question(self):
        blocks = [Block.para("Title"), Block.raw_tex("\\question"), Block.para("Q")]

        lines = tex_lines(ensure_questions_environment(blocks))

        assert lines == ["<Para>", "\\begin{questions}", "\\question", "<Para>", "\\end{questions}"]

    def test_ensure_when_present_then_unchanged(self):
        blocks = [BEGIN, Block.raw_tex("\\question"), END]
        assert ensure_questions_environment(blocks) == blocks

    def test_ensure_when_no_question_then_unchanged(self):
        blocks = [Block.para("Nothing to wrap")]
        assert ensure_questions_environment(blocks) == blocks

    def test_ensure_when_inline_question_then_wraps_paragraph(self):
        inline = Block("Para", payload=[{"t": "RawInline", "c": ["tex", "\\question"]}])
        lines = tex_lines(ensure_questions_environment([inline]))
        assert lines == ["\\begin{questions}", "<Para>", "\\end{questions}"]
