"""
Unit Tests for the Container Transformer

Tests for transform_blocks and command_for_container.
"""

import pytest

from examclass_toolkit.core.models import Block
from examclass_toolkit.latex.config import FilterConfig
from examclass_toolkit.latex.transformer import (
    command_for_container,
    tex_lines,
    transform_blocks,
)


def part(*children, **attributes):
    return Block.div(children, classes=["part"], attributes=attributes.items())


def solution(*children, **attributes):
    return Block.div(children, classes=["solution"], attributes=attributes.items())


def _balanced(lines):
    stack = []
    for line in lines:
        if line.startswith("\\begin{"):
            stack.append(line[len("\\begin{"):line.index("}")])
        elif line.startswith("\\end{"):
            assert stack and stack.pop() == line[len("\\end{"):line.index("}")]
    return not stack


class TestCommandForContainer:
    """Tests for command_for_container."""

    def test_command_when_question_with_title_and_points_then_titled(self):
        block = part(title="Warm-up", points="2.5")
        assert command_for_container(block, 1) == "\\titledquestion{Warm-up}[2.5]"

    def test_command_when_question_without_title_then_plain_question(self):
        assert command_for_container(part(points="4"), 1) == "\\question[4]"

    def test_command_when_blank_title_then_untitled_form(self):
        assert command_for_container(part(title="   "), 1) == "\\question"

    def test_command_when_invalid_points_then_bracket_omitted(self):
        assert command_for_container(part(points="3in"), 2) == "\\part"

    @pytest.mark.parametrize("points", ["٣", "３"])
    def test_command_when_non_ascii_digits_then_bracket_omitted(self, points):
        assert command_for_container(part(points=points), 2) == "\\part"

    def test_command_when_title_below_question_then_dropped(self):
        assert command_for_container(part(title="Ignored", points="1"), 2) == "\\part[1]"

    @pytest.mark.parametrize("key", ["point", "pts", "p"])
    def test_command_when_points_alias_then_read(self, key):
        block = Block.div(classes=["part"], attributes=[(key, "2")])
        assert command_for_container(block, 3) == "\\subpart[2]"

    def test_command_when_custom_alias_config_then_only_those_keys(self):
        block = Block.div(classes=["part"], attributes=[("pts", "2"), ("marks", "5")])
        config = FilterConfig(points_keys=("marks",))
        assert command_for_container(block, 2, config) == "\\part[5]"

    def test_command_when_depth_beyond_four_then_subsubpart(self):
        assert command_for_container(part(), 6) == "\\subsubpart"


class TestTransformBlocks:
    """Tests for transform_blocks."""

    def test_transform_when_runs_split_by_paragraph_then_two_environments(self):
        question = part(part(), part(), Block.para("Between."), part())

        lines = tex_lines(transform_blocks([question]))

        assert lines == [
            "\\question",
            "\\begin{parts}", "\\part", "\\part", "\\end{parts}",
            "<Para>",
            "\\begin{parts}", "\\part", "\\end{parts}",
        ]

    def test_transform_when_nested_four_levels_then_roles_follow_depth(self):
        tree = part(part(part(part(part()))))

        lines = tex_lines(transform_blocks([tree]))

        assert lines == [
            "\\question",
            "\\begin{parts}", "\\part",
            "\\begin{subparts}", "\\subpart",
            "\\begin{subsubparts}", "\\subsubpart",
            "\\begin{subsubparts}", "\\subsubpart", "\\end{subsubparts}",
            "\\end{subsubparts}",
            "\\end{subparts}",
            "\\end{parts}",
        ]
        assert _balanced(lines)

    def test_transform_when_top_level_containers_then_no_environment(self):
        lines = tex_lines(transform_blocks([part(), Block.para("x"), part()]))
        assert lines == ["\\question", "<Para>", "\\question"]

    def test_transform_when_solution_with_space_then_option_emitted(self):
        question = part(Block.para("Q"), solution(Block.para("A"), space=" 2in "))

        lines = tex_lines(transform_blocks([question]))

        assert lines == ["\\question", "<Para>", "\\begin{solution}[2in]", "<Para>", "\\end{solution}"]

    def test_transform_when_solution_space_alias_then_read(self):
        block = Block.div([], classes=["solution"], attributes=[("data-space", "3cm")])
        assert tex_lines(transform_blocks([block])) == ["\\begin{solution}[3cm]", "\\end{solution}"]

    def test_transform_when_solution_contains_part_then_depth_unchanged(self):
        question = part(solution(part()))
        lines = tex_lines(transform_blocks([question]))
        assert "\\part" in lines

    def test_transform_when_containers_inside_plain_div_then_depth_kept(self):
        wrapper = Block.div([part(points="1")], classes=["note"])

        output = transform_blocks([part(wrapper)])

        assert tex_lines(output)[0] == "\\question"
        div = output[1]
        assert div.t == "Div" and div.attr.has_class("note")
        assert tex_lines(div.children) == ["\\part[1]"]

    def test_transform_when_blockquote_then_children_transformed(self):
        quote = Block("BlockQuote", children=(part(),))
        output = transform_blocks([quote])
        assert output[0].t == "BlockQuote"
        assert tex_lines(output[0].children) == ["\\question"]

    def test_transform_when_called_then_input_unchanged(self):
        question = part(part(), title="Q")
        before = question.to_dict()
        transform_blocks([question])
        assert question.to_dict() == before

    def test_transform_when_no_containers_then_identity(self):
        blocks = [Block.para("a"), Block("HorizontalRule")]
        assert transform_blocks(blocks) == blocks

    def test_transform_when_mixed_content_then_environments_balanced(self):
        question = part(
            part(part(), Block.para("x"), part(solution(Block.para("s")))),
            Block.para("y"),
            part(part(part(part()))),
        )
        assert _balanced(tex_lines(transform_blocks([question])))
