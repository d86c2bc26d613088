"""
Module: latex.transformer

Purpose:
    Converts ``part`` Divs into exam-class commands. Depth is carried
    down explicitly: each container one level deeper becomes question,
    part, subpart or subsubpart, and every run of consecutive child
    containers is wrapped in the matching parts/subparts/subsubparts
    environment.

Key Functions:
    - transform_blocks(): Transform a block list at a given depth
    - command_for_container(): Role command for one container
    - tex_lines(): Render a transformed stream for inspection

Dependencies:
    - itertools (std): Grouping consecutive child containers
    - examclass_toolkit.common: Role resolution, attribute normalization
    - examclass_toolkit.core.models: Block

Used By:
    - latex.pipeline: Runs the transform over the whole document
"""

from __future__ import annotations

import itertools
import logging
from typing import Iterable, List, Optional

from examclass_toolkit.common.attributes import (
    normalize_points,
    normalize_space,
    normalize_title,
)
from examclass_toolkit.common.roles import Role, environment_for_depth, role_for_depth
from examclass_toolkit.core.models import Block
from .config import FilterConfig

logger = logging.getLogger(__name__)


def begin_env(name: str, option: str = "") -> Block:
    return Block.raw_tex(f"\\begin{{{name}}}{option}")


def end_env(name: str) -> Block:
    return Block.raw_tex(f"\\end{{{name}}}")


def command_for_container(
    block: Block,
    depth: int,
    config: Optional[FilterConfig] = None,
) -> str:
    """
    Build the role command for a container at ``depth``.

    Title is only rendered for questions (``\\titledquestion{...}``);
    the exam class part commands take no title argument, so titles
    below the question level are dropped. Points are appended as an
    optional ``[n]`` argument at every level when they are a plain
    number.

    Args:
        block: Container Div
        depth: Container depth (1 = question)
        config: Filter configuration for attribute aliases

    Returns:
        Command string, e.g. ``\\titledquestion{Warm-up}[2.5]``

    Example:
        >>> q = Block.div(classes=["part"], attributes=[("points", "3")])
        >>> command_for_container(q, 2)
        '\\\\part[3]'
    """
    config = config or FilterConfig()
    attr = block.attr
    points = normalize_points(attr.get_first(config.points_keys)) if attr else None
    bracket = f"[{points}]" if points else ""

    role = role_for_depth(depth)
    if role is Role.QUESTION:
        title = normalize_title(attr.get("title")) if attr else None
        if title:
            return f"\\titledquestion{{{title}}}{bracket}"
    return role.command + bracket


def transform_blocks(
    blocks: Iterable[Block],
    current_depth: int = 0,
    *,
    config: Optional[FilterConfig] = None,
) -> List[Block]:
    """
    Transform blocks, replacing containers with exam-class commands.

    - Container: one level deeper; emits its command, then its children
      with each run of consecutive child containers wrapped in one
      environment pair
    - Solution: ``solution`` environment around its children, same depth
    - Other Div/BlockQuote: rebuilt with transformed children, same depth
    - Anything else: passed through

    The input blocks are never modified.

    Args:
        blocks: Blocks to transform
        current_depth: Number of containers enclosing ``blocks``
        config: Filter configuration

    Returns:
        New list of blocks
    """
    config = config or FilterConfig()
    output: List[Block] = []

    for block in blocks:
        if block.is_container:
            output.extend(_transform_container(block, current_depth + 1, config))
        elif block.is_solution:
            output.extend(_transform_solution(block, current_depth, config))
        elif block.is_composite:
            children = transform_blocks(block.children, current_depth, config=config)
            output.append(block.with_children(children))
        else:
            output.append(block)

    return output


def _transform_container(block: Block, depth: int, config: FilterConfig) -> List[Block]:
    """Emit a container's command followed by its grouped children."""
    command = command_for_container(block, depth, config)
    logger.debug(f"Depth {depth} ({role_for_depth(depth)}): {command}")
    output = [Block.raw_tex(command)]

    for is_run, group in itertools.groupby(block.children, key=lambda b: b.is_container):
        transformed = transform_blocks(group, depth, config=config)
        if is_run:
            env = environment_for_depth(depth + 1)
            output.append(begin_env(env))
            output.extend(transformed)
            output.append(end_env(env))
        else:
            output.extend(transformed)

    return output


def _transform_solution(block: Block, depth: int, config: FilterConfig) -> List[Block]:
    """Emit a solution environment; solutions do not add a nesting level."""
    space = normalize_space(block.attr.get_first(config.space_keys))
    option = f"[{space}]" if space else ""
    output = [begin_env("solution", option)]
    output.extend(transform_blocks(block.children, depth, config=config))
    output.append(end_env("solution"))
    return output


def tex_lines(blocks: Iterable[Block]) -> List[str]:
    """
    Render a transformed stream as lines.

    Raw TeX tokens give their text; any other block is shown as
    ``<Type>``. Used by tests and debug logging.
    """
    return [b.text if b.is_raw_tex else f"<{b.t}>" for b in blocks]
