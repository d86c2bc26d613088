"""
Module: latex.preface

Purpose:
    Post-processing passes over the transformed top-level block stream
    that concern the outer ``questions`` environment.

Key Functions:
    - relocate_questions_preface(): Move ``\\begin{questions}`` so it
      directly precedes the first question command
    - ensure_questions_environment(): Add the environment when the
      document has none

Dependencies:
    - re (std)
    - examclass_toolkit.core.models: Block

Used By:
    - latex.pipeline
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, List, Optional, Sequence

from examclass_toolkit.core.models import Block
from examclass_toolkit.core.models.document import QUESTION_COMMANDS
from .transformer import begin_env, end_env

logger = logging.getLogger(__name__)

BEGIN_QUESTIONS = re.compile(r"^\\begin\{questions\}\s*$")
END_QUESTIONS = re.compile(r"^\\end\{questions\}\s*$")


def _is_marker(block: Block, pattern: re.Pattern) -> bool:
    return block.is_raw_tex and pattern.match(block.text) is not None


def starts_question(block: Block) -> bool:
    """True for a raw TeX ``\\question``/``\\titledquestion`` token."""
    return block.raw_tex_matches(*QUESTION_COMMANDS)


def _inline_starts_question(block: Block) -> bool:
    """True for a Para/Plain carrying a raw TeX question command inline."""
    if block.t not in ("Para", "Plain") or not isinstance(block.payload, list):
        return False
    for inline in block.payload:
        if inline.get("t") != "RawInline":
            continue
        fmt, text = inline["c"]
        if fmt in ("tex", "latex") and text.startswith(QUESTION_COMMANDS):
            return True
    return False


def relocate_questions_preface(blocks: Sequence[Block]) -> List[Block]:
    """
    Move each ``\\begin{questions}`` down to its first question command.

    Any blocks between the begin marker and the first question (a
    preface paragraph, instructions, ...) are kept in order but placed
    before the begin marker. When the first question already follows
    the marker, or the environment holds no question, nothing moves, so
    applying this twice gives the same result as applying it once.

    Args:
        blocks: Transformed top-level blocks

    Returns:
        New list of blocks
    """
    out: List[Block] = []
    i = 0
    while i < len(blocks):
        block = blocks[i]
        if not _is_marker(block, BEGIN_QUESTIONS):
            out.append(block)
            i += 1
            continue

        j = i + 1
        while j < len(blocks) and not _is_marker(blocks[j], END_QUESTIONS):
            j += 1
        inside = list(blocks[i + 1:j])

        first = _first_question_index(inside)
        if first:
            logger.debug(f"Relocating \\begin{{questions}} past {first} preface block(s)")
            out.extend(inside[:first])
            out.append(block)
            out.extend(inside[first:])
        else:
            out.append(block)
            out.extend(inside)

        if j < len(blocks):
            out.append(blocks[j])
        i = j + 1

    return out


def _first_question_index(blocks: Sequence[Block]) -> Optional[int]:
    for k, block in enumerate(blocks):
        if starts_question(block):
            return k
    return None


def ensure_questions_environment(blocks: Iterable[Block]) -> List[Block]:
    """
    Wrap the questions in a ``questions`` environment if none exists.

    When no top-level block opens a ``questions`` environment,
    ``\\begin{questions}`` is inserted before the first block that starts
    a question and ``\\end{questions}`` is appended at the end of the
    document. Documents without any question are left unchanged.
    """
    blocks = list(blocks)
    first: Optional[int] = None
    for i, block in enumerate(blocks):
        if block.raw_tex_matches("\\begin{questions}"):
            return blocks
        if first is None and (starts_question(block) or _inline_starts_question(block)):
            first = i

    if first is None:
        return blocks

    logger.debug(f"Inserting questions environment before block {first}")
    return blocks[:first] + [begin_env("questions")] + blocks[first:] + [end_env("questions")]
