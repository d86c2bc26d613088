"""
Module: latex.pipeline

Purpose:
    Filter orchestrator. Runs the container transform over a whole
    Pandoc document followed by the ``questions`` environment passes,
    and reports what it did.

Key Functions:
    - run_filter(): Transform a Document
    - filter_json(): Transform a Pandoc JSON dict (validate + run)
    - filter_text(): Transform Pandoc JSON text

Key Classes:
    - FilterResult: Container for filter output

Dependencies:
    - examclass_toolkit.core: Document model, validation, serialization
    - .transformer / .preface: The passes themselves

Used By:
    - examclass_toolkit.cli: Pandoc JSON filter entry point
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from examclass_toolkit.core.models import Document
from examclass_toolkit.core.schemas.validator import check_solution_nesting
from examclass_toolkit.core.utils.serialization import (
    deserialize_document,
    dumps_document,
    loads_document,
    serialize_document,
)
from .config import FilterConfig
from .preface import ensure_questions_environment, relocate_questions_preface
from .timing import TimingLog, timed_phase
from .transformer import transform_blocks

logger = logging.getLogger(__name__)


@dataclass
class FilterResult:
    """
    Result of filtering a document.

    Attributes:
        document: Transformed document
        question_count: Number of question commands in the output
        warnings: Recoverable input problems found along the way
        timings: Per-phase durations
    """
    document: Document
    question_count: int
    warnings: List[str] = field(default_factory=list)
    timings: TimingLog = field(default_factory=TimingLog)


def run_filter(document: Document, *, config: Optional[FilterConfig] = None) -> FilterResult:
    """
    Convert the exam structure of a document to exam-class LaTeX.

    Pipeline:
    1. Report solutions nested in solutions (converted anyway)
    2. Transform ``part`` Divs into commands and environments
    3. Optionally add a ``questions`` environment
    4. Relocate ``\\begin{questions}`` past any preface content

    Args:
        document: Input document (not modified)
        config: Filter configuration

    Returns:
        FilterResult with the new document
    """
    config = config or FilterConfig()
    timings = TimingLog()

    warnings = check_solution_nesting(document.blocks)
    for warning in warnings:
        logger.warning(warning)

    with timed_phase(timings, "transform"):
        blocks = transform_blocks(document.blocks, 0, config=config)

    if config.wrap_questions:
        with timed_phase(timings, "wrap_questions"):
            blocks = ensure_questions_environment(blocks)

    if config.relocate_preface:
        with timed_phase(timings, "relocate_preface"):
            blocks = relocate_questions_preface(blocks)

    output = document.with_blocks(blocks)
    question_count = output.question_count
    logger.info(f"Converted {question_count} question(s) in {timings.total:.3f}s")
    logger.debug(timings.summary())

    return FilterResult(
        document=output,
        question_count=question_count,
        warnings=warnings,
        timings=timings,
    )


def filter_json(data: Dict[str, Any], *, config: Optional[FilterConfig] = None) -> Dict[str, Any]:
    """
    Filter a Pandoc JSON dictionary.

    Raises:
        ValidationError: If validation is enabled and data is invalid
    """
    config = config or FilterConfig()
    document = deserialize_document(data, validate=config.validate, strict=config.strict)
    return serialize_document(run_filter(document, config=config).document)


def filter_text(text: str, *, config: Optional[FilterConfig] = None) -> str:
    """
    Filter Pandoc JSON text (what ``pandoc --filter`` sends on stdin).

    Raises:
        ValidationError: If the text is not a valid Pandoc document
    """
    config = config or FilterConfig()
    document = loads_document(text, validate=config.validate, strict=config.strict)
    return dumps_document(run_filter(document, config=config).document)
