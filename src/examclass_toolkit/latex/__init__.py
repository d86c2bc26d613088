"""
Module: latex

Purpose:
    Batch conversion of ``part`` Divs in a Pandoc document into
    exam-class LaTeX commands and environments.

Key Modules:
    - transformer: Container/solution transform with sibling grouping
    - preface: ``questions`` environment passes
    - pipeline: Orchestrates a filter run
    - config: FilterConfig

Used By:
    - examclass_toolkit.cli
"""

from .config import FilterConfig
from .pipeline import FilterResult, filter_json, filter_text, run_filter
from .preface import ensure_questions_environment, relocate_questions_preface
from .transformer import command_for_container, tex_lines, transform_blocks

__all__ = [
    "FilterConfig",
    "FilterResult",
    "filter_json",
    "filter_text",
    "run_filter",
    "ensure_questions_environment",
    "relocate_questions_preface",
    "command_for_container",
    "tex_lines",
    "transform_blocks",
]
