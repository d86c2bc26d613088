"""
Module: latex.config

Purpose:
    Configuration dataclass for the LaTeX exam filter. Provides
    immutable settings for attribute aliases and the optional
    post-processing passes.

Key Classes:
    - FilterConfig: Main configuration for a filter run

Dependencies:
    - dataclasses: For frozen dataclass support

Used By:
    - latex.transformer: Attribute alias lookup
    - latex.pipeline: Pass selection and validation mode
    - cli: Built from command-line flags
"""

from dataclasses import dataclass
from typing import Tuple

from ..common.attributes import POINTS_KEYS, SPACE_KEYS


@dataclass(frozen=True)
class FilterConfig:
    """
    Configuration for the exam filter.

    Attributes:
        points_keys: Div attribute keys read as points, in priority order
        space_keys: Solution attribute keys read as answer space, in priority order
        wrap_questions: Insert a ``questions`` environment around the
            questions when the document has none (default False; the
            template normally supplies it)
        relocate_preface: Move ``\\begin{questions}`` down to the first
            question command (default True)
        validate: Check the input document shape before converting (default True)
        strict: Also run JSON schema validation (default False)
    """
    points_keys: Tuple[str, ...] = POINTS_KEYS
    space_keys: Tuple[str, ...] = SPACE_KEYS
    wrap_questions: bool = False
    relocate_preface: bool = True
    validate: bool = True
    strict: bool = False
