"""
Module: editor.config

Purpose:
    Configuration dataclass for editing sessions.

Key Classes:
    - EditorConfig: History settings

Used By:
    - editor.history.Editor
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class EditorConfig:
    """
    Configuration for an editing session.

    Attributes:
        history_limit: Maximum number of undoable edits kept (default 100)
    """
    history_limit: int = 100

    def __post_init__(self) -> None:
        if self.history_limit < 1:
            raise ValueError(f"history_limit must be positive, got {self.history_limit}")
