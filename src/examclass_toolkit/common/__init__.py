"""Common semantics shared by the LaTeX filter and the editor."""

from __future__ import annotations

from .attributes import (
    POINTS_KEYS,
    SPACE_KEYS,
    normalize_points,
    normalize_space,
    normalize_title,
)
from .roles import (
    MAX_DEPTH,
    Role,
    clamp_depth,
    container_depth,
    environment_for_depth,
    role_for_depth,
)

__all__ = [
    # attributes
    "POINTS_KEYS",
    "SPACE_KEYS",
    "normalize_points",
    "normalize_space",
    "normalize_title",
    # roles
    "MAX_DEPTH",
    "Role",
    "clamp_depth",
    "container_depth",
    "environment_for_depth",
    "role_for_depth",
]
