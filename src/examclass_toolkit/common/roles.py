"""
Module: common.roles

Purpose:
    Depth/role resolution shared by the batch LaTeX filter and the
    interactive editor. A container's role is never stored: it is the
    number of container ancestors (itself included) clamped to four levels.

Key Functions:
    - role_for_depth(): Map a container depth to its Role
    - environment_for_depth(): Environment name wrapping a run at a depth
    - container_depth(): Count containers along an ancestor chain

Dependencies:
    - enum (std)
    - typing (std)

Used By:
    - latex.transformer: Top-down depth while emitting commands
    - editor.commands / editor.structure: Bottom-up depth from a selection
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Iterable, Optional, TypeVar

T = TypeVar("T")

MAX_DEPTH = 4  # subsubpart absorbs every deeper level


class Role(str, Enum):
    """Structural role of a container, derived from its nesting depth."""
    QUESTION = "question"
    PART = "part"
    SUBPART = "subpart"
    SUBSUBPART = "subsubpart"

    def __str__(self) -> str:
        return self.value

    @property
    def command(self) -> str:
        """LaTeX command introducing a container of this role."""
        return "\\" + self.value

    @property
    def environment(self) -> Optional[str]:
        """
        Environment that groups sibling containers of this role.

        Questions have none: they sit in the outer ``questions``
        environment supplied by the document template.
        """
        if self is Role.QUESTION:
            return None
        return self.value + "s"

    @property
    def depth(self) -> int:
        """Nominal depth of this role (question=1 ... subsubpart=4)."""
        return _ROLE_ORDER.index(self) + 1


_ROLE_ORDER = (Role.QUESTION, Role.PART, Role.SUBPART, Role.SUBSUBPART)


def clamp_depth(depth: int) -> int:
    """Clamp a raw container depth into the 1..4 range."""
    return max(1, min(depth, MAX_DEPTH))


def role_for_depth(depth: int) -> Role:
    """
    Resolve the role for a container at ``depth``.

    Args:
        depth: Number of container ancestors including the container itself.

    Returns:
        Role for the depth; anything at or below 1 is a question and
        anything at or beyond 4 is a subsubpart.

    Example:
        >>> role_for_depth(2)
        <Role.PART: 'part'>
        >>> role_for_depth(7)
        <Role.SUBSUBPART: 'subsubpart'>
    """
    return _ROLE_ORDER[clamp_depth(depth) - 1]


def environment_for_depth(depth: int) -> Optional[str]:
    """Environment name for a run of containers at ``depth`` (None at depth 1)."""
    if depth <= 1:
        return None
    return role_for_depth(depth).environment


def container_depth(chain: Iterable[T], is_container: Callable[[T], bool]) -> int:
    """
    Count the containers in an ancestor chain.

    The chain runs from the root to the node of interest (inclusive), so
    the result is that node's depth when it is itself a container. The
    count is recomputed on every call and never cached, since the tree
    may have been spliced since the last call.

    Args:
        chain: Nodes from the root down to the node being resolved.
        is_container: Predicate selecting container nodes.

    Returns:
        Number of containers in the chain (unclamped).
    """
    return sum(1 for node in chain if is_container(node))
