"""A small cyclic structure held together by strong and weak links."""

from __future__ import annotations

import weakref
from typing import Optional


class Node:
    """A node owning its right neighbour and only weakly referring to its left one."""

    def __init__(
        self, data: str = "", right: Optional[Node] = None, left: Optional[Node] = None
    ) -> None:
        self.data = data
        self.right = right
        self._left: Optional[weakref.ref] = None
        self.left = left

    @property
    def left(self) -> Optional[Node]:
        """The left neighbour, or ``None`` once it no longer exists."""
        return self._left() if self._left is not None else None

    @left.setter
    def left(self, node: Optional[Node]) -> None:
        self._left = weakref.ref(node) if node is not None else None

    def __repr__(self) -> str:
        return f"Node({self.data!r})"


class _Handle:
    """A reset-able handle on a node."""

    def __init__(self, target: Optional[Node]) -> None:
        self._target = target

    def lock(self) -> Optional[Node]:
        """The node, or ``None`` after the handle was reset."""
        return self._target


def build_cycle() -> _Handle:
    """Build root -> right -> right right -> root and return a handle on the root."""
    root = Node("root")
    root.right = Node("right")
    root.right.left = root
    root.right.right = Node("right right")
    root.right.right.left = root.right
    root.right.right.right = root
    root.left = root.right.right
    return _Handle(root)


def reset(ref: _Handle) -> None:
    """Make ``ref`` refer to nothing."""
    ref._target = None