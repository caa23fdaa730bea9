# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HashTree node class."""

from __future__ import annotations

import uuid
from typing import Any, Hashable


def new_uid() -> str:
    """Return a fresh unique identifier."""
    return uuid.uuid4().hex


def is_empty_uid(uid: Any) -> bool:
    """True if uid is missing (None or empty string)."""
    return uid is None or uid == ''


class HashTreeNode:
    """A node in a HashTree registry.

    Nodes never hold references to other nodes: the parent and the
    children are stored as uids and resolved through the owning HashTree.

    Each node has:
    - uid: The node's identifier, unique within its registry
    - value: Arbitrary payload (None for placeholder nodes)
    - parent: uid of the parent node, or None for a root
    - children: Ordered tuple of child uids

    Example:
        >>> node = HashTreeNode('weather', uid=1, parent=9999)
        >>> node.uid
        1
        >>> node.parent
        9999
        >>> node.children
        ()
    """

    __slots__ = ('_uid', 'value', 'parent', '_children')

    def __init__(
        self,
        value: Any = None,
        uid: Hashable | None = None,
        parent: Hashable | None = None,
    ) -> None:
        """Initialize a HashTreeNode.

        Args:
            value: The node's payload.
            uid: The node's identifier. Generated when missing or empty.
            parent: uid of the parent node.
        """
        self._uid = new_uid() if is_empty_uid(uid) else uid
        self.value = value
        self.parent = parent
        self._children: list[Hashable] = []

    def __repr__(self) -> str:
        return (
            f"HashTreeNode({self._uid!r}, value={self.value!r}, "
            f"children={len(self._children)})"
        )

    @property
    def uid(self) -> Hashable:
        """The node's identifier."""
        return self._uid

    @property
    def children(self) -> tuple[Hashable, ...]:
        """Child uids in insertion order."""
        return tuple(self._children)

    @property
    def has_children(self) -> bool:
        """True if the node has at least one child."""
        return len(self._children) > 0

    @property
    def children_count(self) -> int:
        return len(self._children)

    @property
    def is_placeholder(self) -> bool:
        """True if the node was materialized without a value."""
        return self.value is None

    @property
    def is_root(self) -> bool:
        return self.parent is None

    def _add_child(self, uid: Hashable, unique: bool = False) -> bool:
        """Append a child uid. Returns False if skipped as duplicate."""
        if unique and uid in self._children:
            return False
        self._children.append(uid)
        return True

    def _remove_child(self, uid: Hashable) -> None:
        """Remove every occurrence of uid from the children."""
        self._children[:] = [c for c in self._children if c != uid]
