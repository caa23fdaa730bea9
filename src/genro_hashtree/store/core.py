# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HashTree - A tree stored as a flat hash table of nodes.

This module provides the HashTree class, the registry that owns every
HashTreeNode of a tree. Nodes reference each other only through uids, so
parent and children links never create object reference cycles.

Key Features:
    - **Flat storage**: One dict maps uid -> node for O(1) lookup
    - **Upsert creation**: create_node() on an existing uid updates it
    - **Forward references**: A node may name a parent that does not exist
      yet; a placeholder (value None) is created and filled in later
    - **Optional head**: A sentinel root used as implicit parent
    - **Lazy traversal**: iterator() returns a HashTreeIterator over the nodes

Example:
    Building a tree where a child arrives before its parent::

        tree = HashTree()
        tree.create_node('weather', 1)
        tree.create_node('Fires', 5, 9)        # 9 becomes a placeholder
        tree.create_node('Hurricanes', 9, 1)   # placeholder gets its value

        tree.get_children(9)   # (5,)
        tree.get_children(1)   # (9,)
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Callable, Hashable, Iterable, Iterator, Mapping

from ..exceptions import InvalidArgumentError
from ..iterator import HashTreeIterator
from ..node import HashTreeNode, is_empty_uid, new_uid
from .loading import load_from_records

logger = logging.getLogger(__name__)


class HashTree:
    """A registry of HashTreeNode instances keyed by uid.

    HashTree provides:
    - create_node(value, uid, parent_uid): Create or update a node
    - attach_child(parent_uid, child_uid): Link a child under a parent
    - get_node(uid) and the get_value/get_parent/get_children accessors
    - get_all_nodes(): Read-only view of the uid -> node mapping
    - iterator(start) / walk(): Depth-first traversal

    Lookup misses return None (or a given default) and never raise;
    a missing uid or value at the API boundary raises InvalidArgumentError.

    Attributes:
        head: uid of the head node, or None if the tree has no head.

    Example:
        >>> tree = HashTree()
        >>> uid = tree.create_node('root')
        >>> tree.get_value(uid)
        'root'
    """

    __slots__ = ('_nodes', 'head', '_unique_children', '_uid_factory')

    def __init__(
        self,
        source: Iterable[Any] | None = None,
        build_head: bool = False,
        head_value: Any = 'HEAD',
        unique_children: bool = False,
        uid_factory: Callable[[], Hashable] | None = None,
    ) -> None:
        """Initialize a HashTree.

        Args:
            source: Optional records to load, each one a tuple
                (value, uid, parent_uid) with uid and parent_uid optional,
                or a mapping with 'value', 'uid' and 'parent' keys.
            build_head: If True, create a head node used as the implicit
                parent by attach_child() and add_first().
            head_value: Value stored in the head node.
            unique_children: If True, attach_child() does not append a
                child uid that is already in the parent's children.
                By default repeated links append duplicates.
            uid_factory: Callable returning new uids. Defaults to
                uuid4 hex strings.

        Example:
            >>> HashTree([('weather', 1), ('Rain', 6, 1)])
            >>> HashTree(build_head=True)
            >>> HashTree(unique_children=True)
        """
        self._nodes: dict[Hashable, HashTreeNode] = {}
        self.head: Hashable | None = None
        self._unique_children = unique_children
        self._uid_factory = uid_factory

        if build_head:
            self.head = self.create_node(head_value)

        if source is not None:
            load_from_records(self, source)

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        return f"HashTree({list(self._nodes.keys())})"

    def __len__(self) -> int:
        """Return the number of nodes, placeholders included."""
        return len(self._nodes)

    def __iter__(self) -> Iterator[Hashable]:
        """Iterate over uids in creation order."""
        return iter(self._nodes)

    def __contains__(self, uid: Hashable) -> bool:
        return uid in self._nodes

    @property
    def unique_children(self) -> bool:
        return self._unique_children

    # ==================== Internals ====================

    def _new_node(
        self, value: Any, uid: Hashable | None, parent_uid: Hashable | None = None
    ) -> HashTreeNode:
        """Create a node and store it in the hash table.

        A generated uid is drawn again until it is not in use.
        """
        if is_empty_uid(uid):
            factory = self._uid_factory or new_uid
            uid = factory()
            while is_empty_uid(uid) or uid in self._nodes:
                uid = factory()
        node = HashTreeNode(value, uid, parent_uid)
        self._nodes[node.uid] = node
        return node

    def _link(
        self, parent_uid: Hashable, child_uid: Hashable, unique: bool | None = None
    ) -> None:
        """Make child_uid a child of parent_uid, materializing both ends.

        unique defaults to the tree's unique_children setting.
        """
        if unique is None:
            unique = self._unique_children
        parent = self._nodes.get(parent_uid)
        if parent is None:
            logger.debug("Creating placeholder parent %r", parent_uid)
            parent = self._new_node(None, parent_uid)
        child = self._nodes.get(child_uid)
        if child is None:
            logger.debug("Creating placeholder child %r", child_uid)
            child = self._new_node(None, child_uid)

        if parent._add_child(child_uid, unique=unique):
            logger.debug("Linked %r under %r", child_uid, parent_uid)
        child.parent = parent_uid

    def _detach(self, node: HashTreeNode) -> None:
        """Remove node from its current parent's children."""
        old_parent = self._nodes.get(node.parent)
        if old_parent is not None:
            old_parent._remove_child(node.uid)

    # ==================== Core API ====================

    def create_node(
        self,
        value: Any,
        uid: Hashable | None = None,
        parent_uid: Hashable | None = None,
    ) -> Hashable:
        """Create a node, or update it if uid already exists.

        The update path is what allows a child to be created before its
        parent: the parent is first materialized as a placeholder and
        receives its real value when its own create_node() call arrives.

        Args:
            value: The node's value. Must not be None.
            uid: The node's uid. Generated if missing.
            parent_uid: uid of the parent. If not in the tree yet, a
                placeholder node is created for it. On update, None keeps
                the current parent.

        Returns:
            The node's uid.

        Raises:
            InvalidArgumentError: If value is None.

        Example:
            >>> tree.create_node('Fires', 5, 9)
            5
            >>> tree.get_value(9) is None  # placeholder
            True
        """
        if value is None:
            raise InvalidArgumentError("A value is required to create a node")

        if is_empty_uid(parent_uid):
            parent_uid = None

        if not is_empty_uid(uid) and uid in self._nodes:
            self.modify_node(value, uid, parent_uid)
            return uid

        if parent_uid is not None and parent_uid == uid:
            logger.warning("Ignoring self parent for node %r", uid)
            parent_uid = None

        node = self._new_node(value, uid)
        logger.debug("Created node %r", node.uid)
        if parent_uid is not None:
            self._link(parent_uid, node.uid)
        return node.uid

    def modify_node(
        self,
        value: Any,
        uid: Hashable,
        parent_uid: Hashable | None = None,
    ) -> Hashable | None:
        """Update value and parent of an existing node.

        Moving the node to a different parent removes it from the old
        parent's children, so the tree stays consistent.

        Args:
            value: The new value. Must not be None.
            uid: uid of the node to update.
            parent_uid: New parent uid. None keeps the current parent.

        Returns:
            The node's uid, or None if uid is not in the tree.

        Raises:
            InvalidArgumentError: If value is None or uid is missing.
        """
        if value is None:
            raise InvalidArgumentError("A value is required to modify a node")
        node = self.get_node(uid)
        if node is None:
            return None

        node.value = value
        logger.debug("Updated node %r", uid)

        if is_empty_uid(parent_uid) or parent_uid == node.parent:
            return uid
        if parent_uid == uid:
            logger.warning("Ignoring self parent for node %r", uid)
            return uid

        self._detach(node)
        self._link(parent_uid, uid, unique=True)
        return uid

    def attach_child(
        self, parent_uid: Hashable | None, child_uid: Hashable
    ) -> Hashable:
        """Link child_uid under parent_uid.

        Both sides are updated: the parent's children get child_uid
        appended and the child's parent is set. Linking the same pair again
        appends a duplicate unless the tree was built with
        unique_children=True. Missing nodes on either side are created as
        placeholders.

        Args:
            parent_uid: uid of the parent. If None, the head is used.
            child_uid: uid of the child.

        Returns:
            child_uid.

        Raises:
            InvalidArgumentError: If child_uid is missing, or parent_uid is
                missing and the tree has no head.
        """
        if is_empty_uid(child_uid):
            raise InvalidArgumentError("A uid for the child is required")
        if is_empty_uid(parent_uid):
            parent_uid = self.head
            if parent_uid is None:
                raise InvalidArgumentError(
                    "A parent uid is required when the tree has no head"
                )

        if parent_uid == child_uid:
            logger.warning("Ignoring attempt to attach %r to itself", child_uid)
            return child_uid

        self._link(parent_uid, child_uid)
        return child_uid

    def add_first(self, uid: Hashable) -> Hashable:
        """Attach uid as a child of the head node.

        Raises:
            InvalidArgumentError: If uid is missing or the tree has no head.
        """
        if is_empty_uid(uid):
            raise InvalidArgumentError("A unique id is required")
        return self.attach_child(self.head, uid)

    # ==================== Lookup ====================

    def get_node(self, uid: Hashable, default: Any = None) -> HashTreeNode | Any:
        """Get node by uid.

        Args:
            uid: The node's uid.
            default: Value to return if uid is not in the tree.

        Returns:
            HashTreeNode if found, default otherwise.

        Raises:
            InvalidArgumentError: If uid is missing.
        """
        if is_empty_uid(uid):
            raise InvalidArgumentError("A unique id is required")
        return self._nodes.get(uid, default)

    def get_value(self, uid: Hashable) -> Any:
        """Return the node's value, or None if not found."""
        node = self.get_node(uid)
        return None if node is None else node.value

    def get_parent(self, uid: Hashable) -> Hashable | None:
        """Return the parent uid, or None for roots and unknown uids."""
        node = self.get_node(uid)
        return None if node is None else node.parent

    def get_children(self, uid: Hashable) -> tuple[Hashable, ...] | None:
        """Return the child uids, or None if uid is not in the tree."""
        node = self.get_node(uid)
        return None if node is None else node.children

    def get_all_nodes(self) -> Mapping[Hashable, HashTreeNode]:
        """Return a read-only view of the uid -> node mapping."""
        return MappingProxyType(self._nodes)

    def roots(self) -> list[HashTreeNode]:
        """Return nodes without a parent, in creation order."""
        return [node for node in self._nodes.values() if node.parent is None]

    # ==================== Traversal ====================

    def _start_frame(
        self, start: Hashable | Iterable[Hashable]
    ) -> tuple[Hashable, ...]:
        """Resolve start into a frame. A known uid wins over an iterable."""
        try:
            if start in self._nodes:
                return (start,)
        except TypeError:
            pass
        if isinstance(start, Iterable) and not isinstance(start, (str, bytes)):
            return tuple(start)
        return (start,)

    def iterator(
        self, start: Hashable | Iterable[Hashable] | None = None
    ) -> HashTreeIterator:
        """Return a HashTreeIterator over this tree.

        Args:
            start: A uid to start from, or an iterable of sibling uids.
                A uid present in the tree is always taken as a single
                start node, even when it is a tuple.
                If None, the first created node is the starting frame.

        Example:
            >>> it = tree.iterator(1)
            >>> it.current().value
            'weather'
        """
        if start is None:
            return HashTreeIterator(self._nodes)
        return HashTreeIterator(self._nodes, self._start_frame(start))

    def walk(
        self, start: Hashable | Iterable[Hashable] | None = None
    ) -> Iterator[tuple[int, HashTreeNode]]:
        """Yield (depth, node) pairs in pre-order.

        Uses a stack of sub-iterators, so the depth of the tree is not
        bounded by the recursion limit.

        Example:
            >>> for depth, node in tree.walk(1):
            ...     print('  ' * depth, node.value)
        """
        stack: list[tuple[HashTreeIterator, int]] = [(self.iterator(start), 0)]
        while stack:
            it, depth = stack[-1]
            if not it.valid():
                stack.pop()
                continue
            node = it.current()
            children = it.get_children() if it.has_children() else None
            it.next()
            yield depth, node
            if children is not None:
                stack.append((children, depth + 1))

    # ==================== Conversion ====================

    def as_dict(self, uid: Hashable | None = None) -> dict[Hashable, Any]:
        """Convert to a nested dict keyed by uid.

        Each entry is {'value': ..., 'children': {...}}. Without uid the
        result holds every root of the tree. An unknown uid gives {}.
        """
        if uid is None:
            start = self.roots()
        else:
            node = self.get_node(uid)
            if node is None:
                return {}
            start = [node]

        result: dict[Hashable, Any] = {}
        stack: list[tuple[HashTreeNode, dict[Hashable, Any]]] = [
            (node, result) for node in reversed(start)
        ]
        while stack:
            node, target = stack.pop()
            entry: dict[str, Any] = {'value': node.value, 'children': {}}
            target[node.uid] = entry
            for child_uid in reversed(node.children):
                stack.append((self._nodes[child_uid], entry['children']))
        return result
