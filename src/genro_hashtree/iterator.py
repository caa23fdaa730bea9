# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HashTreeIterator - Frame-scoped iterator over a HashTree node mapping.

The iterator walks one frame: an ordered sequence of sibling uids. Each uid
is resolved through the shared node mapping, so the iterator yields nodes,
not raw uids. Recursion is left to the caller: get_children() returns a new
iterator scoped to the current node's children, and the caller decides when
to descend.

Example:
    Pre-order walk driven by the caller::

        def dump(it, depth=0):
            while it.valid():
                node = it.current()
                print('  ' * depth + str(node.value))
                if it.has_children():
                    dump(it.get_children(), depth + 1)
                it.next()

        dump(HashTreeIterator(tree.get_all_nodes()))
"""

from __future__ import annotations

from typing import Hashable, Iterable, Iterator, Mapping, TYPE_CHECKING

if TYPE_CHECKING:
    from .node import HashTreeNode


class HashTreeIterator:
    """Forward-only iterator over a frame of sibling uids.

    Attributes:
        frame: Tuple of uids this iterator is scoped to.
    """

    __slots__ = ('_nodes', 'frame', '_position')

    def __init__(
        self,
        nodes: Mapping[Hashable, HashTreeNode],
        frame: Iterable[Hashable] | None = None,
    ) -> None:
        """Initialize a HashTreeIterator.

        Args:
            nodes: The uid -> node mapping of a HashTree.
            frame: Sibling uids to iterate. If None, the frame is the first
                key of the mapping, so the first node is visited itself
                rather than skipped in favour of its children.
        """
        self._nodes = nodes
        if frame is None:
            first = next(iter(nodes), None)
            self.frame: tuple[Hashable, ...] = () if first is None else (first,)
        else:
            self.frame = tuple(frame)
        self._position = 0

    def __repr__(self) -> str:
        return f"HashTreeIterator({list(self.frame)!r}, position={self._position})"

    def __len__(self) -> int:
        """Return the number of uids in the frame."""
        return len(self.frame)

    def __iter__(self) -> Iterator[HashTreeNode]:
        return self

    def __next__(self) -> HashTreeNode:
        if not self.valid():
            raise StopIteration
        node = self.current()
        self.next()
        return node

    def valid(self) -> bool:
        """True while the cursor is on an element of the frame."""
        return self._position < len(self.frame)

    def key(self) -> Hashable | None:
        """Return the uid at the cursor, or None when exhausted."""
        if not self.valid():
            return None
        return self.frame[self._position]

    def current(self) -> HashTreeNode | None:
        """Return the node at the cursor, or None when exhausted.

        Raises:
            KeyError: If the frame holds a uid missing from the mapping.
        """
        if not self.valid():
            return None
        return self._nodes[self.frame[self._position]]

    def next(self) -> None:
        """Move the cursor one step forward."""
        if self.valid():
            self._position += 1

    def has_children(self) -> bool:
        """True if the node at the cursor has children."""
        node = self.current()
        return node is not None and node.has_children

    def get_children(self) -> HashTreeIterator:
        """Return a new iterator over the current node's children.

        The new iterator shares the node mapping. For a leaf (or an
        exhausted iterator) it is empty and immediately exhausted.
        """
        node = self.current()
        children = node.children if node is not None else ()
        return HashTreeIterator(self._nodes, children)
