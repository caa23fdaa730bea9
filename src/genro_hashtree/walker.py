# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TreeWalker - Depth-first walk driver with group events.

The walker drives a HashTreeIterator in pre-order and reports three events
to a TreeVisitor:

- visit(node, depth, has_children): every node, parent before descendants
- enter_group(node, depth): before the children of node are visited
- leave_group(node, depth): after the last child of node was visited

Recursion uses an explicit stack of sub-iterators obtained through
HashTreeIterator.get_children(), so deep trees do not hit the interpreter
recursion limit.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .iterator import HashTreeIterator
    from .node import HashTreeNode

logger = logging.getLogger(__name__)


class TreeVisitor(ABC):
    """Receiver of TreeWalker events.

    Subclasses must implement visit(); the group hooks default to no-ops.
    """

    @abstractmethod
    def visit(self, node: HashTreeNode, depth: int, has_children: bool) -> None:
        """Called once per node, before its children."""

    def enter_group(self, node: HashTreeNode, depth: int) -> None:
        """Called after visit() when node has children."""

    def leave_group(self, node: HashTreeNode, depth: int) -> None:
        """Called when the children of node are exhausted."""


class TreeWalker:
    """Walk a HashTreeIterator and notify a TreeVisitor.

    Example:
        >>> walker = TreeWalker(tree.iterator(), MyVisitor())
        >>> walker.run()
    """

    def __init__(self, iterator: HashTreeIterator, visitor: TreeVisitor) -> None:
        self.iterator = iterator
        self.visitor = visitor

    def run(self) -> int:
        """Walk the whole frame of the iterator and its descendants.

        Returns:
            Number of visited nodes.
        """
        visited = 0
        # Each entry: (iterator, node owning the frame, depth of the frame)
        stack: list[tuple[HashTreeIterator, HashTreeNode | None, int]] = [
            (self.iterator, None, 0)
        ]

        while stack:
            it, owner, depth = stack[-1]
            if not it.valid():
                stack.pop()
                if owner is not None:
                    self.visitor.leave_group(owner, depth - 1)
                continue

            node = it.current()
            has_children = it.has_children()
            children = it.get_children() if has_children else None
            it.next()

            self.visitor.visit(node, depth, has_children)
            visited += 1
            if children is not None:
                self.visitor.enter_group(node, depth)
                stack.append((children, node, depth + 1))

        logger.debug("Walk visited %d nodes", visited)
        return visited
