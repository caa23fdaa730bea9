# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""RendererBase - Abstract base class for HashTree renderers."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any

from ..iterator import HashTreeIterator
from ..walker import TreeVisitor, TreeWalker

if TYPE_CHECKING:
    from ..store import HashTree


class RendererBase(TreeVisitor):
    """Abstract base class for renderers driven by TreeWalker.

    Output is accumulated in a list of chunks and emitted explicitly:
    render() calls begin(), walks the tree, then returns finish().
    Nothing is flushed implicitly when a renderer is discarded.

    Subclasses implement visit() and may override begin(), finish(),
    enter_group() and leave_group().

    Usage:
        >>> html = HtmlListRenderer().render(tree)
        >>> outline = OutlineRenderer().render(tree.iterator(1))
    """

    def __init__(self) -> None:
        self._chunks: list[str] = []

    def write(self, text: str) -> None:
        """Append text to the output buffer."""
        self._chunks.append(text)

    def begin(self) -> None:
        """Reset the buffer before a walk."""
        self._chunks = []

    def finish(self) -> str:
        """Return the accumulated output."""
        return ''.join(self._chunks)

    def render(self, source: HashTree | HashTreeIterator) -> str:
        """Render a tree (from its first node) or an iterator.

        Args:
            source: A HashTree, or a HashTreeIterator scoped to the frame
                to render.

        Returns:
            The rendered text.
        """
        iterator = source if isinstance(source, HashTreeIterator) else source.iterator()
        self.begin()
        TreeWalker(iterator, self).run()
        return self.finish()

    def format_value(self, value: Any) -> str:
        """Convert a node value to text. Placeholders render as ''."""
        return '' if value is None else str(value)

    @abstractmethod
    def visit(self, node, depth: int, has_children: bool) -> None:
        ...
