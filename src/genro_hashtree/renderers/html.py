# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HtmlListRenderer - Render a HashTree as a nested HTML list.

Example:
    Rendering a category tree::

        from genro_hashtree import HashTree
        from genro_hashtree.renderers import HtmlListRenderer

        tree = HashTree()
        tree.create_node('weather', 1)
        tree.create_node('Rain', 6, 1)
        tree.create_node('Flooding', 7, 6)

        print(HtmlListRenderer().render(tree))

    Output::

        <ul>
        <li>weather<ul>
        <li>Rain<ul>
        <li>Flooding</li>
        </ul></li>
        </ul></li>
        </ul>
"""

from __future__ import annotations

from html import escape as html_escape
from typing import Any

from .base import RendererBase


class HtmlListRenderer(RendererBase):
    """Renderer producing <ul>/<li> markup.

    A node with children opens '<li>value<ul>' and the matching group is
    closed with '</ul></li>'; a leaf is a single '<li>value</li>' line.
    """

    def __init__(self, indent: str | None = None, escape: bool = True) -> None:
        """Initialize the renderer.

        Args:
            indent: If set, each line is prefixed by indent repeated
                once per nesting level.
            escape: If True, node values are HTML-escaped.
        """
        super().__init__()
        self.indent = indent
        self.escape = escape

    def _line(self, text: str, depth: int) -> None:
        prefix = self.indent * depth if self.indent else ''
        self.write(f"{prefix}{text}\n")

    def format_value(self, value: Any) -> str:
        text = super().format_value(value)
        return html_escape(text) if self.escape else text

    def begin(self) -> None:
        super().begin()
        self.write("<ul>\n")

    def finish(self) -> str:
        self.write("</ul>\n")
        return super().finish()

    def visit(self, node, depth: int, has_children: bool) -> None:
        value = self.format_value(node.value)
        if has_children:
            self._line(f"<li>{value}<ul>", depth)
        else:
            self._line(f"<li>{value}</li>", depth)

    def leave_group(self, node, depth: int) -> None:
        self._line("</ul></li>", depth)
