# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""OutlineRenderer - Indented plain text view of a HashTree, for debugging."""

from __future__ import annotations

from typing import Any

from .base import RendererBase


class OutlineRenderer(RendererBase):
    """Renderer producing one indented line per node.

    Usage:
        >>> print(OutlineRenderer(show_uid=True).render(tree))
        weather [1]
          Earthquakes [2]
    """

    def __init__(
        self,
        indent: str = '  ',
        placeholder: str = '',
        show_uid: bool = False,
    ) -> None:
        """Initialize the renderer.

        Args:
            indent: String repeated once per depth level.
            placeholder: Text shown for nodes without a value.
            show_uid: If True, append the node uid in brackets.
        """
        super().__init__()
        self.indent = indent
        self.placeholder = placeholder
        self.show_uid = show_uid

    def format_value(self, value: Any) -> str:
        return self.placeholder if value is None else str(value)

    def visit(self, node, depth: int, has_children: bool) -> None:
        text = self.format_value(node.value)
        if self.show_uid:
            text = f"{text} [{node.uid}]" if text else f"[{node.uid}]"
        self.write(f"{self.indent * depth}{text}\n")
