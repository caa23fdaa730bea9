# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-HashTree - A mutable tree stored as a hash table of nodes.

Nodes reference their parent and children through uids resolved by a
central registry, so no parent/child reference cycles are ever built.
A lightweight, zero-dependency library for the Genro ecosystem.
"""

__version__ = "0.1.0"

from .exceptions import HashTreeError, InvalidArgumentError
from .iterator import HashTreeIterator
from .node import HashTreeNode
from .renderers import HtmlListRenderer, OutlineRenderer, RendererBase
from .store import HashTree, load_from_records
from .walker import TreeVisitor, TreeWalker

__all__ = [
    # Core classes
    "HashTree",
    "HashTreeNode",
    "load_from_records",
    # Traversal
    "HashTreeIterator",
    "TreeVisitor",
    "TreeWalker",
    # Renderers
    "RendererBase",
    "HtmlListRenderer",
    "OutlineRenderer",
    # Exceptions
    "HashTreeError",
    "InvalidArgumentError",
]
