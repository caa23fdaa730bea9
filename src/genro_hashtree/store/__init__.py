# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HashTree store package - The node registry.

The package is organized into:
- core: Main HashTree class with creation, linking, lookup and traversal
- loading: Functions for loading flat records into a HashTree

Example:
    >>> from genro_hashtree import HashTree
    >>> tree = HashTree()
    >>> tree.create_node('weather', 1)
    1
    >>> tree.create_node('Rain', 6, 1)
    6
    >>> tree.get_children(1)
    (6,)
"""

from .core import HashTree
from .loading import load_from_records

__all__ = ["HashTree", "load_from_records"]
