# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Categories - Example building a HashTree from an unordered category list.

A didactic example showing forward references: 'Fires' names
'Hurricanes' as parent before 'Hurricanes' itself is loaded, and
'weather' names a parent (9999) that never appears.

Run:
    python examples/categories/categories.py
"""

from __future__ import annotations

import logging

from genro_hashtree import HashTree
from genro_hashtree.renderers import HtmlListRenderer, OutlineRenderer

CATEGORIES = [
    {'id': 1, 'weather_condition': 'weather', 'parent_id': 9999},
    {'id': 2, 'weather_condition': 'Earthquakes', 'parent_id': 1},
    {'id': 3, 'weather_condition': 'Major', 'parent_id': 2},
    {'id': 4, 'weather_condition': 'Minor', 'parent_id': 2},
    {'id': 5, 'weather_condition': 'Fires', 'parent_id': 9},
    {'id': 6, 'weather_condition': 'Rain', 'parent_id': 1},
    {'id': 7, 'weather_condition': 'Flooding', 'parent_id': 6},
    {'id': 8, 'weather_condition': 'Washout', 'parent_id': 6},
    {'id': 9, 'weather_condition': 'Hurricanes', 'parent_id': 1},
]


def build_tree() -> HashTree:
    """Create the category tree."""
    tree = HashTree()
    for category in CATEGORIES:
        tree.create_node(
            category['weather_condition'], category['id'], category['parent_id']
        )
    return tree


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)

    tree = build_tree()
    print(HtmlListRenderer().render(tree))
    print(OutlineRenderer(show_uid=True, placeholder='?').render(tree.iterator(9999)))
