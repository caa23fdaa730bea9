# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Loading functions for populating a HashTree from flat records."""

from __future__ import annotations

from typing import Any, Iterable, Mapping, TYPE_CHECKING

if TYPE_CHECKING:
    from .core import HashTree


def load_from_records(tree: HashTree, records: Iterable[Any]) -> None:
    """Load flat records into a HashTree, in order.

    Records may name a parent that appears later in the sequence: the
    parent is held as a placeholder until its own record is loaded.

    Args:
        tree: Target HashTree.
        records: Iterable of either:
            - tuple (value,), (value, uid) or (value, uid, parent_uid)
            - mapping with 'value' and optional 'uid' and 'parent' keys

    Raises:
        TypeError: If a record is neither a tuple, a list nor a mapping.
        ValueError: If a tuple record has the wrong length.

    Example:
        >>> load_from_records(tree, [
        ...     ('weather', 1, 9999),
        ...     {'value': 'Earthquakes', 'uid': 2, 'parent': 1},
        ... ])
    """
    for record in records:
        if isinstance(record, Mapping):
            tree.create_node(
                record.get('value'), record.get('uid'), record.get('parent')
            )
        elif isinstance(record, (tuple, list)):
            if not 1 <= len(record) <= 3:
                raise ValueError(
                    f"Record must have 1 to 3 elements (value, uid, parent), "
                    f"got {len(record)}"
                )
            tree.create_node(*record)
        else:
            raise TypeError(
                f"record must be tuple, list or mapping, not {type(record).__name__}"
            )
