# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Value classification for JSON-like tree nodes.

Every value held in a tree falls into one variant of :class:`NodeKind`.
Only ``MAPPING`` values are branch nodes: they can be walked by a path and
can receive children. Everything else is leaf data.

Example:
    >>> kind_of({'a': 1})
    <NodeKind.MAPPING: 'mapping'>
    >>> is_branch([1, 2])
    False
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any


class NodeKind(Enum):
    """Variants of a JSON-like value."""

    MAPPING = 'mapping'
    SEQUENCE = 'sequence'
    STRING = 'string'
    NUMBER = 'number'
    BOOLEAN = 'boolean'
    NULL = 'null'

    @property
    def is_branch(self) -> bool:
        """True for the only walkable variant."""
        return self is NodeKind.MAPPING


def kind_of(value: Any) -> NodeKind:
    """Classify a value.

    Args:
        value: Any value stored in a tree.

    Returns:
        The NodeKind variant of the value.

    Raises:
        TypeError: If the value has no JSON-like counterpart.
    """
    if isinstance(value, Mapping):
        return NodeKind.MAPPING
    # bool is a subclass of int, check it first
    if isinstance(value, bool):
        return NodeKind.BOOLEAN
    if isinstance(value, str):
        return NodeKind.STRING
    if isinstance(value, (int, float)):
        return NodeKind.NUMBER
    if isinstance(value, (list, tuple)):
        return NodeKind.SEQUENCE
    if value is None:
        return NodeKind.NULL
    raise TypeError(f"Unsupported tree value type: {type(value).__name__}")


def is_branch(value: Any) -> bool:
    """True if value is a branch node (a mapping, never a sequence)."""
    return isinstance(value, Mapping)


def is_leaf(value: Any) -> bool:
    """True if value is leaf data."""
    return not isinstance(value, Mapping)
