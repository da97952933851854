# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Loading and export functions for JsonTree.

This module converts between a live tree and external representations:

- load / loads: JSON file or text into a root mapping
- export_records: tree into a flat list of {path, name, data} records
- import_records: flat records back into a root mapping

These functions are used internally by JsonTree but can also be called
directly on a store instance.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable, TYPE_CHECKING

from ..exceptions import LoadError
from ..node import is_branch, is_leaf, kind_of
from ..paths import path_name, split_path

if TYPE_CHECKING:
    from .core import JsonTree

logger = logging.getLogger(__name__)


def loads(text: str | bytes) -> dict[str, Any]:
    """Parse JSON text into a root mapping.

    Object key order is preserved, so branch enumeration follows the
    order of the source document. Bytes may be UTF-8, UTF-16 or UTF-32.

    Args:
        text: JSON document.

    Returns:
        The parsed root mapping.

    Raises:
        LoadError: If the text is not valid JSON or its root is not an object.
    """
    try:
        data = json.loads(text)
    except ValueError as exc:
        logger.warning("Cannot parse JSON source: %s", exc)
        raise LoadError(f"Cannot parse JSON source: {exc}") from exc
    if not is_branch(data):
        logger.warning("JSON root is a %s, not an object", kind_of(data).value)
        raise LoadError(f"JSON root must be an object, not {kind_of(data).value}")
    return data


def load(filepath: str | Path) -> dict[str, Any]:
    """Read and parse a JSON file into a root mapping.

    Args:
        filepath: Path to the JSON file.

    Returns:
        The parsed root mapping.

    Raises:
        LoadError: If the file cannot be read or parsed.
    """
    path = Path(filepath)
    try:
        text = path.read_bytes()
    except OSError as exc:
        logger.warning("Cannot read %s: %s", path, exc)
        raise LoadError(f"Cannot read {path}: {exc}") from exc
    return loads(text)


def export_records(store: JsonTree) -> list[dict[str, Any]]:
    """Export every branch of a store as a flat record.

    Each record is ``{'path': ..., 'name': ..., 'data': ...}`` where data
    is a shallow copy of the branch's own pairs with branch children
    stripped, leaving only leaf data.

    The root and the top-level keys are not branches of the enumeration,
    so leaf data held directly under a top-level key (e.g. 'title' in
    {'atlas': {'title': ..., 'europe': {...}}}) is not exported and does
    not survive import_records().

    Args:
        store: The JsonTree to export.

    Returns:
        One record per path of ``store.get_branches()``, in the same order.
    """
    records: list[dict[str, Any]] = []
    for path in store.get_branches():
        node = store.get_branch(path)
        data = {key: value for key, value in node.items() if is_leaf(value)}
        records.append({
            'path': path,
            'name': path_name(path),
            'data': data,
        })
    return records


def import_records(
    records: Iterable[dict[str, Any]],
    tree_name: str | None = None,
) -> dict[str, Any]:
    """Rebuild a root mapping from export records.

    Records are applied in order. Missing intermediate branches are created
    empty, so a record may precede its parent's record. A record whose path
    already exists updates that branch's leaf data.

    Args:
        records: Records shaped like those returned by export_records.
        tree_name: Optional tree name, created even when records is empty.

    Returns:
        The rebuilt root mapping.

    Raises:
        LoadError: If a record is malformed, or a path or data key collides
            with existing leaf data or branches.
    """
    root: dict[str, Any] = {}
    if tree_name:
        root[tree_name] = {}

    for index, record in enumerate(records):
        if not is_branch(record):
            raise LoadError(f"Record #{index} is malformed: {record!r}")
        path = record.get('path')
        data = record.get('data')
        if data is None:
            data = {}
        if not isinstance(path, str):
            raise LoadError(f"Record #{index} has no string path: {record!r}")
        if not is_branch(data):
            raise LoadError(
                f"Record #{index}: data must be a mapping, not {type(data).__name__}"
            )

        segments = split_path(path)
        if not segments:
            raise LoadError(f"Record #{index} has an empty path")

        current = root
        for segment in segments:
            if segment not in current:
                current[segment] = {}
            elif not is_branch(current[segment]):
                raise LoadError(
                    f"Record #{index}: '{segment}' in '{path}' is leaf data"
                )
            current = current[segment]

        for key, value in data.items():
            try:
                kind = kind_of(value)
            except TypeError as exc:
                raise LoadError(f"Record #{index}: data key '{key}': {exc}") from exc
            if kind.is_branch:
                raise LoadError(
                    f"Record #{index}: data key '{key}' holds a branch, not leaf data"
                )
            if is_branch(current.get(key)):
                raise LoadError(
                    f"Record #{index}: data key '{key}' would replace branch '{path}/{key}'"
                )
            current[key] = value

    return root
