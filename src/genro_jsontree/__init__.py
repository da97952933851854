# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-JsonTree - Path-addressable store for nested JSON data.

A small library that addresses the branches of a JSON document with
filesystem-style paths ('world/region1/city1') and moves, deletes, exports
and queries them.
"""

__version__ = "0.1.0"

from .exceptions import (
    InvalidDataError,
    InvalidMoveError,
    JsonTreeError,
    LoadError,
    QueryError,
    ReadOnlyBranchError,
    TreeNotSetError,
)
from .formatting import pretty_format, pretty_print
from .node import NodeKind, is_branch, is_leaf, kind_of
from .paths import PATH_SEPARATOR, join_path, path_name, path_prefix, split_path
from .store import JsonTree, export_records, import_records, load, loads

__all__ = [
    # Core classes
    "JsonTree",
    "NodeKind",
    # Node classification
    "kind_of",
    "is_branch",
    "is_leaf",
    # Paths
    "PATH_SEPARATOR",
    "split_path",
    "join_path",
    "path_name",
    "path_prefix",
    # Loading and export
    "load",
    "loads",
    "export_records",
    "import_records",
    # Formatting
    "pretty_format",
    "pretty_print",
    # Exceptions
    "JsonTreeError",
    "TreeNotSetError",
    "InvalidDataError",
    "InvalidMoveError",
    "LoadError",
    "QueryError",
    "ReadOnlyBranchError",
]
