# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""JsonTree exceptions.

Path misses and root protection are not exceptions: they are reported as
``None`` / ``False`` by the store operations.
"""

from __future__ import annotations


class JsonTreeError(Exception):
    """Base exception for JsonTree errors."""

    pass


class TreeNotSetError(JsonTreeError):
    """Raised when an operation runs on a store with no tree installed."""

    pass


class InvalidDataError(JsonTreeError, ValueError):
    """Raised when a data object does not carry exactly one string key."""

    pass


class InvalidMoveError(JsonTreeError, ValueError):
    """Raised when a branch is moved into itself or one of its descendants."""

    pass


class LoadError(JsonTreeError):
    """Raised when a JSON source cannot be read or parsed."""

    pass


class QueryError(JsonTreeError):
    """Raised when a query expression cannot be compiled."""

    pass


class ReadOnlyBranchError(JsonTreeError, TypeError):
    """Raised when a mutation targets a branch that is a read-only mapping."""

    pass
