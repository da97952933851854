# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""JsonTree - A path-addressable store over nested JSON-like data.

This module provides the JsonTree class, which wraps a plain nested mapping
(as produced by ``json.load``) and addresses its subtrees with
filesystem-style paths.

Key Features:
    - **Path resolution**: 'world/region1/city1' locates a nested mapping
    - **Structural mutation**: append, delete and move whole branches
    - **Root protection**: the tree's own top-level key cannot be removed
    - **Branch enumeration**: every branch path in insertion order
    - **Export**: flat {path, name, data} records for external stores
    - **Query**: JMESPath expressions evaluated against a located branch

Path Syntax:
    - Segments separated by '/': 'world/region1'
    - Empty segments are ignored: '/world//region1/' == 'world/region1'
    - The empty path denotes the root mapping

Only mappings are branches. Lists and scalars are leaf data: a path can
never step into them.

Example:
    Basic usage::

        tree = JsonTree({'world': {'region1': {'city1': {'pop': 100}}}})
        tree.get_branches()  # ['world/region1', 'world/region1/city1']

        tree.append_branch('world/region1', {'city2': {'pop': 50}})
        tree.get_branch('world/region1/city2')  # {'pop': 50}

        tree.move_branch('world/region1/city2', 'world')
        tree.query('world', 'city2.pop')  # 50
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping
from pathlib import Path
from typing import Any, Iterable, Iterator

import jmespath
from jmespath.exceptions import JMESPathError

from ..exceptions import (
    InvalidDataError,
    InvalidMoveError,
    JsonTreeError,
    QueryError,
    ReadOnlyBranchError,
    TreeNotSetError,
)
from ..formatting import DEFAULT_INDENT, pretty_format, pretty_print
from ..node import is_branch
from ..paths import (
    PATH_SEPARATOR,
    is_descendant_path,
    join_path,
    path_name,
    path_prefix,
    split_path,
)
from .loading import export_records, import_records, load, loads

logger = logging.getLogger(__name__)


class JsonTree:
    """A path-addressable store over a nested mapping.

    JsonTree provides:
    - get_branch(path): Locate a branch mapping
    - append_branch / delete_branch / move_branch: Structural mutation
    - get_branches(): Enumerate every branch path
    - export_tree() / import_tree(): Flat record conversion
    - query(path, expression): JMESPath query on a branch

    The store owns the tree. Mappings returned by get_tree() and
    get_branch() are live references and may be detached by a later
    delete or move.

    Missing paths and root-level deletions are reported with None/False,
    never with exceptions.

    Example:
        >>> tree = JsonTree({'world': {'region1': {'city1': {'pop': 100}}}})
        >>> tree.get_path_name('world/region1/city1')
        'city1'
        >>> tree.delete_branch('world')
        False
    """

    __slots__ = ('_tree', '_tree_name', '_raise_on_error')

    def __init__(
        self,
        source: MutableMapping[str, Any] | None = None,
        raise_on_error: bool = False,
    ) -> None:
        """Initialize a JsonTree.

        Args:
            source: Optional root mapping, installed with set_tree().
                Without it the store is unset and every tree operation
                raises TreeNotSetError until set_tree() or a load with
                install=True is called.
            raise_on_error: If True, hard errors (malformed data objects,
                moving a branch into its own subtree, mutating a read-only
                branch) raise InvalidDataError, InvalidMoveError or
                ReadOnlyBranchError. If False (default) they are logged and
                the operation returns False.

        Example:
            >>> JsonTree({'world': {}})
            >>> JsonTree(raise_on_error=True)  # strict mode, tree set later
        """
        self._tree: MutableMapping[str, Any] | None = None
        self._tree_name = ''
        self._raise_on_error = raise_on_error

        if source is not None:
            self.set_tree(source)

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        if self._tree is None:
            return "JsonTree(<unset>)"
        return f"JsonTree({self._tree_name!r}, branches={len(self)})"

    def __bool__(self) -> bool:
        """True if a tree is installed, even one without branches."""
        return self._tree is not None

    def __len__(self) -> int:
        """Return the number of enumerable branches."""
        return sum(1 for _ in self.iter_branches())

    def __contains__(self, path: str) -> bool:
        """Check if path resolves to a branch."""
        return self.has_branch(path)

    @property
    def raise_on_error(self) -> bool:
        """True if hard errors raise instead of returning False."""
        return self._raise_on_error

    @property
    def _root(self) -> MutableMapping[str, Any]:
        if self._tree is None:
            raise TreeNotSetError("No tree installed, call set_tree() first")
        return self._tree

    # ==================== Tree ====================

    def set_tree(self, root: MutableMapping[str, Any]) -> None:
        """Install a new root mapping.

        The tree name becomes the first top-level key of root, or '' if
        root is empty. The mapping is used as-is, not copied.

        Args:
            root: The root mapping.

        Raises:
            TypeError: If root is not a mutable mapping.
        """
        if not isinstance(root, MutableMapping):
            raise TypeError(
                f"root must be a mutable mapping, not {type(root).__name__}"
            )
        self._tree = root
        self._tree_name = next(iter(root), '')

    def get_tree_name(self) -> str:
        """Return the tree name (the root's top-level key)."""
        if self._tree is None:
            raise TreeNotSetError("No tree installed, call set_tree() first")
        return self._tree_name

    def get_tree(self) -> MutableMapping[str, Any]:
        """Return the live root mapping."""
        return self._root

    # ==================== Path Resolution ====================

    def _walk(self, segments: list[str]) -> Mapping[str, Any] | None:
        """Walk segments from the root.

        Args:
            segments: Path segments. An empty list yields the root.

        Returns:
            The branch mapping at the end of the walk, or None if a segment
            is missing or does not hold a branch.
        """
        current = self._root
        for segment in segments:
            if segment not in current:
                return None
            current = current[segment]
            if not is_branch(current):
                return None
        return current

    def get_branch(self, path: str) -> Mapping[str, Any] | None:
        """Locate the branch a path denotes.

        Args:
            path: Slash-delimited path. '' denotes the root.

        Returns:
            The live branch mapping, or None if the path does not resolve.

        Example:
            >>> tree.get_branch('world/region1')
            {'city1': {'pop': 100}}
            >>> tree.get_branch('world/region1/city1/pop')  # leaf
            None
        """
        return self._walk(split_path(path))

    def has_branch(self, path: str) -> bool:
        """True if path resolves to a branch."""
        return self.get_branch(path) is not None

    def get_path_name(self, path: str) -> str | None:
        """Return the last segment of path, or None if it has none."""
        return path_name(path)

    def get_path_prefix(self, path: str) -> str:
        """Return the part of path preceding its name segment."""
        return path_prefix(path)

    # ==================== Mutation ====================

    def _reject(self, error: JsonTreeError) -> bool:
        """Raise error in strict mode, otherwise log it and return False."""
        if self._raise_on_error:
            raise error
        logger.warning("%s", error)
        return False

    def _writable(self, node: Mapping[str, Any], path: str) -> bool:
        """True if node accepts changes, otherwise reject as read-only."""
        if isinstance(node, MutableMapping):
            return True
        return self._reject(ReadOnlyBranchError(
            f"Branch '{path}' is a read-only {type(node).__name__}"
        ))

    def _data_entry(self, data: Any) -> tuple[str, Any]:
        """Split a data object into its child name and content.

        Raises:
            InvalidDataError: If data is not a mapping with exactly one
                non-empty string key free of path separators.
        """
        if not is_branch(data):
            raise InvalidDataError(
                f"Data object must be a mapping, not {type(data).__name__}"
            )
        if len(data) != 1:
            raise InvalidDataError(
                f"Data object must have exactly one key, has {len(data)}"
            )
        (name, value), = data.items()
        if not isinstance(name, str) or not name:
            raise InvalidDataError(f"Branch name must be a non-empty string: {name!r}")
        if PATH_SEPARATOR in name:
            raise InvalidDataError(
                f"Branch name cannot contain '{PATH_SEPARATOR}': {name!r}"
            )
        return name, value

    def append_branch(self, path: str, data: Mapping[str, Any]) -> bool:
        """Attach a child to the branch at path.

        The single key of data names the child, its value becomes the
        child's content. An existing child with the same name is replaced,
        not merged.

        Args:
            path: Path of the receiving branch.
            data: Data object with exactly one key, e.g. {'city2': {'pop': 50}}.

        Returns:
            True if the child was attached, False if path does not resolve
            or (in permissive mode) data is malformed or the branch is
            read-only.

        Raises:
            InvalidDataError: If data is malformed and raise_on_error is set.
            ReadOnlyBranchError: If the branch at path is read-only and
                raise_on_error is set.
        """
        try:
            name, value = self._data_entry(data)
        except InvalidDataError as error:
            return self._reject(error)

        node = self.get_branch(path)
        if node is None:
            return False
        if not self._writable(node, path):
            return False
        node[name] = value
        logger.debug("Appended '%s' at '%s'", name, path)
        return True

    def delete_branch(self, path: str) -> bool:
        """Remove the branch at path together with its subtree.

        Paths with fewer than two segments are refused: they denote the
        root or the tree's own top-level key.

        Args:
            path: Path of the branch to remove.

        Returns:
            True if removed, False if the path is root-level, does not
            resolve to a branch, or (in permissive mode) its parent is
            read-only.

        Raises:
            ReadOnlyBranchError: If the parent branch is read-only and
                raise_on_error is set.
        """
        segments = split_path(path)
        if len(segments) < 2:
            return False
        parent = self._walk(segments[:-1])
        if parent is None:
            return False
        name = segments[-1]
        if name not in parent or not is_branch(parent[name]):
            return False
        if not self._writable(parent, path_prefix(path)):
            return False
        del parent[name]
        logger.debug("Deleted '%s'", path)
        return True

    def _passes_through(self, segments: list[str], node: Mapping[str, Any]) -> bool:
        """True if walking resolved segments meets node on the way."""
        current = self._root
        for segment in segments:
            current = current[segment]
            if current is node:
                return True
        return False

    def move_branch(self, from_path: str, to_path: str) -> bool:
        """Move the branch at from_path under the branch at to_path.

        The subtree is reattached by reference under its own name, replacing
        any child of that name at the destination, then detached from its
        old parent. Moving a branch to its current parent is a no-op.

        Args:
            from_path: Path of the branch to move.
            to_path: Path of the receiving branch.

        Returns:
            True if moved. False if either path does not resolve, from_path
            is root-level, or (in permissive mode) to_path lies inside the
            moved subtree or a branch to change is read-only. The tree is unchanged whenever False is returned.

        Raises:
            InvalidMoveError: If to_path equals or lies inside from_path
                and raise_on_error is set.
            ReadOnlyBranchError: If the destination or the source parent
                is read-only and raise_on_error is set.
        """
        src_segments = split_path(from_path)
        dst_segments = split_path(to_path)

        source = self._walk(src_segments)
        if source is None:
            return False
        target = self._walk(dst_segments)
        if target is None:
            return False
        if len(src_segments) < 2:
            return False

        if (is_descendant_path(to_path, from_path)
                or self._passes_through(dst_segments, source)):
            return self._reject(InvalidMoveError(
                f"Cannot move '{from_path}' into its own subtree '{to_path}'"
            ))

        name = src_segments[-1]
        parent = self._walk(src_segments[:-1])
        if parent is target:
            return True
        if not (self._writable(target, to_path)
                and self._writable(parent, path_prefix(from_path))):
            return False

        target[name] = source
        del parent[name]
        logger.debug("Moved '%s' under '%s'", from_path, to_path)
        return True

    # ==================== Enumeration ====================

    def iter_branches(self) -> Iterator[str]:
        """Yield every branch path in pre-order, insertion order.

        The root and the top-level keys are the tree's identity and are
        not yielded: enumeration starts below each top-level branch.
        Keys that cannot be addressed by a path (non-string, empty, or
        containing the separator) are skipped with their subtree.

        Yields:
            Canonical branch paths, e.g. 'world/region1/city1'.
        """
        def _walk_gen(node: Mapping[str, Any], prefix: str) -> Iterator[str]:
            for key, value in node.items():
                if not is_branch(value) or not _addressable(key):
                    continue
                path = join_path((prefix, key))
                yield path
                yield from _walk_gen(value, path)

        for key, value in self._root.items():
            if is_branch(value) and _addressable(key):
                yield from _walk_gen(value, key)

    def get_branches(self) -> list[str]:
        """Return every branch path, freshly computed.

        Example:
            >>> tree.get_branches()
            ['world/region1', 'world/region1/city1']
        """
        return list(self.iter_branches())

    # ==================== Export / Load ====================

    def export_tree(self) -> list[dict[str, Any]]:
        """Export every branch as a {path, name, data} record.

        data holds the branch's leaf pairs only. See export_records().
        """
        return export_records(self)

    def import_tree(
        self,
        records: Iterable[dict[str, Any]],
        tree_name: str | None = None,
    ) -> dict[str, Any]:
        """Rebuild and install a tree from export records.

        Args:
            records: Records as returned by export_tree().
            tree_name: Optional tree name, created even without records.

        Returns:
            The installed root mapping.

        Raises:
            LoadError: If a record is malformed.
        """
        root = import_records(records, tree_name=tree_name)
        self.set_tree(root)
        return root

    def load(self, filepath: str | Path, install: bool = False) -> dict[str, Any]:
        """Read a JSON file.

        On failure the current tree is left untouched.

        Args:
            filepath: Path to the JSON file.
            install: If True, install the loaded mapping with set_tree().

        Returns:
            The parsed root mapping.

        Raises:
            LoadError: If the file cannot be read or parsed.
        """
        root = load(filepath)
        if install:
            self.set_tree(root)
        return root

    def loads(self, text: str | bytes, install: bool = False) -> dict[str, Any]:
        """Parse JSON text. Same contract as load()."""
        root = loads(text)
        if install:
            self.set_tree(root)
        return root

    # ==================== Query ====================

    def query(self, path: str, expression: str) -> Any:
        """Evaluate a JMESPath expression against the branch at path.

        Args:
            path: Path of the branch to query.
            expression: JMESPath expression, e.g. 'city1.pop' or
                '*.pop | [? @ > `60`]'.

        Returns:
            The expression result as returned by jmespath, or None if
            path does not resolve.

        Raises:
            QueryError: If the expression is malformed or fails on the data.
        """
        node = self.get_branch(path)
        if node is None:
            return None
        try:
            return jmespath.search(expression, node)
        except JMESPathError as exc:
            raise QueryError(f"Query {expression!r} failed: {exc}") from exc

    # ==================== Formatting ====================

    @staticmethod
    def pretty_format(data: Any, indent: int = DEFAULT_INDENT) -> str:
        """Format data as indented JSON text."""
        return pretty_format(data, indent)

    @staticmethod
    def pretty_print(data: Any) -> None:
        """Print data as indented JSON text."""
        pretty_print(data)


def _addressable(key: Any) -> bool:
    return isinstance(key, str) and bool(key) and PATH_SEPARATOR not in key
