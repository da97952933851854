# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Slash-delimited path utilities.

A path is a string of segments separated by ``/``. Empty segments produced
by leading, trailing or repeated separators are discarded, so
``'/world//region1/'`` and ``'world/region1'`` denote the same node. A path
with no segments denotes the root.
"""

from __future__ import annotations

PATH_SEPARATOR = '/'


def split_path(path: str) -> list[str]:
    """Split a path into its non-empty segments.

    Example:
        >>> split_path('/world//region1/')
        ['world', 'region1']
        >>> split_path('')
        []
    """
    return [segment for segment in path.split(PATH_SEPARATOR) if segment]


def join_path(segments: list[str] | tuple[str, ...]) -> str:
    """Join segments into a canonical path."""
    return PATH_SEPARATOR.join(segments)


def path_name(path: str) -> str | None:
    """Return the last segment of a path, or None if it has none.

    Example:
        >>> path_name('world/region1/city1')
        'city1'
    """
    segments = split_path(path)
    if not segments:
        return None
    return segments[-1]


def path_prefix(path: str) -> str:
    """Return the text preceding the name segment of a path.

    Trailing separators after the name are ignored, and the separator
    between the prefix and the name is removed.

    Example:
        >>> path_prefix('world/region1/city1')
        'world/region1'
        >>> path_prefix('city1')
        ''
    """
    name = path_name(path)
    if name is None:
        return ''
    stripped = path.rstrip(PATH_SEPARATOR)
    prefix = stripped[:len(stripped) - len(name)]
    return prefix.rstrip(PATH_SEPARATOR)


def is_descendant_path(path: str, ancestor: str) -> bool:
    """True if path lies inside the subtree rooted at ancestor.

    Comparison is done on segments, so ``'a/bc'`` is not inside ``'a/b'``.

    Args:
        path: Candidate descendant path.
        ancestor: Root path of the subtree. A path is inside its own subtree.
    """
    segments = split_path(path)
    anc_segments = split_path(ancestor)
    if len(segments) < len(anc_segments):
        return False
    return segments[:len(anc_segments)] == anc_segments
