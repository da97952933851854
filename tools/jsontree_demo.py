#!/usr/bin/env python
# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Demo script for JsonTree.

This script loads a JSON document into a JsonTree and shows its branches,
the exported records and, optionally, the result of a JMESPath query.

Usage:
    python tools/jsontree_demo.py [json_file] [path] [expression]

Examples:
    # Built-in sample tree
    python tools/jsontree_demo.py

    # Local file
    python tools/jsontree_demo.py data/world.json

    # Query a branch
    python tools/jsontree_demo.py data/world.json world/region1 '*.pop'
"""

from __future__ import annotations

import logging
import sys

from genro_jsontree import JsonTree, LoadError

SAMPLE = {
    'world': {
        'region1': {
            'city1': {'pop': 100},
            'city2': {'pop': 50},
        },
        'region2': {
            'city3': {'pop': 75, 'tags': ['port']},
        },
    }
}


def demo(source: str | None = None, path: str = '', expression: str | None = None):
    """Demo loading, enumerating, exporting and querying a tree.

    Args:
        source: JSON file path, or None for the built-in sample.
        path: Branch to query.
        expression: JMESPath expression, or None to skip the query.
    """
    tree = JsonTree()
    if source is None:
        tree.set_tree(SAMPLE)
    else:
        print(f"Loading {source}...")
        try:
            tree.load(source, install=True)
        except LoadError as e:
            print(f"Cannot load {source}: {e}")
            return None

    print("\n" + "=" * 60)
    print(f"Branches of '{tree.get_tree_name()}':")
    print("=" * 60)
    for branch in tree.get_branches():
        depth = branch.count('/')
        print(f"{'  ' * depth}{tree.get_path_name(branch)}")

    print("\n" + "=" * 60)
    print("Exported records:")
    print("=" * 60)
    tree.pretty_print(tree.export_tree())

    if expression is not None:
        print("\n" + "=" * 60)
        print(f"query({path!r}, {expression!r}):")
        print("=" * 60)
        tree.pretty_print(tree.query(path, expression))

    return tree


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    args = sys.argv[1:]
    demo(
        args[0] if len(args) > 0 else None,
        args[1] if len(args) > 1 else '',
        args[2] if len(args) > 2 else None,
    )
