# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""JsonTree store package - Path-addressable JSON tree.

The package is organized into:
- core: Main JsonTree class with path resolution, mutation, enumeration
  and query
- loading: Functions for JSON loading and flat record export/import

Example:
    >>> from genro_jsontree import JsonTree
    >>> tree = JsonTree({'world': {'region1': {'city1': {'pop': 100}}}})
    >>> tree.get_branch('world/region1/city1')
    {'pop': 100}
"""

from .core import JsonTree
from .loading import export_records, import_records, load, loads

__all__ = ["JsonTree", "export_records", "import_records", "load", "loads"]
