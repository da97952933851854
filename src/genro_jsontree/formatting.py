# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Pretty formatting of tree data."""

from __future__ import annotations

import json
from typing import Any

DEFAULT_INDENT = 2


def pretty_format(data: Any, indent: int | None = DEFAULT_INDENT) -> str:
    """Format data as indented JSON text.

    Args:
        data: Any JSON-serializable value.
        indent: Spaces per level. A falsy value falls back to DEFAULT_INDENT.
    """
    return json.dumps(data, indent=indent or DEFAULT_INDENT, ensure_ascii=False)


def pretty_print(data: Any) -> None:
    """Print data as indented JSON text."""
    print(pretty_format(data))
