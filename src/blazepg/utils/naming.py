"""
Naming utilities for blazepg.
"""

from __future__ import annotations

import re
from typing import Sequence

_FIRST_CAP_RE = re.compile("(.)([A-Z][a-z]+)")
_ALL_CAP_RE = re.compile("([a-z0-9])([A-Z])")
_INDEX_NAME_SEPARATORS_RE = re.compile(r"[.()\s]")


def camel_to_snake(name: str) -> str:
    """
    Convert ``CamelCase`` names to ``snake_case``.
    """
    step1 = _FIRST_CAP_RE.sub(r"\1_\2", name)
    snake = _ALL_CAP_RE.sub(r"\1_\2", step1).lower()
    return snake


def generate_index_name(table_name: str, columns: Sequence[str]) -> str:
    """
    Derive the canonical index name for ``columns`` on ``table_name``.

    Index creation and index removal both go through this function, so an
    index created for a column set can always be dropped by the same set.
    """
    if not columns:
        raise ValueError("An index name needs at least one column.")
    raw = f"{table_name}_{'_'.join(columns)}"
    return camel_to_snake(_INDEX_NAME_SEPARATORS_RE.sub("_", raw))
