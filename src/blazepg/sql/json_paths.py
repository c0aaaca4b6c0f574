"""
JSON path extraction expressions.
"""

from __future__ import annotations

from typing import Sequence, Union

from ..dialects.base import Dialect
from ..errors import ConfigurationError

PathComponent = Union[str, int]


def json_path_operator(path_length: int, unquote: bool) -> str:
    if path_length == 1:
        return "->>" if unquote else "->"
    return "#>>" if unquote else "#>"


def json_path_extraction_query(
    dialect: Dialect,
    expression: str,
    path: Sequence[PathComponent],
    unquote: bool,
) -> str:
    """
    Extract ``path`` from the JSON value ``expression``.

    A single component goes to ``->``/``->>`` with its own type, so integers
    index arrays and strings look up keys. Longer paths go to ``#>``/``#>>``,
    which only take a text array, so every component becomes a string.
    """
    if not dialect.capabilities.supports_json_paths:
        raise ConfigurationError(f"{dialect.name} dialect does not support JSON path operators")
    if not path:
        raise ValueError("JSON path extraction requires at least one path component.")

    operator = json_path_operator(len(path), unquote)
    if len(path) == 1:
        path_sql = dialect.escape(path[0])
    else:
        path_sql = dialect.escape([str(component) for component in path])
    return f"{expression}{operator}{path_sql}"


def format_unquote_json(expression: str) -> str:
    return f"{expression}#>>ARRAY[]::TEXT[]"
