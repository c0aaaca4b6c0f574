"""
Dialect strategy registry.
"""

from __future__ import annotations

from typing import Callable, Dict

from ..errors import ConfigurationError
from .base import Dialect, DialectCapabilities, Identifier, Literal, TableInput, TableReference
from .postgres import PostgresDialect

_DIALECTS: Dict[str, Callable[[], Dialect]] = {
    "postgres": PostgresDialect,
    "postgresql": PostgresDialect,
}


def get_dialect(name: str) -> Dialect:
    """
    Return the dialect registered under ``name``.
    """
    try:
        factory = _DIALECTS[name.lower()]
    except KeyError:
        raise ConfigurationError(
            f"Unknown dialect '{name}'; expected one of {sorted(_DIALECTS)}"
        ) from None
    return factory()


__all__ = [
    "Dialect",
    "DialectCapabilities",
    "Identifier",
    "Literal",
    "PostgresDialect",
    "TableInput",
    "TableReference",
    "get_dialect",
]
