"""
Structured type descriptors.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from ..dialects.base import Dialect, Identifier, Literal


@dataclass(frozen=True)
class EnumType:
    """
    Closed set of string values backing an enum column.

    ``custom_name`` replaces the ``<table>_<column>`` part of the generated
    type name so several columns can share one type.
    """

    values: Tuple[str, ...] = ()
    custom_name: str | None = None

    def __post_init__(self) -> None:
        values = tuple(self.values)
        for value in values:
            if not isinstance(value, str):
                raise TypeError(f"Enum values must be strings, got {type(value).__name__}: {value!r}")
        object.__setattr__(self, "values", values)

    def __str__(self) -> str:
        rendered = ", ".join("'" + value.replace("'", "''") + "'" for value in self.values)
        return f"ENUM({rendered})"


@dataclass(frozen=True)
class EnumTypeName:
    """
    Canonical name of an enum type.

    The same name is rendered two ways: as a quoted identifier for DDL and as
    an escaped literal when compared against catalog text columns.
    """

    name: str
    schema: str | None = None
    delimiter: str = field(default=".")

    @classmethod
    def for_column(
        cls,
        table_name: str,
        column: str | None,
        custom_name: str | None = None,
        *,
        schema: str | None = None,
        delimiter: str = ".",
    ) -> "EnumTypeName":
        if custom_name is None:
            name = f"enum_{table_name}_{column}"
        else:
            name = f"enum_{custom_name}"
        return cls(name=name, schema=schema, delimiter=delimiter)

    def as_identifier(self, dialect: Dialect, *, qualify: bool = True) -> Identifier:
        quoted = dialect.quote_identifier(self.name)
        if qualify and self.schema:
            return Identifier(f"{dialect.quote_identifier(self.schema)}{self.delimiter}{quoted}")
        return quoted

    def as_literal(self, dialect: Dialect) -> Literal:
        return dialect.escape(self.name)

    def __str__(self) -> str:
        return self.name
