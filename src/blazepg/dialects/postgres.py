"""
PostgreSQL dialect implementation.
"""

from __future__ import annotations

import math
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any, Final, Mapping

from .base import DialectCapabilities, Identifier, Literal, TableInput, TableReference


class PostgresDialect:
    """
    PostgreSQL quoting, escaping and table-name resolution.

    String literals are rendered for ``standard_conforming_strings = on``
    (the server default), where only the single quote needs doubling.
    """

    name: Final[str] = "postgresql"
    default_schema: Final[str] = "public"
    capabilities: Final[DialectCapabilities] = DialectCapabilities(
        supports_native_enums=True,
        supports_json_paths=True,
        supports_concurrent_indexes=True,
    )

    def quote_identifier(self, identifier: str) -> Identifier:
        _reject_nul(identifier)
        escaped = identifier.replace('"', '""')
        return Identifier(f'"{escaped}"')

    def escape(self, value: Any) -> Literal:
        if value is None:
            return Literal("NULL")
        if isinstance(value, bool):
            return Literal("true" if value else "false")
        if isinstance(value, int):
            return Literal(str(value))
        if isinstance(value, Decimal):
            if value.is_nan():
                return Literal("'NaN'::numeric")
            if value.is_infinite():
                return Literal(f"'{value}'::numeric")
            return Literal(str(value))
        if isinstance(value, float):
            if not math.isfinite(value):
                return Literal(f"'{value}'::float8")
            return Literal(repr(value))
        if isinstance(value, str):
            _reject_nul(value)
            escaped = value.replace("'", "''")
            return Literal(f"'{escaped}'")
        if isinstance(value, (datetime, date, time)):
            return Literal(f"'{value.isoformat()}'")
        if isinstance(value, (list, tuple)):
            items = ",".join(self.escape(item) for item in value)
            return Literal(f"ARRAY[{items}]")
        raise TypeError(f"Cannot escape value of type {type(value).__name__} for {self.name}")

    def extract_table_details(self, table: TableInput) -> TableReference:
        if isinstance(table, TableReference):
            return table
        if isinstance(table, str):
            if "." in table:
                schema, table_name = table.split(".", 1)
                return TableReference(table_name=table_name, schema=schema or None)
            return TableReference(table_name=table)
        if isinstance(table, Mapping):
            table_name = table.get("table_name", table.get("tableName"))
            if not table_name:
                raise ValueError(f"Table mapping {dict(table)!r} has no table name")
            return TableReference(
                table_name=table_name,
                schema=table.get("schema") or None,
                delimiter=table.get("delimiter") or ".",
            )
        raise TypeError(f"Cannot resolve a table reference from {type(table).__name__}")

    def format_table(self, table: TableInput) -> str:
        details = self.extract_table_details(table)
        if details.schema:
            return (
                f"{self.quote_identifier(details.schema)}{details.delimiter}"
                f"{self.quote_identifier(details.table_name)}"
            )
        return self.quote_identifier(details.table_name)


def _reject_nul(text: str) -> None:
    if "\x00" in text:
        raise ValueError("PostgreSQL text cannot contain NUL characters")
