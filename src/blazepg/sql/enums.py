"""
Enum type emulation: naming, listing, creation, extension and removal of
catalog-backed enum types.
"""

from __future__ import annotations

import re
from typing import Any

from ..core.types import EnumType, EnumTypeName
from ..dialects.base import Dialect, Identifier, TableInput
from ..errors import ConfigurationError, InvalidTypeDescriptorError
from ..utils import get_logger
from .fragments import join_sql_fragments

logger = get_logger("sql.enums")

ENUM_SIGNATURE_RE = re.compile(r"^ENUM\(.+\)")


def _require_native_enums(dialect: Dialect) -> None:
    if not dialect.capabilities.supports_native_enums:
        raise ConfigurationError(f"{dialect.name} dialect does not support enum types")


def enum_type_name(
    dialect: Dialect,
    table: TableInput,
    column: str | None = None,
    custom_name: str | None = None,
) -> EnumTypeName:
    details = dialect.extract_table_details(table)
    return EnumTypeName.for_column(
        details.table_name,
        column,
        custom_name,
        schema=details.schema,
        delimiter=details.delimiter,
    )


def list_enums_query(
    dialect: Dialect,
    table: TableInput | None = None,
    column: str | None = None,
    custom_name: str | None = None,
    *,
    schema: str | None = None,
    fallback_schema: str | None = None,
) -> str:
    name_filter = ""
    if table is not None and schema is None:
        details = dialect.extract_table_details(table)
        if details.schema:
            schema = details.schema
        elif column:
            # compared against pg_type.typname, so the name is a literal here
            enum_name = enum_type_name(dialect, details, column, custom_name)
            name_filter = f"AND t.typname={enum_name.as_literal(dialect)}"

    if not schema:
        schema = fallback_schema or dialect.default_schema

    return join_sql_fragments(
        [
            "SELECT t.typname enum_name, array_agg(e.enumlabel ORDER BY enumsortorder) enum_value",
            "FROM pg_type t",
            "JOIN pg_enum e ON t.oid = e.enumtypid",
            "JOIN pg_catalog.pg_namespace n ON n.oid = t.typnamespace",
            f"WHERE n.nspname = {dialect.escape(schema)}",
            name_filter,
            "GROUP BY 1",
        ]
    )


def enum_values_sql(dialect: Dialect, data_type: Any) -> str:
    """
    Render the ``ENUM(...)`` value list for ``data_type``.

    Structured ``EnumType`` descriptors are preferred. Any other object is
    stringified and its leading ``ENUM(...)`` signature reused as-is.
    """
    if isinstance(data_type, EnumType) and data_type.values:
        return "ENUM(" + ", ".join(dialect.escape(value) for value in data_type.values) + ")"

    match = ENUM_SIGNATURE_RE.match(str(data_type))
    if match is None:
        raise InvalidTypeDescriptorError(f"Invalid ENUM type: {data_type}")
    logger.warning(
        "Recovering enum values from type text %r; pass an EnumType instead.",
        match.group(0),
    )
    return match.group(0)


def create_enum_query(
    dialect: Dialect,
    table: TableInput,
    column: str,
    data_type: Any,
    *,
    qualify: bool = True,
    force: bool = False,
) -> str:
    _require_native_enums(dialect)
    custom_name = data_type.custom_name if isinstance(data_type, EnumType) else None
    name = enum_type_name(dialect, table, column, custom_name)
    identifier = name.as_identifier(dialect, qualify=qualify)
    values = enum_values_sql(dialect, data_type)

    body = (
        f"BEGIN CREATE TYPE {identifier} AS {values}; "
        "EXCEPTION WHEN duplicate_object THEN null; END"
    )
    sql = f"DO {dialect.escape(body)};"
    if force:
        sql = join_sql_fragments([drop_enum_query(dialect, table, column, identifier), sql])
    return sql


def add_enum_value_query(
    dialect: Dialect,
    table: TableInput,
    column: str,
    value: str,
    *,
    before: str | None = None,
    after: str | None = None,
    custom_name: str | None = None,
) -> str:
    _require_native_enums(dialect)
    identifier = enum_type_name(dialect, table, column, custom_name).as_identifier(dialect)
    position = ""
    if before:
        position = f"BEFORE {dialect.escape(before)}"
    elif after:
        position = f"AFTER {dialect.escape(after)}"
    return join_sql_fragments(
        [
            f"ALTER TYPE {identifier} ADD VALUE IF NOT EXISTS {dialect.escape(value)}",
            position,
        ]
    )


def drop_enum_query(
    dialect: Dialect,
    table: TableInput,
    column: str | None = None,
    enum_name: EnumTypeName | str | None = None,
) -> str:
    """
    ``enum_name`` may be an ``EnumTypeName``, an already quoted identifier,
    or a bare type name; without it the name is derived from the column.
    """
    if enum_name is None:
        identifier = enum_type_name(dialect, table, column).as_identifier(dialect)
    elif isinstance(enum_name, EnumTypeName):
        identifier = enum_name.as_identifier(dialect)
    elif isinstance(enum_name, Identifier):
        identifier = enum_name
    else:
        identifier = dialect.quote_identifier(enum_name)
    logger.warning(
        "DROP TYPE generated for %s; confirm destructive migration before applying.",
        identifier,
    )
    return f"DROP TYPE IF EXISTS {identifier};"
