"""
Index DDL and index introspection.
"""

from __future__ import annotations

import re
from typing import Sequence, Union

from ..dialects.base import Dialect, TableInput
from ..errors import ConfigurationConflictError, ConfigurationError
from ..utils import generate_index_name, get_logger
from .fragments import join_sql_fragments

logger = get_logger("sql.indexes")

IndexDescriptor = Union[str, Sequence[str]]

_INDEX_METHOD_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def _require_concurrent_support(dialect: Dialect, concurrently: bool) -> None:
    if concurrently and not dialect.capabilities.supports_concurrent_indexes:
        raise ConfigurationError(f"{dialect.name} dialect does not support concurrent index builds")


def resolve_index_name(dialect: Dialect, table: TableInput, index: IndexDescriptor) -> str:
    if isinstance(index, str):
        return index
    details = dialect.extract_table_details(table)
    return generate_index_name(details.table_name, list(index))


def show_indexes_query(
    dialect: Dialect, table: TableInput, *, fallback_schema: str | None = None
) -> str:
    details = dialect.extract_table_details(table)
    schema = details.schema or fallback_schema or dialect.default_schema

    return join_sql_fragments(
        [
            "SELECT i.relname AS name, ix.indisprimary AS primary, ix.indisunique AS unique, ix.indkey AS indkey,",
            "array_agg(a.attnum) as column_indexes, array_agg(a.attname) AS column_names, pg_get_indexdef(ix.indexrelid)",
            "AS definition FROM pg_class t, pg_class i, pg_index ix, pg_attribute a, pg_namespace s",
            "WHERE t.oid = ix.indrelid AND i.oid = ix.indexrelid AND a.attrelid = t.oid AND",
            f"t.relkind = 'r' and t.relname = {dialect.escape(details.table_name)}",
            f"AND s.oid = t.relnamespace AND s.nspname = {dialect.escape(schema)}",
            "GROUP BY i.relname, ix.indexrelid, ix.indisprimary, ix.indisunique, ix.indkey ORDER BY i.relname;",
        ]
    )


def add_index_query(
    dialect: Dialect,
    table: TableInput,
    columns: Sequence[str],
    *,
    name: str | None = None,
    unique: bool = False,
    concurrently: bool = False,
    if_not_exists: bool = False,
    using: str | None = None,
) -> str:
    if not columns:
        raise ValueError("add_index_query requires at least one column.")
    if using and not _INDEX_METHOD_RE.match(using):
        raise ValueError(f"Invalid index method: {using!r}")
    _require_concurrent_support(dialect, concurrently)
    index_name = name or resolve_index_name(dialect, table, columns)
    column_list = ", ".join(dialect.quote_identifier(column) for column in columns)

    return join_sql_fragments(
        [
            "CREATE",
            "UNIQUE" if unique else "",
            "INDEX",
            "CONCURRENTLY" if concurrently else "",
            "IF NOT EXISTS" if if_not_exists else "",
            dialect.quote_identifier(index_name),
            f"ON {dialect.format_table(table)}",
            f"USING {using}" if using else "",
            f"({column_list})",
        ]
    )


def remove_index_query(
    dialect: Dialect,
    table: TableInput,
    index: IndexDescriptor,
    *,
    concurrently: bool = False,
    if_exists: bool = False,
    cascade: bool = False,
    fallback_schema: str | None = None,
) -> str:
    if cascade and concurrently:
        raise ConfigurationConflictError(
            f"Cannot specify both concurrently and cascade options in remove_index_query for {dialect.name} dialect"
        )
    _require_concurrent_support(dialect, concurrently)

    details = dialect.extract_table_details(table)
    index_name = resolve_index_name(dialect, details, index)
    schema = details.schema or fallback_schema or dialect.default_schema
    target = f"{dialect.quote_identifier(schema)}.{dialect.quote_identifier(index_name)}"
    logger.warning(
        "DROP INDEX generated for %s; confirm destructive migration before applying.",
        target,
    )

    return join_sql_fragments(
        [
            "DROP INDEX",
            "CONCURRENTLY" if concurrently else "",
            "IF EXISTS" if if_exists else "",
            target,
            "CASCADE" if cascade else "",
        ]
    )
