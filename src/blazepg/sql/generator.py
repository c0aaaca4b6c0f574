"""
PostgreSQL statement generator and the generator registry.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Sequence

from ..config import GeneratorOptions
from ..core.types import EnumTypeName
from ..dialects import get_dialect
from ..dialects.base import Dialect, TableInput, TableReference
from ..errors import ConfigurationError
from ..utils import get_logger
from . import data_types, enums, indexes, introspection, json_paths
from .indexes import IndexDescriptor
from .json_paths import PathComponent


class PostgresQueryGenerator:
    """
    Compiles structural intent into PostgreSQL statements.

    Every method is a pure function of its arguments and the configured
    options; nothing is executed and nothing is cached.
    """

    def __init__(self, dialect: Dialect | None = None, options: GeneratorOptions | None = None) -> None:
        self.dialect = dialect or get_dialect("postgresql")
        self.options = options or GeneratorOptions()
        self.logger = get_logger("sql.generator")
        self.logger.debug(
            "%s generator configured from %s", self.dialect.name, self.options.descriptive_label()
        )

    def _emit(self, operation: str, sql: str) -> str:
        self.logger.debug("%s generated: %s", operation, sql)
        return sql

    # Generic helpers -----------------------------------------------------
    def escape(self, value: Any) -> str:
        return self.dialect.escape(value)

    def quote_identifier(self, identifier: str) -> str:
        return self.dialect.quote_identifier(identifier)

    def extract_table_details(self, table: TableInput) -> TableReference:
        return self.dialect.extract_table_details(table)

    # Enums ---------------------------------------------------------------
    def enum_type_name(
        self, table: TableInput, column: str | None = None, custom_name: str | None = None
    ) -> EnumTypeName:
        return enums.enum_type_name(self.dialect, table, column, custom_name)

    def enum_name(
        self,
        table: TableInput,
        column: str | None = None,
        custom_name: str | None = None,
        *,
        qualify: bool = True,
        no_escape: bool = False,
    ) -> str:
        name = self.enum_type_name(table, column, custom_name)
        if no_escape:
            return name.name
        return name.as_identifier(self.dialect, qualify=qualify)

    def list_enums_query(
        self,
        table: TableInput | None = None,
        column: str | None = None,
        custom_name: str | None = None,
        *,
        schema: str | None = None,
    ) -> str:
        sql = enums.list_enums_query(
            self.dialect,
            table,
            column,
            custom_name,
            schema=schema,
            fallback_schema=self.options.schema,
        )
        return self._emit("list_enums_query", sql)

    def create_enum_query(
        self,
        table: TableInput,
        column: str,
        data_type: Any,
        *,
        qualify: bool = True,
        force: bool = False,
    ) -> str:
        sql = enums.create_enum_query(
            self.dialect, table, column, data_type, qualify=qualify, force=force
        )
        return self._emit("create_enum_query", sql)

    def add_enum_value_query(
        self,
        table: TableInput,
        column: str,
        value: str,
        *,
        before: str | None = None,
        after: str | None = None,
        custom_name: str | None = None,
    ) -> str:
        sql = enums.add_enum_value_query(
            self.dialect, table, column, value, before=before, after=after, custom_name=custom_name
        )
        return self._emit("add_enum_value_query", sql)

    def drop_enum_query(
        self,
        table: TableInput,
        column: str | None = None,
        enum_name: EnumTypeName | str | None = None,
    ) -> str:
        sql = enums.drop_enum_query(self.dialect, table, column, enum_name)
        return self._emit("drop_enum_query", sql)

    # Indexes -------------------------------------------------------------
    def show_indexes_query(self, table: TableInput) -> str:
        sql = indexes.show_indexes_query(self.dialect, table, fallback_schema=self.options.schema)
        return self._emit("show_indexes_query", sql)

    def add_index_query(
        self,
        table: TableInput,
        columns: Sequence[str],
        *,
        name: str | None = None,
        unique: bool = False,
        concurrently: bool = False,
        if_not_exists: bool = False,
        using: str | None = None,
    ) -> str:
        sql = indexes.add_index_query(
            self.dialect,
            table,
            columns,
            name=name,
            unique=unique,
            concurrently=concurrently,
            if_not_exists=if_not_exists,
            using=using,
        )
        return self._emit("add_index_query", sql)

    def remove_index_query(
        self,
        table: TableInput,
        index: IndexDescriptor,
        *,
        concurrently: bool = False,
        if_exists: bool = False,
        cascade: bool = False,
    ) -> str:
        sql = indexes.remove_index_query(
            self.dialect,
            table,
            index,
            concurrently=concurrently,
            if_exists=if_exists,
            cascade=cascade,
            fallback_schema=self.options.schema,
        )
        return self._emit("remove_index_query", sql)

    # Introspection -------------------------------------------------------
    def describe_table_query(self, table: TableInput) -> str:
        sql = introspection.describe_table_query(
            self.dialect, table, fallback_schema=self.options.schema
        )
        return self._emit("describe_table_query", sql)

    # JSON ----------------------------------------------------------------
    def json_path_extraction_query(
        self, expression: str, path: Sequence[PathComponent], unquote: bool = False
    ) -> str:
        return json_paths.json_path_extraction_query(self.dialect, expression, path, unquote)

    def format_unquote_json(self, expression: str) -> str:
        return json_paths.format_unquote_json(expression)

    # Data types ----------------------------------------------------------
    def rewrite_column_type(
        self,
        table: TableInput,
        column: str,
        type_text: str,
        *,
        enum_custom_name: str | None = None,
    ) -> str:
        return data_types.rewrite_column_type(
            self.dialect, table, column, type_text, enum_custom_name=enum_custom_name
        )


_GENERATORS: Dict[str, Callable[..., PostgresQueryGenerator]] = {
    "postgres": PostgresQueryGenerator,
    "postgresql": PostgresQueryGenerator,
}


def get_query_generator(name: str, options: GeneratorOptions | None = None) -> PostgresQueryGenerator:
    """
    Return the generator registered for dialect ``name``.
    """
    try:
        factory = _GENERATORS[name.lower()]
    except KeyError:
        raise ConfigurationError(
            f"No query generator for dialect '{name}'; expected one of {sorted(_GENERATORS)}"
        ) from None
    return factory(get_dialect(name), options)
