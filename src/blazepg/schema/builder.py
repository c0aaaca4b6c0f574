"""
Schema builder converting column descriptions into DDL statements.
"""

from __future__ import annotations

from typing import List, Mapping, Union

from ..core.types import EnumType
from ..dialects.base import TableInput
from ..sql.data_types import contains_token
from ..sql.generator import PostgresQueryGenerator
from ..utils import get_logger

ColumnType = Union[str, EnumType]


class SchemaBuilder:
    """
    Produces PostgreSQL table DDL from generic column type text.
    """

    def __init__(self, generator: PostgresQueryGenerator | None = None) -> None:
        self.generator = generator or PostgresQueryGenerator()
        self.dialect = self.generator.dialect
        self.logger = get_logger("schema.builder")

    def create_enums_sql(self, table: TableInput, attributes: Mapping[str, ColumnType]) -> List[str]:
        return [
            self.generator.create_enum_query(table, column, column_type)
            for column, column_type in attributes.items()
            if isinstance(column_type, EnumType)
        ]

    def create_table_sql(self, table: TableInput, attributes: Mapping[str, ColumnType]) -> str:
        if not attributes:
            raise ValueError("create_table_sql requires at least one column.")
        columns_sql, primary_keys = self._render_columns(table, attributes)
        if primary_keys:
            pk_list = ", ".join(self.dialect.quote_identifier(column) for column in primary_keys)
            columns_sql.append(f"PRIMARY KEY ({pk_list})")
        table_name = self.dialect.format_table(table)
        column_list = ", ".join(columns_sql)
        return f"CREATE TABLE IF NOT EXISTS {table_name} ({column_list});"

    def drop_table_sql(self, table: TableInput, *, cascade: bool = False) -> str:
        table_name = self.dialect.format_table(table)
        self.logger.warning(
            "DROP TABLE generated for %s; confirm destructive migration before applying.",
            table_name,
        )
        suffix = " CASCADE" if cascade else ""
        return f"DROP TABLE IF EXISTS {table_name}{suffix};"

    def _render_columns(
        self, table: TableInput, attributes: Mapping[str, ColumnType]
    ) -> tuple[List[str], List[str]]:
        pieces: List[str] = []
        primary_keys: List[str] = []
        for column, column_type in attributes.items():
            custom_name = None
            if isinstance(column_type, EnumType):
                custom_name = column_type.custom_name
            type_text = str(column_type)
            if not type_text:
                raise ValueError(f"Column '{column}' missing type for schema generation.")
            # enum labels are data, only plain type text can declare the key
            if isinstance(column_type, str) and contains_token(type_text, r"PRIMARY\s+KEY"):
                primary_keys.append(column)
            rewritten = self.generator.rewrite_column_type(
                table, column, type_text, enum_custom_name=custom_name
            )
            pieces.append(f"{self.dialect.quote_identifier(column)} {rewritten}")
        return pieces, primary_keys
