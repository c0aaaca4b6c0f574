"""
Dialect strategy interfaces describing SQL rendering behaviors.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Protocol, Union


class Identifier(str):
    """
    SQL text that is a quoted identifier.
    """


class Literal(str):
    """
    SQL text that is an escaped value literal.
    """


@dataclass(frozen=True)
class TableReference:
    """
    A resolved relation: table name, optional schema, and the delimiter
    placed between the two when rendered.
    """

    table_name: str
    schema: str | None = None
    delimiter: str = "."


TableInput = Union[str, TableReference, Mapping[str, Any]]


@dataclass(frozen=True)
class DialectCapabilities:
    """
    Feature flags describing backend capabilities.
    """

    supports_native_enums: bool = False
    supports_json_paths: bool = False
    supports_concurrent_indexes: bool = False


class Dialect(Protocol):
    """
    Strategy interface consumed by the statement generators.
    """

    @property
    def name(self) -> str: ...

    @property
    def default_schema(self) -> str: ...

    @property
    def capabilities(self) -> DialectCapabilities: ...

    def quote_identifier(self, identifier: str) -> Identifier: ...

    def escape(self, value: Any) -> Literal: ...

    def extract_table_details(self, table: TableInput) -> TableReference: ...

    def format_table(self, table: TableInput) -> str: ...
