"""
blazepg public package initialization.

PostgreSQL statement generation: enum type emulation, index DDL, catalog
introspection queries, JSON path expressions and column type rewriting.
"""

from .config import GeneratorOptions  # noqa: F401
from .core.types import EnumType, EnumTypeName  # noqa: F401
from .dialects import PostgresDialect, TableReference, get_dialect  # noqa: F401
from .errors import (  # noqa: F401
    ConfigurationConflictError,
    ConfigurationError,
    InvalidTypeDescriptorError,
    QueryGenerationError,
)
from .schema import SchemaBuilder  # noqa: F401
from .sql import PostgresQueryGenerator, get_query_generator, join_sql_fragments  # noqa: F401
from .utils import generate_index_name  # noqa: F401

__all__ = [
    "EnumType",
    "EnumTypeName",
    "GeneratorOptions",
    "PostgresDialect",
    "PostgresQueryGenerator",
    "SchemaBuilder",
    "TableReference",
    "get_dialect",
    "get_query_generator",
    "generate_index_name",
    "join_sql_fragments",
    "ConfigurationConflictError",
    "ConfigurationError",
    "InvalidTypeDescriptorError",
    "QueryGenerationError",
]
