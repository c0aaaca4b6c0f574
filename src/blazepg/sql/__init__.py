"""
PostgreSQL statement generation.
"""

from .fragments import join_sql_fragments
from .generator import PostgresQueryGenerator, get_query_generator

__all__ = ["PostgresQueryGenerator", "get_query_generator", "join_sql_fragments"]
