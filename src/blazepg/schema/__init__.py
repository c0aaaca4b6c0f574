"""
Schema DDL assembly.
"""

from .builder import SchemaBuilder

__all__ = ["SchemaBuilder"]
