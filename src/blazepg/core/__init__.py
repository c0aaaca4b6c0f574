"""
Type descriptors shared by the statement generators.
"""

from .types import EnumType, EnumTypeName

__all__ = ["EnumType", "EnumTypeName"]
