"""
Utility helpers shared across blazepg packages.
"""

from .logging import configure_logging, get_logger
from .naming import camel_to_snake, generate_index_name

__all__ = ["camel_to_snake", "configure_logging", "generate_index_name", "get_logger"]
