"""
Error hierarchy for blazepg.
"""


class QueryGenerationError(ValueError):
    """Base error for SQL generation failures."""


class ConfigurationConflictError(QueryGenerationError):
    """Raised when mutually exclusive options are requested together."""


class InvalidTypeDescriptorError(QueryGenerationError):
    """Raised when a type description cannot provide the values a statement needs."""


class ConfigurationError(QueryGenerationError):
    """Raised when generator configuration is missing or invalid."""
