"""
Generator configuration.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any
from urllib.parse import parse_qs, urlsplit

from .errors import ConfigurationError

_POSTGRES_SCHEMES = {"postgres", "postgresql"}
_SCHEMA_KEYS = ("schema", "currentSchema", "search_path")


@dataclass
class GeneratorOptions:
    """
    Connection-level defaults the generators fall back on.

    ``schema`` is used when neither an explicit schema nor the table's own
    schema is known; without it the dialect default (``public``) applies.
    ``dsn`` only ever holds the redacted connection string.
    """

    schema: str | None = None
    source: str | None = None
    dsn: str | None = None

    @classmethod
    def from_dsn(cls, dsn: str, **kwargs: Any) -> "GeneratorOptions":
        """
        Build options from a PostgreSQL DSN, reading the schema from its query.
        """

        parts = urlsplit(dsn)
        redacted = redact_dsn(dsn)
        if parts.scheme.split("+", 1)[0] not in _POSTGRES_SCHEMES:
            raise ConfigurationError(f"Unsupported DSN scheme '{parts.scheme}' ({redacted})")
        query = {key: values[0] for key, values in parse_qs(parts.query).items()}
        schema = kwargs.pop("schema", None) or _schema_from_query(query)
        return cls(schema=schema, dsn=redacted, **kwargs)

    @classmethod
    def from_env(cls, env_var: str, **kwargs: Any) -> "GeneratorOptions":
        """
        Build options from an environment variable containing a DSN.
        """

        value = os.getenv(env_var)
        if not value:
            raise ConfigurationError(f"Environment variable {env_var} is not set")
        return cls.from_dsn(value, source=env_var, **kwargs)

    def descriptive_label(self) -> str:
        """
        Describe the options source for diagnostics, credentials removed.
        """

        parts = [self.source] if self.source else []
        if self.dsn:
            parts.append(f"({self.dsn})")
        parts.append(f"schema={self.schema or '<default>'}")
        return " ".join(parts)


def redact_dsn(dsn: str) -> str:
    """
    Replace the password of ``dsn`` with ``***``, keeping everything else.
    """
    parts = urlsplit(dsn)
    userinfo, at, hostinfo = parts.netloc.rpartition("@")
    if not at or ":" not in userinfo:
        return dsn
    username = userinfo.split(":", 1)[0]
    return parts._replace(netloc=f"{username}:***@{hostinfo}").geturl()


def _schema_from_query(query: dict[str, str]) -> str | None:
    for key in _SCHEMA_KEYS:
        value = query.get(key)
        if not value:
            continue
        for entry in value.split(","):
            entry = entry.strip().strip('"')
            if entry and entry != "$user":
                return entry
    return None
