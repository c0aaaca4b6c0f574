"""
Rewriting of generic column type text into PostgreSQL DDL.
"""

from __future__ import annotations

import re

from ..dialects.base import Dialect, TableInput
from .enums import ENUM_SIGNATURE_RE, enum_type_name

# quoted identifiers and string literals are matched first and left alone
_QUOTED = r'"(?:[^"]|"")*"|\'(?:[^\']|\'\')*\''


def _token_pattern(token: str, *, collapse: bool = False) -> re.Pattern[str]:
    if collapse:
        return re.compile(rf"{_QUOTED}|\s*\b{token}\b\s*")
    return re.compile(rf"{_QUOTED}|\b{token}\b")


def _is_quoted(match: re.Match[str]) -> bool:
    return match.group(0)[:1] in ("'", '"')


def contains_token(type_text: str, token: str) -> bool:
    """
    Whether ``token`` (a regex) occurs as a whole word outside quotes.
    """
    return any(not _is_quoted(m) for m in _token_pattern(token).finditer(type_text))


def _replace_token(type_text: str, token: str, replacement: str, *, collapse: bool = False) -> str:
    replaced = False

    def substitute(match: re.Match[str]) -> str:
        nonlocal replaced
        if replaced or _is_quoted(match):
            return match.group(0)
        replaced = True
        return replacement

    result = _token_pattern(token, collapse=collapse).sub(substitute, type_text)
    return result.strip() if collapse else result


def _remove_token(type_text: str, token: str) -> str:
    return _replace_token(type_text, token, " ", collapse=True)


_PRIMARY_KEY = r"PRIMARY\s+KEY"
_NOT_NULL = r"NOT\s+NULL"


def rewrite_column_type(
    dialect: Dialect,
    table: TableInput,
    column: str,
    type_text: str,
    *,
    enum_custom_name: str | None = None,
) -> str:
    """
    Rewrite ``type_text`` for PostgreSQL.

    ``PRIMARY KEY`` is dropped (it is rendered as a table constraint),
    ``SERIAL`` is widened or narrowed from the integer type next to it and
    loses its redundant ``NOT NULL``, and an ``ENUM(...)`` signature becomes
    the enum type identifier. Applying the rewrite to its own output changes
    nothing.
    """
    if contains_token(type_text, _PRIMARY_KEY):
        type_text = _remove_token(type_text, _PRIMARY_KEY)

    if contains_token(type_text, r"(?:BIG|SMALL)?SERIAL"):
        if contains_token(type_text, "BIGINT"):
            type_text = _replace_token(type_text, "SERIAL", "BIGSERIAL")
            type_text = _remove_token(type_text, "BIGINT")
        elif contains_token(type_text, "SMALLINT"):
            type_text = _replace_token(type_text, "SERIAL", "SMALLSERIAL")
            type_text = _remove_token(type_text, "SMALLINT")
        elif contains_token(type_text, "INTEGER"):
            type_text = _remove_token(type_text, "INTEGER")

        if contains_token(type_text, _NOT_NULL):
            type_text = _remove_token(type_text, _NOT_NULL)

    if type_text.startswith("ENUM("):
        identifier = enum_type_name(dialect, table, column, enum_custom_name).as_identifier(dialect)
        type_text = ENUM_SIGNATURE_RE.sub(lambda _: identifier, type_text, count=1)

    return type_text
