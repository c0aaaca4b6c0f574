from datetime import date
from decimal import Decimal

import pytest

from blazepg.dialects import Identifier, Literal, PostgresDialect, TableReference, get_dialect
from blazepg.errors import ConfigurationError


def test_postgres_dialect_quotes_identifiers():
    dialect = PostgresDialect()
    assert dialect.quote_identifier('table"name') == '"table""name"'
    assert dialect.format_table("public.users") == '"public"."users"'
    assert dialect.format_table("users") == '"users"'


def test_postgres_dialect_escapes_literals():
    dialect = PostgresDialect()
    assert dialect.escape(None) == "NULL"
    assert dialect.escape(True) == "true"
    assert dialect.escape(3) == "3"
    assert dialect.escape(1.5) == "1.5"
    assert dialect.escape("it's") == "'it''s'"
    assert dialect.escape(date(2024, 1, 31)) == "'2024-01-31'"
    assert dialect.escape(["a", 1]) == "ARRAY['a',1]"


def test_identifiers_and_literals_are_distinct_types():
    dialect = PostgresDialect()
    identifier = dialect.quote_identifier("role")
    literal = dialect.escape("role")
    assert isinstance(identifier, Identifier) and not isinstance(identifier, Literal)
    assert isinstance(literal, Literal) and not isinstance(literal, Identifier)
    assert identifier != literal


def test_postgres_dialect_rejects_unrenderable_values():
    dialect = PostgresDialect()
    with pytest.raises(ValueError):
        dialect.escape("bad\x00value")
    with pytest.raises(ValueError):
        dialect.quote_identifier("bad\x00name")
    with pytest.raises(TypeError):
        dialect.escape(object())


def test_extract_table_details_accepts_strings_mappings_and_references():
    dialect = PostgresDialect()
    assert dialect.extract_table_details("users") == TableReference("users")
    assert dialect.extract_table_details("shop.users") == TableReference("users", "shop")
    assert dialect.extract_table_details(
        {"tableName": "users", "schema": "shop", "delimiter": "_"}
    ) == TableReference("users", "shop", "_")
    reference = TableReference("orders", "billing")
    assert dialect.extract_table_details(reference) is reference


def test_dialect_registry():
    assert isinstance(get_dialect("postgres"), PostgresDialect)
    assert isinstance(get_dialect("PostgreSQL"), PostgresDialect)
    with pytest.raises(ConfigurationError):
        get_dialect("mysql")


def test_escape_non_finite_decimals_are_quoted():
    dialect = PostgresDialect()
    assert dialect.escape(Decimal("NaN")) == "'NaN'::numeric"
    assert dialect.escape(Decimal("sNaN")) == "'NaN'::numeric"
    assert dialect.escape(Decimal("Infinity")) == "'Infinity'::numeric"
    assert dialect.escape(Decimal("-Infinity")) == "'-Infinity'::numeric"
    assert dialect.escape(Decimal("1.50")) == "1.50"
