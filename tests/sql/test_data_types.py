import pytest

from blazepg import PostgresQueryGenerator

generator = PostgresQueryGenerator()


def rewrite(type_text, table="users", column="role", **kwargs):
    return generator.rewrite_column_type(table, column, type_text, **kwargs)


@pytest.mark.parametrize(
    "type_text, expected",
    [
        ("BIGINT SERIAL NOT NULL", "BIGSERIAL"),
        ("SMALLINT SERIAL NOT NULL", "SMALLSERIAL"),
        ("INTEGER SERIAL NOT NULL", "SERIAL"),
        ("INTEGER SERIAL PRIMARY KEY", "SERIAL"),
        ("INTEGER PRIMARY KEY", "INTEGER"),
        ("SERIAL", "SERIAL"),
    ],
)
def test_serial_and_primary_key_rewrites(type_text, expected):
    assert rewrite(type_text) == expected


def test_types_without_triggers_are_unchanged():
    assert rewrite("VARCHAR(255) NOT NULL") == "VARCHAR(255) NOT NULL"
    assert rewrite("  TEXT  ") == "  TEXT  "


def test_enum_signature_becomes_type_identifier():
    assert rewrite("ENUM('a', 'b')") == '"enum_users_role"'
    assert rewrite("ENUM('a') NOT NULL") == '"enum_users_role" NOT NULL'
    assert rewrite("ENUM('a')", table="shop.users") == '"shop"."enum_users_role"'
    assert rewrite("ENUM('a')", enum_custom_name="status") == '"enum_status"'


@pytest.mark.parametrize(
    "type_text",
    [
        "BIGINT SERIAL NOT NULL",
        "SMALLINT SERIAL NOT NULL",
        "INTEGER SERIAL PRIMARY KEY",
        "ENUM('a', 'b') NOT NULL",
        "VARCHAR(255) DEFAULT 'x'",
        "VARCHAR(20) DEFAULT 'NOT NULL SERIAL'",
    ],
)
def test_rewrite_is_a_fixed_point(type_text):
    once = rewrite(type_text)
    assert rewrite(once) == once


def test_rewrite_leaves_keywords_inside_quotes_alone():
    assert rewrite("VARCHAR(20) DEFAULT 'NOT NULL SERIAL'") == "VARCHAR(20) DEFAULT 'NOT NULL SERIAL'"
    assert rewrite("TEXT DEFAULT 'PRIMARY KEY'") == "TEXT DEFAULT 'PRIMARY KEY'"


def test_rewrite_enum_named_like_a_keyword_is_a_fixed_point():
    once = rewrite("ENUM('a') NOT NULL", table="t", column="c", enum_custom_name="SERIAL")
    assert once == '"enum_SERIAL" NOT NULL'
    assert rewrite(once, table="t", column="c", enum_custom_name="SERIAL") == once
