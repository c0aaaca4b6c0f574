import logging

import pytest

from blazepg import (
    ConfigurationConflictError,
    ConfigurationError,
    GeneratorOptions,
    PostgresQueryGenerator,
    generate_index_name,
)
from blazepg.dialects import DialectCapabilities, PostgresDialect

generator = PostgresQueryGenerator()


def test_show_indexes_query():
    sql = generator.show_indexes_query("users")
    assert sql.startswith("SELECT i.relname AS name, ix.indisprimary AS primary,")
    assert "array_agg(a.attnum) as column_indexes, array_agg(a.attname) AS column_names" in sql
    assert "pg_get_indexdef(ix.indexrelid) AS definition" in sql
    assert "t.relkind = 'r' and t.relname = 'users'" in sql
    assert "AND s.oid = t.relnamespace AND s.nspname = 'public'" in sql
    assert sql.endswith(
        "GROUP BY i.relname, ix.indexrelid, ix.indisprimary, ix.indisunique, ix.indkey ORDER BY i.relname;"
    )


def test_show_indexes_query_schema_resolution():
    assert "s.nspname = 'shop'" in generator.show_indexes_query("shop.users")
    tenant = PostgresQueryGenerator(options=GeneratorOptions(schema="tenant"))
    assert "s.nspname = 'tenant'" in tenant.show_indexes_query("users")


def test_remove_index_by_name(caplog):
    caplog.set_level(logging.WARNING, logger="blazepg.sql.indexes")
    assert generator.remove_index_query("users", "users_email") == 'DROP INDEX "public"."users_email"'
    assert any("DROP INDEX generated" in record.message for record in caplog.records)


def test_remove_index_options():
    sql = generator.remove_index_query(
        "shop.users", ["firstName", "lastName"], concurrently=True, if_exists=True
    )
    assert sql == 'DROP INDEX CONCURRENTLY IF EXISTS "shop"."users_first_name_last_name"'
    cascade = generator.remove_index_query("users", "users_email", if_exists=True, cascade=True)
    assert cascade == 'DROP INDEX IF EXISTS "public"."users_email" CASCADE'


@pytest.mark.parametrize(
    "table, index",
    [("users", "users_email"), ("shop.users", ["email"]), ("orders", ["a", "b"])],
)
def test_remove_index_rejects_concurrently_with_cascade(table, index):
    with pytest.raises(ConfigurationConflictError):
        generator.remove_index_query(table, index, concurrently=True, cascade=True)


def test_index_names_match_between_create_and_drop():
    columns = ["email", "tenantId"]
    name = generate_index_name("users", columns)
    assert name == "users_email_tenant_id"
    create = generator.add_index_query("users", columns)
    assert create == 'CREATE INDEX "users_email_tenant_id" ON "users" ("email", "tenantId")'
    drop = generator.remove_index_query("users", columns)
    assert drop == f'DROP INDEX "public"."{name}"'


def test_add_index_options():
    sql = generator.add_index_query(
        "shop.users", ["tags"], unique=True, concurrently=True, if_not_exists=True, using="gin"
    )
    assert sql == 'CREATE UNIQUE INDEX CONCURRENTLY IF NOT EXISTS "users_tags" ON "shop"."users" USING gin ("tags")'
    named = generator.add_index_query("users", ["email"], name="by_email")
    assert named == 'CREATE INDEX "by_email" ON "users" ("email")'


def test_add_index_rejects_bad_input():
    with pytest.raises(ValueError):
        generator.add_index_query("users", [])
    with pytest.raises(ValueError):
        generator.add_index_query("users", ["email"], using="gin; DROP TABLE users")


def test_generate_index_name_normalizes_separators():
    assert generate_index_name("users", ["data.path", "lower(email)"]) == "users_data_path_lower_email_"
    with pytest.raises(ValueError):
        generate_index_name("users", [])


class _LegacyDialect(PostgresDialect):
    capabilities = DialectCapabilities(supports_native_enums=True, supports_json_paths=True)


def test_concurrent_index_builds_require_dialect_support():
    legacy = PostgresQueryGenerator(dialect=_LegacyDialect())
    with pytest.raises(ConfigurationError):
        legacy.add_index_query("users", ["email"], concurrently=True)
    with pytest.raises(ConfigurationError):
        legacy.remove_index_query("users", "users_email", concurrently=True)
    assert legacy.add_index_query("users", ["email"]) == 'CREATE INDEX "users_email" ON "users" ("email")'
