from blazepg.sql import join_sql_fragments


def test_join_drops_empty_fragments():
    sql = join_sql_fragments(["DROP INDEX", "", None, "IF EXISTS", '"public"."idx"', ""])
    assert sql == 'DROP INDEX IF EXISTS "public"."idx"'


def test_join_flattens_and_attaches_semicolons():
    sql = join_sql_fragments(["SELECT", "  *  ", ["FROM", ["t"]], ";"])
    assert sql == "SELECT * FROM t;"


def test_join_is_idempotent():
    once = join_sql_fragments(["SELECT 1", "", " FROM t "])
    assert join_sql_fragments([once]) == once


def test_join_keeps_inner_whitespace():
    assert join_sql_fragments(["SELECT", "'a  b'"]) == "SELECT 'a  b'"
