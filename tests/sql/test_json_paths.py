import pytest

from blazepg import ConfigurationError, PostgresQueryGenerator
from blazepg.dialects import DialectCapabilities, PostgresDialect

generator = PostgresQueryGenerator()


@pytest.mark.parametrize(
    "path, unquote, expected",
    [
        ([0], False, "data->0"),
        ([0], True, "data->>0"),
        (["a"], False, "data->'a'"),
        (["a"], True, "data->>'a'"),
        (["a", "b"], False, "data#>ARRAY['a','b']"),
        (["a", "b"], True, "data#>>ARRAY['a','b']"),
        (["items", 0, "id"], True, "data#>>ARRAY['items','0','id']"),
    ],
)
def test_json_path_extraction(path, unquote, expected):
    assert generator.json_path_extraction_query("data", path, unquote) == expected


def test_json_path_escapes_keys():
    sql = generator.json_path_extraction_query('"profile"', ["o'brien"], False)
    assert sql == "\"profile\"->'o''brien'"


def test_json_path_requires_components():
    with pytest.raises(ValueError):
        generator.json_path_extraction_query("data", [], False)


def test_format_unquote_json():
    assert generator.format_unquote_json('"profile"') == '"profile"#>>ARRAY[]::TEXT[]'


class _NoJsonDialect(PostgresDialect):
    capabilities = DialectCapabilities(supports_native_enums=True)


def test_json_path_extraction_requires_dialect_support():
    with pytest.raises(ConfigurationError):
        PostgresQueryGenerator(dialect=_NoJsonDialect()).json_path_extraction_query("data", ["a"])
