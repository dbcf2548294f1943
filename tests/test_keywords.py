import pytest

from ironsql.keywords import (
    FieldType,
    Language,
    Level,
    format_message,
    parse_field_type,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("maxint", FieldType.MAXINT),
        ("bigint", FieldType.BIGINT),
        ("int", FieldType.INT),
        ("char", FieldType.CHAR),
        ("string", FieldType.STRING),
        ("double", FieldType.DOUBLE),
        ("float", FieldType.FLOAT),
        ("bool", FieldType.BOOL),
    ],
)
def test_parse_field_type_known(text, expected):
    assert parse_field_type(text) is expected


@pytest.mark.parametrize("text", ["errt", "varchar", "", "integer"])
def test_parse_field_type_rejects_unknown(text):
    with pytest.raises(ValueError, match="unknown field type"):
        parse_field_type(text)


def test_field_type_round_trip():
    for field_type in FieldType:
        if field_type is FieldType.ERRT:
            continue
        assert parse_field_type(str(field_type)) is field_type


@pytest.mark.parametrize(
    "level, prefix",
    [
        (Level.ERROR, "error: "),
        (Level.WARNING, "warning: "),
        (Level.INFO, "info: "),
        (Level.FATAL, "fatal: "),
        (Level.DONE, "done: "),
    ],
)
def test_level_prefixes_match_source(level, prefix):
    assert format_message(level, "") == prefix
    assert format_message(level, "msg") == prefix + "msg"


def test_format_message_with_level():
    assert format_message(Level.ERROR, "repeat field names") == "error: repeat field names"


def test_format_message_accepts_prefix_and_name():
    assert format_message("fatal: ", "x") == format_message(Level.FATAL, "x")
    assert format_message("done", "ok") == format_message(Level.DONE, "ok")


def test_format_message_unknown_level():
    with pytest.raises(ValueError):
        format_message("loud", "text")


def test_language_values():
    assert Language.ZH_CN.value == "zh_cn"
    assert Language.EN_US.value == "en_us"
    assert Language("en_us") is Language.EN_US