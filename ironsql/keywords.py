"""Keywords shared by the engine: field types, message levels, languages and syntax words."""

from __future__ import annotations

from enum import Enum

__all__ = [
    "FieldType",
    "Level",
    "Language",
    "parse_field_type",
    "format_message",
    "NONE",
    "DOT",
    "TO",
    "SYNTAX_WORDS",
]

NONE = "none"
"""Marker used when no database is selected."""

DOT = "."
"""Separator between a database name and a table name."""

TO = "to"
"""Keyword of the "to" clause."""

SYNTAX_WORDS = frozenset(
    {
        "show",
        "databases",
        "database",
        "use",
        "select",
        "from",
        "insert",
        "into",
        "values",
        "datas",
        "struct",
        "create",
        "tables",
        "table",
        "help",
        "*",
        ".",
    }
)
"""Reserved words of the query language."""


class _StrEnum(str, Enum):
    def __str__(self) -> str:
        return self.value


class FieldType(_StrEnum):
    """Data types a table field may have."""

    MAXINT = "maxint"
    BIGINT = "bigint"
    INT = "int"
    CHAR = "char"
    STRING = "string"
    DOUBLE = "double"
    FLOAT = "float"
    BOOL = "bool"
    ERRT = "errt"


class Level(_StrEnum):
    """Severity prefixes put in front of messages."""

    INFO = "info: "
    WARNING = "warning: "
    ERROR = "error: "
    FATAL = "fatal: "
    DONE = "done: "


class Language(_StrEnum):
    """Languages the help text is available in."""

    ZH_CN = "zh_cn"
    EN_US = "en_us"


def parse_field_type(text: str) -> FieldType:
    """Return the field type named by ``text``.

    Raises ValueError when ``text`` names no usable type; the error marker
    type ``errt`` is not usable either.
    """
    try:
        field_type = FieldType(text)
    except ValueError:
        raise ValueError(f"unknown field type:'{text}'") from None
    if field_type is FieldType.ERRT:
        raise ValueError(f"unknown field type:'{text}'")
    return field_type


def format_message(level: Level | str, text: str) -> str:
    """Prefix ``text`` with the marker of ``level``."""
    if not isinstance(level, Level):
        try:
            level = Level(level)
        except ValueError:
            try:
                level = Level[str(level).upper()]
            except KeyError:
                raise ValueError(f"unknown message level: {level!r}") from None
    return level.value + text