"""In-memory data model: fields, tables, databases and the session state."""

from __future__ import annotations

import unicodedata
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from ironsql.keywords import NONE, FieldType, parse_field_type

__all__ = [
    "IronSQLError",
    "Field",
    "Table",
    "Database",
    "Session",
    "display_width",
    "has_duplicates",
]


class IronSQLError(Exception):
    """Raised when a statement cannot be carried out."""


def display_width(text: str) -> int:
    """Return the number of terminal columns ``text`` occupies.

    Wide and full-width characters take two columns, combining marks none.
    """
    width = 0
    for char in text:
        if unicodedata.combining(char):
            continue
        width += 2 if unicodedata.east_asian_width(char) in ("W", "F") else 1
    return width


def has_duplicates(names: Iterable[str]) -> bool:
    """Return True when some name occurs more than once."""
    names = list(names)
    return len(set(names)) != len(names)


@dataclass
class Field:
    """A named, typed column of a table."""

    name: str
    type: FieldType

    def __post_init__(self) -> None:
        if not isinstance(self.type, FieldType):
            self.type = parse_field_type(str(self.type))


@dataclass
class Table:
    """A table: its fields, its rows and the widest value seen per column."""

    name: str
    fields: list[Field] = field(default_factory=list)
    rows: list[list[str]] = field(default_factory=list)
    data_widths: list[int] = field(default_factory=list)

    def field_names(self) -> list[str]:
        """Names of the fields, in declaration order."""
        return [f.name for f in self.fields]

    def field_types(self) -> list[str]:
        """Type names of the fields, in declaration order."""
        return [f.type.value for f in self.fields]

    def field_index(self, name: str) -> int:
        """Position of the field called ``name``; KeyError if there is none."""
        for index, f in enumerate(self.fields):
            if f.name == name:
                return index
        raise KeyError(name)

    def field_name_max_width(self) -> int:
        """Display width of the widest field name, 0 without fields."""
        return max((display_width(f.name) for f in self.fields), default=0)

    def field_type_max_width(self) -> int:
        """Display width of the widest field type name, 0 without fields."""
        return max((display_width(f.type.value) for f in self.fields), default=0)

    def add_row(self, values: Sequence[str]) -> None:
        """Append a row of values and widen the column widths to fit it."""
        row = [str(value) for value in values]
        self.rows.append(row)
        self.record_widths([display_width(value) for value in row])

    def record_widths(self, widths: Sequence[int]) -> None:
        """Raise each recorded column width to at least the given width."""
        if len(self.data_widths) < len(widths):
            self.data_widths.extend([0] * (len(widths) - len(self.data_widths)))
        for index, width in enumerate(widths):
            self.data_widths[index] = max(self.data_widths[index], width)


@dataclass
class Database:
    """A named collection of tables, kept in creation order."""

    name: str
    tables: dict[str, Table] = field(default_factory=dict)

    def table_names(self) -> list[str]:
        """Names of the tables, in creation order."""
        return list(self.tables)

    def table_name_max_width(self) -> int:
        """Display width of the widest table name, 0 without tables."""
        return max((display_width(name) for name in self.tables), default=0)


@dataclass
class Session:
    """Which database is in use and how many tables it held when selected."""

    database_name: str = NONE
    tables_number: int = 0

    def select(self, database_name: str, tables_number: int) -> None:
        """Make ``database_name`` the database in use."""
        self.database_name = database_name
        self.tables_number = tables_number