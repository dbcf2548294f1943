"""Showing several tables of a database side by side as one linked view."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from ironsql.engine import Engine
from ironsql.model import IronSQLError, Table, display_width

__all__ = [
    "LinkedView",
    "create_mapped_row",
    "find_common_fields",
    "link_show_table",
]


@dataclass
class LinkedView:
    """Rows of several linked tables and the column widths to print them."""

    rows: list[list[str]] = field(default_factory=list)
    fields: list[str] = field(default_factory=list)
    field_widths: list[int] = field(default_factory=list)
    data_widths: list[int] = field(default_factory=list)


def _positions(table: Table) -> dict[str, int]:
    positions: dict[str, int] = {}
    for index, name in enumerate(table.field_names()):
        positions.setdefault(name, index)
    return positions


def create_mapped_row(
    table: Table, row: Sequence[str], fields: Sequence[str]
) -> list[str]:
    """Lay a row of ``table`` out along ``fields``.

    Fields the table lacks, or whose value the row lacks, are left empty.
    """
    positions = _positions(table)
    mapped = []
    for name in fields:
        index = positions.get(name)
        mapped.append(row[index] if index is not None and index < len(row) else "")
    return mapped


def find_common_fields(table: Table, fields: Sequence[str]) -> list[str]:
    """Names of the fields of ``table`` that also occur in ``fields``, in table order."""
    wanted = set(fields)
    return [name for name in table.field_names() if name in wanted]


def _merge_with_join(
    table: Table,
    merged: list[list[str]],
    fields: list[str],
    common_fields: list[str],
) -> None:
    link_field = common_fields[0]
    current_link = table.field_index(link_field)
    result_link = fields.index(link_field)
    positions = _positions(table)

    rows_by_key: dict[str, int] = {}
    for row_index, row in enumerate(table.rows):
        if current_link < len(row):
            rows_by_key[row[current_link]] = row_index

    for result_row in merged:
        if result_link >= len(result_row):
            continue
        match = rows_by_key.get(result_row[result_link])
        if match is None:
            continue
        current_row = table.rows[match]
        for column, name in enumerate(fields):
            index = positions.get(name)
            if index is not None and index < len(current_row):
                result_row[column] = current_row[index]

    # A row counts as merged as soon as its link value is among the table's
    # own keys, so only rows too short to hold the link field are added.
    merged.extend(
        create_mapped_row(table, row, fields)
        for row in table.rows
        if not (current_link < len(row) and row[current_link] in rows_by_key)
    )


def link_show_table(
    engine: Engine, database_name: str, table_names: Sequence[str]
) -> LinkedView:
    """Link two or more tables of a database into one view.

    Fields are the ordered union of all tables' fields. Rows start as the
    first table's; each further table is joined on its first field, or its
    rows are appended when it shares no field.
    """
    database = engine.databases.get(database_name) if database_name else None
    if database is None:
        raise IronSQLError(f"database not exist: '{database_name}'")
    if len(table_names) < 2:
        raise IronSQLError("at least 2 tables are required")
    for name in table_names:
        if name not in database.tables:
            raise IronSQLError(f"table not exist: '{name}'")

    tables = [database.tables[name] for name in table_names]
    fields: list[str] = []
    seen: set[str] = set()
    for table in tables:
        for name in table.field_names():
            if name not in seen:
                seen.add(name)
                fields.append(name)

    first, *others = tables
    merged = [create_mapped_row(first, row, fields) for row in first.rows]
    for table in others:
        common = find_common_fields(table, fields)
        if common:
            _merge_with_join(table, merged, fields, common)
        else:
            merged.extend(create_mapped_row(table, row, fields) for row in table.rows)

    data_widths = [0] * len(fields)
    for row in merged:
        for column, value in enumerate(row[: len(data_widths)]):
            data_widths[column] = max(data_widths[column], display_width(value))

    return LinkedView(
        rows=merged,
        fields=fields,
        field_widths=[display_width(name) for name in fields],
        data_widths=data_widths,
    )