"""Linking two tables of a database into a new table."""

from __future__ import annotations

from collections.abc import Sequence

from ironsql.engine import Engine
from ironsql.keywords import NONE, parse_field_type
from ironsql.model import Field, IronSQLError, Table, display_width

__all__ = ["create_merged_row", "merge_row_data", "link_table"]


def create_merged_row(
    source_row: Sequence[str],
    new_fields: Sequence[str],
    source_fields: Sequence[str],
) -> list[str]:
    """Lay the values of ``source_row`` out along ``new_fields``.

    Fields the source does not have, or whose value the row lacks, stay empty.
    """
    positions = {}
    for index, name in enumerate(source_fields):
        positions.setdefault(name, index)
    row = []
    for name in new_fields:
        index = positions.get(name)
        row.append(source_row[index] if index is not None and index < len(source_row) else "")
    return row


def merge_row_data(
    new_row: Sequence[str],
    dst_row: Sequence[str],
    new_fields: Sequence[str],
    src_fields: Sequence[str],
    dst_fields: Sequence[str],
) -> list[str]:
    """Return ``new_row`` with the destination's values filled in.

    Only fields the source table lacks are taken from ``dst_row``.
    """
    src_set = set(src_fields)
    positions = {}
    for index, name in enumerate(dst_fields):
        positions.setdefault(name, index)
    merged = list(new_row)
    for column, name in enumerate(new_fields):
        if name in src_set:
            continue
        index = positions.get(name)
        if index is not None and index < len(dst_row):
            merged[column] = dst_row[index]
    return merged


def _widen(widths: list[int], row: Sequence[str]) -> None:
    for column, value in enumerate(row[: len(widths)]):
        widths[column] = max(widths[column], display_width(value))


def _append_rows(
    src: Table, dst: Table, new_fields: list[str]
) -> list[list[str]]:
    src_fields = src.field_names()
    dst_fields = dst.field_names()
    rows = [create_merged_row(row, new_fields, dst_fields) for row in dst.rows]
    rows.extend(create_merged_row(row, new_fields, src_fields) for row in src.rows)
    return rows


def _join_rows(
    src: Table, dst: Table, new_fields: list[str], link_field: str
) -> list[list[str]]:
    src_fields = src.field_names()
    dst_fields = dst.field_names()
    src_link = src_fields.index(link_field)
    dst_link = dst_fields.index(link_field)

    dst_by_key: dict[str, int] = {}
    for row_index, row in enumerate(dst.rows):
        if dst_link < len(row):
            dst_by_key[row[dst_link]] = row_index

    merged_dst: set[int] = set()
    rows = []
    for src_row in src.rows:
        new_row = create_merged_row(src_row, new_fields, src_fields)
        if src_link < len(src_row):
            match = dst_by_key.get(src_row[src_link])
            if match is not None:
                merged_dst.add(match)
                new_row = merge_row_data(
                    new_row, dst.rows[match], new_fields, src_fields, dst_fields
                )
        rows.append(new_row)

    rows.extend(
        create_merged_row(row, new_fields, dst_fields)
        for row_index, row in enumerate(dst.rows)
        if row_index not in merged_dst
    )
    return rows


def link_table(
    engine: Engine,
    database_name: str,
    table_src_name: str,
    table_dst_name: str,
    new_table_name: str,
) -> Table:
    """Create ``new_table_name`` from the fields and rows of two tables.

    The new table has the destination's fields followed by the source's
    remaining ones. When the tables share a field, rows are joined on the
    first shared one; otherwise destination rows are followed by source rows.
    """
    is_absolute = bool(database_name) and database_name != NONE
    if not is_absolute and engine.session.database_name == NONE:
        raise IronSQLError("no database selected")
    if not is_absolute and engine.session.database_name != database_name:
        raise IronSQLError("database name not match")

    database = engine.databases.get(database_name)
    for name in (table_src_name, table_dst_name):
        if database is None or name not in database.tables:
            raise IronSQLError(f"undefined table: {name}")
    if new_table_name in database.tables:
        raise IronSQLError(
            f"defined table can not be used to link table: {new_table_name}"
        )

    src = database.tables[table_src_name]
    dst = database.tables[table_dst_name]
    src_fields = src.field_names()
    dst_fields = dst.field_names()

    new_fields = list(dst_fields)
    new_types = dst.field_types()
    for name, kind in zip(src_fields, src.field_types()):
        if name not in new_fields:
            new_fields.append(name)
            new_types.append(kind)

    new_table = Table(
        new_table_name,
        [Field(name, parse_field_type(kind)) for name, kind in zip(new_fields, new_types)],
    )

    common = [name for name in src_fields if name in dst_fields]
    if common:
        rows = _join_rows(src, dst, new_fields, common[0])
    else:
        rows = _append_rows(src, dst, new_fields)

    widths = [0] * len(new_fields)
    for row in rows:
        _widen(widths, row)
    new_table.rows.extend(rows)
    new_table.record_widths(widths)

    database.tables[new_table_name] = new_table
    return new_table