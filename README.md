# ironsql

An in-memory database engine for Python. It keeps databases of typed tables
in memory. You can create, fill, query, drop and link them through a small
API. It also has helpers that split typed input into `;`-terminated
statements.

## Modules

- `ironsql.engine.Engine`: the engine.
  - `create_database`, `use_database`, `create_table`, `insert`,
    `drop_database` and `drop_table` change the stored data.
  - `database_names`, `table_names`, `field_names`, `field_types`,
    `table_rows`, `data_row_widths` and `query` read it back.
  - The `*_max_width` methods return the display widths you need to print
    names as aligned columns. Wide characters count as two columns.
  - `create_table` and `insert` work on the database chosen with
    `use_database`.
- `ironsql.model`: the data classes `Field`, `Table`, `Database` and
  `Session`. Also `display_width`, `has_duplicates` and the exception
  `IronSQLError`.
- `ironsql.linking.link_table(engine, database_name, src, dst, new_name)`:
  stores a new table built from two existing ones.
  - Its fields are the destination's fields, followed by the source's fields
    that the destination lacks.
  - When the two tables share a field, rows are joined on the first shared
    field. Source rows come first, then the destination rows that matched
    nothing.
  - Otherwise the destination rows are followed by the source rows.
  - Missing values are empty strings.
- `ironsql.linkview.link_show_table(engine, database_name, table_names)`:
  builds a merged view of two or more tables without storing anything.
  - It returns a `LinkedView` with `rows`, `fields`, `field_widths` and
    `data_widths`.
  - `fields` is the ordered union of all the tables' fields.
  - The helpers `create_mapped_row` and `find_common_fields` are public.
- `ironsql.shell`: helpers for reading statements.
  - `StatementBuffer.feed(line)` returns the statements a line completes.
    `pending()` returns the text not yet closed by a `;`.
  - `read_statements(lines)` yields every complete statement from an
    iterable of lines. It stops at `quit` or `exit`, with or without a `;`,
    in any case.
  - `is_comment` recognises lines starting with `#`, `//` or `--`.
  - `is_exit_command` recognises the exit commands.
- `ironsql.keywords`: the enums `FieldType`, `Level` (message prefixes such
  as `"error: "`) and `Language` (`zh_cn`, `en_us`).
  - `parse_field_type` turns a name into a `FieldType` and raises
    `ValueError` for an unknown name.
  - `format_message(level, text)` puts the level prefix in front of the text.
  - `NONE`, `DOT`, `TO` and `SYNTAX_WORDS` are keyword constants.

Usable field types are `maxint`, `bigint`, `int`, `char`, `string`,
`double`, `float` and `bool`. Values are stored as the strings you insert.

## Example

```python
from ironsql.engine import Engine
from ironsql.model import IronSQLError

engine = Engine()
engine.create_database("shop")
engine.use_database("shop")
engine.create_table("items", ["id", "name"], ["int", "string"])
engine.insert("items", ["id", "name"], ["1", "apple"])
engine.insert("items", ["id", "name"], ["2", "pear"])

print(engine.table_names("shop"))              # ['items']
print(engine.query("shop", "items", ["name"]))  # [['apple'], ['pear']]

try:
    engine.create_table("items", ["id"], ["int"])
except IronSQLError as exc:
    print(exc)                                  # table already exist:'items'
```

The engine, `link_table` and `link_show_table` raise `IronSQLError` for
anything they refuse, including:

- an existing or unknown database or table
- an unknown field type
- repeated field names
- field names and values whose counts differ
- working without a selected database

## Splitting input into statements

```python
from ironsql.shell import read_statements

lines = [
    "-- a comment",
    "create database shop;",
    "use shop; show",
    "tables;",
]
print(list(read_statements(lines)))
# ['create database shop', 'use shop', 'show tables']
```

## What this package does not do

- It has no parser that turns statement text into engine calls. It also has
  no command-line program or interactive prompt. `ironsql.shell` only splits
  input into statements.
- It does not print tables or help text. It only supplies the widths needed
  to print them.
- Everything is kept in memory. Nothing is saved to disk, and there is no
  server.

## Running the tests

Install the `test` extra and run `pytest` from the project directory.