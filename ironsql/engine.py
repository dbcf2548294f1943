"""The storage engine: databases, tables and rows held in memory."""

from __future__ import annotations

import threading
from collections.abc import Sequence

from ironsql.keywords import NONE, parse_field_type
from ironsql.model import (
    Database,
    Field,
    IronSQLError,
    Session,
    Table,
    display_width,
    has_duplicates,
)

__all__ = ["Engine"]


class Engine:
    """Holds every database and the session that says which one is in use."""

    def __init__(self) -> None:
        self.databases: dict[str, Database] = {}
        self.session = Session()
        self._lock = threading.RLock()

    # ------------------------------------------------------------------
    # lookups

    def database(self, database_name: str) -> Database:
        """Return the database called ``database_name``."""
        try:
            return self.databases[database_name]
        except KeyError:
            raise IronSQLError(f"database not exist:'{database_name}'") from None

    def table(self, database_name: str, table_name: str) -> Table:
        """Return the table ``table_name`` of database ``database_name``."""
        database = self.database(database_name)
        try:
            return database.tables[table_name]
        except KeyError:
            raise IronSQLError(f"table not exist:'{table_name}'") from None

    def _current_database(self) -> Database:
        name = self.session.database_name
        if name == NONE:
            raise IronSQLError(
                "database not selected,you must choice a database object first."
            )
        return self.database(name)

    def _find_table(self, database_name: str, table_name: str) -> Table | None:
        database = self.databases.get(database_name)
        if database is None:
            return None
        return database.tables.get(table_name)

    # ------------------------------------------------------------------
    # statements

    def create_database(self, database_name: str) -> None:
        """Create an empty database."""
        with self._lock:
            if database_name in self.databases:
                raise IronSQLError(f"database already exist:'{database_name}'")
            self.databases[database_name] = Database(database_name)

    def use_database(self, database_name: str) -> None:
        """Make ``database_name`` the database later statements work on."""
        with self._lock:
            database = self.databases.get(database_name)
            if database is None:
                raise IronSQLError(f"database not exist:'{database_name}'")
            self.session.select(database_name, len(database.tables))

    def create_table(
        self,
        table_name: str,
        field_names: Sequence[str],
        field_types: Sequence[str],
    ) -> None:
        """Create a table in the database in use."""
        with self._lock:
            database = self._current_database()
            if len(field_names) != len(field_types):
                raise IronSQLError("field names and types number not match")
            if has_duplicates(field_names):
                raise IronSQLError("repeat field names")
            parsed = []
            for field_type in field_types:
                try:
                    parsed.append(parse_field_type(field_type))
                except ValueError:
                    raise IronSQLError(
                        f"unknown field type:'{field_type}'"
                    ) from None
            if table_name in database.tables:
                raise IronSQLError(f"table already exist:'{table_name}'")
            database.tables[table_name] = Table(
                table_name,
                [Field(name, kind) for name, kind in zip(field_names, parsed)],
            )

    def insert(
        self,
        table_name: str,
        field_names: Sequence[str],
        field_values: Sequence[str],
    ) -> None:
        """Append a row of values to a table of the database in use."""
        with self._lock:
            database = self._current_database()
            if has_duplicates(field_names):
                raise IronSQLError("repeat field names")
            if len(field_names) != len(field_values):
                raise IronSQLError("field names and values number not match")
            table = database.tables.get(table_name)
            if table is None:
                raise IronSQLError(f"table not exist:'{table_name}'")
            table.add_row(field_values)

    def drop_database(self, database_name: str) -> None:
        """Delete a database with all its tables."""
        with self._lock:
            if not self.databases:
                raise IronSQLError("delete failed, databases is empty!")
            if database_name not in self.databases:
                raise IronSQLError(
                    f"delete failed, undefined database: {database_name}"
                )
            del self.databases[database_name]

    def drop_table(self, database_name: str, table_name: str) -> None:
        """Delete one table of a database."""
        with self._lock:
            if not self.databases:
                raise IronSQLError("delete failed, databases is empty!")
            database = self.databases.get(database_name)
            if database is None:
                raise IronSQLError(
                    f"delete failed, undefined database: {database_name}"
                )
            if table_name not in database.tables:
                raise IronSQLError(f"delete failed, undefined table: {table_name}")
            del database.tables[table_name]

    # ------------------------------------------------------------------
    # reading

    def database_names(self) -> list[str]:
        """Names of all databases, in creation order."""
        return list(self.databases)

    def database_name_max_width(self) -> int:
        """Display width of the widest database name, 0 without databases."""
        return max((display_width(name) for name in self.databases), default=0)

    def table_names(self, database_name: str) -> list[str]:
        """Names of the tables of a database; empty for an unknown one."""
        database = self.databases.get(database_name)
        return database.table_names() if database else []

    def table_name_max_width(self, database_name: str) -> int:
        """Widest table name of a database; 0 for an unknown one."""
        database = self.databases.get(database_name)
        return database.table_name_max_width() if database else 0

    def field_names(self, database_name: str, table_name: str) -> list[str]:
        """Field names of a table; empty for an unknown table."""
        table = self._find_table(database_name, table_name)
        return table.field_names() if table else []

    def field_types(self, database_name: str, table_name: str) -> list[str]:
        """Field type names of a table; empty for an unknown table."""
        table = self._find_table(database_name, table_name)
        return table.field_types() if table else []

    def field_name_max_width(self, database_name: str, table_name: str) -> int:
        """Widest field name of a table; 0 for an unknown table."""
        table = self._find_table(database_name, table_name)
        return table.field_name_max_width() if table else 0

    def field_type_max_width(self, database_name: str, table_name: str) -> int:
        """Widest field type name of a table; 0 for an unknown table."""
        table = self._find_table(database_name, table_name)
        return table.field_type_max_width() if table else 0

    def table_rows(self, database_name: str, table_name: str) -> list[list[str]]:
        """Copies of all rows of a table."""
        return [list(row) for row in self.table(database_name, table_name).rows]

    def data_row_widths(self, database_name: str, table_name: str) -> list[int]:
        """Widest value per column of a table; empty for an unknown table."""
        table = self._find_table(database_name, table_name)
        return list(table.data_widths) if table else []

    def query(
        self,
        database_name: str,
        table_name: str,
        field_names: Sequence[str],
    ) -> list[list[str]]:
        """Return the chosen columns of every row of a table."""
        if not field_names:
            raise IronSQLError("no field names given")
        table = self.table(database_name, table_name)
        indices = []
        for name in field_names:
            try:
                indices.append(table.field_index(name))
            except KeyError:
                raise IronSQLError(f"unknown field:'{name}'") from None
        return [
            [row[index] if index < len(row) else "" for index in indices]
            for row in table.rows
        ]