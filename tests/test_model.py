import pytest

from ironsql.keywords import NONE, FieldType
from ironsql.model import (
    Database,
    Field,
    IronSQLError,
    Session,
    Table,
    display_width,
    has_duplicates,
)


def _people() -> Table:
    return Table(
        "people",
        [Field("id", FieldType.INT), Field("name", FieldType.STRING), Field("ok", "bool")],
    )


def test_display_width_ascii_matches_length():
    for text in ["", "a", "hello world", "field_name"]:
        assert display_width(text) == len(text)


def test_display_width_wide_characters_take_two_columns():
    assert display_width("数据") == 4
    assert display_width("a数") == 3


def test_has_duplicates():
    assert has_duplicates(["a", "b", "a"]) is True
    assert has_duplicates(["a", "b", "c"]) is False
    assert has_duplicates([]) is False


def test_field_accepts_type_name():
    f = Field("ok", "bool")
    assert f.type is FieldType.BOOL


@pytest.mark.parametrize("bad", ["integer", "errt", ""])
def test_field_rejects_unknown_type(bad):
    with pytest.raises(ValueError):
        Field("x", bad)


def test_table_field_names_and_types():
    table = _people()
    assert table.field_names() == ["id", "name", "ok"]
    assert table.field_types() == ["int", "string", "bool"]


def test_table_field_index():
    table = _people()
    assert [table.field_index(n) for n in table.field_names()] == [0, 1, 2]
    with pytest.raises(KeyError):
        table.field_index("missing")


def test_table_max_widths():
    table = _people()
    assert table.field_name_max_width() == max(len(n) for n in table.field_names())
    assert table.field_type_max_width() == len("string")
    empty = Table("empty")
    assert empty.field_name_max_width() == 0
    assert empty.field_type_max_width() == 0


def test_add_row_stores_values_and_widths():
    table = _people()
    table.add_row(["1", "alice", "true"])
    table.add_row(["22", "bob", "false"])
    assert table.rows == [["1", "alice", "true"], ["22", "bob", "false"]]
    assert table.data_widths == [2, 5, 5]


def test_add_row_copies_input():
    table = _people()
    values = ["1", "alice", "true"]
    table.add_row(values)
    values[0] = "changed"
    assert table.rows[0][0] == "1"


def test_record_widths_grows_and_keeps_maximum():
    table = Table("t")
    table.record_widths([3, 1])
    table.record_widths([2, 4, 5])
    assert table.data_widths == [3, 4, 5]
    table.record_widths([1])
    assert table.data_widths == [3, 4, 5]


def test_database_table_names_keep_order():
    db = Database("shop")
    for name in ["orders", "a", "customers"]:
        db.tables[name] = Table(name)
    assert db.table_names() == ["orders", "a", "customers"]
    assert db.table_name_max_width() == len("customers")


def test_database_without_tables():
    db = Database("empty")
    assert db.table_names() == []
    assert db.table_name_max_width() == 0


def test_session_defaults_and_select():
    session = Session()
    assert session.database_name == NONE
    assert session.tables_number == 0
    session.select("shop", 3)
    assert (session.database_name, session.tables_number) == ("shop", 3)


def test_ironsql_error_carries_message():
    err = IronSQLError("database not exist:'x'")
    assert str(err) == "database not exist:'x'"
    assert isinstance(err, Exception)