import pytest

from ironsql.shell import (
    StatementBuffer,
    is_comment,
    is_exit_command,
    read_statements,
)


@pytest.mark.parametrize("line", ["# note", "// note", "-- note", "   -- indented"])
def test_is_comment_true(line):
    assert is_comment(line) is True


@pytest.mark.parametrize("line", ["show databases;", "- x", "/ y", ""])
def test_is_comment_false(line):
    assert is_comment(line) is False


@pytest.mark.parametrize("line", ["quit", "exit", "EXIT;", "  Quit;  "])
def test_is_exit_command_true(line):
    assert is_exit_command(line) is True


@pytest.mark.parametrize("line", ["quit now", "exit;;", "show databases;"])
def test_is_exit_command_false(line):
    assert is_exit_command(line) is False


def test_feed_single_statement():
    buffer = StatementBuffer()
    assert buffer.feed("  show databases;  ") == ["show databases"]
    assert buffer.pending() == ""
    assert not buffer


def test_feed_multi_line_statement_joined_with_space():
    buffer = StatementBuffer()
    assert buffer.feed("select *") == []
    assert buffer.pending() == "select *"
    assert bool(buffer) is True
    assert buffer.feed("  from t;") == ["select * from t"]
    assert buffer.pending() == ""


def test_feed_several_statements_and_remainder():
    buffer = StatementBuffer()
    result = buffer.feed("use a; show tables; create")
    assert result == ["use a", "show tables"]
    assert buffer.pending() == "create"


def test_feed_drops_empty_statements():
    buffer = StatementBuffer()
    assert buffer.feed(";; ; use a;") == ["use a"]


def test_feed_ignores_blank_and_comment_lines():
    buffer = StatementBuffer()
    buffer.feed("select *")
    assert buffer.feed("   ") == []
    assert buffer.feed("-- from nowhere;") == []
    assert buffer.pending() == "select *"


def test_read_statements_stops_at_exit():
    lines = ["use a;\n", "show tables;\n", "exit\n", "show databases;\n"]
    assert list(read_statements(lines)) == ["use a", "show tables"]


def test_read_statements_skips_comments_and_unterminated_tail():
    lines = ["# header", "create database d", ";", "// x;", "use d"]
    assert list(read_statements(lines)) == ["create database d"]


def test_read_statements_exit_inside_pending_statement():
    lines = ["select *", "quit;", "from t;"]
    assert list(read_statements(lines)) == []


def _failing_source():
    yield "use a;"
    raise RuntimeError("read too far")


def test_read_statements_is_lazy():
    statements = read_statements(_failing_source())
    assert next(statements) == "use a"
    with pytest.raises(RuntimeError):
        next(statements)