"""Reading statements from an interactive or piped input stream."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

__all__ = [
    "StatementBuffer",
    "is_comment",
    "is_exit_command",
    "read_statements",
]

_COMMENT_PREFIXES = ("#", "//", "--")
_EXIT_COMMANDS = frozenset({"quit", "exit", "quit;", "exit;"})


def is_comment(line: str) -> bool:
    """Return True when ``line`` is a comment line (``#``, ``//`` or ``--``)."""
    return line.strip().startswith(_COMMENT_PREFIXES)


def is_exit_command(line: str) -> bool:
    """Return True when ``line`` asks to leave the shell."""
    return line.strip().lower() in _EXIT_COMMANDS


class StatementBuffer:
    """Collects input lines until they form statements ending in ``;``."""

    def __init__(self) -> None:
        self._text = ""

    def feed(self, line: str) -> list[str]:
        """Add a line and return the statements it completes.

        Blank and comment lines are ignored. Lines are joined with a single
        space; empty statements between semicolons are dropped.
        """
        text = line.strip()
        if not text or is_comment(text):
            return []
        self._text = f"{self._text} {text}" if self._text else text

        *complete, rest = self._text.split(";")
        self._text = rest.strip()
        return [sentence for sentence in (part.strip() for part in complete) if sentence]

    def pending(self) -> str:
        """Text read so far that no semicolon has closed yet."""
        return self._text

    def __bool__(self) -> bool:
        return bool(self._text)


def read_statements(lines: Iterable[str]) -> Iterator[str]:
    """Yield each complete statement found in ``lines``.

    Reading stops at the first exit command; unterminated text at the end
    is not yielded.
    """
    buffer = StatementBuffer()
    for line in lines:
        text = line.strip()
        if not text or is_comment(text):
            continue
        if is_exit_command(text):
            return
        yield from buffer.feed(text)