"""In-memory database engine with typed tables, table linking and a statement splitter."""

__version__ = "0.0.1"
__all__ = ["engine", "keywords", "linking", "linkview", "model", "shell"]