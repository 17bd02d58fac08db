"""Process-wide registry mapping table names to tables."""

from __future__ import annotations

import sys
from typing import ClassVar, TextIO

from chunkdb.table import Table
from chunkdb.utils import LogicError


class StorageManager:
    """Maintains all tables by name; use ``StorageManager.get()`` for the shared instance."""

    _instance: ClassVar[StorageManager | None] = None

    def __init__(self) -> None:
        self._tables: dict[str, Table] = {}

    @classmethod
    def get(cls) -> StorageManager:
        """Return the shared storage manager."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def add_table(self, name: str, table: Table) -> None:
        """Register ``table`` under ``name``."""
        if name in self._tables:
            raise LogicError("Table already exists.")
        self._tables[name] = table

    def drop_table(self, name: str) -> None:
        """Remove the table called ``name``."""
        if name not in self._tables:
            raise LogicError("Table does not exist.")
        del self._tables[name]

    def get_table(self, name: str) -> Table:
        """Return the table called ``name``."""
        try:
            return self._tables[name]
        except KeyError:
            raise LogicError("Table does not exist") from None

    def has_table(self, name: str) -> bool:
        """Whether a table called ``name`` is registered."""
        return name in self._tables

    def table_names(self) -> list[str]:
        """Return the names of all registered tables."""
        return list(self._tables)

    def print(self, out: TextIO | None = None) -> None:
        """Write name, column, row and chunk counts of every table to ``out``."""
        stream = sys.stdout if out is None else out
        for name, table in self._tables.items():
            stream.write(
                f"{name} #columns: {table.column_count()} #rows: {table.row_count()}"
                f" #chunks {table.chunk_count()}\n"
            )

    def reset(self) -> None:
        """Remove all tables."""
        self._tables.clear()