"""Segments that refer to rows of another table."""

from __future__ import annotations

from typing import Any

from chunkdb.types import RowID, ChunkOffset, ColumnID
from chunkdb.value_segment import AbstractSegment
from chunkdb.variant import NULL_VALUE, Variant

_ROW_ID_SIZE = 8


class ReferenceSegment(AbstractSegment):
    """Segment whose values are positions in a column of a referenced table."""

    def __init__(self, referenced_table: Any, referenced_column_id: int, pos_list: list[RowID]) -> None:
        self._referenced_table = referenced_table
        self._referenced_column_id = ColumnID(referenced_column_id)
        self._pos_list = pos_list

    def __getitem__(self, chunk_offset: ChunkOffset) -> Variant:
        if not 0 <= chunk_offset < len(self._pos_list):
            raise IndexError("Position list offset out of range.")
        row_id = self._pos_list[chunk_offset]
        if row_id.is_null():
            return NULL_VALUE
        chunk = self._referenced_table.get_chunk(row_id.chunk_id)
        segment = chunk.get_segment(self._referenced_column_id)
        return segment[row_id.chunk_offset]

    def __len__(self) -> int:
        return len(self._pos_list)

    def pos_list(self) -> list[RowID]:
        """Return the referenced positions."""
        return self._pos_list

    def referenced_table(self) -> Any:
        """Return the table the positions refer to."""
        return self._referenced_table

    def referenced_column_id(self) -> ColumnID:
        """Return the referenced column."""
        return self._referenced_column_id

    def estimate_memory_usage(self) -> int:
        return len(self._pos_list) * _ROW_ID_SIZE