"""Chunks: horizontal partitions of a table, one segment per column."""

from __future__ import annotations

from collections.abc import Sequence

from chunkdb.types import ColumnCount, ColumnID
from chunkdb.utils import LogicError
from chunkdb.value_segment import AbstractSegment, ValueSegment


class Chunk:
    """A horizontal partition of a table holding one segment for each column."""

    def __init__(self) -> None:
        self._columns: list[AbstractSegment] = []

    def add_segment(self, segment: AbstractSegment) -> None:
        """Add ``segment`` as the rightmost column."""
        self._columns.append(segment)

    def column_count(self) -> ColumnCount:
        """Return the number of columns."""
        return ColumnCount(len(self._columns))

    def __len__(self) -> int:
        if not self._columns:
            return 0
        return len(self._columns[0])

    def append(self, values: Sequence[object]) -> None:
        """Append a row; segments that are not value segments are left untouched."""
        if len(values) != len(self._columns):
            raise LogicError("Cannot insert a tuple with less values than columns.")
        for segment, value in zip(self._columns, values):
            if isinstance(segment, ValueSegment):
                segment.append(value)

    def get_segment(self, column_id: ColumnID | int) -> AbstractSegment:
        """Return the segment of column ``column_id``."""
        if not 0 <= column_id < len(self._columns):
            raise IndexError("Column id out of range.")
        return self._columns[column_id]