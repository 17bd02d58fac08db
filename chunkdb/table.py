"""Tables: horizontally partitioned collections of chunks."""

from __future__ import annotations

from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

from chunkdb.chunk import Chunk
from chunkdb.dictionary_segment import DictionarySegment
from chunkdb.reference_segment import ReferenceSegment
from chunkdb.types import MAX_CHUNK_OFFSET, ChunkID, ColumnCount, ColumnID
from chunkdb.utils import LogicError
from chunkdb.value_segment import ValueSegment
from chunkdb.variant import resolve_data_type


class Table:
    """A table, partitioned horizontally into chunks. It always holds at least one chunk."""

    def __init__(self, target_chunk_size: int = MAX_CHUNK_OFFSET - 1) -> None:
        if target_chunk_size < 0:
            raise ValueError("target_chunk_size must not be negative")
        self._target_chunk_size = target_chunk_size
        self._chunks: list[Chunk] = [Chunk()]
        self._column_names: list[str] = []
        self._column_types: list[str] = []
        self._column_nullable: list[bool] = []

    @classmethod
    def from_reference_segments(
        cls, other_table: Table, reference_segments: Sequence[ReferenceSegment]
    ) -> Table:
        """Copy the definition of ``other_table`` and build one chunk per reference segment.

        Each chunk references all columns of the segment's referenced table at the
        segment's positions. Without reference segments, the table holds one empty chunk.
        """
        table = cls(other_table.target_chunk_size())
        column_count = other_table.column_count()
        for column_id in range(column_count):
            table.add_column_definition(
                other_table.column_name(column_id),
                other_table.column_type(column_id),
                other_table.column_nullable(column_id),
            )

        table._chunks = []
        for reference_segment in reference_segments:
            chunk = Chunk()
            for column_id in range(column_count):
                chunk.add_segment(
                    ReferenceSegment(
                        reference_segment.referenced_table(),
                        column_id,
                        reference_segment.pos_list(),
                    )
                )
            table._chunks.append(chunk)

        if not reference_segments:
            chunk = Chunk()
            for type_name in table._column_types:
                chunk.add_segment(ValueSegment(type_name))
            table._chunks.append(chunk)
        return table

    def column_count(self) -> ColumnCount:
        """Return the number of columns."""
        return ColumnCount(len(self._column_names))

    def row_count(self) -> int:
        """Return the number of rows over all chunks."""
        return sum(len(chunk) for chunk in self._chunks)

    def chunk_count(self) -> ChunkID:
        """Return the number of chunks."""
        return ChunkID(len(self._chunks))

    def get_chunk(self, chunk_id: int) -> Chunk:
        """Return the chunk with id ``chunk_id``."""
        if not 0 <= chunk_id < len(self._chunks):
            raise LogicError("Table does not contain chunk with the requested id.")
        return self._chunks[chunk_id]

    def column_names(self) -> list[str]:
        """Return the names of all columns."""
        return list(self._column_names)

    def _check_column_id(self, column_id: int) -> None:
        if not 0 <= column_id < len(self._column_names):
            raise LogicError("Table does not contain column with the requested id.")

    def column_name(self, column_id: int) -> str:
        """Return the name of column ``column_id``."""
        self._check_column_id(column_id)
        return self._column_names[column_id]

    def column_type(self, column_id: int) -> str:
        """Return the type name of column ``column_id``."""
        self._check_column_id(column_id)
        return self._column_types[column_id]

    def column_nullable(self, column_id: int) -> bool:
        """Return whether column ``column_id`` may hold NULL values."""
        self._check_column_id(column_id)
        return self._column_nullable[column_id]

    def column_id_by_name(self, column_name: str) -> ColumnID:
        """Return the id of the first column named ``column_name``."""
        try:
            return ColumnID(self._column_names.index(column_name))
        except ValueError:
            raise LogicError("Table does not contain column with the requested name.") from None

    def target_chunk_size(self) -> int:
        """Return the maximum number of rows per chunk."""
        return self._target_chunk_size

    def add_column_definition(self, name: str, type_name: str, nullable: bool) -> None:
        """Add a column to the definition without creating segments for it."""
        if name in self._column_names:
            raise LogicError("It is not allowed to add two columns with the same name.")
        self._column_names.append(name)
        self._column_types.append(type_name)
        self._column_nullable.append(nullable)

    def add_column(self, name: str, type_name: str, nullable: bool) -> None:
        """Add a column to the right; only allowed while the table holds no rows."""
        if len(self._chunks[0]) != 0:
            raise LogicError("Adding columns is only allowed if the table does not have any entries.")
        data_type = resolve_data_type(type_name)
        self.add_column_definition(name, type_name, nullable)
        self._chunks[0].add_segment(ValueSegment(data_type, nullable))

    def create_new_chunk(self) -> None:
        """Append a new empty chunk with one value segment per column."""
        chunk = Chunk()
        for type_name, nullable in zip(self._column_types, self._column_nullable):
            chunk.add_segment(ValueSegment(type_name, nullable))
        self._chunks.append(chunk)

    def append(self, values: Sequence[object]) -> None:
        """Append a row, starting a new chunk if the last one is full or compressed."""
        last_chunk = self._chunks[-1]
        is_dictionary_encoded = last_chunk.column_count() > 0 and isinstance(
            last_chunk.get_segment(0), DictionarySegment
        )
        if len(last_chunk) == self._target_chunk_size or is_dictionary_encoded:
            self.create_new_chunk()
        self._chunks[-1].append(values)

    def compress_chunk(self, chunk_id: int) -> None:
        """Replace the value segments of chunk ``chunk_id`` by dictionary segments."""
        chunk = self.get_chunk(chunk_id)
        segments = [chunk.get_segment(column_id) for column_id in range(self.column_count())]
        with ThreadPoolExecutor() as executor:
            compressed_segments = list(executor.map(DictionarySegment, segments))

        compressed_chunk = Chunk()
        for segment in compressed_segments:
            compressed_chunk.add_segment(segment)
        self._chunks[chunk_id] = compressed_chunk