"""Segments: the abstract interface and the uncompressed value segment."""

from __future__ import annotations

from abc import ABC, abstractmethod

from chunkdb.types import ChunkOffset
from chunkdb.utils import LogicError
from chunkdb.variant import (
    NULL_VALUE,
    DataType,
    Variant,
    resolve_data_type,
    type_cast,
    variant_is_null,
)


class AbstractSegment(ABC):
    """A column's part of one chunk."""

    @abstractmethod
    def __getitem__(self, chunk_offset: ChunkOffset) -> Variant:
        """Return the value at ``chunk_offset``, NULL included."""

    @abstractmethod
    def __len__(self) -> int:
        """Return the number of values."""

    @abstractmethod
    def estimate_memory_usage(self) -> int:
        """Return the estimated memory usage in bytes."""


class ValueSegment(AbstractSegment):
    """Segment that stores its values uncompressed in a list."""

    def __init__(self, data_type: DataType | str, nullable: bool = False) -> None:
        self._data_type = data_type if isinstance(data_type, DataType) else resolve_data_type(data_type)
        self._values: list[Variant] = []
        self._null_values: list[bool] | None = [] if nullable else None

    @property
    def data_type(self) -> DataType:
        return self._data_type

    def _check_offset(self, chunk_offset: ChunkOffset) -> None:
        if not 0 <= chunk_offset < len(self._values):
            raise IndexError("Out of bounds.")

    def __getitem__(self, chunk_offset: ChunkOffset) -> Variant:
        self._check_offset(chunk_offset)
        if self.is_null(chunk_offset):
            return NULL_VALUE
        return self._values[chunk_offset]

    def __len__(self) -> int:
        return len(self._values)

    def is_null(self, chunk_offset: ChunkOffset) -> bool:
        """Whether the value at ``chunk_offset`` is NULL."""
        self._check_offset(chunk_offset)
        return self._null_values is not None and self._null_values[chunk_offset]

    def get(self, chunk_offset: ChunkOffset) -> Variant:
        """Return the value at ``chunk_offset``; raise LogicError if it is NULL."""
        if self.is_null(chunk_offset):
            raise LogicError("NULL value at chunk_offset.")
        return self._values[chunk_offset]

    def get_typed_value(self, chunk_offset: ChunkOffset) -> Variant | None:
        """Return the value at ``chunk_offset``, or None if it is NULL."""
        if self.is_null(chunk_offset):
            return None
        return self._values[chunk_offset]

    def append(self, value: object) -> None:
        """Append ``value``, converted to the segment's type."""
        if variant_is_null(value):
            if self._null_values is None:
                raise LogicError("Trying to append NULL value to non nullable segment.")
            self._null_values.append(True)
            self._values.append(self._data_type.default)
            return
        try:
            converted = type_cast(value, self._data_type)
        except (ValueError, TypeError) as error:
            raise LogicError("Could not cast value to segment's type.") from error
        self._values.append(converted)
        if self._null_values is not None:
            self._null_values.append(False)

    def values(self) -> list[Variant]:
        """Return all stored values; NULL positions hold the type's default."""
        return self._values

    def is_nullable(self) -> bool:
        """Whether the segment accepts NULL values."""
        return self._null_values is not None

    def null_values(self) -> list[bool]:
        """Return the per-position NULL flags; raise LogicError if not nullable."""
        if self._null_values is None:
            raise LogicError("Segment is not nullable.")
        return self._null_values

    def estimate_memory_usage(self) -> int:
        return len(self._values) * self._data_type.byte_size