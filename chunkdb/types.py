"""Core identifiers, the SQL NULL value, row ids and scan types."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import NewType

ChunkID = NewType("ChunkID", int)
ColumnID = NewType("ColumnID", int)
ColumnCount = NewType("ColumnCount", int)
ValueID = NewType("ValueID", int)
ChunkOffset = int
AttributeVectorWidth = int

_UINT32_MAX = 2**32 - 1

INVALID_CHUNK_OFFSET: ChunkOffset = _UINT32_MAX
INVALID_CHUNK_ID = ChunkID(_UINT32_MAX)
INVALID_VALUE_ID = ValueID(_UINT32_MAX)
MAX_CHUNK_OFFSET: ChunkOffset = _UINT32_MAX


class NullValue:
    """The SQL NULL value: it is never equal to, less or greater than anything."""

    __slots__ = ()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, NullValue):
            return False
        # Other types decline as well, so the comparison falls back to identity.
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        if isinstance(other, NullValue):
            return True
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, NullValue):
            return False
        return NotImplemented

    def __le__(self, other: object) -> bool:
        if isinstance(other, NullValue):
            return False
        return NotImplemented

    def __gt__(self, other: object) -> bool:
        if isinstance(other, NullValue):
            return False
        return NotImplemented

    def __ge__(self, other: object) -> bool:
        if isinstance(other, NullValue):
            return False
        return NotImplemented

    def __neg__(self) -> NullValue:
        return NullValue()

    def __hash__(self) -> int:
        return 0

    def __str__(self) -> str:
        return "NULL"

    def __repr__(self) -> str:
        return "NullValue()"


@dataclass(frozen=True, order=True)
class RowID:
    """Position of a row: the chunk it lives in and its offset there."""

    chunk_id: int
    chunk_offset: int

    def is_null(self) -> bool:
        """Whether this row id stands for NULL; only the offset is checked."""
        return self.chunk_offset == INVALID_CHUNK_OFFSET


NULL_ROW_ID = RowID(INVALID_CHUNK_ID, INVALID_CHUNK_OFFSET)

PosList = list[RowID]


class ScanType(enum.Enum):
    """Comparison performed by a table scan."""

    OpEquals = enum.auto()
    OpNotEquals = enum.auto()
    OpLessThan = enum.auto()
    OpLessThanEquals = enum.auto()
    OpGreaterThan = enum.auto()
    OpGreaterThanEquals = enum.auto()