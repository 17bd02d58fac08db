"""Dictionary-compressed segments."""

from __future__ import annotations

from bisect import bisect_left, bisect_right

from chunkdb.attribute_vector import AbstractAttributeVector, FixedWidthIntegerVector
from chunkdb.types import INVALID_VALUE_ID, ChunkOffset, ValueID
from chunkdb.utils import LogicError
from chunkdb.value_segment import AbstractSegment, ValueSegment
from chunkdb.variant import NULL_VALUE, DataType, Variant, type_cast, variant_is_null

_WIDTH_LIMITS = ((0xFF, 1), (0xFFFF, 2), (0xFFFFFFFF, 4))


def _width_for(distinct_values_count: int) -> int:
    """Smallest byte width able to hold value ids up to ``distinct_values_count - 1``."""
    if distinct_values_count == 0:
        return 1
    largest_id = distinct_values_count - 1
    for limit, width in _WIDTH_LIMITS:
        if largest_id <= limit:
            return width
    raise LogicError(
        f"Can not create attribute vector that stores {distinct_values_count} different values."
    )


class DictionarySegment(AbstractSegment):
    """Segment storing a sorted dictionary of distinct values and a vector of ids into it."""

    def __init__(self, segment: AbstractSegment) -> None:
        if not isinstance(segment, ValueSegment):
            raise LogicError("Given segment is not a value segment.")
        self._data_type = segment.data_type
        values = segment.values()
        nulls = segment.null_values() if segment.is_nullable() else [False] * len(values)

        self._dictionary: list[Variant] = sorted(
            {value for value, is_null in zip(values, nulls) if not is_null}
        )
        has_null = any(nulls)
        width = _width_for(len(self._dictionary) + int(has_null))
        self._attribute_vector = FixedWidthIntegerVector(len(values), width)

        positions = {value: index for index, value in enumerate(self._dictionary)}
        null_id = self.null_value_id()
        for offset, (value, is_null) in enumerate(zip(values, nulls)):
            self._attribute_vector.set(offset, null_id if is_null else positions[value])

    @property
    def data_type(self) -> DataType:
        return self._data_type

    def __getitem__(self, chunk_offset: ChunkOffset) -> Variant:
        value_id = self._attribute_vector.get(chunk_offset)
        if value_id == self.null_value_id():
            return NULL_VALUE
        return self._dictionary[value_id]

    def __len__(self) -> int:
        return len(self._attribute_vector)

    def get(self, chunk_offset: ChunkOffset) -> Variant:
        """Return the value at ``chunk_offset``; raise LogicError if it is NULL."""
        value_id = self._attribute_vector.get(chunk_offset)
        if value_id == self.null_value_id():
            raise LogicError(f"Value at {chunk_offset} is NULL.")
        return self._dictionary[value_id]

    def get_typed_value(self, chunk_offset: ChunkOffset) -> Variant | None:
        """Return the value at ``chunk_offset``, or None if it is NULL."""
        value_id = self._attribute_vector.get(chunk_offset)
        if value_id == self.null_value_id():
            return None
        return self._dictionary[value_id]

    def dictionary(self) -> list[Variant]:
        """Return the sorted distinct non-NULL values."""
        return self._dictionary

    def attribute_vector(self) -> AbstractAttributeVector:
        """Return the vector of value ids."""
        return self._attribute_vector

    def null_value_id(self) -> ValueID:
        """Return the value id that stands for NULL."""
        return ValueID(len(self._dictionary))

    def value_of_value_id(self, value_id: int) -> Variant:
        """Return the dictionary value for ``value_id``."""
        if value_id == self.null_value_id():
            raise LogicError(f"Value of value_id {value_id} is null.")
        return self._dictionary[value_id]

    def _bound(self, value: object, search) -> ValueID:
        if variant_is_null(value):
            return INVALID_VALUE_ID
        index = search(self._dictionary, type_cast(value, self._data_type))
        if index == len(self._dictionary):
            return INVALID_VALUE_ID
        return ValueID(index)

    def lower_bound(self, value: object) -> ValueID:
        """First value id whose value is >= ``value``, or INVALID_VALUE_ID."""
        return self._bound(value, bisect_left)

    def upper_bound(self, value: object) -> ValueID:
        """First value id whose value is > ``value``, or INVALID_VALUE_ID."""
        return self._bound(value, bisect_right)

    def unique_values_count(self) -> int:
        """Return the number of dictionary entries."""
        return len(self._dictionary)

    def estimate_memory_usage(self) -> int:
        return (
            len(self._dictionary) * self._data_type.byte_size
            + len(self._attribute_vector) * self._attribute_vector.width()
        )