"""Operator that filters a table column by comparison with a search value."""

from __future__ import annotations

import operator
from collections.abc import Callable

from chunkdb.dictionary_segment import DictionarySegment
from chunkdb.operators import AbstractOperator
from chunkdb.reference_segment import ReferenceSegment
from chunkdb.table import Table
from chunkdb.types import ColumnID, RowID, ScanType
from chunkdb.utils import LogicError, ensure, fail
from chunkdb.value_segment import ValueSegment
from chunkdb.variant import DataType, resolve_data_type, type_cast, variant_is_null

_COMPARATORS: dict[ScanType, Callable[[object, object], bool]] = {
    ScanType.OpEquals: operator.eq,
    ScanType.OpNotEquals: operator.ne,
    ScanType.OpLessThan: operator.lt,
    ScanType.OpLessThanEquals: operator.le,
    ScanType.OpGreaterThan: operator.gt,
    ScanType.OpGreaterThanEquals: operator.ge,
}


class TableScan(AbstractOperator):
    """Keeps the rows whose value in one column compares true with a search value.

    The output consists of reference segments. Comparisons with NULL never match.
    """

    def __init__(
        self,
        input_operator: AbstractOperator,
        column_id: int,
        scan_type: ScanType,
        search_value: object,
    ) -> None:
        super().__init__(input_operator)
        self._column_id = ColumnID(column_id)
        self._scan_type = scan_type
        self._search_value = search_value

    def column_id(self) -> ColumnID:
        """Return the scanned column."""
        return self._column_id

    def scan_type(self) -> ScanType:
        """Return the comparison performed."""
        return self._scan_type

    def search_value(self) -> object:
        """Return the value compared against."""
        return self._search_value

    def _comparator(self) -> Callable[[object, object], bool]:
        try:
            return _COMPARATORS[self._scan_type]
        except KeyError:
            fail("Scan Operation not available.")

    def _on_execute(self) -> Table:
        input_table = self._left_input_table()
        ensure(input_table is not None, "Performing a table scan without input does not work.")

        if variant_is_null(self._search_value):
            return Table.from_reference_segments(input_table, [])

        data_type = resolve_data_type(input_table.column_type(self._column_id))
        output_segments: list[ReferenceSegment] = []
        for chunk_id in range(input_table.chunk_count()):
            chunk = input_table.get_chunk(chunk_id)
            if len(chunk) == 0:
                continue
            segment = chunk.get_segment(self._column_id)
            if isinstance(segment, ValueSegment):
                positions = self._scan_value_segment(segment, chunk_id, data_type)
                referenced_table = input_table
            elif isinstance(segment, DictionarySegment):
                positions = self._scan_dictionary_segment(segment, chunk_id)
                referenced_table = input_table
            elif isinstance(segment, ReferenceSegment):
                positions = self._scan_reference_segment(segment, data_type)
                referenced_table = segment.referenced_table()
            else:
                raise LogicError("TableScan was called on unsupported segment type")

            if positions:
                output_segments.append(ReferenceSegment(referenced_table, self._column_id, positions))

        return Table.from_reference_segments(input_table, output_segments)

    def _scan_value_segment(
        self, segment: ValueSegment, chunk_id: int, data_type: DataType
    ) -> list[RowID]:
        compare = self._comparator()
        search = type_cast(self._search_value, data_type)
        return [
            RowID(chunk_id, offset)
            for offset, value in enumerate(segment.values())
            if not segment.is_null(offset) and compare(value, search)
        ]

    def _scan_dictionary_segment(self, segment: DictionarySegment, chunk_id: int) -> list[RowID]:
        # Value ids are compared instead of values; the bounds decide the result.
        comparator = self._comparator()
        lower = segment.lower_bound(self._search_value)
        upper = segment.upper_bound(self._search_value)
        value_absent = lower == upper

        if self._scan_type is ScanType.OpEquals and value_absent:
            return []

        match_all = self._scan_type is ScanType.OpNotEquals and value_absent
        if self._scan_type is ScanType.OpLessThanEquals:
            reference, compare = upper, operator.lt
        elif self._scan_type is ScanType.OpGreaterThan:
            reference, compare = upper, operator.ge
        else:
            reference, compare = lower, comparator

        attribute_vector = segment.attribute_vector()
        null_value_id = segment.null_value_id()
        return [
            RowID(chunk_id, offset)
            for offset in range(len(segment))
            if (value_id := attribute_vector.get(offset)) != null_value_id
            and (match_all or compare(value_id, reference))
        ]

    def _scan_reference_segment(self, segment: ReferenceSegment, data_type: DataType) -> list[RowID]:
        compare = self._comparator()
        search = type_cast(self._search_value, data_type)
        table = segment.referenced_table()
        positions: list[RowID] = []
        for row in segment.pos_list():
            target = table.get_chunk(row.chunk_id).get_segment(self._column_id)
            if isinstance(target, ValueSegment):
                if target.is_null(row.chunk_offset):
                    continue
                value = type_cast(target.values()[row.chunk_offset], data_type)
            elif isinstance(target, DictionarySegment):
                value_id = target.attribute_vector().get(row.chunk_offset)
                if value_id == target.null_value_id():
                    continue
                value = type_cast(target.value_of_value_id(value_id), data_type)
            else:
                raise LogicError(
                    "Segment that ReferenceSegement references is not supported by TableScan."
                )
            if compare(value, search):
                positions.append(row)
        return positions