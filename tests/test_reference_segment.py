import pytest

from chunkdb.chunk import Chunk
from chunkdb.dictionary_segment import DictionarySegment
from chunkdb.reference_segment import ReferenceSegment
from chunkdb.types import NULL_ROW_ID, RowID
from chunkdb.value_segment import ValueSegment
from chunkdb.variant import variant_is_null


class _ChunkedTable:
    def __init__(self, chunks):
        self._chunks = chunks

    def get_chunk(self, chunk_id):
        return self._chunks[chunk_id]


def _value_chunk(rows):
    chunk = Chunk()
    chunk.add_segment(ValueSegment("int"))
    chunk.add_segment(ValueSegment("float", True))
    for row in rows:
        chunk.append(row)
    return chunk


@pytest.fixture
def table():
    return _ChunkedTable(
        [
            _value_chunk([[123, 456.7], [1234, 457.7], [12345, 458.7]]),
            _value_chunk([[54321, 458.7], [12345, 458.7]]),
        ]
    )


def test_retrieves_values(table):
    pos_list = [RowID(0, 0), RowID(0, 1), RowID(0, 2)]
    reference_segment = ReferenceSegment(table, 0, pos_list)
    segment = table.get_chunk(0).get_segment(0)
    assert [reference_segment[i] for i in range(3)] == [segment[0], segment[1], segment[2]]
    assert [reference_segment[i] for i in range(3)] == [123, 1234, 12345]


def test_getter(table):
    pos_list = [RowID(0, 0), RowID(0, 1), RowID(0, 2)]
    reference_segment = ReferenceSegment(table, 0, pos_list)
    assert reference_segment.referenced_table() is table
    assert reference_segment.referenced_column_id() == 0
    assert reference_segment.pos_list() is pos_list
    assert len(reference_segment) == len(pos_list)
    assert reference_segment.estimate_memory_usage() == 3 * 8


def test_retrieves_values_out_of_order(table):
    pos_list = [RowID(0, 1), RowID(0, 2), RowID(0, 0)]
    reference_segment = ReferenceSegment(table, 0, pos_list)
    segment = table.get_chunk(0).get_segment(0)
    assert reference_segment[0] == segment[1]
    assert reference_segment[1] == segment[2]
    assert reference_segment[2] == segment[0]


def test_retrieves_values_from_chunks(table):
    pos_list = [RowID(0, 2), RowID(1, 0), RowID(1, 1)]
    reference_segment = ReferenceSegment(table, 0, pos_list)
    segment_1 = table.get_chunk(0).get_segment(0)
    segment_2 = table.get_chunk(1).get_segment(0)
    assert reference_segment[0] == segment_1[2]
    assert reference_segment[1] == segment_2[0]
    assert reference_segment[2] == segment_2[1]


def test_retrieve_null_value_from_null_row_id(table):
    pos_list = [RowID(0, 0), RowID(0, 1), NULL_ROW_ID, RowID(0, 2)]
    reference_segment = ReferenceSegment(table, 0, pos_list)
    segment = table.get_chunk(0).get_segment(0)
    assert reference_segment[0] == segment[0]
    assert reference_segment[1] == segment[1]
    assert variant_is_null(reference_segment[2])
    assert reference_segment[3] == segment[2]


def test_retrieves_float_column(table):
    reference_segment = ReferenceSegment(table, 1, [RowID(1, 1)])
    assert reference_segment[0] == table.get_chunk(1).get_segment(1)[1]
    assert reference_segment[0] == pytest.approx(458.7, rel=1e-6)


def test_retrieves_from_dictionary_segment():
    values = ValueSegment("int")
    for value in [7, 3, 7, 1]:
        values.append(value)
    chunk = Chunk()
    chunk.add_segment(DictionarySegment(values))
    reference_segment = ReferenceSegment(_ChunkedTable([chunk]), 0, [RowID(0, 3), RowID(0, 2)])
    assert [reference_segment[0], reference_segment[1]] == [1, 7]


def test_out_of_range_offset_raises(table):
    reference_segment = ReferenceSegment(table, 0, [RowID(0, 0)])
    with pytest.raises(IndexError):
        reference_segment[1]
    with pytest.raises(IndexError):
        reference_segment[-1]
    assert reference_segment[0] == 123
    assert len(reference_segment) == 1