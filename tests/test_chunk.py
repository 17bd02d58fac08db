import pytest

from chunkdb.chunk import Chunk
from chunkdb.dictionary_segment import DictionarySegment
from chunkdb.utils import LogicError
from chunkdb.value_segment import ValueSegment


@pytest.fixture
def int_segment():
    segment = ValueSegment("int")
    for value in [4, 6, 3]:
        segment.append(value)
    return segment


@pytest.fixture
def string_segment():
    segment = ValueSegment("string")
    for value in ["Hello,", "world", "!"]:
        segment.append(value)
    return segment


@pytest.fixture
def chunk(int_segment, string_segment):
    chunk = Chunk()
    chunk.add_segment(int_segment)
    chunk.add_segment(string_segment)
    return chunk


def test_add_segment_to_chunk(int_segment, string_segment):
    chunk = Chunk()
    assert len(chunk) == 0
    chunk.add_segment(int_segment)
    chunk.add_segment(string_segment)
    assert len(chunk) == 3
    assert chunk.column_count() == 2


def test_add_values_to_chunk(chunk):
    chunk.append([2, "two"])
    assert len(chunk) == 4
    with pytest.raises(LogicError):
        chunk.append([])
    with pytest.raises(LogicError):
        chunk.append([4, "val", 3])
    assert len(chunk) == 4


def test_retrieve_segment(chunk):
    chunk.append([2, "two"])
    segment = chunk.get_segment(0)
    assert len(segment) == 4
    assert segment[3] == 2
    assert chunk.get_segment(1)[3] == "two"


def test_get_segment_out_of_range(chunk):
    with pytest.raises(IndexError):
        chunk.get_segment(2)


def test_append_skips_dictionary_segments(int_segment, string_segment):
    chunk = Chunk()
    chunk.add_segment(DictionarySegment(int_segment))
    chunk.add_segment(string_segment)
    chunk.append([9, "nine"])
    assert len(chunk.get_segment(0)) == 3
    assert len(chunk.get_segment(1)) == 4
    assert len(chunk) == 3