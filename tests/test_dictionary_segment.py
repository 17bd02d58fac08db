import pytest

from chunkdb.dictionary_segment import DictionarySegment
from chunkdb.types import INVALID_VALUE_ID
from chunkdb.utils import LogicError
from chunkdb.value_segment import ValueSegment
from chunkdb.variant import NULL_VALUE, variant_is_null


@pytest.fixture
def string_segment():
    segment = ValueSegment("string", True)
    for value in ["Bill", "Steve", "Alexander", "Steve", "Hasso", "Bill", NULL_VALUE]:
        segment.append(value)
    return segment


def _int_dictionary(count):
    segment = ValueSegment("int")
    for value in range(count):
        segment.append(value)
    return DictionarySegment(segment)


def test_compress_segment_string(string_segment):
    dict_segment = DictionarySegment(string_segment)
    assert len(dict_segment) == 7
    assert dict_segment.unique_values_count() == 4
    assert dict_segment.dictionary() == ["Alexander", "Bill", "Hasso", "Steve"]

    assert dict_segment.attribute_vector().get(6) == dict_segment.null_value_id()
    assert dict_segment.get_typed_value(1) == "Steve"
    assert dict_segment.get_typed_value(2) == "Alexander"
    assert dict_segment.get_typed_value(3) == "Steve"
    assert dict_segment.get_typed_value(6) is None

    assert dict_segment.value_of_value_id(0) == "Alexander"
    assert dict_segment.upper_bound(NULL_VALUE) == INVALID_VALUE_ID
    assert dict_segment.lower_bound(NULL_VALUE) == INVALID_VALUE_ID


def test_get_null_and_out_of_range(string_segment):
    dict_segment = DictionarySegment(string_segment)
    with pytest.raises(LogicError):
        dict_segment.get(6)
    with pytest.raises(IndexError):
        dict_segment.get(7)
    assert dict_segment.get(0) == "Bill"


def test_getitem_returns_null_variant(string_segment):
    dict_segment = DictionarySegment(string_segment)
    assert variant_is_null(dict_segment[6])
    assert dict_segment[4] == "Hasso"


def test_value_of_null_value_id_raises(string_segment):
    dict_segment = DictionarySegment(string_segment)
    with pytest.raises(LogicError):
        dict_segment.value_of_value_id(dict_segment.null_value_id())


def test_null_values():
    segment = ValueSegment("string", True)
    for _ in range(4):
        segment.append(NULL_VALUE)
    dict_segment = DictionarySegment(segment)

    assert len(dict_segment) == 4
    assert dict_segment.unique_values_count() == 0
    for index in range(4):
        assert dict_segment.attribute_vector().get(index) == dict_segment.null_value_id()
        assert dict_segment.get_typed_value(index) is None

    assert dict_segment.upper_bound(NULL_VALUE) == INVALID_VALUE_ID
    assert dict_segment.lower_bound(NULL_VALUE) == INVALID_VALUE_ID
    assert dict_segment.lower_bound("Alexander") == INVALID_VALUE_ID
    assert dict_segment.upper_bound("Alexander") == INVALID_VALUE_ID


def test_compress_segment_duplicate_values():
    segment = ValueSegment("int")
    for value in [1, 1, 2, 2, 1, 2]:
        segment.append(value)
    dict_segment = DictionarySegment(segment)

    assert len(dict_segment) == 6
    assert dict_segment.unique_values_count() == 2
    assert [dict_segment.get(offset) for offset in range(5)] == [1, 1, 2, 2, 1]


def test_lower_upper_bound():
    segment = ValueSegment("int")
    for value in range(0, 11, 2):
        segment.append(value)
    dict_segment = DictionarySegment(segment)

    assert dict_segment.lower_bound(4) == 2
    assert dict_segment.upper_bound(4) == 3
    assert dict_segment.lower_bound(5) == 3
    assert dict_segment.upper_bound(5) == 3
    assert dict_segment.lower_bound(15) == INVALID_VALUE_ID
    assert dict_segment.upper_bound(15) == INVALID_VALUE_ID
    assert dict_segment.upper_bound(10) == INVALID_VALUE_ID
    assert dict_segment.lower_bound(10) == 5


@pytest.mark.parametrize(
    "count, width",
    [(10, 1), (257, 2), (256 * 256, 2), (256 * 256 + 1, 4)],
)
def test_correct_width(count, width):
    dict_segment = _int_dictionary(count)
    assert dict_segment.attribute_vector().width() == width
    assert dict_segment.estimate_memory_usage() == count * 4 + count * width


def test_null_id_fits_attribute_vector():
    segment = ValueSegment("int", True)
    for value in range(256):
        segment.append(value)
    segment.append(NULL_VALUE)
    dict_segment = DictionarySegment(segment)
    assert dict_segment.null_value_id() == 256
    assert dict_segment.attribute_vector().get(256) == 256
    assert dict_segment.get_typed_value(256) is None


def test_requires_value_segment():
    dict_segment = _int_dictionary(3)
    with pytest.raises(LogicError):
        DictionarySegment(dict_segment)