"""Supported column data types, the NULL variant and conversions between them."""

from __future__ import annotations

import enum
import math
import re
import struct
from typing import Union

from chunkdb.types import NullValue
from chunkdb.utils import LogicError

Variant = Union[int, float, str, NullValue]

NULL_VALUE = NullValue()

_INTEGER_TEXT = re.compile(r"[+-]?[0-9]+")
_FLOAT_TEXT = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|[+-]?(?:inf|infinity|nan)",
    re.IGNORECASE,
)


class DataType(enum.Enum):
    """A column data type, identified by its name in table definitions."""

    INT = "int"
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"
    STRING = "string"

    @property
    def byte_size(self) -> int:
        """Size in bytes of one stored value of this type."""
        return _BYTE_SIZES[self]

    @property
    def default(self) -> Variant:
        """The value stored in place of a NULL."""
        return _DEFAULTS[self]

    @property
    def is_integral(self) -> bool:
        return self in _INTEGER_BOUNDS


_BYTE_SIZES = {
    DataType.INT: 4,
    DataType.LONG: 8,
    DataType.FLOAT: 4,
    DataType.DOUBLE: 8,
    DataType.STRING: 32,
}

_DEFAULTS: dict[DataType, Variant] = {
    DataType.INT: 0,
    DataType.LONG: 0,
    DataType.FLOAT: 0.0,
    DataType.DOUBLE: 0.0,
    DataType.STRING: "",
}

_INTEGER_BOUNDS = {
    DataType.INT: (-(2**31), 2**31 - 1),
    DataType.LONG: (-(2**63), 2**63 - 1),
}

DATA_TYPES = tuple(DataType)


def variant_is_null(value: object) -> bool:
    """Whether ``value`` is the SQL NULL value."""
    return isinstance(value, NullValue)


def resolve_data_type(type_string: str) -> DataType:
    """Return the data type named ``type_string``."""
    try:
        return DataType(type_string)
    except ValueError:
        raise LogicError(f"Unknown data type '{type_string}'.") from None


def _as_data_type(data_type: DataType | str) -> DataType:
    if isinstance(data_type, DataType):
        return data_type
    return resolve_data_type(data_type)


def _format_float(value: float) -> str:
    return format(value, "g")


def _to_text(value: object) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, NullValue):
        return str(value)
    if isinstance(value, int):
        return str(int(value))
    if isinstance(value, float):
        return _format_float(value)
    raise TypeError(f"Unsupported value {value!r}.")


def _to_float32(value: float) -> float:
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except (OverflowError, struct.error):
        raise ValueError(f"{value!r} does not fit into a float.") from None


def _truncate_to_integer(value: float, data_type: DataType) -> int:
    if not math.isfinite(value):
        raise ValueError(f"{value!r} cannot be converted to {data_type.value}.")
    return _check_integer_range(int(value), data_type)


def _check_integer_range(value: int, data_type: DataType) -> int:
    lower, upper = _INTEGER_BOUNDS[data_type]
    if not lower <= value <= upper:
        raise ValueError(f"{value} is out of range for {data_type.value}.")
    return value


def _to_integer(value: object, data_type: DataType) -> int:
    if isinstance(value, NullValue):
        raise ValueError(f"NULL cannot be converted to {data_type.value}.")
    if isinstance(value, int):
        return _check_integer_range(int(value), data_type)
    if isinstance(value, float):
        return _truncate_to_integer(value, data_type)
    if isinstance(value, str):
        if _INTEGER_TEXT.fullmatch(value):
            return _check_integer_range(int(value), data_type)
        if _FLOAT_TEXT.fullmatch(value):
            return _truncate_to_integer(float(value), data_type)
        raise ValueError(f"{value!r} cannot be converted to {data_type.value}.")
    raise TypeError(f"Unsupported value {value!r}.")


def _to_floating(value: object, data_type: DataType) -> float:
    if isinstance(value, NullValue):
        raise ValueError(f"NULL cannot be converted to {data_type.value}.")
    if isinstance(value, (int, float)):
        try:
            result = float(value)
        except OverflowError:
            raise ValueError(f"{value!r} is out of range for {data_type.value}.") from None
    elif isinstance(value, str):
        if not _FLOAT_TEXT.fullmatch(value):
            raise ValueError(f"{value!r} cannot be converted to {data_type.value}.")
        result = float(value)
    else:
        raise TypeError(f"Unsupported value {value!r}.")
    if data_type is DataType.FLOAT:
        return _to_float32(result)
    return result


def type_cast(value: object, data_type: DataType | str) -> Variant:
    """Convert ``value`` to ``data_type``.

    Raises ValueError when the value cannot be represented in the target type.
    """
    target = _as_data_type(data_type)
    if target is DataType.STRING:
        return _to_text(value)
    if target.is_integral:
        return _to_integer(value, target)
    return _to_floating(value, target)