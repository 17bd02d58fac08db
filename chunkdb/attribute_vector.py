"""Attribute vectors: compact storage of value ids for dictionary segments."""

from __future__ import annotations

from abc import ABC, abstractmethod
from array import array

from chunkdb.types import AttributeVectorWidth, ValueID

_TYPECODES = {array(code).itemsize: code for code in "LIHB"}
_SUPPORTED_WIDTHS = (1, 2, 4)


class AbstractAttributeVector(ABC):
    """A vector of value ids."""

    @abstractmethod
    def get(self, index: int) -> ValueID:
        """Return the value id at ``index``."""

    @abstractmethod
    def set(self, index: int, value_id: int) -> None:
        """Store ``value_id`` at ``index``."""

    @abstractmethod
    def __len__(self) -> int:
        """Return the number of value ids."""

    @abstractmethod
    def width(self) -> AttributeVectorWidth:
        """Return the width of one stored value id in bytes."""


class FixedWidthIntegerVector(AbstractAttributeVector):
    """Attribute vector storing value ids as unsigned integers of a fixed byte width."""

    def __init__(self, size: int, width: int) -> None:
        if width not in _SUPPORTED_WIDTHS:
            raise ValueError(f"Unsupported attribute vector width {width}.")
        if size < 0:
            raise ValueError("size must not be negative")
        self._width = width
        self._mask = (1 << (8 * width)) - 1
        self._data = array(_TYPECODES[width], bytes(_TYPECODES and array(_TYPECODES[width]).itemsize * size))

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._data):
            raise IndexError("Index out of bounds")

    def get(self, index: int) -> ValueID:
        self._check_index(index)
        return ValueID(self._data[index])

    def set(self, index: int, value_id: int) -> None:
        """Store ``value_id``, truncated to the vector's width."""
        self._check_index(index)
        self._data[index] = value_id & self._mask

    def __len__(self) -> int:
        return len(self._data)

    def width(self) -> AttributeVectorWidth:
        return self._width