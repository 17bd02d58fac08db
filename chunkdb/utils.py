"""Assertion helpers and small string utilities."""

from __future__ import annotations

from typing import NoReturn

_SOURCE_MARKER = "/src/"


class LogicError(Exception):
    """Raised when an invariant is violated or an illegal operation is requested."""


def fail(message: str) -> NoReturn:
    """Raise a LogicError carrying ``message``."""
    raise LogicError(message)


def ensure(condition: object, message: str) -> None:
    """Raise a LogicError with ``message`` unless ``condition`` is truthy."""
    if not condition:
        fail(message)


def trim_and_split(text: str) -> list[str]:
    """Trim whitespace, collapse inner runs of it, and split into words.

    Blank input yields a single empty word.
    """
    return text.split() or [""]


def split_string_by_delimiter(text: str, delimiter: str) -> list[str]:
    """Split ``text`` at every ``delimiter``.

    A trailing delimiter does not produce a trailing empty token, and an
    empty input produces no tokens at all.
    """
    if len(delimiter) != 1:
        raise ValueError("delimiter must be a single character")
    if not text:
        return []
    parts = text.split(delimiter)
    if text.endswith(delimiter):
        parts.pop()
    return parts


def trim_source_file_path(path: str) -> str:
    """Crop a long path so that it starts at its ``src/`` directory."""
    position = path.find(_SOURCE_MARKER)
    if position == -1:
        return path
    return path[position + 1:]