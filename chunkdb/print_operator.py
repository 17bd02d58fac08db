"""Operator that writes a table and its data as aligned text."""

from __future__ import annotations

import sys
from typing import TextIO

from chunkdb.operators import AbstractOperator, TableWrapper
from chunkdb.table import Table
from chunkdb.variant import DataType, type_cast


def _cell_text(value: object) -> str:
    return type_cast(value, DataType.STRING)


def _column_type_text(table: Table, column_id: int) -> str:
    text = table.column_type(column_id)
    if table.column_nullable(column_id):
        text += "_null"
    return text


class Print(AbstractOperator):
    """Writes its input table to a text stream and passes the table on unchanged."""

    def __init__(self, input_operator: AbstractOperator, out: TextIO | None = None) -> None:
        super().__init__(input_operator)
        self._out = out

    @staticmethod
    def print(table: Table, out: TextIO | None = None) -> None:
        """Write ``table`` to ``out`` (standard output by default)."""
        wrapper = TableWrapper(table)
        wrapper.execute()
        Print(wrapper, out).execute()

    def column_string_widths(self, min_width: int, max_width: int, table: Table) -> list[int]:
        """Return the printed width of every column of ``table``.

        Each width is at least ``min_width`` and fits the column's name; cell
        values widen a column up to ``max_width``.
        """
        widths = [
            max(min_width, len(table.column_name(column_id)))
            for column_id in range(table.column_count())
        ]
        for chunk_id in range(table.chunk_count()):
            chunk = table.get_chunk(chunk_id)
            for column_id in range(chunk.column_count()):
                segment = chunk.get_segment(column_id)
                for row in range(len(chunk)):
                    cell_length = len(_cell_text(segment[row]))
                    widths[column_id] = max(min_width, widths[column_id], min(max_width, cell_length))
        return widths

    def _on_execute(self) -> Table:
        table = self._left_input_table()
        out = sys.stdout if self._out is None else self._out
        widths = self.column_string_widths(8, 20, table)
        column_ids = range(table.column_count())

        out.write("=== Columns\n")
        out.write("".join(f"|{table.column_name(c):>{widths[c]}}" for c in column_ids) + "|\n")
        out.write("".join(f"|{_column_type_text(table, c):>{widths[c]}}" for c in column_ids) + "|\n")

        for chunk_id in range(table.chunk_count()):
            chunk = table.get_chunk(chunk_id)
            out.write(f"=== Chunk {chunk_id} === \n")
            if len(chunk) == 0:
                out.write("Empty chunk.\n")
                continue
            segments = [chunk.get_segment(c) for c in range(chunk.column_count())]
            for row in range(len(chunk)):
                cells = "".join(
                    f"{_cell_text(segment[row]):>{widths[c]}}|" for c, segment in enumerate(segments)
                )
                out.write(f"|{cells}\n")
        return table