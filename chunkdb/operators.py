"""Query operators: the common base class, table lookup and table wrapping."""

from __future__ import annotations

from abc import ABC, abstractmethod

from chunkdb.storage_manager import StorageManager
from chunkdb.table import Table
from chunkdb.utils import ensure


class AbstractOperator(ABC):
    """Base class of all operators: up to two input operators and one output table.

    An operator is constructed, then executed once, and then its output may be
    requested by its consumers.
    """

    def __init__(
        self,
        left: AbstractOperator | None = None,
        right: AbstractOperator | None = None,
    ) -> None:
        self._left_input = left
        self._right_input = right
        self._output: Table | None = None
        self._was_executed = False

    def execute(self) -> None:
        """Run the operator and keep its output table."""
        output = self._on_execute()
        ensure(output is not None, "No output Table was returned after operator execution.")
        self._output = output
        self._was_executed = True

    def get_output(self) -> Table:
        """Return the output table; the operator must have been executed."""
        ensure(self._was_executed, "Output of Operator requested, that was not yet executed.")
        return self._output

    def left_input(self) -> AbstractOperator | None:
        """Return the left input operator, if any."""
        return self._left_input

    def right_input(self) -> AbstractOperator | None:
        """Return the right input operator, if any."""
        return self._right_input

    @abstractmethod
    def _on_execute(self) -> Table | None:
        """Compute and return the output table."""

    def _left_input_table(self) -> Table:
        ensure(self._left_input is not None, "Operator has no left input.")
        return self._left_input.get_output()

    def _right_input_table(self) -> Table:
        ensure(self._right_input is not None, "Operator has no right input.")
        return self._right_input.get_output()


class GetTable(AbstractOperator):
    """Operator that retrieves a table from the storage manager by name."""

    def __init__(self, name: str) -> None:
        super().__init__()
        self._table_name = name

    def table_name(self) -> str:
        """Return the name of the table to retrieve."""
        return self._table_name

    def _on_execute(self) -> Table:
        storage_manager = StorageManager.get()
        ensure(
            storage_manager.has_table(self._table_name),
            f"Table {self._table_name} does not exist",
        )
        return storage_manager.get_table(self._table_name)


class TableWrapper(AbstractOperator):
    """Operator whose output is a given table."""

    def __init__(self, table: Table) -> None:
        super().__init__()
        self._table = table

    def _on_execute(self) -> Table:
        return self._table