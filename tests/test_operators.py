import pytest

from chunkdb.operators import AbstractOperator, GetTable, TableWrapper
from chunkdb.storage_manager import StorageManager
from chunkdb.table import Table
from chunkdb.utils import LogicError


@pytest.fixture(autouse=True)
def clean_storage():
    StorageManager.get().reset()
    yield
    StorageManager.get().reset()


@pytest.fixture
def stored_table():
    table = Table(2)
    StorageManager.get().add_table("TableA", table)
    return table


class _NoOutput(AbstractOperator):
    def _on_execute(self):
        return None


def test_get_output(stored_table):
    operator = GetTable("TableA")
    operator.execute()
    assert operator.get_output() is stored_table


def test_get_table_name(stored_table):
    operator = GetTable("TableA")
    assert operator.table_name() == "TableA"
    operator.execute()
    assert operator.table_name() == "TableA"


def test_throws_unknown_table_name(stored_table):
    operator = GetTable("TableB")
    with pytest.raises(LogicError):
        operator.execute()


def test_output_before_execute_raises(stored_table):
    operator = GetTable("TableA")
    with pytest.raises(LogicError):
        operator.get_output()


def test_table_wrapper_returns_table():
    table = Table(3)
    wrapper = TableWrapper(table)
    wrapper.execute()
    assert wrapper.get_output() is table


def test_execute_without_output_raises():
    source = TableWrapper(Table())
    operator = _NoOutput(source)
    with pytest.raises(LogicError):
        operator.execute()
    with pytest.raises(LogicError):
        operator.get_output()
    assert operator.left_input() is source


def test_inputs():
    left = TableWrapper(Table())
    right = TableWrapper(Table())
    operator = _NoOutput(left, right)
    assert operator.left_input() is left
    assert operator.right_input() is right
    assert TableWrapper(Table()).left_input() is None