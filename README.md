# chunkdb

`chunkdb` is a small in-memory, column-oriented table store. A table is split
horizontally into chunks, and each chunk holds one segment per column. A
segment is one of three kinds:

- a `ValueSegment`, which stores its values uncompressed;
- a `DictionarySegment`, which stores a sorted dictionary of distinct values
  and a compact vector of ids into it;
- a `ReferenceSegment`, which holds positions (`RowID`s) in another table.

Query operators read these tables and produce new ones.

## Installation

```
pip install .
```

To install with the test dependencies:

```
pip install ".[test]"
```

## Column types

Each column has one of these type names: `int`, `long`, `float`, `double` and
`string`. They are listed in `chunkdb.variant.DataType`. Values are converted
to the column's type with `chunkdb.variant.type_cast` when they are appended.
For example, `3.14` appended to an `int` column is stored as `3`, and `4`
appended to a `string` column is stored as `"4"`. A value that cannot be
converted is rejected.

A column can be declared nullable. SQL `NULL` is represented by
`chunkdb.types.NullValue`, and `chunkdb.variant.NULL_VALUE` is a shared
instance of it. Two `NULL`s never compare equal, less or greater. To test
whether a value is `NULL`, use `chunkdb.variant.variant_is_null`.

## Building a table

```python
from chunkdb.table import Table
from chunkdb.types import NullValue

table = Table(2)                       # at most two rows per chunk
table.add_column("id", "int", False)
table.add_column("name", "string", True)

table.append([4, "Hello,"])
table.append([6, "world"])
table.append([3, NullValue()])

table.row_count()     # 3
table.chunk_count()   # 2

table.compress_chunk(0)   # dictionary-encode the first chunk
```

Columns can only be added while the table is still empty. When the last chunk
is full, the next append starts a new chunk. The next append also starts a new
chunk when the last chunk has been compressed. `compress_chunk` turns the
chunk's value segments into dictionary segments, one worker thread per column.

## Registering tables

`StorageManager.get()` returns a process-wide registry of named tables:

```python
from chunkdb.storage_manager import StorageManager

manager = StorageManager.get()
manager.add_table("people", table)
manager.has_table("people")    # True
manager.table_names()          # ["people"]
manager.print()                # name, #columns, #rows, #chunks per table
```

Adding a name that already exists raises `LogicError`. Getting or dropping an
unknown name also raises `LogicError`. `reset()` removes all tables.

## Operators

Each operator is executed once with `execute()`. Its output table is then read
with `get_output()`.

| Operator | Module | Purpose |
| --- | --- | --- |
| `GetTable` | `chunkdb.operators` | Fetches a registered table by name. |
| `TableWrapper` | `chunkdb.operators` | Wraps an existing table as an operator. |
| `TableScan` | `chunkdb.table_scan` | Keeps the rows whose value in one column compares true with a search value. |
| `Print` | `chunkdb.print_operator` | Writes a table as aligned text and passes the table on. |

```python
from chunkdb.operators import GetTable
from chunkdb.table_scan import TableScan
from chunkdb.print_operator import Print
from chunkdb.types import ScanType

source = GetTable("people")
source.execute()

scan = TableScan(source, 0, ScanType.OpGreaterThanEquals, 4)
scan.execute()

result = scan.get_output()   # a table made of reference segments
Print.print(result)          # writes the table to standard output
```

`ScanType` provides `OpEquals`, `OpNotEquals`, `OpLessThan`,
`OpLessThanEquals`, `OpGreaterThan` and `OpGreaterThanEquals`. A scan works on
value segments, on dictionary segments and on reference segments, so scans can
be chained. A scan over reference segments refers back to the original table.
`NULL` cells never match. Scanning with `NULL` as the search value gives an
empty result.

## Errors

A violated precondition raises `chunkdb.utils.LogicError`. Examples are an
unknown column id or name, a missing table, a duplicate column name, and
appending `NULL` or a value that cannot be converted. Reading a segment at an
offset outside its range raises `IndexError`.

## What it does not do

`chunkdb` keeps everything in memory. It has none of the following:

- on-disk storage;
- a way to load tables from files;
- a query language or parser;
- a server;
- a command-line program.

Tables are built and queried only through the Python API described above.