# minisql

A small storage engine that shows how a relational database keeps rows on
disk. It is a library; it has no command line.

## What is in it

- `minisql.schema`: column types `IntType` and `StringType` (with `TypeId`),
  field values `IntField` and `StringField`, and the schema `TupleDesc`
  (`len()`, iteration over `TDItem`s, `field_name()`, `field_type()`,
  `index_of()`, `size()`).
- `minisql.records`: `Tuple` (indexable, `set_field()` / `get_field()`,
  `record_id`), `RecordId`, `HeapPageId`, `TransactionId` and the page size
  `PAGE_SIZE` (4096 bytes).
- `minisql.heappage`: `HeapPage`, a fixed-size page with a slot bitmap header
  followed by fixed-width tuple slots.
- `minisql.catalog`: `Catalog` and `DbTable`, mapping table ids and names to
  their files, schemas and primary-key field names.
- `minisql.bufferpool`: `BufferPool`, a page cache that evicts the least
  recently used page, writing it back to its file first.
- `minisql.database`: `Database`, whose shared instance
  (`Database.get_instance()`) holds a `catalog` and a `buffer_pool` of 100
  pages.
- `minisql.heapfile`: `HeapFile`, a table kept in one file as consecutive
  pages, and `HeapFileIterator`.
- `minisql.seqscan`: `SeqScan`, which reads every row of a catalogued table in
  on-disk order.

## Installation

```
pip install .
```

## Example

```python
from minisql.database import Database
from minisql.heapfile import HeapFile
from minisql.records import TransactionId, Tuple
from minisql.schema import IntField, IntType, TupleDesc
from minisql.seqscan import SeqScan

db = Database.get_instance()
db.catalog.clear()

td = TupleDesc([IntType(), IntType()], ["field1", "field2"])

with HeapFile("example.dat", td) as table:
    db.catalog.add_table(table, "example", "field1")
    tid = TransactionId()

    for i in range(10):
        row = Tuple(td)
        row[0] = IntField(i)
        row[1] = IntField(i * 2)
        table.insert_tuple(tid, row)

    with SeqScan(tid, table.id(), "example") as scan:
        for row in scan:
            print(row)  # "0\t0", "1\t2", ...
```

To remove a row, take it from a scan (so it carries its `record_id`) and pass
it to `HeapFile.delete_tuple`.

A `SeqScan` can also be driven by hand with `open()`, `has_next()`, `next()`,
`rewind()` and `close()`; `HeapFile.iterator(tid)` returns a
`HeapFileIterator` with the same methods.

## Errors

- Unknown table id or name in the `Catalog`: `KeyError`.
- Unknown field name in `TupleDesc.index_of`: `ValueError`.
- Field or slot index out of range, or `next()` past the last row:
  `IndexError`.
- Inserting into a full `HeapPage`: `RuntimeError`.
- A tuple whose schema differs from the page's, or one with an unset field,
  or deleting a tuple that is not on the page: `ValueError`.

## Limitations

- Pages store every column as a 4-byte little-endian integer; `StringType`
  and `StringField` exist in the schema layer but cannot be stored on pages.
- Changes to a page that is held in the buffer pool reach the file only when
  that page is flushed (`BufferPool.flush_page`) or evicted. A row inserted
  into a fresh page is written to the file at once.
- `TransactionId` is accepted but there is no locking, logging or recovery.
- Table ids are handed out per process and are not stored in the file; there
  is no persistent catalog, query language or server.

## Running the tests

```
pip install .[test]
pytest
```