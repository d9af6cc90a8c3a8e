"""Heap files: tables stored as a sequence of fixed-size pages on disk."""

from __future__ import annotations

import itertools
import os
from pathlib import Path
from typing import Iterator, Optional, Union

from minisql.database import Database
from minisql.heappage import HeapPage
from minisql.records import PAGE_SIZE, HeapPageId, TransactionId, Tuple
from minisql.schema import TupleDesc

_table_ids = itertools.count(1)


class HeapFileIterator:
    """Walks the tuples of a heap file page by page through the buffer pool."""

    def __init__(self, file: "HeapFile", tid: Optional[TransactionId]) -> None:
        self.file = file
        self.tid = tid
        self._current_page = 0
        self._tuples: list[Tuple] = []
        self._index = 0
        self._open = False

    def open(self) -> None:
        """Start at the first page."""
        self._current_page = 0
        self._open = True
        self._fetch_tuples()

    def _fetch_tuples(self) -> None:
        self._index = 0
        if self._current_page >= self.file.num_pages():
            self._tuples = []
            return
        pid = HeapPageId(self.file.id(), self._current_page)
        page = Database.get_instance().buffer_pool.get_page(pid)
        self._tuples = list(page)

    def has_next(self) -> bool:
        """Whether another tuple is available."""
        if not self._open:
            return False
        if self._index < len(self._tuples):
            return True
        if self._current_page >= self.file.num_pages() - 1:
            return False
        self._current_page += 1
        self._fetch_tuples()
        return self._index < len(self._tuples)

    def next(self) -> Tuple:
        """The next tuple; raises IndexError when there is none."""
        if not self.has_next():
            raise IndexError("no more tuples")
        t = self._tuples[self._index]
        self._index += 1
        return t

    def rewind(self) -> None:
        """Restart from the first tuple."""
        self.close()
        self.open()

    def close(self) -> None:
        """Release the fetched tuples."""
        self._current_page = 0
        self._tuples = []
        self._index = 0
        self._open = False

    def __iter__(self) -> "HeapFileIterator":
        if not self._open:
            self.open()
        return self

    def __next__(self) -> Tuple:
        if not self.has_next():
            raise StopIteration
        return self.next()


class HeapFile:
    """A table stored in one file as consecutive ``PAGE_SIZE`` pages."""

    def __init__(self, path: Union[str, os.PathLike], td: TupleDesc) -> None:
        self.path = Path(path)
        self._td = td
        self._table_id = next(_table_ids)
        try:
            self._f = open(self.path, "r+b")
        except FileNotFoundError:
            self._f = open(self.path, "w+b")

    def id(self) -> int:
        """Unique id of this table."""
        return self._table_id

    def tuple_desc(self) -> TupleDesc:
        """Schema of the tuples in this file."""
        return self._td

    def num_pages(self) -> int:
        """Number of whole pages in the file."""
        self._f.seek(0, os.SEEK_END)
        return self._f.tell() // PAGE_SIZE

    def read_page(self, pid: HeapPageId) -> HeapPage:
        """Read page ``pid`` from disk."""
        if pid.table_id != self.id():
            raise ValueError("page does not belong to this table")
        offset = pid.page_number * PAGE_SIZE
        self._f.seek(0, os.SEEK_END)
        if offset >= self._f.tell():
            raise ValueError("page number out of range")
        self._f.seek(offset)
        data = self._f.read(PAGE_SIZE)
        return HeapPage(pid, self._td, data)

    def write_page(self, page: HeapPage) -> None:
        """Write ``page`` to its place on disk."""
        self._f.seek(page.id.page_number * PAGE_SIZE)
        self._f.write(page.page_data())
        self._f.flush()

    def insert_tuple(self, tid: Optional[TransactionId], t: Tuple) -> list[HeapPage]:
        """Insert ``t`` into the first page with room, or into a new page."""
        pool = Database.get_instance().buffer_pool
        for page_number in range(self.num_pages()):
            page = pool.get_page(HeapPageId(self.id(), page_number))
            if page.num_empty_slots() > 0:
                page.insert_tuple(t)
                return [page]
        pid = HeapPageId(self.id(), self.num_pages())
        new_page = HeapPage(pid, self._td, bytes(PAGE_SIZE))
        new_page.insert_tuple(t)
        self.write_page(new_page)
        return [new_page]

    def delete_tuple(self, tid: Optional[TransactionId], t: Tuple) -> list[HeapPage]:
        """Remove ``t`` from the page its record id points to."""
        if t.record_id is None:
            raise ValueError("tuple has no record id")
        page = Database.get_instance().buffer_pool.get_page(t.record_id.pid)
        page.delete_tuple(t)
        return [page]

    def iterator(self, tid: Optional[TransactionId]) -> HeapFileIterator:
        """A new iterator over every tuple in this file."""
        return HeapFileIterator(self, tid)

    def __iter__(self) -> Iterator[Tuple]:
        return iter(self.iterator(None))

    def close(self) -> None:
        """Close the underlying file."""
        if not self._f.closed:
            self._f.close()

    def __enter__(self) -> "HeapFile":
        return self

    def __exit__(self, *args) -> None:
        self.close()