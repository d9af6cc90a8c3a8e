"""Sequential scan over every tuple of a table."""

from __future__ import annotations

from typing import Iterator, Optional

from minisql.database import Database
from minisql.records import TransactionId, Tuple


class SeqScan:
    """Reads the tuples of a table in on-disk order."""

    def __init__(self, tid: Optional[TransactionId], table_id: int, table_alias: str) -> None:
        self.tid = tid
        self.table_id = table_id
        self.table_alias = table_alias
        self._it = None

    def open(self) -> None:
        """Start scanning the table."""
        file = Database.get_instance().catalog.db_file(self.table_id)
        self._it = file.iterator(self.tid)
        self._it.open()

    def has_next(self) -> bool:
        """Whether another tuple is available; False when not open."""
        return self._it is not None and self._it.has_next()

    def next(self) -> Optional[Tuple]:
        """The next tuple, or None when the scan is not open."""
        if self._it is None:
            return None
        return self._it.next()

    def rewind(self) -> None:
        """Restart from the first tuple."""
        if self._it is not None:
            self._it.rewind()

    def close(self) -> None:
        """Stop scanning and release the underlying iterator."""
        if self._it is not None:
            self._it.close()
            self._it = None

    def __iter__(self) -> Iterator[Tuple]:
        if self._it is None:
            self.open()
        while self.has_next():
            yield self.next()

    def __enter__(self) -> "SeqScan":
        self.open()
        return self

    def __exit__(self, *args) -> None:
        self.close()