"""Page and record identifiers, transactions and tuples."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Optional

from minisql.schema import Field, TupleDesc

PAGE_SIZE = 4096

_transaction_ids = itertools.count()


@dataclass(frozen=True)
class HeapPageId:
    """Identifies one page of one heap table."""

    table_id: int
    page_number: int


@dataclass(frozen=True)
class RecordId:
    """Identifies one tuple slot on one page of one table."""

    pid: HeapPageId
    tuple_number: int


@dataclass(frozen=True)
class TransactionId:
    """Identifies a transaction."""

    id: int = field(default_factory=lambda: next(_transaction_ids))


class Tuple:
    """A row of field values following a schema."""

    def __init__(self, td: TupleDesc) -> None:
        self.tuple_desc = td
        self.record_id: Optional[RecordId] = None
        self._fields: list[Optional[Field]] = [None] * len(td)

    def _check(self, i: int) -> None:
        if not 0 <= i < len(self._fields):
            raise IndexError("field index out of range")

    def set_field(self, i: int, field: Field) -> None:
        """Replace the value of the i-th field."""
        self._check(i)
        self._fields[i] = field

    def get_field(self, i: int) -> Optional[Field]:
        """The value of the i-th field, or None if it has not been set."""
        self._check(i)
        return self._fields[i]

    def __getitem__(self, i: int) -> Optional[Field]:
        return self.get_field(i)

    def __setitem__(self, i: int, field: Field) -> None:
        self.set_field(i, field)

    def __len__(self) -> int:
        return len(self._fields)

    def __str__(self) -> str:
        return "\t".join("" if f is None else str(f) for f in self._fields)

    def __repr__(self) -> str:
        return f"Tuple({str(self)!r}, record_id={self.record_id!r})"