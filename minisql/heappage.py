"""Fixed-size heap pages holding a slot bitmap followed by tuple slots."""

from __future__ import annotations

import struct
from typing import Iterator, Optional

from minisql.records import PAGE_SIZE, HeapPageId, RecordId, Tuple
from minisql.schema import IntField, TupleDesc

_INT = struct.Struct("<i")


class HeapPage:
    """One page of a heap file.

    The page starts with a header bitmap, one bit per slot (slot ``i`` is bit
    ``i % 8`` of byte ``i // 8``), followed by the tuple slots. Every column
    is stored as a 4-byte integer.
    """

    def __init__(self, pid: HeapPageId, td: TupleDesc, data: Optional[bytes] = None) -> None:
        raw = bytes(data) if data is not None else b""
        if len(raw) > PAGE_SIZE:
            raise ValueError(f"page data exceeds {PAGE_SIZE} bytes")
        self.pid = pid
        self.td = td
        self._data = bytearray(raw.ljust(PAGE_SIZE, b"\0"))
        tuple_size = td.size()
        self._num_slots = 0 if tuple_size == 0 else (PAGE_SIZE * 8) // (tuple_size * 8 + 1)
        self._header = bytearray(self._data[: self.header_size()])

    @property
    def id(self) -> HeapPageId:
        """The identifier of this page."""
        return self.pid

    def page_data(self) -> bytes:
        """The page serialized as ``PAGE_SIZE`` bytes, header included."""
        self._data[: len(self._header)] = self._header
        return bytes(self._data)

    def num_slots(self) -> int:
        """Number of tuple slots on this page."""
        return self._num_slots

    def header_size(self) -> int:
        """Size in bytes of the slot bitmap."""
        return (self._num_slots + 7) // 8

    def num_tuples(self) -> int:
        """Number of slots in use."""
        return sum(1 for i in range(self._num_slots) if self.is_slot_used(i))

    def num_empty_slots(self) -> int:
        """Number of free slots."""
        return self._num_slots - self.num_tuples()

    def _check_slot(self, i: int) -> None:
        if not 0 <= i < self._num_slots:
            raise IndexError("slot index out of range")

    def is_slot_used(self, i: int) -> bool:
        """Whether slot ``i`` holds a tuple."""
        self._check_slot(i)
        return bool((self._header[i // 8] >> (i % 8)) & 1)

    def set_slot_used(self, i: int, value: bool) -> None:
        """Mark slot ``i`` as used or free."""
        self._check_slot(i)
        mask = 1 << (i % 8)
        if value:
            self._header[i // 8] |= mask
        else:
            self._header[i // 8] &= ~mask & 0xFF

    def _slot_offset(self, i: int) -> int:
        return self.header_size() + i * self.td.size()

    def _read_tuple(self, slot: int) -> Tuple:
        t = Tuple(self.td)
        offset = self._slot_offset(slot)
        for j in range(len(self.td)):
            (value,) = _INT.unpack_from(self._data, offset + j * 4)
            t.set_field(j, IntField(value))
        t.record_id = RecordId(self.pid, slot)
        return t

    def __iter__(self) -> Iterator[Tuple]:
        for slot in range(self._num_slots):
            if self.is_slot_used(slot):
                yield self._read_tuple(slot)

    def insert_tuple(self, t: Tuple) -> None:
        """Store ``t`` in the first free slot and set its record id."""
        if self.num_empty_slots() == 0:
            raise RuntimeError("page is full")
        if t.tuple_desc != self.td:
            raise ValueError("tuple schema does not match page schema")
        slot = next(i for i in range(self._num_slots) if not self.is_slot_used(i))
        values = []
        for j in range(len(self.td)):
            field = t.get_field(j)
            if field is None:
                raise ValueError(f"field {j} is not set")
            values.append(field.value)
        self.set_slot_used(slot, True)
        offset = self._slot_offset(slot)
        for j, value in enumerate(values):
            _INT.pack_into(self._data, offset + j * 4, value)
        t.record_id = RecordId(self.pid, slot)

    def delete_tuple(self, t: Tuple) -> None:
        """Free the slot that ``t``'s record id points to."""
        rid = t.record_id
        if rid is None or rid.pid.table_id != self.pid.table_id or rid.pid.page_number != self.pid.page_number:
            raise ValueError("tuple does not belong to this page")
        if not self.is_slot_used(rid.tuple_number):
            raise ValueError("tuple is not on this page")
        self.set_slot_used(rid.tuple_number, False)

    def __repr__(self) -> str:
        return f"HeapPage({self.pid!r}, tuples={self.num_tuples()})"