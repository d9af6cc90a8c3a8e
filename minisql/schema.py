"""Column types, field values and tuple schemas."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Sequence


class TypeId(Enum):
    """Kinds of column type."""

    INT_TYPE = 0
    STRING_TYPE = 1


class Type(ABC):
    """A column type with a fixed on-page width."""

    def __init__(self, type_id: TypeId) -> None:
        self.type_id = type_id

    @abstractmethod
    def size(self) -> int:
        """Number of bytes a value of this type occupies."""

    @abstractmethod
    def __str__(self) -> str:
        """Printable name of the type."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Type):
            return NotImplemented
        return self.type_id == other.type_id and self.size() == other.size()

    def __hash__(self) -> int:
        return hash((self.type_id, self.size()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}<{self}>"


class IntType(Type):
    """A 4-byte integer type."""

    def __init__(self) -> None:
        super().__init__(TypeId.INT_TYPE)

    def size(self) -> int:
        return 4

    def __str__(self) -> str:
        return "INT"


class StringType(Type):
    """A fixed-length string type."""

    def __init__(self, length: int) -> None:
        super().__init__(TypeId.STRING_TYPE)
        self.length = length

    def size(self) -> int:
        return self.length

    def __str__(self) -> str:
        return f"STRING({self.length})"


class Field(ABC):
    """A value stored in one column of a tuple."""

    @abstractmethod
    def type(self) -> Type:
        """The type of this value."""

    @abstractmethod
    def __str__(self) -> str:
        """Printable form of this value."""


@dataclass(frozen=True)
class IntField(Field):
    """An integer value."""

    value: int

    def type(self) -> Type:
        return IntType()

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class StringField(Field):
    """A string value."""

    value: str

    def type(self) -> Type:
        return StringType(len(self.value))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class TDItem:
    """One column of a schema: its type and its name."""

    field_type: Type
    field_name: str


class TupleDesc:
    """The schema of a tuple: an ordered list of typed, named columns."""

    def __init__(self, types: Sequence[Type], names: Sequence[str]) -> None:
        if len(types) != len(names):
            raise ValueError("types and names must have the same length")
        self._items = tuple(TDItem(t, n) for t, n in zip(types, names))

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[TDItem]:
        return iter(self._items)

    def _item(self, i: int) -> TDItem:
        if not 0 <= i < len(self._items):
            raise IndexError("field index out of range")
        return self._items[i]

    def field_name(self, i: int) -> str:
        """Name of the i-th column."""
        return self._item(i).field_name

    def field_type(self, i: int) -> Type:
        """Type of the i-th column."""
        return self._item(i).field_type

    def index_of(self, name: str) -> int:
        """Index of the first column with the given name."""
        for index, item in enumerate(self._items):
            if item.field_name == name:
                return index
        raise ValueError(f"field name not found: {name!r}")

    def size(self) -> int:
        """Size in bytes of a tuple with this schema."""
        return sum(item.field_type.size() for item in self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TupleDesc):
            return NotImplemented
        if len(self) != len(other):
            return False
        return all(
            mine.field_type.type_id == theirs.field_type.type_id
            for mine, theirs in zip(self._items, other._items)
        )

    def __hash__(self) -> int:
        return hash(tuple(item.field_type.type_id for item in self._items))

    def __str__(self) -> str:
        return ", ".join(f"{item.field_type}({item.field_name})" for item in self._items)

    def __repr__(self) -> str:
        return f"TupleDesc({self})"