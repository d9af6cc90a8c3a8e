"""Registry of the tables known to the database."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from minisql.schema import TupleDesc


@dataclass(frozen=True)
class DbTable:
    """A table entry: its file, its name and its primary key field."""

    file: Any
    name: str
    pkey_field: str


class Catalog:
    """Maps table ids and names to their files and schemas."""

    def __init__(self) -> None:
        self._tables: dict[int, DbTable] = {}
        self._name_to_id: dict[str, int] = {}

    def add_table(self, file: Any, name: str, pkey_field: str) -> None:
        """Register ``file`` under ``name``; a later table wins a name clash."""
        table_id = file.id()
        self._tables[table_id] = DbTable(file, name, pkey_field)
        self._name_to_id[name] = table_id

    def _table(self, table_id: int) -> DbTable:
        try:
            return self._tables[table_id]
        except KeyError:
            raise KeyError(f"table not found: {table_id}") from None

    def table_id(self, name: str) -> int:
        """Id of the table with the given name."""
        try:
            return self._name_to_id[name]
        except KeyError:
            raise KeyError(f"table not found: {name!r}") from None

    def tuple_desc(self, table_id: int) -> TupleDesc:
        """Schema of the table."""
        return self._table(table_id).file.tuple_desc()

    def db_file(self, table_id: int) -> Any:
        """File holding the table's contents."""
        return self._table(table_id).file

    def primary_key(self, table_id: int) -> str:
        """Name of the table's primary key field."""
        return self._table(table_id).pkey_field

    def table_name(self, table_id: int) -> str:
        """Name of the table."""
        return self._table(table_id).name

    def clear(self) -> None:
        """Remove every table."""
        self._tables.clear()
        self._name_to_id.clear()

    def __contains__(self, table_id: object) -> bool:
        return table_id in self._tables

    def __len__(self) -> int:
        return len(self._tables)