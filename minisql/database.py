"""The process-wide database: its catalog and its buffer pool."""

from __future__ import annotations

from typing import ClassVar, Optional

from minisql.bufferpool import BufferPool
from minisql.catalog import Catalog

DEFAULT_NUM_PAGES = 100


class Database:
    """Holds the catalog and buffer pool shared by every table."""

    _instance: ClassVar[Optional["Database"]] = None

    def __init__(self) -> None:
        self.catalog = Catalog()
        self.buffer_pool = BufferPool(DEFAULT_NUM_PAGES, self.catalog)

    @classmethod
    def get_instance(cls) -> "Database":
        """The shared database, created on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance