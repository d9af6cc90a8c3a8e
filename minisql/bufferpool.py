"""A fixed-capacity page cache with least-recently-used eviction."""

from __future__ import annotations

from collections import OrderedDict
from typing import Any

from minisql.catalog import Catalog
from minisql.records import HeapPageId


class BufferPool:
    """Caches pages read from the table files registered in a catalog.

    Pages are kept in least-recently-used order; when the pool is full the
    least recently used page is written back to its file and dropped.
    """

    def __init__(self, num_pages: int, catalog: Catalog) -> None:
        self.num_pages = num_pages
        self.catalog = catalog
        # Oldest first, most recently used last.
        self._pages: OrderedDict[HeapPageId, Any] = OrderedDict()

    def get_page(self, pid: HeapPageId) -> Any:
        """Return the page ``pid``, reading it from its file if not cached."""
        if pid in self._pages:
            self._pages.move_to_end(pid)
            return self._pages[pid]
        if len(self._pages) >= self.num_pages:
            self.evict_page()
        page = self.catalog.db_file(pid.table_id).read_page(pid)
        self._pages[pid] = page
        return page

    def flush_page(self, pid: HeapPageId) -> None:
        """Write the cached page ``pid`` back to its file, if it is cached."""
        page = self._pages.get(pid)
        if page is not None:
            self.catalog.db_file(pid.table_id).write_page(page)

    def evict_page(self) -> None:
        """Flush and drop the least recently used page; no-op when empty."""
        if not self._pages:
            return
        pid = next(iter(self._pages))
        self.flush_page(pid)
        del self._pages[pid]

    def __len__(self) -> int:
        return len(self._pages)

    def __contains__(self, pid: object) -> bool:
        return pid in self._pages