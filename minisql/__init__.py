"""A small storage engine: schemas, slotted heap pages, heap files, a catalog, an LRU buffer pool and sequential scans."""

__version__ = "0.1.0"