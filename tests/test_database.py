from minisql.bufferpool import BufferPool
from minisql.catalog import Catalog
from minisql.database import DEFAULT_NUM_PAGES, Database
from minisql.heapfile import HeapFile
from minisql.schema import IntType, TupleDesc


def test_get_instance_is_shared(tmp_path):
    td = TupleDesc([IntType()], ["a"])
    file = HeapFile(tmp_path / "shared.dat", td)
    try:
        Database.get_instance().catalog.clear()
        Database.get_instance().catalog.add_table(file, "shared", "a")
        assert Database.get_instance().catalog.table_id("shared") == file.id()
        assert Database.get_instance().catalog.table_name(file.id()) == "shared"
    finally:
        Database.get_instance().catalog.clear()
        file.close()


def test_instance_has_catalog_and_pool():
    db = Database.get_instance()
    assert isinstance(db.catalog, Catalog)
    assert isinstance(db.buffer_pool, BufferPool)
    assert db.buffer_pool.catalog is db.catalog


def test_default_pool_capacity():
    db = Database()
    assert db.buffer_pool.num_pages == 100
    assert DEFAULT_NUM_PAGES == 100


def test_new_database_is_independent():
    db = Database()
    assert db.catalog is not Database.get_instance().catalog
    assert len(db.catalog) == 0
    assert len(db.buffer_pool) == 0