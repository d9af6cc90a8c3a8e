import pytest

from minisql.database import Database
from minisql.heapfile import HeapFile
from minisql.heappage import HeapPage
from minisql.records import HeapPageId, TransactionId, Tuple
from minisql.schema import IntField, IntType, TupleDesc


@pytest.fixture
def td():
    return TupleDesc([IntType(), IntType()], ["field1", "field2"])


@pytest.fixture
def heap(tmp_path, td):
    db = Database.get_instance()
    db.catalog.clear()
    file = HeapFile(tmp_path / "test.dat", td)
    db.catalog.add_table(file, "test_table", "field1")
    yield file
    while len(db.buffer_pool):
        db.buffer_pool.evict_page()
    file.close()
    db.catalog.clear()


def _row(td, a, b):
    t = Tuple(td)
    t.set_field(0, IntField(a))
    t.set_field(1, IntField(b))
    return t


def _insert_ten(heap, td, tid):
    for i in range(10):
        heap.insert_tuple(tid, _row(td, i, i * 2))


def test_insert_and_scan(heap, td):
    tid = TransactionId()
    _insert_ten(heap, td, tid)
    it = heap.iterator(tid)
    it.open()
    count = 0
    while it.has_next():
        t = it.next()
        assert t.get_field(0).value == count
        assert t.get_field(1).value == count * 2
        count += 1
    it.close()
    assert count == 10


def test_delete(heap, td):
    tid = TransactionId()
    _insert_ten(heap, td, tid)
    victim = _row(td, 5, 10)
    victim.record_id = next(t.record_id for t in heap.iterator(tid) if t[0].value == 5)
    heap.delete_tuple(tid, victim)
    values = [t[0].value for t in heap.iterator(tid)]
    assert len(values) == 9
    assert 5 not in values


def test_new_file_is_empty(heap, tmp_path):
    assert heap.num_pages() == 0
    assert (tmp_path / "test.dat").exists()
    assert list(heap.iterator(None)) == []


def test_insert_sets_record_id(heap, td):
    t = _row(td, 1, 2)
    pages = heap.insert_tuple(None, t)
    assert len(pages) == 1
    assert t.record_id.pid == HeapPageId(heap.id(), 0)
    assert t.record_id.tuple_number == 0
    assert heap.num_pages() == 1


def test_overflow_creates_second_page(heap, td):
    capacity = HeapPage(HeapPageId(heap.id(), 0), td).num_slots()
    for i in range(capacity + 1):
        heap.insert_tuple(None, _row(td, i, -i))
    assert heap.num_pages() == 2
    values = [t[0].value for t in heap.iterator(None)]
    assert values == list(range(capacity + 1))


def test_read_page_wrong_table(heap, td):
    heap.insert_tuple(None, _row(td, 1, 2))
    with pytest.raises(ValueError):
        heap.read_page(HeapPageId(heap.id() + 1000, 0))


def test_read_page_out_of_range(heap):
    with pytest.raises(ValueError):
        heap.read_page(HeapPageId(heap.id(), 0))


def test_delete_without_record_id(heap, td):
    with pytest.raises(ValueError):
        heap.delete_tuple(None, _row(td, 1, 2))


def test_next_past_end_raises(heap, td):
    heap.insert_tuple(None, _row(td, 3, 4))
    it = heap.iterator(None)
    it.open()
    assert it.next()[0].value == 3
    assert it.has_next() is False
    with pytest.raises(IndexError):
        it.next()


def test_has_next_before_open(heap, td):
    heap.insert_tuple(None, _row(td, 3, 4))
    it = heap.iterator(None)
    assert it.has_next() is False


def test_rewind_restarts(heap, td):
    _insert_ten(heap, td, None)
    it = heap.iterator(None)
    it.open()
    first = [it.next()[0].value for _ in range(3)]
    it.rewind()
    assert [it.next()[0].value for _ in range(3)] == first == [0, 1, 2]


def test_pages_persist_after_flush(heap, td, tmp_path):
    _insert_ten(heap, td, None)
    pool = Database.get_instance().buffer_pool
    pool.flush_page(HeapPageId(heap.id(), 0))
    with HeapFile(tmp_path / "test.dat", td) as reopened:
        page = reopened.read_page(HeapPageId(reopened.id(), 0))
        assert page.num_tuples() == 10
        assert [t[1].value for t in page] == [i * 2 for i in range(10)]


def test_context_manager_closes(tmp_path, td):
    with HeapFile(tmp_path / "other.dat", td) as file:
        assert file.num_pages() == 0
    with pytest.raises(ValueError):
        file.num_pages()


def test_ids_are_unique(tmp_path, td):
    with HeapFile(tmp_path / "a.dat", td) as a, HeapFile(tmp_path / "b.dat", td) as b:
        assert a.id() != b.id()
        assert a.tuple_desc() is td