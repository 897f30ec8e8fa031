import pytest

from tinylibc.heap import ALIGNMENT, Heap


def test_non_positive_sizes_give_none():
    heap = Heap()
    assert heap.malloc(0) is None
    assert heap.malloc(-1) is None


def test_write_read_round_trip():
    heap = Heap()
    ptr = heap.malloc(8)
    heap.write(ptr, b"abcdefgh")
    assert heap.read(ptr, 8) == b"abcdefgh"


def test_size_is_rounded_to_alignment():
    heap = Heap()
    ptr = heap.malloc(1)
    heap.write(ptr, b"x" * ALIGNMENT)
    assert heap.read(ptr, ALIGNMENT) == b"x" * ALIGNMENT
    with pytest.raises(ValueError):
        heap.write(ptr, b"x" * (ALIGNMENT + 1))


def test_distinct_blocks_do_not_overlap():
    heap = Heap()
    a = heap.malloc(16)
    b = heap.malloc(16)
    heap.write(a, b"a" * 16)
    heap.write(b, b"b" * 16)
    assert b - a >= 16
    assert heap.read(a, 16) == b"a" * 16


def test_freed_block_is_reused():
    heap = Heap()
    a = heap.malloc(32)
    heap.malloc(16)
    heap.free(a)
    assert heap.malloc(32) == a


def test_adjacent_free_blocks_are_merged():
    heap = Heap()
    a = heap.malloc(16)
    b = heap.malloc(16)
    heap.malloc(16)
    heap.free(a)
    heap.free(b)
    assert heap.malloc(40) == a


def test_large_free_block_is_split():
    heap = Heap()
    a = heap.malloc(128)
    guard = heap.malloc(16)
    heap.free(a)
    assert heap.malloc(16) == a
    c = heap.malloc(16)
    assert a < c < guard


def test_free_none_leaves_heap_usable():
    heap = Heap()
    heap.free(None)
    ptr = heap.malloc(4)
    heap.write(ptr, b"data")
    assert heap.read(ptr, 4) == b"data"


def test_free_unknown_pointer_raises():
    with pytest.raises(ValueError):
        Heap().free(12345)


def test_double_free_raises():
    heap = Heap()
    ptr = heap.malloc(8)
    heap.free(ptr)
    with pytest.raises(ValueError):
        heap.free(ptr)


def test_realloc_none_allocates():
    heap = Heap()
    ptr = heap.realloc(None, 8)
    heap.write(ptr, b"12345678")
    assert heap.read(ptr, 8) == b"12345678"


def test_realloc_zero_frees():
    heap = Heap()
    ptr = heap.malloc(8)
    assert heap.realloc(ptr, 0) is None
    with pytest.raises(ValueError):
        heap.read(ptr, 1)


def test_realloc_shrink_keeps_pointer_and_data():
    heap = Heap()
    ptr = heap.malloc(128)
    heap.write(ptr, b"keepme")
    assert heap.realloc(ptr, 8) == ptr
    assert heap.read(ptr, 6) == b"keepme"


def test_realloc_grow_moves_and_copies():
    heap = Heap()
    ptr = heap.malloc(16)
    heap.malloc(16)
    heap.write(ptr, b"0123456789abcdef")
    new_ptr = heap.realloc(ptr, 64)
    assert new_ptr != ptr
    assert heap.read(new_ptr, 16) == b"0123456789abcdef"
    with pytest.raises(ValueError):
        heap.read(ptr, 1)


def test_realloc_negative_size_raises():
    heap = Heap()
    ptr = heap.malloc(8)
    with pytest.raises(ValueError):
        heap.realloc(ptr, -1)


def test_limit_makes_malloc_fail():
    heap = Heap(limit=100)
    assert heap.malloc(16) is not None
    assert heap.malloc(4096) is None


def test_read_past_block_raises():
    heap = Heap()
    ptr = heap.malloc(16)
    with pytest.raises(ValueError):
        heap.read(ptr, 17)