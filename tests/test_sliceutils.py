import pytest

from cyberkit.sliceutils import IndexedSlice, OrderedHeap, ReverseHeap

LESS_TABLE = [
    [False, False, True, False],
    [True, False, True, False],
    [False, False, False, False],
    [True, False, True, False],
]


def test_new_indexed_slice():
    values = [7, 8, 9]
    s = IndexedSlice(values)
    assert s.slice == values
    assert s.indices == [0, 1, 2]


@pytest.mark.parametrize(
    "values, length",
    [([], 0), ([42], 1), ([8, 9], 2), ([1, 3, 5], 3)],
)
def test_indexed_slice_len(values, length):
    assert len(IndexedSlice(values)) == length


def test_indexed_slice_less():
    s = IndexedSlice([5, 1, 9, 1])
    for i, row in enumerate(LESS_TABLE):
        for j, want in enumerate(row):
            assert s.less(i, j) is want, (i, j)


def test_indexed_slice_swap():
    s = IndexedSlice([7, 8, 9])
    swaps = [
        (0, 1, [8, 7, 9], [1, 0, 2]),
        (0, 2, [9, 7, 8], [2, 0, 1]),
        (1, 2, [9, 8, 7], [2, 1, 0]),
        (2, 0, [7, 8, 9], [0, 1, 2]),
        (1, 1, [7, 8, 9], [0, 1, 2]),
    ]
    for i, j, want_slice, want_indices in swaps:
        s.swap(i, j)
        assert s.slice == want_slice
        assert s.indices == want_indices


def test_indexed_slice_sort_reverse_tracks_indices():
    s = IndexedSlice([3, 1, 2])
    s.sort(reverse=True)
    assert s.slice == [3, 2, 1]
    assert s.indices == [0, 2, 1]


def test_indexed_slice_sort_is_stable():
    s = IndexedSlice([1, 5, 1, 5])
    s.sort(reverse=True)
    assert s.slice == [5, 5, 1, 1]
    assert s.indices == [1, 3, 0, 2]
    s = IndexedSlice([1, 5, 1, 5])
    s.sort()
    assert s.indices == [0, 2, 1, 3]


@pytest.mark.parametrize(
    "values, length",
    [([], 0), ([42], 1), ([8, 9], 2), ([1, 3, 5], 3)],
)
def test_ordered_heap_len(values, length):
    assert len(OrderedHeap(values)) == length


def test_ordered_heap_less():
    h = OrderedHeap([5, 1, 9, 1])
    for i, row in enumerate(LESS_TABLE):
        for j, want in enumerate(row):
            assert h.less(i, j) is want, (i, j)


def test_ordered_heap_swap():
    h = OrderedHeap([0, 1, 2])
    swaps = [
        (0, 1, [1, 0, 2]),
        (0, 2, [2, 0, 1]),
        (1, 2, [2, 1, 0]),
        (2, 0, [0, 1, 2]),
        (1, 1, [0, 1, 2]),
    ]
    for i, j, want in swaps:
        h.swap(i, j)
        assert list(h) == want


def test_ordered_heap_push():
    h = OrderedHeap()
    for x, want in [(1, [1]), (3, [1, 3]), (5, [1, 3, 5]), (7, [1, 3, 5, 7])]:
        h.push(x)
        assert list(h) == want


def test_ordered_heap_pop():
    h = OrderedHeap([1, 3, 5])
    for x, rest in [(5, [1, 3]), (3, [1]), (1, [])]:
        assert h.pop() == x
        assert list(h) == rest


def test_ordered_heap_pop_empty_raises():
    with pytest.raises(IndexError):
        OrderedHeap().pop()


class _LessOnlyHeap:
    def __init__(self, values):
        self.values = values

    def less(self, i, j):
        return self.values[i] < self.values[j]


def test_reverse_heap_less():
    h = ReverseHeap(_LessOnlyHeap([5, 1, 9, 1]))
    table = [
        [False, True, False, True],
        [False, False, False, False],
        [True, True, False, True],
        [False, False, False, False],
    ]
    for i, row in enumerate(table):
        for j, want in enumerate(row):
            assert h.less(i, j) is want, (i, j)


def test_reverse_heap_delegates_storage():
    inner = OrderedHeap([1, 3])
    h = ReverseHeap(inner)
    h.push(5)
    assert len(h) == 3
    h.swap(0, 2)
    assert list(inner) == [5, 3, 1]
    assert h.pop() == 1
    assert list(inner) == [5, 3]