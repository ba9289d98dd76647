import pytest

from pushswap.ordering import binary_search, insertion_sort, is_sorted
from pushswap.stack import Stack


def test_is_sorted_top_smallest():
    # bottom to top, non-increasing: smallest on top
    assert is_sorted(Stack([5, 4, 3, 2, 1])) is True


def test_is_sorted_rejects_increase():
    assert is_sorted(Stack([1, 2, 3])) is False
    assert is_sorted(Stack([5, 4, 6, 1])) is False


@pytest.mark.parametrize("values", [[], [42]])
def test_is_sorted_trivial(values):
    assert is_sorted(Stack(values)) is True


def test_is_sorted_accepts_plain_list():
    assert is_sorted([3, 2, 1]) is True


@pytest.mark.parametrize("n", [-7, 0, 3, 11, 20])
def test_binary_search_finds_present(n):
    data = [-7, 0, 3, 11, 20]
    assert binary_search(n, data) is True


@pytest.mark.parametrize("n", [-8, 1, 12, 21])
def test_binary_search_misses_absent(n):
    assert binary_search(n, [-7, 0, 3, 11, 20]) is False


def test_binary_search_empty():
    assert binary_search(1, []) is False


def test_insertion_sort_matches_sorted():
    values = [9, -3, 4, 4, 0, 17, -20]
    assert insertion_sort(values) == sorted(values)


def test_insertion_sort_leaves_input_untouched():
    values = [3, 1, 2]
    insertion_sort(values)
    assert values == [3, 1, 2]


def test_insertion_sort_empty():
    assert insertion_sort([]) == []


def test_insertion_sort_result_is_searchable():
    values = [50, 10, 40, 30]
    ordered = insertion_sort(values)
    assert all(binary_search(v, ordered) for v in values)
    assert is_sorted(list(reversed(ordered)))