import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from algolabs.sorting import (
    PivotStrategy,
    bubble_sort,
    full_insertion_sort,
    heap_sort,
    is_sorted,
    merge_sort,
    optimized_quicksort,
    parallel_quicksort,
    quicksort_with_gathering,
    selection_sort,
    simple_quicksort,
    strategy_name,
    write_sorted,
)

int_lists = st.lists(st.integers(min_value=-1000, max_value=1000), max_size=120)


@given(data=int_lists)
@settings(max_examples=60)
def test_simple_sorts_match_sorted(data):
    expected = sorted(data)

    values = list(data)
    simple_quicksort(values)
    assert values == expected

    values = list(data)
    merge_sort(values)
    assert values == expected

    values = list(data)
    heap_sort(values)
    assert values == expected

    values = list(data)
    bubble_sort(values)
    assert values == expected

    values = list(data)
    selection_sort(values)
    assert values == expected

    values = list(data)
    full_insertion_sort(values)
    assert values == expected


@pytest.mark.parametrize("strategy", list(PivotStrategy))
@pytest.mark.parametrize("threshold", [0, 1, 10, 50])
@given(data=int_lists)
@settings(max_examples=30)
def test_optimized_quicksort(strategy, threshold, data):
    values = list(data)
    optimized_quicksort(values, strategy, threshold)
    assert values == sorted(data)


@pytest.mark.parametrize("strategy", list(PivotStrategy))
@pytest.mark.parametrize("threshold", [0, 1, 10, 500])
@given(data=int_lists)
@settings(max_examples=30)
def test_quicksort_with_gathering(strategy, threshold, data):
    values = list(data)
    quicksort_with_gathering(values, strategy, threshold)
    assert values == sorted(data)


@pytest.mark.parametrize("strategy", list(PivotStrategy))
@pytest.mark.parametrize("threshold", [1, 4, 32, 2048])
@given(data=int_lists)
@settings(max_examples=20, deadline=None)
def test_parallel_quicksort(strategy, threshold, data):
    values = list(data)
    parallel_quicksort(values, strategy, threshold)
    assert values == sorted(data)


def test_default_arguments_sort():
    data = [5, -3, 9, 0, 0, 7, -3, 12, 1] * 40
    for sorter in (optimized_quicksort, quicksort_with_gathering, parallel_quicksort):
        values = list(data)
        sorter(values)
        assert values == sorted(data)


def test_large_already_sorted_input_with_fixed_pivot():
    data = list(range(5000))
    values = list(reversed(data))
    simple_quicksort(values)
    assert values == data
    values = list(reversed(data))
    parallel_quicksort(values, PivotStrategy.FIXED, 8)
    assert values == data


def test_empty_and_single():
    empty = []
    simple_quicksort(empty)
    assert empty == []
    single = [42]
    simple_quicksort(single)
    assert single == [42]

    empty = []
    merge_sort(empty)
    assert empty == []
    single = [42]
    merge_sort(single)
    assert single == [42]

    empty = []
    heap_sort(empty)
    assert empty == []
    single = [42]
    heap_sort(single)
    assert single == [42]

    empty = []
    bubble_sort(empty)
    assert empty == []
    single = [42]
    bubble_sort(single)
    assert single == [42]

    empty = []
    selection_sort(empty)
    assert empty == []
    single = [42]
    selection_sort(single)
    assert single == [42]

    empty = []
    full_insertion_sort(empty)
    assert empty == []
    single = [42]
    full_insertion_sort(single)
    assert single == [42]


def test_is_sorted():
    assert is_sorted([])
    assert is_sorted([1])
    assert is_sorted([1, 1, 2, 3])
    assert not is_sorted([2, 1])
    assert not is_sorted([1, 3, 2, 4])


@given(data=int_lists)
def test_is_sorted_agrees_with_sorted(data):
    assert is_sorted(sorted(data))
    assert is_sorted(data) == (data == sorted(data))


def test_strategy_names():
    assert strategy_name(PivotStrategy.FIXED) == "固定基准"
    assert strategy_name(PivotStrategy.RANDOM) == "随机基准"
    assert strategy_name(PivotStrategy.MEDIAN_OF_THREE) == "三数取中"


def test_write_sorted(tmp_path):
    path = tmp_path / "out.txt"
    write_sorted([1, 2, 3], path)
    assert path.read_text(encoding="utf-8") == "1 2 3\n"


def test_write_sorted_empty(tmp_path):
    path = tmp_path / "out.txt"
    write_sorted([], path)
    assert path.read_text(encoding="utf-8") == "\n"


def test_write_sorted_missing_directory(tmp_path):
    with pytest.raises(OSError):
        write_sorted([1], tmp_path / "missing" / "out.txt")