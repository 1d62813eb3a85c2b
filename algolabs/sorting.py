"""In-place sorting algorithms over lists of integers, with pivot strategies."""

from __future__ import annotations

import enum
import math
import os
import random
import threading
from itertools import pairwise
from pathlib import Path
from typing import Iterable, MutableSequence


class PivotStrategy(enum.Enum):
    """How quicksort chooses its pivot."""

    FIXED = "fixed"
    RANDOM = "random"
    MEDIAN_OF_THREE = "median_of_three"


_STRATEGY_NAMES = {
    PivotStrategy.FIXED: "固定基准",
    PivotStrategy.RANDOM: "随机基准",
    PivotStrategy.MEDIAN_OF_THREE: "三数取中",
}


def strategy_name(strategy: PivotStrategy) -> str:
    """Return the display name of a pivot strategy."""
    return _STRATEGY_NAMES.get(strategy, "未知策略")


def is_sorted(values: Iterable[int]) -> bool:
    """Return True when the values are in non-decreasing order."""
    return all(a <= b for a, b in pairwise(values))


def write_sorted(values: Iterable[int], filename: str | os.PathLike = "sorted.txt") -> None:
    """Write the values space-separated on one line to a file."""
    text = " ".join(str(v) for v in values) + "\n"
    Path(filename).write_text(text, encoding="utf-8")


# ---------- helpers shared by the quicksort variants ----------


def _insertion_sort(values: MutableSequence[int], left: int, right: int) -> None:
    for i in range(left + 1, right + 1):
        key = values[i]
        j = i - 1
        while j >= left and values[j] > key:
            values[j + 1] = values[j]
            j -= 1
        values[j + 1] = key


def _simple_partition(values: MutableSequence[int], left: int, right: int) -> int:
    pivot = values[right]
    i = left - 1
    for j in range(left, right):
        if values[j] <= pivot:
            i += 1
            values[i], values[j] = values[j], values[i]
    values[i + 1], values[right] = values[right], values[i + 1]
    return i + 1


def _choose_pivot(
    values: MutableSequence[int], left: int, right: int, strategy: PivotStrategy
) -> int:
    if strategy is PivotStrategy.FIXED:
        return right
    if strategy is PivotStrategy.RANDOM:
        return random.randint(left, right)
    mid = left + (right - left) // 2
    if values[left] > values[mid]:
        values[left], values[mid] = values[mid], values[left]
    if values[left] > values[right]:
        values[left], values[right] = values[right], values[left]
    if values[mid] > values[right]:
        values[mid], values[right] = values[right], values[mid]
    return mid


def _three_way_partition(
    values: MutableSequence[int], left: int, right: int, pivot_index: int
) -> tuple[int, int]:
    """Partition into <pivot, ==pivot, >pivot; return the bounds of the middle."""
    values[pivot_index], values[right] = values[right], values[pivot_index]
    pivot = values[right]
    lt, gt, i = left, right, left
    while i <= gt:
        if values[i] < pivot:
            values[lt], values[i] = values[i], values[lt]
            lt += 1
            i += 1
        elif values[i] > pivot:
            values[i], values[gt] = values[gt], values[i]
            gt -= 1
        else:
            i += 1
    return lt, gt


def _sort_ranges(
    values: MutableSequence[int],
    left: int,
    right: int,
    strategy: PivotStrategy,
    threshold: int,
    *,
    finish_small: bool,
) -> None:
    """Iterative three-way quicksort; short ranges are insertion-sorted or left."""
    limit = max(threshold, 1)
    stack = [(left, right)]
    while stack:
        left, right = stack.pop()
        while right - left + 1 > limit:
            pivot_index = _choose_pivot(values, left, right, strategy)
            lt, gt = _three_way_partition(values, left, right, pivot_index)
            if lt - left < right - gt:
                if gt + 1 < right:
                    stack.append((gt + 1, right))
                right = lt - 1
            else:
                if left < lt - 1:
                    stack.append((left, lt - 1))
                left = gt + 1
        if finish_small and left < right:
            _insertion_sort(values, left, right)


# ---------- quicksort variants ----------


def simple_quicksort(values: MutableSequence[int]) -> None:
    """Lomuto quicksort with the last element as pivot."""
    stack = [(0, len(values) - 1)]
    while stack:
        left, right = stack.pop()
        if left >= right:
            continue
        p = _simple_partition(values, left, right)
        stack.append((left, p - 1))
        stack.append((p + 1, right))


def optimized_quicksort(
    values: MutableSequence[int],
    strategy: PivotStrategy = PivotStrategy.MEDIAN_OF_THREE,
    threshold: int = 10,
) -> None:
    """Three-way quicksort; ranges of at most max(threshold, 16) get insertion sort."""
    if len(values) <= 1:
        return
    threshold = max(threshold, 16)
    _sort_ranges(values, 0, len(values) - 1, strategy, threshold, finish_small=True)


def quicksort_with_gathering(
    values: MutableSequence[int],
    strategy: PivotStrategy = PivotStrategy.MEDIAN_OF_THREE,
    threshold: int = 10,
) -> None:
    """Three-way (gathering) quicksort followed by a final insertion pass."""
    n = len(values)
    if n <= 1:
        return
    if n <= threshold:
        _insertion_sort(values, 0, n - 1)
        return
    _sort_ranges(values, 0, n - 1, strategy, threshold, finish_small=True)
    _insertion_sort(values, 0, n - 1)


def _max_parallel_depth() -> int:
    concurrency = os.cpu_count() or 4
    return max(2, int(math.log2(concurrency)))


def _parallel_range(
    values: MutableSequence[int],
    left: int,
    right: int,
    strategy: PivotStrategy,
    threshold: int,
    depth: int,
    max_depth: int,
) -> None:
    if left >= right or right - left + 1 <= threshold:
        return
    if depth >= max_depth:
        _sort_ranges(values, left, right, strategy, threshold, finish_small=False)
        return

    pivot_index = _choose_pivot(values, left, right, strategy)
    lt, gt = _three_way_partition(values, left, right, pivot_index)

    worker = None
    if left < lt - 1:
        worker = threading.Thread(
            target=_parallel_range,
            args=(values, left, lt - 1, strategy, threshold, depth + 1, max_depth),
        )
        worker.start()
    if gt + 1 < right:
        _parallel_range(values, gt + 1, right, strategy, threshold, depth + 1, max_depth)
    if worker is not None:
        worker.join()


def parallel_quicksort(
    values: MutableSequence[int],
    strategy: PivotStrategy = PivotStrategy.MEDIAN_OF_THREE,
    threshold: int = 2048,
) -> None:
    """Multithreaded three-way quicksort finished by one insertion pass."""
    n = len(values)
    if n <= 1:
        return
    _parallel_range(values, 0, n - 1, strategy, threshold, 0, _max_parallel_depth())
    _insertion_sort(values, 0, n - 1)


# ---------- other algorithms ----------


def _merge(values: MutableSequence[int], left: int, mid: int, right: int) -> None:
    left_part = values[left : mid + 1]
    right_part = values[mid + 1 : right + 1]
    i = j = 0
    k = left
    while i < len(left_part) and j < len(right_part):
        if left_part[i] <= right_part[j]:
            values[k] = left_part[i]
            i += 1
        else:
            values[k] = right_part[j]
            j += 1
        k += 1
    for rest in (left_part[i:], right_part[j:]):
        for item in rest:
            values[k] = item
            k += 1


def _merge_sort_range(values: MutableSequence[int], left: int, right: int) -> None:
    if left >= right:
        return
    mid = left + (right - left) // 2
    _merge_sort_range(values, left, mid)
    _merge_sort_range(values, mid + 1, right)
    _merge(values, left, mid, right)


def merge_sort(values: MutableSequence[int]) -> None:
    """Top-down merge sort."""
    if values:
        _merge_sort_range(values, 0, len(values) - 1)


def _sift_down(values: MutableSequence[int], size: int, i: int) -> None:
    while True:
        largest = i
        left, right = 2 * i + 1, 2 * i + 2
        if left < size and values[left] > values[largest]:
            largest = left
        if right < size and values[right] > values[largest]:
            largest = right
        if largest == i:
            return
        values[i], values[largest] = values[largest], values[i]
        i = largest


def heap_sort(values: MutableSequence[int]) -> None:
    """Heap sort with a max-heap."""
    n = len(values)
    if n <= 1:
        return
    for i in range(n // 2 - 1, -1, -1):
        _sift_down(values, n, i)
    for end in range(n - 1, 0, -1):
        values[0], values[end] = values[end], values[0]
        _sift_down(values, end, 0)


def bubble_sort(values: MutableSequence[int]) -> None:
    """Bubble sort that stops after a pass without swaps."""
    n = len(values)
    for i in range(n - 1):
        swapped = False
        for j in range(n - i - 1):
            if values[j] > values[j + 1]:
                values[j], values[j + 1] = values[j + 1], values[j]
                swapped = True
        if not swapped:
            break


def selection_sort(values: MutableSequence[int]) -> None:
    """Selection sort."""
    n = len(values)
    for i in range(n - 1):
        min_index = min(range(i, n), key=values.__getitem__)
        if min_index != i:
            values[i], values[min_index] = values[min_index], values[i]


def full_insertion_sort(values: MutableSequence[int]) -> None:
    """Insertion sort over the whole sequence."""
    if values:
        _insertion_sort(values, 0, len(values) - 1)