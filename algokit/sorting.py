"""Classic sorting algorithms; each returns a new sorted list."""

from __future__ import annotations

from bisect import insort_left
from collections.abc import Iterable
from typing import Any


def _require_non_negative(values: list[Any], name: str) -> None:
    if any(v < 0 for v in values):
        raise ValueError(f"{name} requires non-negative values")


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by inserting each element into the sorted prefix."""
    result = list(items)
    for i in range(1, len(result)):
        key = result[i]
        j = i - 1
        while j >= 0 and result[j] > key:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = key
    return result


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by swapping adjacent pairs, stopping early once a pass swaps nothing."""
    result = list(items)
    for end in range(len(result) - 1, 0, -1):
        swapped = False
        for j in range(end):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
                swapped = True
        if not swapped:
            break
    return result


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by moving the minimum of the unsorted tail to its front."""
    result = list(items)
    n = len(result)
    for i in range(n - 1):
        smallest = min(range(i, n), key=result.__getitem__)
        if smallest != i:
            result[i], result[smallest] = result[smallest], result[i]
    return result


def shell_sort(items: Iterable[Any]) -> list[Any]:
    """Gapped insertion sort using Knuth's 3h+1 gap sequence."""
    result = list(items)
    n = len(result)
    gap = 1
    while gap < n // 3:
        gap = gap * 3 + 1
    while gap > 0:
        for i in range(gap, n):
            temp = result[i]
            j = i
            while j >= gap and result[j - gap] > temp:
                result[j] = result[j - gap]
                j -= gap
            result[j] = temp
        gap //= 3
    return result


def _partition(values: list[Any], low: int, high: int) -> int:
    pivot = values[high]
    boundary = low
    for j in range(low, high):
        if values[j] < pivot:
            values[boundary], values[j] = values[j], values[boundary]
            boundary += 1
    values[boundary], values[high] = values[high], values[boundary]
    return boundary


def quick_sort(items: Iterable[Any]) -> list[Any]:
    """Quicksort with the last element of each range as pivot."""
    result = list(items)
    pending = [(0, len(result) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot = _partition(result, low, high)
            pending.append((low, pivot - 1))
            pending.append((pivot + 1, high))
    return result


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Stable top-down merge sort."""
    values = list(items)
    if len(values) <= 1:
        return values
    mid = (len(values) + 1) // 2
    return _merge(merge_sort(values[:mid]), merge_sort(values[mid:]))


def merge_sort_iterative(items: Iterable[Any]) -> list[Any]:
    """Stable bottom-up merge sort, doubling the run width each pass."""
    result = list(items)
    n = len(result)
    width = 1
    while width < n:
        for left in range(0, n - 1, 2 * width):
            mid = left + width
            if mid < n:
                right = min(left + 2 * width, n)
                result[left:right] = _merge(result[left:mid], result[mid:right])
        width *= 2
    return result


def _sift_down(values: list[Any], size: int, root: int) -> None:
    while True:
        largest = root
        left = 2 * root + 1
        right = left + 1
        if left < size and values[left] > values[largest]:
            largest = left
        if right < size and values[right] > values[largest]:
            largest = right
        if largest == root:
            return
        values[root], values[largest] = values[largest], values[root]
        root = largest


def heap_sort(items: Iterable[Any]) -> list[Any]:
    """Sort through a max-heap built in place."""
    result = list(items)
    n = len(result)
    for i in range(n // 2 - 1, -1, -1):
        _sift_down(result, n, i)
    for end in range(n - 1, 0, -1):
        result[0], result[end] = result[end], result[0]
        _sift_down(result, end, 0)
    return result


def radix_sort(items: Iterable[int]) -> list[int]:
    """LSD radix sort in base 10 for non-negative integers."""
    result = list(items)
    if not result:
        return result
    _require_non_negative(result, "radix_sort")
    largest = max(result)
    exp = 1
    while largest // exp > 0:
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in result:
            buckets[(value // exp) % 10].append(value)
        result = [value for bucket in buckets for value in bucket]
        exp *= 10
    return result


def counting_sort(items: Iterable[int]) -> list[int]:
    """Counting sort for non-negative integers."""
    values = list(items)
    if len(values) <= 1:
        return values
    _require_non_negative(values, "counting_sort")
    counts = [0] * (max(values) + 1)
    for value in values:
        counts[value] += 1
    return [value for value, count in enumerate(counts) for _ in range(count)]


def bucket_sort(items: Iterable[float]) -> list[float]:
    """Bucket sort for numbers in the half-open range [0, 1)."""
    values = list(items)
    n = len(values)
    buckets: list[list[float]] = [[] for _ in range(n)]
    for value in values:
        if not 0 <= value < 1:
            raise ValueError(f"bucket_sort requires values in [0, 1), got {value!r}")
        insort_left(buckets[min(int(n * value), n - 1)], value)
    return [value for bucket in buckets for value in bucket]


def _exchange_sort(values: list[int], bit: int) -> list[int]:
    if len(values) <= 1 or bit < 0:
        return values
    zeros = [v for v in values if not (v >> bit) & 1]
    ones = [v for v in values if (v >> bit) & 1]
    return _exchange_sort(zeros, bit - 1) + _exchange_sort(ones, bit - 1)


def radix_exchange_sort(items: Iterable[int]) -> list[int]:
    """MSD binary radix sort for unsigned 32-bit integers."""
    values = list(items)
    for value in values:
        if not 0 <= value < 2**32:
            raise ValueError(f"radix_exchange_sort requires unsigned 32-bit values, got {value!r}")
    return _exchange_sort(values, 31)


def address_calculation_sort(items: Iterable[int]) -> list[int]:
    """Sort by hashing each value to an ordered slot, keeping each slot sorted."""
    values = list(items)
    if not values:
        return values
    _require_non_negative(values, "address_calculation_sort")
    n = len(values)
    limit = max(values) + 1
    slots: list[list[int]] = [[] for _ in range(n)]
    for value in values:
        insort_left(slots[value * n // limit], value)
    return [value for slot in slots for value in slot]