"""Elementary sorting algorithms and sorting of 0/1/2 sequences."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence


def bubble_sort(values: Sequence[int]) -> list[int]:
    """Return a sorted copy using bubble sort, stopping early once no swap occurs."""
    result = list(values)
    for done in range(len(result) - 1):
        swapped = False
        for j in range(len(result) - done - 1):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
                swapped = True
        if not swapped:
            break
    return result


def insertion_sort(values: Sequence[int]) -> list[int]:
    """Return a sorted copy using insertion sort."""
    result = list(values)
    for i in range(1, len(result)):
        current = result[i]
        prev = i - 1
        while prev >= 0 and result[prev] > current:
            result[prev + 1] = result[prev]
            prev -= 1
        result[prev + 1] = current
    return result


def selection_sort(values: Sequence[int]) -> list[int]:
    """Return a sorted copy using selection sort."""
    result = list(values)
    for i in range(len(result) - 1):
        smallest = min(range(i, len(result)), key=result.__getitem__)
        result[i], result[smallest] = result[smallest], result[i]
    return result


def _check_012(values: Sequence[int]) -> None:
    bad = {v for v in values if v not in (0, 1, 2)}
    if bad:
        raise ValueError(f"values must be 0, 1 or 2, got {sorted(bad)}")


def dutch_flag_sort(values: Sequence[int]) -> list[int]:
    """Return a sorted copy of a 0/1/2 sequence in one pass (Dutch national flag)."""
    _check_012(values)
    result = list(values)
    low, mid, high = 0, 0, len(result) - 1
    while mid <= high:
        if result[mid] == 0:
            result[mid], result[low] = result[low], result[mid]
            low += 1
            mid += 1
        elif result[mid] == 1:
            mid += 1
        else:
            result[mid], result[high] = result[high], result[mid]
            high -= 1
    return result


def counting_sort_012(values: Sequence[int]) -> list[int]:
    """Return a sorted copy of a 0/1/2 sequence by counting each value."""
    _check_012(values)
    counts = Counter(values)
    return [digit for digit in (0, 1, 2) for _ in range(counts[digit])]