"""Pair, triplet and quadruplet sums and subarray-sum counting using hashing and two pointers."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from itertools import accumulate, combinations


def two_sum_brute_force(values: Sequence[int], target: int) -> tuple[int, int] | None:
    """Return the first index pair (i, j), i < j, whose values sum to target, or None."""
    for (i, a), (j, b) in combinations(enumerate(values), 2):
        if a + b == target:
            return i, j
    return None


def two_sum_sorted(values: Sequence[int], target: int) -> tuple[int, int] | None:
    """Find a pair by two pointers on a sorted copy, then map values back to indices.

    The first index belongs to the smaller value, so the pair need not be ascending.
    """
    ordered = sorted(values)
    low, high = 0, len(ordered) - 1
    while low <= high:
        total = ordered[low] + ordered[high]
        if total == target:
            smaller, larger = ordered[low], ordered[high]
            break
        if total < target:
            low += 1
        else:
            high -= 1
    else:
        return None

    first = second = None
    for i, value in enumerate(values):
        if value == smaller and first is None:
            first = i
        elif value == larger and second is None and i != first:
            second = i
    if first is None or second is None:
        return None
    return first, second


def two_sum(values: Sequence[int], target: int) -> tuple[int, int] | None:
    """Return indices (i, j), i < j, of a pair summing to target in one pass, or None."""
    seen: dict[int, int] = {}
    for i, value in enumerate(values):
        complement = target - value
        if complement in seen:
            return seen[complement], i
        seen[value] = i
    return None


def three_sum_brute_force(values: Sequence[int]) -> list[list[int]]:
    """Return unique sorted triplets summing to zero, in order of discovery. O(n^3)."""
    seen: set[tuple[int, ...]] = set()
    result = []
    for triple in combinations(values, 3):
        if sum(triple) == 0:
            key = tuple(sorted(triple))
            if key not in seen:
                seen.add(key)
                result.append(list(key))
    return result


def three_sum_hashing(values: Sequence[int]) -> list[list[int]]:
    """Return unique sorted triplets summing to zero, in ascending order. O(n^2)."""
    unique: set[tuple[int, ...]] = set()
    for i, first in enumerate(values):
        seen: set[int] = set()
        for second in values[i + 1:]:
            third = -first - second
            if third in seen:
                unique.add(tuple(sorted((first, second, third))))
            seen.add(second)
    return [list(triple) for triple in sorted(unique)]


def three_sum(values: Sequence[int]) -> list[list[int]]:
    """Return unique triplets summing to zero by sorting and two pointers. O(n^2)."""
    ordered = sorted(values)
    n = len(ordered)
    result = []
    for i, first in enumerate(ordered):
        if i and first == ordered[i - 1]:
            continue
        j, k = i + 1, n - 1
        while j < k:
            total = first + ordered[j] + ordered[k]
            if total == 0:
                result.append([first, ordered[j], ordered[k]])
                j += 1
                k -= 1
                while j < k and ordered[j] == ordered[j - 1]:
                    j += 1
            elif total < 0:
                j += 1
            else:
                k -= 1
    return result


def four_sum(values: Sequence[int], target: int) -> list[list[int]]:
    """Return unique sorted quadruplets summing to target. O(n^3)."""
    ordered = sorted(values)
    n = len(ordered)
    result = []
    for i in range(n):
        if i and ordered[i] == ordered[i - 1]:
            continue
        for j in range(i + 1, n):
            if j > i + 1 and ordered[j] == ordered[j - 1]:
                continue
            remaining = target - ordered[i] - ordered[j]
            left, right = j + 1, n - 1
            while left < right:
                total = ordered[left] + ordered[right]
                if total == remaining:
                    result.append([ordered[i], ordered[j], ordered[left], ordered[right]])
                    left += 1
                    right -= 1
                    while left < right and ordered[left] == ordered[left - 1]:
                        left += 1
                elif total > remaining:
                    right -= 1
                else:
                    left += 1
    return result


def count_subarrays_with_sum_brute_force(values: Sequence[int], k: int) -> int:
    """Count contiguous subarrays whose sum is k. O(n^2)."""
    return sum(
        1
        for start in range(len(values))
        for total in accumulate(values[start:])
        if total == k
    )


def count_subarrays_with_sum(values: Sequence[int], k: int) -> int:
    """Count contiguous subarrays whose sum is k using prefix sums. O(n)."""
    seen: Counter[int] = Counter()
    count = 0
    for prefix in accumulate(values):
        needed = prefix - k
        if needed == 0:
            count += 1
        count += seen[needed]
        seen[prefix] += 1
    return count