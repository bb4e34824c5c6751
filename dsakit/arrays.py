"""Classic array problems: majority element, maximum subarray, permutations and more."""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from itertools import accumulate
from operator import mul


def majority_element_brute_force(values: Sequence[int]) -> int | None:
    """Return the element occurring more than len/2 times, or None. O(n^2)."""
    half = len(values) // 2
    for candidate in values:
        if sum(1 for other in values if other == candidate) > half:
            return candidate
    return None


def majority_element_sorted(values: Sequence[int]) -> int | None:
    """Return the majority element by sorting and counting runs, or None. O(n log n)."""
    if not values:
        raise ValueError("majority_element_sorted() arg is an empty sequence")
    ordered = sorted(values)
    half = len(ordered) // 2
    run = 0
    previous = ordered[0]
    for value in ordered:
        run = run + 1 if value == previous else 1
        if run > half:
            return value
        previous = value
    return None


def majority_element(values: Sequence[int]) -> int:
    """Return the Boyer-Moore voting candidate.

    The candidate is the majority element whenever one exists; it is not verified.
    """
    if not values:
        raise ValueError("majority_element() arg is an empty sequence")
    count = 0
    candidate = values[0]
    for value in values:
        if count == 0:
            candidate = value
        count += 1 if value == candidate else -1
    return candidate


def subarrays(values: Sequence[int]) -> Iterator[list[int]]:
    """Yield every contiguous subarray, ordered by start index then end index."""
    items = list(values)
    for start in range(len(items)):
        for end in range(start + 1, len(items) + 1):
            yield items[start:end]


def max_subarray_sum_brute_force(values: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous subarray. O(n^2)."""
    if not values:
        raise ValueError("max_subarray_sum_brute_force() arg is an empty sequence")
    items = list(values)
    return max(
        max(accumulate(items[start:])) for start in range(len(items))
    )


def max_subarray_sum(values: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous subarray (Kadane). O(n)."""
    if not values:
        raise ValueError("max_subarray_sum() arg is an empty sequence")
    current = 0
    best = -math.inf
    for value in values:
        current += value
        best = max(best, current)
        # Reset only after the comparison so all-negative input keeps its maximum.
        if current < 0:
            current = 0
    return int(best)


def next_permutation(values: Sequence[int]) -> list[int]:
    """Return the lexicographically next permutation; the last one wraps to the first."""
    result = list(values)
    pivot = next(
        (i for i in range(len(result) - 2, -1, -1) if result[i] < result[i + 1]),
        None,
    )
    if pivot is None:
        result.reverse()
        return result
    successor = next(
        i for i in range(len(result) - 1, pivot, -1) if result[i] > result[pivot]
    )
    result[pivot], result[successor] = result[successor], result[pivot]
    result[pivot + 1:] = reversed(result[pivot + 1:])
    return result


def pair_sum(values: Sequence[int], target: int) -> tuple[int, int] | None:
    """Return indices (i, j) of a pair summing to target in an ascending list, or None."""
    low, high = 0, len(values) - 1
    while low < high:
        total = values[low] + values[high]
        if total == target:
            return low, high
        if total < target:
            low += 1
        else:
            high -= 1
    return None


def product_except_self_brute_force(values: Sequence[int]) -> list[int]:
    """Return, for each position, the product of all other elements. O(n^2)."""
    return [
        math.prod(other for j, other in enumerate(values) if j != i)
        for i in range(len(values))
    ]


def product_except_self_prefix(values: Sequence[int]) -> list[int]:
    """Product of all other elements using prefix and suffix product lists. O(n)."""
    if not values:
        return []
    prefix = list(accumulate(values[:-1], mul, initial=1))
    suffix = list(accumulate(reversed(values[1:]), mul, initial=1))[::-1]
    return [before * after for before, after in zip(prefix, suffix)]


def product_except_self(values: Sequence[int]) -> list[int]:
    """Product of all other elements with two running products. O(n), O(1) extra."""
    result = [1] * len(values)
    running = 1
    for i, value in enumerate(values):
        result[i] *= running
        running *= value
    running = 1
    for i in range(len(values) - 1, -1, -1):
        result[i] *= running
        running *= values[i]
    return result


def product_except_self_division(values: Sequence[int]) -> list[int]:
    """Product of all other elements by dividing the total product.

    Raises ZeroDivisionError when any element is zero.
    """
    total = math.prod(values)
    return [total // value for value in values]


def max_profit(prices: Sequence[int]) -> int:
    """Return the best profit from one buy followed by a later sell, or 0."""
    if not prices:
        raise ValueError("max_profit() arg is an empty sequence")
    best = 0
    cheapest = prices[0]
    for price in prices[1:]:
        best = max(best, price - cheapest)
        cheapest = min(cheapest, price)
    return best


def merge_sorted(a: Sequence[int], m: int, b: Sequence[int]) -> list[int]:
    """Merge the first m elements of sorted a with sorted b, filling from the back."""
    if not 0 <= m <= len(a):
        raise ValueError(f"m must be between 0 and {len(a)}, got {m}")
    n = len(b)
    result = list(a[:m]) + [0] * n
    i, j, slot = m - 1, n - 1, m + n - 1
    while i >= 0 and j >= 0:
        if result[i] > b[j]:
            result[slot] = result[i]
            i -= 1
        else:
            result[slot] = b[j]
            j -= 1
        slot -= 1
    while j >= 0:
        result[slot] = b[j]
        j -= 1
        slot -= 1
    return result


def max_water_brute_force(heights: Sequence[int]) -> int:
    """Return the largest container area between two lines. O(n^2)."""
    return max(
        (
            (j - i) * min(heights[i], heights[j])
            for i in range(len(heights))
            for j in range(i + 1, len(heights))
        ),
        default=0,
    )


def max_water(heights: Sequence[int]) -> int:
    """Return the largest container area between two lines (two pointers). O(n)."""
    left, right = 0, len(heights) - 1
    best = 0
    while left < right:
        best = max(best, (right - left) * min(heights[left], heights[right]))
        if heights[left] < heights[right]:
            left += 1
        else:
            right -= 1
    return best