"""Binary search and binary search on the answer: placement, allocation and partitioning."""

from __future__ import annotations

from collections.abc import Sequence


def binary_search(values: Sequence[int], target: int) -> int | None:
    """Return the index of target in an ascending sequence, or None. Iterative."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if values[mid] == target:
            return mid
        if target > values[mid]:
            low = mid + 1
        else:
            high = mid - 1
    return None


def binary_search_recursive(values: Sequence[int], target: int) -> int | None:
    """Return the index of target in an ascending sequence, or None. Recursive."""

    def search(low: int, high: int) -> int | None:
        if low > high:
            return None
        mid = low + (high - low) // 2
        if values[mid] == target:
            return mid
        if target > values[mid]:
            return search(mid + 1, high)
        return search(low, mid - 1)

    return search(0, len(values) - 1)


def can_place_cows(stalls: Sequence[int], cows: int, min_distance: int) -> bool:
    """Tell whether cows fit in the ascending stalls at least min_distance apart.

    The first cow always goes in the first stall; placement is greedy.
    """
    if not stalls:
        raise ValueError("can_place_cows() needs at least one stall")
    placed = 1
    last = stalls[0]
    for position in stalls[1:]:
        if position - last >= min_distance:
            placed += 1
            last = position
        if placed == cows:
            return True
    return False


def largest_minimum_distance(stalls: Sequence[int], cows: int) -> int | None:
    """Return the largest possible minimum gap between cows placed in stalls, or None."""
    ordered = sorted(stalls)
    if cows > len(ordered):
        return None
    low, high = 1, ordered[-1] - ordered[0]
    answer = None
    while low <= high:
        mid = low + (high - low) // 2
        if can_place_cows(ordered, cows, mid):
            answer = mid
            low = mid + 1
        else:
            high = mid - 1
    return answer


def _fits_in_groups(sizes: Sequence[int], groups: int, limit: int) -> bool:
    """Tell whether sizes split into at most `groups` contiguous runs each within limit."""
    used = 1
    load = 0
    for size in sizes:
        if size > limit:
            return False
        if load + size <= limit:
            load += size
        else:
            used += 1
            load = size
    return used <= groups


def can_allocate(pages: Sequence[int], students: int, max_pages: int) -> bool:
    """Tell whether books can go to students in contiguous runs of at most max_pages."""
    return _fits_in_groups(pages, students, max_pages)


def allocate_books(pages: Sequence[int], students: int) -> int | None:
    """Return the smallest possible maximum of pages any student gets, or None."""
    if students > len(pages):
        return None
    low, high = 0, sum(pages)
    answer = None
    while low <= high:
        mid = low + (high - low) // 2
        if can_allocate(pages, students, mid):
            answer = mid
            high = mid - 1
        else:
            low = mid + 1
    return answer


def can_paint(boards: Sequence[int], painters: int, max_time: int) -> bool:
    """Tell whether painters can cover the boards contiguously within max_time each."""
    return _fits_in_groups(boards, painters, max_time)


def min_paint_time(boards: Sequence[int], painters: int) -> int | None:
    """Return the least time for painters to paint all boards contiguously, or None."""
    if len(boards) < painters:
        return None
    low, high = max(boards, default=0), sum(boards)
    answer = None
    while low <= high:
        mid = low + (high - low) // 2
        if can_paint(boards, painters, mid):
            answer = mid
            high = mid - 1
        else:
            low = mid + 1
    return answer


def peak_index(values: Sequence[int]) -> int | None:
    """Return the index of the peak of a strictly rising then falling sequence, or None."""
    low, high = 1, len(values) - 2
    while low <= high:
        mid = low + (high - low) // 2
        before, current, after = values[mid - 1], values[mid], values[mid + 1]
        if current > max(before, after):
            return mid
        if before < current:
            low = mid + 1
        elif before > current:
            high = mid - 1
        else:
            raise ValueError("not a mountain sequence: equal neighbouring values")
    return None


def search_rotated(values: Sequence[int], target: int) -> int | None:
    """Return the index of target in a rotated ascending sequence, or None."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if values[mid] == target:
            return mid
        if values[low] <= values[mid]:
            if values[low] <= target <= values[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif values[mid] <= values[high]:
            if values[mid] <= target <= values[high]:
                low = mid + 1
            else:
                high = mid - 1
        else:
            raise ValueError("sequence is not a rotated ascending sequence")
    return None


def single_element(values: Sequence[int]) -> int | None:
    """Return the one value that appears once in a sorted sequence of pairs, or None."""
    n = len(values)
    if n == 0:
        raise ValueError("single_element() arg is an empty sequence")
    if n == 1:
        return values[0]
    low, high = 0, n - 1
    while low <= high:
        mid = low + (high - low) // 2
        current = values[mid]
        if mid == 0 and current != values[1]:
            return current
        if mid == n - 1 and current != values[n - 2]:
            return current
        previous = values[mid - 1] if mid > 0 else None
        following = values[mid + 1] if mid < n - 1 else None
        if previous != current and current != following:
            return current
        matches_previous = previous == current
        # Before the single element, pairs start at even indices.
        if mid % 2 == 0:
            if matches_previous:
                high = mid - 1
            else:
                low = mid + 1
        elif matches_previous:
            low = mid + 1
        else:
            high = mid - 1
    return None