"""Algorithms over one-dimensional sequences of integers."""

from __future__ import annotations

import heapq
from itertools import accumulate, groupby
from typing import MutableSequence, NamedTuple, Sequence


class SubarraySum(NamedTuple):
    """The best contiguous sum and the inclusive bounds of its run."""

    total: int
    start: int
    end: int


def sort_colors(nums: MutableSequence[int]) -> None:
    """Sort a sequence of 0s, 1s and 2s in place in a single pass."""
    low, mid, high = 0, 0, len(nums) - 1
    while mid <= high:
        value = nums[mid]
        if value == 0:
            nums[low], nums[mid] = nums[mid], nums[low]
            low += 1
            mid += 1
        elif value == 1:
            mid += 1
        elif value == 2:
            nums[mid], nums[high] = nums[high], nums[mid]
            high -= 1
        else:
            raise ValueError(f"only 0, 1 and 2 can be sorted, got {value!r}")


def repeated_number(values: Sequence[int]) -> tuple[int, int]:
    """Return ``(repeated, missing)`` for a permutation of 1..n with one value doubled."""
    numbers = range(1, len(values) + 1)
    combined = 0
    for value in (*values, *numbers):
        combined ^= value
    if combined == 0:
        raise ValueError("no value is repeated")
    bit = combined & -combined
    first = 0
    for value in (*values, *numbers):
        if value & bit:
            first ^= value
    second = combined ^ first
    if first in values:
        return first, second
    return second, first


def merge_sorted(
    nums1: MutableSequence[int], m: int, nums2: Sequence[int], n: int
) -> None:
    """Merge the first ``n`` of ``nums2`` into the first ``m`` of ``nums1``, in place."""
    if n == 0:
        return
    if m == 0:
        nums1[:] = nums2
        return
    nums1[: m + n] = list(heapq.merge(nums1[:m], nums2[:n]))


def max_subarray(values: Sequence[int]) -> SubarraySum:
    """Find the largest sum of a contiguous run (Kadane's algorithm)."""
    if not values:
        raise ValueError("an empty sequence has no subarray")
    best: SubarraySum | None = None
    running = 0
    run_start = 0
    for index, value in enumerate(values):
        running += value
        if best is None or running > best.total:
            best = SubarraySum(running, run_start, index)
        if running < 0:
            running = 0
            run_start = index + 1
    assert best is not None
    return best


def merge_intervals(intervals: Sequence[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping (or touching) closed intervals, sorted by start."""
    if len(intervals) <= 1:
        return [list(interval) for interval in intervals]
    merged: list[list[int]] = []
    for start, end in sorted(tuple(interval) for interval in intervals):
        if merged and start <= merged[-1][1]:
            merged[-1][1] = max(merged[-1][1], end)
        else:
            merged.append([start, end])
    return merged


def pascal_triangle(rows: int) -> list[list[int]]:
    """Return the first ``rows`` rows of Pascal's triangle."""
    if rows < 0:
        raise ValueError("the number of rows cannot be negative")
    triangle: list[list[int]] = []
    for _ in range(rows):
        if not triangle:
            triangle.append([1])
        else:
            previous = triangle[-1]
            inner = [a + b for a, b in zip(previous, previous[1:])]
            triangle.append([1, *inner, 1])
    return triangle


def next_permutation(values: MutableSequence[int]) -> None:
    """Rearrange ``values`` in place into the next lexicographic permutation.

    The last permutation wraps round to the first (ascending order).
    """
    pivot = next(
        (i for i in range(len(values) - 2, -1, -1) if values[i] < values[i + 1]),
        None,
    )
    if pivot is None:
        values.reverse()
        return
    successor = next(
        i for i in range(len(values) - 1, pivot, -1) if values[i] > values[pivot]
    )
    values[pivot], values[successor] = values[successor], values[pivot]
    values[pivot + 1 :] = values[pivot + 1 :][::-1]


def _sort_counting(values: list[int]) -> tuple[list[int], int]:
    if len(values) <= 1:
        return values, 0
    middle = (len(values) - 1) // 2 + 1
    left, left_count = _sort_counting(values[:middle])
    right, right_count = _sort_counting(values[middle:])
    merged: list[int] = []
    count = left_count + right_count
    li = ri = 0
    while li < len(left) and ri < len(right):
        if left[li] <= right[ri]:
            merged.append(left[li])
            li += 1
        else:
            merged.append(right[ri])
            ri += 1
            count += len(left) - li
    merged.extend(left[li:])
    merged.extend(right[ri:])
    return merged, count


def count_inversions(values: Sequence[int]) -> int:
    """Count pairs ``i < j`` with ``values[i] > values[j]``."""
    return _sort_counting(list(values))[1]


def max_profit(prices: Sequence[int]) -> int:
    """Best profit from one buy followed by one sell; 0 if none is possible."""
    best = 0
    cheapest: int | None = None
    for price in prices:
        cheapest = price if cheapest is None else min(cheapest, price)
        best = max(best, price - cheapest)
    return best


def two_sum(nums: Sequence[int], target: int) -> tuple[int, int] | None:
    """Return indices ``(i, j)``, ``i < j``, whose values add to ``target``."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        partner = seen.get(target - value)
        if partner is not None:
            return partner, index
        seen[value] = index
    return None


def four_sum(nums: Sequence[int], target: int) -> list[list[int]]:
    """All distinct sorted quadruplets of ``nums`` adding to ``target``, in order."""
    ordered = sorted(nums)
    n = len(ordered)
    found: set[tuple[int, int, int, int]] = set()
    for i in range(n - 1):
        for j in range(i + 1, n):
            low, high = j + 1, n - 1
            while low < high:
                total = ordered[i] + ordered[j] + ordered[low] + ordered[high]
                if total == target:
                    found.add((ordered[i], ordered[j], ordered[low], ordered[high]))
                    low += 1
                    high -= 1
                elif total < target:
                    low += 1
                else:
                    high -= 1
    return [list(quad) for quad in sorted(found)]


def longest_zero_sum_subarray(values: Sequence[int]) -> int:
    """Length of the longest contiguous run summing to zero."""
    first_seen = {0: -1}
    longest = 0
    for index, prefix in enumerate(accumulate(values)):
        if prefix in first_seen:
            longest = max(longest, index - first_seen[prefix])
        else:
            first_seen[prefix] = index
    return longest


def find_triplet(values: Sequence[int], total: int) -> tuple[int, int, int] | None:
    """Find three values, in ascending order, that add up to ``total``."""
    ordered = sorted(values)
    for i, first in enumerate(ordered[:-2]):
        low, high = i + 1, len(ordered) - 1
        while low < high:
            current = first + ordered[low] + ordered[high]
            if current == total:
                return first, ordered[low], ordered[high]
            if current < total:
                low += 1
            else:
                high -= 1
    return None


def trap_rain_water(heights: Sequence[int]) -> int:
    """Units of water held between the bars of an elevation map."""
    if not heights:
        return 0
    left_max = accumulate(heights, max)
    right_max = list(accumulate(reversed(heights), max))[::-1]
    return sum(
        min(left, right) - height
        for left, right, height in zip(left_max, right_max, heights)
    )


def remove_duplicates(nums: MutableSequence[int]) -> int:
    """Collapse runs of equal values to the front of ``nums``; return how many remain."""
    unique = [value for value, _ in groupby(nums)]
    nums[: len(unique)] = unique
    return len(unique)


def max_consecutive_ones(nums: Sequence[int]) -> int:
    """Length of the longest run of 1s."""
    return max(
        (sum(1 for _ in run) for value, run in groupby(nums) if value == 1),
        default=0,
    )