"""Binary-search-on-the-answer partitioning problems."""

from __future__ import annotations

from bisect import bisect_left
from typing import Sequence


def allocate_books(pages: Sequence[int], students: int) -> int:
    """Smallest possible maximum of pages any student reads.

    Books are handed out in order, each student taking a contiguous run.
    """
    if students < 1:
        raise ValueError("there must be at least one student")

    def feasible(limit: int) -> bool:
        if any(count > limit for count in pages):
            return False
        used = 1
        load = 0
        for count in pages:
            if load + count <= limit:
                load += count
            else:
                used += 1
                if used > students:
                    return False
                load = count
        return True

    return bisect_left(range(sum(pages) + 1), True, key=feasible)


def aggressive_cows(stalls: Sequence[int], cows: int) -> int:
    """Largest minimum distance at which ``cows`` can be placed in ``stalls``."""
    if cows < 2:
        raise ValueError("at least two cows are needed to have a distance")
    if cows > len(stalls):
        raise ValueError("more cows than stalls")
    ordered = sorted(stalls)

    def feasible(distance: int) -> bool:
        placed = 1
        last = ordered[0]
        for position in ordered:
            if position - last >= distance:
                placed += 1
                if placed == cows:
                    return True
                last = position
        return False

    span = ordered[-1] - ordered[0]
    first_infeasible = bisect_left(
        range(span + 2), True, key=lambda distance: not feasible(distance)
    )
    return first_infeasible - 1