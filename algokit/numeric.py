"""Small numeric and dynamic-programming routines."""

from __future__ import annotations

import math


def power(x: float, n: int) -> float:
    """Raise ``x`` to the integer power ``n`` by repeated squaring."""
    remaining = abs(n)
    base = x
    result = 1.0
    while remaining:
        if remaining % 2 == 0:
            base *= base
            remaining //= 2
        else:
            result *= base
            remaining -= 1
    if n < 0:
        if result == 0:
            raise ZeroDivisionError("zero cannot be raised to a negative power")
        return 1.0 / result
    return result


def unique_paths(m: int, n: int) -> int:
    """Count right/down paths across an ``m`` by ``n`` grid."""
    if m < 1 or n < 1:
        raise ValueError("grid dimensions must be positive")
    return math.comb(m + n - 2, m - 1)


def longest_common_subsequence(a: str, b: str) -> int:
    """Length of the longest common subsequence of two strings."""
    previous = [0] * (len(b) + 1)
    for char_a in a:
        current = [0]
        for j, char_b in enumerate(b, start=1):
            if char_a == char_b:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(previous[j], current[j - 1]))
        previous = current
    return previous[-1]