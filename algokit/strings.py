"""String algorithms."""

from __future__ import annotations


def length_of_longest_substring(s: str) -> int:
    """Length of the longest substring of ``s`` with no repeated character."""
    last_seen: dict[str, int] = {}
    window_start = 0
    longest = 0
    for index, char in enumerate(s):
        previous = last_seen.get(char)
        if previous is not None:
            window_start = max(window_start, previous + 1)
        last_seen[char] = index
        longest = max(longest, index - window_start + 1)
    return longest