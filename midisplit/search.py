from __future__ import annotations

from typing import List


def find_all(haystack: bytes, needle: bytes) -> List[int]:
    """Return ascending offsets of non-overlapping `needle` matches.

    After a hit at ``i`` the scan resumes at ``i + len(needle)``, so
    overlapping occurrences are not all reported.
    """

    offsets: List[int] = []
    if not needle or len(needle) > len(haystack):
        return offsets

    start = 0
    limit = len(haystack) - len(needle)
    while start <= limit:
        idx = haystack.find(needle, start)
        if idx == -1:
            break
        offsets.append(idx)
        start = idx + len(needle)

    return offsets
