from __future__ import annotations

from typing import Iterable, Tuple

Range = Tuple[int, int]  # [start, end)


def ranges_overlap(a: Range, b: Range) -> bool:
    """True when two half-open ranges share at least one character position."""
    return a[0] < b[1] and b[0] < a[1]


def overlaps_any(candidate: Range, others: Iterable[Range]) -> bool:
    return any(ranges_overlap(candidate, other) for other in others)
