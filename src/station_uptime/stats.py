from typing import Iterable, Tuple

from .intervals import Interval


def timeline_totals(merged: Iterable[Interval]) -> Tuple[int, int]:
    """Return ``(observed, available)`` seconds for a merged timeline.

    Gaps between consecutive intervals count as observed but unavailable.
    """
    total = 0
    available = 0
    prev_end: int | None = None
    for interval in merged:
        if prev_end is not None and interval.start > prev_end:
            total += interval.start - prev_end
        duration = interval.duration
        if duration > 0:
            total += duration
            if interval.up:
                available += duration
        prev_end = interval.end if prev_end is None else max(prev_end, interval.end)
    return total, available


def resolve(merged: Iterable[Interval]) -> int:
    """Percentage of observed time that was up, truncated to an integer."""
    total, available = timeline_totals(merged)
    if not total:
        return 0
    return available * 100 // total
