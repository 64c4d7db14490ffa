"""Availability intervals and the timeline merger."""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from operator import attrgetter
from typing import Iterable, List

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Interval:
    """Half-open ``[start, end)`` span reported as up or down."""

    start: int
    end: int
    up: bool

    @property
    def duration(self) -> int:
        return self.end - self.start


def _extend(last: Interval, candidate: Interval) -> Interval:
    return replace(last, end=max(last.end, candidate.end))


def _coalesce(merged: List[Interval], interval: Interval) -> None:
    if interval.end <= interval.start:
        return
    if merged and merged[-1].up == interval.up and merged[-1].end >= interval.start:
        merged[-1] = _extend(merged[-1], interval)
    else:
        merged.append(interval)


def _truncate_and_append(merged: List[Interval], candidate: Interval) -> None:
    """Cut the overlapping tail of the last interval and let ``candidate`` own it."""
    last = merged.pop()
    if last.start < candidate.start:
        merged.append(replace(last, end=candidate.start))
    _coalesce(merged, candidate)


def _split_around(merged: List[Interval], candidate: Interval) -> None:
    """Nested conflict: the enclosing interval reclaims what follows ``candidate``."""
    last = merged[-1]
    _truncate_and_append(merged, candidate)
    _coalesce(merged, replace(last, start=candidate.end))


def _overlay(merged: List[Interval], candidate: Interval) -> None:
    # Reached only after a reclaim: a conflicting candidate starts inside a span
    # that is already split, so every accumulated piece past its start gives way.
    remainder: List[Interval] = []
    while merged and merged[-1].end > candidate.start:
        last = merged.pop()
        if last.end > candidate.end:
            remainder.insert(0, replace(last, start=max(last.start, candidate.end)))
        if last.start < candidate.start:
            merged.append(replace(last, end=candidate.start))
    _coalesce(merged, candidate)
    for piece in remainder:
        _coalesce(merged, piece)


def merge(intervals: Iterable[Interval]) -> List[Interval]:
    """Collapse reports into a sorted, non-overlapping timeline.

    Reports are ordered by start time (ties keep their input order). When two
    reports overlap with the same state they are joined; when they disagree
    the later-starting report wins for its own span and the earlier one keeps
    whatever lies outside it. Reports separated by a gap are never joined.
    """
    merged: List[Interval] = []
    for candidate in sorted(intervals, key=attrgetter("start")):
        if not merged or candidate.start > merged[-1].end:
            merged.append(candidate)
            continue
        last = merged[-1]
        if candidate.up == last.up:
            merged[-1] = _extend(last, candidate)
        elif candidate.start < last.start:
            _overlay(merged, candidate)
        elif last.end > candidate.end:
            _split_around(merged, candidate)
        else:
            _truncate_and_append(merged, candidate)
    logger.debug("Merged intervals into %d timeline entries", len(merged))
    return merged
