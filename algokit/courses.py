"""Greedy scheduling of the most courses that can finish before their deadlines."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence


def schedule_course(courses: Iterable[Sequence[int]]) -> int:
    """Return how many courses can be taken at most.

    Each course is a ``(duration, last_day)`` pair; courses run one at a
    time starting at day 0 and must finish no later than ``last_day``.
    The input is not modified.
    """
    taken: list[int] = []  # max-heap of durations, stored negated
    elapsed = 0

    for duration, last_day in sorted(courses, key=lambda course: course[1]):
        if elapsed + duration <= last_day:
            heapq.heappush(taken, -duration)
            elapsed += duration
        elif taken and -taken[0] > duration:
            longest = -heapq.heapreplace(taken, -duration)
            elapsed += duration - longest

    return len(taken)