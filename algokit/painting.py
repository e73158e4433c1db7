"""Minimum cost of painting walls with one paid and one free painter."""

from __future__ import annotations

import math
from collections.abc import Sequence


def paint_walls(cost: Sequence[int], time: Sequence[int]) -> int:
    """Return the least total cost to paint every wall.

    Wall ``i`` costs ``cost[i]`` and takes ``time[i]`` units for the paid
    painter. While the paid painter works, the free painter paints one wall
    per unit of time at no cost.
    """
    if len(cost) != len(time):
        raise ValueError("cost and time must have the same length")

    walls = len(cost)
    # best[j]: least cost for the paid painter to account for j walls,
    # counting the walls the free painter finishes meanwhile (capped at walls).
    best = [math.inf] * (walls + 1)
    best[0] = 0

    for wall_cost, wall_time in zip(cost, time):
        for covered in reversed(range(walls + 1)):
            if best[covered] == math.inf:
                continue
            reached = min(covered + wall_time + 1, walls)
            best[reached] = min(best[reached], best[covered] + wall_cost)

    result = best[walls]
    if result == math.inf:
        raise ValueError("no assignment of painters covers every wall")
    return int(result)