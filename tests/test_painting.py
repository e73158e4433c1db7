from itertools import combinations

import pytest
from hypothesis import given, strategies as st

from algokit.painting import paint_walls


def _exhaustive(cost, time):
    walls = len(cost)
    best = None
    for size in range(walls + 1):
        for chosen in combinations(range(walls), size):
            if sum(time[i] + 1 for i in chosen) >= walls:
                total = sum(cost[i] for i in chosen)
                if best is None or total < best:
                    best = total
    return best


_walls = st.integers(min_value=1, max_value=7).flatmap(
    lambda n: st.tuples(
        st.lists(st.integers(0, 50), min_size=n, max_size=n),
        st.lists(st.integers(0, 6), min_size=n, max_size=n),
    )
)


def test_worked_example_distinct_times():
    assert paint_walls([1, 2, 3, 2], [1, 2, 3, 2]) == 3


def test_worked_example_equal_times():
    assert paint_walls([2, 3, 4, 2], [1, 1, 1, 1]) == 4


def test_no_walls_costs_nothing():
    assert paint_walls([], []) == 0


def test_mismatched_lengths_rejected():
    with pytest.raises(ValueError):
        paint_walls([1, 2], [1])


@given(_walls)
def test_matches_exhaustive_search(data):
    cost, time = data
    assert paint_walls(cost, time) == _exhaustive(cost, time)


@given(_walls)
def test_never_more_than_paying_for_everything(data):
    cost, time = data
    result = paint_walls(cost, time)
    assert 0 <= result <= sum(cost)


@given(st.lists(st.integers(0, 100), min_size=1, max_size=8))
def test_one_long_job_covers_everything(cost):
    time = [len(cost)] * len(cost)
    assert paint_walls(cost, time) == min(cost)