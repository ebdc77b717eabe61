"""Sequence utilities: arithmetic runs, merging, the lone element and a taxi fare choice."""

from __future__ import annotations

import operator
from collections.abc import Iterable, Sequence
from functools import reduce
from typing import NamedTuple

ONLINE_TAXI = "Online Taxi"
CLASSIC_TAXI = "Classic Taxi"


class _Run(NamedTuple):
    start: int
    end: int
    diff: int


class ArithmeticRuns:
    """Maximal stretches of a sequence with a constant step between neighbours."""

    def __init__(self, values: Iterable[int]) -> None:
        self.values = list(values)
        self.runs: list[_Run] = []
        for i, (previous, current) in enumerate(zip(self.values, self.values[1:]), start=1):
            diff = current - previous
            if self.runs and self.runs[-1].diff == diff:
                self.runs[-1] = self.runs[-1]._replace(end=i)
            else:
                self.runs.append(_Run(i - 1, i, diff))

    def longest(self, left: int, right: int, diff: int) -> int:
        """Return the longest stretch with step ``diff`` inside positions left..right (1-based).

        A single element always counts, so the result is at least 1.
        """
        if not 1 <= left <= right <= len(self.values):
            raise ValueError(f"range {left}..{right} is outside 1..{len(self.values)}")
        lo, hi = left - 1, right - 1
        return max(
            (
                min(run.end, hi) - max(lo, run.start) + 1
                for run in self.runs
                if run.diff == diff and run.end >= lo and run.start <= hi
            ),
            default=1,
        )


def merge_sorted(a: Sequence, b: Sequence) -> list:
    """Merge two sorted sequences; on ties the element of ``b`` comes first."""
    merged = []
    i = j = 0
    while i < len(a) and j < len(b):
        if a[i] < b[j]:
            merged.append(a[i])
            i += 1
        else:
            merged.append(b[j])
            j += 1
    merged.extend(a[i:])
    merged.extend(b[j:])
    return merged


def single_number(values: Iterable[int]) -> int:
    """Return the exclusive or of all values: the one that appears an odd number of times."""
    return reduce(operator.xor, values, 0)


def choose_taxi(
    distance: int,
    online_base: int,
    online_free: int,
    online_rate: int,
    classic_wait_limit: int,
    classic_base: int,
    classic_wait_cost: int,
    classic_rate: int,
) -> str:
    """Return which taxi is cheaper for ``distance``; the online one wins ties."""
    if distance < 0:
        raise ValueError(f"distance must be non-negative, got {distance}")
    if classic_wait_limit <= 0:
        raise ValueError(f"classic wait limit must be positive, got {classic_wait_limit}")

    online = online_base + max(0, distance - online_free) * online_rate
    classic = (
        classic_base
        + (distance // classic_wait_limit) * classic_wait_cost
        + distance * classic_rate
    )
    return CLASSIC_TAXI if online > classic else ONLINE_TAXI