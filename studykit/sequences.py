"""Subsequence problems and binary searches over sorted sequences."""

from __future__ import annotations

import bisect
from collections.abc import Iterable, Sequence
from typing import Any


def longest_common_subsequence(text1: Sequence[Any], text2: Sequence[Any]) -> int:
    """Return the length of the longest common subsequence of two sequences."""
    previous = [0] * (len(text2) + 1)
    for item in text1:
        current = [0]
        for j, other in enumerate(text2, start=1):
            if item == other:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(previous[j], current[j - 1]))
        previous = current
    return previous[-1]


def longest_increasing_subsequence_length(values: Iterable[Any]) -> int:
    """Return the length of the longest strictly increasing subsequence."""
    tails: list[Any] = []
    for value in values:
        if not tails or tails[-1] < value:
            tails.append(value)
        else:
            tails[bisect.bisect_left(tails, value)] = value
    return len(tails)


def lower_bound(values: Sequence[Any], target: Any) -> int:
    """Return the first index whose value is not less than target."""
    return bisect.bisect_left(values, target)


def upper_bound(values: Sequence[Any], target: Any) -> int:
    """Return the first index whose value is greater than target."""
    return bisect.bisect_right(values, target)