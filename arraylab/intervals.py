"""Merging of closed integer intervals."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["merge_intervals"]


def merge_intervals(intervals: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the union of ``intervals`` as sorted, non-overlapping intervals.

    Intervals that touch at an end point are joined.
    """
    merged: list[list[int]] = []
    for interval in sorted(list(item) for item in intervals):
        if merged and interval[0] <= merged[-1][1]:
            merged[-1][1] = max(merged[-1][1], interval[1])
        else:
            merged.append(interval)
    return merged