"""Finding fixed-size groups of values that add up to a target."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["three_sum", "four_sum"]


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """Return every distinct ascending triple of ``nums`` whose sum is zero."""
    ordered = sorted(nums)
    size = len(ordered)
    result: list[list[int]] = []
    for i, first in enumerate(ordered):
        if i > 0 and first == ordered[i - 1]:
            continue
        j, k = i + 1, size - 1
        while j < k:
            total = first + ordered[j] + ordered[k]
            if total < 0:
                j += 1
            elif total > 0:
                k -= 1
            else:
                result.append([first, ordered[j], ordered[k]])
                j += 1
                k -= 1
                while j < k and ordered[j] == ordered[j - 1]:
                    j += 1
    return result


def four_sum(nums: Sequence[int], target: int) -> list[list[int]]:
    """Return every distinct ascending quadruple of ``nums`` summing to ``target``."""
    ordered = sorted(nums)
    size = len(ordered)
    result: list[list[int]] = []
    for i, first in enumerate(ordered):
        if i > 0 and first == ordered[i - 1]:
            continue
        j = i + 1
        while j < size:
            second = ordered[j]
            p, q = j + 1, size - 1
            while p < q:
                total = first + second + ordered[p] + ordered[q]
                if total < target:
                    p += 1
                elif total > target:
                    q -= 1
                else:
                    result.append([first, second, ordered[p], ordered[q]])
                    p += 1
                    q -= 1
                    while p < q and ordered[p] == ordered[p - 1]:
                        p += 1
            j += 1
            while j < size and ordered[j] == ordered[j - 1]:
                j += 1
    return result