"""Algorithms over one-dimensional integer sequences."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import MutableSequence, Sequence
from itertools import groupby

__all__ = [
    "majority_element",
    "find_duplicate",
    "trap",
    "merge_sorted",
    "single_number",
    "max_profit",
    "max_area",
    "max_subarray",
    "sort_colors",
    "next_permutation",
    "product_except_self",
    "subarray_sum",
]


def _require_items(values: Sequence[int], what: str) -> None:
    if not values:
        raise ValueError(f"{what} must not be empty")


def majority_element(nums: Sequence[int]) -> int:
    """Return the element that appears more than ``len(nums) // 2`` times.

    If no element does, the largest value is returned.
    """
    _require_items(nums, "nums")
    half = len(nums) // 2
    value = nums[0]
    for value, run in groupby(sorted(nums)):
        if sum(1 for _ in run) > half:
            return value
    return value


def find_duplicate(nums: Sequence[int]) -> int:
    """Return the repeated value in a sequence of n + 1 values drawn from 1..n.

    Uses cycle detection, treating each value as the index of the next node.
    """
    _require_items(nums, "nums")
    slow = fast = nums[0]
    while True:
        slow = nums[slow]
        fast = nums[nums[fast]]
        if slow == fast:
            break
    slow = nums[0]
    while slow != fast:
        slow = nums[slow]
        fast = nums[fast]
    return slow


def trap(heights: Sequence[int]) -> int:
    """Return how much rain water the elevation map ``heights`` holds."""
    left, right = 0, len(heights) - 1
    left_max = right_max = 0
    water = 0
    while left < right:
        if heights[left] < heights[right]:
            if heights[left] >= left_max:
                left_max = heights[left]
            else:
                water += left_max - heights[left]
            left += 1
        else:
            if heights[right] >= right_max:
                right_max = heights[right]
            else:
                water += right_max - heights[right]
            right -= 1
    return water


def merge_sorted(
    nums1: MutableSequence[int], m: int, nums2: Sequence[int], n: int
) -> None:
    """Merge the first ``n`` items of ``nums2`` into ``nums1`` in place.

    ``nums1`` holds ``m`` sorted items followed by room for at least ``n``
    more; positions past ``m + n`` are left untouched.
    """
    if m < 0 or n < 0:
        raise ValueError("m and n must not be negative")
    if n > len(nums2):
        raise ValueError("n exceeds the length of nums2")
    if m + n > len(nums1):
        raise ValueError("nums1 has no room for m + n items")
    nums1[: m + n] = list(heapq.merge(nums1[:m], nums2[:n]))


def single_number(nums: Sequence[int]) -> int:
    """Return the value that appears once where every other appears twice."""
    _require_items(nums, "nums")
    ordered = sorted(nums)
    for first, second in zip(ordered[::2], ordered[1::2]):
        if first != second:
            return first
    return ordered[-1]


def max_profit(prices: Sequence[int]) -> int:
    """Return the best profit from one buy followed by one later sale."""
    _require_items(prices, "prices")
    buy_price = prices[0]
    best = 0
    for price in prices[1:]:
        if buy_price > price:
            buy_price = price
        else:
            best = max(best, price - buy_price)
    return best


def max_area(heights: Sequence[int]) -> int:
    """Return the most water held between two of the vertical lines."""
    best = 0
    left, right = 0, len(heights) - 1
    while left < right:
        best = max(best, (right - left) * min(heights[left], heights[right]))
        if heights[left] < heights[right]:
            left += 1
        else:
            right -= 1
    return best


def max_subarray(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous run of ``nums``."""
    _require_items(nums, "nums")
    current = 0
    best = nums[0]
    for value in nums:
        current += value
        best = max(best, current)
        if current < 0:
            current = 0
    return best


def sort_colors(nums: MutableSequence[int]) -> None:
    """Sort a sequence of 0s, 1s and 2s in place in one pass.

    Any value other than 0 or 1 is placed with the 2s.
    """
    low, mid, high = 0, 0, len(nums) - 1
    while mid <= high:
        if nums[mid] == 0:
            nums[low], nums[mid] = nums[mid], nums[low]
            low += 1
            mid += 1
        elif nums[mid] == 1:
            mid += 1
        else:
            nums[high], nums[mid] = nums[mid], nums[high]
            high -= 1


def next_permutation(nums: MutableSequence[int]) -> None:
    """Rearrange ``nums`` in place into the next lexicographic permutation.

    The last permutation wraps around to the first (ascending order).
    """
    pivot = len(nums) - 2
    while pivot >= 0 and nums[pivot] >= nums[pivot + 1]:
        pivot -= 1
    if pivot >= 0:
        successor = len(nums) - 1
        while nums[successor] <= nums[pivot]:
            successor -= 1
        nums[pivot], nums[successor] = nums[successor], nums[pivot]
    nums[pivot + 1 :] = nums[pivot + 1 :][::-1]


def product_except_self(nums: Sequence[int]) -> list[int]:
    """Return, for each position, the product of every other element."""
    result = []
    running = 1
    for value in nums:
        result.append(running)
        running *= value
    running = 1
    for index in reversed(range(len(nums))):
        result[index] *= running
        running *= nums[index]
    return result


def subarray_sum(nums: Sequence[int], k: int) -> int:
    """Return the number of contiguous runs of ``nums`` that sum to ``k``."""
    seen = Counter({0: 1})
    count = 0
    total = 0
    for value in nums:
        total += value
        count += seen[total - k]
        seen[total] += 1
    return count