"""Array algorithms: searching, rotation, pairs and subsequences."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from itertools import pairwise


def sorted_squares(values: Iterable[int]) -> list[int]:
    """Squares of a sorted sequence, in ascending order, in linear time."""
    remaining = deque(values)
    squares: deque[int] = deque()
    while remaining:
        if remaining[0] * remaining[0] > remaining[-1] * remaining[-1]:
            value = remaining.popleft()
        else:
            value = remaining.pop()
        squares.appendleft(value * value)
    return list(squares)


def binary_search(values: Sequence, target) -> int | None:
    """Index of ``target`` in the sorted ``values``, or None if absent."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if values[mid] == target:
            return mid
        if values[mid] < target:
            low = mid + 1
        else:
            high = mid - 1
    return None


def max_subarray_sum(values: Iterable[int]) -> int:
    """Largest sum of a non-empty contiguous run of ``values`` (Kadane)."""
    best: int | None = None
    current = 0
    for value in values:
        current += value
        if best is None or current > best:
            best = current
        if current < 0:
            current = 0
    if best is None:
        raise ValueError("max_subarray_sum needs at least one value")
    return best


def _rotation(values: Iterable, steps: int) -> tuple[list, int]:
    if steps < 0:
        raise ValueError("rotation steps must be non-negative")
    items = list(values)
    if not items:
        return items, 0
    return items, steps % len(items)


def rotate_right(values: Iterable, k: int) -> list:
    """Rotate to the right by ``k`` positions."""
    items, k = _rotation(values, k)
    if not k:
        return items
    return items[-k:] + items[:-k]


def rotate_left(values: Iterable, d: int) -> list:
    """Rotate to the left by ``d`` positions."""
    items, d = _rotation(values, d)
    return items[d:] + items[:d]


def three_sum(values: Iterable[int]) -> list[list[int]]:
    """All distinct sorted triplets that sum to zero, in ascending order."""
    nums = sorted(values)
    size = len(nums)
    triplets: list[list[int]] = []
    for i, first in enumerate(nums):
        if i > 0 and first == nums[i - 1]:
            continue
        j, k = i + 1, size - 1
        while j < k:
            total = first + nums[j] + nums[k]
            if total > 0:
                k -= 1
            elif total < 0:
                j += 1
            else:
                triplets.append([first, nums[j], nums[k]])
                j += 1
                k -= 1
                while j < k and nums[j] == nums[j - 1]:
                    j += 1
                while j < k and nums[k] == nums[k + 1]:
                    k -= 1
    return triplets


def max_profit(prices: Iterable[int]) -> int:
    """Best profit from one buy followed by one later sell; 0 if none."""
    best = 0
    lowest: int | None = None
    for price in prices:
        if lowest is None or price <= lowest:
            lowest = price
        else:
            best = max(best, price - lowest)
    return best


def _mountain_length(values: Sequence[int], peak: int) -> int:
    start = end = peak
    while start > 0 and values[start - 1] < values[start]:
        start -= 1
    while end < len(values) - 1 and values[end + 1] < values[end]:
        end += 1
    return end - start + 1


def longest_mountain(values: Iterable[int]) -> int:
    """Length of the longest strictly rising then falling run; 0 if none."""
    items = list(values)
    best = 0
    for peak in range(1, len(items) - 1):
        if items[peak - 1] < items[peak] > items[peak + 1]:
            best = max(best, _mountain_length(items, peak))
    return best if best >= 3 else 0


def minimum_abs_difference(values: Iterable[int]) -> list[tuple[int, int]]:
    """All ascending pairs of neighbours whose difference is the smallest."""
    ordered = sorted(values)
    neighbours = list(pairwise(ordered))
    if not neighbours:
        return []
    smallest = min(abs(b - a) for a, b in neighbours)
    return [(a, b) for a, b in neighbours if abs(b - a) == smallest]


def find_median_sorted_arrays(first: Sequence[int], second: Sequence[int]) -> float:
    """Median of the union of two sorted sequences, in logarithmic time."""
    if len(first) > len(second):
        first, second = second, first
    n1, n2 = len(first), len(second)
    total = n1 + n2
    if total == 0:
        raise ValueError("median of two empty sequences is undefined")
    left_size = (total + 1) // 2
    low, high = 0, n1
    while low <= high:
        cut1 = (low + high) // 2
        cut2 = left_size - cut1
        l1 = first[cut1 - 1] if cut1 > 0 else float("-inf")
        l2 = second[cut2 - 1] if cut2 > 0 else float("-inf")
        r1 = first[cut1] if cut1 < n1 else float("inf")
        r2 = second[cut2] if cut2 < n2 else float("inf")
        if l1 <= r2 and l2 <= r1:
            if total % 2:
                return float(max(l1, l2))
            return (max(l1, l2) + min(r1, r2)) / 2
        if l1 > r2:
            high = cut1 - 1
        else:
            low = cut1 + 1
    raise ValueError("inputs must be sorted in ascending order")


def longest_increasing_subsequence(values: Iterable[int]) -> list[int]:
    """One longest strictly increasing subsequence of ``values``."""
    items = list(values)
    if not items:
        return []
    lengths: list[int] = []
    for i, value in enumerate(items):
        lengths.append(
            1 + max((lengths[j] for j in range(i) if items[j] < value), default=0)
        )
    wanted = max(lengths)
    picked = []
    for value, length in zip(reversed(items), reversed(lengths)):
        if length == wanted:
            picked.append(value)
            wanted -= 1
    picked.reverse()
    return picked