"""Sums, products and sliding windows over integer sequences."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import accumulate, pairwise


def three_sum(nums: Iterable[int]) -> list[list[int]]:
    """All distinct ascending triples of elements that sum to zero."""
    ordered = sorted(nums)
    last = len(ordered) - 1
    result: list[list[int]] = []
    for i, first in enumerate(ordered):
        if first > 0:
            break
        if i > 0 and first == ordered[i - 1]:
            continue
        low, high = i + 1, last
        while low < high:
            total = first + ordered[low] + ordered[high]
            if total == 0:
                result.append([first, ordered[low], ordered[high]])
                low += 1
                while low < high and ordered[low] == ordered[low - 1]:
                    low += 1
            elif total < 0:
                low += 1
            else:
                high -= 1
    return result


def three_sum_closest(nums: Iterable[int], target: int) -> int:
    """Sum of three elements that lies closest to ``target``."""
    ordered = sorted(nums)
    if len(ordered) < 3:
        raise ValueError("nums must hold at least three values")
    closest = sum(ordered[:3])
    last = len(ordered) - 1
    for i, first in enumerate(ordered[:-2]):
        low, high = i + 1, last
        while low < high:
            total = first + ordered[low] + ordered[high]
            if abs(total - target) < abs(closest - target):
                closest = total
            if total < target:
                low += 1
            elif total > target:
                high -= 1
            else:
                return total
    return closest


def four_sum(nums: Iterable[int], target: int) -> list[list[int]]:
    """All distinct ascending quadruples of elements that sum to ``target``."""
    ordered = sorted(nums)
    n = len(ordered)
    result: list[list[int]] = []
    for i in range(n - 3):
        if i > 0 and ordered[i] == ordered[i - 1]:
            continue
        for j in range(i + 1, n - 2):
            if j > i + 1 and ordered[j] == ordered[j - 1]:
                continue
            low, high = j + 1, n - 1
            while low < high:
                total = ordered[i] + ordered[j] + ordered[low] + ordered[high]
                if total == target:
                    result.append([ordered[i], ordered[j], ordered[low], ordered[high]])
                    while low < high and ordered[low] == ordered[low + 1]:
                        low += 1
                    while low < high and ordered[high] == ordered[high - 1]:
                        high -= 1
                    low += 1
                    high -= 1
                elif total < target:
                    low += 1
                else:
                    high -= 1
    return result


def maximum_product_of_three(nums: Iterable[int]) -> int:
    """Largest product of any three elements."""
    ordered = sorted(nums)
    if len(ordered) < 3:
        raise ValueError("nums must hold at least three values")
    largest = ordered[-1] * ordered[-2] * ordered[-3]
    with_negatives = ordered[-1] * ordered[0] * ordered[1]
    return max(largest, with_negatives)


def max_sub_array(nums: Iterable[int]) -> int:
    """Largest sum of a non-empty contiguous run of elements."""
    best: int | None = None
    current = 0
    for num in nums:
        current = max(num, current + num)
        best = current if best is None else max(best, current)
    if best is None:
        raise ValueError("nums must not be empty")
    return best


def max_product(nums: Iterable[int]) -> int:
    """Largest product of a non-empty contiguous run of elements."""
    values = iter(nums)
    try:
        first = next(values)
    except StopIteration:
        raise ValueError("nums must not be empty") from None
    high = low = best = first
    for num in values:
        candidates = (num, high * num, low * num)
        high, low = max(candidates), min(candidates)
        best = max(best, high)
    return best


def product_except_self(nums: Sequence[int]) -> list[int]:
    """For each position, the product of every other element."""
    result = [1, *accumulate(nums[:-1], lambda acc, value: acc * value)] if nums else []
    suffix = 1
    for index in reversed(range(len(nums))):
        result[index] *= suffix
        suffix *= nums[index]
    return result


def count_subarrays_product_less_than(nums: Sequence[int], k: int) -> int:
    """Number of contiguous runs of positive integers whose product is below ``k``."""
    if k == 0:
        return 0
    left = 0
    product = 1
    total = 0
    for right, value in enumerate(nums):
        product *= value
        while product >= k and left <= right:
            product //= nums[left]
            left += 1
        total += right - left + 1
    return total


def longest_ones(nums: Sequence[int], k: int) -> int:
    """Longest run of ones obtainable by flipping at most ``k`` zeros."""
    left = zeros = best = 0
    for right, value in enumerate(nums):
        if value == 0:
            zeros += 1
        if zeros > k:
            if nums[left] == 0:
                zeros -= 1
            left += 1
        if zeros <= k:
            best = max(best, right - left + 1)
    return best


def max_score(card_points: Sequence[int], k: int) -> int:
    """Best total of ``k`` cards taken from either end of the row."""
    if not 0 <= k <= len(card_points):
        raise ValueError("k must lie between 0 and the number of cards")
    total = sum(card_points[:k])
    best = total
    for dropped, taken in zip(reversed(card_points[:k]), reversed(card_points)):
        total += taken - dropped
        best = max(best, total)
    return best


def running_sum(nums: Iterable[int]) -> list[int]:
    """Prefix sums of ``nums``."""
    return list(accumulate(nums))


def find_max_consecutive_ones(nums: Iterable[int]) -> int:
    """Length of the longest run of non-zero values."""
    best = run = 0
    for value in nums:
        run = run + 1 if value else 0
        best = max(best, run)
    return best


def maximum_difference(nums: Iterable[int]) -> int:
    """Largest ``nums[j] - nums[i]`` with ``i < j`` and a positive gap, or -1."""
    smallest: int | None = None
    best = -1
    for num in nums:
        if smallest is None or num < smallest:
            smallest = num
        elif num != smallest:
            best = max(best, num - smallest)
    return best


def minimum_deletions(nums: Sequence[int]) -> int:
    """Fewest removals from either end that take out both the minimum and maximum."""
    n = len(nums)
    if not n:
        raise ValueError("nums must not be empty")
    max_index = max(range(n), key=nums.__getitem__)
    min_index = min(range(n), key=nums.__getitem__)
    low, high = sorted((min_index, max_index))
    return min(high + 1, n - low, low + 1 + n - high)


__all__ = [
    "three_sum",
    "three_sum_closest",
    "four_sum",
    "maximum_product_of_three",
    "max_sub_array",
    "max_product",
    "product_except_self",
    "count_subarrays_product_less_than",
    "longest_ones",
    "max_score",
    "running_sum",
    "find_max_consecutive_ones",
    "maximum_difference",
    "minimum_deletions",
    "pairwise",
]