"""Searches in rotated sorted arrays and sorted matrices."""

from __future__ import annotations

from collections.abc import Sequence


def find_min_rotated(nums: Sequence[int]) -> int:
    """Minimum of a rotated ascending array of distinct values."""
    if not nums:
        raise ValueError("nums must not be empty")
    low, high = 0, len(nums) - 1
    while low < high:
        mid = (low + high) // 2
        if nums[mid] > nums[high]:
            low = mid + 1
        else:
            high = mid
    return nums[low]


def find_min_rotated_with_duplicates(nums: Sequence[int]) -> int:
    """Minimum of a rotated ascending array that may hold repeated values."""
    if not nums:
        raise ValueError("nums must not be empty")
    low, high = 0, len(nums) - 1
    while low < high:
        mid = (low + high) // 2
        if nums[mid] > nums[high]:
            low = mid + 1
        elif nums[mid] < nums[high]:
            high = mid
        else:
            high -= 1
    return nums[low]


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Whether ``target`` is in a matrix whose rows and columns ascend."""
    if not matrix or not matrix[0]:
        return False
    row, col = 0, len(matrix[0]) - 1
    while row < len(matrix) and col >= 0:
        value = matrix[row][col]
        if value == target:
            return True
        if value < target:
            row += 1
        else:
            col -= 1
    return False