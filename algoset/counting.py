"""Puzzles answered by counting occurrences of values."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from operator import itemgetter

from algoset.numbers import MOD

_MAX_POWER = 21
_COLOURS = (0, 1, 2)


def majority_element(nums: Iterable[int]) -> int:
    """The element that occurs in more than half of the positions."""
    candidate: int | None = None
    votes = 0
    for num in nums:
        if votes == 0:
            candidate = num
        votes += 1 if candidate == num else -1
    if candidate is None:
        raise ValueError("nums must not be empty")
    return candidate


def contains_duplicate(nums: Iterable[int]) -> bool:
    """Whether some value occurs more than once."""
    seen: set[int] = set()
    for num in nums:
        if num in seen:
            return True
        seen.add(num)
    return False


def contains_nearby_duplicate(nums: Iterable[int], k: int) -> bool:
    """Whether equal values occur at most ``k`` positions apart."""
    last_seen: dict[int, int] = {}
    for index, num in enumerate(nums):
        if num in last_seen and index - last_seen[num] <= k:
            return True
        last_seen[num] = index
    return False


def majority_elements(nums: Sequence[int]) -> list[int]:
    """Elements that occur more than ``len(nums) // 3`` times."""
    first = second = 0
    first_votes = second_votes = 0
    for num in nums:
        if first == num:
            first_votes += 1
        elif second == num:
            second_votes += 1
        elif first_votes == 0:
            first, first_votes = num, 1
        elif second_votes == 0:
            second, second_votes = num, 1
        else:
            first_votes -= 1
            second_votes -= 1

    first_count = sum(1 for num in nums if num == first)
    second_count = sum(1 for num in nums if num != first and num == second)
    threshold = len(nums) // 3
    result = []
    if first_count > threshold:
        result.append(first)
    if second_count > threshold:
        result.append(second)
    return result


def find_duplicate(nums: Iterable[int]) -> int:
    """The first value seen twice, or 0 when every value is distinct."""
    seen: set[int] = set()
    for num in nums:
        if num in seen:
            return num
        seen.add(num)
    return 0


def min_moves(nums: Sequence[int]) -> int:
    """Moves that raise all but one element by one until all are equal."""
    smallest = min(nums, default=0)
    return sum(num - smallest for num in nums)


def min_moves_to_median(nums: Iterable[int]) -> int:
    """Unit steps that bring every element to the same value."""
    ordered = sorted(nums)
    if not ordered:
        raise ValueError("nums must not be empty")
    median = ordered[len(ordered) // 2]
    return sum(abs(median - num) for num in ordered)


def num_equiv_domino_pairs(dominoes: Iterable[Sequence[int]]) -> int:
    """Pairs of dominoes equal up to turning one of them round."""
    seen: Counter[tuple[int, int]] = Counter()
    pairs = 0
    for a, b in dominoes:
        key = (a, b) if a <= b else (b, a)
        pairs += seen[key]
        seen[key] += 1
    return pairs


def three_consecutive_odds(arr: Iterable[int]) -> bool:
    """Whether three positive odd numbers stand next to each other."""
    streak = 0
    for num in arr:
        if num > 0 and num % 2 == 1:
            streak += 1
            if streak == 3:
                return True
        else:
            streak = 0
    return False


def count_good_meals(deliciousness: Iterable[int]) -> int:
    """Pairs of items whose sum is a power of two, modulo 1e9+7."""
    seen: Counter[int] = Counter()
    total = 0
    for value in deliciousness:
        matches = sum(seen[(1 << power) - value] for power in range(_MAX_POWER + 1))
        total = (total + matches) % MOD
        seen[value] += 1
    return total


def divide_array(nums: Iterable[int]) -> bool:
    """Whether the elements can be split into pairs of equal values."""
    return all(occurrences % 2 == 0 for occurrences in Counter(nums).values())


def min_cost(nums: Sequence[int], cost: Sequence[int]) -> int:
    """Least weighted cost of making every element equal."""
    if len(nums) != len(cost):
        raise ValueError("nums and cost must have the same length")
    pairs = sorted(zip(nums, cost), key=itemgetter(0))
    half = (sum(cost) + 1) // 2
    running = 0
    median = 0
    for value, weight in pairs:
        running += weight
        if running >= half:
            median = value
            break
    return sum(abs(median - value) * weight for value, weight in pairs)


def divide_players(skill: Sequence[int]) -> int:
    """Total chemistry of teams of two with equal skill sums, or -1 if impossible."""
    if not skill or len(skill) % 2:
        raise ValueError("skill must hold a positive, even number of players")
    teams = len(skill) // 2
    total = sum(skill)
    if total % teams:
        return -1
    target = total // teams
    remaining = Counter(skill)
    chemistry = 0
    for num in skill:
        partner = target - num
        if remaining[num] == 0:
            continue
        if remaining[partner] == 0:
            return -1
        chemistry += num * partner
        remaining[num] -= 1
        remaining[partner] -= 1
    return chemistry


def is_possible_to_split(nums: Iterable[int]) -> bool:
    """Whether the elements split into two halves each of distinct values."""
    return all(occurrences <= 2 for occurrences in Counter(nums).values())


def result_array(nums: Sequence[int]) -> list[int]:
    """Deal elements into two piles by comparing their last cards, then join them."""
    if len(nums) < 2:
        raise ValueError("nums must hold at least two values")
    first, second = [nums[0]], [nums[1]]
    for num in nums[2:]:
        (first if first[-1] > second[-1] else second).append(num)
    return first + second


def sort_colors(nums: list[int]) -> None:
    """Sort a list of the values 0, 1 and 2 in place."""
    tally = Counter(nums)
    if set(tally) - set(_COLOURS):
        raise ValueError("nums may hold only 0, 1 and 2")
    nums[:] = [colour for colour in _COLOURS for _ in range(tally[colour])]