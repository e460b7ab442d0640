"""Puzzles on integers, their digits and small number-theoretic structures."""

from __future__ import annotations

from collections import Counter, defaultdict, deque
from collections.abc import Iterable, Sequence
from itertools import count, product

MOD = 1_000_000_007


def _digit_count(number: int) -> int:
    """Number of decimal digits of a positive integer; zero for anything else."""
    return len(str(number)) if number > 0 else 0


def is_palindrome(x: int) -> bool:
    """Return True if the decimal digits of ``x`` read the same both ways."""
    if x < 0:
        return False
    digits = str(x)
    return digits == digits[::-1]


def difference_of_sums(n: int, m: int) -> int:
    """Sum of 1..n not divisible by ``m`` minus the sum of those that are."""
    total = n * (n + 1) // 2
    multiples = n // m
    divisible = m * multiples * (multiples + 1) // 2
    return total - 2 * divisible


def min_cutting_cost(n: int, m: int, k: int) -> int:
    """Cost of cutting two logs so that every piece fits a truck of length ``k``."""
    return sum(k * (length - k) for length in (n, m) if length > k)


def assign_edge_weights(edges: Iterable[Sequence[int]]) -> int:
    """Count weightings of the deepest root path (root is node 1) with odd total."""
    adjacency: defaultdict[int, list[int]] = defaultdict(list)
    edge_count = 0
    for u, v in edges:
        adjacency[u].append(v)
        adjacency[v].append(u)
        edge_count += 1
    if not edge_count:
        raise ValueError("the tree needs at least one edge")

    depth = {1: 0}
    queue = deque([1])
    while queue:
        node = queue.popleft()
        for neighbour in adjacency[node]:
            if neighbour not in depth:
                depth[neighbour] = depth[node] + 1
                queue.append(neighbour)

    max_depth = max(depth.values())
    if max_depth == 0:
        raise ValueError("node 1 is not connected to any other node")
    return pow(2, max_depth - 1, MOD)


def find_even_numbers(digits: Iterable[int]) -> list[int]:
    """All distinct even three-digit numbers buildable from ``digits``, ascending."""
    available = Counter(digits)
    return [
        100 * hundreds + 10 * tens + units
        for hundreds, tens, units in product(range(1, 10), range(10), range(0, 10, 2))
        if not Counter((hundreds, tens, units)) - available
    ]


def count_even_digit_numbers(nums: Iterable[int]) -> int:
    """How many numbers have an even count of decimal digits."""
    return sum(1 for num in nums if _digit_count(num) % 2 == 0)


def can_alice_win(nums: Iterable[int]) -> bool:
    """True unless the single-digit and double-digit sums are equal."""
    single = double = 0
    for num in nums:
        digits = _digit_count(num)
        if digits == 1:
            single += num
        elif digits == 2:
            double += num
    return single != double


def _total_distance(nums: Iterable[int], value: int) -> int:
    return sum(abs(num - value) for num in nums)


def minimum_equalindromic_cost(nums: Sequence[int]) -> int:
    """Least total change making every element equal to one palindromic number."""
    if not nums:
        raise ValueError("nums must not be empty")
    ordered = sorted(nums)
    median = ordered[len(ordered) // 2]
    if median < 0:
        raise ValueError("the median must not be negative")
    above = next(p for p in count(median) if is_palindrome(p))
    below = next(p for p in count(median, -1) if is_palindrome(p))
    return min(_total_distance(ordered, above), _total_distance(ordered, below))


def triangle_type(nums: Sequence[int]) -> str:
    """Classify three side lengths as equilateral, isosceles, scalene or none."""
    a, b, c = sorted(nums)
    if a == c:
        return "equilateral"
    if a + b > c:
        return "isosceles" if a == b or b == c else "scalene"
    return "none"