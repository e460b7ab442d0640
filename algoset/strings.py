"""Puzzles on strings and sequences of characters."""

from __future__ import annotations

import heapq
from bisect import bisect_left
from collections import defaultdict
from collections.abc import Iterable, Sequence
from operator import itemgetter

_MAX_PRIME_DIGITS = 10


def length_of_longest_substring(s: str) -> int:
    """Length of the longest substring without repeated characters."""
    last_seen: dict[str, int] = {}
    start = best = 0
    for index, char in enumerate(s):
        if char in last_seen:
            start = max(start, last_seen[char] + 1)
        best = max(best, index - start + 1)
        last_seen[char] = index
    return best


def slowest_key(release_times: Sequence[int], keys_pressed: str) -> str:
    """Key with the longest press; ties go to the lexicographically largest key."""
    if not release_times:
        raise ValueError("release_times must not be empty")
    durations = (end - begin for begin, end in zip([0, *release_times], release_times))
    return max(zip(durations, keys_pressed))[1]


def find_words_containing(words: Iterable[str], x: str) -> list[int]:
    """Indices of the words that contain the character ``x``."""
    return [index for index, word in enumerate(words) if x in word]


def _is_prime(n: int) -> bool:
    if n < 2:
        return False
    if n in (2, 3):
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    candidate = 5
    while candidate * candidate <= n:
        if n % candidate == 0 or n % (candidate + 2) == 0:
            return False
        candidate += 6
    return True


def _numeric_substrings(s: str):
    """Values of substrings of up to ten digits that do not start with zero."""
    for start, first in enumerate(s):
        if first == "0":
            continue
        for end in range(start + 1, min(start + _MAX_PRIME_DIGITS, len(s)) + 1):
            yield int(s[start:end])


def sum_of_largest_primes(s: str) -> int:
    """Sum of the three largest distinct primes found as substrings of ``s``."""
    if s and not (s.isascii() and s.isdigit()):
        raise ValueError("s must consist of decimal digits")
    primes = {value for value in _numeric_substrings(s) if _is_prime(value)}
    return sum(heapq.nlargest(3, primes))


def max_substrings(word: str) -> int:
    """Most disjoint substrings of length at least four that start and end alike."""
    positions: defaultdict[str, list[int]] = defaultdict(list)
    for index, char in enumerate(word):
        positions[char].append(index)

    intervals = []
    for occurrences in positions.values():
        for start in occurrences:
            found = bisect_left(occurrences, start + 3)
            if found < len(occurrences):
                intervals.append((start, occurrences[found]))
    intervals.sort(key=itemgetter(1))

    chosen, last_end = 0, -1
    for start, end in intervals:
        if start > last_end:
            chosen += 1
            last_end = end
    return chosen


def _adjacent(a: str, b: str) -> bool:
    return abs(ord(a) - ord(b)) in (1, 25)


def resulting_string(s: str) -> str:
    """Repeatedly drop neighbouring letters that are consecutive in the alphabet."""
    stack: list[str] = []
    for char in s:
        if stack and _adjacent(stack[-1], char):
            stack.pop()
        else:
            stack.append(char)
    return "".join(stack)