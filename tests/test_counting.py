from collections import Counter

import pytest
from hypothesis import given, strategies as st

from algoset.counting import (
    contains_duplicate,
    contains_nearby_duplicate,
    count_good_meals,
    divide_array,
    divide_players,
    find_duplicate,
    is_possible_to_split,
    majority_element,
    majority_elements,
    min_cost,
    min_moves,
    min_moves_to_median,
    num_equiv_domino_pairs,
    result_array,
    sort_colors,
    three_consecutive_odds,
)
from algoset.numbers import MOD

small_ints = st.integers(-10, 10)


def test_majority_element_example():
    assert majority_element([2, 2, 1, 1, 1, 2, 2]) == 2


@given(st.lists(small_ints, max_size=10), small_ints, st.randoms())
def test_majority_element_finds_majority(others, value, rnd):
    nums = others + [value] * (len(others) + 1)
    rnd.shuffle(nums)
    assert majority_element(nums) == value


def test_majority_element_empty():
    with pytest.raises(ValueError):
        majority_element([])


@given(st.lists(small_ints, min_size=1, max_size=10), st.data())
def test_contains_duplicate_with_repeat(nums, data):
    repeated = data.draw(st.sampled_from(nums))
    assert contains_duplicate(nums + [repeated]) is True


@given(st.sets(small_ints, max_size=10))
def test_contains_duplicate_distinct(values):
    assert contains_duplicate(sorted(values)) is False


def test_contains_nearby_duplicate_examples():
    assert contains_nearby_duplicate([1, 2, 3, 1], 3) is True
    assert contains_nearby_duplicate([1, 0, 1, 1], 1) is True
    assert contains_nearby_duplicate([1, 2, 3, 1, 2, 3], 2) is False


@given(st.lists(small_ints, max_size=10))
def test_contains_nearby_duplicate_wide_window(nums):
    assert contains_nearby_duplicate(nums, len(nums)) == contains_duplicate(nums)


def test_majority_elements_example():
    assert majority_elements([3, 2, 3]) == [3]


@given(st.lists(st.integers(-3, 3), max_size=15))
def test_majority_elements_matches_definition(nums):
    result = majority_elements(nums)
    counts = Counter(nums)
    threshold = len(nums) // 3
    assert all(counts[value] > threshold for value in result)
    assert all(value in result for value, c in counts.items() if c > threshold)
    assert len(set(result)) == len(result)


def test_find_duplicate_example():
    assert find_duplicate([1, 3, 4, 2, 2]) == 2


def test_find_duplicate_none():
    assert find_duplicate([1, 2, 3]) == 0


@given(st.integers(1, 10).flatmap(lambda n: st.permutations(range(1, n + 1))), st.data())
def test_find_duplicate_single_repeat(perm, data):
    repeated = data.draw(st.sampled_from(perm))
    position = data.draw(st.integers(0, len(perm)))
    nums = list(perm)
    nums.insert(position, repeated)
    assert find_duplicate(nums) == repeated


def test_min_moves_example():
    assert min_moves([1, 2, 3]) == 3


def test_min_moves_empty():
    assert min_moves([]) == 0


@given(st.lists(small_ints, max_size=10), st.integers(-100, 100))
def test_min_moves_shift_invariant(nums, shift):
    assert min_moves(nums) == min_moves([n + shift for n in nums])


@given(st.lists(small_ints, min_size=1, max_size=10))
def test_min_moves_to_median_is_optimal(nums):
    result = min_moves_to_median(nums)
    assert all(result <= sum(abs(n - v) for n in nums) for v in nums)
    assert result in {sum(abs(n - v) for n in nums) for v in nums}


def test_min_moves_to_median_empty():
    with pytest.raises(ValueError):
        min_moves_to_median([])


dominoes = st.lists(st.tuples(st.integers(1, 4), st.integers(1, 4)), max_size=10)


@given(dominoes, st.data())
def test_domino_pairs_ignore_orientation(tiles, data):
    flips = data.draw(st.lists(st.booleans(), min_size=len(tiles), max_size=len(tiles)))
    turned = [(b, a) if flip else (a, b) for (a, b), flip in zip(tiles, flips)]
    assert num_equiv_domino_pairs(turned) == num_equiv_domino_pairs(tiles)


def test_domino_pairs_distinct():
    assert num_equiv_domino_pairs([[1, 2], [3, 4], [5, 6]]) == 0


def test_domino_pairs_turned_equals_same():
    assert num_equiv_domino_pairs([[1, 2], [2, 1]]) == num_equiv_domino_pairs([[1, 2], [1, 2]])
    assert num_equiv_domino_pairs([[1, 2], [2, 1]]) > 0


def test_three_consecutive_odds_examples():
    assert three_consecutive_odds([2, 6, 4, 1]) is False
    assert three_consecutive_odds([1, 2, 34, 3, 4, 5, 7, 23, 12]) is True


def test_three_consecutive_odds_ignores_negatives():
    assert three_consecutive_odds([-1, -3, -5]) is False


def test_count_good_meals_example():
    assert count_good_meals([1, 3, 5, 7, 9]) == 4


@given(st.lists(st.integers(0, 64), max_size=15))
def test_count_good_meals_order_independent(values):
    result = count_good_meals(values)
    assert result == count_good_meals(list(reversed(values)))
    assert 0 <= result < MOD


def test_divide_array_examples():
    assert divide_array([3, 2, 3, 2, 2, 2]) is True
    assert divide_array([1, 2, 3, 4]) is False


@given(st.lists(small_ints, max_size=10))
def test_divide_array_doubled(nums):
    assert divide_array(nums + nums) is True


@given(st.lists(st.tuples(small_ints, st.integers(1, 10)), min_size=1, max_size=8))
def test_min_cost_is_optimal(pairs):
    nums = [n for n, _ in pairs]
    cost = [c for _, c in pairs]
    result = min_cost(nums, cost)
    totals = {v: sum(abs(n - v) * c for n, c in pairs) for v in nums}
    assert result in totals.values()
    assert all(result <= total for total in totals.values())


@given(small_ints, st.lists(st.integers(1, 10), min_size=1, max_size=8))
def test_min_cost_equal_values(value, cost):
    assert min_cost([value] * len(cost), cost) == 0


def test_min_cost_length_mismatch():
    with pytest.raises(ValueError):
        min_cost([1, 2], [1])


def test_divide_players_example():
    assert divide_players([3, 2, 5, 1, 3, 4]) == 22


def test_divide_players_impossible():
    assert divide_players([1, 1, 2, 3]) == -1


def test_divide_players_odd_count():
    with pytest.raises(ValueError):
        divide_players([1, 2, 3])


def test_is_possible_to_split_examples():
    assert is_possible_to_split([1, 1, 2, 2, 3, 4]) is True
    assert is_possible_to_split([1, 1, 1, 1]) is False


def test_result_array_example():
    assert result_array([2, 1, 3]) == [2, 3, 1]


@given(st.lists(small_ints, min_size=2, max_size=12))
def test_result_array_is_permutation(nums):
    result = result_array(nums)
    assert sorted(result) == sorted(nums)
    assert result[0] == nums[0]


def test_result_array_too_short():
    with pytest.raises(ValueError):
        result_array([1])


@given(st.lists(st.integers(0, 2), max_size=20))
def test_sort_colors_sorts_in_place(nums):
    original = list(nums)
    sort_colors(nums)
    assert nums == sorted(original)


def test_sort_colors_rejects_other_values():
    with pytest.raises(ValueError):
        sort_colors([0, 3, 1])