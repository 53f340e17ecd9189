import pytest

from algodaily.search import (
    find_right_interval,
    first_bad_version,
    guess_number,
    smallest_distance_pair,
)


def test_smallest_distance_repeated_values():
    assert not smallest_distance_pair([1, 6, 1], 1)


def test_smallest_distance_largest_pair():
    nums = [1, 6, 1]
    assert smallest_distance_pair(nums, 3) == max(nums) - min(nums)


def test_smallest_distance_monotonic_in_k():
    nums = [9, 2, 14, 5, 7, 30]
    pairs = len(nums) * (len(nums) - 1) // 2
    results = [smallest_distance_pair(nums, k) for k in range(1, pairs + 1)]
    assert results == sorted(results)
    assert results[-1] == max(nums) - min(nums)


def test_smallest_distance_empty():
    with pytest.raises(ValueError):
        smallest_distance_pair([], 1)


@pytest.mark.parametrize("picked", [1, 6, 10, 37, 100])
def test_guess_number_finds_pick(picked):
    calls = []

    def guess(num):
        calls.append(num)
        if num > picked:
            return -1
        return 1 if num < picked else 0

    assert guess_number(100, guess) == picked
    assert len(calls) <= 7


def test_guess_number_pick_out_of_range():
    assert guess_number(10, lambda num: 1) == -1


def test_find_right_interval_none():
    assert find_right_interval([[1, 2]]) == [-1]


@pytest.mark.parametrize(
    "intervals",
    [[[3, 4], [2, 3], [1, 2]], [[1, 4], [2, 3], [3, 4]], [[5, 9], [1, 5], [5, 5], [10, 12]]],
)
def test_find_right_interval_is_minimal(intervals):
    result = find_right_interval(intervals)
    assert len(result) == len(intervals)
    for (_, end), j in zip(intervals, result):
        candidates = [start for start, _ in intervals if start >= end]
        if j == -1:
            assert not candidates
        else:
            assert intervals[j][0] == min(candidates)


@pytest.mark.parametrize("bad", [1, 2, 7, 50])
def test_first_bad_version(bad):
    assert first_bad_version(50, lambda version: version >= bad) == bad