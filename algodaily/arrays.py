"""Array problems: scanning, two pointers, in-place rearrangement and greedy choices."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, MutableSequence, Sequence

_MEDALS = ("Gold Medal", "Silver Medal", "Bronze Medal")


def average_waiting_time(customers: Iterable[Sequence[int]]) -> float:
    """Return the mean time customers wait, served one at a time in arrival order.

    Each customer is a pair [arrival, preparation time].
    """
    total_wait = 0
    clock = 0
    count = 0
    for arrival, duration in customers:
        clock = max(clock, arrival) + duration
        total_wait += clock - arrival
        count += 1
    if not count:
        raise ValueError("no customers given")
    return total_wait / count


def _nearest_smaller(heights: Sequence[int], indices: Iterable[int], missing: int) -> list[int]:
    nearest = [missing] * len(heights)
    stack: list[int] = []
    for i in indices:
        while stack and heights[stack[-1]] >= heights[i]:
            stack.pop()
        nearest[i] = stack[-1] if stack else missing
        stack.append(i)
    return nearest


def largest_rectangle_area(heights: Sequence[int]) -> int:
    """Return the area of the largest rectangle inside a histogram."""
    n = len(heights)
    left = _nearest_smaller(heights, range(n), -1)
    right = _nearest_smaller(heights, reversed(range(n)), n)
    return max(
        (height * (r - l - 1) for height, l, r in zip(heights, left, right)),
        default=0,
    )


def intersection(nums1: Iterable[int], nums2: Iterable[int]) -> list[int]:
    """Return the distinct values found in both, in order of first appearance in nums1."""
    others = set(nums2)
    seen: set[int] = set()
    result = []
    for value in nums1:
        if value in others and value not in seen:
            seen.add(value)
            result.append(value)
    return result


def longest_consecutive(nums: Iterable[int]) -> int:
    """Return the length of the longest run of consecutive integers among the values."""
    values = set(nums)
    best = 0
    for start in values:
        if start - 1 in values:
            continue
        end = start
        while end in values:
            end += 1
        best = max(best, end - start)
    return best


def rotate(nums: MutableSequence[int], k: int) -> None:
    """Rotate the values k places to the right, in place."""
    if not nums:
        return
    k %= len(nums)
    nums[:] = list(nums[len(nums) - k :]) + list(nums[: len(nums) - k])


def remove_duplicates(nums: MutableSequence[int]) -> int:
    """Compact a sorted sequence in place so its first k values are distinct; return k."""
    if not nums:
        return 0
    write = 1
    for previous, current in zip(list(nums), list(nums)[1:]):
        if current != previous:
            nums[write] = current
            write += 1
    return write


def lemonade_change(bills: Iterable[int]) -> bool:
    """Tell whether every customer paying 5, 10 or 20 for a 5 can be given change."""
    fives = tens = 0
    for bill in bills:
        if bill == 5:
            fives += 1
        elif bill == 10:
            if not fives:
                return False
            fives -= 1
            tens += 1
        elif tens and fives:
            tens -= 1
            fives -= 1
        elif fives >= 3:
            fives -= 3
        else:
            return False
    return True


def max_area(height: Sequence[int]) -> int:
    """Return the most water held between two of the vertical lines."""
    left, right = 0, len(height) - 1
    best = 0
    while left < right:
        best = max(best, min(height[left], height[right]) * (right - left))
        if height[left] < height[right]:
            left += 1
        else:
            right -= 1
    return best


def missing_number(nums: Sequence[int]) -> int:
    """Return the smallest value in 0..len(nums) that does not appear."""
    n = len(nums)
    present = set()
    for value in nums:
        if not 0 <= value <= n:
            raise ValueError(f"value {value} is outside 0..{n}")
        present.add(value)
    return next(i for i in range(n + 1) if i not in present)


def insert_interval(
    intervals: Iterable[Sequence[int]], new_interval: Sequence[int]
) -> list[list[int]]:
    """Insert an interval into sorted, disjoint intervals, merging where they overlap."""
    start, end = new_interval
    before: list[list[int]] = []
    after: list[list[int]] = []
    for low, high in intervals:
        if high < start and not after:
            before.append([low, high])
        elif low <= end and not after:
            start = min(start, low)
            end = max(end, high)
        else:
            after.append([low, high])
    return [*before, [start, end], *after]


def plus_one(digits: Sequence[int]) -> list[int]:
    """Add one to the number whose decimal digits are given, most significant first."""
    result = list(digits)
    for i in reversed(range(len(result))):
        if result[i] < 9:
            result[i] += 1
            return result
        result[i] = 0
    return [1, *result]


def remove_element(nums: MutableSequence[int], val: int) -> int:
    """Move the values other than val to the front, in place; return how many there are."""
    kept = [value for value in nums if value != val]
    nums[: len(kept)] = kept
    return len(kept)


def sort_colors(nums: MutableSequence[int]) -> None:
    """Sort a sequence of 0s, 1s and 2s in place in a single pass."""
    low = mid = 0
    high = len(nums) - 1
    while mid <= high:
        if nums[mid] == 0:
            nums[low], nums[mid] = nums[mid], nums[low]
            low += 1
            mid += 1
        elif nums[mid] == 1:
            mid += 1
        else:
            nums[mid], nums[high] = nums[high], nums[mid]
            high -= 1


def find_disappeared_numbers(nums: Sequence[int]) -> list[int]:
    """Return the values in 1..len(nums) that do not appear, in ascending order."""
    n = len(nums)
    present = set()
    for value in nums:
        if not 1 <= value <= n:
            raise ValueError(f"value {value} is outside 1..{n}")
        present.add(value)
    return [i for i in range(1, n + 1) if i not in present]


def find_content_children(g: Iterable[int], s: Iterable[int]) -> int:
    """Return how many children get a cookie at least as large as their greed."""
    greeds = sorted(g)
    content = 0
    for size in sorted(s):
        if content == len(greeds):
            break
        if size >= greeds[content]:
            content += 1
    return content


def find_relative_ranks(score: Sequence[int]) -> list[str]:
    """Give each athlete a medal name for the top three places, else the place number."""
    order = sorted(range(len(score)), key=lambda i: (score[i], i), reverse=True)
    ranks = [""] * len(score)
    for place, athlete in enumerate(order):
        ranks[athlete] = _MEDALS[place] if place < len(_MEDALS) else str(place + 1)
    return ranks


def third_max(nums: Iterable[int]) -> int:
    """Return the third largest distinct value, or the largest if there are fewer than three."""
    top = heapq.nlargest(3, set(nums))
    if not top:
        raise ValueError("no numbers given")
    return top[2] if len(top) == 3 else top[0]


def number_of_arithmetic_slices(nums: Sequence[int]) -> int:
    """Count contiguous runs of at least three values with a constant difference."""
    total = run = 0
    for a, b, c in zip(nums, nums[1:], nums[2:]):
        if c - b == b - a:
            run += 1
            total += run
        else:
            run = 0
    return total


def max_profit(prices: Iterable[int]) -> int:
    """Return the best profit from one purchase followed by one sale."""
    lowest = None
    best = 0
    for price in prices:
        if lowest is None or price < lowest:
            lowest = price
        else:
            best = max(best, price - lowest)
    return best