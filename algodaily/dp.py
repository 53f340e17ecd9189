"""Dynamic programming problems."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def climb_stairs(n: int) -> int:
    """Count the ways to climb n steps taking one or two at a time."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    previous, current = 1, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def num_decodings(s: str) -> int:
    """Count the ways to decode a digit string where 1..26 stand for A..Z."""
    if any(not "0" <= ch <= "9" for ch in s):
        raise ValueError(f"{s!r} is not a decimal digit string")
    if not s or s[0] == "0":
        return 0
    before, current = 1, 1
    for i in range(1, len(s)):
        ways = current if s[i] != "0" else 0
        if 10 <= int(s[i - 1 : i + 1]) <= 26:
            ways += before
        before, current = current, ways
    return current


def coin_change(coins: Iterable[int], amount: int) -> int:
    """Return the fewest coins that sum to amount, or -1 if it cannot be made."""
    if amount < 0:
        raise ValueError(f"amount must not be negative, got {amount}")
    denominations = list(coins)
    unreachable = amount + 1
    fewest = [unreachable] * (amount + 1)
    fewest[0] = 0
    for total in range(1, amount + 1):
        for coin in denominations:
            if 0 < coin <= total:
                fewest[total] = min(fewest[total], fewest[total - coin] + 1)
    return -1 if fewest[amount] > amount else fewest[amount]


def word_break(s: str, word_dict: Iterable[str]) -> bool:
    """Tell whether s splits into a sequence of dictionary words."""
    words = set(word_dict)
    reachable = [True] + [False] * len(s)
    for end in range(1, len(s) + 1):
        reachable[end] = any(
            reachable[start] and s[start:end] in words for start in range(end)
        )
    return reachable[-1]


def rob(nums: Sequence[int]) -> int:
    """Return the largest sum of values with no two chosen values adjacent."""
    n = len(nums)
    if n == 0:
        return 0
    if n == 1:
        return nums[0]
    if n == 2:
        return max(nums[0], nums[1])
    skipped = taken = 0
    for value in nums:
        skipped, taken = taken, max(taken, value + skipped)
    return taken