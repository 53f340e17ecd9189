"""Number theory, bit manipulation and counting problems."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import combinations
from math import isqrt

_SUPER_POW_MODULUS = 1337
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def count_numbers_with_unique_digits(n: int) -> int:
    """Count the integers in [0, 10**n) whose decimal digits are all different."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    if n == 0:
        return 1
    count = 10
    unique = 9
    available = 9
    for _ in range(2, n + 1):
        unique *= available
        count += unique
        available -= 1
    return count


def min_steps(n: int) -> int:
    """Return the fewest copy-all and paste operations to get n characters from one."""
    steps = 0
    factor = 2
    while n > 1:
        while n % factor == 0:
            steps += factor
            n //= factor
        factor += 1
    return steps


def find_complement(num: int) -> int:
    """Flip every bit of num below its highest set bit."""
    if num < 0:
        raise ValueError(f"num must not be negative, got {num}")
    mask = ~0
    while num & mask:
        mask <<= 1
    return ~mask ^ num


def _digit_square_sum(n: int) -> int:
    total = 0
    while n > 0:
        n, digit = divmod(n, 10)
        total += digit * digit
    return total


def is_happy(n: int) -> bool:
    """Tell whether repeatedly summing the squares of the digits reaches 1."""
    slow = n
    fast = _digit_square_sum(n)
    while fast != 1 and slow != fast:
        slow = _digit_square_sum(slow)
        fast = _digit_square_sum(_digit_square_sum(fast))
    return fast == 1


def is_power_of_three(n: int) -> bool:
    """Tell whether n is 3 raised to a non-negative integer power."""
    if n <= 0:
        return False
    while n % 3 == 0:
        n //= 3
    return n == 1


def to_hex(num: int) -> str:
    """Return the lower-case hexadecimal form of a 32-bit integer, two's complement if negative."""
    if not _INT32_MIN <= num <= _INT32_MAX:
        raise ValueError(f"{num} does not fit in a signed 32-bit integer")
    return format(num & 0xFFFFFFFF, "x")


def read_binary_watch(turned_on: int) -> list[str]:
    """Return every "H:MM" time a binary watch shows with turned_on lit LEDs."""
    return [
        f"{hour}:{minute:02d}"
        for hour in range(12)
        for minute in range(60)
        if bin(hour).count("1") + bin(minute).count("1") == turned_on
    ]


def last_remaining(n: int) -> int:
    """Return the last number left after alternately removing every other one of 1..n."""
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    first = 1
    step = 1
    left_to_right = True
    remaining = n
    while remaining > 1:
        if left_to_right or remaining % 2 == 1:
            first += step
        remaining //= 2
        step *= 2
        left_to_right = not left_to_right
    return first


def count_primes(n: int) -> int:
    """Count the primes strictly less than n."""
    if n <= 2:
        return 0
    sieve = bytearray([1]) * n
    sieve[0] = sieve[1] = 0
    for i in range(2, isqrt(n - 1) + 1):
        if sieve[i]:
            sieve[i * i :: i] = bytes(len(range(i * i, n, i)))
    return sum(sieve)


def count_bits(n: int) -> list[int]:
    """Return the number of set bits of each integer from 0 to n."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    counts = [0] * (n + 1)
    for i in range(1, n + 1):
        counts[i] = counts[i // 2] + i % 2
    return counts


def range_bitwise_and(left: int, right: int) -> int:
    """Return the bitwise AND of every integer from left to right."""
    shift = 0
    while left != right:
        left >>= 1
        right >>= 1
        shift += 1
    return left << shift


def super_pow(a: int, b: Iterable[int]) -> int:
    """Return a to the power of the decimal number whose digits are b, modulo 1337."""
    result = 1
    for digit in b:
        if not 0 <= digit <= 9:
            raise ValueError(f"{digit} is not a decimal digit")
        result = (
            pow(result, 10, _SUPER_POW_MODULUS)
            * pow(a, digit, _SUPER_POW_MODULUS)
            % _SUPER_POW_MODULUS
        )
    return result


def integer_break(n: int) -> int:
    """Return the largest product of at least two positive integers summing to n."""
    if n < 2:
        raise ValueError(f"n must be at least 2, got {n}")
    if n == 2:
        return 1
    if n == 3:
        return 2
    product = 1
    while n > 4:
        product *= 3
        n -= 3
    return product * n


def combine(n: int, k: int) -> list[list[int]]:
    """Return every k-element combination of 1..n in lexicographic order."""
    if k < 0:
        raise ValueError(f"k must not be negative, got {k}")
    return [list(combo) for combo in combinations(range(1, n + 1), k)]