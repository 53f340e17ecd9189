"""String manipulation problems: parsing, arithmetic on digit strings, pattern checks."""

from __future__ import annotations

from collections import Counter, defaultdict
from collections.abc import Iterable, Sequence
from itertools import combinations, groupby, zip_longest

_VOWELS = frozenset("aeiouAEIOU")
_MINUTES_PER_DAY = 1440


def _digits(text: str, base: int = 10) -> list[int]:
    allowed = "0123456789"[:base]
    for ch in text:
        if ch not in allowed:
            raise ValueError(f"{text!r} is not a base-{base} digit string")
    return [ord(ch) - ord("0") for ch in text]


def _add_digit_strings(first: str, second: str, base: int) -> str:
    result = []
    carry = 0
    pairs = zip_longest(
        reversed(_digits(first, base)), reversed(_digits(second, base)), fillvalue=0
    )
    for x, y in pairs:
        carry, digit = divmod(x + y + carry, base)
        result.append(digit)
    if carry:
        result.append(carry)
    return "".join(str(digit) for digit in reversed(result))


def reverse_parentheses(s: str) -> str:
    """Reverse the text inside each pair of parentheses, innermost first, dropping the pairs."""
    stack: list[str] = []
    for ch in s:
        if ch == ")":
            chunk = []
            while stack and stack[-1] != "(":
                chunk.append(stack.pop())
            if stack:
                stack.pop()
            stack.extend(chunk)
        else:
            stack.append(ch)
    return "".join(stack)


def _longest_balanced_run(chars: Iterable[str], opener: str, closer: str) -> int:
    opened = closed = best = 0
    for ch in chars:
        if ch == opener:
            opened += 1
        elif ch == closer:
            closed += 1
        if opened < closed:
            opened = closed = 0
        elif opened == closed:
            best = max(best, 2 * opened)
    return best


def longest_valid_parentheses(s: str) -> int:
    """Return the length of the longest well-formed parentheses run."""
    return max(
        _longest_balanced_run(s, "(", ")"),
        _longest_balanced_run(reversed(s), ")", "("),
    )


def group_anagrams(words: Iterable[str]) -> list[list[str]]:
    """Group words that are anagrams of each other, in order of first appearance."""
    groups: defaultdict[str, list[str]] = defaultdict(list)
    for word in words:
        groups["".join(sorted(word))].append(word)
    return list(groups.values())


def remove_stars(s: str) -> str:
    """Let each '*' delete the nearest kept character to its left."""
    kept: list[str] = []
    for ch in s:
        if ch == "*":
            if not kept:
                raise ValueError("a star has no character to remove")
            kept.pop()
        else:
            kept.append(ch)
    return "".join(kept)


def convert_zigzag(s: str, num_rows: int) -> str:
    """Write s in a zigzag over num_rows rows and read it back row by row."""
    if num_rows < 1:
        raise ValueError(f"num_rows must be at least 1, got {num_rows}")
    if num_rows == 1:
        return s
    rows: list[list[str]] = [[] for _ in range(min(num_rows, len(s)))]
    row = 0
    going_down = False
    for ch in s:
        rows[row].append(ch)
        if row == 0 or row == num_rows - 1:
            going_down = not going_down
        row += 1 if going_down else -1
    return "".join("".join(chars) for chars in rows)


def count_and_say(n: int) -> str:
    """Return the n-th term of the count-and-say sequence, starting from "1"."""
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    term = "1"
    for _ in range(n - 1):
        term = "".join(f"{len(list(run))}{digit}" for digit, run in groupby(term))
    return term


def multiply(num1: str, num2: str) -> str:
    """Multiply two non-negative decimal digit strings."""
    first = _digits(num1)
    second = _digits(num2)
    if num1 == "0" or num2 == "0":
        return "0"
    product = [0] * (len(first) + len(second))
    for i in reversed(range(len(first))):
        for j in reversed(range(len(second))):
            total = first[i] * second[j] + product[i + j + 1]
            product[i + j + 1] = total % 10
            product[i + j] += total // 10
    text = "".join(str(digit) for digit in product).lstrip("0")
    return text or "0"


def length_of_last_word(s: str) -> int:
    """Return the length of the last space-separated word."""
    return len(s.rstrip(" ").rsplit(" ", 1)[-1])


def remove_k_digits(num: str, k: int) -> str:
    """Remove k digits to leave the smallest possible number."""
    if k < 0:
        raise ValueError(f"k must not be negative, got {k}")
    kept: list[str] = []
    for ch in num:
        while kept and kept[-1] > ch and k > 0:
            kept.pop()
            k -= 1
        kept.append(ch)
    if k:
        kept = kept[: max(len(kept) - k, 0)]
    return "".join(kept).lstrip("0") or "0"


def count_segments(s: str) -> int:
    """Count runs of non-space characters."""
    return sum(1 for part in s.split(" ") if part)


def decode_string(s: str) -> str:
    """Expand k[text] patterns, which may be nested."""
    stack: list[tuple[str, int]] = []
    current = ""
    count = 0
    for ch in s:
        if "0" <= ch <= "9":
            count = count * 10 + ord(ch) - ord("0")
        elif ch == "[":
            stack.append((current, count))
            current = ""
            count = 0
        elif ch == "]":
            if not stack:
                raise ValueError("unmatched ']' in encoded string")
            previous, repeat = stack.pop()
            current = previous + current * repeat
        else:
            current += ch
    return current


def _letter_mask(word: str) -> int:
    mask = 0
    for ch in word:
        offset = ord(ch) - ord("a")
        if not 0 <= offset < 26:
            raise ValueError(f"{word!r} holds a character other than a-z")
        mask |= 1 << offset
    return mask


def max_word_length_product(words: Iterable[str]) -> int:
    """Return the largest length product of two words sharing no letter."""
    entries = [(_letter_mask(word), len(word)) for word in words]
    return max(
        (
            first_len * second_len
            for (first_mask, first_len), (second_mask, second_len) in combinations(
                entries, 2
            )
            if first_mask & second_mask == 0
        ),
        default=0,
    )


def is_isomorphic(s: str, t: str) -> bool:
    """Tell whether one string's characters map one-to-one onto the other's."""
    if len(s) != len(t):
        return False
    last_in_s: dict[str, int] = {}
    last_in_t: dict[str, int] = {}
    for position, (a, b) in enumerate(zip(s, t), start=1):
        if last_in_s.get(a, 0) != last_in_t.get(b, 0):
            return False
        last_in_s[a] = position
        last_in_t[b] = position
    return True


def find_the_difference(s: str, t: str) -> str:
    """Return the character added to a shuffle of s to make t."""
    if len(t) != len(s) + 1:
        raise ValueError("t must be exactly one character longer than s")
    return chr(sum(map(ord, t)) - sum(map(ord, s)))


def str_str(haystack: str, needle: str) -> int:
    """Return the index of the first occurrence of needle, or -1."""
    return haystack.find(needle)


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Return the longest prefix shared by every string."""
    if not strs:
        return ""
    prefix = strs[0]
    for text in strs[1:]:
        while not text.startswith(prefix):
            prefix = prefix[:-1]
            if not prefix:
                return ""
    return prefix


def _is_additive_split(num: str, first_len: int, second_len: int) -> bool:
    first = num[:first_len]
    second = num[first_len : first_len + second_len]
    if (len(first) > 1 and first[0] == "0") or (len(second) > 1 and second[0] == "0"):
        return False
    x1, x2 = int(first), int(second)
    start = first_len + second_len
    while start < len(num):
        x1, x2 = x2, x1 + x2
        total = str(x2)
        if not num.startswith(total, start):
            return False
        start += len(total)
    return True


def is_additive_number(num: str) -> bool:
    """Tell whether the digits split into a sequence where each number sums the two before."""
    _digits(num)
    n = len(num)
    return any(
        _is_additive_split(num, i, j)
        for i in range(1, n // 2 + 1)
        for j in range(1, n)
        if max(i, j) <= n - i - j
    )


def add_binary(a: str, b: str) -> str:
    """Add two binary digit strings."""
    return _add_digit_strings(a, b, 2)


def detect_capital_use(word: str) -> bool:
    """Tell whether the word is all capitals, all lower case, or capitalised."""
    if all(ch.isupper() for ch in word) or all(ch.islower() for ch in word):
        return True
    return word[0].isupper() and all(ch.islower() for ch in word[1:])


def repeated_substring_pattern(s: str) -> bool:
    """Tell whether s is a shorter substring repeated several times."""
    n = len(s)
    return any(
        n % size == 0 and s[:size] * (n // size) == s for size in range(1, n // 2 + 1)
    )


def find_min_difference(time_points: Iterable[str]) -> int:
    """Return the smallest gap in minutes between any two "HH:MM" times on a clock."""
    minutes = sorted(int(time[:2]) * 60 + int(time[3:5]) for time in time_points)
    if not minutes:
        raise ValueError("no time points given")
    gaps = (later - earlier for earlier, later in zip(minutes, minutes[1:]))
    return min(min(gaps, default=_MINUTES_PER_DAY), _MINUTES_PER_DAY + minutes[0] - minutes[-1])


def reverse_vowels(s: str) -> str:
    """Reverse the order of the vowels, leaving other characters in place."""
    chars = list(s)
    left, right = 0, len(chars) - 1
    while left < right:
        while left < right and chars[left] not in _VOWELS:
            left += 1
        while left < right and chars[right] not in _VOWELS:
            right -= 1
        chars[left], chars[right] = chars[right], chars[left]
        left += 1
        right -= 1
    return "".join(chars)


def frequency_sort(s: str) -> str:
    """Rearrange characters so the most frequent come first, each in one run."""
    return "".join(ch * count for ch, count in Counter(s).most_common())


def add_strings(num1: str, num2: str) -> str:
    """Add two non-negative decimal digit strings."""
    return _add_digit_strings(num1, num2, 10)