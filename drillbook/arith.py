"""Number puzzles: repunits, windows, clocks, factorials and powers."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import accumulate, combinations

GAME_SECONDS = 48 * 60


def repunit_length(n: int) -> int:
    """Return the number of digits of the smallest all-ones multiple of ``n``."""
    if n <= 0 or n % 2 == 0 or n % 5 == 0:
        raise ValueError(f"no all-ones number is a multiple of {n}")
    remainder = 1 % n
    length = 1
    while remainder:
        remainder = (remainder * 10 + 1) % n
        length += 1
    return length


def max_window_sum(values: Sequence[int], k: int) -> int:
    """Return the largest sum of ``k`` consecutive values."""
    if not 1 <= k <= len(values):
        raise ValueError(f"window {k} does not fit {len(values)} values")
    sums = [0, *accumulate(values)]
    return max(hi - lo for lo, hi in zip(sums, sums[k:]))


def _parse_clock(clock: str) -> int:
    minutes, sep, seconds = clock.partition(":")
    if not sep:
        raise ValueError(f"bad clock {clock!r}")
    return int(minutes) * 60 + int(seconds)


def lead_times(goals: Iterable[tuple[int, str]]) -> tuple[int, int]:
    """Return the seconds each team led, given ``(team, "MM:SS")`` goals in order."""
    score = {1: 0, 2: 0}
    lead = {1: 0, 2: 0}
    previous = 0

    def credit(until: int) -> None:
        if score[1] > score[2]:
            lead[1] += until - previous
        elif score[2] > score[1]:
            lead[2] += until - previous

    for team, clock in goals:
        now = _parse_clock(clock)
        credit(now)
        if team in score:
            score[team] += 1
        previous = now
    if previous < GAME_SECONDS:
        credit(GAME_SECONDS)
    return lead[1], lead[2]


def format_clock(seconds: int) -> str:
    """Format seconds as ``MM:SS``."""
    minutes, secs = divmod(seconds, 60)
    return f"{minutes:02d}:{secs:02d}"


def trailing_zeros(n: int) -> int:
    """Return the number of trailing zeros of ``n!``."""
    count = 0
    power = 5
    while power <= n:
        count += n // power
        power *= 5
    return count


def outfit_combinations(items: Iterable[tuple[str, str]]) -> int:
    """Count the non-empty outfits from ``(name, category)`` items, one per category."""
    per_category = Counter(category for _, category in items)
    return math.prod(count + 1 for count in per_category.values()) - 1


def mod_pow(base: int, exponent: int, modulus: int) -> int:
    """Return ``base ** exponent % modulus`` for a positive exponent."""
    if exponent < 1:
        raise ValueError("exponent must be at least 1")
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    return pow(base, exponent, modulus)


def count_pair_sums(values: Sequence[int], target: int) -> int:
    """Count the pairs of distinct positions whose values add up to ``target``."""
    return sum(1 for a, b in combinations(values, 2) if a + b == target)