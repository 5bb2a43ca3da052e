"""String puzzles: ciphers, palindromes, patterns and lookups."""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Iterable, Sequence

FORFEIT = "PREDAJA"
NO_PALINDROME = "I'm Sorry Hansoo"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class NoPalindromeError(ValueError):
    """Raised when the letters of a name cannot form a palindrome."""

    def __init__(self, name: str) -> None:
        super().__init__(NO_PALINDROME)
        self.name = name


def _rotate(ch: str, first: str) -> str:
    return chr((ord(ch) - ord(first) + 13) % 26 + ord(first))


def rot13(text: str) -> str:
    """Rotate every ASCII letter by 13 places, leaving other characters alone."""
    out = []
    for ch in text:
        if "A" <= ch <= "Z":
            out.append(_rotate(ch, "A"))
        elif "a" <= ch <= "z":
            out.append(_rotate(ch, "a"))
        else:
            out.append(ch)
    return "".join(out)


def team_initials(surnames: Iterable[str]) -> str:
    """Return, in order, the initials shared by at least five surnames.

    If no initial is shared by five players the team forfeits and
    ``"PREDAJA"`` is returned.
    """
    counts = Counter(name[0] for name in surnames if name)
    initials = "".join(ch for ch in sorted(counts) if counts[ch] >= 5)
    return initials or FORFEIT


def is_palindrome(word: str) -> bool:
    """Tell whether the word reads the same backwards."""
    return word == word[::-1]


def build_palindrome(name: str) -> str:
    """Rearrange the letters of ``name`` into the smallest palindrome.

    Raises NoPalindromeError when more than one letter occurs an odd
    number of times.
    """
    counts = Counter(name)
    odd = [ch for ch in sorted(counts) if counts[ch] % 2 == 1]
    if len(odd) > 1:
        raise NoPalindromeError(name)
    half = "".join(ch * (counts[ch] // 2) for ch in sorted(counts))
    middle = odd[-1] if odd else ""
    return half + middle + half[::-1]


def match_pattern(pattern: str, filenames: Iterable[str]) -> list[bool]:
    """Check each file name against a pattern holding a single ``*``."""
    prefix, star, suffix = pattern.partition("*")
    if not star:
        raise ValueError(f"pattern {pattern!r} has no '*'")
    need = len(prefix) + len(suffix)
    return [
        len(name) >= need and name.startswith(prefix) and name.endswith(suffix)
        for name in filenames
    ]


def is_good_word(word: str) -> bool:
    """Tell whether equal letters of the word pair up without crossing arcs."""
    stack: list[str] = []
    for ch in word:
        if stack and stack[-1] == ch:
            stack.pop()
        else:
            stack.append(ch)
    return not stack


def count_good_words(words: Iterable[str]) -> int:
    """Count the good words among ``words``."""
    return sum(1 for word in words if is_good_word(word))


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


class PokemonIndex:
    """A two-way index between names and their 1-based positions."""

    def __init__(self, names: Sequence[str]) -> None:
        self._numbers: dict[str, int] = {}
        self._names: dict[int, str] = {}
        for number, name in enumerate(names, start=1):
            self._numbers[name] = number
            self._names[number] = name

    def lookup(self, query: str) -> int | str:
        """Return the name for a numeric query, or the number for a name.

        A query whose leading integer is zero (or absent) is taken as a
        name. Raises KeyError when nothing matches.
        """
        number = _leading_int(query)
        if number == 0:
            return self._numbers[query]
        return self._names[number]