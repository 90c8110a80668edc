"""Solutions to short contest problems: tournaments, typing, dates and cards."""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Iterable, Sequence
from string import ascii_lowercase, ascii_uppercase

__all__ = [
    "runner_up_by_halves",
    "runner_up",
    "steps_to_cover",
    "split_sum",
    "CapsLockTyping",
    "assign_unique",
    "trimmed_averages",
    "day_number",
    "card_game_winner",
]

CAPS_LOCK = "CapsLock"
_SWAP_CASE = str.maketrans(
    ascii_lowercase + ascii_uppercase, ascii_uppercase + ascii_lowercase
)
_MONTHS = {
    name: number
    for number, name in enumerate(
        ("JAN", "FEB", "MAR", "APR", "MAY", "JUN",
         "JUL", "AUG", "SEP", "OCT", "NOV", "DEC"),
        start=1,
    )
}
_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_DATE = re.compile(r"(\d+)([A-Z]+)(\d+)")
_GREGORIAN_YEAR = 1582
_CALENDAR_SHIFT = 10


def runner_up_by_halves(values: Sequence[int]) -> int:
    """1-based position of the weaker of the two half champions."""
    if len(values) < 2 or len(values) % 2:
        raise ValueError("need an even number of at least two values")
    position = {value: index for index, value in enumerate(values, start=1)}
    middle = len(values) // 2
    return position[min(max(values[:middle]), max(values[middle:]))]


def runner_up(values: Sequence[int]) -> int:
    """Which finalist (1 or 2) loses a knockout where the stronger side advances."""
    size = len(values)
    if size < 2 or size & (size - 1):
        raise ValueError("need a power of two, at least two, of values")
    remaining = list(values)
    while len(remaining) > 2:
        remaining = [max(a, b) for a, b in zip(remaining[::2], remaining[1::2])]
    return 1 if remaining[0] < remaining[1] else 2


def steps_to_cover(n: int, step: int, boosts: Iterable[int]) -> int:
    """Jumps needed to reach ``n`` from 0; landing on a boost lengthens every later jump."""
    if step < 1:
        raise ValueError("step must be positive")
    boost_points = set(boosts)
    position = jumps = 0
    while position < n:
        if position in boost_points:
            step += 1
        jumps += 1
        position += step
    return jumps


def _prime_factors(n: int) -> list[int]:
    factors = []
    divisor = 2
    while n > 1:
        if n % divisor == 0:
            factors.append(divisor)
            n //= divisor
        else:
            divisor += 1
    return factors


def split_sum(n: int, m: int) -> list[int] | None:
    """Factors whose product is ``n`` and whose sum is ``m``.

    Uses the prime factors of ``n`` padded with ones; None when they
    already add up to more than ``m``.
    """
    if n < 1:
        raise ValueError("n must be positive")
    factors = _prime_factors(n)
    spare = m - sum(factors)
    if spare < 0:
        return None
    return factors + [1] * spare


class CapsLockTyping:
    """Words typed in an endlessly repeating key sequence that includes CapsLock."""

    def __init__(self, keys: Iterable[str]) -> None:
        self._words: list[str] = []
        self._toggles_before: list[int] = []
        toggles = 0
        for key in keys:
            if key == CAPS_LOCK:
                toggles += 1
            else:
                self._words.append(key)
                self._toggles_before.append(toggles)
        self._toggles = toggles

    def query(self, x: int) -> str | None:
        """The ``x``-th word typed (from 1), or None when no words are typed."""
        if x < 1:
            raise ValueError("query index starts at 1")
        if not self._words:
            return None
        laps, index = divmod(x - 1, len(self._words))
        flips = laps * self._toggles + self._toggles_before[index]
        word = self._words[index]
        return word.translate(_SWAP_CASE) if flips % 2 else word


def assign_unique(values: Iterable[int]) -> list[int]:
    """Replace each value already taken by the next free value above it."""
    taken: set[int] = set()
    result = []
    for value in values:
        while value in taken:
            value += 1
        taken.add(value)
        result.append(value)
    return result


def trimmed_averages(scores: Iterable[int]) -> list[float]:
    """Running average without the highest and lowest, from the third score on."""
    result = []
    total = 0
    low = high = None
    for count, score in enumerate(scores, start=1):
        total += score
        low = score if low is None else min(low, score)
        high = score if high is None else max(high, score)
        if count >= 3:
            result.append((total - low - high) / (count - 2))
    return result


def _gregorian_leap(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def day_number(date_text: str) -> int:
    """Day count since the start of year 1 for a date such as ``15OCT1582``."""
    match = _DATE.fullmatch(date_text)
    if match is None:
        raise ValueError(f"malformed date {date_text!r}")
    day, month_name, year_text = match.groups()
    month = _MONTHS.get(month_name)
    if month is None:
        raise ValueError(f"unknown month {month_name!r}")
    year = int(year_text)
    leap = year % 4 == 0 if year < _GREGORIAN_YEAR else _gregorian_leap(year)

    total = sum(366 if _gregorian_leap(y) else 365 for y in range(1, year))
    total += sum(_MONTH_DAYS[: month - 1])
    if leap and month > 2:
        total += 1
    total += int(day)
    return total - _CALENDAR_SHIFT if year >= _GREGORIAN_YEAR else total


def card_game_winner(hands: Sequence[Iterable[int]]) -> int:
    """Which of three players (1 to 3) empties their hand first.

    Cards of equal value are played together.  A play must beat the
    last one by having more cards, or as many cards of a higher value;
    after two passes the last player to play leads anew.
    """
    if len(hands) != 3:
        raise ValueError("the game needs exactly three hands")
    groups = [
        sorted((count, card) for card, count in Counter(hand).items()) for hand in hands
    ]
    if not all(groups):
        raise ValueError("every hand needs at least one card")

    current: tuple[int, int] | None = None
    player, last, passes = 0, 0, 0
    while True:
        hand = groups[player]
        if current is None:
            choice = 0 if hand else None
        else:
            choice = next((i for i, group in enumerate(hand) if group > current), None)
        if choice is None:
            passes += 1
        else:
            current = hand.pop(choice)
            if not hand:
                return player + 1
            last, passes = player, 0
        if passes == 2:
            current, player, passes = None, last, 0
            continue
        player = (player + 1) % 3