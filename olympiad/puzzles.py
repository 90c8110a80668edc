"""Small simulation and counting puzzles on sequences, strings and names."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Sequence
from itertools import pairwise

__all__ = [
    "window_minima",
    "window_maxima",
    "flip_prefixes",
    "apply_tree_moves",
    "CursorEditor",
    "spiral_number",
    "Genealogy",
    "total_height_cost",
]


def _sliding(values: Sequence[int], k: int, keeps: Callable[[int, int], bool]) -> list[int]:
    if k < 1:
        raise ValueError("window size must be positive")
    window: deque[int] = deque()
    result = []
    for i, value in enumerate(values):
        while window and window[0] <= i - k:
            window.popleft()
        while window and not keeps(values[window[-1]], value):
            window.pop()
        window.append(i)
        if i >= k - 1:
            result.append(values[window[0]])
    return result


def window_minima(values: Sequence[int], k: int) -> list[int]:
    """Minimum of every window of ``k`` consecutive values, left to right."""
    return _sliding(values, k, lambda kept, new: kept < new)


def window_maxima(values: Sequence[int], k: int) -> list[int]:
    """Maximum of every window of ``k`` consecutive values, left to right."""
    return _sliding(values, k, lambda kept, new: kept > new)


def flip_prefixes(bits: Iterable[int]) -> list[int]:
    """For each prefix length in turn, reverse that prefix and invert its bits."""
    result = list(bits)
    for length in range(1, len(result) + 1):
        result[:length] = [1 - bit for bit in reversed(result[:length])]
    return result


_FLIP = {"0": "1", "1": "0"}


def _step(digits: list[str], stop_at: str) -> None:
    for i in reversed(range(len(digits))):
        was = digits[i]
        digits[i] = _FLIP[was]
        if was == stop_at:
            return


def apply_tree_moves(position: str, moves: str) -> str:
    """Walk a binary-string position through a sequence of moves.

    ``*`` appends a ``0``, ``/`` drops the last digit, ``+`` adds one and
    ``-`` subtracts one, each in binary.
    """
    digits = list(position)
    for move in moves:
        if move == "*":
            digits.append("0")
        elif move == "/":
            if not digits:
                raise ValueError("cannot move above the root")
            digits.pop()
        elif move == "+":
            _step(digits, "0")
        elif move == "-":
            _step(digits, "1")
        else:
            raise ValueError(f"unknown move {move!r}")
    return "".join(digits)


class CursorEditor:
    """A sequence of integers edited around a cursor.

    Tracks, for every prefix ending left of the cursor, the largest
    prefix sum seen so far.
    """

    def __init__(self) -> None:
        self._left: list[int] = []
        self._right: deque[int] = deque()
        self._sums: list[int] = []
        self._best: list[int] = []

    def _push(self, x: int) -> None:
        total = x + (self._sums[-1] if self._sums else 0)
        self._left.append(x)
        self._sums.append(total)
        self._best.append(max(total, self._best[-1]) if self._best else total)

    def _pop(self) -> int:
        self._sums.pop()
        self._best.pop()
        return self._left.pop()

    def insert(self, x: int) -> None:
        """Insert ``x`` just left of the cursor."""
        self._push(x)

    def delete(self) -> None:
        """Remove the value just left of the cursor, if any."""
        if self._left:
            self._pop()

    def left(self) -> None:
        """Move the cursor one place left, if possible."""
        if self._left:
            self._right.appendleft(self._pop())

    def right(self) -> None:
        """Move the cursor one place right, if possible."""
        if self._right:
            self._push(self._right.popleft())

    def query(self, k: int) -> int:
        """Largest prefix sum among the first ``k`` values left of the cursor."""
        if not 1 <= k <= len(self._left):
            raise IndexError(f"prefix length {k} out of range")
        return self._best[k - 1]


def spiral_number(n: int, x: int, y: int) -> int:
    """Number at row ``x``, column ``y`` of an ``n``-by-``n`` clockwise spiral from 1."""
    if not (1 <= x <= n and 1 <= y <= n):
        raise ValueError("cell outside the matrix")
    k = min(x - 1, y - 1, n - x, n - y)
    side = n - 2 * k
    if side == 1:
        return n * n
    start = 1 + 4 * k * (n - k)
    if x == k + 1 and y > k + 1:
        return start + (y - (k + 1))
    if y == n - k and x > k + 1:
        return start + (side - 1) + (x - (k + 1))
    if x == n - k and y < n - k:
        return start + 2 * (side - 1) + (n - k - y)
    return start + 3 * (side - 1) + (n - k - x)


class Genealogy:
    """Father and son records that answer who a person's earliest ancestor is."""

    def __init__(self) -> None:
        self._parent: dict[str, str] = {}
        self._current: str | None = None

    def father(self, name: str) -> None:
        """Name the father that following sons belong to."""
        self._current = name
        self._parent.setdefault(name, name)

    def son(self, name: str) -> None:
        """Record ``name`` as a son of the current father."""
        if self._current is None:
            raise ValueError("no father has been named")
        self._parent[name] = self._current

    def ancestor(self, name: str) -> str:
        """Earliest known ancestor of ``name``."""
        if name not in self._parent:
            raise KeyError(name)
        path = []
        seen = set()
        node = name
        while self._parent[node] != node:
            if node in seen:
                raise ValueError(f"ancestry of {name!r} is circular")
            seen.add(node)
            path.append(node)
            node = self._parent[node]
        for member in path:
            self._parent[member] = node
        return node


def total_height_cost(values: Iterable[int]) -> int:
    """Sum over neighbouring pairs of the larger of the two."""
    return sum(max(a, b) for a, b in pairwise(values))