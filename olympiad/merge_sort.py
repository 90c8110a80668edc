"""Merge sort that sorts the two halves of large inputs concurrently."""

from __future__ import annotations

import heapq
import os
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import Any

__all__ = ["BASE_SIZE", "merge_sorted", "parallel_merge_sort"]

BASE_SIZE = 1_000_000
"""Inputs no longer than this are sorted directly rather than split."""


def _concurrency() -> int:
    return os.cpu_count() or 0


def merge_sorted(left: Sequence[Any], right: Sequence[Any]) -> list[Any]:
    """Merge two sorted sequences into one sorted list.

    On equal values the element from ``left`` comes first.
    """
    return list(heapq.merge(left, right))


def parallel_merge_sort(data: Sequence[Any], depth: int = 0) -> list[Any]:
    """Return a sorted copy of ``data``.

    Inputs longer than ``BASE_SIZE`` are halved; while ``depth`` is below
    the number of available processors the two halves are sorted in
    separate threads, deeper down they are sorted one after the other.
    """
    if len(data) <= BASE_SIZE:
        return sorted(data)

    middle = len(data) // 2
    left = list(data[:middle])
    right = list(data[middle:])

    if depth < _concurrency():
        with ThreadPoolExecutor(max_workers=2) as pool:
            left_sort = pool.submit(parallel_merge_sort, left, depth + 1)
            right_sort = pool.submit(parallel_merge_sort, right, depth + 1)
            sorted_left = left_sort.result()
            sorted_right = right_sort.result()
    else:
        sorted_left = parallel_merge_sort(left, depth + 1)
        sorted_right = parallel_merge_sort(right, depth + 1)

    return merge_sorted(sorted_left, sorted_right)