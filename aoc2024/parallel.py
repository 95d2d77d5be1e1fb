"""aoc2024.parallel
====================

Data-parallel fan-out over independent candidates. Only order-independent
aggregates (a count or a sum) are produced, so the helpers never have to
preserve submission order. With a single worker everything runs in-process.

Callables handed to these helpers must be picklable (module-level functions or
``functools.partial`` over them) because they run in worker processes.
"""

from __future__ import annotations

from concurrent.futures import ProcessPoolExecutor
from typing import Callable, Iterable, List, TypeVar

T = TypeVar("T")


def _chunksize(items: List, max_workers: int) -> int:
    return max(1, len(items) // (max_workers * 4))


def sum_mapped(fn: Callable[[T], int], items: Iterable[T], max_workers: int = 1) -> int:
    """Return ``sum(fn(item) for item in items)``, using worker processes if asked."""

    items = list(items)
    if max_workers <= 1 or len(items) <= 1:
        return sum(fn(item) for item in items)
    with ProcessPoolExecutor(max_workers=max_workers) as executor:
        return sum(executor.map(fn, items, chunksize=_chunksize(items, max_workers)))


def count_matching(predicate: Callable[[T], bool], items: Iterable[T], max_workers: int = 1) -> int:
    """Number of ``items`` for which ``predicate`` holds."""

    items = list(items)
    if max_workers <= 1 or len(items) <= 1:
        return sum(1 for item in items if predicate(item))
    with ProcessPoolExecutor(max_workers=max_workers) as executor:
        results = executor.map(predicate, items, chunksize=_chunksize(items, max_workers))
        return sum(1 for matched in results if matched)


__all__ = ["sum_mapped", "count_matching"]
