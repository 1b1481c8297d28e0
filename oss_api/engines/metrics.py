"""
Shared aggregation helpers.

Every engine builds its views from the same handful of operations: a rounded
percentage, a mean, a stable ranking and a grouped count. Keeping them here
means the "empty collection returns 0" and "ties keep input order" rules are
written once.
"""

import math
from typing import Callable, Iterable, TypeVar

T = TypeVar("T")
K = TypeVar("K")


def round_half_up(value: float) -> int:
    """Round .5 away from zero on the positive side (2.5 -> 3, -2.5 -> -2).

    Python's built-in round() uses banker's rounding, which would turn an
    approval rate of 62.5% into 62."""
    return int(math.floor(value + 0.5))


def percentage(matching: int | float, total: int | float) -> int:
    """(matching / total) * 100, rounded half-up. 0 when total is 0."""
    if not total:
        return 0
    return round_half_up(matching / total * 100)


def mean(values: Iterable[float]) -> float:
    """Arithmetic mean. 0.0 for an empty input."""
    values = list(values)
    if not values:
        return 0.0
    return sum(values) / len(values)


def rank(
    items: Iterable[T],
    key: Callable[[T], float],
    descending: bool = True,
    limit: int | None = None,
) -> list[T]:
    """Sort by a numeric key. Equal keys keep their input order."""
    if descending:
        ordered = sorted(items, key=lambda item: -key(item))
    else:
        ordered = sorted(items, key=key)
    return top_n(ordered, limit)


def top_n(items: list[T], n: int | None) -> list[T]:
    if n is None:
        return list(items)
    return list(items[:max(n, 0)])


def count_by(items: Iterable[T], key: Callable[[T], K]) -> dict[K, int]:
    counts: dict[K, int] = {}
    for item in items:
        k = key(item)
        counts[k] = counts.get(k, 0) + 1
    return counts


def group_by(items: Iterable[T], key: Callable[[T], K]) -> dict[K, list[T]]:
    groups: dict[K, list[T]] = {}
    for item in items:
        groups.setdefault(key(item), []).append(item)
    return groups


def sum_by(items: Iterable[T], key: Callable[[T], K], value: Callable[[T], float]) -> dict[K, float]:
    totals: dict[K, float] = {}
    for item in items:
        k = key(item)
        totals[k] = totals.get(k, 0) + value(item)
    return totals
