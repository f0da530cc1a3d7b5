"""Ordering and selection over populations of ranked solutions.

Every helper accepts plain :class:`SolutionIndicators` or arbitrary items with
a ``key`` returning their indicators.  ``scale`` has no default: it must be
the instance's ``config.priority_scale(data)`` so priority and cost share
units.

When ``mode`` is not given it is fixed once for the call with
:func:`population_mode`, so sorting and reduction run on a strict weak
ordering.  ``pairwise=True`` instead lets every comparison pick its own
objective; on populations mixing zero and positive priority the result then
depends on input order.
"""

from __future__ import annotations

from functools import cmp_to_key, reduce
from typing import Callable, Iterable, List, Optional, TypeVar

from .ranking import better_than, compare, population_mode

T = TypeVar("T")


def _identity(item):
    return item


def _fixed_mode(items, key, mode, pairwise):
    if pairwise:
        if mode is not None:
            raise ValueError("pairwise ordering cannot be combined with a fixed mode")
        return None
    if mode is not None:
        return mode
    return population_mode(key(item) for item in items)


def sort_population(
    items: Iterable[T],
    *,
    scale: int,
    key: Callable[[T], object] = _identity,
    mode: Optional[int] = None,
    pairwise: bool = False,
) -> List[T]:
    """Best-first stable sort."""

    items = list(items)
    mode = _fixed_mode(items, key, mode, pairwise)
    cmp = cmp_to_key(lambda x, y: compare(key(x), key(y), scale=scale, mode=mode))
    return sorted(items, key=cmp)


def best_of(
    items: Iterable[T],
    *,
    scale: int,
    key: Callable[[T], object] = _identity,
    mode: Optional[int] = None,
    pairwise: bool = False,
) -> Optional[T]:
    """Best item, or None for an empty population.

    The winner only changes on a strict improvement, so among equivalent
    items the first one seen is kept.
    """

    items = list(items)
    if not items:
        return None
    mode = _fixed_mode(items, key, mode, pairwise)

    def pick(best, cand):
        return cand if better_than(key(cand), key(best), scale=scale, mode=mode) else best

    return reduce(pick, items)


def same_shape(a, b) -> bool:
    """Approximate duplicate test: same job count, fleet use and size multiset."""
    return (
        a.routes_hash == b.routes_hash
        and a.assigned == b.assigned
        and a.used_vehicles == b.used_vehicles
    )


def deduplicate(
    items: Iterable[T],
    *,
    scale: int,
    key: Callable[[T], object] = _identity,
    mode: Optional[int] = None,
    pairwise: bool = False,
) -> List[T]:
    """Keep the best member of every shape class, best-first."""

    kept: List[T] = []
    for item in sort_population(items, scale=scale, key=key, mode=mode, pairwise=pairwise):
        ind = key(item)
        if any(same_shape(ind, key(other)) for other in kept):
            continue
        kept.append(item)
    return kept


def select_survivors(
    items: Iterable[T],
    size: int,
    *,
    scale: int,
    key: Callable[[T], object] = _identity,
    mode: Optional[int] = None,
    pairwise: bool = False,
) -> List[T]:
    """Distinct-shape best ``size`` items; ``size <= 0`` keeps them all."""

    kept = deduplicate(items, scale=scale, key=key, mode=mode, pairwise=pairwise)
    if size > 0:
        kept = kept[:size]
    return kept
