"""Better-than relation between two solutions.

Two objectives are supported:

* priority (profit) mode, used as soon as either side carries priority:
  maximise ``priority_sum * scale - cost``, then more jobs, fewer vehicles,
  lower duration, lower distance, lower routes hash;
* lexicographic mode otherwise: more jobs, lower cost, fewer vehicles, lower
  duration, lower distance, lower routes hash.

``scale`` must be the same value the cost model used to scale costs (see
``config.config.priority_scale``).  The relation is a strict weak ordering
within one mode.  Choosing the mode per pair can break transitivity when
zero-priority and positive-priority solutions are mixed, so population-level
helpers pin the mode once with :func:`population_mode`.
"""

from __future__ import annotations

from typing import Iterable, Optional

from ..config.config import PRIORITY_SCALE
from ..config.enums import MODE_LEXICOGRAPHIC, MODE_PRIORITY, RANKING_MODES
from .indicators import SolutionIndicators


def uses_priority(a: SolutionIndicators, b: SolutionIndicators) -> bool:
    return a.priority_sum > 0 or b.priority_sum > 0


def pair_mode(a: SolutionIndicators, b: SolutionIndicators) -> int:
    return MODE_PRIORITY if uses_priority(a, b) else MODE_LEXICOGRAPHIC


def population_mode(items: Iterable[SolutionIndicators]) -> int:
    """Single objective for a whole population: priority if anyone has some."""
    for ind in items:
        if ind.priority_sum > 0:
            return MODE_PRIORITY
    return MODE_LEXICOGRAPHIC


def profit(ind: SolutionIndicators, scale: int = PRIORITY_SCALE) -> int:
    # Python ints do not overflow; the int64 bound is checked on input.
    return ind.priority_sum * scale - ind.eval.cost


def _profit_better(a, b, scale):
    a_profit = profit(a, scale)
    b_profit = profit(b, scale)
    if a_profit != b_profit:
        return a_profit > b_profit
    if a.assigned != b.assigned:
        return a.assigned > b.assigned
    if a.used_vehicles != b.used_vehicles:
        return a.used_vehicles < b.used_vehicles
    if a.eval.duration != b.eval.duration:
        return a.eval.duration < b.eval.duration
    if a.eval.distance != b.eval.distance:
        return a.eval.distance < b.eval.distance
    return a.routes_hash < b.routes_hash


def _lexicographic_better(a, b):
    if a.assigned != b.assigned:
        return a.assigned > b.assigned
    if a.eval.cost != b.eval.cost:
        return a.eval.cost < b.eval.cost
    if a.used_vehicles != b.used_vehicles:
        return a.used_vehicles < b.used_vehicles
    if a.eval.duration != b.eval.duration:
        return a.eval.duration < b.eval.duration
    if a.eval.distance != b.eval.distance:
        return a.eval.distance < b.eval.distance
    return a.routes_hash < b.routes_hash


def better_than(
    a: SolutionIndicators,
    b: SolutionIndicators,
    *,
    scale: int = PRIORITY_SCALE,
    mode: Optional[int] = None,
) -> bool:
    """Return True when ``a`` is strictly preferred to ``b``.

    ``mode=None`` picks the objective for this pair only; pass
    ``MODE_PRIORITY`` or ``MODE_LEXICOGRAPHIC`` to pin it.  The default
    ``scale`` only matches instances using the default duration and cost
    factors; otherwise pass ``priority_scale(data)``.
    """

    if mode is None:
        mode = pair_mode(a, b)
    if mode == MODE_PRIORITY:
        return _profit_better(a, b, scale)
    if mode == MODE_LEXICOGRAPHIC:
        return _lexicographic_better(a, b)
    raise ValueError(f"unknown ranking mode: {mode!r}")


def compare(a, b, *, scale: int = PRIORITY_SCALE, mode: Optional[int] = None) -> int:
    """-1 if ``a`` is better, 1 if ``b`` is better, 0 when equivalent."""
    if better_than(a, b, scale=scale, mode=mode):
        return -1
    if better_than(b, a, scale=scale, mode=mode):
        return 1
    return 0


def resolve_mode(ranking_mode: str, items: Iterable[SolutionIndicators]) -> Optional[int]:
    """Translate the ``ranking_mode`` setting into a ``mode`` argument."""
    if ranking_mode not in RANKING_MODES:
        raise ValueError(f"ranking_mode must be one of {RANKING_MODES}, got {ranking_mode!r}")
    if ranking_mode == "fixed":
        return population_mode(items)
    return None
