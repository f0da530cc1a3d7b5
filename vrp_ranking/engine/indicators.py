"""Reduce a candidate solution to the values used to rank it."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

import numpy as np

from ..config.config import HASH_SEED
from .cost_model import priority_sum_for_route, route_eval_for_vehicle
from .eval import Eval, total
from .fingerprint import routes_hash
from .routes import RouteLike, routes_from_arrays


@dataclass(frozen=True)
class SolutionIndicators:
    """Immutable summary of one solution snapshot.

    Holds no reference to the instance or the routes it was built from, so it
    can be handed to other workers as-is.
    """

    priority_sum: int = 0
    assigned: int = 0
    eval: Eval = field(default_factory=Eval)
    used_vehicles: int = 0
    # Hash of the sorted route sizes.
    routes_hash: int = 0


def aggregate(
    data,
    routes: Sequence[RouteLike],
    *,
    hash_seed: int = HASH_SEED,
    priority_fn=priority_sum_for_route,
    eval_fn=route_eval_for_vehicle,
) -> SolutionIndicators:
    """Build indicators for ``routes``, one entry per vehicle in rank order.

    ``priority_fn`` and ``eval_fn`` default to the bundled cost model and are
    called exactly once per route.
    """

    priority_sum = 0
    assigned = 0
    evals = []
    used_vehicles = 0
    sizes = []

    for v_rank, r in enumerate(routes):
        priority_sum += int(priority_fn(data, r))
        assigned += len(r.route)
        evals.append(eval_fn(data, v_rank, r))
        if not r.empty():
            used_vehicles += 1
        sizes.append(len(r))

    return SolutionIndicators(
        priority_sum=priority_sum,
        assigned=assigned,
        eval=total(evals),
        used_vehicles=used_vehicles,
        routes_hash=routes_hash(sizes, seed=hash_seed),
    )


def indicators_from_arrays(data, routes: np.ndarray, lens: np.ndarray, **kwargs) -> SolutionIndicators:
    return aggregate(data, routes_from_arrays(routes, lens), **kwargs)
