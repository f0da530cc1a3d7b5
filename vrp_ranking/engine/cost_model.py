"""Per-route priority and cost evaluation.

Internal units follow the shared scaling in ``config.config``: durations are
``seconds * duration_factor`` and costs are ``user_cost * scale`` with
``scale = duration_factor * cost_factor``.  Only travel time is charged per
hour; service time counts towards duration but not cost.
"""

import numpy as np

from ..config.config import DURATION_FACTOR, priority_scale
from ..config.enums import (
    NODE_PRIORITY,
    NODE_SERVICE,
    VEH_END,
    VEH_FIXED_COST,
    VEH_PER_HOUR,
    VEH_PER_KM,
    VEH_START,
)
from .eval import Eval


def _path(data, v_rank, jobs):
    start = int(data["veh_i"][v_rank, VEH_START])
    end = int(data["veh_i"][v_rank, VEH_END])
    path = [int(j) for j in jobs]
    if start >= 0:
        path.insert(0, start)
    if end >= 0:
        path.append(end)
    return path


def priority_sum_for_route(data, route):
    jobs = np.asarray(route.route, dtype=np.int64)
    if jobs.size == 0:
        return 0
    return int(data["node_i"][jobs, NODE_PRIORITY].sum())


def route_eval_for_vehicle(data, v_rank, route):
    """Cost, duration and distance of ``route`` driven by vehicle ``v_rank``."""

    if route.empty():
        return Eval.zero()

    duration_factor = int(data.get("duration_factor", DURATION_FACTOR))
    scale = priority_scale(data)

    path = _path(data, v_rank, route.route)
    dist = data["dist"]
    ttime = data["ttime"]
    travel = 0
    distance = 0
    for a, b in zip(path[:-1], path[1:]):
        travel += int(ttime[a, b])
        distance += int(dist[a, b])

    jobs = np.asarray(route.route, dtype=np.int64)
    service = int(data["node_i"][jobs, NODE_SERVICE].sum())

    veh_c = data["veh_c"][v_rank]
    cost = (
        int(veh_c[VEH_FIXED_COST]) * scale
        + int(veh_c[VEH_PER_HOUR]) * travel * duration_factor
        + int(veh_c[VEH_PER_KM]) * distance * scale // 1000
    )
    return Eval(
        cost=cost,
        duration=(travel + service) * duration_factor,
        distance=distance,
    )
