import numpy as np

from ..config.config import COST_FACTOR, DURATION_FACTOR
from ..config.enums import *


def _euclid(a, b):
    dx = a[:, None, 0] - b[None, :, 0]
    dy = a[:, None, 1] - b[None, :, 1]
    return np.rint(np.sqrt(dx * dx + dy * dy)).astype(np.int64)


def generate_data(n_jobs=20, n_vehicles=4, max_priority=0, fixed_cost=0, seed=0):
    rng = np.random.default_rng(seed)
    # Nodes: 0 is depot, 1..n_jobs are jobs
    n = n_jobs + 1
    m = n_vehicles

    coords = np.zeros((n, 2), dtype=np.float64)
    coords[0] = np.array([5000.0, 5000.0])  # depot at center
    coords[1:] = rng.uniform(0, 10000, size=(n_jobs, 2))

    dist = _euclid(coords, coords)        # metres
    ttime = np.rint(dist / 10.0).astype(np.int64)  # 10 m/s

    node_i = np.zeros((n, F_NODE_I), dtype=np.int64)
    if max_priority > 0:
        node_i[1:, NODE_PRIORITY] = rng.integers(0, max_priority + 1, size=n_jobs)
    node_i[1:, NODE_SERVICE] = rng.integers(60, 301, size=n_jobs)

    veh_i = np.zeros((m, F_VEH_I), dtype=np.int64)
    veh_c = np.zeros((m, F_VEH_C), dtype=np.int64)
    veh_c[:, VEH_FIXED_COST] = fixed_cost
    veh_c[:, VEH_PER_HOUR] = 3600

    return {
        "n": n,
        "m": m,
        "coords": coords,
        "dist": dist,
        "ttime": ttime,
        "node_i": node_i,
        "veh_i": veh_i,
        "veh_c": veh_c,
        "duration_factor": DURATION_FACTOR,
        "cost_factor": COST_FACTOR,
    }


def random_candidates(data, k=8, L_max=None, drop_rate=0.2, seed=0):
    """Random job-to-vehicle assignments, ``routes (k, m, L_max)``, ``lens (k, m)``."""
    rng = np.random.default_rng(seed)
    n, m = data["n"], data["m"]
    if L_max is None:
        L_max = n
    routes = np.zeros((k, m, L_max), dtype=np.int64)
    lens = np.zeros((k, m), dtype=np.int64)
    for c in range(k):
        jobs = rng.permutation(np.arange(1, n))
        jobs = jobs[rng.random(jobs.size) >= drop_rate]
        owners = rng.integers(0, m, size=jobs.size)
        for job, r in zip(jobs, owners):
            L = int(lens[c, r])
            if L < L_max:
                routes[c, r, L] = job
                lens[c, r] = L + 1
    return routes, lens
