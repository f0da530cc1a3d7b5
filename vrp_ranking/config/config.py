# Internal unit scaling shared by the cost model and the ranking.
# Durations are stored in 1/DURATION_FACTOR seconds and one user cost unit
# maps to DURATION_FACTOR * COST_FACTOR internal cost units, so one priority
# point weighs exactly as much as one user cost unit.
DURATION_FACTOR = 100
COST_FACTOR = 3600
PRIORITY_SCALE = DURATION_FACTOR * COST_FACTOR  # 360,000

MAX_PRIORITY = 100
HASH_SEED = 0
INT64_MAX = 2**63 - 1

# Simple parameter defaults (extend freely)
DEFAULTS = {
    "duration_factor": DURATION_FACTOR,
    "cost_factor": COST_FACTOR,
    "hash_seed": HASH_SEED,
    "ranking_mode": "pairwise",  # "pairwise" or "fixed" (once per population)
    "max_priority": MAX_PRIORITY,
    "survivors": 0,              # 0 keeps every distinct shape
    "default_per_hour": 3600,
    "default_per_km": 0,
}


def priority_scale(data=None):
    """Return the priority-to-cost scale for ``data`` (or the defaults)."""
    if data is None:
        return PRIORITY_SCALE
    return int(data.get("duration_factor", DURATION_FACTOR)) * int(
        data.get("cost_factor", COST_FACTOR)
    )
