import csv
import json


class RankingLog:
    def __init__(self):
        self.rows = []

    def append(self, rank, candidate, ind, *, profit=0, status=""):
        self.rows.append(
            (
                int(rank),
                int(candidate),
                int(ind.priority_sum),
                int(ind.assigned),
                int(ind.eval.cost),
                int(ind.eval.duration),
                int(ind.eval.distance),
                int(ind.used_vehicles),
                int(ind.routes_hash),
                int(profit),
                status,
            )
        )

    def save_csv(self, path):
        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow(
                [
                    "rank",
                    "candidate",
                    "priority_sum",
                    "assigned",
                    "cost",
                    "duration",
                    "distance",
                    "used_vehicles",
                    "routes_hash",
                    "profit",
                    "status",
                ]
            )
            for row in self.rows:
                w.writerow(list(row))


def save_summary_json(path, log, params, *, extra=None):
    best = log.rows[0] if log.rows else None
    data = {
        "candidates": len(log.rows),
        "best_candidate": best[1] if best else None,
        "best_cost": best[4] if best else None,
        "best_assigned": best[3] if best else None,
        "params": params,
    }
    if extra:
        data.update(extra)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
