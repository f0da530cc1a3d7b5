"""Command line pipeline ranking candidate solutions of one instance."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import numpy as np

from ..config.config import DEFAULTS, priority_scale
from ..engine.indicators import indicators_from_arrays
from ..engine.population import same_shape, select_survivors, sort_population
from ..engine.ranking import profit, resolve_mode
from ..logging.metrics import RankingLog, save_summary_json
from .io import (
    compute_euclid,
    load_candidates,
    load_config,
    load_matrices,
    load_nodes,
    load_vehicles,
    validate_candidates,
    validate_inputs,
)

logger = logging.getLogger(__name__)


def _resolve(base: Path, maybe_path: Optional[str]) -> Optional[Path]:
    if maybe_path is None:
        return None
    return (base / maybe_path).resolve()


def build_params(cfg: Dict[str, Any]) -> Dict[str, Any]:
    params = DEFAULTS.copy()
    params.update(cfg.get("params", {}))
    if "ranking_mode" in cfg:
        params["ranking_mode"] = cfg["ranking_mode"]
    return params


def assemble_data(cfg: Dict[str, Any], base_dir: Path, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Load the instance and candidate set following the configuration contract."""

    if params is None:
        params = build_params(cfg)
    dataset = cfg.get("dataset", {})

    nodes_path = dataset.get("nodes")
    vehicles_path = dataset.get("vehicles")
    matrices_path = dataset.get("matrices")
    candidates_path = dataset.get("candidates")

    if nodes_path is None or vehicles_path is None:
        raise ValueError("dataset.nodes and dataset.vehicles must be provided")
    if candidates_path is None:
        raise ValueError("dataset.candidates must be provided")

    coords, node_i = load_nodes(_resolve(base_dir, nodes_path))
    veh_i, veh_c = load_vehicles(
        _resolve(base_dir, vehicles_path),
        default_per_hour=int(params["default_per_hour"]),
        default_per_km=int(params["default_per_km"]),
    )

    if matrices_path is not None:
        dist, ttime = load_matrices(_resolve(base_dir, matrices_path))
    else:
        dist = compute_euclid(coords)
        ttime = dist.copy()

    data = {
        "coords": coords,
        "dist": dist,
        "ttime": ttime,
        "node_i": node_i,
        "veh_i": veh_i,
        "veh_c": veh_c,
        "n": node_i.shape[0],
        "m": veh_i.shape[0],
        "duration_factor": int(params["duration_factor"]),
        "cost_factor": int(params["cost_factor"]),
    }
    validate_inputs(data, max_priority=int(params["max_priority"]))

    routes, lens = load_candidates(_resolve(base_dir, candidates_path))
    validate_candidates(routes, lens, data["n"], data["m"])
    data["candidates"] = (routes, lens)
    return data


def rank_indicators(indicators: List[Any], params: Dict[str, Any], *, scale: int) -> List[Dict[str, Any]]:
    """Order already aggregated candidates, best first.

    ``ranking_mode: pairwise`` lets each comparison choose its objective,
    ``fixed`` uses one objective for the whole set.  With ``survivors > 0``
    only the best member of each shape is kept, up to that many entries.

    Each entry holds the candidate index, its indicators, its profit and a
    status: ``BEST`` for the winner, ``DUPLICATE`` when a better candidate has
    the same shape, ``RANKED`` otherwise.
    """

    scored = [{"candidate": k, "indicators": ind} for k, ind in enumerate(indicators)]
    mode = resolve_mode(params["ranking_mode"], indicators)
    pairwise = params["ranking_mode"] == "pairwise"
    survivors = int(params["survivors"])

    def key(s):
        return s["indicators"]

    if survivors > 0:
        ranked = select_survivors(scored, survivors, scale=scale, key=key, mode=mode, pairwise=pairwise)
    else:
        ranked = sort_population(scored, scale=scale, key=key, mode=mode, pairwise=pairwise)

    for pos, entry in enumerate(ranked):
        ind = entry["indicators"]
        if pos == 0:
            entry["status"] = "BEST"
        elif any(same_shape(ind, prev["indicators"]) for prev in ranked[:pos]):
            entry["status"] = "DUPLICATE"
        else:
            entry["status"] = "RANKED"
        entry["profit"] = profit(ind, scale)
    return ranked


def rank_candidates(data: Dict[str, Any], routes: np.ndarray, lens: np.ndarray, params: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Aggregate every candidate and rank them with :func:`rank_indicators`."""

    seed = int(params["hash_seed"])
    indicators = [
        indicators_from_arrays(data, routes[k], lens[k], hash_seed=seed)
        for k in range(routes.shape[0])
    ]
    return rank_indicators(indicators, params, scale=priority_scale(data))


def run_pipeline(cfg: Dict[str, Any], *, base_dir: Path, outdir: Path) -> Dict[str, Any]:
    """Rank the configured candidates and write ``ranking.csv``/``summary.json``."""

    outdir.mkdir(parents=True, exist_ok=True)
    params = build_params(cfg)
    data = assemble_data(cfg, base_dir, params)
    routes, lens = data["candidates"]
    logger.info("Ranking %d candidates over %d vehicles", routes.shape[0], data["m"])

    ranked = rank_candidates(data, routes, lens, params)

    log = RankingLog()
    for pos, entry in enumerate(ranked):
        log.append(pos, entry["candidate"], entry["indicators"], profit=entry["profit"], status=entry["status"])

    priority_used = any(e["indicators"].priority_sum > 0 for e in ranked)
    meta = {
        "config_version": cfg.get("version", "dev"),
        "objective": "priority" if priority_used else "lexicographic",
        "priority_scale": priority_scale(data),
        "ranking_mode": params["ranking_mode"],
    }

    log.save_csv(outdir / "ranking.csv")
    save_summary_json(outdir / "summary.json", log, params, extra=meta)
    logger.info("Wrote ranking for %d candidates to %s", len(ranked), outdir)

    return {"ranked": ranked, "log": log, "params": params, "meta": meta}


def load_and_run(config_path: Path, outdir: Path) -> Dict[str, Any]:
    """Convenience wrapper combining ``load_config`` and :func:`run_pipeline`."""

    cfg = load_config(config_path)
    base_dir = Path(config_path).resolve().parent
    return run_pipeline(cfg, base_dir=base_dir, outdir=outdir)


def build_arg_parser():
    import argparse

    ap = argparse.ArgumentParser(description="Rank VRP candidate solutions")
    ap.add_argument("--config", required=True, help="Path to YAML/JSON configuration")
    ap.add_argument("--outdir", required=True, help="Output directory")
    ap.add_argument("--verbose", action="store_true", help="Log progress at INFO level")
    return ap


def main(argv: Optional[list[str]] = None) -> Dict[str, Any]:
    ap = build_arg_parser()
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    result = load_and_run(Path(args.config).resolve(), Path(args.outdir).resolve())

    best = result["ranked"][0] if result["ranked"] else None
    summary = {"candidates": len(result["ranked"]), "objective": result["meta"]["objective"]}
    if best is not None:
        ind = best["indicators"]
        summary.update(
            {
                "best_candidate": best["candidate"],
                "assigned": ind.assigned,
                "used_vehicles": ind.used_vehicles,
                "cost": ind.eval.cost,
            }
        )

    print("\n[DONE]")
    print(json.dumps(summary, indent=2))
    return result


__all__ = [
    "assemble_data",
    "build_arg_parser",
    "build_params",
    "load_and_run",
    "main",
    "rank_candidates",
    "rank_indicators",
    "run_pipeline",
]
