"""Dataset and configuration helpers for the command-line glue layer.

Instances are loaded into plain dicts of NumPy integer arrays: YAML/JSON
configuration, CSV/Parquet node and vehicle tables and NPZ matrices or
candidate route sets.  ``validate_inputs`` enforces the instance-level bounds
the ranking depends on, most notably that ``priority * scale`` fits into a
signed 64-bit integer.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, Mapping, Tuple

import numpy as np
import pandas as pd
import yaml

from ..config.config import INT64_MAX, MAX_PRIORITY, priority_scale
from ..config.enums import (
    F_NODE_I,
    F_VEH_C,
    F_VEH_I,
    NODE_PRIORITY,
    NODE_SERVICE,
    VEH_END,
    VEH_FIXED_COST,
    VEH_PER_HOUR,
    VEH_PER_KM,
    VEH_START,
)


def load_config(path_yaml: Path) -> Dict:
    """Read a YAML (or JSON) configuration file.

    Parameters
    ----------
    path_yaml:
        Path to the configuration file.

    Returns
    -------
    dict
        Parsed configuration dictionary.  Empty files resolve to ``{}``.
    """

    path = Path(path_yaml)
    if not path.exists():
        raise FileNotFoundError(path)

    text = path.read_text(encoding="utf-8").strip()
    if not text:
        return {}

    if path.suffix.lower() == ".json":
        return json.loads(text)

    cfg = yaml.safe_load(text)
    return cfg or {}


def _read_frame(path_like: Path) -> pd.DataFrame:
    """Return a Pandas ``DataFrame`` from CSV or Parquet input."""

    path = Path(path_like)
    if not path.exists():
        raise FileNotFoundError(path)
    if path.suffix.lower() in {".parquet", ".pq"}:
        df = pd.read_parquet(path)
    else:
        df = pd.read_csv(path)
    if df.empty:
        raise ValueError(f"empty table: {path}")
    return df.fillna(0)


def _column(df: pd.DataFrame, name: str, default) -> np.ndarray:
    if name in df.columns:
        return df[name].to_numpy(dtype=np.int64, copy=True)
    return np.full(len(df.index), default, dtype=np.int64)


def load_nodes(path_table: Path) -> Tuple[np.ndarray, np.ndarray]:
    """Load node coordinates plus priority/service columns."""

    df = _read_frame(path_table)
    if not {"x", "y"}.issubset(df.columns):
        raise ValueError("node table must contain 'x' and 'y' columns")

    n = len(df.index)
    coords = df[["x", "y"]].to_numpy(dtype=np.float64, copy=True)

    node_i = np.zeros((n, F_NODE_I), dtype=np.int64)
    node_i[:, NODE_PRIORITY] = _column(df, "priority", 0)
    node_i[:, NODE_SERVICE] = _column(df, "service", 0)
    return coords, node_i


def load_vehicles(
    path_table: Path,
    *,
    default_per_hour: int = 3600,
    default_per_km: int = 0,
) -> Tuple[np.ndarray, np.ndarray]:
    """Load depot indices and cost coefficients for every vehicle."""

    df = _read_frame(path_table)
    if not {"start_depot", "end_depot"}.issubset(df.columns):
        raise ValueError("vehicle table must contain 'start_depot' and 'end_depot'")

    m = len(df.index)
    veh_i = np.zeros((m, F_VEH_I), dtype=np.int64)
    veh_c = np.zeros((m, F_VEH_C), dtype=np.int64)

    veh_i[:, VEH_START] = _column(df, "start_depot", -1)
    veh_i[:, VEH_END] = _column(df, "end_depot", -1)

    veh_c[:, VEH_FIXED_COST] = _column(df, "fixed_cost", 0)
    veh_c[:, VEH_PER_HOUR] = _column(df, "per_hour", default_per_hour)
    veh_c[:, VEH_PER_KM] = _column(df, "per_km", default_per_km)
    return veh_i, veh_c


def load_matrices(path_npz: Path) -> Tuple[np.ndarray, np.ndarray]:
    """Load distance (metres) and travel-time (seconds) matrices."""

    path = Path(path_npz)
    with np.load(path) as data:
        dist = np.rint(data["dist"]).astype(np.int64)
        ttime = np.rint(data["ttime"]).astype(np.int64) if "ttime" in data else dist.copy()
    return dist, ttime


def load_candidates(path_npz: Path) -> Tuple[np.ndarray, np.ndarray]:
    """Load ``k`` candidate solutions as ``routes (k, m, L_max)``, ``lens (k, m)``."""

    path = Path(path_npz)
    with np.load(path) as data:
        routes = np.asarray(data["routes"], dtype=np.int64)
        lens = np.asarray(data["lens"], dtype=np.int64)
    if routes.ndim == 2:
        routes = routes[None, ...]
        lens = lens[None, ...]
    if routes.ndim != 3 or lens.shape != routes.shape[:2]:
        raise ValueError("candidates must hold routes (k, m, L_max) and lens (k, m)")
    return routes, lens


def validate_inputs(data: Mapping[str, np.ndarray], *, max_priority: int = MAX_PRIORITY) -> None:
    """Run shape checks and the priority bounds the ranking relies on."""

    dist = np.asarray(data["dist"])
    ttime = np.asarray(data["ttime"])
    node_i = np.asarray(data["node_i"])
    veh_i = np.asarray(data["veh_i"])
    veh_c = np.asarray(data["veh_c"])

    n = node_i.shape[0]
    m = veh_i.shape[0]

    if dist.shape != (n, n):
        raise ValueError("dist must have shape (n, n)")
    if ttime.shape != (n, n):
        raise ValueError("ttime must match dist dimensions")
    if node_i.shape != (n, F_NODE_I):
        raise ValueError("node_i must have shape (n, F_NODE_I)")
    if veh_i.shape != (m, F_VEH_I):
        raise ValueError("veh_i must have shape (m, F_VEH_I)")
    if veh_c.shape != (m, F_VEH_C):
        raise ValueError("veh_c must have shape (m, F_VEH_C)")

    if np.any(dist < 0) or np.any(ttime < 0):
        raise ValueError("matrix entries must be >= 0")
    if np.any(node_i[:, NODE_SERVICE] < 0):
        raise ValueError("service times must be >= 0")
    if np.any(veh_c < 0):
        raise ValueError("vehicle costs must be >= 0")
    if np.any(veh_i < -1) or np.any(veh_i >= n):
        raise ValueError("depot indices must be -1 or a valid node")

    priorities = node_i[:, NODE_PRIORITY]
    if np.any(priorities < 0):
        raise ValueError("priorities must be >= 0")
    if np.any(priorities > max_priority):
        raise ValueError(f"priorities must be <= {max_priority}")
    total = int(priorities.sum())
    if total * priority_scale(data) > INT64_MAX:
        raise ValueError("total priority too large for profit comparison")


def validate_candidates(routes: np.ndarray, lens: np.ndarray, n: int, m: int) -> None:
    if routes.shape[1] != m:
        raise ValueError("candidate vehicle dimension mismatch")
    if np.any(lens < 0) or np.any(lens > routes.shape[2]):
        raise ValueError("candidate route lengths out of range")
    for k in range(routes.shape[0]):
        for r in range(m):
            seq = routes[k, r, : int(lens[k, r])]
            if np.any(seq < 0) or np.any(seq >= n):
                raise ValueError(f"candidate {k} route {r} visits an unknown node")


def compute_euclid(coords: np.ndarray) -> np.ndarray:
    """Rounded Euclidean distances for datasets without matrices."""

    diff = coords[:, None, :] - coords[None, :, :]
    return np.rint(np.sqrt(np.sum(diff * diff, axis=-1))).astype(np.int64)


__all__ = [
    "load_config",
    "load_nodes",
    "load_vehicles",
    "load_matrices",
    "load_candidates",
    "validate_inputs",
    "validate_candidates",
    "compute_euclid",
]
