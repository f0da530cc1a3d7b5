"""Route representations accepted by the indicator aggregation.

Aggregation only needs three things from a route: the ordered jobs it visits
(``route``), its size (``len``) and an emptiness test (``empty``).  Partial
routes built during construction and the fixed-width route matrix used by the
search operators both provide them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Protocol, Sequence, runtime_checkable

import numpy as np


@runtime_checkable
class RouteLike(Protocol):
    @property
    def route(self) -> Sequence[int]: ...

    def __len__(self) -> int: ...

    def empty(self) -> bool: ...


@dataclass
class ListRoute:
    """List-backed route, as produced while a solution is being constructed."""

    vehicle: int
    route: List[int] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.route)

    def empty(self) -> bool:
        return not self.route


class ArrayRoute:
    """Read-only view of row ``r`` of a ``(m, L_max)`` route matrix."""

    __slots__ = ("_row", "_length")

    def __init__(self, routes: np.ndarray, lens: np.ndarray, r: int):
        length = int(lens[r])
        if length < 0 or length > routes.shape[1]:
            raise ValueError(f"route {r} length {length} outside [0, {routes.shape[1]}]")
        self._length = length
        self._row = routes[r, :length]

    @property
    def route(self) -> np.ndarray:
        return self._row

    def __len__(self) -> int:
        return self._length

    def empty(self) -> bool:
        return self._length == 0


def routes_from_arrays(routes: np.ndarray, lens: np.ndarray) -> List[ArrayRoute]:
    """Wrap every vehicle row of ``routes``/``lens``, in vehicle-rank order."""

    routes = np.asarray(routes)
    lens = np.asarray(lens)
    if routes.ndim != 2 or lens.shape != (routes.shape[0],):
        raise ValueError("routes must be (m, L_max) and lens (m,)")
    return [ArrayRoute(routes, lens, r) for r in range(routes.shape[0])]
