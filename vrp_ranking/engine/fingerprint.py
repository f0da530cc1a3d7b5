"""Order-independent fingerprint of a solution's route sizes."""

from __future__ import annotations

import numpy as np
from numba import njit

from ..config.config import HASH_SEED

_GOLDEN = np.uint64(0x9E3779B9)
_MASK32 = np.uint64(0xFFFFFFFF)
_SHL = np.uint64(6)
_SHR = np.uint64(2)


@njit(cache=True)
def _fold_sizes(sizes, seed):
    h = seed & _MASK32
    for i in range(sizes.shape[0]):
        mixed = sizes[i] + _GOLDEN + ((h << _SHL) & _MASK32) + (h >> _SHR)
        h = h ^ (mixed & _MASK32)
    return h


def routes_hash(sizes, seed=HASH_SEED) -> int:
    """Hash the multiset of ``sizes`` into a 32-bit value.

    Sizes are sorted before folding so any vehicle order gives the same value.
    Collisions are possible; the value is only a tie-break and a cheap
    duplicate-shape signal.
    """

    arr = np.sort(np.asarray(sizes, dtype=np.uint64).reshape(-1))
    return int(_fold_sizes(arr, np.uint64(seed)))
