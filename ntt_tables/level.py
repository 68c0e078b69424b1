"""
Level-structured (Shoup-style) twiddle table for an iterative Cooley-Tukey NTT.

Input: q, n and phi = psi^2, a primitive n-th root of unity modulo q.

Output: w[t + j] = (phi^(n/2t))^j for t = 1, 2, 4, ..., n/2 and j = 0, ..., t-1.

Each stage t owns the contiguous slice [t, 2t). Index 0 is not used and
holds 0. The transform indexes the table with the same (t, j) pair, so the
layout must match exactly.
"""

from typing import Iterator, Optional, Tuple

import numpy as np

from modarith.kernel import power
from modarith.params import is_power_of_two
from modarith.roots import RootBundle
from ntt_tables.table import Table, TableKind, allocate


def level_slots(n: int) -> Iterator[Tuple[int, int]]:
    """Yield (t, j) in write order. The slot index is t + j."""
    t = 1
    while t < n:
        for j in range(t):
            yield t, j
        t <<= 1


def stage_step(phi: int, n: int, t: int, q: int) -> int:
    """Twiddle step of stage t: phi^(n / 2t) mod q."""
    return power(phi, n // (2 * t), q)


def build_shoup_table(n: int, q: int, phi: int, out: Optional[np.ndarray] = None) -> np.ndarray:
    """
    Build the level-structured table for n, q, phi.

    n must be a power of two. Writes into out when given (length n),
    otherwise into fresh storage.
    """
    assert is_power_of_two(n), f"Table size must be a power of 2, got {n}"

    a = allocate(n) if out is None else out
    assert len(a) == n

    a[0] = 0  # not used
    i = 1
    x, y = 1, 1
    for t, j in level_slots(n):
        if j == 0:
            x = 1
            y = stage_step(phi, n, t, q)
        assert i == t + j
        assert i < n
        a[i] = x
        i += 1
        x = (x * y) % q

    assert i == n
    return a


def shoup_table(bundle: RootBundle) -> Table:
    values = build_shoup_table(bundle.n, bundle.q, bundle.phi)
    return Table(TableKind.SHOUP, bundle.q, bundle.n, values)


def stage(table: Table, t: int) -> np.ndarray:
    """The t twiddles of stage t."""
    if not is_power_of_two(t) or t >= table.n:
        raise ValueError(f"Stage must be a power of 2 below {table.n}, got {t}")
    return table.values[t:2 * t]
