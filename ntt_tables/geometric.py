"""
Geometric power tables for the negacyclic NTT.

First table:  psi_powers[i] = psi^i mod q
Second table: inv_psi_powers[i] = psi^(-i) mod q
Third table:  scaled_inv_psi_powers[i] = psi^(-i) * n^(-1) mod q

for i = 0 to n-1.
"""

from typing import List

import numpy as np

from modarith.roots import RootBundle
from ntt_tables.table import Table, TableKind, allocate


def power_table(n: int, q: int, x0: int, b: int) -> np.ndarray:
    """Table a[i] = x0 * b^i mod q for i = 0 to n-1, by repeated multiplication."""
    if n <= 0:
        raise ValueError(f"Table size must be positive, got {n}")

    a = allocate(n)
    x = x0 % q
    for i in range(n):
        a[i] = x
        x = (x * b) % q
    return a


def psi_power_table(bundle: RootBundle) -> Table:
    """psi^i mod q."""
    values = power_table(bundle.n, bundle.q, 1, bundle.psi)
    return Table(TableKind.PSI_POWERS, bundle.q, bundle.n, values)


def inv_psi_power_table(bundle: RootBundle) -> Table:
    """psi^(-i) mod q."""
    values = power_table(bundle.n, bundle.q, 1, bundle.inv_psi)
    return Table(TableKind.INV_PSI_POWERS, bundle.q, bundle.n, values)


def scaled_inv_psi_power_table(bundle: RootBundle) -> Table:
    """psi^(-i) * n^(-1) mod q. Folds the final 1/n scaling of the inverse transform."""
    values = power_table(bundle.n, bundle.q, bundle.inv_n, bundle.inv_psi)
    return Table(TableKind.SCALED_INV_PSI_POWERS, bundle.q, bundle.n, values)


def psi_power_tables(bundle: RootBundle) -> List[Table]:
    """The three geometric tables in output order."""
    return [
        psi_power_table(bundle),
        inv_psi_power_table(bundle),
        scaled_inv_psi_power_table(bundle),
    ]
