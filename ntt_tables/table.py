"""Immutable NTT constant table."""

from dataclasses import dataclass
from enum import Enum
from typing import List

import numpy as np

from modarith.errors import TableAllocationError

TABLE_DTYPE = np.int64


class TableKind(Enum):
    """Formula a table was generated from."""
    PSI_POWERS = "psi_powers_ntt"
    INV_PSI_POWERS = "inv_psi_powers_ntt"
    SCALED_INV_PSI_POWERS = "scaled_inv_psi_powers_ntt"
    SHOUP = "shoup_ntt"

    @property
    def prefix(self) -> str:
        return self.value


@dataclass(frozen=True, eq=False)
class Table:
    """n values in [0, q) tagged with the formula that produced them.

    The values array is made read-only on construction.
    """
    kind: TableKind
    q: int
    n: int
    values: np.ndarray

    def __post_init__(self) -> None:
        if self.values.shape != (self.n,):
            raise ValueError(f"Table length mismatch: {self.values.shape} != ({self.n},)")
        if self.n and (self.values.min() < 0 or self.values.max() >= self.q):
            raise ValueError(f"Table entries must lie in [0, {self.q})")
        self.values.flags.writeable = False

    def __len__(self) -> int:
        return self.n

    def __getitem__(self, i):
        return self.values[i]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Table):
            return NotImplemented
        return (self.kind == other.kind and self.q == other.q and self.n == other.n
                and np.array_equal(self.values, other.values))

    def __hash__(self) -> int:
        return hash((self.kind, self.q, self.n, self.values.tobytes()))

    @property
    def identifier(self) -> str:
        """C identifier; encodes kind, n and q so tables can share a file."""
        if self.kind is TableKind.SHOUP:
            return f"{self.kind.prefix}{self.n}_{self.q}"
        return f"{self.kind.prefix}{self.q}n{self.n}"

    def as_list(self) -> List[int]:
        return [int(v) for v in self.values]


def allocate(n: int) -> np.ndarray:
    """Zeroed storage for an n-entry table."""
    try:
        return np.zeros(n, dtype=TABLE_DTYPE)
    except MemoryError as e:
        raise TableAllocationError(n) from e
