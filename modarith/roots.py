"""
Root-of-unity validation for negacyclic NTT parameters.

A usable psi for (q, n) satisfies psi^n = -1 (mod q) and phi = psi^2 has
multiplicative order exactly n. The validator proves both, derives the
inverses the tables need and reports the first failed condition.
"""

from dataclasses import dataclass
from typing import Optional

import galois

from modarith.errors import (
    InvalidRootError,
    NonPrimitiveRootError,
    NotInvertibleError,
    PsiNotInvertibleError,
    SizeNotInvertibleError,
)
from modarith.kernel import inverse, power

ORDER_CHECK_ENUMERATE = "enumerate"
ORDER_CHECK_FACTOR = "factor"


@dataclass(frozen=True)
class RootBundle:
    """Validated parameters. Only validate_root() builds these."""
    q: int
    n: int
    psi: int
    phi: int
    inv_n: int
    inv_psi: int

    @property
    def inv_psi_squared(self) -> int:
        """psi^(-2) mod q."""
        return (self.inv_psi * self.inv_psi) % self.q


# --- Primitivity ---

def is_primitive_enumerate(psi: int, n: int, q: int) -> Optional[int]:
    """Return the smallest i in [1, n) with psi^i = 1, or None.

    O(n) exponentiations. Kept as the default for diagnostic parity.
    """
    for i in range(1, n):
        if power(psi, i, q) == 1:
            return i
    return None


def is_primitive_by_factors(phi: int, n: int, q: int) -> Optional[int]:
    """Return n/p for the first prime p | n with phi^(n/p) = 1, or None.

    Assumes phi^n = 1, which validate_root() has already established.
    """
    primes, _ = galois.factors(n)
    for p in primes:
        if power(phi, n // p, q) == 1:
            return n // p
    return None


# --- Validator ---

def validate_root(q: int, n: int, psi: int, order_check: str = ORDER_CHECK_ENUMERATE) -> RootBundle:
    """
    Prove psi is a usable NTT root for (q, n) and derive the table constants.

    Checks run in order and stop at the first failure:
    psi^n = -1, primitivity of psi^2, invertibility of n, invertibility of psi.

    Args:
        q: Modulus
        n: Transform size
        psi: Candidate 2n-th root of unity
        order_check: "enumerate" (scan every exponent below n) or
            "factor" (test n/p for each prime p | n). Both accept and
            reject the same inputs; only the reported witness may differ.

    Returns:
        RootBundle with phi, inv_n and inv_psi

    Raises:
        InvalidRootError, NonPrimitiveRootError,
        SizeNotInvertibleError, PsiNotInvertibleError
    """
    phi = (psi * psi) % q

    residue = power(psi, n, q)
    if residue != q - 1:
        raise InvalidRootError(psi, residue)

    assert power(phi, n, q) == 1

    if order_check == ORDER_CHECK_ENUMERATE:
        witness = is_primitive_enumerate(psi, n, q)
    elif order_check == ORDER_CHECK_FACTOR:
        witness = is_primitive_by_factors(phi, n, q)
    else:
        raise ValueError(f"Unknown order check: {order_check}")
    if witness is not None:
        raise NonPrimitiveRootError(phi, witness)

    try:
        inv_n = inverse(n, q)
    except NotInvertibleError as e:
        raise SizeNotInvertibleError(n, q) from e

    try:
        inv_psi = inverse(psi, q)
    except NotInvertibleError as e:
        raise PsiNotInvertibleError(psi, q) from e

    return RootBundle(q=q, n=n, psi=psi, phi=phi, inv_n=inv_n, inv_psi=inv_psi)
