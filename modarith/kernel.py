"""
Modular arithmetic kernel shared by both table tools.

Exponentiation by square-and-multiply and modular inversion by the extended
Euclidean algorithm. Moduli stay below 2^16, so every intermediate product
is below 2^32 and matches what the C consumers compute.
"""

from dataclasses import dataclass
from typing import Iterator

from modarith.errors import NotInvertibleError


def power(x: int, k: int, q: int) -> int:
    """
    x^k modulo q.

    k = 0 gives 1 (reduced modulo q only when q = 1).
    """
    assert q > 0

    y = 1 % q
    x = x % q
    while k != 0:
        if k & 1:
            y = (y * x) % q
        k >>= 1
        x = (x * x) % q
    return y


# --- Extended Euclid ---

@dataclass(frozen=True)
class BezoutState:
    """One iteration of the extended Euclidean loop.

    Invariant: r1 = n*u1 + q*v1 and r2 = n*u2 + q*v2.
    """
    r1: int
    u1: int
    v1: int
    r2: int
    u2: int
    v2: int

    def holds(self, n: int, q: int) -> bool:
        return (self.r1 == n * self.u1 + q * self.v1
                and self.r2 == n * self.u2 + q * self.v2)


def bezout_steps(n: int, q: int) -> Iterator[BezoutState]:
    """Yield the loop state before every division step, then the final state.

    The last state yielded has r2 == 0 and r1 == gcd(n, q).
    """
    r1, u1, v1 = n, 1, 0
    r2, u2, v2 = q, 0, 1
    while True:
        state = BezoutState(r1, u1, v1, r2, u2, v2)
        assert state.holds(n, q)
        assert r1 >= 0
        yield state
        if r2 <= 0:
            return
        g = r1 // r2
        r1, r2 = r2, r1 - g * r2
        u1, u2 = u2, u1 - g * u2
        v1, v2 = v2, v1 - g * v2


def gcd(n: int, q: int) -> int:
    """Greatest common divisor computed by the same loop as inverse()."""
    *_, last = bezout_steps(n, q)
    return last.r1


def inverse(n: int, q: int) -> int:
    """
    Inverse of n modulo q, normalised into [0, q).

    Raises:
        NotInvertibleError: if gcd(n, q) != 1
    """
    *_, last = bezout_steps(n, q)

    # r1 is gcd(n, q) = n * u1 + q * v1
    if last.r1 != 1:
        raise NotInvertibleError(n, q, last.r1)

    inv = last.u1 % q
    assert (n * inv) % q == 1 % q
    return inv
