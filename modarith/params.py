"""Raw parameter bounds and argument parsing for the table tools."""

from dataclasses import dataclass

import galois

from modarith.errors import (
    ModulusRangeError,
    PsiRangeError,
    SizeNotPowerOfTwoError,
    SizeRangeError,
)

# Exclusive upper bounds accepted on the command line
MAX_MODULUS = 0xFFFF
MAX_SIZE = 100000


@dataclass(frozen=True)
class NttParams:
    """Bound-checked (q, n, psi) triple. Says nothing about root validity."""
    q: int
    n: int
    psi: int

    @property
    def phi(self) -> int:
        return (self.psi * self.psi) % self.q


def parse_modulus(raw: str) -> int:
    """Parse and bound-check the modulus argument."""
    q = int(raw)
    if q <= 1:
        raise ModulusRangeError(raw, too_large=False, limit=MAX_MODULUS)
    if q >= MAX_MODULUS:
        raise ModulusRangeError(raw, too_large=True, limit=MAX_MODULUS)
    return q


def parse_size(raw: str) -> int:
    """Parse and bound-check the transform size argument."""
    n = int(raw)
    if n <= 1:
        raise SizeRangeError(raw, too_large=False, limit=MAX_SIZE)
    if n >= MAX_SIZE:
        raise SizeRangeError(raw, too_large=True, limit=MAX_SIZE)
    return n


def parse_psi(raw: str, q: int) -> int:
    """Parse psi and check 2 <= psi < q."""
    psi = int(raw)
    if psi <= 1 or psi >= q:
        raise PsiRangeError(psi, q)
    return psi


def parse_params(modulus: str, size: str, psi: str) -> NttParams:
    """
    Parse the three positional arguments in order.

    The first failing bound is reported; later arguments are not looked at.

    Raises:
        ValueError: if an argument is not an integer
        NttParameterError: if an argument is out of range
    """
    q = parse_modulus(modulus)
    n = parse_size(size)
    return NttParams(q=q, n=n, psi=parse_psi(psi, q))


def is_power_of_two(n: int) -> bool:
    return n > 0 and (n & (n - 1)) == 0


def require_power_of_two(n: int) -> None:
    """Precondition of the level-structured table builder."""
    if not is_power_of_two(n):
        raise SizeNotPowerOfTwoError(n)


def check_modulus_prime(q: int) -> bool:
    """True if q is prime. Composite moduli are tolerated by the tools."""
    return galois.is_prime(q)
