"""Error taxonomy for NTT parameter validation and table construction.

Every parameter error carries the offending value and renders the
diagnostic printed by the command-line tools through ``str()``.
"""

from typing import Optional


class NttParameterError(ValueError):
    """Base class for user-supplied parameters that cannot produce a table."""


# --- Raw bounds ---

class ModulusRangeError(NttParameterError):
    """Modulus outside [2, MAX_MODULUS)."""

    def __init__(self, raw: str, too_large: bool, limit: int):
        self.raw = raw
        self.too_large = too_large
        self.limit = limit
        if too_large:
            msg = f"The modulus is too large: max = {limit}"
        else:
            msg = f"Invalid modulus {raw}: must be at least 2"
        super().__init__(msg)


class SizeRangeError(NttParameterError):
    """Transform size outside [2, MAX_SIZE)."""

    def __init__(self, raw: str, too_large: bool, limit: int):
        self.raw = raw
        self.too_large = too_large
        self.limit = limit
        if too_large:
            msg = f"The size is too large: max = {limit}"
        else:
            msg = f"Invalid size {raw}: must be at least 2"
        super().__init__(msg)


class PsiRangeError(NttParameterError):
    """psi outside [2, q)."""

    def __init__(self, psi: int, q: int):
        self.psi = psi
        self.q = q
        super().__init__(f"psi must be between 2 and {q - 1}")


# --- Root checks ---

class InvalidRootError(NttParameterError):
    """psi^n is not -1 modulo q."""

    def __init__(self, psi: int, residue: int):
        self.psi = psi
        self.residue = residue
        super().__init__(
            f"invalid psi: {psi} is not an n-th root of -1  ({psi}^n = {residue})"
        )


class NonPrimitiveRootError(NttParameterError):
    """psi^2 has multiplicative order smaller than n."""

    def __init__(self, phi: int, witness: Optional[int] = None):
        self.phi = phi
        self.witness = witness
        msg = f"invalid psi: psi^2 is not a primitive n-th root of unity (psi^2 = {phi})"
        if witness is not None:
            msg += f"\n             (psi^2)^{witness} = 1"
        super().__init__(msg)


class SizeNotInvertibleError(NttParameterError):
    """gcd(n, q) != 1."""

    def __init__(self, n: int, q: int):
        self.n = n
        self.q = q
        super().__init__(f"invalid parameters: {n} is not invertible modulo {q}")


class PsiNotInvertibleError(NttParameterError):
    """gcd(psi, q) != 1."""

    def __init__(self, psi: int, q: int):
        self.psi = psi
        self.q = q
        super().__init__(f"invalid psi: it's not invertible modulo {q}")


class SizeNotPowerOfTwoError(NttParameterError):
    """The level-structured table needs a power-of-two size."""

    def __init__(self, n: int):
        self.n = n
        super().__init__(f"invalid size {n}: must be a power of two")


# --- Kernel / storage ---

class NotInvertibleError(ArithmeticError):
    """Raised by the kernel when gcd(value, modulus) != 1.

    This is an expected outcome for user-supplied parameters; callers turn it
    into the matching NttParameterError.
    """

    def __init__(self, value: int, modulus: int, gcd: int):
        self.value = value
        self.modulus = modulus
        self.gcd = gcd
        super().__init__(f"{value} is not invertible modulo {modulus} (gcd = {gcd})")


class TableAllocationError(MemoryError):
    """Table storage could not be reserved."""

    def __init__(self, n: int):
        self.n = n
        super().__init__(f"failed to allocate table of size {n}")
