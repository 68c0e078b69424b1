"""Modarith - modular arithmetic kernel and NTT root validation."""

from modarith.errors import (
    InvalidRootError,
    ModulusRangeError,
    NonPrimitiveRootError,
    NotInvertibleError,
    NttParameterError,
    PsiNotInvertibleError,
    PsiRangeError,
    SizeNotInvertibleError,
    SizeNotPowerOfTwoError,
    SizeRangeError,
    TableAllocationError,
)
from modarith.kernel import BezoutState, bezout_steps, gcd, inverse, power
from modarith.params import (
    MAX_MODULUS,
    MAX_SIZE,
    NttParams,
    check_modulus_prime,
    is_power_of_two,
    parse_params,
    require_power_of_two,
)
from modarith.roots import (
    ORDER_CHECK_ENUMERATE,
    ORDER_CHECK_FACTOR,
    RootBundle,
    is_primitive_by_factors,
    is_primitive_enumerate,
    validate_root,
)

__all__ = [
    # Kernel
    "power",
    "inverse",
    "gcd",
    "bezout_steps",
    "BezoutState",
    # Parameters
    "MAX_MODULUS",
    "MAX_SIZE",
    "NttParams",
    "parse_params",
    "is_power_of_two",
    "require_power_of_two",
    "check_modulus_prime",
    # Roots
    "RootBundle",
    "validate_root",
    "is_primitive_enumerate",
    "is_primitive_by_factors",
    "ORDER_CHECK_ENUMERATE",
    "ORDER_CHECK_FACTOR",
    # Errors
    "NttParameterError",
    "ModulusRangeError",
    "SizeRangeError",
    "PsiRangeError",
    "InvalidRootError",
    "NonPrimitiveRootError",
    "SizeNotInvertibleError",
    "PsiNotInvertibleError",
    "SizeNotPowerOfTwoError",
    "NotInvertibleError",
    "TableAllocationError",
]
