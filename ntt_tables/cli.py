"""
Command-line tools that print NTT constant tables as C source.

Usage:
    ntt-psi-tables <modulus> <size> <psi>
    ntt-shoup-tables <modulus> <size> <psi>

psi must satisfy psi^n = -1 (mod q) with psi^2 a primitive n-th root of
unity. Parameters are echoed to stderr, tables go to stdout. Any invalid
parameter prints one diagnostic to stderr and exits with status 1 before
any table is written.
"""

import argparse
import sys
from typing import Callable, List, Optional

from modarith.errors import NttParameterError, TableAllocationError
from modarith.params import check_modulus_prime, parse_params, require_power_of_two
from modarith.roots import ORDER_CHECK_ENUMERATE, ORDER_CHECK_FACTOR, RootBundle, validate_root
from ntt_tables.geometric import psi_power_tables
from ntt_tables.level import shoup_table
from ntt_tables.serialize import write_tables
from ntt_tables.table import Table


def _build_parser(prog: str, description: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=prog, description=description)
    parser.add_argument('modulus', help='Prime modulus q, 2 <= q < 65535')
    parser.add_argument('size', help='Transform size n, 2 <= n < 100000')
    parser.add_argument('psi', help='Root candidate, 2 <= psi < q, psi^n = -1 mod q')
    parser.add_argument(
        '--order-check',
        choices=[ORDER_CHECK_ENUMERATE, ORDER_CHECK_FACTOR],
        default=ORDER_CHECK_ENUMERATE,
        help='How to prove psi^2 has order n (default: enumerate every exponent)'
    )
    return parser


def _print_summary(bundle: RootBundle, with_inverse_psi: bool) -> None:
    print("Parameters", file=sys.stderr)
    print(f"q = {bundle.q}", file=sys.stderr)
    print(f"n = {bundle.n}", file=sys.stderr)
    print(f"psi = {bundle.psi}", file=sys.stderr)
    print(f"psi^2 = {bundle.phi}", file=sys.stderr)
    if with_inverse_psi:
        print(f"psi^(-1) = {bundle.inv_psi}", file=sys.stderr)
        print(f"psi^(-2) = {bundle.inv_psi_squared}", file=sys.stderr)
    print(f"n^(-1) = {bundle.inv_n}", file=sys.stderr)


def _run(
    argv: Optional[List[str]],
    parser: argparse.ArgumentParser,
    build: Callable[[RootBundle], List[Table]],
    power_of_two: bool,
    with_inverse_psi: bool,
) -> int:
    args = parser.parse_args(argv)

    try:
        params = parse_params(args.modulus, args.size, args.psi)
    except NttParameterError as e:
        print(e, file=sys.stderr)
        return 1
    except ValueError as e:
        parser.error(str(e))

    if not check_modulus_prime(params.q):
        print(f"warning: modulus {params.q} is not prime", file=sys.stderr)

    try:
        bundle = validate_root(params.q, params.n, params.psi, order_check=args.order_check)
        if power_of_two:
            require_power_of_two(bundle.n)
    except NttParameterError as e:
        print(e, file=sys.stderr)
        return 1

    _print_summary(bundle, with_inverse_psi)

    try:
        tables = build(bundle)
    except TableAllocationError as e:
        print(e, file=sys.stderr)
        return 1

    write_tables(sys.stdout, tables)
    return 0


def psi_tables_main(argv: Optional[List[str]] = None) -> int:
    """Entry point: psi^i, psi^(-i) and psi^(-i)/n tables."""
    parser = _build_parser(
        'ntt-psi-tables',
        'Generate tables of powers of psi for the negacyclic NTT'
    )
    return _run(argv, parser, psi_power_tables, power_of_two=False, with_inverse_psi=True)


def shoup_tables_main(argv: Optional[List[str]] = None) -> int:
    """Entry point: level-structured twiddle table for the iterative NTT."""
    parser = _build_parser(
        'ntt-shoup-tables',
        'Generate the Shoup-style twiddle table for an iterative Cooley-Tukey NTT'
    )
    return _run(argv, parser, lambda bundle: [shoup_table(bundle)],
                power_of_two=True, with_inverse_psi=False)
