"""
Pytest configuration for the NTT table tests.

Shared parameter sets. Every (q, n, psi) in VALID_TRIPLES satisfies
psi^n = -1 (mod q) with psi^2 of order exactly n.
"""

import sys
from pathlib import Path

import pytest

# Add the repository root to the path so absolute imports work without install
repo_dir = Path(__file__).parent.parent
if str(repo_dir) not in sys.path:
    sys.path.insert(0, str(repo_dir))

from modarith.roots import validate_root  # noqa: E402

VALID_TRIPLES = [
    (17, 8, 3),
    (7681, 4, 1925),
    (7681, 8, 527),
    (7681, 256, 62),
    (12289, 512, 49),
]

# Valid roots for sizes that are not powers of two
NON_POWER_OF_TWO_TRIPLES = [
    (7681, 6, 1991),
]


@pytest.fixture(params=VALID_TRIPLES, ids=lambda t: f"q{t[0]}-n{t[1]}-psi{t[2]}")
def bundle(request):
    """Validated bundle for each known-good parameter set."""
    q, n, psi = request.param
    return validate_root(q, n, psi)
