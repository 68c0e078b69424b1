"""
Tests for the level-structured twiddle table.

The transform reads w[t + j] during the butterfly pass of stage t, so the
layout is checked index by index, including which slots get written.
"""

import numpy as np
import pytest

from modarith.kernel import power
from modarith.roots import RootBundle, validate_root
from ntt_tables.level import build_shoup_table, level_slots, shoup_table, stage, stage_step
from ntt_tables.table import TableKind


class RecordingArray(np.ndarray):
    """ndarray that logs every index it is assigned through."""

    def __setitem__(self, key, value):
        self.writes.append(key)
        super().__setitem__(key, value)


def _recording(n: int) -> RecordingArray:
    a = np.zeros(n, dtype=np.int64).view(RecordingArray)
    a.writes = []
    return a


class TestLevelSlots:
    """Test the (t, j) enumeration."""

    @pytest.mark.parametrize("n", [2, 4, 8, 256, 1024])
    def test_slots_cover_one_to_n_minus_one(self, n: int) -> None:
        indices = [t + j for t, j in level_slots(n)]
        assert indices == list(range(1, n))

    def test_slot_order(self) -> None:
        assert list(level_slots(8)) == [(1, 0), (2, 0), (2, 1), (4, 0), (4, 1), (4, 2), (4, 3)]


class TestBuildShoupTable:
    """Test the table layout."""

    @pytest.mark.parametrize("q,n,psi", [(17, 8, 3), (7681, 8, 527), (7681, 256, 62), (12289, 512, 49)])
    def test_index_coverage(self, q: int, n: int, psi: int) -> None:
        """Index 0 is cleared, then 1..n-1 are each written exactly once, in order."""
        bundle = validate_root(q, n, psi)
        out = _recording(n)
        build_shoup_table(n, q, bundle.phi, out=out)
        assert out.writes[0] == 0
        assert out.writes[1:] == list(range(1, n))
        assert out[0] == 0

    def test_entries_match_formula(self, bundle: RootBundle) -> None:
        """w[t + j] = (phi^(n/2t))^j."""
        w = build_shoup_table(bundle.n, bundle.q, bundle.phi)
        assert w[0] == 0
        for t, j in level_slots(bundle.n):
            y = power(bundle.phi, bundle.n // (2 * t), bundle.q)
            assert w[t + j] == power(y, j, bundle.q)

    def test_stage_starts_are_one(self, bundle: RootBundle) -> None:
        w = build_shoup_table(bundle.n, bundle.q, bundle.phi)
        t = 1
        while t < bundle.n:
            assert w[t] == 1
            t <<= 1

    def test_last_stage_is_phi_powers(self, bundle: RootBundle) -> None:
        """Stage n/2 steps by phi itself."""
        half = bundle.n // 2
        assert stage_step(bundle.phi, bundle.n, half, bundle.q) == bundle.phi
        w = build_shoup_table(bundle.n, bundle.q, bundle.phi)
        assert list(w[half:]) == [power(bundle.phi, j, bundle.q) for j in range(half)]

    def test_first_stage_step_is_minus_one(self, bundle: RootBundle) -> None:
        """phi^(n/2) = -1 for a primitive n-th root."""
        assert stage_step(bundle.phi, bundle.n, 1, bundle.q) == bundle.q - 1

    def test_smallest_size(self) -> None:
        assert list(build_shoup_table(2, 17, 16)) == [0, 1]

    def test_known_values(self) -> None:
        """q = 7681, n = 8, phi = 527^2 = 1213."""
        assert list(build_shoup_table(8, 7681, 1213)) == [0, 1, 1, 4298, 1, 1213, 4298, 5756]

    def test_small_boundary_scenario(self) -> None:
        """q = 7681, n = 4, psi = 1925."""
        table = shoup_table(validate_root(7681, 4, 1925))
        assert table.as_list() == [0, 1, 1, 3383]

    def test_non_power_of_two_rejected(self) -> None:
        with pytest.raises(AssertionError):
            build_shoup_table(6, 7681, 685)

    def test_wrong_output_length_rejected(self) -> None:
        with pytest.raises(AssertionError):
            build_shoup_table(8, 7681, 1213, out=np.zeros(4, dtype=np.int64))


class TestShoupTable:
    """Test the Table wrapper."""

    def test_kind_and_shape(self, bundle: RootBundle) -> None:
        table = shoup_table(bundle)
        assert table.kind is TableKind.SHOUP
        assert len(table) == bundle.n
        assert table.identifier == f"shoup_ntt{bundle.n}_{bundle.q}"

    def test_stage_slices(self) -> None:
        table = shoup_table(validate_root(7681, 8, 527))
        assert list(stage(table, 1)) == [1]
        assert list(stage(table, 2)) == [1, 4298]
        assert list(stage(table, 4)) == [1, 1213, 4298, 5756]

    @pytest.mark.parametrize("t", [0, 3, 8, 16])
    def test_bad_stage(self, t: int) -> None:
        table = shoup_table(validate_root(7681, 8, 527))
        with pytest.raises(ValueError):
            stage(table, t)

    def test_idempotent(self, bundle: RootBundle) -> None:
        assert shoup_table(bundle) == shoup_table(bundle)
