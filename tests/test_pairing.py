"""
Hadamard pairing & discrete-log equality tests
"""
import pytest

import pairing_r1cs.pairing as pairing_module
from pairing_r1cs.curve import G1, G2, ec_pairing, target_one
from pairing_r1cs.errors import DimensionMismatch
from pairing_r1cs.pairing import hadamard_pairing, check_equality_discrete_logs


@pytest.fixture
def no_pairing(monkeypatch):
    """페어링이 호출되면 실패하도록 만든다."""
    def fail(*args):
        raise AssertionError("페어링이 호출되면 안 된다")
    monkeypatch.setattr(pairing_module, "ec_pairing", fail)


class TestHadamardPairing:
    def test_empty(self):
        assert hadamard_pairing([], []) == []

    def test_length_mismatch(self, no_pairing):
        with pytest.raises(DimensionMismatch):
            hadamard_pairing(G1.encrypt([1, 2]), G2.encrypt([1]))

    def test_elementwise_products_in_exponent(self):
        """[e(2G1, 5G2), e(3G1, 7G2)] == [e(10G1, G2), e(21G1, G2)]"""
        lhs = hadamard_pairing(G1.encrypt([2, 3]), G2.encrypt([5, 7]))
        rhs = hadamard_pairing(G1.encrypt([10, 21]), [G2.generator] * 2)
        assert len(lhs) == 2
        assert lhs == rhs

    def test_order_preserved(self):
        result = hadamard_pairing(G1.encrypt([1, 2]), [G2.generator] * 2)
        assert result[0] == ec_pairing(G2.generator, G1.generator)
        assert result[1] == ec_pairing(G2.generator, G1.mul(G1.generator, 2))
        assert result[0] != result[1]

    def test_identity_entry(self):
        assert hadamard_pairing([G1.zero], [G2.generator]) == [target_one()]


class TestDiscreteLogEquality:
    def test_matched_pair(self):
        scalars = [1, 2, -1]
        assert check_equality_discrete_logs(G1.encrypt(scalars), G2.encrypt(scalars))

    def test_zero_entries(self):
        assert check_equality_discrete_logs(G1.encrypt([0]), G2.encrypt([0]))

    def test_corrupted_entry(self):
        a_g1 = G1.encrypt([1, 2, 3])
        a_g2 = G2.encrypt([1, 5, 3])
        assert not check_equality_discrete_logs(a_g1, a_g2)

    def test_swapped_entries(self):
        assert not check_equality_discrete_logs(G1.encrypt([2, 3]), G2.encrypt([3, 2]))

    def test_empty(self):
        assert check_equality_discrete_logs([], [])

    def test_length_mismatch(self, no_pairing):
        with pytest.raises(DimensionMismatch):
            check_equality_discrete_logs(G1.encrypt([1, 2]), G2.encrypt([1, 2, 3]))
