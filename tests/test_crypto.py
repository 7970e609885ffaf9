"""
Tests for commitments and the commitment verifier.
"""

import pytest

from zkpredicate.crypto import commit, derive_randomness, new_randomness, verify_commitment
from zkpredicate.errors import CommitmentMismatch


VALUE = 1990
RANDOMNESS = derive_randomness("alice", 0)


class TestCommit:

    def test_deterministic(self):
        assert commit(VALUE, RANDOMNESS) == commit(VALUE, RANDOMNESS)

    def test_components_are_128_bit(self):
        hi, lo = commit(VALUE, RANDOMNESS)
        assert 0 <= hi < 2**128
        assert 0 <= lo < 2**128

    def test_hiding_with_different_randomness(self):
        assert commit(VALUE, 1) != commit(VALUE, 2)

    def test_negative_values(self):
        assert commit(-1, RANDOMNESS) != commit(1, RANDOMNESS)

    def test_value_out_of_range(self):
        with pytest.raises(OverflowError):
            commit(2**63, RANDOMNESS)

    def test_new_randomness_is_fresh(self):
        r1, r2 = new_randomness(), new_randomness()
        assert r1 != r2
        assert 0 <= r1 < 2**256

    def test_derive_randomness_separates_attributes(self):
        assert derive_randomness("alice", 0) != derive_randomness("alice", 1)
        assert derive_randomness("alice", 0) != derive_randomness("bob", 0)


class TestVerifyCommitment:
    """binding: any single-bit perturbation is rejected"""

    def test_true_commitment_verifies(self):
        assert verify_commitment(VALUE, RANDOMNESS, commit(VALUE, RANDOMNESS))

    @pytest.mark.parametrize("bit", [0, 1, 7, 31, 62])
    def test_value_bit_flip(self, bit):
        pair = commit(VALUE, RANDOMNESS)
        with pytest.raises(CommitmentMismatch):
            verify_commitment(VALUE ^ (1 << bit), RANDOMNESS, pair)

    @pytest.mark.parametrize("bit", [0, 1, 64, 128, 255])
    def test_randomness_bit_flip(self, bit):
        pair = commit(VALUE, RANDOMNESS)
        with pytest.raises(CommitmentMismatch):
            verify_commitment(VALUE, RANDOMNESS ^ (1 << bit), pair)

    @pytest.mark.parametrize("component", [0, 1])
    @pytest.mark.parametrize("bit", [0, 64, 127])
    def test_commitment_bit_flip(self, component, bit):
        pair = list(commit(VALUE, RANDOMNESS))
        pair[component] ^= 1 << bit
        with pytest.raises(CommitmentMismatch):
            verify_commitment(VALUE, RANDOMNESS, tuple(pair))

    def test_swapped_components(self):
        hi, lo = commit(VALUE, RANDOMNESS)
        with pytest.raises(CommitmentMismatch):
            verify_commitment(VALUE, RANDOMNESS, (lo, hi))
