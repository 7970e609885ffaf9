"""
Tests for query, claim and commitment-set validation.
"""

import pydantic
import pytest

from zkpredicate.constants import EQ, GT, MAX_NUM_OF_ATTRS, MAX_QUERY_SIZE, STOP
from zkpredicate.models import CommitmentSet, Operation, PrivateClaim, Query


class TestOperation:

    def test_frozen(self):
        op = Operation(kind=EQ, attribute=0, value=1990)
        with pytest.raises(pydantic.ValidationError):
            op.value = 1991

    @pytest.mark.parametrize("field,value", [
        ("kind", 16), ("kind", -1), ("attribute", 256), ("value", 2**63),
    ])
    def test_field_ranges(self, field, value):
        fields = {"kind": EQ, "attribute": 0, "value": 0}
        fields[field] = value
        with pytest.raises(pydantic.ValidationError):
            Operation(**fields)

    def test_malformed_but_representable(self):
        op = Operation(kind=9, attribute=255, value=-(2**63))
        assert op.kind == 9


class TestQuery:

    def test_of_pads_with_stop(self):
        query = Query.of(Operation(kind=EQ, attribute=0, value=1990))
        assert len(query.operations) == MAX_QUERY_SIZE
        assert all(op.kind == STOP for op in query.operations[1:])
        assert len(query.active()) == 1

    def test_of_rejects_too_many(self):
        ops = [Operation(kind=EQ, attribute=0, value=1)] * (MAX_QUERY_SIZE + 1)
        with pytest.raises(ValueError, match="at most"):
            Query.of(*ops)

    def test_fixed_length(self):
        with pytest.raises(pydantic.ValidationError, match="exactly 20"):
            Query(operations=(Operation.stop(),))

    def test_arrays_roundtrip(self):
        query = Query.of(Operation(kind=GT, attribute=0, value=2000))
        arrays = query.to_arrays()
        assert arrays["kinds"][:2] == [GT, STOP]
        assert Query.from_arrays(**arrays) == query

    def test_from_arrays_length_mismatch(self):
        with pytest.raises(ValueError, match="same length"):
            Query.from_arrays([EQ], [0, 0], [1])

    def test_active_stops_at_first_stop(self):
        ops = [Operation(kind=EQ, attribute=0, value=1), Operation.stop(),
               Operation(kind=EQ, attribute=0, value=2)]
        assert len(Query.of(*ops).active()) == 1


class TestClaimAndCommitments:

    def test_claim_lengths(self):
        with pytest.raises(pydantic.ValidationError):
            PrivateClaim(attributes=(1,), randomness=(0,) * MAX_NUM_OF_ATTRS)

    def test_randomness_range(self):
        with pytest.raises(pydantic.ValidationError):
            PrivateClaim(attributes=(0,) * MAX_NUM_OF_ATTRS,
                         randomness=(2**256,) * MAX_NUM_OF_ATTRS)

    def test_commitment_set_length(self):
        with pytest.raises(pydantic.ValidationError):
            CommitmentSet(commitments=(0,) * MAX_NUM_OF_ATTRS)

    def test_pairs(self):
        pairs = [(i, i + 100) for i in range(MAX_NUM_OF_ATTRS)]
        commitments = CommitmentSet.from_pairs(pairs)
        assert commitments.commitments[:4] == (0, 100, 1, 101)
        assert commitments.pairs() == pairs
