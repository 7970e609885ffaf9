import pytest

from zkpredicate.prover import new_claim, issue_commitments


@pytest.fixture
def claim_1990():
    """claim with date of birth 1990 and deterministic randomness"""
    return new_claim([1990], holder_id="holder-1990")


@pytest.fixture
def commitments_1990(claim_1990):
    return issue_commitments(claim_1990)
