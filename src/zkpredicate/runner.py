"""
fixed-iteration predicate runner

drives all MAX_QUERY_SIZE slots of a query, binding each referenced attribute
to its public commitment and folding comparison results with AND. a STOP slot
freezes the accumulator for the rest of the run; the loop itself never
shortens.
"""

from zkpredicate.constants import STOP
from zkpredicate.crypto import verify_commitment
from zkpredicate.errors import EvaluationAborted, PredicateFalse
from zkpredicate.models import CommitmentSet, PrivateClaim, Query
from zkpredicate.operators import evaluate_operation
from zkpredicate.selector import select, select_pair

RUNNING = "RUNNING"
HALTED = "HALTED"


class Accumulator:
    """AND-only boolean fold; once false it stays false"""

    def __init__(self):
        self._value = True

    @property
    def value(self):
        return self._value

    def fold(self, result):
        self._value = self._value and bool(result)
        return self._value

    def reassert(self):
        # no-op fold so halted slots keep the same shape
        return self.fold(self._value)


class PredicateRunner:
    """evaluate one query against one commitment set and one private claim"""

    def __init__(self, query: Query, commitments: CommitmentSet, claim: PrivateClaim):
        self.query = query
        self.commitments = commitments
        self.claim = claim
        self.state = RUNNING
        self.accumulator = Accumulator()

    def step(self, op):
        if self.state == HALTED or op.kind == STOP:
            self.state = HALTED
            self.accumulator.reassert()
            return

        value = select(self.claim.attributes, op.attribute)
        randomness = select(self.claim.randomness, op.attribute)
        pair = select_pair(self.commitments.commitments, op.attribute)
        verify_commitment(value, randomness, pair)

        result = evaluate_operation(op, self.claim)
        self.accumulator.fold(result)

    def run(self):
        for op in self.query.operations:
            self.step(op)
        if not self.accumulator.value:
            raise PredicateFalse("predicate does not hold")
        return True


def run_predicate(query: Query, commitments: CommitmentSet, claim: PrivateClaim) -> bool:
    """run the predicate; any failure raises an EvaluationAborted subclass"""
    return PredicateRunner(query, commitments, claim).run()


def evaluate(query: Query, commitments: CommitmentSet, claim: PrivateClaim) -> bool:
    """accept/reject only; the reason for a reject is not exposed"""
    try:
        return run_predicate(query, commitments, claim)
    except EvaluationAborted:
        return False
