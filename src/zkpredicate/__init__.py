"""Conjunctive predicate evaluation over committed private attributes."""

from zkpredicate.constants import (  # noqa: F401
    DATE_OF_BIRTH,
    EQ,
    GT,
    LEQ,
    MAX_NUM_OF_ATTRS,
    MAX_QUERY_SIZE,
    STOP,
)
from zkpredicate.errors import (  # noqa: F401
    CommitmentMismatch,
    EvaluationAborted,
    OutOfBounds,
    PredicateFalse,
    UnsupportedOperation,
)
from zkpredicate.models import CommitmentSet, Operation, PrivateClaim, Query  # noqa: F401
from zkpredicate.runner import evaluate, run_predicate  # noqa: F401

__version__ = "0.1.0"
