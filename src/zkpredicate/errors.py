"""
failure taxonomy for predicate evaluation

every core failure is fatal: the runner never recovers from one, and the
external contract collapses all of them into a single reject.
"""


class EvaluationAborted(Exception):
    """base class for anything that voids an evaluation"""


class OutOfBounds(EvaluationAborted):
    """a resolved index lies outside the fixed array length"""

    def __init__(self, index, length):
        super().__init__(f"index {index} out of bounds for length {length}")
        self.index = index
        self.length = length


class CommitmentMismatch(EvaluationAborted):
    """a claimed (value, randomness) pair does not reproduce its commitment"""


class UnsupportedOperation(EvaluationAborted):
    """no dispatch rule exists for an operation's kind/attribute combination"""

    def __init__(self, kind, attribute):
        super().__init__(f"unsupported operation: kind={kind} attribute={attribute}")
        self.kind = kind
        self.attribute = attribute


class PredicateFalse(EvaluationAborted):
    """the folded predicate did not hold"""
