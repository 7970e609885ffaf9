"""
per-operation comparison against the private attribute vector

every supported comparison is computed for every operation and the result is
masked by kind, so evaluating an EQ costs the same as evaluating a GT.
"""

from zkpredicate.constants import DATE_OF_BIRTH, EQ, GT, LEQ
from zkpredicate.errors import UnsupportedOperation
from zkpredicate.models import Operation, PrivateClaim
from zkpredicate.selector import select

# attribute code -> kinds it may be compared with
DISPATCH = {
    DATE_OF_BIRTH: (EQ, LEQ, GT),
}


def is_supported(kind: int, attribute: int) -> bool:
    supported = 0
    for code, kinds in DISPATCH.items():
        for allowed in kinds:
            supported |= int(code == attribute) & int(allowed == kind)
    return bool(supported)


def compare(kind: int, operand: int, attribute_value: int) -> bool:
    """compare the attribute against the operand (attr == v, attr <= v, attr > v); unknown kinds are false"""
    eq = int(attribute_value == operand)
    leq = int(attribute_value <= operand)
    gt = int(attribute_value > operand)
    return bool(
        (int(kind == EQ) & eq)
        | (int(kind == LEQ) & leq)
        | (int(kind == GT) & gt)
    )


def evaluate_operation(op: Operation, claim: PrivateClaim) -> bool:
    """
    evaluate one operation against the claim.

    raises UnsupportedOperation if the kind/attribute pair has no dispatch
    rule, and OutOfBounds if the attribute code is past the claim.
    """
    attribute_value = select(claim.attributes, op.attribute)
    result = compare(op.kind, op.value, attribute_value)
    if not is_supported(op.kind, op.attribute):
        raise UnsupportedOperation(op.kind, op.attribute)
    return result
