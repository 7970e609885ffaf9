"""
validated records for queries, private claims and commitment sets.

all lengths are fixed: a query always has MAX_QUERY_SIZE slots and claims
and commitment sets always cover MAX_NUM_OF_ATTRS attributes.
"""

from typing import List, Sequence, Tuple

import pydantic
from pydantic import Field, field_validator

from zkpredicate.constants import (
    COMMITMENT_COMPONENT_BITS,
    MAX_ATTRIBUTE_CODE,
    MAX_KIND,
    MAX_NUM_OF_ATTRS,
    MAX_QUERY_SIZE,
    MAX_VALUE,
    MIN_VALUE,
    RANDOMNESS_BYTES,
    STOP,
)

Scalar = pydantic.conint(ge=MIN_VALUE, le=MAX_VALUE, strict=True)
Randomness = pydantic.conint(ge=0, lt=1 << (RANDOMNESS_BYTES * 8), strict=True)
CommitmentScalar = pydantic.conint(ge=0, lt=1 << COMMITMENT_COMPONENT_BITS, strict=True)


def _check_length(values, expected, what):
    if len(values) != expected:
        raise ValueError(f"{what} must have exactly {expected} entries, got {len(values)}")
    return values


class Operation(pydantic.BaseModel):
    """one query slot: compare `value` against the attribute with code `attribute`"""

    model_config = pydantic.ConfigDict(frozen=True)

    kind: int = Field(ge=0, le=MAX_KIND)
    attribute: int = Field(ge=0, le=MAX_ATTRIBUTE_CODE)
    value: Scalar

    @classmethod
    def stop(cls):
        return cls(kind=STOP, attribute=0, value=0)


class Query(pydantic.BaseModel):
    """ordered, fixed-length sequence of operations; evaluation order is slot order"""

    model_config = pydantic.ConfigDict(frozen=True)

    operations: Tuple[Operation, ...]

    @field_validator("operations")
    @classmethod
    def fixed_length(cls, operations):
        return _check_length(operations, MAX_QUERY_SIZE, "query")

    @classmethod
    def of(cls, *operations: Operation) -> "Query":
        """build a query from leading operations, padding the rest with STOP"""
        if len(operations) > MAX_QUERY_SIZE:
            raise ValueError(f"query supports at most {MAX_QUERY_SIZE} operations")
        padding = [Operation.stop()] * (MAX_QUERY_SIZE - len(operations))
        return cls(operations=tuple(operations) + tuple(padding))

    @classmethod
    def from_arrays(cls, kinds: Sequence[int], attributes: Sequence[int], values: Sequence[int]) -> "Query":
        """build a query from the parallel kind/attribute/value public input"""
        if not len(kinds) == len(attributes) == len(values):
            raise ValueError("kinds, attributes and values must have the same length")
        operations = tuple(
            Operation(kind=k, attribute=a, value=v)
            for k, a, v in zip(kinds, attributes, values)
        )
        return cls(operations=operations)

    def to_arrays(self):
        return {
            "kinds": [op.kind for op in self.operations],
            "attributes": [op.attribute for op in self.operations],
            "values": [op.value for op in self.operations],
        }

    def active(self) -> List[Operation]:
        """operations before the first STOP"""
        ops = []
        for op in self.operations:
            if op.kind == STOP:
                break
            ops.append(op)
        return ops


class PrivateClaim(pydantic.BaseModel):
    """prover-only attribute values and their opening secrets, aligned by code"""

    model_config = pydantic.ConfigDict(frozen=True)

    attributes: Tuple[Scalar, ...]
    randomness: Tuple[Randomness, ...]

    @field_validator("attributes", "randomness")
    @classmethod
    def fixed_length(cls, values, info):
        return _check_length(values, MAX_NUM_OF_ATTRS, info.field_name)


class CommitmentSet(pydantic.BaseModel):
    """public commitments as a flat array; pair i lives at [2i, 2i+1]"""

    model_config = pydantic.ConfigDict(frozen=True)

    commitments: Tuple[CommitmentScalar, ...]

    @field_validator("commitments")
    @classmethod
    def fixed_length(cls, commitments):
        return _check_length(commitments, 2 * MAX_NUM_OF_ATTRS, "commitments")

    @classmethod
    def from_pairs(cls, pairs):
        flat = []
        for hi, lo in pairs:
            flat.extend((hi, lo))
        return cls(commitments=tuple(flat))

    def pairs(self):
        return [
            (self.commitments[2 * i], self.commitments[2 * i + 1])
            for i in range(MAX_NUM_OF_ATTRS)
        ]
