"""
verifier-side request handling

a verification request carries only public data: the query as parallel
kind/attribute/value arrays plus the flat commitment set. the outcome is a
single accept/reject.

diagnose() is a debugging aid for whoever holds the private claim; its report
must never be sent across the trust boundary.
"""

import json
from pathlib import Path
from typing import List

import pydantic

from zkpredicate.constants import STOP, attribute_name, kind_name
from zkpredicate.crypto import verify_commitment
from zkpredicate.errors import EvaluationAborted
from zkpredicate.models import CommitmentSet, PrivateClaim, Query
from zkpredicate.operators import evaluate_operation
from zkpredicate.runner import evaluate
from zkpredicate.selector import select, select_pair

REQUESTS_DIR = Path("artifacts/requests")


class VerificationRequest(pydantic.BaseModel):
    kinds: List[int]
    attributes: List[int]
    values: List[int]
    commitments: List[int]

    @classmethod
    def build(cls, query: Query, commitments: CommitmentSet):
        return cls(**query.to_arrays(), commitments=list(commitments.commitments))

    def query(self) -> Query:
        return Query.from_arrays(self.kinds, self.attributes, self.values)

    def commitment_set(self) -> CommitmentSet:
        return CommitmentSet(commitments=tuple(self.commitments))


def save_request(request: VerificationRequest, output_path):
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w') as f:
        json.dump(request.model_dump(), f, indent=2)
    return output_path


def load_request(path) -> VerificationRequest:
    path = Path(path)
    if not path.exists():
        raise ValueError(f"request not found: {path}")
    with open(path, 'r') as f:
        return VerificationRequest.model_validate(json.load(f))


def verify_request(request: VerificationRequest, claim: PrivateClaim, verbose=False) -> bool:
    """evaluate a request against a claim; returns accept/reject only"""
    query = request.query()
    commitments = request.commitment_set()
    accepted = evaluate(query, commitments, claim)
    if verbose:
        print(f"[verifier] {len(query.active())} active operations -> {'ACCEPT' if accepted else 'REJECT'}")
    return accepted


def _diagnose_slot(index, op, commitments, claim):
    slot = {
        "index": index,
        "kind": kind_name(op.kind),
        "attribute": attribute_name(op.attribute),
        "value": op.value,
        "commitment_opened": None,
        "result": None,
        "error": None,
    }
    try:
        value = select(claim.attributes, op.attribute)
        randomness = select(claim.randomness, op.attribute)
        pair = select_pair(commitments.commitments, op.attribute)
        try:
            verify_commitment(value, randomness, pair)
            slot["commitment_opened"] = True
        except EvaluationAborted as e:
            slot["commitment_opened"] = False
            slot["error"] = type(e).__name__
        slot["result"] = evaluate_operation(op, claim)
    except EvaluationAborted as e:
        slot["error"] = slot["error"] or type(e).__name__
    return slot


def diagnose(query: Query, commitments: CommitmentSet, claim: PrivateClaim):
    """
    per-slot report of what passed and failed, up to the first STOP.

    returns:
        dict with "valid" (same outcome as evaluate) and "slots"
    """
    report = {
        "valid": evaluate(query, commitments, claim),
        "active_operations": 0,
        "stop_index": None,
        "slots": [],
    }
    for index, op in enumerate(query.operations):
        if op.kind == STOP:
            report["stop_index"] = index
            break
        report["slots"].append(_diagnose_slot(index, op, commitments, claim))
    report["active_operations"] = len(report["slots"])
    return report


def print_diagnosis(report):
    """print diagnosis report in readable format"""
    print("\nevaluation diagnosis")
    print("=" * 60)
    print(f"overall result: {'VALID' if report['valid'] else 'INVALID'}")
    print(f"active operations: {report['active_operations']}")
    if report["stop_index"] is not None:
        print(f"stop at slot: {report['stop_index']}")

    print("\nslots:")
    for slot in report["slots"]:
        status = "ok" if slot["result"] and slot["commitment_opened"] and not slot["error"] else "failed"
        print(f"  [{slot['index']}] {slot['kind']:5s} {slot['attribute']:15s} {slot['value']:>8} -> {status}")
        if status == "failed":
            print(f"      commitment: {slot['commitment_opened']}, result: {slot['result']}, error: {slot['error']}")
    print("=" * 60)
