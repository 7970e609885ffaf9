"""
prover-side claim construction and bundle storage

a holder's bundle contains everything needed to answer queries:
- the private attribute values
- the opening randomness for each attribute
- the public commitments the verifier will check against

bundles live at artifacts/bundles/{holder_id}.json
"""

import json
from pathlib import Path
from typing import Optional, Sequence, Union

import pydantic

from zkpredicate.constants import MAX_NUM_OF_ATTRS
from zkpredicate.crypto import commit, derive_randomness, new_randomness
from zkpredicate.models import CommitmentSet, PrivateClaim, Query
from zkpredicate.runner import evaluate

BUNDLES_DIR = Path("artifacts/bundles")


class ClaimBundle(pydantic.BaseModel):
    holder_id: Union[int, str]
    claim: PrivateClaim
    commitments: CommitmentSet


def new_claim(values: Sequence[int], holder_id=None) -> PrivateClaim:
    """
    build a private claim from leading attribute values.

    unused attribute slots are filled with 0. if holder_id is given the
    randomness is derived from it (dev/testing), otherwise it is fresh.
    """
    if len(values) > MAX_NUM_OF_ATTRS:
        raise ValueError(f"at most {MAX_NUM_OF_ATTRS} attributes supported, got {len(values)}")

    attributes = list(values) + [0] * (MAX_NUM_OF_ATTRS - len(values))
    if holder_id is None:
        randomness = [new_randomness() for _ in range(MAX_NUM_OF_ATTRS)]
    else:
        randomness = [derive_randomness(holder_id, code) for code in range(MAX_NUM_OF_ATTRS)]

    return PrivateClaim(attributes=tuple(attributes), randomness=tuple(randomness))


def issue_commitments(claim: PrivateClaim) -> CommitmentSet:
    """commit to every attribute of the claim"""
    pairs = [commit(v, r) for v, r in zip(claim.attributes, claim.randomness)]
    return CommitmentSet.from_pairs(pairs)


def new_bundle(holder_id, values: Sequence[int], deterministic=False) -> ClaimBundle:
    claim = new_claim(values, holder_id if deterministic else None)
    return ClaimBundle(holder_id=holder_id, claim=claim, commitments=issue_commitments(claim))


def prove(query: Query, bundle: ClaimBundle) -> bool:
    """prover-side dry run: would this bundle satisfy the query?"""
    return evaluate(query, bundle.commitments, bundle.claim)


def save_bundle(bundle: ClaimBundle, output_dir=BUNDLES_DIR, verbose=False) -> Path:
    """save bundle to {output_dir}/{holder_id}.json"""
    output_path = Path(output_dir) / f"{bundle.holder_id}.json"
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, 'w') as f:
        json.dump(bundle.model_dump(mode="json"), f, indent=2)

    if verbose:
        print(f"[prover] bundle saved to {output_path}")
    return output_path


def load_bundle(path) -> ClaimBundle:
    """load a holder bundle from file"""
    path = Path(path)
    if not path.exists():
        raise ValueError(f"bundle not found: {path}")
    with open(path, 'r') as f:
        return ClaimBundle.model_validate(json.load(f))


def load_holder_bundle(holder_id, bundles_dir=BUNDLES_DIR) -> ClaimBundle:
    return load_bundle(Path(bundles_dir) / f"{holder_id}.json")
