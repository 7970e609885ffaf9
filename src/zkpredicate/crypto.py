"""
hash-based commitments over attribute scalars

commit(value, randomness) = blake2b(value || randomness), with the 32-byte
digest split into two 128-bit scalars so a commitment fits the flat public
commitment layout.
"""

import secrets
from hashlib import blake2b

from zkpredicate.constants import (
    COMMITMENT_COMPONENT_BITS,
    RANDOMNESS_BYTES,
    VALUE_BITS,
)
from zkpredicate.errors import CommitmentMismatch

COMMIT_PERSON = b"zkpred-commit"
SALT_PERSON = b"zkpred-salt"


def new_randomness():
    """fresh opening secret for one attribute"""
    return secrets.randbits(RANDOMNESS_BYTES * 8)


def derive_randomness(holder_id, attribute_code):
    """Deterministic randomness derivation from holder ID and attribute code.

    NOTE: for production use new_randomness() and keep the value in the holder's
    bundle. This deterministic version is for dev/testing.
    """
    hasher = blake2b(digest_size=RANDOMNESS_BYTES, person=SALT_PERSON)
    hasher.update(f"{holder_id}-{attribute_code}".encode("utf-8"))
    return int.from_bytes(hasher.digest(), byteorder="big")


def commit(value: int, randomness: int):
    """Binding and hiding commitment: H(value || randomness) -> (hi, lo).

    value is encoded as a big-endian signed 64-bit integer and randomness as
    a 256-bit big-endian integer; out-of-range inputs raise OverflowError.
    """
    hasher = blake2b(digest_size=32, person=COMMIT_PERSON)
    hasher.update(value.to_bytes(VALUE_BITS // 8, byteorder="big", signed=True))
    hasher.update(randomness.to_bytes(RANDOMNESS_BYTES, byteorder="big", signed=False))
    digest = int.from_bytes(hasher.digest(), byteorder="big")
    mask = (1 << COMMITMENT_COMPONENT_BITS) - 1
    return digest >> COMMITMENT_COMPONENT_BITS, digest & mask


def verify_commitment(value, randomness, pair):
    """assert that (value, randomness) opens pair; raise CommitmentMismatch otherwise"""
    hi, lo = commit(value, randomness)
    ok = int(hi == pair[0]) & int(lo == pair[1])
    if not ok:
        raise CommitmentMismatch("commitment does not open to the claimed value")
    return True
