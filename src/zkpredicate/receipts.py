"""
signed acceptance receipts

after an evaluation accepts, the verifier can sign a receipt that binds the
public request (query arrays + commitment set) to the accept outcome. the
receipt carries nothing private: anyone holding the verifier's public key can
check it later.
"""

import hashlib
import json
from pathlib import Path

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ed25519

from zkpredicate.models import CommitmentSet, PrivateClaim, Query
from zkpredicate.runner import evaluate

OUTCOME_ACCEPT = "accept"


def request_digest(query: Query, commitments: CommitmentSet) -> bytes:
    """
    digest = sha256(canonical json of {query, commitments, outcome})

    this binds the receipt to one specific request
    """
    payload = {
        "query": query.to_arrays(),
        "commitments": list(commitments.commitments),
        "outcome": OUTCOME_ACCEPT,
    }
    hasher = hashlib.sha256()
    hasher.update(json.dumps(payload, sort_keys=True, separators=(",", ":")).encode('utf-8'))
    return hasher.digest()


class ReceiptIssuer:
    """verifier-side receipt signing"""

    def __init__(self, private_key=None):
        self.private_key = private_key or ed25519.Ed25519PrivateKey.generate()
        self.public_key = self.private_key.public_key()

    @classmethod
    def from_pem(cls, private_pem: bytes):
        return cls(serialization.load_pem_private_key(private_pem, password=None))

    def get_public_key_pem(self):
        return self.public_key.public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo
        )

    def save_keys(self, private_path, public_path):
        """save keypair to files"""
        private_pem = self.private_key.private_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=serialization.NoEncryption()
        )
        for path, data in ((private_path, private_pem), (public_path, self.get_public_key_pem())):
            Path(path).parent.mkdir(parents=True, exist_ok=True)
            with open(path, 'wb') as f:
                f.write(data)

    def sign(self, query: Query, commitments: CommitmentSet):
        digest = request_digest(query, commitments)
        return {
            "query": query.to_arrays(),
            "commitments": list(commitments.commitments),
            "outcome": OUTCOME_ACCEPT,
            "digest": digest.hex(),
            "signature": self.private_key.sign(digest).hex(),
        }

    def issue_receipt(self, query: Query, commitments: CommitmentSet, claim: PrivateClaim):
        """evaluate and sign on accept; returns None on reject"""
        if not evaluate(query, commitments, claim):
            return None
        return self.sign(query, commitments)


def load_issuer(private_key_path) -> ReceiptIssuer:
    with open(private_key_path, 'rb') as f:
        return ReceiptIssuer.from_pem(f.read())


def verify_receipt(receipt, public_key_pem: bytes) -> bool:
    """check the digest binding and the verifier's signature on a receipt"""
    public_key = serialization.load_pem_public_key(public_key_pem)
    query = Query.from_arrays(**receipt["query"])
    commitments = CommitmentSet(commitments=tuple(receipt["commitments"]))

    if receipt.get("outcome") != OUTCOME_ACCEPT:
        return False
    digest = request_digest(query, commitments)
    if digest.hex() != receipt["digest"]:
        return False
    try:
        public_key.verify(bytes.fromhex(receipt["signature"]), digest)
    except InvalidSignature:
        return False
    return True
