"""Command line harness for predicate evaluation.

Subcommands:
- commit:   build a holder bundle from attribute values
- query:    turn a text query into a verification request
- evaluate: run a request against a holder bundle (ACCEPT/REJECT)
- keys:     generate a receipt signing keypair
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

import pydantic

from zkpredicate.prover import BUNDLES_DIR, load_bundle, new_bundle, save_bundle
from zkpredicate.query_parser import QueryParser, describe
from zkpredicate.receipts import ReceiptIssuer, load_issuer
from zkpredicate.verifier import (
    REQUESTS_DIR,
    VerificationRequest,
    diagnose,
    load_request,
    print_diagnosis,
    save_request,
    verify_request,
)

RECEIPTS_DIR = Path("artifacts/receipts")
DEFAULT_PRIVATE_KEY = Path("artifacts/receipt_key.pem")
DEFAULT_PUBLIC_KEY = Path("artifacts/receipt_public.pem")


def cmd_commit(args) -> int:
    bundle = new_bundle(args.holder_id, args.values, deterministic=args.deterministic)
    path = save_bundle(bundle, args.output_dir, verbose=args.verbose)
    print(f"bundle for holder {bundle.holder_id} written to {path}")
    print(f"public commitments ({len(bundle.commitments.commitments)} scalars):")
    for code, (hi, lo) in enumerate(bundle.commitments.pairs()[:len(args.values)]):
        print(f"  [{code}] {hi:032x} {lo:032x}")
    return 0


def cmd_query(args) -> int:
    parser = QueryParser(verbose=args.verbose)
    query = parser.parse(args.text)

    commitments = load_bundle(args.bundle).commitments
    request = VerificationRequest.build(query, commitments)
    path = save_request(request, args.output)
    print(f"query: {describe(query)}")
    print(f"request written to {path}")
    return 0


def cmd_evaluate(args) -> int:
    request = load_request(args.request)
    bundle = load_bundle(args.bundle)

    accepted = verify_request(request, bundle.claim, verbose=args.verbose)
    print("ACCEPT" if accepted else "REJECT")

    if args.explain:
        print_diagnosis(diagnose(request.query(), request.commitment_set(), bundle.claim))

    if accepted and args.receipt_key:
        issuer = load_issuer(args.receipt_key)
        receipt = issuer.sign(request.query(), request.commitment_set())
        receipt_path = Path(args.receipt_out)
        receipt_path.parent.mkdir(parents=True, exist_ok=True)
        with open(receipt_path, 'w') as f:
            json.dump(receipt, f, indent=2)
        print(f"receipt written to {receipt_path}")

    return 0 if accepted else 1


def cmd_keys(args) -> int:
    issuer = ReceiptIssuer()
    issuer.save_keys(args.private, args.public)
    print("receipt signing keys saved")
    print(f"  private: {args.private}")
    print(f"  public: {args.public}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="zkpredicate", description=__doc__,
                                     formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--verbose", action="store_true", help="print progress details")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("commit", help="create a holder bundle")
    p.add_argument("holder_id", help="holder identifier")
    p.add_argument("values", type=int, nargs="+", help="attribute values, in attribute-code order")
    p.add_argument("--output-dir", default=str(BUNDLES_DIR))
    p.add_argument("--deterministic", action="store_true",
                   help="derive randomness from the holder id (dev/testing only)")
    p.set_defaults(func=cmd_commit)

    p = sub.add_parser("query", help="build a verification request from text")
    p.add_argument("text", help='e.g. "date_of_birth >= 1980 and date_of_birth < 2005"')
    p.add_argument("--bundle", required=True, help="holder bundle whose public commitments to attach")
    p.add_argument("--output", default=str(REQUESTS_DIR / "request.json"))
    p.set_defaults(func=cmd_query)

    p = sub.add_parser("evaluate", help="evaluate a request against a holder bundle")
    p.add_argument("request")
    p.add_argument("bundle")
    p.add_argument("--explain", action="store_true", help="print a private per-slot diagnosis")
    p.add_argument("--receipt-key", help="private key used to sign a receipt on accept")
    p.add_argument("--receipt-out", default=str(RECEIPTS_DIR / "receipt.json"))
    p.set_defaults(func=cmd_evaluate)

    p = sub.add_parser("keys", help="generate receipt signing keys")
    p.add_argument("--private", default=str(DEFAULT_PRIVATE_KEY))
    p.add_argument("--public", default=str(DEFAULT_PUBLIC_KEY))
    p.set_defaults(func=cmd_keys)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return args.func(args)
    except (ValueError, pydantic.ValidationError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
