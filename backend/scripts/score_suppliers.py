#!/usr/bin/env python3
"""
Score supplier records from a JSON file.

The file holds a list of supplier records in the admin API shape
(camelCase keys, nested address).  Prints the score and the failed
rules for each one, then the review routing summary.

Usage:
    cd backend
    python -m scripts.score_suppliers suppliers.json --min-score 30
"""

import argparse
import json
import os
import sys
from pathlib import Path

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from supplier_quality.core.logging import setup_logging  # noqa: E402
from supplier_quality.scoring.review import route_for_review  # noqa: E402


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Score GPSR supplier records")
    parser.add_argument("path", type=Path, help="JSON file with a list of supplier records")
    parser.add_argument("--min-score", type=int, default=None, help="review threshold")
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ...")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level)

    with args.path.open("r", encoding="utf-8") as f:
        records = json.load(f)

    if not isinstance(records, list):
        print(f"Expected a JSON list of records in {args.path}", file=sys.stderr)
        return 1

    batch = route_for_review(records, min_score=args.min_score)

    print("\n" + "=" * 70)
    print(f"  Supplier quality (min score {batch.min_score})")
    print("=" * 70)
    for item in batch.accepted + batch.for_review:
        print(f"  {item.supplier_id:<12} {item.result.score:>3}/{item.result.max_score}  {item.status}")
        for rule in item.result.failed_rules:
            print(f"      ✗ {rule}")

    print(f"\n  Accepted: {len(batch.accepted)}   For review: {len(batch.for_review)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
