#!/usr/bin/env python3
"""
scripts/check_tables.py: consistency check for the interval tables.

Builds every table strictly (any two chord qualities declared on the same
interval key is an error) and classifies the pitch-class set rebuilt from
each quintad/sextad rotation, which must come back as the declared quality;
every assigned cell must trace back to a rotation.
Exits non-zero on any defect.

Usage
-----
    python scripts/check_tables.py
    python scripts/check_tables.py --verbose
"""

import argparse
import logging
import os
import sys

_HERE = os.path.dirname(os.path.abspath(__file__))
_ROOT = os.path.dirname(_HERE)
sys.path.insert(0, _ROOT)

from chordfinder.chord_types import chord_type_name
from chordfinder.classifier import find_round_trip_failures
from chordfinder.interval_tables import TableCollisionError, build_tables


def main():
    parser = argparse.ArgumentParser(
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--verbose", action="store_true", help="Log table construction.")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        tables = build_tables(strict=True)
    except TableCollisionError as e:
        for c in e.collisions:
            print(f"COLLISION  {c.table} {c.key}: {chord_type_name(c.incoming)} "
                  f"(already {chord_type_name(c.existing)})")
        sys.exit(f"{len(e.collisions)} collision(s) in the interval tables.")

    print("── Tables ──────────────────────────────────────────────────────────")
    for table in tables:
        total = 1
        for size in table.shape:
            total *= size
        print(f"   {table.name:<8}  {len(table):>5} / {total:<6} cells assigned")

    failures = find_round_trip_failures(tables)
    print("── Round trip ──────────────────────────────────────────────────────")
    for declared, key, got in failures:
        print(f"   {chord_type_name(declared):<22} {key}  →  {chord_type_name(got)}")
    if failures:
        sys.exit(f"{len(failures)} rotation(s) do not classify as declared.")
    print("   all quintad/sextad rotations classify as declared")


if __name__ == "__main__":
    main()
