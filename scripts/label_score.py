#!/usr/bin/env python3
"""
scripts/label_score.py: print the chord label sequence for a score.

Every note of the score is replayed through a ChordDetector in time order;
each emitted label is printed with its offset in quarter notes. Only label
changes are printed unless --all is given.

Usage
-----
    python scripts/label_score.py tune.abc
    python scripts/label_score.py song.mid --lower-limit 36 --default-chord N.C.
    python scripts/label_score.py tunes.abc --tune 3 --all
"""

import argparse
import logging
import os
import sys

_HERE = os.path.dirname(os.path.abspath(__file__))
_ROOT = os.path.dirname(_HERE)
sys.path.insert(0, _ROOT)

from chordfinder.config import add_config_arguments, config_from_args
from chordfinder.engine import ChordDetector
from chordfinder.score_events import iter_scores, label_score


def print_labels(labels, show_all=False):
    previous = None
    for offset, label in labels:
        if not show_all and label == previous:
            continue
        print(f"{offset:8.2f}  {label}")
        previous = label


def main():
    parser = argparse.ArgumentParser(
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("score_file", help="ABC, MusicXML or MIDI file.")
    parser.add_argument("--tune", type=int, default=1, metavar="N",
                        help="Which score of a multi-tune file to label (default 1).")
    parser.add_argument("--all", action="store_true",
                        help="Print every emitted label, not only changes.")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    add_config_arguments(parser)
    args = parser.parse_args()

    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        config = config_from_args(args)
    except (OSError, ValueError) as e:
        sys.exit(f"Error: {e}")

    if not os.path.isfile(args.score_file):
        sys.exit(f"Error: score file not found: {args.score_file}")

    score = None
    try:
        for i, candidate in enumerate(iter_scores(args.score_file), start=1):
            if i == args.tune:
                score = candidate
                break
    except Exception as e:
        sys.exit(f"Error parsing {args.score_file}: {e}")
    if score is None:
        sys.exit(f"Error: {args.score_file} has no tune {args.tune}")

    labels = label_score(score, ChordDetector(config))
    if not labels:
        sys.exit("Error: No notes found in score.")
    print_labels(labels, args.all)


if __name__ == "__main__":
    main()
