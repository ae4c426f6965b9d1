"""
Chord classification: pitch-class set → (quality, root, inversion).

Sets of 2-6 members are looked up by interval key. A 5- or 6-member set with
no chord of its own is reduced by dropping its most consonant member and
classified again; sets larger than six are reported as chromatic.
"""
import collections
import logging

import numpy as np

from chordfinder import table_data
from chordfinder.chord_types import ChordType
from chordfinder.constants import (
    DYAD_TRITONE,
    DYAD_TRITONE_ROOT_OFFSET,
    INVERSIONS,
    MAX_TABLE_ARITY,
    NOTES_PER_OCTAVE,
)
from chordfinder.interval_tables import get_default_tables, interval_key, members_from_key
from chordfinder.voices import PitchClassSet

logger = logging.getLogger(__name__)

ChordClassification = collections.namedtuple(
    "ChordClassification", ["type", "root", "inversion", "pitch_classes"]
)

# Arities whose unmatched sets fall back to elimination.
_ELIMINATION_ARITIES = (5, 6)


def classify(pitch_classes: PitchClassSet, tables=None) -> ChordClassification:
    """Classify the chord formed by a pitch-class set."""
    if tables is None:
        tables = get_default_tables()
    members = pitch_classes.members
    n = len(members)

    if n == 0:
        return ChordClassification(ChordType.DEFAULT, None, 0, members)
    if n == 1:
        return ChordClassification(ChordType.UNISON, members[0], 0, members)
    if n > MAX_TABLE_ARITY:
        return ChordClassification(ChordType.CHROMATIC, members[0], 0, members)

    entry = tables.lookup(members)
    if entry.root_member is None:
        if n in _ELIMINATION_ARITIES:
            return eliminate_member(pitch_classes, tables)
        return ChordClassification(entry.type, None, 0, members)

    if n == 2 and interval_key(members)[0] == DYAD_TRITONE:
        root = (members[0] + DYAD_TRITONE_ROOT_OFFSET) % NOTES_PER_OCTAVE
    else:
        root = members[entry.root_member]
    return ChordClassification(entry.type, root, INVERSIONS[n][entry.root_member], members)


def classify_pitch_classes(pitch_classes, tables=None) -> ChordClassification:
    """Convenience wrapper taking an iterable of pitch classes (0-11)."""
    return classify(PitchClassSet.from_pitch_classes(pitch_classes), tables)


# ── Elimination fallback ──────────────────────────────────────────────────────

def consonance_totals(members) -> np.ndarray:
    """For each member, the summed circular semitone distance to every other member."""
    m = np.asarray(members, dtype=np.int16)
    distances = np.abs(m[:, None] - m[None, :])
    distances = np.minimum(distances, NOTES_PER_OCTAVE - distances)
    return distances.sum(axis=1)


def most_consonant_member(members) -> int:
    """
    Pitch class with the smallest total distance to the rest. Ties go to the
    lowest pitch class.
    """
    totals = consonance_totals(members)
    return members[int(np.argmin(totals))]


def eliminate_member(pitch_classes: PitchClassSet, tables=None) -> ChordClassification:
    """Drop the most consonant member and classify what is left."""
    dropped = most_consonant_member(pitch_classes.members)
    logger.debug("no chord for %s, dropping pitch class %d",
                 list(pitch_classes.members), dropped)
    return classify(pitch_classes.without(dropped), tables)


# ── Self-consistency ──────────────────────────────────────────────────────────

def find_round_trip_failures(tables=None):
    """
    Check the quintad/sextad tables against their generators in both
    directions: every declared rotation, rebuilt as a pitch-class set, must
    classify as its declared quality, and every assigned cell must come from
    a declared rotation.

    Returns:
        List of (expected type, interval key, found type) for every mismatch.
        A cell with no generator is reported with expected type NONE.
    """
    if tables is None:
        tables = get_default_tables()
    failures = []
    generators = {5: table_data.QUINTAD_ROTATIONS, 6: table_data.SEXTAD_ROTATIONS}
    for arity, rotations in generators.items():
        declared = {}
        for chord_type, keys in rotations:
            for key in keys:
                declared[tuple(key)] = chord_type
                result = classify_pitch_classes(members_from_key(key), tables)
                if result.type != chord_type:
                    failures.append((chord_type, tuple(key), result.type))
        for key, entry in tables.for_arity(arity).assigned_keys():
            expected = declared.get(key, ChordType.NONE)
            if entry.type != expected:
                failures.append((expected, key, entry.type))
    return failures
