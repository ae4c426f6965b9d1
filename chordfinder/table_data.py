"""
Authored interval-table data.

Keys are reduced intervals: for ascending members m0 < m1 < ..., component
k is ``m[k+1] - m[k] - 1``. Each entry is ``(ChordType, root member index)``
where the index points into the ascending member list.

Dyads, triads and quartads are written out cell by cell. Quintads and
sextads are too large for that; each quality is listed with one interval
key per rotation, rotation ``i`` having the root at member ``i``.
"""
from chordfinder.chord_types import ChordType as T

# ── Dyads: reduced interval 0..10 ─────────────────────────────────────────────

DYADS = [
    (T.MAJOR_7, 1),       # minor second
    (T.DOMINANT_7, 1),    # major second
    (T.MINOR, 0),         # minor third
    (T.MAJOR, 0),         # major third
    (T.MAJOR, 1),         # perfect fourth
    (T.DOMINANT_7, 0),    # tritone, root resolved separately
    (T.MAJOR, 0),         # perfect fifth
    (T.MAJOR, 1),         # minor sixth
    (T.MINOR, 1),         # major sixth
    (T.DOMINANT_7, 0),    # minor seventh
    (T.MAJOR_7, 0),       # major seventh
]

# ── Triads: interval1 → entries for interval2 = 0, 1, ... ────────────────────

TRIAD_ROWS = {
    0: [(T.MAJOR_7_FLAT_9, 1), (T.MAJOR_9, 1), (T.MINOR_MAJOR_7, 1), (T.MAJOR_7, 1), (T.DOMINANT_7_SHARP_11, 2), (T.DOMINANT_FLAT_9, 0), (T.MAJOR_7, 1), (T.MAJOR_7_SHARP_5, 1), (T.MINOR_9, 2), (T.MAJOR_7_FLAT_9, 0)],
    1: [(T.MINOR_9, 0), (T.DOMINANT_9, 0), (T.MINOR_7, 1), (T.DOMINANT_7, 1), (T.DOMINANT_9, 0), (T.HALF_DIMINISHED_7, 1), (T.DOMINANT_7, 1), (T.DOMINANT_9, 0), (T.MAJOR_9, 0)],
    2: [(T.MAJOR_7_SHARP_5, 2), (T.DOMINANT_7, 2), (T.DIMINISHED, 0), (T.MINOR, 0), (T.MAJOR, 2), (T.DIMINISHED, 2), (T.MINOR_7, 0), (T.MINOR_MAJOR_7, 0)],
    3: [(T.MAJOR_7, 2), (T.HALF_DIMINISHED_7, 2), (T.MAJOR, 0), (T.AUGMENTED, 0), (T.MINOR, 2), (T.DOMINANT_7, 0), (T.MAJOR_7, 0)],
    4: [(T.DOMINANT_FLAT_9, 1), (T.DOMINANT_9, 1), (T.MINOR, 1), (T.MAJOR, 1), (T.DOMINANT_9, 2), (T.DOMINANT_7_SHARP_11, 1)],
    5: [(T.DOMINANT_7_SHARP_11, 0), (T.DOMINANT_7, 2), (T.DIMINISHED, 1), (T.HALF_DIMINISHED_7, 0), (T.DOMINANT_FLAT_9, 2)],
    6: [(T.MAJOR_7, 2), (T.MINOR_7, 2), (T.DOMINANT_7, 0), (T.MAJOR_7, 0)],
    7: [(T.MINOR_MAJOR_7, 2), (T.DOMINANT_9, 1), (T.MAJOR_7_SHARP_5, 0)],
    8: [(T.MAJOR_9, 2), (T.MINOR_9, 1)],
    9: [(T.MAJOR_7_FLAT_9, 2)],
}

# ── Quartads: (interval1, interval2) → entries for interval3 = 0, 1, ... ─────

QUARTAD_ROWS = {
    (0, 0): [(T.MAJOR_7_FLAT_9_SHARP_13, 2), (T.MINOR_MAJOR_FLAT_9, 1), (T.MAJOR_7_FLAT_9, 1), (T.MAJOR_7_SHARP_13, 2), (T.DIMINISHED_MAJOR_7_FLAT_9, 1), (T.MAJOR_7_FLAT_9, 1), (T.MAJOR_7_SHARP_13, 2), (T.MAJOR_7_FLAT_9_13, 1), (T.MAJOR_7_FLAT_9_SHARP_13, 1)],
    (0, 1): [(T.MINOR_MAJOR_9, 1), (T.MAJOR_9, 1), (T.HALF_DIMINISHED_FLAT_9, 0), (T.MINOR_7_FLAT_9, 0), (T.MAJOR_9, 1), (T.DIMINISHED_7_FLAT_9, 0), (T.MINOR_7_FLAT_9, 0), (T.MINOR_MAJOR_FLAT_9, 0)],
    (0, 2): [(T.MAJOR_7_SHARP_9, 1), (T.DOMINANT_7_SHARP_11, 3), (T.DOMINANT_FLAT_9, 0), (T.MINOR_MAJOR_7, 1), (T.DOMINANT_7_SHARP_9, 3), (T.DOMINANT_FLAT_9, 0), (T.MAJOR_7_FLAT_9, 0)],
    (0, 3): [(T.MAJOR_11, 1), (T.MAJOR_7_FLAT_5, 1), (T.MAJOR_7, 1), (T.MAJOR_7_SHARP_5, 1), (T.MINOR_9, 3), (T.MAJOR_7_SHARP_13, 1)],
    (0, 4): [(T.DIMINISHED_MAJOR_9, 3), (T.DOMINANT_11, 3), (T.DIMINISHED_7_FLAT_9, 0), (T.HALF_DIMINISHED_FLAT_9, 0), (T.DIMINISHED_MAJOR_7_FLAT_9, 0)],
    (0, 5): [(T.MAJOR_11, 3), (T.DOMINANT_7_SHARP_9, 3), (T.DOMINANT_FLAT_9, 0), (T.MAJOR_7_FLAT_9, 0)],
    (0, 6): [(T.MAJOR_7_SHARP_9, 3), (T.MINOR_9, 3), (T.MAJOR_7_SHARP_13, 1)],
    (0, 7): [(T.MINOR_MAJOR_9, 3), (T.MAJOR_7_FLAT_9_13, 0)],
    (0, 8): [(T.MAJOR_7_FLAT_9_SHARP_13, 0)],
    (1, 0): [(T.MAJOR_7_FLAT_9_13, 2), (T.MINOR_7_FLAT_9, 1), (T.DOMINANT_FLAT_9, 1), (T.MINOR_9, 0), (T.HALF_DIMINISHED_FLAT_9, 1), (T.DOMINANT_FLAT_9, 1), (T.MINOR_9, 0), (T.MINOR_MAJOR_9, 0)],
    (1, 1): [(T.MINOR_9, 1), (T.DOMINANT_9, 1), (T.DOMINANT_9, 0), (T.DOMINANT_7_SHARP_5, 2), (T.DOMINANT_9, 1), (T.DOMINANT_9, 0), (T.MAJOR_9, 0)],
    (1, 2): [(T.DOMINANT_7_SHARP_9, 1), (T.DOMINANT_11, 3), (T.HALF_DIMINISHED_7, 1), (T.MINOR_7, 1), (T.DOMINANT_9, 3), (T.HALF_DIMINISHED_FLAT_9, 3)],
    (1, 3): [(T.DOMINANT_11, 1), (T.DOMINANT_7_FLAT_5, 3), (T.DOMINANT_7, 1), (T.DOMINANT_7_SHARP_5, 1), (T.MINOR_7_FLAT_9, 3)],
    (1, 4): [(T.MAJOR_7_FLAT_5, 3), (T.DOMINANT_11, 1), (T.DOMINANT_9, 0), (T.MAJOR_9, 0)],
    (1, 5): [(T.DOMINANT_7_SHARP_11, 1), (T.DOMINANT_9, 3), (T.DIMINISHED_7_FLAT_9, 3)],
    (1, 6): [(T.MAJOR_9, 3), (T.MINOR_7_FLAT_9, 3)],
    (1, 7): [(T.MINOR_MAJOR_FLAT_9, 3)],
    (2, 0): [(T.MAJOR_7_SHARP_13, 3), (T.DIMINISHED_7_FLAT_9, 1), (T.DOMINANT_7_SHARP_9, 0), (T.MAJOR_7_SHARP_5, 2), (T.DIMINISHED_7_FLAT_9, 1), (T.DOMINANT_7_SHARP_9, 0), (T.MAJOR_7_SHARP_9, 0)],
    (2, 1): [(T.DOMINANT_FLAT_9, 2), (T.DOMINANT_9, 2), (T.MINOR_7, 2), (T.DOMINANT_7, 2), (T.DOMINANT_11, 2), (T.DOMINANT_7_SHARP_11, 2)],
    (2, 2): [(T.DIMINISHED_7_FLAT_9, 2), (T.DOMINANT_7, 3), (T.DIMINISHED_7, 0), (T.HALF_DIMINISHED_7, 0), (T.DOMINANT_FLAT_9, 3)],
    (2, 3): [(T.MAJOR_7, 3), (T.HALF_DIMINISHED_7, 3), (T.MINOR_7, 0), (T.MINOR_MAJOR_7, 0)],
    (2, 4): [(T.DOMINANT_FLAT_9, 2), (T.DOMINANT_9, 2), (T.DOMINANT_7_SHARP_9, 2)],
    (2, 5): [(T.HALF_DIMINISHED_FLAT_9, 2), (T.DOMINANT_FLAT_9, 3)],
    (2, 6): [(T.MAJOR_7_FLAT_9, 3)],
    (3, 0): [(T.MAJOR_7_FLAT_9, 2), (T.MAJOR_9, 2), (T.MINOR_MAJOR_7, 2), (T.MAJOR_7, 2), (T.DOMINANT_11, 0), (T.MAJOR_11, 0)],
    (3, 1): [(T.HALF_DIMINISHED_FLAT_9, 2), (T.DOMINANT_7_SHARP_5, 3), (T.HALF_DIMINISHED_7, 2), (T.DOMINANT_7_FLAT_5, 0), (T.MAJOR_7_FLAT_5, 0)],
    (3, 2): [(T.MAJOR_7_SHARP_5, 3), (T.MINOR_7, 3), (T.DOMINANT_7, 0), (T.MAJOR_7, 0)],
    (3, 3): [(T.MINOR_MAJOR_7, 3), (T.DOMINANT_7_SHARP_5, 0), (T.MAJOR_7_SHARP_5, 0)],
    (3, 4): [(T.MINOR_7_FLAT_9, 2), (T.MINOR_9, 2)],
    (3, 5): [(T.MAJOR_7_SHARP_13, 0)],
    (4, 0): [(T.DIMINISHED_MAJOR_7_FLAT_9, 2), (T.MINOR_7_FLAT_9, 1), (T.DOMINANT_FLAT_9, 1), (T.MAJOR_7_FLAT_5, 2), (T.DIMINISHED_MAJOR_9, 0)],
    (4, 1): [(T.MINOR_9, 1), (T.DOMINANT_9, 1), (T.DOMINANT_11, 0), (T.DOMINANT_11, 2)],
    (4, 2): [(T.DOMINANT_7_SHARP_9, 1), (T.DOMINANT_9, 3), (T.DIMINISHED_7_FLAT_9, 3)],
    (4, 3): [(T.MAJOR_9, 3), (T.HALF_DIMINISHED_FLAT_9, 3)],
    (4, 4): [(T.DIMINISHED_MAJOR_7_FLAT_9, 3)],
    (5, 0): [(T.MAJOR_7_SHARP_13, 3), (T.HALF_DIMINISHED_FLAT_9, 1), (T.DOMINANT_7_SHARP_11, 0), (T.MAJOR_11, 2)],
    (5, 1): [(T.DOMINANT_FLAT_9, 2), (T.DOMINANT_9, 2), (T.DOMINANT_7_SHARP_9, 2)],
    (5, 2): [(T.DIMINISHED_7_FLAT_9, 2), (T.DOMINANT_FLAT_9, 3)],
    (5, 3): [(T.MAJOR_7_FLAT_9, 3)],
    (6, 0): [(T.MAJOR_7_FLAT_9, 2), (T.MAJOR_9, 2), (T.MAJOR_7_SHARP_9, 2)],
    (6, 1): [(T.MINOR_7_FLAT_9, 2), (T.MINOR_9, 2)],
    (6, 2): [(T.MAJOR_7_SHARP_13, 0)],
    (7, 0): [(T.MINOR_MAJOR_FLAT_9, 2), (T.MINOR_MAJOR_9, 2)],
    (7, 1): [(T.MAJOR_7_FLAT_9_13, 3)],
    (8, 0): [(T.MAJOR_7_FLAT_9_SHARP_13, 2)],
}

# ── Quintads: one interval key per rotation ───────────────────────────────────
# Some qualities have more than one voicing (two major 11ths, three dominant
# 11ths, ...); each voicing is its own entry.

QUINTAD_ROTATIONS = [
    (T.MAJOR_9, [(1, 1, 2, 3), (0, 1, 1, 2), (3, 0, 1, 1), (2, 3, 0, 1), (1, 2, 3, 0)]),
    (T.DOMINANT_9, [(1, 1, 2, 2), (1, 1, 1, 2), (2, 1, 1, 1), (2, 2, 1, 1), (1, 2, 2, 1)]),
    (T.MINOR_9, [(1, 0, 3, 2), (1, 1, 0, 3), (2, 1, 1, 0), (3, 2, 1, 1), (0, 3, 2, 1)]),
    (T.HALF_DIMINISHED_9, [(1, 0, 2, 3), (1, 1, 0, 2), (3, 1, 1, 0), (2, 3, 1, 1), (0, 2, 3, 1)]),
    (T.MINOR_MAJOR_9, [(1, 0, 3, 3), (0, 1, 0, 3), (3, 0, 1, 0), (3, 3, 0, 1), (0, 3, 3, 0)]),
    (T.DIMINISHED_MAJOR_9, [(1, 0, 2, 4), (0, 1, 0, 2), (4, 0, 1, 0), (2, 4, 0, 1), (0, 2, 4, 0)]),
    (T.MAJOR_9_FLAT_5, [(1, 1, 1, 4), (0, 1, 1, 1), (4, 0, 1, 1), (1, 4, 0, 1), (1, 1, 4, 0)]),
    (T.DOMINANT_9_FLAT_5, [(1, 1, 1, 3), (1, 1, 1, 1), (3, 1, 1, 1), (1, 3, 1, 1), (1, 1, 3, 1)]),
    (T.MINOR_MAJOR_9_FLAT_11, [(1, 0, 0, 6), (0, 1, 0, 0), (6, 0, 1, 0), (0, 6, 0, 1), (0, 0, 6, 0)]),
    (T.MAJOR_7_FLAT_9, [(0, 2, 2, 3), (0, 0, 2, 2), (3, 0, 0, 2), (2, 3, 0, 0), (2, 2, 3, 0)]),
    (T.MAJOR_7_SHARP_5_FLAT_9, [(0, 2, 3, 2), (0, 0, 2, 3), (2, 0, 0, 2), (3, 2, 0, 0), (2, 3, 2, 0)]),
    (T.DOMINANT_7_FLAT_9, [(0, 2, 2, 2), (1, 0, 2, 2), (2, 1, 0, 2), (2, 2, 1, 0), (2, 2, 2, 1)]),
    (T.MINOR_7_FLAT_9, [(0, 1, 3, 2), (1, 0, 1, 3), (2, 1, 0, 1), (3, 2, 1, 0), (1, 3, 2, 1)]),
    (T.MINOR_FLAT_9_SHARP_11, [(0, 1, 2, 0), (4, 0, 1, 2), (0, 4, 0, 1), (2, 0, 4, 0), (1, 2, 0, 4)]),
    (T.HALF_DIMINISHED_FLAT_9, [(0, 1, 2, 3), (1, 0, 1, 2), (3, 1, 0, 1), (2, 3, 1, 0), (1, 2, 3, 1)]),
    (T.MINOR_MAJOR_FLAT_9, [(0, 1, 3, 3), (0, 0, 1, 3), (3, 0, 0, 1), (3, 3, 0, 0), (1, 3, 3, 0)]),
    (T.DIMINISHED_MAJOR_7_FLAT_9, [(0, 1, 2, 4), (0, 0, 1, 2), (4, 0, 0, 1), (2, 4, 0, 0), (1, 2, 4, 0)]),
    (T.DIMINISHED_7_FLAT_9, [(0, 1, 2, 2), (2, 0, 1, 2), (2, 2, 0, 1), (2, 2, 2, 0), (1, 2, 2, 2)]),
    (T.MAJOR_7_SHARP_9, [(2, 0, 2, 3), (0, 2, 0, 2), (3, 0, 2, 0), (2, 3, 0, 2), (0, 2, 3, 0)]),
    (T.DOMINANT_7_SHARP_9, [(2, 0, 2, 2), (1, 2, 0, 2), (2, 1, 2, 0), (2, 2, 1, 2), (0, 2, 2, 1)]),
    (T.MAJOR_7_SHARP_11, [(3, 1, 0, 3), (0, 3, 1, 0), (3, 0, 3, 1), (0, 3, 0, 3), (1, 0, 3, 0)]),
    (T.DOMINANT_9_FLAT_13, [(1, 1, 2, 0), (3, 1, 1, 2), (0, 3, 1, 1), (2, 0, 3, 1), (1, 2, 0, 3)]),
    (T.MAJOR_9_SHARP_13, [(1, 4, 2, 0), (0, 1, 4, 2), (0, 0, 1, 4), (2, 0, 0, 1), (4, 2, 0, 0)]),
    (T.MAJOR_9_SHARP_13, [(1, 1, 5, 0), (0, 1, 1, 5), (0, 0, 1, 1), (5, 0, 0, 1), (1, 5, 0, 0)]),
    (T.MAJOR_SHARP_9_SHARP_11, [(2, 0, 1, 0), (4, 2, 0, 1), (0, 4, 2, 0), (1, 0, 4, 2), (0, 1, 0, 4)]),
    (T.HALF_DIMINISHED_FLAT_11, [(2, 0, 1, 3), (1, 2, 0, 1), (3, 1, 2, 0), (1, 3, 1, 2), (0, 1, 3, 1)]),
    (T.MAJOR_11, [(3, 0, 1, 3), (0, 3, 0, 1), (3, 0, 3, 0), (1, 3, 0, 3), (0, 1, 3, 0)]),
    (T.MAJOR_11, [(1, 1, 0, 5), (0, 1, 1, 0), (5, 0, 1, 1), (0, 5, 0, 1), (1, 0, 5, 0)]),
    (T.DOMINANT_11, [(3, 0, 1, 2), (1, 3, 0, 1), (2, 1, 3, 0), (1, 2, 1, 3), (0, 1, 2, 1)]),
    (T.DOMINANT_11, [(1, 1, 0, 1), (4, 1, 1, 0), (1, 4, 1, 1), (0, 1, 4, 1), (1, 0, 1, 4)]),
    (T.DOMINANT_11, [(1, 1, 0, 4), (1, 1, 1, 0), (4, 1, 1, 1), (0, 4, 1, 1), (1, 0, 4, 1)]),
    (T.MINOR_11, [(2, 1, 1, 2), (1, 2, 1, 1), (2, 1, 2, 1), (1, 2, 1, 2), (1, 1, 2, 1)]),
    (T.MINOR_11, [(1, 0, 1, 1), (4, 1, 0, 1), (1, 4, 1, 0), (1, 1, 4, 1), (0, 1, 1, 4)]),
    (T.DIMINISHED_11, [(1, 0, 1, 0), (5, 1, 0, 1), (0, 5, 1, 0), (1, 0, 5, 1), (0, 1, 0, 5)]),
    (T.MINOR_MAJOR_11, [(2, 1, 1, 3), (0, 2, 1, 1), (3, 0, 2, 1), (1, 3, 0, 2), (1, 1, 3, 0)]),
    (T.DIMINISHED_MAJOR_11, [(2, 1, 0, 4), (0, 2, 1, 0), (4, 0, 2, 1), (0, 4, 0, 2), (1, 0, 4, 0)]),
    (T.MAJOR_11_FLAT_5, [(3, 0, 0, 4), (0, 3, 0, 0), (4, 0, 3, 0), (0, 4, 0, 3), (0, 0, 4, 0)]),
    (T.MAJOR_11_SHARP_5, [(3, 0, 2, 2), (0, 3, 0, 2), (2, 0, 3, 0), (2, 2, 0, 3), (0, 2, 2, 0)]),
    (T.MAJOR_11_FLAT_9, [(0, 2, 0, 5), (0, 0, 2, 0), (5, 0, 0, 2), (0, 5, 0, 0), (2, 0, 5, 0)]),
    (T.MAJOR_11_SHARP_9, [(2, 0, 0, 5), (0, 2, 0, 0), (5, 0, 2, 0), (0, 5, 0, 2), (0, 0, 5, 0)]),
    (T.MAJOR_11_SHARP_13, [(3, 0, 4, 0), (0, 3, 0, 4), (0, 0, 3, 0), (4, 0, 0, 3), (0, 4, 0, 0)]),
    (T.DOMINANT_11_FLAT_5, [(3, 0, 0, 3), (1, 3, 0, 0), (3, 1, 3, 0), (0, 3, 1, 3), (0, 0, 3, 1)]),
    (T.DOMINANT_11_FLAT_9, [(0, 2, 0, 4), (1, 0, 2, 0), (4, 1, 0, 2), (0, 4, 1, 0), (2, 0, 4, 1)]),
    (T.DOMINANT_11_FLAT_9, [(0, 2, 0, 1), (4, 0, 2, 0), (1, 4, 0, 2), (0, 1, 4, 0), (2, 0, 1, 4)]),
    (T.DOMINANT_11_SHARP_9, [(2, 0, 0, 4), (1, 2, 0, 0), (4, 1, 2, 0), (0, 4, 1, 2), (0, 0, 4, 1)]),
    (T.DOMINANT_7_SHARP_11, [(3, 1, 0, 2), (1, 3, 1, 0), (2, 1, 3, 1), (0, 2, 1, 3), (1, 0, 2, 1)]),
    (T.MINOR_7_SHARP_11, [(2, 2, 0, 2), (1, 2, 2, 0), (2, 1, 2, 2), (0, 2, 1, 2), (2, 0, 2, 1)]),
    (T.DOMINANT_13_SHARP_11, [(5, 0, 1, 0), (1, 5, 0, 1), (0, 1, 5, 0), (1, 0, 1, 5), (0, 1, 0, 1)]),
    (T.MAJOR_7_FLAT_9_SHARP_13, [(0, 2, 5, 0), (0, 0, 2, 5), (0, 0, 0, 2), (5, 0, 0, 0), (2, 5, 0, 0)]),
    (T.DOMINANT_7_FLAT_13, [(3, 2, 0, 1), (1, 3, 2, 0), (1, 1, 3, 2), (0, 1, 1, 3), (2, 0, 1, 1)]),
]

# ── Sextads ───────────────────────────────────────────────────────────────────

SEXTAD_ROTATIONS = [
    (T.DOMINANT_9_FLAT_13, [(1, 1, 2, 0, 1), (1, 1, 1, 2, 0), (1, 1, 1, 1, 2), (0, 1, 1, 1, 1), (2, 0, 1, 1, 1), (1, 2, 0, 1, 1)]),
    (T.MINOR_9_SHARP_11, [(1, 0, 2, 0, 2), (1, 1, 0, 2, 0), (2, 1, 1, 0, 2), (0, 2, 1, 1, 0), (2, 0, 2, 1, 1), (0, 2, 0, 2, 1)]),
    (T.MAJOR_11, [(1, 1, 0, 1, 3), (0, 1, 1, 0, 1), (3, 0, 1, 1, 0), (1, 3, 0, 1, 1), (0, 1, 3, 0, 1), (1, 0, 1, 3, 0)]),
    (T.DOMINANT_11, [(1, 1, 0, 1, 2), (1, 1, 1, 0, 1), (2, 1, 1, 1, 0), (1, 2, 1, 1, 1), (0, 1, 2, 1, 1), (1, 0, 1, 2, 1)]),
    (T.HALF_DIMINISHED_11, [(1, 0, 1, 0, 3), (1, 1, 0, 1, 0), (3, 1, 1, 0, 1), (0, 3, 1, 1, 0), (1, 0, 3, 1, 1), (0, 1, 0, 3, 1)]),
    (T.MAJOR_11_FLAT_5, [(1, 1, 0, 0, 4), (0, 1, 1, 0, 0), (4, 0, 1, 1, 0), (0, 4, 0, 1, 1), (0, 0, 4, 0, 1), (1, 0, 0, 4, 0)]),
    (T.MAJOR_11_FLAT_5_FLAT_9, [(0, 2, 0, 0, 4), (0, 0, 2, 0, 0), (4, 0, 0, 2, 0), (0, 4, 0, 0, 2), (0, 0, 4, 0, 0), (2, 0, 0, 4, 0)]),
    (T.MAJOR_11_SHARP_13, [(1, 1, 0, 4, 0), (0, 1, 1, 0, 4), (0, 0, 1, 1, 0), (4, 0, 0, 1, 1), (0, 4, 0, 0, 1), (1, 0, 4, 0, 0)]),
    (T.HALF_DIMINISHED_11_FLAT_9, [(0, 1, 1, 0, 3), (1, 0, 1, 1, 0), (3, 1, 0, 1, 1), (0, 3, 1, 0, 1), (1, 0, 3, 1, 0), (1, 1, 0, 3, 1)]),
    (T.MAJOR_11_FLAT_13, [(3, 0, 1, 0, 2), (0, 3, 0, 1, 0), (2, 0, 3, 0, 1), (0, 2, 0, 3, 0), (1, 0, 2, 0, 3), (0, 1, 0, 2, 0)]),
    (T.DOMINANT_11_FLAT_5, [(1, 1, 0, 0, 3), (1, 1, 1, 0, 0), (3, 1, 1, 1, 0), (0, 3, 1, 1, 1), (0, 0, 3, 1, 1), (1, 0, 0, 3, 1)]),
    (T.DOMINANT_11_SHARP_9, [(2, 0, 0, 1, 2), (1, 2, 0, 0, 1), (2, 1, 2, 0, 0), (1, 2, 1, 2, 0), (0, 1, 2, 1, 2), (0, 0, 1, 2, 1)]),
    (T.MINOR_FLAT_9_SHARP_11, [(0, 1, 2, 0, 2), (1, 0, 1, 2, 0), (2, 1, 0, 1, 2), (0, 2, 1, 0, 1), (2, 0, 2, 1, 0), (1, 2, 0, 2, 1)]),
    (T.DOMINANT_7_SHARP_11, [(1, 1, 1, 0, 2), (1, 1, 1, 1, 0), (2, 1, 1, 1, 1), (0, 2, 1, 1, 1), (1, 0, 2, 1, 1), (1, 1, 0, 2, 1)]),
    (T.DOMINANT_13_SHARP_11, [(3, 1, 0, 1, 0), (1, 3, 1, 0, 1), (0, 1, 3, 1, 0), (1, 0, 1, 3, 1), (0, 1, 0, 1, 3), (1, 0, 1, 0, 1)]),
]
