# ── Voice allocation ──────────────────────────────────────────────────────────

MAX_POLY = 32            # notes sounding at once
NOTES_PER_OCTAVE = 12
PITCH_MIN, PITCH_MAX = 0, 127

# Configuration defaults. An upper limit of 0 means "not given".
DEFAULT_LOWER_LIMIT = 0
DEFAULT_UPPER_LIMIT = 128
DEFAULT_CHORD_NAME = ""

DEFAULT_VELOCITY = 100

# ── Pitch-class lookup tables ─────────────────────────────────────────────────

# Flat-preferred spelling used for chord labels.
_PC_TO_NOTE: list[str] = [
    "C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B"
]
NO_ROOT = "no root"

# ── Interval tables ───────────────────────────────────────────────────────────
# Arity → number of axes / size of each axis. A key component for an n-note
# set lies in [0, 11 - n].
TABLE_SHAPES: dict[int, tuple[int, ...]] = {
    2: (11,),
    3: (10, 10),
    4: (9, 9, 9),
    5: (8, 8, 8, 8),
    6: (7, 7, 7, 7, 7),
}

# Root member index → inversion (0 root position, 1 first, 2 second).
# Dyads report the root index itself.
INVERSIONS: dict[int, tuple[int, ...]] = {
    2: (0, 1),
    3: (0, 2, 1),
    4: (0, 2, 2, 1),
    5: (0, 2, 2, 2, 1),
    6: (0, 2, 2, 2, 2, 1),
}

# Reduced dyad interval (tritone) whose root is not one of the two notes:
# C + F# is heard as the 3rd and 7th of Ab7.
DYAD_TRITONE = 5
DYAD_TRITONE_ROOT_OFFSET = 8

MAX_TABLE_ARITY = 6
