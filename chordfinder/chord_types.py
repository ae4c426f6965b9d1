"""
Chord-quality catalog.

Every quality the interval tables can produce, plus three sentinels:
    NONE      – no chord is defined for an interval pattern
    CHROMATIC – more than six distinct pitch classes are sounding
    DEFAULT   – nothing is sounding; the host's default chord name is shown
"""
from enum import IntEnum, auto


class ChordType(IntEnum):
    UNISON = 0
    MAJOR = auto()
    MINOR = auto()
    DIMINISHED = auto()
    AUGMENTED = auto()
    # sevenths
    MAJOR_7 = auto()
    DOMINANT_7 = auto()
    MINOR_7 = auto()
    HALF_DIMINISHED_7 = auto()
    DIMINISHED_7 = auto()
    MINOR_MAJOR_7 = auto()
    MAJOR_7_SHARP_5 = auto()
    MAJOR_7_FLAT_5 = auto()
    DOMINANT_7_SHARP_5 = auto()
    DOMINANT_7_FLAT_5 = auto()
    DOMINANT_FLAT_9 = auto()
    # ninths
    MAJOR_9 = auto()
    DOMINANT_9 = auto()
    MINOR_9 = auto()
    HALF_DIMINISHED_9 = auto()
    MINOR_MAJOR_9 = auto()
    DIMINISHED_MAJOR_9 = auto()
    MAJOR_9_FLAT_5 = auto()
    DOMINANT_9_FLAT_5 = auto()
    DOMINANT_9_FLAT_13 = auto()
    MINOR_9_SHARP_11 = auto()
    MINOR_MAJOR_9_FLAT_11 = auto()
    # altered ninths
    MAJOR_7_FLAT_9 = auto()
    MAJOR_7_SHARP_5_FLAT_9 = auto()
    DOMINANT_7_FLAT_9 = auto()
    MINOR_7_FLAT_9 = auto()
    MINOR_FLAT_9_SHARP_11 = auto()
    HALF_DIMINISHED_FLAT_9 = auto()
    DIMINISHED_7_FLAT_9 = auto()
    MINOR_MAJOR_FLAT_9 = auto()
    DIMINISHED_MAJOR_7_FLAT_9 = auto()
    MAJOR_7_SHARP_9 = auto()
    DOMINANT_7_SHARP_9 = auto()
    MAJOR_7_SHARP_11 = auto()
    MAJOR_SHARP_9_SHARP_11 = auto()
    HALF_DIMINISHED_FLAT_11 = auto()
    # elevenths
    MAJOR_11 = auto()
    DOMINANT_11 = auto()
    MINOR_11 = auto()
    HALF_DIMINISHED_11 = auto()
    DIMINISHED_11 = auto()
    MINOR_MAJOR_11 = auto()
    DIMINISHED_MAJOR_11 = auto()
    MAJOR_11_FLAT_5 = auto()
    MAJOR_11_SHARP_5 = auto()
    MAJOR_11_FLAT_9 = auto()
    MAJOR_11_SHARP_9 = auto()
    MAJOR_11_FLAT_13 = auto()
    MAJOR_11_SHARP_13 = auto()
    MAJOR_11_FLAT_5_FLAT_9 = auto()
    DOMINANT_11_FLAT_5 = auto()
    DOMINANT_11_FLAT_9 = auto()
    DOMINANT_11_SHARP_9 = auto()
    HALF_DIMINISHED_11_FLAT_9 = auto()
    # sharp elevenths and thirteenths
    DOMINANT_7_SHARP_11 = auto()
    MINOR_7_SHARP_11 = auto()
    DOMINANT_13_SHARP_11 = auto()
    MAJOR_7_FLAT_9_13 = auto()
    MAJOR_7_SHARP_13 = auto()
    MAJOR_9_SHARP_13 = auto()
    MAJOR_7_FLAT_9_SHARP_13 = auto()
    DOMINANT_7_FLAT_13 = auto()
    # sentinels
    CHROMATIC = auto()
    NONE = auto()
    DEFAULT = auto()


SENTINELS = frozenset({ChordType.NONE, ChordType.DEFAULT})
UNKNOWN_NAME = "unknown"

CHORD_TYPE_NAMES: dict[ChordType, str] = {
    ChordType.UNISON:                    "unison",
    ChordType.MAJOR:                     "major",
    ChordType.MINOR:                     "minor",
    ChordType.DIMINISHED:                "diminished",
    ChordType.AUGMENTED:                 "augmented",
    ChordType.MAJOR_7:                   "major 7th",
    ChordType.DOMINANT_7:                "dominant 7th",
    ChordType.MINOR_7:                   "minor 7th",
    ChordType.HALF_DIMINISHED_7:         "half diminished 7th",
    ChordType.DIMINISHED_7:              "diminished 7th",
    ChordType.MINOR_MAJOR_7:             "minor major 7th",
    ChordType.MAJOR_7_SHARP_5:           "major 7th #5",
    ChordType.MAJOR_7_FLAT_5:            "major 7th b5",
    ChordType.DOMINANT_7_SHARP_5:        "dominant 7th #5",
    ChordType.DOMINANT_7_FLAT_5:         "dominant 7th b5",
    ChordType.DOMINANT_FLAT_9:           "dominant b9",
    ChordType.MAJOR_9:                   "major 9th",
    ChordType.DOMINANT_9:                "dominant 9th",
    ChordType.MINOR_9:                   "minor 9th",
    ChordType.HALF_DIMINISHED_9:         "half diminished 9th",
    ChordType.MINOR_MAJOR_9:             "minor major 9th",
    ChordType.DIMINISHED_MAJOR_9:        "diminished major 9th",
    ChordType.MAJOR_9_FLAT_5:            "major 9th b5",
    ChordType.DOMINANT_9_FLAT_5:         "dominant 9th b5",
    ChordType.DOMINANT_9_FLAT_13:        "dominant 9th b13",
    ChordType.MINOR_9_SHARP_11:          "minor 9th #11",
    ChordType.MINOR_MAJOR_9_FLAT_11:     "minor/maj 9th b11",
    ChordType.MAJOR_7_FLAT_9:            "major 7th b9",
    ChordType.MAJOR_7_SHARP_5_FLAT_9:    "major 7th #5 b9",
    ChordType.DOMINANT_7_FLAT_9:         "dominant 7th b9",
    ChordType.MINOR_7_FLAT_9:            "minor 7th b9",
    ChordType.MINOR_FLAT_9_SHARP_11:     "minor b9 #11",
    ChordType.HALF_DIMINISHED_FLAT_9:    "half diminished b9",
    ChordType.DIMINISHED_7_FLAT_9:       "diminished b9",
    ChordType.MINOR_MAJOR_FLAT_9:        "minor major b9",
    ChordType.DIMINISHED_MAJOR_7_FLAT_9: "diminished M7 b9",
    ChordType.MAJOR_7_SHARP_9:           "major 7th #9",
    ChordType.DOMINANT_7_SHARP_9:        "dominant #9",
    ChordType.MAJOR_7_SHARP_11:          "major 7th #11",
    ChordType.MAJOR_SHARP_9_SHARP_11:    "major #9 #11",
    ChordType.HALF_DIMINISHED_FLAT_11:   "half diminished b11",
    ChordType.MAJOR_11:                  "major 11th",
    ChordType.DOMINANT_11:               "dominant 11th",
    ChordType.MINOR_11:                  "minor 11th",
    ChordType.HALF_DIMINISHED_11:        "half diminished 11th",
    ChordType.DIMINISHED_11:             "diminished 11th",
    ChordType.MINOR_MAJOR_11:            "minor major 11th",
    ChordType.DIMINISHED_MAJOR_11:       "diminished maj 11th",
    ChordType.MAJOR_11_FLAT_5:           "major 11th b5",
    ChordType.MAJOR_11_SHARP_5:          "major 11th #5",
    ChordType.MAJOR_11_FLAT_9:           "major 11th b9",
    ChordType.MAJOR_11_SHARP_9:          "major 11th #9",
    ChordType.MAJOR_11_FLAT_13:          "major 11th b13",
    ChordType.MAJOR_11_SHARP_13:         "major 11th #13",
    ChordType.MAJOR_11_FLAT_5_FLAT_9:    "major 11th b5 b9",
    ChordType.DOMINANT_11_FLAT_5:        "dominant 11th b5",
    ChordType.DOMINANT_11_FLAT_9:        "dominant 11th b9",
    ChordType.DOMINANT_11_SHARP_9:       "dominant 11th #9",
    ChordType.HALF_DIMINISHED_11_FLAT_9: "half dim 11th b9",
    ChordType.DOMINANT_7_SHARP_11:       "dominant #11",
    ChordType.MINOR_7_SHARP_11:          "minor 7th #11",
    ChordType.DOMINANT_13_SHARP_11:      "dominant 13th #11",
    ChordType.MAJOR_7_FLAT_9_13:         "major 7 b9 13",
    ChordType.MAJOR_7_SHARP_13:          "major 7th #13",
    ChordType.MAJOR_9_SHARP_13:          "major 9th #13",
    ChordType.MAJOR_7_FLAT_9_SHARP_13:   "major 7 b9 #13",
    ChordType.DOMINANT_7_FLAT_13:        "dominant 7th b13",
    ChordType.CHROMATIC:                 "chromatic",
}


def chord_type_name(chord_type: ChordType) -> str:
    """Display string for a quality; sentinels and unlisted values read "unknown"."""
    return CHORD_TYPE_NAMES.get(chord_type, UNKNOWN_NAME)


def is_named(chord_type: ChordType) -> bool:
    return chord_type not in SENTINELS
