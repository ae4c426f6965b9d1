"""
Voice bookkeeping: which pitches are sounding, and the pitch-class set they
project onto.
"""
import logging

import numpy as np

from chordfinder.constants import MAX_POLY, NOTES_PER_OCTAVE, PITCH_MAX, PITCH_MIN

logger = logging.getLogger(__name__)

_ABSENT = -1


class PitchClassSet:
    """
    Presence vector over the 12 pitch classes, plus the lowest sounding
    absolute pitch for each class that is present.

    Instances are not modified after construction; ``without`` returns a
    reduced copy.
    """

    def __init__(self, present=None, lowest=None):
        if present is None:
            present = np.zeros(NOTES_PER_OCTAVE, dtype=bool)
        present = np.array(present, dtype=bool)
        if present.shape != (NOTES_PER_OCTAVE,):
            raise ValueError(f"pitch-class vector must have {NOTES_PER_OCTAVE} entries, "
                             f"got shape {present.shape}")
        if lowest is None:
            lowest = np.where(present, np.arange(NOTES_PER_OCTAVE), _ABSENT)
        lowest = np.array(lowest, dtype=np.int16)
        lowest[~present] = _ABSENT

        present.flags.writeable = False
        lowest.flags.writeable = False
        self._present = present
        self._lowest = lowest

    @classmethod
    def from_pitches(cls, pitches):
        """Project absolute pitches onto pitch classes, keeping the lowest pitch per class."""
        present = np.zeros(NOTES_PER_OCTAVE, dtype=bool)
        lowest = np.full(NOTES_PER_OCTAVE, _ABSENT, dtype=np.int16)
        for pitch in pitches:
            pc = pitch % NOTES_PER_OCTAVE
            if not present[pc] or lowest[pc] > pitch:
                lowest[pc] = pitch
            present[pc] = True
        return cls(present, lowest)

    @classmethod
    def from_pitch_classes(cls, pitch_classes):
        present = np.zeros(NOTES_PER_OCTAVE, dtype=bool)
        for pc in pitch_classes:
            present[pc % NOTES_PER_OCTAVE] = True
        return cls(present)

    @property
    def present(self) -> np.ndarray:
        return self._present

    @property
    def members(self) -> tuple[int, ...]:
        """Present pitch classes in ascending order."""
        return tuple(int(pc) for pc in np.flatnonzero(self._present))

    def lowest_pitch(self, pitch_class: int):
        pc = pitch_class % NOTES_PER_OCTAVE
        return int(self._lowest[pc]) if self._present[pc] else None

    @property
    def bass_pitch(self):
        """Lowest sounding pitch across all classes, or None when empty."""
        sounding = self._lowest[self._present]
        return int(sounding.min()) if sounding.size else None

    def without(self, pitch_class: int) -> "PitchClassSet":
        present = self._present.copy()
        present[pitch_class % NOTES_PER_OCTAVE] = False
        return PitchClassSet(present, self._lowest.copy())

    def __len__(self):
        return int(np.count_nonzero(self._present))

    def __contains__(self, pitch_class):
        return bool(self._present[pitch_class % NOTES_PER_OCTAVE])

    def __eq__(self, other):
        if not isinstance(other, PitchClassSet):
            return NotImplemented
        return (np.array_equal(self._present, other._present)
                and np.array_equal(self._lowest, other._lowest))

    def __repr__(self):
        return f"PitchClassSet({list(self.members)})"


class VoiceAllocator:
    """
    Fixed table of voice slots. Note-on takes the first free slot, note-off
    frees the first slot holding that pitch. The same pitch may occupy
    several slots.
    """

    def __init__(self, max_poly: int = MAX_POLY):
        self.max_poly = max_poly
        self._slots = np.zeros(max_poly, dtype=np.int16)
        self._occupied = np.zeros(max_poly, dtype=bool)
        self._pitch_classes = PitchClassSet()

    @property
    def count(self) -> int:
        """Number of occupied slots."""
        return int(np.count_nonzero(self._occupied))

    @property
    def slots(self) -> tuple:
        """Slot contents in slot order; None marks a free slot."""
        return tuple(int(p) if used else None for p, used in zip(self._slots, self._occupied))

    @property
    def active_pitches(self) -> list[int]:
        return [int(p) for p in self._slots[self._occupied]]

    @property
    def pitch_classes(self) -> PitchClassSet:
        return self._pitch_classes

    def apply(self, pitch: int, velocity: int, lower_limit: int, upper_limit: int):
        """
        Apply one note event.

        Args:
            pitch: MIDI note number. Values outside 0..127 are ignored.
            velocity: 0 releases the pitch, anything else sounds it.
            lower_limit, upper_limit: inclusive pitch range; events outside it
                are ignored.

        Returns:
            The recomputed PitchClassSet, or None when the event was ignored.
        """
        if not PITCH_MIN <= pitch <= PITCH_MAX:
            return None
        if not lower_limit <= pitch <= upper_limit:
            return None

        if velocity == 0:
            accepted = self._release(pitch)
        else:
            accepted = self._allocate(pitch)
        if not accepted:
            return None

        self._pitch_classes = PitchClassSet.from_pitches(self.active_pitches)
        return self._pitch_classes

    def _release(self, pitch):
        matches = np.flatnonzero(self._occupied & (self._slots == pitch))
        if matches.size == 0:
            logger.warning("note-off with no matching note-on (ignored): pitch %d", pitch)
            return False
        self._occupied[matches[0]] = False
        return True

    def _allocate(self, pitch):
        free = np.flatnonzero(~self._occupied)
        if free.size == 0:
            logger.warning("too many note-on messages (ignored): pitch %d, %d voices sounding",
                           pitch, self.count)
            return False
        self._slots[free[0]] = pitch
        self._occupied[free[0]] = True
        return True

    def clear(self) -> PitchClassSet:
        """Release every voice."""
        self._occupied[:] = False
        self._pitch_classes = PitchClassSet()
        return self._pitch_classes
