"""
ChordDetector: note events in, chord labels out.

Each accepted event runs to completion before returning:
    voice allocation → pitch-class set → classify → render label

Events are delivered as a stored velocity followed by a pitch, matching hosts
that send the two on separate channels:

    detector = ChordDetector(DetectorConfig(default_chord_name="N.C."))
    detector.set_velocity(90)
    detector.note(60)        # "C unison"
    detector.process(64, 90) # "C major"
"""
import logging

from chordfinder.classifier import classify
from chordfinder.config import DetectorConfig
from chordfinder.constants import DEFAULT_VELOCITY, MAX_POLY
from chordfinder.interval_tables import get_default_tables
from chordfinder.namer import render
from chordfinder.voices import VoiceAllocator

logger = logging.getLogger(__name__)


class ChordDetector:
    """
    One instance per input stream. Owns its voice slots; the interval tables
    are shared and read-only.

    Args:
        config: DetectorConfig; defaults apply when None.
        tables: IntervalTables to classify against; the process-wide default
            bundle when None.
        listener: optional callable receiving every emitted label.
        max_poly: number of voice slots.
    """

    def __init__(self, config=None, tables=None, listener=None, max_poly=MAX_POLY):
        self.config = config if config is not None else DetectorConfig()
        self.tables = tables if tables is not None else get_default_tables()
        self.listener = listener
        self._voices = VoiceAllocator(max_poly)
        self._velocity = 0
        self._classification = classify(self._voices.pitch_classes, self.tables)
        self._label = render(self._classification, self.config.default_chord_name)

    # ── Input ────────────────────────────────────────────────────────────────

    def set_velocity(self, velocity):
        """Store the velocity applied by the next ``note`` call. 0 means note-off."""
        self._velocity = int(velocity)

    def note(self, pitch):
        """
        Apply the stored velocity to ``pitch``.

        Returns:
            The new label, or None when the event was ignored (out of range,
            note-off with nothing to release, all voices in use).
        """
        pitch = int(pitch)
        if not self.config.in_range(pitch):
            return None
        pitch_classes = self._voices.apply(pitch, self._velocity,
                                           self.config.lower_limit, self.config.upper_limit)
        if pitch_classes is None:
            return None
        return self._emit(classify(pitch_classes, self.tables))

    def process(self, pitch, velocity):
        self.set_velocity(velocity)
        return self.note(pitch)

    def note_on(self, pitch, velocity=DEFAULT_VELOCITY):
        """A velocity of 0 releases the pitch, as MIDI note-on messages do."""
        return self.process(pitch, velocity)

    def note_off(self, pitch):
        return self.process(pitch, 0)

    def reset(self):
        """Release every voice (all-notes-off) and emit the empty-set label."""
        return self._emit(classify(self._voices.clear(), self.tables))

    def _emit(self, classification):
        self._classification = classification
        self._label = render(classification, self.config.default_chord_name)
        logger.debug("%s -> %r", list(classification.pitch_classes), self._label)
        if self.listener is not None:
            self.listener(self._label)
        return self._label

    # ── State ────────────────────────────────────────────────────────────────

    @property
    def velocity(self) -> int:
        return self._velocity

    @property
    def classification(self):
        return self._classification

    @property
    def label(self) -> str:
        return self._label

    @property
    def pitch_classes(self):
        return self._voices.pitch_classes

    @property
    def active_pitches(self) -> list[int]:
        return self._voices.active_pitches

    @property
    def bass_pitch(self):
        return self._voices.pitch_classes.bass_pitch

    def __repr__(self):
        return (f"ChordDetector(range={self.config.lower_limit}..{self.config.upper_limit}, "
                f"voices={self._voices.count}, label={self._label!r})")
