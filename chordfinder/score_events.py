"""
Replay a notated score through a ChordDetector.

Scores are read with music21 (ABC, MusicXML, MIDI, anything its converter
accepts). Every note or chord becomes a note-on at its offset and a note-off
at offset + duration; tied notes are merged first so a held note is not
re-struck.
"""
import collections
import logging
import os
import re

import music21

from chordfinder.constants import DEFAULT_VELOCITY
from chordfinder.engine import ChordDetector

logger = logging.getLogger(__name__)

NoteEvent = collections.namedtuple("NoteEvent", ["offset", "pitch", "velocity"])


def _split_abc_file(content):
    """Split multi-tune ABC content into one string per tune (X:1, X: 2, etc.)."""
    chunks = re.split(r"\n(?=X:\s*\d)", content.strip(), flags=re.IGNORECASE)
    return [c.strip() for c in chunks
            if c.strip() and re.match(r"X:\s*\d", c.strip(), re.IGNORECASE)]


def _expand(parsed):
    if hasattr(parsed, "scores") and parsed.scores:
        yield from parsed.scores
    else:
        yield parsed


def iter_scores(path):
    """Yield music21 Score objects from a file; multi-tune ABC files yield one per tune."""
    if not os.path.isfile(path):
        raise FileNotFoundError(f"score file not found: {path}")
    if os.path.splitext(path)[1].lower() != ".abc":
        yield from _expand(music21.converter.parse(path))
        return

    with open(path, encoding="utf-8", errors="replace") as f:
        tunes = _split_abc_file(f.read())
    if not tunes:
        yield from _expand(music21.converter.parse(path))
        return
    for i, tune in enumerate(tunes):
        try:
            parsed = music21.converter.parse(tune, format="abc")
        except Exception as exc:
            logger.warning("%s: skipping tune %d, music21 could not parse it: %s",
                           path, i + 1, exc)
            continue
        yield from _expand(parsed)


def load_score(path):
    """First score in ``path``."""
    for score in iter_scores(path):
        return score
    raise ValueError(f"{path}: no parsable score")


def _velocity_of(element):
    velocity = element.volume.velocity
    return int(velocity) if velocity else DEFAULT_VELOCITY


def events_from_score(score) -> list:
    """
    Time-ordered NoteEvents for every sounding pitch in ``score``.

    At equal offsets note-offs come before note-ons, so a repeated chord is
    released before it is struck again. Chord symbols, rests and zero-length
    notes (grace notes) produce no events.
    """
    events = []
    for element in score.stripTies().flatten().notes:
        if isinstance(element, music21.harmony.ChordSymbol):
            continue
        length = float(element.duration.quarterLength)
        if length <= 0:
            continue
        start = float(element.offset)
        velocity = _velocity_of(element)
        for p in element.pitches:
            pitch = int(round(p.ps))
            events.append(NoteEvent(start, pitch, velocity))
            events.append(NoteEvent(start + length, pitch, 0))
    events.sort(key=lambda e: (e.offset, e.velocity != 0, e.pitch))
    return events


def label_score(score, detector=None):
    """
    Feed a score through ``detector`` (a fresh default one when None).

    Returns:
        List of (offset, label) for every label the detector emitted.
    """
    if detector is None:
        detector = ChordDetector()
    labels = []
    for event in events_from_score(score):
        label = detector.process(event.pitch, event.velocity)
        if label is not None:
            labels.append((event.offset, label))
    return labels
