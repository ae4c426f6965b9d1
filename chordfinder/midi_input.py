"""
Drive a ChordDetector from MIDI messages (mido).

Live input comes from a mido input port; recorded input from a Standard MIDI
File. Either way the messages are reduced to (pitch, velocity) pairs and fed
to the detector in arrival order.
"""
import logging

import mido

from chordfinder.engine import ChordDetector

logger = logging.getLogger(__name__)

ALL_NOTES_OFF = 123
ALL_SOUND_OFF = 120


def event_from_message(msg):
    """
    (pitch, velocity) for a note message, or None for anything else.

    note_off and note_on with velocity 0 both come back with velocity 0.
    """
    if msg.type == "note_on":
        return msg.note, msg.velocity
    if msg.type == "note_off":
        return msg.note, 0
    return None


def is_all_notes_off(msg) -> bool:
    return msg.type == "control_change" and msg.control in (ALL_NOTES_OFF, ALL_SOUND_OFF)


def feed_messages(messages, detector=None, channel=None):
    """
    Feed mido messages to ``detector`` and yield each label it emits.

    Args:
        messages: iterable of mido.Message (a port, a MidiFile, a list).
        detector: ChordDetector; a fresh default one when None.
        channel: only messages on this channel (0-15) are used; all when None.
    """
    if detector is None:
        detector = ChordDetector()
    for msg in messages:
        if msg.is_meta:
            continue
        if channel is not None and getattr(msg, "channel", None) != channel:
            continue
        if is_all_notes_off(msg):
            yield detector.reset()
            continue
        event = event_from_message(msg)
        if event is None:
            continue
        label = detector.process(*event)
        if label is not None:
            yield label


def messages_from_file(path):
    """Every message of a Standard MIDI File, all tracks merged in time order."""
    return iter(mido.MidiFile(path))


def list_input_ports():
    return mido.get_input_names()


def open_input(port_name=None):
    """
    Open a MIDI input port by name, or the first available one when ``port_name``
    is None.
    """
    available = mido.get_input_names()
    if not available:
        raise OSError("no MIDI input ports found")
    if port_name is None:
        port_name = available[0]
        logger.info("no MIDI port specified, using %r", port_name)
    elif port_name not in available:
        raise ValueError(f"MIDI port {port_name!r} not found; available: {available}")
    port = mido.open_input(port_name)
    logger.info("opened MIDI port %r", port.name)
    return port


def listen(port_name=None, detector=None, channel=None, on_label=print):
    """Block reading a live port, passing every emitted label to ``on_label``."""
    with open_input(port_name) as port:
        for label in feed_messages(port, detector, channel):
            on_label(label)
