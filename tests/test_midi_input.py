import unittest
import os
import shutil
import tempfile
from unittest.mock import MagicMock, patch
import mido
from chordfinder.config import DetectorConfig
from chordfinder.engine import ChordDetector
from chordfinder.midi_input import (
    event_from_message,
    feed_messages,
    is_all_notes_off,
    messages_from_file,
    open_input,
)


def on(note, velocity=100, channel=0):
    return mido.Message("note_on", note=note, velocity=velocity, channel=channel)


def off(note, channel=0):
    return mido.Message("note_off", note=note, velocity=64, channel=channel)


class TestMessages(unittest.TestCase):
    def test_event_from_message(self):
        self.assertEqual(event_from_message(on(60, 90)), (60, 90))
        self.assertEqual(event_from_message(on(60, 0)), (60, 0))
        self.assertEqual(event_from_message(off(60)), (60, 0))
        self.assertIsNone(event_from_message(mido.Message("control_change", control=64, value=127)))
        self.assertIsNone(event_from_message(mido.Message("pitchwheel", pitch=100)))

    def test_is_all_notes_off(self):
        self.assertTrue(is_all_notes_off(mido.Message("control_change", control=123, value=0)))
        self.assertTrue(is_all_notes_off(mido.Message("control_change", control=120, value=0)))
        self.assertFalse(is_all_notes_off(mido.Message("control_change", control=64, value=0)))
        self.assertFalse(is_all_notes_off(on(60)))


class TestFeedMessages(unittest.TestCase):
    def setUp(self):
        self.detector = ChordDetector(DetectorConfig(default_chord_name="N.C."))

    def test_labels(self):
        messages = [on(60), on(64), on(67), off(64), on(67, 0)]
        self.assertEqual(list(feed_messages(messages, self.detector)),
                         ["C unison", "C major", "C major", "C major", "C unison"])

    def test_other_messages_skipped(self):
        messages = [
            mido.MetaMessage("set_tempo", tempo=500000),
            mido.Message("program_change", program=1),
            on(60),
            mido.Message("control_change", control=64, value=127),
        ]
        self.assertEqual(list(feed_messages(messages, self.detector)), ["C unison"])

    def test_ignored_events_yield_nothing(self):
        messages = [on(60), off(62)]
        with self.assertLogs("chordfinder.voices", level="WARNING"):
            self.assertEqual(list(feed_messages(messages, self.detector)), ["C unison"])

    def test_all_notes_off_resets(self):
        messages = [on(60), on(64), mido.Message("control_change", control=123, value=0), on(62)]
        self.assertEqual(list(feed_messages(messages, self.detector)),
                         ["C unison", "C major", "N.C.", "D unison"])
        self.assertEqual(self.detector.active_pitches, [62])

    def test_channel_filter(self):
        messages = [on(60, channel=0), on(64, channel=9), on(67, channel=0)]
        self.assertEqual(list(feed_messages(messages, self.detector, channel=0)),
                         ["C unison", "C major"])


class TestMidiFile(unittest.TestCase):
    def setUp(self):
        self.test_dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def test_replay_file(self):
        path = os.path.join(self.test_dir, "take.mid")
        mid = mido.MidiFile()
        track = mido.MidiTrack()
        mid.tracks.append(track)
        track.append(mido.MetaMessage("set_tempo", tempo=mido.bpm2tempo(120), time=0))
        for n in (57, 60, 64):
            track.append(mido.Message("note_on", note=n, velocity=80, time=0))
        for i, n in enumerate((57, 60, 64)):
            track.append(mido.Message("note_off", note=n, velocity=0, time=480 if i == 0 else 0))
        mid.save(path)

        labels = list(feed_messages(messages_from_file(path)))
        self.assertEqual(labels, ["A unison", "A minor", "A minor", "C major", "E unison", ""])


class TestOpenInput(unittest.TestCase):
    @patch("mido.get_input_names", return_value=[])
    def test_no_ports(self, _):
        with self.assertRaises(OSError):
            open_input()

    @patch("mido.get_input_names", return_value=["Keyboard"])
    def test_unknown_port(self, _):
        with self.assertRaises(ValueError):
            open_input("Synth")

    @patch("mido.open_input")
    @patch("mido.get_input_names", return_value=["Keyboard", "Pads"])
    def test_first_port_by_default(self, _, mock_open):
        mock_open.return_value = MagicMock(name="port")
        open_input()
        mock_open.assert_called_once_with("Keyboard")


if __name__ == '__main__':
    unittest.main()
