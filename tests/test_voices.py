import unittest
import numpy as np
from chordfinder.constants import MAX_POLY
from chordfinder.voices import PitchClassSet, VoiceAllocator


class TestPitchClassSet(unittest.TestCase):
    def test_from_pitches_collapses_octaves(self):
        pcs = PitchClassSet.from_pitches([60, 64, 67, 72])
        self.assertEqual(pcs.members, (0, 4, 7))
        self.assertEqual(len(pcs), 3)
        self.assertIn(4, pcs)
        self.assertNotIn(5, pcs)

    def test_lowest_pitch_per_class(self):
        pcs = PitchClassSet.from_pitches([72, 64, 48, 67])
        self.assertEqual(pcs.lowest_pitch(0), 48)
        self.assertEqual(pcs.lowest_pitch(4), 64)
        self.assertIsNone(pcs.lowest_pitch(1))
        self.assertEqual(pcs.bass_pitch, 48)

    def test_empty(self):
        pcs = PitchClassSet()
        self.assertEqual(pcs.members, ())
        self.assertIsNone(pcs.bass_pitch)

    def test_vector_length_checked(self):
        with self.assertRaises(ValueError):
            PitchClassSet(np.ones(11, dtype=bool))

    def test_read_only(self):
        pcs = PitchClassSet.from_pitch_classes([0, 4, 7])
        with self.assertRaises(ValueError):
            pcs.present[1] = True

    def test_without_returns_copy(self):
        pcs = PitchClassSet.from_pitches([60, 64, 67])
        reduced = pcs.without(4)
        self.assertEqual(reduced.members, (0, 7))
        self.assertEqual(reduced.lowest_pitch(0), 60)
        self.assertEqual(pcs.members, (0, 4, 7))

    def test_equality(self):
        self.assertEqual(PitchClassSet.from_pitches([60, 64]), PitchClassSet.from_pitches([64, 60]))
        self.assertNotEqual(PitchClassSet.from_pitches([60, 64]), PitchClassSet.from_pitches([48, 64]))


class TestVoiceAllocator(unittest.TestCase):
    def setUp(self):
        self.voices = VoiceAllocator()

    def on(self, pitch):
        return self.voices.apply(pitch, 100, 0, 128)

    def off(self, pitch):
        return self.voices.apply(pitch, 0, 0, 128)

    def test_note_on_and_off(self):
        pcs = self.on(60)
        self.assertEqual(pcs.members, (0,))
        self.assertEqual(self.voices.count, 1)
        pcs = self.off(60)
        self.assertEqual(pcs.members, ())
        self.assertEqual(self.voices.count, 0)

    def test_first_free_slot(self):
        self.on(60)
        self.on(64)
        self.on(67)
        self.off(64)
        self.on(70)
        self.assertEqual(self.voices.slots[:3], (60, 70, 67))

    def test_polyphony_bound(self):
        for i in range(MAX_POLY):
            self.assertIsNotNone(self.on(30 + i))
        with self.assertLogs("chordfinder.voices", level="WARNING") as cm:
            self.assertIsNone(self.on(100))
        self.assertIn("too many note-on messages", cm.output[0])
        self.assertEqual(self.voices.count, MAX_POLY)
        self.assertNotIn(100, self.voices.active_pitches)

    def test_note_off_frees_exactly_one_slot(self):
        self.on(60)
        self.on(60)
        self.on(64)
        self.off(60)
        self.assertEqual(self.voices.count, 2)
        self.assertEqual(sorted(self.voices.active_pitches), [60, 64])
        self.assertEqual(self.voices.pitch_classes.members, (0, 4))

    def test_unmatched_note_off_ignored(self):
        self.on(60)
        with self.assertLogs("chordfinder.voices", level="WARNING") as cm:
            self.assertIsNone(self.off(62))
        self.assertIn("note-off with no matching note-on", cm.output[0])
        self.assertEqual(self.voices.count, 1)
        self.assertEqual(self.voices.pitch_classes.members, (0,))

    def test_range_filter(self):
        self.on(60)
        before = self.voices.pitch_classes
        self.assertIsNone(self.voices.apply(30, 100, 36, 96))
        self.assertIsNone(self.voices.apply(100, 100, 36, 96))
        self.assertIsNone(self.voices.apply(60, 0, 61, 96))
        self.assertIs(self.voices.pitch_classes, before)
        self.assertEqual(self.voices.count, 1)
        self.assertIsNotNone(self.voices.apply(36, 100, 36, 96))
        self.assertIsNotNone(self.voices.apply(96, 100, 36, 96))

    def test_pitches_outside_midi_ignored(self):
        for pitch in (-1, 128, 40000):
            self.assertIsNone(self.voices.apply(pitch, 100, -100, 100000))
        self.assertEqual(self.voices.count, 0)
        self.assertEqual(self.voices.slots, (None,) * MAX_POLY)
        for i in range(MAX_POLY):
            self.assertIsNotNone(self.on(i))
        self.assertEqual(self.voices.count, MAX_POLY)

    def test_pitch_zero_occupies_a_slot(self):
        self.assertEqual(self.on(0).members, (0,))
        self.assertEqual(self.voices.slots[0], 0)
        self.assertEqual(self.voices.count, 1)
        self.assertEqual(self.off(0).members, ())
        self.assertEqual(self.voices.count, 0)

    def test_duplicate_pitch_classes_across_octaves(self):
        self.on(48)
        self.on(72)
        self.on(64)
        pcs = self.voices.pitch_classes
        self.assertEqual(pcs.members, (0, 4))
        self.assertEqual(pcs.lowest_pitch(0), 48)
        self.off(48)
        self.assertEqual(self.voices.pitch_classes.lowest_pitch(0), 72)

    def test_clear(self):
        self.on(60)
        self.on(64)
        pcs = self.voices.clear()
        self.assertEqual(pcs.members, ())
        self.assertEqual(self.voices.count, 0)
        self.assertEqual(self.voices.active_pitches, [])


if __name__ == '__main__':
    unittest.main()
