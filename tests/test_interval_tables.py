import unittest
import numpy as np
from chordfinder import table_data
from chordfinder.chord_types import ChordType
from chordfinder.classifier import find_round_trip_failures
from chordfinder.interval_tables import (
    IntervalTable,
    IntervalTables,
    TableCollisionError,
    build_rotation_table,
    build_tables,
    get_default_tables,
    interval_key,
    members_from_key,
)


class TestIntervalKeys(unittest.TestCase):
    def test_interval_key(self):
        # C E G: gaps 4 and 3 semitones, reduced by one
        self.assertEqual(interval_key((0, 4, 7)), (3, 2))
        self.assertEqual(interval_key((0, 1)), (0,))
        self.assertEqual(interval_key((5,)), ())

    def test_interval_key_ignores_transposition(self):
        self.assertEqual(interval_key((2, 6, 9)), interval_key((0, 4, 7)))

    def test_members_from_key(self):
        self.assertEqual(members_from_key((3, 2)), [0, 4, 7])
        self.assertEqual(members_from_key((3, 2), start=2), [2, 6, 9])

    def test_members_from_key_must_fit_octave(self):
        with self.assertRaises(ValueError):
            members_from_key((6, 6))


class TestIntervalTable(unittest.TestCase):
    def test_declare_and_lookup(self):
        table = IntervalTable(3, "triad")
        self.assertTrue(table.declare((3, 2), ChordType.MAJOR, 0))
        entry = table.lookup((3, 2))
        self.assertEqual(entry.type, ChordType.MAJOR)
        self.assertEqual(entry.root_member, 0)

    def test_unassigned_cell(self):
        table = IntervalTable(5)
        entry = table.lookup((0, 0, 0, 0))
        self.assertEqual(entry.type, ChordType.NONE)
        self.assertIsNone(entry.root_member)

    def test_collision_keeps_first(self):
        table = IntervalTable(3, "triad")
        table.declare((3, 2), ChordType.MAJOR, 0)
        with self.assertLogs("chordfinder.interval_tables", level="ERROR"):
            self.assertFalse(table.declare((3, 2), ChordType.MINOR, 1))
        self.assertEqual(table.lookup((3, 2)).type, ChordType.MAJOR)
        self.assertEqual(len(table.collisions), 1)
        c = table.collisions[0]
        self.assertEqual((c.key, c.existing, c.incoming), ((3, 2), ChordType.MAJOR, ChordType.MINOR))

    def test_bad_keys(self):
        table = IntervalTable(3)
        with self.assertRaises(ValueError):
            table.lookup((3,))
        with self.assertRaises(ValueError):
            table.lookup((10, 0))
        with self.assertRaises(ValueError):
            table.declare((0, 0), ChordType.MAJOR, 3)
        with self.assertRaises(ValueError):
            IntervalTable(7)

    def test_frozen_table_is_read_only(self):
        table = IntervalTable(2).freeze()
        self.assertTrue(table.frozen)
        with self.assertRaises(RuntimeError):
            table.declare((0,), ChordType.MAJOR, 0)
        with self.assertRaises(ValueError):
            table._types[0] = 1

    def test_assigned_keys(self):
        table = IntervalTable(3)
        table.declare((3, 2), ChordType.MAJOR, 0)
        table.declare((2, 3), ChordType.MINOR, 0)
        self.assertEqual(dict(table.assigned_keys()), {
            (2, 3): (ChordType.MINOR, 0),
            (3, 2): (ChordType.MAJOR, 0),
        })
        self.assertEqual(len(table), 2)


class TestBuildTables(unittest.TestCase):
    def test_shipped_data_has_no_collisions(self):
        tables = build_tables(strict=True)
        self.assertEqual(tables.collisions, [])

    def test_shapes(self):
        tables = build_tables()
        self.assertEqual(tables.for_arity(2).shape, (11,))
        self.assertEqual(tables.for_arity(3).shape, (10, 10))
        self.assertEqual(tables.for_arity(4).shape, (9, 9, 9))
        self.assertEqual(tables.for_arity(5).shape, (8, 8, 8, 8))
        self.assertEqual(tables.for_arity(6).shape, (7, 7, 7, 7, 7))

    def test_small_tables_fully_populated(self):
        # every key whose members fit inside an octave names a chord
        tables = build_tables()
        self.assertEqual(len(tables.for_arity(2)), 11)
        self.assertEqual(len(tables.for_arity(3)), 55)
        self.assertEqual(len(tables.for_arity(4)), 165)

    def test_rotation_tables_sized_by_generators(self):
        tables = build_tables()
        self.assertEqual(len(tables.for_arity(5)), 5 * len(table_data.QUINTAD_ROTATIONS))
        self.assertEqual(len(tables.for_arity(6)), 6 * len(table_data.SEXTAD_ROTATIONS))

    def test_strict_build_raises_on_injected_collision(self):
        rotations = table_data.QUINTAD_ROTATIONS + [
            (ChordType.MAJOR_11_FLAT_13, table_data.QUINTAD_ROTATIONS[0][1]),
        ]
        with self.assertRaises(TableCollisionError) as cm:
            build_rotation_table(5, rotations, "quintad", strict=True)
        self.assertEqual(len(cm.exception.collisions), 5)
        self.assertIn("major 11th b13", str(cm.exception))

    def test_lenient_build_records_collision(self):
        rotations = table_data.QUINTAD_ROTATIONS + [
            (ChordType.MAJOR_11_FLAT_13, table_data.QUINTAD_ROTATIONS[0][1]),
        ]
        with self.assertLogs("chordfinder.interval_tables", level="ERROR"):
            table = build_rotation_table(5, rotations, "quintad")
        self.assertEqual(len(table.collisions), 5)
        key = table_data.QUINTAD_ROTATIONS[0][1][0]
        self.assertEqual(table.lookup(key).type, table_data.QUINTAD_ROTATIONS[0][0])

    def test_rotation_count_checked(self):
        with self.assertRaises(ValueError):
            build_rotation_table(5, [(ChordType.MAJOR_9, [(1, 1, 2, 3)])])

    def test_tables_read_only(self):
        tables = build_tables()
        for table in tables:
            self.assertFalse(table._types.flags.writeable)
            self.assertFalse(table._roots.flags.writeable)

    def test_default_tables_built_once(self):
        self.assertIs(get_default_tables(), get_default_tables())

    def test_fresh_build_matches_default(self):
        fresh, shared = build_tables(), get_default_tables()
        for a, b in zip(fresh, shared):
            np.testing.assert_array_equal(a._types, b._types)
            np.testing.assert_array_equal(a._roots, b._roots)

    def test_rotations_round_trip(self):
        self.assertEqual(find_round_trip_failures(build_tables(strict=True)), [])

    def _with_quintads(self, quintads):
        base = build_tables()
        return IntervalTables(base.for_arity(2), base.for_arity(3), base.for_arity(4),
                              quintads, base.for_arity(6))

    def test_round_trip_reports_missing_voicing(self):
        quintads = build_rotation_table(5, table_data.QUINTAD_ROTATIONS[:-1], "quintad")
        failures = find_round_trip_failures(self._with_quintads(quintads))
        self.assertEqual(len(failures), 5)
        for expected, _, found in failures:
            self.assertEqual(expected, ChordType.DOMINANT_7_FLAT_13)
            self.assertNotEqual(found, ChordType.DOMINANT_7_FLAT_13)

    def test_round_trip_reports_cell_without_generator(self):
        quintads = IntervalTable(5, "quintad")
        for chord_type, keys in table_data.QUINTAD_ROTATIONS:
            for root_member, key in enumerate(keys):
                quintads.declare(key, chord_type, root_member)
        quintads.declare((0, 0, 0, 0), ChordType.MAJOR, 0)
        failures = find_round_trip_failures(self._with_quintads(quintads.freeze()))
        self.assertEqual(failures, [(ChordType.NONE, (0, 0, 0, 0), ChordType.MAJOR)])


if __name__ == '__main__':
    unittest.main()
