"""
Interval-vector lookup tables.

A pitch-class set of n members is looked up by its interval key (see
``interval_key``) in the n-note table, which answers with the chord quality
and the index of the member that is the root.

Tables are built once, then frozen: their numpy cell arrays are marked
read-only. ``get_default_tables()`` shares one bundle across the process;
``build_tables()`` makes a fresh one for callers that want their own.
"""
import collections
import logging
import threading

import numpy as np

from chordfinder import table_data
from chordfinder.chord_types import ChordType, chord_type_name
from chordfinder.constants import NOTES_PER_OCTAVE, TABLE_SHAPES

logger = logging.getLogger(__name__)

_UNASSIGNED = -1

LookupEntry = collections.namedtuple("LookupEntry", ["type", "root_member"])
Collision = collections.namedtuple("Collision", ["table", "key", "existing", "incoming"])


class TableCollisionError(ValueError):
    """Two chord qualities were declared with the same interval key."""

    def __init__(self, collisions):
        self.collisions = list(collisions)
        details = "; ".join(
            f"{c.table} {c.key}: {chord_type_name(c.incoming)} "
            f"(already {chord_type_name(c.existing)})"
            for c in self.collisions
        )
        super().__init__(f"redefining chord: {details}")


# ── Interval keys ─────────────────────────────────────────────────────────────

def interval_key(members) -> tuple[int, ...]:
    """Reduced gaps between consecutive ascending members: (m1-m0-1, m2-m1-1, ...)."""
    return tuple(b - a - 1 for a, b in zip(members, members[1:]))


def members_from_key(key, start: int = 0) -> list[int]:
    """Inverse of interval_key: ascending members beginning at ``start``."""
    members = [start]
    for gap in key:
        members.append(members[-1] + gap + 1)
    if members[-1] >= NOTES_PER_OCTAVE:
        raise ValueError(f"interval key {tuple(key)} does not fit in an octave from {start}")
    return members


# ── Tables ────────────────────────────────────────────────────────────────────

class IntervalTable:
    """Cells for one arity, indexed by interval key."""

    def __init__(self, arity: int, name: str = None):
        if arity not in TABLE_SHAPES:
            raise ValueError(f"no interval table for {arity}-note sets")
        shape = TABLE_SHAPES[arity]
        self.arity = arity
        self.name = name or f"{arity}-note"
        self._types = np.full(shape, int(ChordType.NONE), dtype=np.int16)
        self._roots = np.full(shape, _UNASSIGNED, dtype=np.int8)
        self.collisions = []
        self._frozen = False

    @property
    def shape(self):
        return self._types.shape

    @property
    def frozen(self):
        return self._frozen

    def _check_key(self, key):
        key = tuple(int(k) for k in key)
        if len(key) != self.arity - 1:
            raise ValueError(f"{self.name} table expects {self.arity - 1} intervals, got {key}")
        for size, k in zip(self.shape, key):
            if not 0 <= k < size:
                raise ValueError(f"interval {k} out of range for {self.name} table key {key}")
        return key

    def declare(self, key, chord_type, root_member: int) -> bool:
        """Assign a cell. A cell that already holds a chord keeps it; the clash is recorded."""
        if self._frozen:
            raise RuntimeError(f"{self.name} table is frozen")
        key = self._check_key(key)
        if not 0 <= root_member < self.arity:
            raise ValueError(f"root member {root_member} out of range for {self.name} table")
        chord_type = ChordType(chord_type)

        existing = ChordType(int(self._types[key]))
        if existing != ChordType.NONE:
            self.collisions.append(Collision(self.name, key, existing, chord_type))
            logger.error("redefining chord %s in %s table at %s (already %s)",
                         chord_type_name(chord_type), self.name, key,
                         chord_type_name(existing))
            return False

        self._types[key] = int(chord_type)
        self._roots[key] = root_member
        return True

    def freeze(self):
        self._types.flags.writeable = False
        self._roots.flags.writeable = False
        self._frozen = True
        return self

    def lookup(self, key) -> LookupEntry:
        key = self._check_key(key)
        root = int(self._roots[key])
        chord_type = ChordType(int(self._types[key]))
        return LookupEntry(chord_type, None if root == _UNASSIGNED else root)

    def assigned_keys(self):
        """Yield (key, LookupEntry) for every cell that names a chord."""
        for index in zip(*np.nonzero(self._roots != _UNASSIGNED)):
            key = tuple(int(i) for i in index)
            yield key, self.lookup(key)

    def __len__(self):
        return int(np.count_nonzero(self._roots != _UNASSIGNED))

    def __repr__(self):
        return f"IntervalTable({self.name!r}, shape={self.shape}, assigned={len(self)})"


class IntervalTables:
    """The dyad..sextad tables, addressed by arity."""

    def __init__(self, dyads, triads, quartads, quintads, sextads):
        self._by_arity = {t.arity: t for t in (dyads, triads, quartads, quintads, sextads)}

    def for_arity(self, arity: int) -> IntervalTable:
        return self._by_arity[arity]

    def lookup(self, members) -> LookupEntry:
        return self._by_arity[len(members)].lookup(interval_key(members))

    @property
    def collisions(self):
        return [c for t in self for c in t.collisions]

    def __iter__(self):
        return iter(self._by_arity[a] for a in sorted(self._by_arity))


# ── Construction ──────────────────────────────────────────────────────────────

def _finish(table: IntervalTable, strict: bool) -> IntervalTable:
    if strict and table.collisions:
        raise TableCollisionError(table.collisions)
    logger.debug("built %s table: %d cells assigned", table.name, len(table))
    return table.freeze()


def build_dyad_table(strict=False):
    table = IntervalTable(2, "dyad")
    for interval, (chord_type, root) in enumerate(table_data.DYADS):
        table.declare((interval,), chord_type, root)
    return _finish(table, strict)


def build_triad_table(strict=False):
    table = IntervalTable(3, "triad")
    for interval1, row in table_data.TRIAD_ROWS.items():
        for interval2, (chord_type, root) in enumerate(row):
            table.declare((interval1, interval2), chord_type, root)
    return _finish(table, strict)


def build_quartad_table(strict=False):
    table = IntervalTable(4, "quartad")
    for (interval1, interval2), row in table_data.QUARTAD_ROWS.items():
        for interval3, (chord_type, root) in enumerate(row):
            table.declare((interval1, interval2, interval3), chord_type, root)
    return _finish(table, strict)


def build_rotation_table(arity, rotations, name=None, strict=False):
    """
    Build a table from (ChordType, [key per rotation]) pairs.

    Rotation i is the interval key seen when the ascending scan starts i
    members below the root, so the root sits at member index i.
    """
    table = IntervalTable(arity, name)
    for chord_type, keys in rotations:
        if len(keys) != arity:
            raise ValueError(f"{chord_type_name(chord_type)}: expected {arity} rotations, "
                             f"got {len(keys)}")
        for root_member, key in enumerate(keys):
            table.declare(key, chord_type, root_member)
    return _finish(table, strict)


def build_quintad_table(strict=False):
    return build_rotation_table(5, table_data.QUINTAD_ROTATIONS, "quintad", strict)


def build_sextad_table(strict=False):
    return build_rotation_table(6, table_data.SEXTAD_ROTATIONS, "sextad", strict)


def build_tables(strict=False) -> IntervalTables:
    return IntervalTables(
        build_dyad_table(strict),
        build_triad_table(strict),
        build_quartad_table(strict),
        build_quintad_table(strict),
        build_sextad_table(strict),
    )


# Shared bundle, built on first use
_TABLES_CACHE = {}
_TABLES_LOCK = threading.Lock()


def get_default_tables() -> IntervalTables:
    tables = _TABLES_CACHE.get("default")
    if tables is None:
        with _TABLES_LOCK:
            tables = _TABLES_CACHE.get("default")
            if tables is None:
                tables = build_tables()
                _TABLES_CACHE["default"] = tables
    return tables
