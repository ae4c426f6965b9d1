import time
import numpy as np
from chordfinder.engine import ChordDetector
from chordfinder.voices import PitchClassSet
from chordfinder.classifier import classify
from chordfinder.interval_tables import build_tables, get_default_tables


def run_benchmark():
    # Setup
    np.random.seed(42)
    start_time = time.perf_counter()
    build_tables()
    print(f"Table build:        {time.perf_counter() - start_time:.4f} seconds")

    tables = get_default_tables()
    # 100,000 random pitch-class sets of 2..7 members
    sizes = np.random.randint(2, 8, size=100000)
    sets = [PitchClassSet.from_pitch_classes(np.random.choice(12, n, replace=False))
            for n in sizes]

    start_time = time.perf_counter()
    for pcs in sets:
        classify(pcs, tables)
    print(f"Classify 100k sets: {time.perf_counter() - start_time:.4f} seconds")

    # 100,000 note events through the detector
    pitches = np.random.randint(36, 96, size=100000)
    detector = ChordDetector(tables=tables)
    start_time = time.perf_counter()
    for pitch in pitches:
        if len(detector.active_pitches) >= 6:
            detector.note_off(detector.active_pitches[0])
        detector.note_on(pitch)
    print(f"Detector 100k events: {time.perf_counter() - start_time:.4f} seconds")


if __name__ == '__main__':
    run_benchmark()
