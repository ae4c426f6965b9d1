"""Real-time chord recognition from note events."""
from chordfinder.chord_types import ChordType, chord_type_name
from chordfinder.classifier import ChordClassification, classify
from chordfinder.config import DetectorConfig, load_config
from chordfinder.engine import ChordDetector
from chordfinder.interval_tables import build_tables, get_default_tables
from chordfinder.namer import render
from chordfinder.voices import PitchClassSet, VoiceAllocator

__version__ = "0.1.0"
