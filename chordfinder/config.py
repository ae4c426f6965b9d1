"""
Detector configuration: pitch range and the label shown when nothing sounds.

Configuration is fixed when a detector is created. It can come from keyword
arguments, a JSON file, or command-line options (which override the file).
"""
import collections
import json
import os

from chordfinder.constants import (
    DEFAULT_CHORD_NAME,
    DEFAULT_LOWER_LIMIT,
    DEFAULT_UPPER_LIMIT,
    PITCH_MAX,
    PITCH_MIN,
)

_FIELDS = ("lower_limit", "upper_limit", "default_chord_name")


class DetectorConfig(collections.namedtuple("DetectorConfig", _FIELDS)):
    """
    lower_limit, upper_limit: inclusive pitch range; events outside it are
        ignored. An upper limit of 0 means "not given" and becomes 128.
    default_chord_name: label emitted when no notes are sounding.
    """
    __slots__ = ()

    def __new__(cls, lower_limit=DEFAULT_LOWER_LIMIT, upper_limit=DEFAULT_UPPER_LIMIT,
                default_chord_name=DEFAULT_CHORD_NAME):
        lower_limit = int(lower_limit)
        upper_limit = int(upper_limit) or DEFAULT_UPPER_LIMIT
        if lower_limit > upper_limit:
            raise ValueError(f"lower_limit {lower_limit} is above upper_limit {upper_limit}")
        if default_chord_name is None:
            default_chord_name = DEFAULT_CHORD_NAME
        return super().__new__(cls, lower_limit, upper_limit, str(default_chord_name))

    def in_range(self, pitch: int) -> bool:
        """True for a MIDI pitch (0-127) inside the configured limits."""
        return (PITCH_MIN <= pitch <= PITCH_MAX
                and self.lower_limit <= pitch <= self.upper_limit)


def load_config(path) -> DetectorConfig:
    """Read a DetectorConfig from a JSON object; missing fields take defaults."""
    if not os.path.isfile(path):
        raise FileNotFoundError(f"config file not found: {path}")
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object, got {type(data).__name__}")
    unknown = sorted(set(data) - set(_FIELDS))
    if unknown:
        raise ValueError(f"{path}: unknown config field(s): {', '.join(unknown)}")
    return DetectorConfig(**data)


def add_config_arguments(parser):
    """Register the detector options on an argparse parser."""
    parser.add_argument("--config", metavar="FILE", default=None,
                        help="JSON file with lower_limit, upper_limit, default_chord_name.")
    parser.add_argument("--lower-limit", type=int, default=None, metavar="PITCH",
                        help=f"Lowest pitch considered (default {DEFAULT_LOWER_LIMIT}).")
    parser.add_argument("--upper-limit", type=int, default=None, metavar="PITCH",
                        help=f"Highest pitch considered (default {DEFAULT_UPPER_LIMIT}).")
    parser.add_argument("--default-chord", default=None, metavar="NAME",
                        help="Label shown when no notes are sounding.")
    return parser


def config_from_args(args) -> DetectorConfig:
    config = load_config(args.config) if args.config else DetectorConfig()
    overrides = {}
    if args.lower_limit is not None:
        overrides["lower_limit"] = args.lower_limit
    if args.upper_limit is not None:
        overrides["upper_limit"] = args.upper_limit
    if args.default_chord is not None:
        overrides["default_chord_name"] = args.default_chord
    if overrides:
        # _replace would bypass __new__ validation
        config = DetectorConfig(**{**config._asdict(), **overrides})
    return config
