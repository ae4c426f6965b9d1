#!/usr/bin/env python3
"""
scripts/listen_midi.py: show chord labels for live MIDI input.

Opens a MIDI input port with mido and prints a label after every accepted
note event. Control change 123 (all notes off) clears the detector.

Usage
-----
    python scripts/listen_midi.py --list
    python scripts/listen_midi.py                       # first available port
    python scripts/listen_midi.py --port "USB Keyboard" --channel 0
    python scripts/listen_midi.py --file take1.mid      # replay a MIDI file
"""

import argparse
import logging
import os
import sys

_HERE = os.path.dirname(os.path.abspath(__file__))
_ROOT = os.path.dirname(_HERE)
sys.path.insert(0, _ROOT)

from chordfinder.config import add_config_arguments, config_from_args
from chordfinder.engine import ChordDetector
from chordfinder.midi_input import feed_messages, list_input_ports, listen, messages_from_file

logger = logging.getLogger("listen_midi")


def main():
    parser = argparse.ArgumentParser(
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--list", action="store_true", help="List MIDI input ports and exit.")
    parser.add_argument("--port", default=None, help="Input port name (default: first available).")
    parser.add_argument("--file", default=None, metavar="MID",
                        help="Read messages from a Standard MIDI File instead of a port.")
    parser.add_argument("--channel", type=int, default=None, choices=range(16), metavar="0-15",
                        help="Only use messages on this channel.")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    add_config_arguments(parser)
    args = parser.parse_args()

    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if args.list:
        ports = list_input_ports()
        if ports:
            print("Available MIDI input ports:")
            for name in ports:
                print(f'  - "{name}"')
        else:
            print("No MIDI input ports found.")
        return

    try:
        config = config_from_args(args)
    except (OSError, ValueError) as e:
        sys.exit(f"Error: {e}")
    detector = ChordDetector(config)

    if args.file:
        if not os.path.isfile(args.file):
            sys.exit(f"Error: MIDI file not found: {args.file}")
        for label in feed_messages(messages_from_file(args.file), detector, args.channel):
            print(label)
        return

    logger.info("listening, press Ctrl+C to stop")
    try:
        listen(args.port, detector, args.channel, on_label=print)
    except (OSError, ValueError) as e:
        sys.exit(f"Error: {e}")
    except KeyboardInterrupt:
        logger.info("stopped")


if __name__ == "__main__":
    main()
