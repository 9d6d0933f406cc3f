"""Main entry point for the violin tuner CLI."""

import sys
import argparse
from typing import List, Optional

from ..constants import DEFAULT_REFERENCE_PITCH, FRAME_SIZE, SAMPLE_RATE
from ..core.config import TunerConfig
from ..core.errors import AcquisitionError, ConfigurationError
from ..core.factory import ComponentFactory
from ..logger import get_logger
from ..logging_config import setup_logging
from ..services.audio_providers import WavFileFrameSource
from ..services.scheduler import TickScheduler
from ..services.targets import MODES
from ..tuning_types import Reading
from ..ui.adapters import ConsoleTunerUI
from ..ui.presentation import ACQUISITION_HELP

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_ACQUISITION = 2


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(description="Violin Tuner - real-time pitch meter")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    def add_tuning_options(sub):
        sub.add_argument(
            "--mode",
            choices=sorted(MODES),
            default="chromatic",
            help="Target the nearest chromatic note or the nearest violin string (default: chromatic)",
        )
        sub.add_argument(
            "--a4",
            type=float,
            default=DEFAULT_REFERENCE_PITCH,
            help=f"Reference pitch for A4 in Hz (default: {DEFAULT_REFERENCE_PITCH:.0f})",
        )
        sub.add_argument("--debug", action="store_true", help="Enable debug logging")

    listen_parser = subparsers.add_parser("listen", help="Tune from the microphone")
    listen_parser.add_argument(
        "--device", type=int, default=None, help="Audio input device ID (default: system default)"
    )
    listen_parser.add_argument(
        "--sample-rate",
        type=int,
        default=SAMPLE_RATE,
        help=f"Preferred sample rate in Hz (default: {SAMPLE_RATE})",
    )
    listen_parser.add_argument(
        "--duration", type=float, default=None, help="Stop after this many seconds"
    )
    listen_parser.add_argument(
        "--ui", choices=["console", "pygame"], default="console", help="Front end (default: console)"
    )
    listen_parser.add_argument(
        "--rate", type=float, default=30.0, help="Console updates per second (default: 30)"
    )
    add_tuning_options(listen_parser)

    analyze_parser = subparsers.add_parser("analyze", help="Run the tuner over an audio file")
    analyze_parser.add_argument("file", help="Audio file to analyze")
    analyze_parser.add_argument(
        "--frame-size",
        type=int,
        default=FRAME_SIZE,
        help=f"Samples per frame (default: {FRAME_SIZE})",
    )
    add_tuning_options(analyze_parser)

    subparsers.add_parser("devices", help="List audio input devices")

    return parser


def _make_config(args) -> TunerConfig:
    config = TunerConfig(reference_pitch=args.a4)
    config.set_mode_by_name(args.mode)
    return config


def run_listen(args) -> int:
    """Tune live from an input device."""
    factory = ComponentFactory(_make_config(args))
    try:
        session = factory.create_session(device_id=args.device, sample_rate=args.sample_rate)
        session.start()
    except AcquisitionError:
        print(ACQUISITION_HELP, file=sys.stderr)
        return EXIT_ACQUISITION

    try:
        if args.ui == "pygame":
            from ..ui.pygame_ui import PygameTunerUI

            PygameTunerUI(session).run()
        else:
            ConsoleTunerUI(session)
            TickScheduler(session, rate_hz=args.rate).run(duration=args.duration)
    except KeyboardInterrupt:
        logger.info("Stopped by user")
    finally:
        session.stop()
    return EXIT_OK


def run_analyze(args) -> int:
    """Run every frame of a file through the tuner and summarize the readings."""
    factory = ComponentFactory(_make_config(args))
    source = WavFileFrameSource(args.file, frame_size=args.frame_size)
    session = factory.create_session(frame_source=source)

    readings: List[Reading] = []
    session.events.on_reading(readings.append)
    ConsoleTunerUI(session)

    try:
        session.start()
    except AcquisitionError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ACQUISITION

    try:
        while not source.exhausted:
            session.tick()
    finally:
        session.stop()

    if not readings:
        logger.info("No pitch detected")
        return EXIT_OK

    # Summarize by target
    counts = {}
    for reading in readings:
        counts[reading.target_label] = counts.get(reading.target_label, 0) + 1
    logger.info(f"Analyzed {len(readings)} frames with a pitch:")
    for label, count in sorted(counts.items(), key=lambda x: x[1], reverse=True):
        logger.info(f"  {label}: {count} frames")
    return EXIT_OK


def run_devices(_args) -> int:
    """List the input devices."""
    try:
        from ..audio_device import default_input_device, list_input_devices

        devices = list_input_devices()
    except OSError as e:
        # Raised by sounddevice when PortAudio is not installed
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ACQUISITION

    default = default_input_device()
    if not devices:
        print("No audio input devices found.")
    for device in devices:
        marker = "*" if device["id"] == default else " "
        print(
            f"{marker} [{device['id']}] {device['name']} "
            f"(inputs: {device['channels']}, {device['sample_rate']:.0f} Hz)"
        )
    return EXIT_OK


def main(args: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI.

    Args:
        args: Command line arguments, or None to use sys.argv

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = build_parser()
    parsed_args = parser.parse_args(args)

    if parsed_args.command is None:
        parser.print_help()
        return EXIT_USAGE

    setup_logging("DEBUG" if getattr(parsed_args, "debug", False) else None)

    commands = {
        "listen": run_listen,
        "analyze": run_analyze,
        "devices": run_devices,
    }
    try:
        return commands[parsed_args.command](parsed_args)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE


if __name__ == "__main__":
    sys.exit(main())
