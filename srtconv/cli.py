"""Command-Line Interface handler for srtconv."""

import argparse
import logging
import sys
from typing import List, Optional

from .config_loader import ConfigLoader
from .log_setup import setup_logging
from .converter import SubtitleConverter
from .media_probe import MediaProbe
from .exceptions import SrtConvError, ConfigurationError

logger = logging.getLogger(__name__) # Get logger for this module

DEFAULT_CONFIG_PATH = "config.yaml"

class CLIHandler:
    """Parses arguments and orchestrates the conversion."""

    def __init__(self):
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """Creates the argument parser for the CLI."""
        parser = argparse.ArgumentParser(
            prog="srtconv",
            description="srtconv: Turn a text file (one subtitle per line) into an SRT file "
                        "by splitting the total duration evenly across the lines.",
            formatter_class=argparse.ArgumentDefaultsHelpFormatter # Show defaults in help
        )
        parser.add_argument(
            "input",
            nargs="?",
            default=None,
            help="Path to the input text file, or '-' to read from stdin."
        )
        parser.add_argument(
            "-t", "--text",
            default=None,
            help="Use this text as input instead of reading a file."
        )
        timing = parser.add_mutually_exclusive_group()
        timing.add_argument(
            "-d", "--duration",
            default=None, # Default taken from config file
            help="Total playback length as M:S (e.g. 5:30). Defaults to 'default_duration' from the config."
        )
        timing.add_argument(
            "-m", "--media",
            default=None,
            help="Read the total playback length from this video/audio file (requires ffprobe)."
        )
        parser.add_argument(
            "-o", "--output",
            default=None, # Default taken from config file
            help="Path of the .srt file to write. Defaults to output_dir/output_filename from the config."
        )
        parser.add_argument(
            "--stdout",
            action="store_true",
            help="Print the subtitles to stdout instead of writing a file."
        )
        parser.add_argument(
            "-c", "--config",
            default=None,
            help=f"Path to the configuration YAML file. '{DEFAULT_CONFIG_PATH}' is used if present."
        )
        parser.add_argument(
            "--strict-seconds",
            action="store_true",
            help="Reject durations whose seconds part is 60 or more."
        )
        parser.add_argument(
            "--log-level",
            default="INFO",
            choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
            help="Set the logging level for console and file output."
        )
        return parser

    def run(self, argv: Optional[List[str]] = None) -> int:
        """
        Parses arguments, sets up logging, loads config, and runs the conversion.

        Returns:
            The process exit code: 0 on success, 1 on a handled error,
            2 on an unexpected one.
        """
        args = self.parser.parse_args(argv)
        if args.input is None and args.text is None:
            self.parser.error("an input file (or '-') or --text is required")
        if args.input is not None and args.text is not None:
            self.parser.error("give either an input file or --text, not both")

        # --- Setup Logging ---
        log_level = getattr(logging, args.log_level.upper(), logging.INFO)
        # Logs must not mix with the document when it goes to stdout
        console_stream = sys.stderr if args.stdout else sys.stdout
        setup_logging(log_level=log_level, log_dir=None, console_stream=console_stream)

        # --- Load Configuration ---
        config_path = args.config or DEFAULT_CONFIG_PATH
        try:
            config = ConfigLoader().load_with_defaults(config_path, required=args.config is not None)
        except ConfigurationError as e:
            logger.critical(f"Failed to load configuration from {config_path}: {e}")
            return 1
        except FileNotFoundError:
            logger.critical(f"Configuration file not found: {config_path}")
            return 1

        # --- Re-configure Logging with settings from Config ---
        setup_logging(
            log_level=log_level,
            log_dir=config.get('log_dir'),
            log_file=config.get('log_file') or 'srtconv.log',
            console_stream=console_stream
        )

        # --- Apply CLI Overrides ---
        if args.strict_seconds:
            logger.debug("Enabling strict_seconds from CLI argument.")
            config['strict_seconds'] = True

        try:
            converter = SubtitleConverter(config=config)

            # --- Acquire Input ---
            if args.text is not None:
                converter.set_text(args.text)
            elif args.input == "-":
                logger.info("Reading input text from stdin...")
                converter.load_stream(sys.stdin)
            else:
                converter.load_file(args.input)

            # --- Convert ---
            if args.media:
                probe = MediaProbe(ffprobe_path=config.get('ffprobe_path'))
                result = converter.convert(total_seconds=probe.probe_duration(args.media))
            else:
                result = converter.convert(duration_spec=args.duration)

            if result.is_empty:
                logger.warning("Input has no non-empty lines; nothing to write.")
                return 0

            # --- Deliver Output ---
            if args.stdout:
                sys.stdout.write(result.output_text)
                sys.stdout.flush()
            else:
                path = converter.save(args.output)
                logger.info(f"Saved {len(result.cues)} subtitles to {path}")
            return 0

        except SrtConvError as e:
            logger.error(f"{e}")
            return 1
        except FileNotFoundError as e:
            logger.error(f"{e}")
            return 1
        except KeyboardInterrupt:
            logger.warning("Process interrupted by user (Ctrl+C). Exiting.")
            return 1
        except Exception as e:
            logger.critical(f"An unexpected critical error occurred at the top level: {e}", exc_info=True)
            return 2 # Use a different exit code for unexpected crashes


def main() -> None:
    sys.exit(CLIHandler().run())
