"""Orchestrates the text-to-SRT conversion."""

import logging
import os
from typing import Optional, TextIO

from .config_loader import DEFAULT_CONFIG
from .duration_parser import format_duration, parse_duration
from .exceptions import FileReadFailure, FormattingError, SrtConvError
from .line_splitter import split_lines
from .models import ConversionResult
from .srt_formatter import SRTFormatter, SubtitleFormatter

logger = logging.getLogger(__name__)

class SubtitleConverter:
    """
    Holds the current input text and the last conversion output.

    The input is replaced wholesale by `set_text`, `load_file` or
    `load_stream`; each `convert` recomputes the output from scratch.
    """

    def __init__(self, config: Optional[dict] = None, formatter: Optional[SubtitleFormatter] = None):
        """
        Initializes the SubtitleConverter.

        Args:
            config: Configuration settings; missing keys fall back to DEFAULT_CONFIG.
            formatter: The subtitle formatter to use. Defaults to SRTFormatter.
        """
        self.config = dict(DEFAULT_CONFIG)
        if config:
            self.config.update(config)
        self.formatter = formatter or SRTFormatter()
        self.raw_text = ""
        self.output_text = ""

    def set_text(self, text: str) -> None:
        """Replaces the input text (typed or pasted)."""
        self.raw_text = text

    def load_file(self, path: str) -> None:
        """
        Reads a text file and makes its full contents the new input.

        Args:
            path: Path to the text file.

        Raises:
            FileReadFailure: If the file is missing or cannot be read or
                             decoded. The previous input is kept.
        """
        encoding = self.config.get('input_encoding') or 'utf-8-sig'
        logger.info(f"Reading input text from: {path}")
        try:
            with open(path, 'r', encoding=encoding) as f:
                text = f.read()
        except (OSError, UnicodeDecodeError, LookupError) as e:
            logger.error(f"Failed to read input file {path}: {e}")
            raise FileReadFailure(f"Could not read {path}: {e}") from e
        self.raw_text = text
        logger.debug(f"Read {len(text)} characters from {path}")

    def load_stream(self, stream: TextIO) -> None:
        """Reads an open text stream (e.g. stdin) to its end as the new input."""
        try:
            text = stream.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to read input stream: {e}")
            raise FileReadFailure(f"Could not read input stream: {e}") from e
        self.raw_text = text

    def convert(self, duration_spec: Optional[str] = None, total_seconds: Optional[float] = None) -> ConversionResult:
        """
        Converts the current input into subtitles.

        Args:
            duration_spec: Total duration as M:S. Defaults to the configured
                           'default_duration' when `total_seconds` is not given.
            total_seconds: Total duration in seconds, e.g. from a media probe.

        Returns:
            The ConversionResult. An input with no non-blank lines gives an
            empty result rather than an error.

        Raises:
            InvalidDurationFormat: If `duration_spec` cannot be parsed.
            FormattingError: If `total_seconds` is negative.
            ValueError: If both duration sources are given.
        """
        if duration_spec is not None and total_seconds is not None:
            raise ValueError("Give either duration_spec or total_seconds, not both.")

        if total_seconds is None:
            if duration_spec is None:
                duration_spec = self.config.get('default_duration', DEFAULT_CONFIG['default_duration'])
                logger.info(f"No duration given; using default {duration_spec}")
            total_seconds = parse_duration(duration_spec, strict_seconds=bool(self.config.get('strict_seconds')))

        lines = split_lines(self.raw_text)
        logger.info(f"Converting {len(lines)} lines over {format_duration(total_seconds)} ({total_seconds:g}s)")

        cues = self.formatter.build_cues(lines, total_seconds)
        output_text = self.formatter.render(cues)

        self.output_text = output_text
        return ConversionResult(total_seconds=total_seconds, cues=cues, output_text=output_text)

    def default_output_path(self) -> str:
        output_dir = self.config.get('output_dir') or '.'
        output_filename = self.config.get('output_filename') or DEFAULT_CONFIG['output_filename']
        return os.path.join(output_dir, output_filename)

    def save(self, output_path: Optional[str] = None) -> str:
        """
        Writes the last conversion output to a file.

        Args:
            output_path: Destination path. Defaults to 'output_filename'
                         inside 'output_dir' from the config.

        Returns:
            The path written.

        Raises:
            FormattingError: If there is nothing to save or writing fails.
            FileSystemError: If the output directory cannot be created.
        """
        if not self.output_text:
            raise FormattingError("Nothing to save: the last conversion produced no subtitles.")

        path = output_path or self.default_output_path()
        try:
            self.formatter.write(self.output_text, path)
        except SrtConvError:
            raise
        except Exception as e:
            logger.critical(f"Unexpected error while saving subtitles to {path}: {e}", exc_info=True)
            raise FormattingError(f"Unexpected error while saving subtitles: {e}") from e
        return path
