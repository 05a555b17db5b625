"""Handles turning lines of text into timed subtitle files (SRT)."""

import logging
import os
from abc import ABC, abstractmethod
from typing import List, Sequence

from .models import Cue
from .exceptions import FormattingError
from .utils import ensure_dir_exists, format_timestamp

logger = logging.getLogger(__name__)

class SubtitleFormatter(ABC):
    """Abstract base class for subtitle formatters."""

    @abstractmethod
    def build_cues(self, lines: Sequence[str], total_seconds: float) -> List[Cue]:
        """
        Spreads `total_seconds` over `lines`, one cue per line.

        Args:
            lines: The ordered, non-blank lines to caption.
            total_seconds: The playback length the cues must cover.

        Returns:
            The cues, in playback order.

        Raises:
            FormattingError: If the duration is invalid.
        """
        pass

    @abstractmethod
    def render(self, cues: Sequence[Cue]) -> str:
        """Renders cues into the formatter's text format."""
        pass

    def format(self, lines: Sequence[str], total_seconds: float) -> str:
        """Builds cues for `lines` and renders them in one step."""
        return self.render(self.build_cues(lines, total_seconds))

    def write(self, output_text: str, output_path: str) -> None:
        """
        Writes rendered subtitles to disk verbatim, UTF-8 encoded.

        Args:
            output_text: The rendered document.
            output_path: Destination file path.

        Raises:
            FormattingError: If the file cannot be written.
            FileSystemError: If the parent directory cannot be created.
        """
        parent_dir = os.path.dirname(output_path)
        if parent_dir:
            ensure_dir_exists(parent_dir)

        try:
            # newline='' keeps the text byte-for-byte on every platform
            with open(output_path, 'w', encoding='utf-8', newline='') as f:
                f.write(output_text)
            logger.info(f"Wrote subtitles to {output_path}")
        except OSError as e:
            logger.error(f"Failed to write subtitle file to {output_path}: {e}", exc_info=True)
            raise FormattingError(f"Could not write subtitle file: {e}") from e


class SRTFormatter(SubtitleFormatter):
    """Formats subtitles into the SRT (SubRip Text) format."""

    def build_cues(self, lines: Sequence[str], total_seconds: float) -> List[Cue]:
        """
        Gives every line an equal share of the total duration.

        Cue i runs from i * share to (i + 1) * share, so the cues are
        contiguous and cover [0, total_seconds]. Line length plays no part
        in the timing.
        """
        if total_seconds < 0:
            raise FormattingError(f"Total duration cannot be negative: {total_seconds}")

        count = len(lines)
        if count == 0:
            logger.warning("No non-empty lines to convert; producing empty output.")
            return []
        if total_seconds == 0:
            logger.warning("Total duration is zero; every cue will have zero length.")

        time_per_line = total_seconds / count
        logger.debug(f"Timing {count} lines over {total_seconds}s ({time_per_line:.3f}s each).")

        return [
            Cue(
                index=i + 1,
                start_time=time_per_line * i,
                end_time=time_per_line * (i + 1),
                text=line,
            )
            for i, line in enumerate(lines)
        ]

    def render(self, cues: Sequence[Cue]) -> str:
        blocks = [
            f"{cue.index}\n"
            f"{format_timestamp(cue.start_time)} --> {format_timestamp(cue.end_time)}\n"
            f"{cue.text}\n"
            for cue in cues
        ]
        return "\n".join(blocks)
