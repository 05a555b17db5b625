"""Reads the playback length of a video or audio file using ffprobe."""

import ffmpeg
import os
import logging
from typing import Optional
from .exceptions import MediaProbeError

logger = logging.getLogger(__name__)

class MediaProbe:
    """Looks up media durations so they need not be typed by hand."""

    def __init__(self, ffprobe_path: Optional[str] = None):
        """
        Initializes the MediaProbe.

        Args:
            ffprobe_path: Optional path to the ffprobe executable.
                          If None, assumes ffprobe is in the system PATH.
        """
        self.ffprobe_cmd = ffprobe_path or 'ffprobe'
        logger.debug(f"Using ffprobe command: {self.ffprobe_cmd}")

    def probe_duration(self, media_path: str) -> float:
        """
        Returns the playback length of a media file in seconds.

        The container duration is used when present; otherwise the longest
        stream duration.

        Args:
            media_path: Path to the video or audio file.

        Returns:
            The duration in seconds.

        Raises:
            FileNotFoundError: If the media file does not exist.
            MediaProbeError: If ffprobe fails or reports no usable duration.
        """
        logger.info(f"Probing media duration for: {media_path}")
        if not os.path.isfile(media_path):
            raise FileNotFoundError(f"Media file not found: {media_path}")

        try:
            info = ffmpeg.probe(media_path, cmd=self.ffprobe_cmd)
        except ffmpeg.Error as e:
            stderr_output = e.stderr.decode('utf-8', errors='replace') if e.stderr else "No stderr output"
            logger.error(f"ffprobe error for {media_path}: {stderr_output}")
            raise MediaProbeError(f"ffprobe failed: {stderr_output}") from e
        except OSError as e:
            # Raised when the ffprobe executable itself cannot be started
            logger.error(f"Could not run '{self.ffprobe_cmd}': {e}", exc_info=True)
            raise MediaProbeError(f"Could not run ffprobe ('{self.ffprobe_cmd}'): {e}") from e

        duration = self._parse_seconds(info.get('format', {}).get('duration'))
        if duration is None:
            stream_durations = [
                self._parse_seconds(stream.get('duration'))
                for stream in info.get('streams', [])
            ]
            stream_durations = [d for d in stream_durations if d is not None]
            if stream_durations:
                duration = max(stream_durations)

        if duration is None:
            raise MediaProbeError(f"No duration reported for {media_path}")

        logger.info(f"Media duration for {media_path}: {duration:.3f}s")
        return duration

    @staticmethod
    def _parse_seconds(value) -> Optional[float]:
        if value in (None, '', 'N/A'):
            return None
        try:
            seconds = float(value)
        except (TypeError, ValueError):
            return None
        return seconds if seconds >= 0 else None
