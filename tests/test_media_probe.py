from unittest.mock import patch

import ffmpeg
import pytest

from srtconv.exceptions import MediaProbeError
from srtconv.media_probe import MediaProbe


@pytest.fixture
def media_file(tmp_path):
    path = tmp_path / "clip.mp4"
    path.write_bytes(b"\x00")
    return path


def test_uses_format_duration(media_file):
    with patch("srtconv.media_probe.ffmpeg.probe", return_value={'format': {'duration': '212.480000'}}) as probe:
        assert MediaProbe().probe_duration(str(media_file)) == pytest.approx(212.48)
    probe.assert_called_once_with(str(media_file), cmd='ffprobe')


def test_custom_ffprobe_path(media_file):
    with patch("srtconv.media_probe.ffmpeg.probe", return_value={'format': {'duration': '1'}}) as probe:
        MediaProbe(ffprobe_path="/opt/ffprobe").probe_duration(str(media_file))
    probe.assert_called_once_with(str(media_file), cmd='/opt/ffprobe')


def test_falls_back_to_longest_stream(media_file):
    info = {
        'format': {'duration': 'N/A'},
        'streams': [{'duration': '10.5'}, {'codec_type': 'data'}, {'duration': '12.0'}],
    }
    with patch("srtconv.media_probe.ffmpeg.probe", return_value=info):
        assert MediaProbe().probe_duration(str(media_file)) == 12.0


def test_no_duration(media_file):
    with patch("srtconv.media_probe.ffmpeg.probe", return_value={'format': {}, 'streams': []}):
        with pytest.raises(MediaProbeError):
            MediaProbe().probe_duration(str(media_file))


def test_ffprobe_error(media_file):
    error = ffmpeg.Error('ffprobe', b'', b'Invalid data found when processing input')
    with patch("srtconv.media_probe.ffmpeg.probe", side_effect=error):
        with pytest.raises(MediaProbeError, match="Invalid data"):
            MediaProbe().probe_duration(str(media_file))


def test_missing_ffprobe_binary(media_file):
    with patch("srtconv.media_probe.ffmpeg.probe", side_effect=FileNotFoundError("ffprobe")):
        with pytest.raises(MediaProbeError):
            MediaProbe().probe_duration(str(media_file))


def test_missing_media_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        MediaProbe().probe_duration(str(tmp_path / "missing.mp4"))
