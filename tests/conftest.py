import logging

import pytest

from srtconv.converter import SubtitleConverter


@pytest.fixture(autouse=True)
def reset_root_logger():
    """The CLI reconfigures the root logger; undo that after every test."""
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in saved_handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in saved_handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(saved_level)


@pytest.fixture
def converter(tmp_path):
    return SubtitleConverter(config={'output_dir': str(tmp_path)})


@pytest.fixture
def lyrics_file(tmp_path):
    path = tmp_path / "lyrics.txt"
    path.write_text("Hello\n\nWorld\n", encoding="utf-8")
    return path
