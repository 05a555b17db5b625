import pytest

from srtconv.config_loader import DEFAULT_CONFIG, ConfigLoader
from srtconv.exceptions import ConfigurationError


def test_load_config(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("default_duration: '3:00'\nstrict_seconds: true\n", encoding="utf-8")
    assert ConfigLoader().load_config(str(path)) == {'default_duration': '3:00', 'strict_seconds': True}


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        ConfigLoader().load_config(str(tmp_path / "nope.yaml"))


def test_directory_is_not_a_config(tmp_path):
    with pytest.raises(ConfigurationError):
        ConfigLoader().load_config(str(tmp_path))


def test_invalid_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("default_duration: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        ConfigLoader().load_config(str(path))


def test_root_must_be_mapping(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        ConfigLoader().load_config(str(path))


def test_defaults_merge(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("output_filename: song.srt\nbogus: 1\n", encoding="utf-8")
    config = ConfigLoader().load_with_defaults(str(path))
    assert config['output_filename'] == "song.srt"
    assert config['default_duration'] == DEFAULT_CONFIG['default_duration']
    assert 'bogus' not in config


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("", encoding="utf-8")
    assert ConfigLoader().load_with_defaults(str(path)) == DEFAULT_CONFIG


def test_optional_missing_file_gives_defaults(tmp_path):
    config = ConfigLoader().load_with_defaults(str(tmp_path / "config.yaml"), required=False)
    assert config == DEFAULT_CONFIG
    assert config is not DEFAULT_CONFIG


def test_unquoted_duration_is_read_back_as_minutes_seconds(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("default_duration: 5:30\n", encoding="utf-8")
    assert ConfigLoader().load_with_defaults(str(path))['default_duration'] == "5:30"
