"""Handles loading configuration from YAML files."""

import yaml
import os
import logging
from .duration_parser import format_duration
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    'default_duration': '5:30',
    'strict_seconds': False,
    'input_encoding': 'utf-8-sig',
    'output_dir': '.',
    'output_filename': 'subtitle.srt',
    'ffprobe_path': None,
    'log_dir': 'logs',
    'log_file': 'srtconv.log',
}

class ConfigLoader:
    """Loads configuration settings from a YAML file."""

    def load_config(self, config_path: str) -> dict:
        """
        Loads configuration from the specified YAML file path.

        Args:
            config_path: The path to the YAML configuration file.

        Returns:
            A dictionary containing the loaded configuration settings.

        Raises:
            FileNotFoundError: If the configuration file does not exist.
            ConfigurationError: If the file cannot be parsed as YAML or
                              if there are other reading errors.
        """
        logger.info(f"Attempting to load configuration from: {config_path}")
        if not os.path.exists(config_path):
            logger.error(f"Configuration file not found at path: {config_path}")
            raise FileNotFoundError(f"Configuration file not found: {config_path}")
        if not os.path.isfile(config_path):
            logger.error(f"Configuration path is not a file: {config_path}")
            raise ConfigurationError(f"Configuration path is not a file: {config_path}")

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error(f"Error parsing YAML configuration file {config_path}: {e}", exc_info=True)
            raise ConfigurationError(f"Invalid YAML format in {config_path}: {e}") from e
        except OSError as e:
            logger.error(f"Error reading configuration file {config_path}: {e}", exc_info=True)
            raise ConfigurationError(f"Could not read configuration file {config_path}: {e}") from e

        if config is None:
            # An empty file is a valid "no overrides" config
            config = {}
        if not isinstance(config, dict):
            logger.error(f"Configuration file {config_path} did not load as a dictionary (root object).")
            raise ConfigurationError(f"Invalid YAML structure in {config_path}. Root must be a mapping (dictionary).")

        logger.info(f"Configuration loaded successfully from {config_path}")
        return config

    def load_with_defaults(self, config_path: str, required: bool = True) -> dict:
        """
        Loads `config_path` on top of DEFAULT_CONFIG.

        Args:
            config_path: The path to the YAML configuration file.
            required: If False, a missing file yields the defaults instead
                      of raising.

        Returns:
            The merged configuration dictionary.

        Raises:
            FileNotFoundError: If the file is missing and `required` is True.
            ConfigurationError: If the file exists but cannot be loaded.
        """
        config = dict(DEFAULT_CONFIG)
        if not required and not os.path.exists(config_path):
            logger.info(f"No configuration file at {config_path}; using defaults.")
            return config

        overrides = self.load_config(config_path)
        unknown = sorted(set(overrides) - set(DEFAULT_CONFIG))
        if unknown:
            logger.warning(f"Ignoring unknown configuration keys in {config_path}: {', '.join(unknown)}")
        config.update({k: v for k, v in overrides.items() if k in DEFAULT_CONFIG})

        duration = config.get('default_duration')
        if isinstance(duration, (int, float)) and not isinstance(duration, bool):
            # YAML 1.1 reads an unquoted 5:30 as the base-60 integer 330
            config['default_duration'] = format_duration(duration)
        return config
