"""
Configuration for the sshkey-importer command-line tool

The parser itself takes no configuration; these settings only control how
the CLI logs and presents imported keys. Configuration can come from a JSON
document, a JSON file, or the environment.
"""

import json
import logging
import os
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Dict, Any, Optional, Union

from ..exceptions import ConfigError

CONFIG_PATH_ENV = "SSHKEY_IMPORTER_CONFIG"
LOG_LEVEL_ENV = "SSHKEY_IMPORTER_LOG_LEVEL"

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
VALID_KEY_FORMATS = ("hex", "base64")


@dataclass
class LoggingConfig:
    """Logging configuration"""
    level: str = "WARNING"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass
class OutputConfig:
    """How key material is printed"""
    key_format: str = "hex"
    show_private: bool = False


@dataclass
class ImporterConfig:
    """Top-level configuration"""
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    def __post_init__(self):
        if not isinstance(self.logging.level, str):
            raise ConfigError(f"Log level must be a string, got {self.logging.level!r}", "INVALID_VALUE")
        self.logging.level = self.logging.level.upper()
        if self.logging.level not in VALID_LOG_LEVELS:
            raise ConfigError(f"Invalid log level: {self.logging.level}", "INVALID_VALUE")
        if not isinstance(self.logging.format, str):
            raise ConfigError(f"Log format must be a string, got {self.logging.format!r}", "INVALID_VALUE")

        if not isinstance(self.output.key_format, str) or self.output.key_format not in VALID_KEY_FORMATS:
            raise ConfigError(f"Invalid key format: {self.output.key_format!r}", "INVALID_VALUE")
        # JSON strings such as "false" are truthy
        if not isinstance(self.output.show_private, bool):
            raise ConfigError(f"show_private must be true or false, got {self.output.show_private!r}", "INVALID_VALUE")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _parse_config_dict(data: Dict[str, Any]) -> ImporterConfig:
    if not isinstance(data, dict):
        raise TypeError("Configuration root must be an object")

    logging_data = data.get('logging', {})
    output_data = data.get('output', {})

    return ImporterConfig(
        logging=LoggingConfig(**logging_data),
        output=OutputConfig(**output_data),
    )


def load_config_from_json(json_string: str) -> ImporterConfig:
    """Load configuration from a JSON string"""
    try:
        data = json.loads(json_string)
        return _parse_config_dict(data)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Failed to parse configuration JSON: {e}", "PARSE_ERROR")
    except (KeyError, TypeError, ValueError) as e:
        raise ConfigError(f"Invalid configuration format: {e}", "INVALID_FORMAT")


def load_config_from_file(path: Union[str, Path]) -> ImporterConfig:
    """Load configuration from a JSON file"""
    config_path = Path(path)
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}", "FILE_NOT_FOUND")

    return load_config_from_json(config_path.read_text(encoding='utf-8'))


def load_default_config(environ: Optional[Dict[str, str]] = None) -> ImporterConfig:
    """
    Load configuration from the environment.

    ``SSHKEY_IMPORTER_CONFIG`` names a JSON file to load; without it the
    built-in defaults apply. ``SSHKEY_IMPORTER_LOG_LEVEL`` overrides the
    log level either way.
    """
    env = os.environ if environ is None else environ

    config_path = env.get(CONFIG_PATH_ENV)
    config = load_config_from_file(config_path) if config_path else ImporterConfig()

    level = env.get(LOG_LEVEL_ENV)
    if level:
        level = level.upper()
        if level not in VALID_LOG_LEVELS:
            raise ConfigError(f"Invalid log level in {LOG_LEVEL_ENV}: {level}", "INVALID_VALUE")
        config.logging.level = level

    return config


def configure_logging(config: ImporterConfig) -> None:
    """Install a root log handler according to ``config.logging``."""
    logging.basicConfig(level=config.logging.level, format=config.logging.format)
