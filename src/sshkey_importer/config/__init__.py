"""
Configuration management for sshkey-importer
"""

from .settings import (
    ImporterConfig,
    LoggingConfig,
    OutputConfig,
    CONFIG_PATH_ENV,
    LOG_LEVEL_ENV,
    load_config_from_json,
    load_config_from_file,
    load_default_config,
    configure_logging,
)

__all__ = [
    'ImporterConfig',
    'LoggingConfig',
    'OutputConfig',
    'CONFIG_PATH_ENV',
    'LOG_LEVEL_ENV',
    'load_config_from_json',
    'load_config_from_file',
    'load_default_config',
    'configure_logging',
]
