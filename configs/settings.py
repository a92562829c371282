"""Configuration loading for track building."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

from configs.validator import validate_config
from exceptions import InvalidConfigError
from log_config.logger import configure_logging, get_logger

logger = get_logger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).with_name("default.yaml")


@dataclass(frozen=True)
class LoggingConfig:
    level: str
    log_dir: Optional[str]


@dataclass(frozen=True)
class TrackBuilderConfig:
    min_track_length: int
    reserve_hint: int


@dataclass(frozen=True)
class AppConfig:
    logging: LoggingConfig
    tracks: TrackBuilderConfig


def load_config(path: Path = DEFAULT_CONFIG_PATH) -> AppConfig:
    """Load and validate configuration from YAML file.

    Args:
        path: Path to configuration file

    Returns:
        Validated AppConfig instance

    Raises:
        ConfigError: If configuration is invalid or cannot be loaded
    """
    try:
        logger.info(f"Loading configuration from {path}")
        if not path.exists():
            raise InvalidConfigError(f"Configuration file not found: {path}")

        data = yaml.safe_load(path.read_text())
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise InvalidConfigError(f"Configuration root must be a mapping: {path}")

    except yaml.YAMLError as e:
        logger.error(f"Failed to parse YAML configuration: {e}")
        raise InvalidConfigError(f"Failed to parse configuration file: {e}")

    # Fills in schema defaults
    validate_config(data)

    config = AppConfig(
        logging=LoggingConfig(**data["logging"]),
        tracks=TrackBuilderConfig(**data["tracks"]),
    )
    logger.info(
        f"Configuration loaded successfully: min_track_length={config.tracks.min_track_length}, "
        f"log level {config.logging.level}"
    )
    return config


def apply_logging(config: AppConfig) -> None:
    """Re-install log sinks according to ``config.logging``."""
    configure_logging(config.logging.level, config.logging.log_dir)
