"""Configuration loading and validation."""

from .settings import AppConfig, LoggingConfig, TrackBuilderConfig, apply_logging, load_config

__all__ = ["AppConfig", "LoggingConfig", "TrackBuilderConfig", "apply_logging", "load_config"]
