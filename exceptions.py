"""Custom exception classes for the track library."""

from __future__ import annotations

from typing import Optional


class ReconstructionError(Exception):
    """Base exception for all reconstruction data-structure errors."""

    pass


class TrackError(ReconstructionError):
    """Base exception for track-related errors."""

    pass


class TrackIndexError(TrackError, IndexError):
    """Raised when a track element index is outside ``[0, length)``."""

    def __init__(self, message: str, index: Optional[int] = None, length: Optional[int] = None):
        self.index = index
        self.length = length
        super().__init__(message)


class ConfigError(ReconstructionError):
    """Base exception for configuration errors."""

    pass


class InvalidConfigError(ConfigError):
    """Raised when configuration file is invalid or corrupted."""

    pass


class ConfigValidationError(ConfigError):
    """Raised when configuration fails schema validation."""

    def __init__(self, message: str, validation_errors: Optional[list] = None):
        self.validation_errors = validation_errors or []
        super().__init__(message)
