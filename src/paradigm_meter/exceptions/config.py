"""Configuration exceptions: scan targets and settings."""

from pathlib import Path
from typing import Any, Optional

from .base import ParadigmMeterError


class ConfigurationError(ParadigmMeterError):
    """Base class for configuration-related errors."""

    pass


class InvalidPathError(ConfigurationError):
    """Raised when the scan target is not a directory that can be walked."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Cannot scan {path}", details={"reason": reason})
        self.path = path
        self.reason = reason


class InvalidConfigError(ConfigurationError):
    """Raised when a configuration key is unknown or its value is invalid.

    ``source`` names where the bad value came from (a TOML file path or
    ``"overrides"``) when that is known.
    """

    def __init__(self, key: str, value: Any, reason: str, source: Optional[str] = None):
        details = {"key": key, "reason": reason}
        if source:
            details["source"] = source
        super().__init__(f"Invalid configuration for {key}: {value!r}", details=details)
        self.key = key
        self.value = value
        self.reason = reason
        self.source = source
