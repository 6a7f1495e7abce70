"""Exception hierarchy for paradigm-meter."""

from .analysis import AnalysisError, FileAccessError, ParsingError
from .base import ParadigmMeterError
from .config import ConfigurationError, InvalidConfigError, InvalidPathError

__all__ = [
    "ParadigmMeterError",
    "AnalysisError",
    "FileAccessError",
    "ParsingError",
    "ConfigurationError",
    "InvalidPathError",
    "InvalidConfigError",
]
