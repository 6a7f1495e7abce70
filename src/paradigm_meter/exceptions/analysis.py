"""Analysis-related exceptions: file access and parsing."""

from pathlib import Path

from .base import ParadigmMeterError


class AnalysisError(ParadigmMeterError):
    """Base class for analysis-related errors."""
    pass


class FileAccessError(AnalysisError):
    """Raised when a source file cannot be accessed or read."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot access file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class ParsingError(AnalysisError):
    """Raised when source text cannot be turned into a syntax tree."""

    def __init__(self, filepath: Path, dialect: str, reason: str):
        super().__init__(
            f"Failed to parse {dialect} file: {filepath}",
            details={"filepath": str(filepath), "dialect": dialect, "reason": reason},
        )
        self.filepath = filepath
        self.dialect = dialect
        self.reason = reason
