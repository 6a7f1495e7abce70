"""Root of the paradigm-meter exception hierarchy."""

from typing import Any, Dict, Optional


class ParadigmMeterError(Exception):
    """Base exception for all paradigm-meter errors.

    ``details`` holds the structured context (paths, keys, reasons) that is
    appended to the message. ``exit_code`` is the status the CLI exits with
    when the error reaches it.
    """

    exit_code = 1

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = {key: str(value) for key, value in (details or {}).items()}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        context = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return f"{self.message} ({context})"
