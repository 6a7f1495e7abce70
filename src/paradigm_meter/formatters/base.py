"""Base formatter interface for paradigm-meter output rendering."""

from abc import ABC, abstractmethod

from ..analysis.models import ParadigmReport


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    def render(self, report: ParadigmReport) -> None:
        """Write the formatted report to stdout."""
        print(self.format(report))

    @abstractmethod
    def format(self, report: ParadigmReport) -> str:
        """Return formatted string representation of the report."""
