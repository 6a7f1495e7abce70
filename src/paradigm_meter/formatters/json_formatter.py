"""JSON formatter for paradigm-meter."""

import json

from ..analysis.models import ParadigmReport
from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Render the report as a single JSON object.

    ``ratio`` is ``null`` when there are no FP constructs.
    """

    def __init__(self, indent=None):
        self.indent = indent

    def format(self, report: ParadigmReport) -> str:
        return json.dumps(report.to_dict(), indent=self.indent)
