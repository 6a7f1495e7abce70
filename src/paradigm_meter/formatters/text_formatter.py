"""Plain-text summary formatter."""

from ..analysis.models import ParadigmReport
from .base import BaseFormatter


class TextFormatter(BaseFormatter):
    """Four-line human-readable summary."""

    def format(self, report: ParadigmReport) -> str:
        totals = report.totals
        return "\n".join(
            [
                f"OOP: {report.oop_total} ({totals.classes} classes + {totals.methods} methods)",
                f"FP:  {report.fp_total} ({totals.functions} functions + {totals.arrow_functions} arrows)",
                f"Ratio (OOP:FP): {report.ratio_display}:1",
                f"Files: {report.files}",
            ]
        )
