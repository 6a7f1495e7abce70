"""OOP/FP classification, per-file counting and aggregation."""

from .classifier import classify
from .counter import count_file
from .engine import ParadigmAnalyzer
from .models import INFINITE_RATIO, Counts, ParadigmReport

__all__ = [
    "classify",
    "count_file",
    "ParadigmAnalyzer",
    "Counts",
    "ParadigmReport",
    "INFINITE_RATIO",
]
