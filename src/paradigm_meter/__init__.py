"""
paradigm-meter - OOP vs FP style ratio for TypeScript codebases.

Counts class-related constructs (classes, methods, accessors, constructors)
against function-related ones (function declarations, function expressions,
arrow functions) with tree-sitter, and reports the ratio between them.
"""

__version__ = "0.1.0"

from .analysis import Counts, ParadigmAnalyzer, ParadigmReport, classify, count_file
from .api import analyze

__all__ = [
    "analyze",  # Main entry point
    "ParadigmAnalyzer",
    "ParadigmReport",
    "Counts",
    "classify",
    "count_file",
]
