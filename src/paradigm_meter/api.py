"""Public API for paradigm-meter.

Example:
    >>> from paradigm_meter import analyze
    >>> report = analyze("/path/to/code", exclude=["generated"])
    >>> report.ratio
    0.38
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence, Union

from .analysis.engine import ParadigmAnalyzer
from .analysis.models import ParadigmReport
from .config import load_config


def analyze(
    path: Union[str, Path] = ".",
    exclude: Optional[Sequence[str]] = None,
    config_file: Optional[Path] = None,
    **overrides,
) -> ParadigmReport:
    """Scan a directory and return its OOP:FP report.

    Args:
        path: Directory to scan
        exclude: Path substrings to exclude for this run
        config_file: Optional TOML configuration file
        **overrides: Configuration overrides (see AnalysisConfig)

    Raises:
        ConfigurationError: On invalid configuration or a bad path
    """
    config = load_config(config_file=config_file, **overrides)
    return ParadigmAnalyzer(config).analyze(path, exclude_patterns=exclude)
