"""Analysis engine: walk a directory, count every file, aggregate."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Optional, Sequence, Union

from ..config import AnalysisConfig
from ..exceptions import InvalidPathError
from ..logging_config import get_logger
from ..scanning.treesitter_parser import TreeSitterParser
from ..scanning.walker import list_files
from .counter import count_file
from .models import ParadigmReport

logger = get_logger(__name__)


class ParadigmAnalyzer:
    """Runs one OOP:FP scan over a source tree.

    Usage:
        analyzer = ParadigmAnalyzer(config)
        report = analyzer.analyze("/path/to/project", exclude_patterns=["generated"])
    """

    def __init__(
        self,
        config: Optional[AnalysisConfig] = None,
        parser: Optional[TreeSitterParser] = None,
    ) -> None:
        self.config = config or AnalysisConfig()
        self.parser = parser or TreeSitterParser()

    def analyze(
        self,
        root: Union[str, Path],
        exclude_patterns: Optional[Sequence[str]] = None,
        on_files_found: Optional[Callable[[int], None]] = None,
    ) -> ParadigmReport:
        """Scan ``root`` and return the aggregate report.

        Args:
            root: Directory to scan
            exclude_patterns: Extra path substrings to exclude, on top of
                the configured ones
            on_files_found: Called with the file count once the walk is done

        Raises:
            InvalidPathError: If ``root`` is not an existing directory
        """
        root_path = Path(os.path.abspath(root))
        if not root_path.is_dir():
            raise InvalidPathError(root_path, "not an existing directory")

        patterns = self.resolve_exclusions(exclude_patterns)
        files = list_files(
            root_path,
            exclude_patterns=patterns,
            follow_symlinks=self.config.follow_symlinks,
        )
        logger.debug(f"Found {len(files)} source files under {root_path}")
        if on_files_found is not None:
            on_files_found(len(files))

        counts = (
            count_file(path, parser=self.parser, encoding=self.config.encoding) for path in files
        )
        return ParadigmReport.from_counts(str(root_path), len(files), counts)

    def resolve_exclusions(self, exclude_patterns: Optional[Sequence[str]] = None) -> list[str]:
        """Configured exclusions followed by per-run ones, empties and repeats dropped."""
        merged: list[str] = []
        for pattern in [*self.config.exclude_patterns, *(exclude_patterns or [])]:
            if pattern and pattern not in merged:
                merged.append(pattern)
        return merged
