"""Per-file driver: read, parse and classify one source file."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from ..exceptions import AnalysisError, FileAccessError, ParsingError
from ..logging_config import get_logger
from ..scanning.dialects import ParseDialect
from ..scanning.treesitter_parser import TreeSitterParser
from .classifier import classify
from .models import Counts

logger = get_logger(__name__)


def read_source(filepath: Path, encoding: str = "utf-8") -> str:
    """Read a source file as text, replacing undecodable bytes.

    Raises:
        FileAccessError: If the file cannot be read
    """
    try:
        with open(filepath, encoding=encoding, errors="replace") as f:
            return f.read()
    except OSError as e:
        raise FileAccessError(filepath, f"Cannot read file: {e}")


def parse_source(content: str, filepath: Path, parser: TreeSitterParser):
    """Parse text with the grammar that matches the file extension.

    Raises:
        ParsingError: If tree-sitter cannot produce a tree
    """
    dialect = ParseDialect.from_path(filepath)
    try:
        return parser.parse(content.encode("utf-8"), dialect)
    except (UnicodeEncodeError, ValueError) as e:
        raise ParsingError(filepath, dialect.value, str(e))


def count_file(
    filepath: Union[str, Path],
    parser: Optional[TreeSitterParser] = None,
    encoding: str = "utf-8",
) -> Counts:
    """Count OOP/FP constructs in one file.

    Files that cannot be read or parsed yield all-zero counts.
    """
    filepath = Path(filepath)
    parser = parser or TreeSitterParser()
    try:
        content = read_source(filepath, encoding=encoding)
        tree = parse_source(content, filepath, parser)
    except AnalysisError as e:
        logger.debug(f"Skipping {filepath}: {e}")
        return Counts()
    return classify(tree)
