"""Tree-sitter parser wrapper.

Provides one parser per TypeScript dialect. tree-sitter never rejects
input: syntax errors show up as ``ERROR`` nodes inside an otherwise usable
tree, so files with mistakes still get counted on a best-effort basis.

Usage:
    parser = TreeSitterParser()
    tree = parser.parse(code_bytes, ParseDialect.TSX)
"""

from __future__ import annotations

from typing import Any, Callable

import tree_sitter
import tree_sitter_typescript

from ..logging_config import get_logger
from .dialects import ParseDialect

logger = get_logger(__name__)

# tree-sitter-typescript ships both grammars in one package.
_GRAMMARS: dict[ParseDialect, Callable[[], Any]] = {
    ParseDialect.TYPESCRIPT: tree_sitter_typescript.language_typescript,
    ParseDialect.TSX: tree_sitter_typescript.language_tsx,
}


class TreeSitterParser:
    """Wrapper around tree-sitter for the TypeScript dialects.

    Parsers are built lazily, once per dialect, and reused across files.
    """

    def __init__(self) -> None:
        self._parsers: dict[ParseDialect, tree_sitter.Parser] = {}

    def _parser_for(self, dialect: ParseDialect) -> tree_sitter.Parser:
        parser = self._parsers.get(dialect)
        if parser is None:
            # tree-sitter >= 0.22 hands out a PyCapsule; wrap in Language()
            language = tree_sitter.Language(_GRAMMARS[dialect]())
            parser = tree_sitter.Parser(language)
            self._parsers[dialect] = parser
            logger.debug(f"Initialized tree-sitter parser for {dialect.value}")
        return parser

    def parse(self, code: bytes, dialect: ParseDialect) -> tree_sitter.Tree:
        """Parse code and return its syntax tree.

        Args:
            code: Source code as bytes
            dialect: Grammar to parse with

        Returns:
            The syntax tree; it may contain ERROR nodes for invalid input
        """
        return self._parser_for(dialect).parse(code)
