"""File discovery and parsing for TypeScript sources."""

from .dialects import DECLARATION_SUFFIX, SOURCE_EXTENSIONS, ParseDialect, is_source_file
from .treesitter_parser import TreeSitterParser
from .walker import SKIP_DIRS, is_excluded, list_files

__all__ = [
    "ParseDialect",
    "SOURCE_EXTENSIONS",
    "DECLARATION_SUFFIX",
    "is_source_file",
    "TreeSitterParser",
    "SKIP_DIRS",
    "is_excluded",
    "list_files",
]
