"""Source dialects and the file extensions that select them."""

from enum import Enum
from pathlib import Path
from typing import Union

SOURCE_EXTENSIONS: tuple[str, ...] = (".ts", ".tsx")

# Ambient declaration files carry no implementation.
DECLARATION_SUFFIX = ".d.ts"


class ParseDialect(str, Enum):
    """Grammar used to parse a file."""

    TYPESCRIPT = "typescript"
    TSX = "tsx"

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "ParseDialect":
        """Pick the dialect from the file extension alone."""
        if str(path).endswith(".tsx"):
            return cls.TSX
        return cls.TYPESCRIPT


def is_source_file(name: str) -> bool:
    """True for ``.ts``/``.tsx`` files that are not ``.d.ts`` declarations."""
    return name.endswith(SOURCE_EXTENSIONS) and not name.endswith(DECLARATION_SUFFIX)
