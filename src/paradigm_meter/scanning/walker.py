"""Directory traversal for TypeScript sources."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Union

from ..logging_config import get_logger
from .dialects import is_source_file

logger = get_logger(__name__)

# Dependency, build-output, VCS and cache directories. Never descended into.
SKIP_DIRS: frozenset[str] = frozenset(
    {
        "node_modules",
        ".next",
        ".git",
        "dist",
        "build",
        "out",
        ".turbo",
        ".cache",
        "coverage",
        "__pycache__",
        ".bazel-cache",
        "bazel-out",
        ".output",
        ".nuxt",
        ".svelte-kit",
    }
)


def is_excluded(relative_path: str, exclude_patterns: Iterable[str]) -> bool:
    """True when the relative path contains any exclusion substring."""
    return any(pattern and pattern in relative_path for pattern in exclude_patterns)


def list_files(
    root_dir: Union[str, Path],
    exclude_patterns: Iterable[str] = (),
    skip_dirs: Iterable[str] = SKIP_DIRS,
    follow_symlinks: bool = False,
) -> list[Path]:
    """List every ``.ts``/``.tsx`` source file under ``root_dir``.

    Directories named in ``skip_dirs``, and any path whose location relative
    to the root contains one of ``exclude_patterns``, are left out. A
    directory that cannot be read contributes no entries.

    Args:
        root_dir: Directory to walk
        exclude_patterns: Substrings matched against relative paths
        skip_dirs: Bare directory names that are never entered
        follow_symlinks: Treat symlinks as the entries they point to

    Returns:
        Paths in a stable, depth-first, name-sorted order
    """
    root = Path(root_dir)
    patterns = [p for p in exclude_patterns if p]
    skip = frozenset(skip_dirs)
    results: list[Path] = []

    # Real paths already walked; only needed when symlinks can form cycles.
    visited: set[str] = set()

    stack = [root]
    while stack:
        current = stack.pop()
        if follow_symlinks:
            real = os.path.realpath(current)
            if real in visited:
                continue
            visited.add(real)
        try:
            with os.scandir(current) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as e:
            logger.debug(f"Skipping unreadable directory {current}: {e}")
            continue

        subdirs: list[Path] = []
        for entry in entries:
            full_path = Path(entry.path)
            relative = os.path.relpath(full_path, root)
            try:
                is_dir = entry.is_dir(follow_symlinks=follow_symlinks)
                is_file = entry.is_file(follow_symlinks=follow_symlinks)
            except OSError:
                continue

            if is_dir:
                if entry.name in skip or is_excluded(relative, patterns):
                    continue
                subdirs.append(full_path)
            elif is_file and is_source_file(entry.name):
                if not is_excluded(relative, patterns):
                    results.append(full_path)

        # Reversed so the first subdirectory is walked first.
        stack.extend(reversed(subdirs))

    return results
