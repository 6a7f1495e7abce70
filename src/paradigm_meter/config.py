"""Configuration loading and management for paradigm-meter.

Configuration sources are merged in priority order:
    1. Defaults (defined in AnalysisConfig)
    2. Project config (./paradigm-meter.toml)
    3. Explicit config file (--config)
    4. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(verbose=True, exclude_patterns=["generated"])
    >>> config.verbosity
    'verbose'
    >>> config.exclude_patterns
    ['generated']
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Literal, Optional

from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]

PROJECT_CONFIG_NAME = "paradigm-meter.toml"

OVERRIDES_SOURCE = "overrides"

_VERBOSITIES = ("quiet", "normal", "verbose")


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for one analysis run.

    Attributes:
        exclude_patterns: Path substrings excluded on every run, in addition
            to the ones given on the command line
        encoding: Text encoding used to read sources (undecodable bytes are
            replaced)
        follow_symlinks: Descend into symlinked directories and count
            symlinked files
        verbosity: Logging verbosity level
        log_file: Optional file that also receives log records
    """

    exclude_patterns: list[str] = field(default_factory=list)
    encoding: str = "utf-8"
    follow_symlinks: bool = False
    verbosity: Verbosity = "normal"
    log_file: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not isinstance(self.exclude_patterns, list) or not all(
            isinstance(p, str) for p in self.exclude_patterns
        ):
            raise InvalidConfigError(
                "exclude_patterns", self.exclude_patterns, "must be a list of strings"
            )
        if not isinstance(self.encoding, str):
            raise InvalidConfigError("encoding", self.encoding, "must be a string")
        try:
            codecs.lookup(self.encoding)
        except LookupError:
            raise InvalidConfigError("encoding", self.encoding, "unknown text encoding")
        if not isinstance(self.follow_symlinks, bool):
            raise InvalidConfigError("follow_symlinks", self.follow_symlinks, "must be true or false")
        if self.verbosity not in _VERBOSITIES:
            raise InvalidConfigError(
                "verbosity", self.verbosity, f"must be one of: {', '.join(_VERBOSITIES)}"
            )
        if self.log_file is not None and not isinstance(self.log_file, str):
            raise InvalidConfigError("log_file", self.log_file, "must be a file path")


def load_config(config_file: Optional[Path] = None, **overrides) -> AnalysisConfig:
    """Load configuration with project-file discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``verbose``
            and ``quiet`` booleans are mapped onto ``verbosity``; ``None``
            values are ignored.

    Returns:
        Validated AnalysisConfig instance

    Raises:
        ConfigurationError: If a config file is missing or malformed
        InvalidConfigError: If a key is unknown or a value is invalid; the
            error names the source that supplied it
    """
    merged: dict[str, Any] = {}
    # Key -> where its winning value came from.
    origins: dict[str, str] = {}

    def _apply(values: dict[str, Any], source: str) -> None:
        merged.update(values)
        origins.update(dict.fromkeys(values, source))

    project_config = Path.cwd() / PROJECT_CONFIG_NAME
    if project_config.is_file():
        _apply(_load_toml_file(project_config), str(project_config))

    if config_file is not None:
        if not config_file.is_file():
            raise ConfigurationError(f"Config file not found: {config_file}")
        _apply(_load_toml_file(config_file), str(config_file))

    if overrides.pop("verbose", False):
        overrides["verbosity"] = "verbose"
    if overrides.pop("quiet", False):
        overrides["verbosity"] = "quiet"
    _apply({k: v for k, v in overrides.items() if v is not None}, OVERRIDES_SOURCE)

    known = {f.name for f in fields(AnalysisConfig)}
    for key, value in merged.items():
        if key not in known:
            raise InvalidConfigError(key, value, "unknown configuration key", source=origins[key])

    try:
        return AnalysisConfig(**merged)
    except InvalidConfigError as e:
        raise InvalidConfigError(e.key, e.value, e.reason, source=origins.get(e.key)) from e


def _load_toml_file(path: Path) -> dict:
    """Load a TOML file and return the parsed dict.

    Raises:
        ConfigurationError: If TOML support is missing or parsing fails
    """
    try:
        import tomllib
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise ConfigurationError(
                "TOML support requires Python 3.11+ or the 'tomli' package. "
                "Install with: pip install tomli"
            )

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}")
