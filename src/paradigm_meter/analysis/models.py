"""Data models for construct counts and run reports."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, Iterable, Optional

# Text-mode stand-in for a ratio with no FP constructs to divide by.
INFINITE_RATIO = "inf"

_RATIO_PLACES = Decimal("0.01")


@dataclass
class Counts:
    """Tally of OOP and FP constructs for one file or a whole tree."""

    classes: int = 0
    methods: int = 0
    functions: int = 0
    arrow_functions: int = 0

    @property
    def oop_total(self) -> int:
        return self.classes + self.methods

    @property
    def fp_total(self) -> int:
        return self.functions + self.arrow_functions

    def merge(self, other: Counts) -> None:
        """Accumulate ``other`` into this tally in place."""
        self.classes += other.classes
        self.methods += other.methods
        self.functions += other.functions
        self.arrow_functions += other.arrow_functions

    def __add__(self, other: Counts) -> Counts:
        if not isinstance(other, Counts):
            return NotImplemented
        return Counts(
            classes=self.classes + other.classes,
            methods=self.methods + other.methods,
            functions=self.functions + other.functions,
            arrow_functions=self.arrow_functions + other.arrow_functions,
        )


@dataclass(frozen=True)
class ParadigmReport:
    """Aggregate OOP:FP result for one scanned directory.

    ``files`` is the number of files the walker found, including files
    that could not be read or parsed. ``totals`` is copied on construction
    and should be treated as read-only.
    """

    directory: str
    files: int
    totals: Counts = field(default_factory=Counts)

    def __post_init__(self) -> None:
        object.__setattr__(self, "totals", replace(self.totals))

    @classmethod
    def from_counts(cls, directory: str, files: int, counts: Iterable[Counts]) -> ParadigmReport:
        totals = Counts()
        for item in counts:
            totals.merge(item)
        return cls(directory=directory, files=files, totals=totals)

    @property
    def oop_total(self) -> int:
        return self.totals.oop_total

    @property
    def fp_total(self) -> int:
        return self.totals.fp_total

    def _rounded_ratio(self) -> Optional[Decimal]:
        if self.fp_total == 0:
            return None
        # Exact value of the float quotient, halves rounded away from zero.
        quotient = Decimal(self.oop_total / self.fp_total)
        return quotient.quantize(_RATIO_PLACES, rounding=ROUND_HALF_UP)

    @property
    def ratio(self) -> Optional[float]:
        """OOP total over FP total to two decimals, or None without FP constructs."""
        rounded = self._rounded_ratio()
        return None if rounded is None else float(rounded)

    @property
    def ratio_display(self) -> str:
        rounded = self._rounded_ratio()
        return INFINITE_RATIO if rounded is None else str(rounded)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "directory": self.directory,
            "files": self.files,
            "oop": {
                "total": self.oop_total,
                "classes": self.totals.classes,
                "methods": self.totals.methods,
            },
            "fp": {
                "total": self.fp_total,
                "functions": self.totals.functions,
                "arrowFunctions": self.totals.arrow_functions,
            },
            "ratio": self.ratio,
        }
