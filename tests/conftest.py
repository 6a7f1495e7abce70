"""Shared test fixtures for paradigm-meter tests."""

from pathlib import Path
from typing import Callable, Dict

import pytest

from paradigm_meter.analysis.classifier import classify
from paradigm_meter.analysis.models import Counts
from paradigm_meter.scanning.dialects import ParseDialect
from paradigm_meter.scanning.treesitter_parser import TreeSitterParser


@pytest.fixture(scope="session")
def ts_parser() -> TreeSitterParser:
    """One parser shared by the whole session."""
    return TreeSitterParser()


@pytest.fixture
def parse(ts_parser) -> Callable:
    """Parse a source string into a tree-sitter tree."""

    def _parse(code: str, dialect: ParseDialect = ParseDialect.TYPESCRIPT):
        return ts_parser.parse(code.encode("utf-8"), dialect)

    return _parse


@pytest.fixture
def count(parse) -> Callable[..., Counts]:
    """Parse and classify a source string in one step."""

    def _count(code: str, dialect: ParseDialect = ParseDialect.TYPESCRIPT) -> Counts:
        return classify(parse(code, dialect))

    return _count


@pytest.fixture
def write_tree(tmp_path) -> Callable[[Dict[str, str]], Path]:
    """Materialize ``{relative_path: content}`` under tmp_path and return the root."""

    def _write(files: Dict[str, str]) -> Path:
        root = tmp_path / "project"
        root.mkdir(exist_ok=True)
        for rel, content in files.items():
            target = root / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        return root

    return _write


ACCOUNT_TS = """\
export class Account {
  deposit(amount: number) {
    return amount;
  }

  withdraw(amount: number) {
    return -amount;
  }
}
"""

HELPERS_TS = """\
function a() { return 1; }
function b() { return 2; }
function c() { return 3; }
const d = () => 1;
const e = () => 2;
const f = (x: number) => x;
const g = async () => 3;
const h = [1, 2].map((n) => n * 2);
"""


@pytest.fixture
def two_file_project(write_tree) -> Path:
    """One class with two methods, plus three functions and five arrows."""
    return write_tree({"src/account.ts": ACCOUNT_TS, "src/helpers.ts": HELPERS_TS})
