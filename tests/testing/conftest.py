"""Shared fixtures for the testing subsystem."""

from __future__ import annotations

from pathlib import Path

import pytest

from gotestexplorer.testing.models import TestRunConfig
from gotestexplorer.testing.scanner import ScanResult, SourceScanner, SymbolRange, TestSymbol
from gotestexplorer.testing.execution import TestExecutor

PLAIN_TEST_GO = """\
package calc

import "testing"

func TestB(t *testing.T) {}

func testHelper() {}

func TestC(t *testing.T) {}

func Example() {}

func BenchmarkAdd(b *testing.B) {}

func Testify(t *testing.T) {}
"""

SUITE_TEST_GO = """\
package calc

import (
	"testing"

	"github.com/stretchr/testify/suite"
)

type MySuite struct {
	suite.Suite
}

func (s *MySuite) TestFoo() {}

func (s *MySuite) TestBar() {}

func (s *MySuite) helper() {}

func TestSuiteRunner(t *testing.T) {
	suite.Run(t, new(MySuite))
}
"""


def symbol(name: str, line: int = 0) -> TestSymbol:
    return TestSymbol(name=name, range=SymbolRange(line, 0, line + 2, 1))


class FakeScanner(SourceScanner):
    """Scanner returning canned results keyed by file name."""

    def __init__(self, results: dict[str, ScanResult] | None = None) -> None:
        self.results = results or {}
        self.scanned: list[Path] = []

    def scan(self, path: Path) -> ScanResult:
        self.scanned.append(path)
        return self.results.get(path.name, ScanResult())


class FakeExecutor(TestExecutor):
    """Executor recording configs; fails any config whose functions hit ``failing``."""

    def __init__(self, failing: set[str] | None = None) -> None:
        self.failing = failing or set()
        self.configs: list[TestRunConfig] = []

    async def execute(self, config: TestRunConfig) -> bool:
        self.configs.append(config)
        return not any(fn in self.failing for fn in config.functions)


@pytest.fixture
def fake_executor() -> FakeExecutor:
    return FakeExecutor()


@pytest.fixture
def go_workspace(tmp_path: Path) -> Path:
    """A small Go module with a plain test file, a testify suite and an empty dir."""
    root = tmp_path / "ws"
    pkg = root / "calc"
    pkg.mkdir(parents=True)
    (root / "go.mod").write_text("module example.com/ws\n\ngo 1.22\n")
    (root / "main.go").write_text("package main\n\nfunc main() {}\n")
    (pkg / "calc.go").write_text("package calc\n")
    (pkg / "calc_test.go").write_text(PLAIN_TEST_GO)
    (pkg / "suite_test.go").write_text(SUITE_TEST_GO)
    (root / "docs").mkdir()
    (root / "docs" / "README.md").write_text("# docs\n")
    return root
