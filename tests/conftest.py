"""Pytest configuration and shared fixtures for orgchart-cli tests."""

import difflib
import io
import json
import shutil
from pathlib import Path
from typing import Any, Callable, Iterator, List, Optional

import pytest

from orgchart.core.config import get_settings
from orgchart.core.models import Employee
from orgchart.core.repository import EmployeeRepository

FIXTURES_DIR = Path(__file__).parent / "fixtures"
INPUT_FILE = "employees.json"
EXPECTED_FILE = "expected.txt"


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep ORGCHART_* variables from the environment out of every test."""
    for variable in ("ORGCHART_DATA_FILE", "ORGCHART_LINK_POLICY", "ORGCHART_LOG_LEVEL"):
        monkeypatch.delenv(variable, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def write_employees(tmp_path: Path) -> Callable[[Any], Path]:
    """Return a helper that dumps a JSON document to a temporary file."""

    def _write(document: Any, name: str = INPUT_FILE) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return _write


def make_repository(*rows: tuple, link: bool = True, **kwargs: Any) -> EmployeeRepository:
    """Build a repository from ``(name, salary, manager_name)`` tuples."""
    repository = EmployeeRepository.from_records(
        (Employee(name, salary, manager_name) for name, salary, manager_name in rows),
        **kwargs,
    )
    if link:
        repository.resolve_all()
    return repository


class ReportTestBase:
    """Base class for report tests with automatic fixture management.

    Usage:
        class TestReport(ReportTestBase):
            fixture_category = "reports/report"

            def test_simple(self):
                self.run_report("report")

    Convention:
        - Test method name (minus 'test_' prefix) maps to fixture directory name
        - Fixture directory contains employees.json and expected.txt
        - Example: test_simple() -> fixtures/reports/report/simple/
    """

    fixture_category: Optional[str] = None  # Must be set in subclass

    @pytest.fixture(autouse=True)
    def _setup_fixture(self, tmp_path: Path, request: pytest.FixtureRequest) -> None:
        """Copy the fixture input into tmp_path before each test.

        Creates:
            self.tmp_path: Temporary directory for this test
            self.input_file: Path to employees.json (copied to tmp_path)
            self.expected_file: Path to expected.txt (in fixtures)
        """
        self.tmp_path = tmp_path

        test_name = request.function.__name__
        fixture_name = test_name[5:] if test_name.startswith("test_") else test_name

        if self.fixture_category is None:
            raise ValueError(f"{self.__class__.__name__} must set fixture_category class attribute")

        fixture_dir = FIXTURES_DIR / self.fixture_category / fixture_name
        if not fixture_dir.exists():
            raise FileNotFoundError(f"Missing fixture directory {fixture_dir}")

        source = fixture_dir / INPUT_FILE
        expected = fixture_dir / EXPECTED_FILE
        if not source.exists() or not expected.exists():
            raise FileNotFoundError(
                f"Fixture directory {fixture_dir} must contain {INPUT_FILE} and {EXPECTED_FILE}"
            )

        self.input_file = tmp_path / INPUT_FILE
        self.expected_file = expected
        shutil.copy(source, self.input_file)

    def run_report(self, report_name: str, **params: Any) -> str:
        """Run a report and assert its output matches expected.txt.

        Args:
            report_name: Name of the report (e.g., "report")
            **params: Parameters to pass to the report

        Returns:
            The captured output
        """
        # Import here to avoid circular dependencies during test collection
        from orgchart.cli import run_command

        output = io.StringIO()
        run_command(report_name, self.input_file, output=output, **params)
        actual = output.getvalue()
        expected = self.expected_file.read_text(encoding="utf-8")
        assert actual == expected, self._format_diff(actual, expected)
        return actual

    def _format_diff(self, actual: str, expected: str) -> str:
        """Format a readable diff between actual and expected."""
        diff: List[str] = list(
            difflib.unified_diff(
                expected.splitlines(keepends=True),
                actual.splitlines(keepends=True),
                fromfile="expected.txt",
                tofile="actual.txt",
                lineterm="",
            )
        )
        return "".join(diff)
