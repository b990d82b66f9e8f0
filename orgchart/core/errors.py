"""Exceptions raised while loading and traversing an employee hierarchy."""

from pathlib import Path
from typing import Sequence


class OrgChartError(Exception):
    """Base class for all orgchart errors."""


class NotFoundError(OrgChartError):
    """Raised when a referenced employee name has no record."""

    def __init__(self, name: str):
        """Initialize the error.

        Args:
            name: The employee name that could not be resolved
        """
        self.name = name
        super().__init__(f"employee record: {name} not found")


class RootNotFoundError(OrgChartError):
    """Raised when the hierarchy has no single top-level employee."""

    def __init__(self, message: str = "no top-level employee"):
        super().__init__(message)


class AmbiguousRootError(RootNotFoundError):
    """Raised when more than one employee has no manager."""

    def __init__(self, candidates: Sequence[str]):
        """Initialize the error.

        Args:
            candidates: Names of every employee without a manager
        """
        self.candidates = sorted(candidates)
        super().__init__(
            f"multiple top-level employees: {', '.join(self.candidates)}"
        )


class SourceUnavailableError(OrgChartError):
    """Raised when the input file cannot be opened or read."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"cannot read {path}: {reason}")


class DecodeError(OrgChartError):
    """Raised when the input file is not a valid employee document."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"invalid employee data in {path}: {reason}")
