"""Base class for all report commands."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Optional, TextIO

import click

from orgchart.core.config import LinkPolicy, get_settings
from orgchart.core.loader import load_repository
from orgchart.core.repository import EmployeeRepository


class BaseCommand(ABC):
    """Base class for all report commands."""

    name: str  # e.g., "total-salary"

    def __init__(self, file_path: Path, **params: Any):
        """Initialize the command.

        Args:
            file_path: Path to the JSON file holding the employee records
            **params: Additional parameters for the command. ``link_policy``
                and ``output`` are understood by every command.
        """
        self.file_path = file_path
        self.params = params

    @abstractmethod
    def execute(self) -> None:
        """Run the command and write its report.

        Raises:
            OrgChartError: If the input cannot be loaded or the report fails
        """
        pass

    @abstractmethod
    def validate(self) -> None:
        """Validate parameters before execution.

        Raises:
            ValueError: If parameters are invalid
        """
        pass

    def validate_required_params(self, *param_names: str) -> None:
        """Validate that required parameters are present.

        Args:
            *param_names: Names of required parameters

        Raises:
            ValueError: If any required parameters are missing
        """
        missing = [p for p in param_names if p not in self.params]
        if missing:
            raise ValueError(f"Missing required parameters for {self.name}: {', '.join(missing)}")

    @property
    def link_policy(self) -> LinkPolicy:
        policy = self.params.get("link_policy")
        if policy is None:
            return get_settings().link_policy
        return LinkPolicy(policy)

    def load_repository(self) -> EmployeeRepository:
        """Load and link the employee records from the command's file."""
        return load_repository(self.file_path, self.link_policy)

    def echo(self, message: str = "") -> None:
        """Write one line of report output."""
        output: Optional[TextIO] = self.params.get("output")
        click.echo(message, file=output)
