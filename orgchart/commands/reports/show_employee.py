"""Show a single employee record."""

from orgchart.commands.base import BaseCommand
from orgchart.commands.registry import register_command

NONE_MARKER = "-"


@register_command
class ShowEmployeeCommand(BaseCommand):
    """Print one employee with its manager and direct reports.

    Output:
        Name: Jeff
        Salary: 100000.00
        Manager: -
        Reports: Dave, Nate
    """

    name = "show-employee"

    def validate(self) -> None:
        """Validate that required parameters are present.

        Raises:
            ValueError: If ``employee`` is missing or empty
        """
        self.validate_required_params("employee")
        if not self.params["employee"]:
            raise ValueError("Employee name must not be empty")

    def execute(self) -> None:
        """Print the record.

        Raises:
            NotFoundError: If no employee has the requested name
        """
        repository = self.load_repository()
        employee = repository.lookup(self.params["employee"])
        reports = [report.name for report in repository.reports_of(employee.name)]

        self.echo(f"Name: {employee.name}")
        self.echo(f"Salary: {employee.salary:.2f}")
        self.echo(f"Manager: {employee.manager or NONE_MARKER}")
        self.echo(f"Reports: {', '.join(reports) or NONE_MARKER}")
