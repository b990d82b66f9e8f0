"""Total salary command."""

from orgchart.commands.base import BaseCommand
from orgchart.commands.registry import register_command
from orgchart.core.printer import format_total_salary


@register_command
class TotalSalaryCommand(BaseCommand):
    """Print the salary expense summed over every employee."""

    name = "total-salary"

    def validate(self) -> None:
        self.validate_required_params()

    def execute(self) -> None:
        repository = self.load_repository()
        self.echo(format_total_salary(repository.total_salary()))
