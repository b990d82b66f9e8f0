"""Full report command: hierarchy followed by the salary total."""

import logging

from orgchart.commands.base import BaseCommand
from orgchart.commands.registry import register_command
from orgchart.core.errors import RootNotFoundError
from orgchart.core.printer import HierarchyPrinter, format_total_salary

logger = logging.getLogger(__name__)


@register_command
class ReportCommand(BaseCommand):
    """Print the management hierarchy, then the total salary expense.

    A hierarchy without a single root does not stop the report: the error
    message is printed in place of the tree and the total still follows.
    """

    name = "report"

    def validate(self) -> None:
        """No parameters are required."""
        self.validate_required_params()

    def execute(self) -> None:
        repository = self.load_repository()

        try:
            lines = HierarchyPrinter().render(repository)
        except RootNotFoundError as e:
            logger.debug("Hierarchy not printed: %s", e)
            self.echo(str(e))
        else:
            for line in lines:
                self.echo(line)

        self.echo(format_total_salary(repository.total_salary()))
