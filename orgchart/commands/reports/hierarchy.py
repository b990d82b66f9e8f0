"""Hierarchy command."""

from orgchart.commands.base import BaseCommand
from orgchart.commands.registry import register_command
from orgchart.core.printer import HierarchyPrinter


@register_command
class HierarchyCommand(BaseCommand):
    """Print only the management hierarchy."""

    name = "hierarchy"

    def validate(self) -> None:
        self.validate_required_params()

    def execute(self) -> None:
        """Print the tree.

        Raises:
            RootNotFoundError: If there is no single top-level employee
        """
        repository = self.load_repository()
        for line in HierarchyPrinter().render(repository):
            self.echo(line)
