"""Text rendering of a linked employee hierarchy."""

from typing import List

from orgchart.core.models import Employee
from orgchart.core.repository import EmployeeRepository

INDENT = "\t"
BLOCK_HEADER = "Employees of: {name}"


class HierarchyPrinter:
    """Render the tree under the root employee as consecutive blocks.

    Each block is a header line followed by that manager's direct
    reports, sorted by name and indented once. The root's block comes
    first and is headed by the bare root name; later blocks are headed
    ``Employees of: <name>``. Every report that manages someone gets its
    own block, visited depth-first in sorted order. Leaves never get a
    block.

    Example (tabs shown as ``->``):
        A
        ->B
        ->C
        Employees of: B
        ->D
    """

    def __init__(self, indent: str = INDENT):
        self.indent = indent

    def render(self, repository: EmployeeRepository) -> List[str]:
        """Return the hierarchy as a list of lines.

        Args:
            repository: A linked repository

        Returns:
            Output lines without trailing newlines

        Raises:
            RootNotFoundError: If the repository has no single root
        """
        root = repository.find_root()
        lines: List[str] = []
        stack: List[Employee] = [root]

        while stack:
            manager = stack.pop()
            if manager is root:
                lines.append(manager.name)
            else:
                lines.append(BLOCK_HEADER.format(name=manager.name))
            reports = repository.reports_of(manager.name)
            lines.extend(f"{self.indent}{report.name}" for report in reports)
            # Reversed so the alphabetically first manager is visited next
            stack.extend(reversed([report for report in reports if report.has_reports]))

        return lines

    def format(self, repository: EmployeeRepository) -> str:
        """Return the rendered hierarchy as a single newline-terminated string."""
        return "".join(f"{line}\n" for line in self.render(repository))


def format_total_salary(total: float) -> str:
    """Return the salary summary line, e.g. ``Total salary: 850000.00``."""
    return f"Total salary: {total:.2f}"
