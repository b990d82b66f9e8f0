"""In-memory employee store and manager reference resolution."""

import logging
from typing import Dict, Iterable, Iterator, List, Set

from orgchart.core.config import LinkPolicy
from orgchart.core.errors import AmbiguousRootError, NotFoundError, RootNotFoundError
from orgchart.core.models import Employee

logger = logging.getLogger(__name__)


class EmployeeRepository:
    """Keyed collection of employees, linked into a tree by manager name.

    Records are added in bulk, then linked once with ``resolve_all()``.
    After linking the repository is read-only.
    """

    def __init__(self, policy: LinkPolicy = LinkPolicy.SKIP):
        """Initialize an empty repository.

        Args:
            policy: How ``resolve_all()`` treats a manager name with no record
        """
        self.policy = policy
        self._data: Dict[str, Employee] = {}
        self._orphans: Set[str] = set()
        self._linked = False

    @classmethod
    def from_records(
        cls, employees: Iterable[Employee], policy: LinkPolicy = LinkPolicy.SKIP
    ) -> "EmployeeRepository":
        """Build an unlinked repository from employee records.

        Args:
            employees: Records to store, keyed by their name
            policy: Link policy for the new repository

        Returns:
            The populated repository

        Raises:
            ValueError: If two records share a name
        """
        repository = cls(policy)
        for employee in employees:
            repository.add(employee)
        return repository

    def add(self, employee: Employee) -> None:
        """Store a record before linking.

        Raises:
            ValueError: If the name is already taken or the repository is linked
        """
        if self._linked:
            raise ValueError("Cannot add employees after linking")
        if employee.name in self._data:
            raise ValueError(f"Duplicate employee name: {employee.name}")
        self._data[employee.name] = employee

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Employee]:
        return iter(self._data.values())

    def __contains__(self, name: object) -> bool:
        return name in self._data

    @property
    def orphans(self) -> Set[str]:
        """Names of employees whose manager could not be resolved."""
        return set(self._orphans)

    @property
    def is_linked(self) -> bool:
        """True after ``resolve_all()`` has run to completion."""
        return self._linked

    def lookup(self, name: str) -> Employee:
        """Return the record with exactly this name.

        Raises:
            NotFoundError: If no record has this name
        """
        try:
            return self._data[name]
        except KeyError:
            raise NotFoundError(name) from None

    def link_manager(self, employee_name: str, manager_name: str) -> None:
        """Point an employee's manager reference at an existing record.

        Raises:
            NotFoundError: If either name has no record
        """
        employee = self.lookup(employee_name)
        manager = self.lookup(manager_name)
        employee.manager = manager.name

    def add_report(self, employee_name: str, manager_name: str) -> None:
        """Append an employee to a manager's list of direct reports.

        Raises:
            NotFoundError: If either name has no record
        """
        employee = self.lookup(employee_name)
        manager = self.lookup(manager_name)
        manager.manages.append(employee.name)

    def resolve_all(self) -> None:
        """Link every record that names a manager.

        Records without a manager name are left alone. A manager name with
        no record is handled according to ``self.policy``: ``ABORT`` raises
        before any record is modified, ``SKIP`` leaves the record unlinked
        and excludes it from the tree. Calling this again is a no-op.

        Raises:
            NotFoundError: Under ``ABORT``, for the first dangling reference
        """
        if self._linked:
            return

        if self.policy is LinkPolicy.ABORT:
            for employee in self._data.values():
                if employee.has_manager_reference and employee.manager_name not in self._data:
                    raise NotFoundError(employee.manager_name)

        linked = 0
        for employee in self._data.values():
            if not employee.has_manager_reference:
                continue
            try:
                self.link_manager(employee.name, employee.manager_name)
                self.add_report(employee.name, employee.manager_name)
            except NotFoundError as e:
                logger.warning(
                    "Skipping %s: manager %s has no record", employee.name, e.name
                )
                self._orphans.add(employee.name)
                continue
            linked += 1

        self._linked = True
        logger.debug(
            "Linked %d of %d employees (%d skipped)",
            linked,
            len(self._data),
            len(self._orphans),
        )

    def find_root(self) -> Employee:
        """Return the one employee that has no manager.

        Employees skipped during linking are not candidates.

        Raises:
            RootNotFoundError: If no employee qualifies
            AmbiguousRootError: If more than one employee qualifies
        """
        candidates = [
            employee
            for employee in self._data.values()
            if employee.manager is None and employee.name not in self._orphans
        ]
        if not candidates:
            raise RootNotFoundError()
        if len(candidates) > 1:
            raise AmbiguousRootError([employee.name for employee in candidates])
        return candidates[0]

    def reports_of(self, name: str) -> List[Employee]:
        """Return the direct reports of an employee sorted by name.

        The result is a new list; the stored ``manages`` order is untouched.

        Raises:
            NotFoundError: If the employee or one of its reports has no record
        """
        employee = self.lookup(name)
        reports = [self.lookup(report) for report in employee.manages]
        return sorted(reports, key=lambda report: report.name)

    def total_salary(self) -> float:
        """Sum the salary of every stored employee."""
        return sum((employee.salary for employee in self._data.values()), 0.0)
