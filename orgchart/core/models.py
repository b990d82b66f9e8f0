"""Employee record type."""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class Employee:
    """One staff record.

    ``manager`` and ``manages`` hold employee names rather than object
    references. Both are derived from ``manager_name`` by the repository's
    link pass and stay empty until then.
    """

    name: str
    salary: float
    manager_name: str = ""
    manager: Optional[str] = None
    manages: List[str] = field(default_factory=list)

    @property
    def has_manager_reference(self) -> bool:
        """True when the record names a manager in its input."""
        return self.manager_name != ""

    @property
    def has_reports(self) -> bool:
        """True once the link pass has given this employee a direct report."""
        return bool(self.manages)
