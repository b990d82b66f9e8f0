"""Decode employee JSON documents into a linked repository.

Two document shapes are accepted::

    {"Jeff": {"name": "Jeff", "salary": 100000, "manager_name": ""}, ...}
    [{"name": "Jeff", "salary": 100000, "manager_name": ""}, ...]

In the mapping shape ``name`` may be omitted and defaults to the key.
"""

import json
import logging
from pathlib import Path
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from orgchart.core.config import LinkPolicy
from orgchart.core.errors import DecodeError, SourceUnavailableError
from orgchart.core.models import Employee
from orgchart.core.repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeRecord(BaseModel):
    """One decoded input entry."""

    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., min_length=1)
    salary: float = Field(..., ge=0, allow_inf_nan=False)
    manager_name: str = ""

    @field_validator("salary", mode="before")
    @classmethod
    def _numbers_only(cls, value: Any) -> Any:
        # bool is an int subclass and lax mode would coerce numeric strings
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError("salary must be a number")
        return value

    @field_validator("manager_name", mode="before")
    @classmethod
    def _empty_when_missing(cls, value: Any) -> Any:
        return "" if value is None else value

    def to_employee(self) -> Employee:
        return Employee(name=self.name, salary=self.salary, manager_name=self.manager_name)


def _describe(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in item['loc']) or 'entry'}: {item['msg']}"
        for item in error.errors()
    )


def _parse_entry(path: Path, entry: Any, key: Optional[str] = None) -> EmployeeRecord:
    label = repr(key) if key is not None else "list entry"
    if not isinstance(entry, dict):
        raise DecodeError(path, f"{label} must be an object, got {type(entry).__name__}")

    if key is not None:
        name = entry.get("name", key)
        if name != key:
            raise DecodeError(path, f"entry {key!r} has mismatched name {name!r}")
        entry = {**entry, "name": key}

    try:
        return EmployeeRecord.model_validate(entry)
    except ValidationError as e:
        raise DecodeError(path, f"{label}: {_describe(e)}") from e


def parse_document(path: Path, document: Any) -> List[EmployeeRecord]:
    """Validate an already-decoded JSON document.

    Args:
        path: Source of the document, used in error messages
        document: Result of ``json.load``

    Returns:
        Records in document order

    Raises:
        DecodeError: If the document shape or any entry is invalid
    """
    if isinstance(document, dict):
        return [_parse_entry(path, entry, key) for key, entry in document.items()]

    if isinstance(document, list):
        records = [_parse_entry(path, entry) for entry in document]
        seen = set()
        for record in records:
            if record.name in seen:
                raise DecodeError(path, f"duplicate employee name {record.name!r}")
            seen.add(record.name)
        return records

    raise DecodeError(
        path, f"expected an object or a list at top level, got {type(document).__name__}"
    )


def load_records(path: Path) -> List[EmployeeRecord]:
    """Read and validate the employee records stored in a JSON file.

    Raises:
        SourceUnavailableError: If the file cannot be opened or read
        DecodeError: If the content is not a valid employee document
    """
    try:
        with path.open(encoding="utf-8") as handle:
            try:
                document = json.load(handle)
            except ValueError as e:
                raise DecodeError(path, str(e)) from e
    except OSError as e:
        raise SourceUnavailableError(path, e.strerror or str(e)) from e

    records = parse_document(path, document)
    logger.info("Loaded %d employee records from %s", len(records), path)
    return records


def load_repository(path: Path, policy: LinkPolicy = LinkPolicy.SKIP) -> EmployeeRepository:
    """Load a file, build the repository and link it.

    Raises:
        SourceUnavailableError: If the file cannot be read
        DecodeError: If the content is invalid
        NotFoundError: Under ``LinkPolicy.ABORT``, for a dangling manager name
    """
    records = load_records(path)
    repository = EmployeeRepository.from_records(
        (record.to_employee() for record in records), policy
    )
    repository.resolve_all()
    return repository
