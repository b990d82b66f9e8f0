"""Command registry for dynamic dispatch of reports."""

import importlib
import pkgutil
from pathlib import Path
from typing import Any, Dict, Type

from orgchart.commands import reports
from orgchart.commands.base import BaseCommand

_registry: Dict[str, Type[BaseCommand]] = {}


def register_command(command_class: Type[BaseCommand]) -> Type[BaseCommand]:
    """Register a command class.

    Usable as a class decorator.

    Args:
        command_class: The command class to register

    Returns:
        The command class, unchanged

    Raises:
        ValueError: If command_class doesn't have a name attribute
    """
    if not hasattr(command_class, "name"):
        raise ValueError(f"Command class {command_class.__name__} must have a 'name' attribute")
    _registry[command_class.name] = command_class
    return command_class


def get_command(name: str) -> Type[BaseCommand]:
    """Get a command class by name.

    Args:
        name: The name of the command

    Returns:
        The command class

    Raises:
        ValueError: If command is not registered
    """
    if name not in _registry:
        raise ValueError(f"Unknown report: {name}")
    return _registry[name]


def registered_commands() -> Dict[str, Type[BaseCommand]]:
    """Return a copy of the registry keyed by command name."""
    return dict(_registry)


def discover_and_register_commands() -> None:
    """Import each module of the reports package so its command registers."""
    prefix = f"{reports.__name__}."
    for module_info in pkgutil.iter_modules(reports.__path__, prefix):
        importlib.import_module(module_info.name)


def run_command(name: str, file_path: Path, **params: Any) -> None:
    """Run a report using the registry.

    Args:
        name: Name of the report to run
        file_path: Path to the employee JSON file
        **params: Additional parameters for the report

    Raises:
        ValueError: If the report is unknown or parameters are invalid
        OrgChartError: If loading or reporting fails
    """
    command_class = get_command(name)
    command = command_class(file_path, **params)
    command.validate()
    command.execute()
