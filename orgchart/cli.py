"""CLI entry point for orgchart."""

import logging
from pathlib import Path
from typing import Any, Optional

import click
from pydantic import ValidationError

from orgchart import __version__
from orgchart.commands.registry import discover_and_register_commands, run_command
from orgchart.core.config import LOG_LEVELS, LinkPolicy, get_settings
from orgchart.core.errors import OrgChartError

# Dynamically discover and import all command modules
discover_and_register_commands()

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


@click.group(invoke_without_command=True)
@click.version_option(version=__version__)
@click.option(
    "--file",
    "-f",
    "file_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Employee JSON file (default: $ORGCHART_DATA_FILE or employees.json).",
)
@click.option(
    "--on-missing-manager",
    "link_policy",
    type=click.Choice([policy.value for policy in LinkPolicy]),
    default=None,
    help="Skip employees whose manager has no record, or abort the load.",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Diagnostics written to stderr.",
)
@click.pass_context
def main(
    ctx: click.Context,
    file_path: Optional[Path],
    link_policy: Optional[str],
    log_level: Optional[str],
) -> None:
    """Orgchart - employee hierarchy and salary report.

    Reads a flat list of employees, rebuilds who reports to whom and prints
    the hierarchy followed by the total salary expense. Without a
    subcommand the full report is printed.
    """
    try:
        settings = get_settings()
    except ValidationError as e:
        raise click.ClickException(f"invalid ORGCHART_* settings: {e}") from e
    logging.basicConfig(level=(log_level or settings.log_level).upper(), format=LOG_FORMAT)

    ctx.obj = {
        "file_path": file_path or settings.data_file,
        "link_policy": link_policy or settings.link_policy.value,
    }
    if ctx.invoked_subcommand is None:
        ctx.invoke(report)


def run_report(ctx: click.Context, name: str, **params: Any) -> None:
    """Run a registered report with the group options.

    Args:
        ctx: Click context carrying the group options
        name: Name of the report to run
        **params: Report-specific parameters

    Raises:
        click.ClickException: If the report cannot be produced
    """
    try:
        run_command(
            name,
            ctx.obj["file_path"],
            link_policy=ctx.obj["link_policy"],
            **params,
        )
    except (OrgChartError, ValueError) as e:
        raise click.ClickException(str(e)) from e


@main.command()
@click.pass_context
def report(ctx: click.Context) -> None:
    """Print the hierarchy and the total salary."""
    run_report(ctx, "report")


@main.command()
@click.pass_context
def hierarchy(ctx: click.Context) -> None:
    """Print only the hierarchy."""
    run_report(ctx, "hierarchy")


@main.command()
@click.pass_context
def total(ctx: click.Context) -> None:
    """Print only the total salary."""
    run_report(ctx, "total-salary")


@main.command()
@click.argument("name")
@click.pass_context
def show(ctx: click.Context, name: str) -> None:
    """Print one employee with its manager and reports."""
    run_report(ctx, "show-employee", employee=name)
