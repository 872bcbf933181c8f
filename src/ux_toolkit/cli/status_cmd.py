"""ux-toolkit status: show what's installed vs available."""

from __future__ import annotations

import click

from ..core.status import get_status
from ..core.types import ALL_CATEGORIES, CategoryStatus, InstallTarget, TargetStatus
from .options import is_global_scope, target_name


def format_count(category: CategoryStatus) -> str:
    text = f"{category.installed}/{category.total}"
    if category.installed == 0:
        return click.style(f"✗ {text}", fg="red")
    if category.installed == category.total:
        return click.style(f"✓ {text}", fg="green")
    return click.style(f"◐ {text}", fg="yellow")


def summarize(status: TargetStatus) -> str:
    installed, total = status.total_installed, status.total_available
    if installed == total:
        return click.style("✓ Fully installed", fg="green")
    if installed > 0:
        return click.style(f"◐ Partially installed ({installed}/{total})", fg="yellow")
    return click.style("✗ Not installed", fg="red")


def _echo_target(status: TargetStatus, verbose: bool) -> None:
    click.echo(f"  {target_name(status.target)}:")
    if not status.available:
        click.echo("    Not installed (no config directory found)")
        return
    for category in ALL_CATEGORIES:
        label = f"{category.value.capitalize()}:"
        click.echo(f"    {label:<10}{format_count(status.for_category(category))}")
    if verbose:
        click.echo(f"    Location: {status.config_dir}")
        for category in ALL_CATEGORIES:
            missing = status.for_category(category).missing
            if missing:
                click.echo(f"    Missing {category.value}: {', '.join(missing)}")


@click.command()
@click.option("--global", "-g", "global_", is_flag=True, help="Check the global config directory (default)")
@click.option("--project", "-p", is_flag=True, help="Check the project config directory")
@click.option("--verbose", "-v", is_flag=True, help="List missing components")
def status_cmd(global_: bool, project: bool, verbose: bool) -> None:
    """Show what's installed vs available."""
    status = get_status(global_=is_global_scope(global_, project))

    click.echo(click.style("UX Toolkit - Installation Status", bold=True))
    click.echo()
    for i, target in enumerate(InstallTarget):
        if i > 0:
            click.echo()
        _echo_target(status.for_target(target), verbose)

    click.echo()
    click.echo("  Summary:")
    for target in InstallTarget:
        target_status = status.for_target(target)
        if target_status.available:
            click.echo(f"    {target_name(target) + ':':<13}{summarize(target_status)}")
