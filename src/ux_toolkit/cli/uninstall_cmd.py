"""ux-toolkit uninstall: remove toolkit components from a host config directory."""

from __future__ import annotations

import click

from ..core.installer import uninstall
from ..core.types import InstallTarget
from .install_cmd import explicit_targets
from .options import (
    configure_logging,
    echo_errors,
    echo_list,
    is_global_scope,
    parse_categories,
    scope_options,
    selection_options,
    target_name,
)


@click.command()
@scope_options
@selection_options
def uninstall_cmd(
    global_: bool,
    project: bool,
    opencode: bool,
    claude: bool,
    verbose: bool,
    only: str | None,
    skills: tuple[str, ...],
    agents: tuple[str, ...],
    commands: tuple[str, ...],
) -> None:
    """Remove installed skills, agents, and commands.

    Only files that ship with ux-toolkit are removed; anything else in the
    config directory is left alone.
    """
    configure_logging(verbose)
    is_global = is_global_scope(global_, project)
    scope = "globally" if is_global else "in project"
    categories = parse_categories(only)
    targets = explicit_targets(opencode, claude) or [InstallTarget.OPENCODE]
    success = True

    for i, target in enumerate(targets):
        if i > 0:
            click.echo()
        click.echo(click.style(f"Uninstalling UX Toolkit from {target_name(target)} {scope}...", bold=True))
        click.echo()

        result = uninstall(
            global_=is_global,
            target=target,
            categories=categories,
            skills=list(skills) or None,
            agents=list(agents) or None,
            commands=list(commands) or None,
            verbose=verbose,
        )

        if result.removed:
            echo_list(f"Removed {len(result.removed)} components:", result.removed, "-")
        else:
            click.echo("Nothing to remove.")
        if verbose and result.not_found:
            click.echo()
            echo_list(f"Not found ({len(result.not_found)}):", result.not_found, "?")
        echo_errors(result.errors)
        if not result.ok:
            success = False

    click.echo()
    click.echo("Done!")
    raise SystemExit(0 if success else 1)
