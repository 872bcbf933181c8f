"""ux-toolkit install / upgrade: copy components into a host config directory."""

from __future__ import annotations

import click

from ..core.installer import install
from ..core.paths import is_claude_installed, is_opencode_installed
from ..core.types import InstallTarget
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


def explicit_targets(opencode: bool, claude: bool) -> list[InstallTarget]:
    targets = []
    if opencode:
        targets.append(InstallTarget.OPENCODE)
    if claude:
        targets.append(InstallTarget.CLAUDE)
    return targets


def resolve_install_targets(
    all_: bool,
    opencode: bool,
    claude: bool,
    is_global: bool,
) -> list[InstallTarget]:
    """Decide which hosts to install for.

    Order of precedence: ``--all`` (every detected host), explicit host
    flags, a prompt when both hosts are detected for a global install,
    Claude Code when it is the only host detected, then OpenCode.
    """
    opencode_found = is_opencode_installed()
    claude_found = is_claude_installed()

    if all_:
        detected = []
        if opencode_found:
            detected.append(InstallTarget.OPENCODE)
        if claude_found:
            detected.append(InstallTarget.CLAUDE)
        if not detected:
            click.echo(
                click.style("Warning:", fg="yellow") + " No platforms detected. Installing to OpenCode by default."
            )
            detected = [InstallTarget.OPENCODE]
        return detected

    explicit = explicit_targets(opencode, claude)
    if explicit:
        return explicit

    if is_global and opencode_found and claude_found:
        click.echo("Detected both OpenCode and Claude Code installations.")
        if click.confirm("Install to both platforms?", default=True):
            return [InstallTarget.OPENCODE, InstallTarget.CLAUDE]
        choice = click.prompt(
            "Which platform?",
            type=click.Choice([t.value for t in InstallTarget]),
            default=InstallTarget.OPENCODE.value,
        )
        return [InstallTarget(choice)]

    if is_global and claude_found and not opencode_found:
        click.echo("Detected Claude Code (OpenCode not found).")
        return [InstallTarget.CLAUDE]

    return [InstallTarget.OPENCODE]


def _run_install(
    targets: list[InstallTarget],
    is_global: bool,
    force: bool,
    verbose: bool,
    only: str | None,
    skills: tuple[str, ...],
    agents: tuple[str, ...],
    commands: tuple[str, ...],
    upgrade: bool = False,
) -> bool:
    """Install for each target and print the tally. Returns False on any error."""
    categories = parse_categories(only)
    scope = "globally" if is_global else "in project"
    success = True

    for i, target in enumerate(targets):
        if i > 0:
            click.echo()
        action = "Upgrading" if upgrade else "Installing"
        click.echo(click.style(f"{action} UX Toolkit in {target_name(target)} {scope}...", bold=True))
        click.echo()

        result = install(
            global_=is_global,
            target=target,
            categories=categories,
            skills=list(skills) or None,
            agents=list(agents) or None,
            commands=list(commands) or None,
            force=force,
            verbose=verbose,
        )

        if upgrade:
            echo_list(f"Upgraded {len(result.installed)} components:", result.installed, "↑")
        else:
            echo_list(f"Installed {len(result.installed)} components:", result.installed, "+")
        if result.skipped:
            click.echo()
            echo_list(
                f"Skipped {len(result.skipped)} (already exist, use --force to overwrite):",
                result.skipped,
                "-",
            )
        if not result.installed and not result.skipped and not result.errors:
            click.echo("Nothing matched the selection.")
        echo_errors(result.errors)
        if not result.ok:
            success = False

    click.echo()
    click.echo("Done!")
    return success


@click.command()
@scope_options
@selection_options
@click.option("--all", "-a", "all_", is_flag=True, help="Install to all detected platforms (no prompt)")
@click.option("--force", "-f", is_flag=True, help="Overwrite existing files")
def install_cmd(
    global_: bool,
    project: bool,
    opencode: bool,
    claude: bool,
    verbose: bool,
    only: str | None,
    skills: tuple[str, ...],
    agents: tuple[str, ...],
    commands: tuple[str, ...],
    all_: bool,
    force: bool,
) -> None:
    """Install skills, agents, and commands."""
    configure_logging(verbose)
    is_global = is_global_scope(global_, project)
    targets = resolve_install_targets(all_, opencode, claude, is_global)
    ok = _run_install(targets, is_global, force, verbose, only, skills, agents, commands)
    raise SystemExit(0 if ok else 1)


@click.command()
@scope_options
@selection_options
def upgrade_cmd(
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
    """Reinstall components, overwriting existing files (install --force)."""
    configure_logging(verbose)
    is_global = is_global_scope(global_, project)
    targets = explicit_targets(opencode, claude) or [InstallTarget.OPENCODE]
    ok = _run_install(targets, is_global, True, verbose, only, skills, agents, commands, upgrade=True)
    raise SystemExit(0 if ok else 1)
