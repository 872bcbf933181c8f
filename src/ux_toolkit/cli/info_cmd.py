"""ux-toolkit info / list: platform details and the component catalog."""

from __future__ import annotations

import click

from ..core.content import find_skills, group_by_category
from ..core.manifest import AGENTS, COMMANDS, SKILLS
from ..core.paths import env_overrides, get_package_root, get_platform_info
from ..core.types import SkillSource


def _yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


@click.command()
def info_cmd() -> None:
    """Show platform and config information."""
    info = get_platform_info()

    click.echo(click.style("UX Toolkit - Platform Information", bold=True))
    click.echo()
    click.echo(f"  Platform:       {info.platform}")
    click.echo(f"  Python Version: {info.python_version}")
    click.echo(f"  Package Root:   {get_package_root()}")

    click.echo()
    click.echo("  OpenCode:")
    click.echo(f"    Config Dir:   {info.opencode.config_dir}")
    click.echo(f"    Installed:    {_yes_no(info.opencode.exists)}")

    click.echo()
    click.echo("  Claude Code:")
    click.echo(f"    Config Dir:   {info.claude.config_dir}")
    click.echo(f"    Installed:    {_yes_no(info.claude.exists)}")

    overrides = env_overrides()
    if overrides:
        click.echo()
        click.echo("  Environment Overrides:")
        for var, value in overrides.items():
            click.echo(f"    {var + ':':<23}{value}")

    click.echo()
    click.echo("  Components:")
    click.echo(f"    Skills:   {len(SKILLS)}")
    click.echo(f"    Agents:   {len(AGENTS)}")
    click.echo(f"    Commands: {len(COMMANDS)}")


@click.command()
@click.option("--category", "-c", default=None, help="Only list skills in this category (e.g. core, structure, game)")
def list_cmd(category: str | None) -> None:
    """List available components.

    With --category, lists the bundled and personal skills whose frontmatter
    category matches, grouped by category.
    """
    if category:
        _echo_skills_in(category)
        return

    click.echo(click.style("Skills:", bold=True))
    for skill in SKILLS:
        click.echo(f"  {skill.name:<30} {skill.description}")

    click.echo()
    click.echo(click.style("Agents:", bold=True))
    for agent in AGENTS:
        click.echo(f"  {agent.name:<30} {agent.description}")

    click.echo()
    click.echo(click.style("Commands:", bold=True))
    for command in COMMANDS:
        click.echo(f"  {'/' + command.name:<30} {command.description}")


def _echo_skills_in(category: str) -> None:
    skills = find_skills(category)
    if not skills:
        click.echo(f"No skills in category '{category}'.")
        return
    click.echo(click.style(f"Skills ({len(skills)}):", bold=True))
    for group, members in group_by_category(skills).items():
        click.echo(f"  {group}:")
        for skill in members:
            origin = "" if skill.source is SkillSource.TOOLKIT else f"  [{skill.source.value}]"
            click.echo(f"    {skill.name:<30} {skill.description}{origin}")
