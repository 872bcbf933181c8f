"""ux-toolkit skill: print a skill's guidance from the first location that has it."""

from __future__ import annotations

from pathlib import Path

import click

from ..core.content import resolve_skill


@click.command()
@click.argument("name")
@click.option(
    "--project-root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Project whose .opencode/skills is searched first (default: current directory)",
)
def skill_cmd(name: str, project_root: Path | None) -> None:
    """Show the skill NAME without its frontmatter.

    Looks in the project's .opencode/skills, then the personal OpenCode
    skills directory, then the skills bundled with ux-toolkit.

    \b
    Prefix NAME to search one location only:
      project:NAME      personal:NAME      ux-toolkit:NAME
    """
    skill = resolve_skill(name, project_root or Path.cwd())
    if skill is None:
        click.echo(f"Skill '{name}' not found. Run 'ux-toolkit list' to see available skills.", err=True)
        raise SystemExit(1)

    info = skill.info
    click.echo(click.style(info.name, bold=True) + f" (from {info.source.value})")
    if info.description:
        click.echo(info.description)
    click.echo(f"Path: {info.path}")
    click.echo()
    click.echo(skill.content.rstrip("\n"))
