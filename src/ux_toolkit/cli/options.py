"""Options and output helpers shared by the ux-toolkit subcommands."""

from __future__ import annotations

import logging
from collections.abc import Callable

import click

from ..core.paths import target_spec
from ..core.types import ALL_CATEGORIES, Category, InstallTarget


class ClickEchoHandler(logging.Handler):
    """Write log records to stderr through click, so they follow the active stream."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True)
        except Exception:
            self.handleError(record)


def configure_logging(verbose: bool) -> None:
    """Send ux_toolkit log records to stderr; per-item detail only when verbose.

    Only the ``ux_toolkit`` logger is configured. The root logger is left
    alone so library users keep their own logging setup.
    """
    logger = logging.getLogger("ux_toolkit")
    logger.setLevel(logging.INFO if verbose else logging.WARNING)
    logger.handlers = [h for h in logger.handlers if not isinstance(h, ClickEchoHandler)]
    handler = ClickEchoHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)


def parse_categories(only: str | None) -> list[Category] | None:
    """Parse ``--only=skills,agents``. Unknown names are ignored.

    Returns:
        The valid categories in the order given, or None (meaning all)
        if *only* is empty or names nothing valid.
    """
    if not only:
        return None
    valid = {c.value: c for c in ALL_CATEGORIES}
    parsed: list[Category] = []
    for part in only.split(","):
        category = valid.get(part.strip().lower())
        if category is not None and category not in parsed:
            parsed.append(category)
    return parsed or None


def is_global_scope(global_: bool, project: bool) -> bool:
    """Global is the default; ``--project`` alone switches to the project dir."""
    return global_ or not project


def target_name(target: InstallTarget | str) -> str:
    return target_spec(target).display_name


def scope_options(func: Callable) -> Callable:
    """Scope and host flags used by install, uninstall and upgrade."""
    decorators = [
        click.option("--global", "-g", "global_", is_flag=True, help="Use the global config directory (default)"),
        click.option("--project", "-p", is_flag=True, help="Use the project config directory (.opencode/ or .claude/)"),
        click.option("--opencode", is_flag=True, help="Target OpenCode (~/.config/opencode)"),
        click.option("--claude", is_flag=True, help="Target Claude Code (~/.claude)"),
        click.option("--verbose", "-v", is_flag=True, help="Verbose output"),
    ]
    for decorator in reversed(decorators):
        func = decorator(func)
    return func


def selection_options(func: Callable) -> Callable:
    """Category and per-component selection flags."""
    decorators = [
        click.option("--only", default=None, help="Comma-separated categories (skills,agents,commands)"),
        click.option("--skill", "skills", multiple=True, help="Specific skill by name (repeatable)"),
        click.option("--agent", "agents", multiple=True, help="Specific agent by name (repeatable)"),
        click.option("--command", "commands", multiple=True, help="Specific command by name (repeatable)"),
    ]
    for decorator in reversed(decorators):
        func = decorator(func)
    return func


def echo_list(header: str, items: list[str], marker: str, err: bool = False) -> None:
    if not items:
        return
    click.echo(header, err=err)
    for item in items:
        click.echo(f"  {marker} {item}", err=err)


def echo_errors(errors: list[str]) -> None:
    if errors:
        click.echo(err=True)
        echo_list(click.style("Errors:", fg="red"), errors, "!", err=True)
