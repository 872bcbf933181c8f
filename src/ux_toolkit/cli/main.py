"""ux-toolkit CLI entry point."""

import click

from .doctor import doctor
from .info_cmd import info_cmd, list_cmd
from .install_cmd import install_cmd, upgrade_cmd
from .skill_cmd import skill_cmd
from .status_cmd import status_cmd
from .uninstall_cmd import uninstall_cmd


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="ux-toolkit")
def cli() -> None:
    """ux-toolkit - AI-powered UI/UX review toolkit.

    Installs UX review skills, agents, and commands for OpenCode
    (~/.config/opencode) or Claude Code (~/.claude).

    \b
    Environment:
      UX_TOOLKIT_CONFIG_DIR   Override the OpenCode config directory
      OPENCODE_CONFIG_DIR     OpenCode config directory override
      CLAUDE_CONFIG_DIR       Claude Code config directory override
      XDG_CONFIG_HOME         Linux XDG config home (respected)
    """


cli.add_command(install_cmd, "install")
cli.add_command(uninstall_cmd, "uninstall")
cli.add_command(upgrade_cmd, "upgrade")
cli.add_command(status_cmd, "status")
cli.add_command(doctor, "doctor")
cli.add_command(list_cmd, "list")
cli.add_command(info_cmd, "info")
cli.add_command(skill_cmd, "skill")
