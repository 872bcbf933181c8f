"""Filesystem locations for bundled content and installation destinations.

Everything here is side-effect free apart from existence checks. Global
config directories are resolved from environment overrides first, then
from per-host defaults:

- OpenCode: ``$UX_TOOLKIT_CONFIG_DIR`` > ``$OPENCODE_CONFIG_DIR`` >
  ``$XDG_CONFIG_HOME/opencode`` (Linux only) > ``~/.config/opencode``
- Claude Code: ``$CLAUDE_CONFIG_DIR`` > ``~/.claude``
"""

from __future__ import annotations

import importlib.resources
import logging
import os
import platform
import sys
import tomllib
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from .types import DestinationPaths, HostInfo, InstallTarget, PlatformInfo

logger = logging.getLogger(__name__)

PACKAGE_NAME = "ux_toolkit"
DIST_NAME = "ux-toolkit"

ENV_VARS: tuple[str, ...] = (
    "UX_TOOLKIT_CONFIG_DIR",
    "OPENCODE_CONFIG_DIR",
    "CLAUDE_CONFIG_DIR",
    "XDG_CONFIG_HOME",
)


@dataclass(frozen=True)
class TargetSpec:
    """How one host names and locates its configuration directory."""

    display_name: str
    project_dir_name: str
    env_vars: tuple[str, ...]
    home_default: tuple[str, ...]
    xdg_name: str | None = None


TARGETS: dict[InstallTarget, TargetSpec] = {
    InstallTarget.OPENCODE: TargetSpec(
        display_name="OpenCode",
        project_dir_name=".opencode",
        env_vars=("UX_TOOLKIT_CONFIG_DIR", "OPENCODE_CONFIG_DIR"),
        home_default=(".config", "opencode"),
        xdg_name="opencode",
    ),
    InstallTarget.CLAUDE: TargetSpec(
        display_name="Claude Code",
        project_dir_name=".claude",
        env_vars=("CLAUDE_CONFIG_DIR",),
        home_default=(".claude",),
    ),
}


def target_spec(target: InstallTarget | str) -> TargetSpec:
    """Return the lookup entry for *target*. Raises ValueError for unknown hosts."""
    return TARGETS[InstallTarget(target)]


def safe_join(*parts: object) -> Path:
    """Join path fragments, tolerating non-string arguments.

    ``str`` and ``os.PathLike`` parts are used as-is. ``None`` is dropped.
    Anything else is coerced with ``str()`` unless that gives a useless
    representation such as a default object repr. With no usable parts the
    result is ``Path(".")``.
    """
    usable: list[str] = []
    for part in parts:
        if part is None:
            continue
        if isinstance(part, (str, bytes, os.PathLike)):
            text = os.fsdecode(part)
        else:
            text = str(part)
            # Default reprs like "<object object at 0x...>" are not paths
            if text.startswith("<"):
                continue
        if text:
            usable.append(text)
    if not usable:
        return Path(".")
    return Path(*usable)


def _absolute(value: str) -> Path:
    return Path(os.path.abspath(os.path.expanduser(value)))


# ---------------------------------------------------------------------------
# Package content
# ---------------------------------------------------------------------------


def _root_from_import() -> Path | None:
    try:
        root = importlib.resources.files(PACKAGE_NAME)
    except (ModuleNotFoundError, TypeError):
        return None
    candidate = Path(str(root))
    if (candidate / "skills").is_dir():
        return candidate
    return None


def _root_from_module_file() -> Path | None:
    # core/paths.py -> ux_toolkit/
    candidate = Path(__file__).resolve().parent.parent
    if (candidate / "skills").is_dir():
        return candidate
    return None


def _root_from_cwd() -> Path | None:
    cwd = Path.cwd()
    pyproject = cwd / "pyproject.toml"
    if not pyproject.is_file():
        return None
    try:
        with open(pyproject, "rb") as f:
            data = tomllib.load(f)
    except (tomllib.TOMLDecodeError, OSError):
        return None
    if data.get("project", {}).get("name") == DIST_NAME:
        return cwd / "src" / PACKAGE_NAME
    return None


@lru_cache(maxsize=1)
def get_package_root() -> Path:
    """Return the directory holding the bundled skills/, agents/ and commands/.

    Tries the imported package location, then the directory above this
    module, then a source checkout in the current directory. When all of
    those fail it falls back to ``<cwd>/src/ux_toolkit`` without checking;
    a wrong guess shows up later as empty source listings, not as an error.
    """
    for strategy in (_root_from_import, _root_from_module_file, _root_from_cwd):
        root = strategy()
        if root is not None:
            return root
    fallback = Path.cwd() / "src" / PACKAGE_NAME
    logger.warning("Could not locate bundled content; assuming %s", fallback)
    return fallback


def get_skill_path(skill_name: str) -> Path:
    return safe_join(get_package_root(), "skills", skill_name, "SKILL.md")


def get_agent_path(agent_name: str) -> Path:
    return safe_join(get_package_root(), "agents", f"{agent_name}.md")


def get_command_path(command_name: str) -> Path:
    return safe_join(get_package_root(), "commands", f"{command_name}.md")


# ---------------------------------------------------------------------------
# Destinations
# ---------------------------------------------------------------------------


def get_global_config_dir(target: InstallTarget | str = InstallTarget.OPENCODE) -> Path:
    """Return the per-user config directory for *target*.

    Environment overrides are checked in the order listed in the module
    docstring; empty values count as unset.
    """
    spec = target_spec(target)
    for var in spec.env_vars:
        value = os.environ.get(var)
        if value:
            return _absolute(value)

    if spec.xdg_name and sys.platform.startswith("linux"):
        xdg = os.environ.get("XDG_CONFIG_HOME")
        if xdg:
            return safe_join(_absolute(xdg), spec.xdg_name)

    return safe_join(Path.home(), *spec.home_default)


def get_claude_config_dir() -> Path:
    return get_global_config_dir(InstallTarget.CLAUDE)


def get_project_config_dir(
    project_root: str | Path | None = None,
    target: InstallTarget | str = InstallTarget.OPENCODE,
) -> Path:
    """Return ``<project_root>/.opencode`` or ``<project_root>/.claude``.

    Args:
        project_root: Project directory. Defaults to the current directory.
        target: Host whose directory naming to use.
    """
    root = Path(os.path.abspath(safe_join(project_root))) if project_root is not None else Path.cwd()
    return safe_join(root, target_spec(target).project_dir_name)


def get_destination_paths(
    global_: bool,
    project_root: str | Path | None = None,
    target: InstallTarget | str = InstallTarget.OPENCODE,
) -> DestinationPaths:
    """Resolve where skills, agents and commands go for a scope and host.

    Args:
        global_: Use the per-user config dir instead of the project dir.
        project_root: Project directory for project scope (default: cwd).
        target: Host to install for.

    Returns:
        DestinationPaths with the base dir and one subdirectory per category.
    """
    if global_:
        base = get_global_config_dir(target)
    else:
        base = get_project_config_dir(project_root, target)
    return DestinationPaths(
        base=base,
        skills=safe_join(base, "skills"),
        agents=safe_join(base, "agents"),
        commands=safe_join(base, "commands"),
    )


# ---------------------------------------------------------------------------
# Host detection
# ---------------------------------------------------------------------------


def is_target_installed(target: InstallTarget | str) -> bool:
    """Whether the host's global config directory exists.

    A missing directory only means the host was never run; it does not
    prevent installing into it.
    """
    return get_global_config_dir(target).exists()


def is_opencode_installed() -> bool:
    return is_target_installed(InstallTarget.OPENCODE)


def is_claude_installed() -> bool:
    return is_target_installed(InstallTarget.CLAUDE)


def get_platform_info() -> PlatformInfo:
    opencode_dir = get_global_config_dir(InstallTarget.OPENCODE)
    claude_dir = get_global_config_dir(InstallTarget.CLAUDE)
    return PlatformInfo(
        platform=sys.platform,
        python_version=platform.python_version(),
        opencode=HostInfo(config_dir=opencode_dir, exists=opencode_dir.exists()),
        claude=HostInfo(config_dir=claude_dir, exists=claude_dir.exists()),
    )


def env_overrides() -> dict[str, str]:
    """Return the recognised path-related environment variables that are set."""
    return {var: os.environ[var] for var in ENV_VARS if os.environ.get(var)}
