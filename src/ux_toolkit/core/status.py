"""Read-only report of which manifest components are installed where."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from .installer import destination_path
from .manifest import MANIFEST
from .paths import get_destination_paths, is_target_installed
from .types import (
    Category,
    CategoryStatus,
    ComponentStatus,
    DestinationPaths,
    InstallTarget,
    StatusResult,
    TargetStatus,
)


def check_component_status(path: Path, name: str) -> ComponentStatus:
    if not path.exists():
        return ComponentStatus(name=name, installed=False)
    try:
        mtime = datetime.fromtimestamp(path.stat().st_mtime)
    except OSError:
        return ComponentStatus(name=name, installed=True, path=path)
    return ComponentStatus(name=name, installed=True, path=path, modified_at=mtime)


def _category_status(category: Category, destinations: DestinationPaths) -> CategoryStatus:
    components = [
        check_component_status(destination_path(destinations, category, c.name), c.name)
        for c in MANIFEST[category]
    ]
    return CategoryStatus(
        installed=sum(1 for c in components if c.installed),
        total=len(components),
        components=components,
    )


def get_target_status(
    target: InstallTarget | str,
    global_: bool = True,
    project_root: str | Path | None = None,
) -> TargetStatus:
    target = InstallTarget(target)
    destinations = get_destination_paths(global_, project_root, target)
    return TargetStatus(
        target=target,
        available=is_target_installed(target),
        config_dir=destinations.base,
        skills=_category_status(Category.SKILLS, destinations),
        agents=_category_status(Category.AGENTS, destinations),
        commands=_category_status(Category.COMMANDS, destinations),
    )


def get_status(global_: bool = True, project_root: str | Path | None = None) -> StatusResult:
    """Cross-reference the manifest with both hosts' destination directories.

    Missing files are an ordinary state, never an error.
    """
    return StatusResult(
        opencode=get_target_status(InstallTarget.OPENCODE, global_, project_root),
        claude=get_target_status(InstallTarget.CLAUDE, global_, project_root),
    )
