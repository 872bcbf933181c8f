"""Install and uninstall bundled components into a host config directory."""

from __future__ import annotations

import logging
import os
import shutil
from collections.abc import Iterable
from pathlib import Path

from .content import list_source_components, source_path
from .manifest import MANIFEST
from .paths import get_destination_paths, get_package_root
from .types import (
    ALL_CATEGORIES,
    Category,
    DestinationPaths,
    InstallResult,
    InstallTarget,
    UninstallResult,
)

logger = logging.getLogger(__name__)


def _normalize_categories(categories: Iterable[Category | str] | None) -> list[Category]:
    if categories is None:
        return list(ALL_CATEGORIES)
    # ValueError on unknown names is intentional: malformed options are fatal
    return [Category(c) for c in categories]


def _effective_categories(
    categories: list[Category],
    requested: dict[Category, list[str] | None],
) -> list[Category]:
    """Restrict to categories with explicit names, if any names were given.

    ``--skill foo`` alone installs only that skill, not every agent and
    command as well.
    """
    if not any(requested.values()):
        return categories
    return [c for c in categories if requested.get(c)]


def _filter_names(names: list[str], wanted: list[str] | None) -> list[str]:
    if not wanted:
        return names
    lowered = {w.lower() for w in wanted}
    return [n for n in names if n.lower() in lowered]


def destination_path(destinations: DestinationPaths, category: Category, name: str) -> Path:
    """Installed location of one component: a directory for skills, a file otherwise."""
    directory = destinations.for_category(category)
    if category is Category.SKILLS:
        return directory / name
    return directory / f"{name}.md"


def _copy_component(category: Category, src: Path, dest: Path) -> None:
    dest.parent.mkdir(parents=True, exist_ok=True)
    if category is Category.SKILLS:
        shutil.copytree(src, dest, copy_function=shutil.copyfile, dirs_exist_ok=True)
        # copytree copies the source directory mtime; installed copies carry the install time
        os.utime(dest)
    else:
        shutil.copyfile(src, dest)


def _remove_component(dest: Path) -> None:
    if dest.is_dir() and not dest.is_symlink():
        shutil.rmtree(dest)
    else:
        dest.unlink()


def install(
    *,
    global_: bool = False,
    project_root: str | Path | None = None,
    target: InstallTarget | str = InstallTarget.OPENCODE,
    categories: Iterable[Category | str] | None = None,
    skills: list[str] | None = None,
    agents: list[str] | None = None,
    commands: list[str] | None = None,
    force: bool = False,
    verbose: bool = False,
    package_root: Path | None = None,
) -> InstallResult:
    """Copy bundled components into the resolved destination.

    Each component is handled independently: an existing destination is
    skipped unless *force* is set, and a failure is recorded in
    ``errors`` without stopping the rest of the batch.

    Args:
        global_: Install into the per-user config dir instead of the project.
        project_root: Project directory for project scope (default: cwd).
        target: Host to install for.
        categories: Categories to consider (default: all three).
        skills: Only these skills (case-insensitive). Narrows categories.
        agents: Only these agents (case-insensitive). Narrows categories.
        commands: Only these commands (case-insensitive). Narrows categories.
        force: Overwrite components that already exist.
        verbose: Log each component at INFO instead of DEBUG.
        package_root: Where the bundled content lives (default: autodetect).

    Returns:
        InstallResult with ``<kind>:<name>`` entries.
    """
    requested = {
        Category.SKILLS: skills,
        Category.AGENTS: agents,
        Category.COMMANDS: commands,
    }
    selected = _effective_categories(_normalize_categories(categories), requested)
    root = package_root or get_package_root()
    destinations = get_destination_paths(global_, project_root, target)
    log = logger.info if verbose else logger.debug
    result = InstallResult()

    logger.debug("Installing %s from %s into %s", [c.value for c in selected], root, destinations.base)

    for category in selected:
        names = _filter_names(list_source_components(category, root), requested[category])
        for name in names:
            key = f"{category.tag}:{name}"
            dest = destination_path(destinations, category, name)
            try:
                if dest.exists() and not force:
                    result.skipped.append(key)
                    log("Skipped %s (already exists)", key)
                    continue
                _copy_component(category, source_path(category, name, root), dest)
                result.installed.append(key)
                log("Installed %s -> %s", key, dest)
            except Exception as exc:
                result.errors.append(f"{key}: {exc}")
                logger.warning("Failed to install %s: %s", key, exc)

    return result


def uninstall(
    *,
    global_: bool = False,
    project_root: str | Path | None = None,
    target: InstallTarget | str = InstallTarget.OPENCODE,
    categories: Iterable[Category | str] | None = None,
    skills: list[str] | None = None,
    agents: list[str] | None = None,
    commands: list[str] | None = None,
    verbose: bool = False,
) -> UninstallResult:
    """Remove toolkit-owned components from the resolved destination.

    Only names in the manifest are touched, so user files sharing the
    same directories survive. Components that are already gone are
    reported in ``not_found``; re-running is a no-op.
    """
    requested = {
        Category.SKILLS: skills,
        Category.AGENTS: agents,
        Category.COMMANDS: commands,
    }
    selected = _effective_categories(_normalize_categories(categories), requested)
    destinations = get_destination_paths(global_, project_root, target)
    log = logger.info if verbose else logger.debug
    result = UninstallResult()

    for category in selected:
        names = _filter_names([c.name for c in MANIFEST[category]], requested[category])
        for name in names:
            key = f"{category.tag}:{name}"
            dest = destination_path(destinations, category, name)
            try:
                if not dest.exists() and not dest.is_symlink():
                    result.not_found.append(key)
                    log("Not found: %s", key)
                    continue
                _remove_component(dest)
                result.removed.append(key)
                log("Removed %s (%s)", key, dest)
            except Exception as exc:
                result.errors.append(f"{key}: {exc}")
                logger.warning("Failed to remove %s: %s", key, exc)

    return result
