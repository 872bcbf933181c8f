"""ux-toolkit doctor: diagnose installation issues."""

from __future__ import annotations

import sys

import click

from ..core.content import check_manifest_drift
from ..core.paths import get_package_root, get_platform_info
from ..core.status import get_status
from ..core.types import ALL_CATEGORIES, InstallTarget
from .options import target_name

MIN_PYTHON = (3, 11)


def _pass(msg: str) -> None:
    click.echo(click.style("[PASS] ", fg="green") + msg)


def _fail(msg: str, fix: str | None = None) -> None:
    click.echo(click.style("[FAIL] ", fg="red") + msg)
    if fix:
        click.echo(f"       Fix: {fix}")


def _warn(msg: str, fix: str | None = None) -> None:
    click.echo(click.style("[WARN] ", fg="yellow") + msg)
    if fix:
        click.echo(f"       Fix: {fix}")


@click.command()
def doctor() -> None:
    """Diagnose installation issues."""
    issues = 0
    warnings = 0

    click.echo(click.style("UX Toolkit - Diagnostics", bold=True))
    click.echo()

    # 1. Python version
    version = ".".join(str(v) for v in sys.version_info[:3])
    if sys.version_info[:2] >= MIN_PYTHON:
        _pass(f"Python {version}")
    else:
        _fail(f"Python {version} is below minimum ({'.'.join(map(str, MIN_PYTHON))}+)")
        issues += 1

    # 2. Bundled content
    root = get_package_root()
    drift = check_manifest_drift(root)
    if drift.missing:
        _fail(
            f"Bundled content: {len(drift.missing)} component(s) missing from {root}: {', '.join(drift.missing)}",
            fix="reinstall the ux-toolkit package",
        )
        issues += 1
    else:
        _pass(f"Bundled content: {root}")
    if drift.unlisted:
        _warn(f"Bundled content: not in manifest: {', '.join(drift.unlisted)}")
        warnings += 1
    if drift.mismatched:
        _warn(f"Bundled content: frontmatter name differs from manifest: {', '.join(drift.mismatched)}")
        warnings += 1

    # 3. Hosts
    platform_info = get_platform_info()
    hosts = {
        InstallTarget.OPENCODE: platform_info.opencode,
        InstallTarget.CLAUDE: platform_info.claude,
    }
    for target, host in hosts.items():
        name = target_name(target)
        if not host.exists:
            _warn(f"{name}: not detected (no config directory at {host.config_dir})")
            warnings += 1
            continue
        _pass(f"{name}: detected at {host.config_dir}")
        for category in ALL_CATEGORIES:
            if not (host.config_dir / category.value).exists():
                _warn(f"{name}: {category.value} directory missing")
                warnings += 1

    # 4. Installation completeness
    status = get_status(global_=True)
    for target in InstallTarget:
        target_status = status.for_target(target)
        if not target_status.available:
            continue
        name = target_name(target)
        installed, total = target_status.total_installed, target_status.total_available
        fix = f"ux-toolkit install --{target.value} --global"
        if installed == total:
            _pass(f"{name}: all components installed")
        elif installed > 0:
            _warn(f"{name}: partial installation ({installed}/{total})", fix=fix)
            warnings += 1
        else:
            _warn(f"{name}: no components installed", fix=fix)
            warnings += 1

    # Summary
    click.echo()
    if not platform_info.opencode.exists and not platform_info.claude.exists:
        click.echo("Suggestion: install OpenCode or Claude Code first.")
    if issues == 0 and warnings == 0:
        click.echo(click.style("Everything looks good!", fg="green", bold=True))
    elif issues == 0:
        click.echo(click.style(f"{warnings} warning(s), no critical issues.", fg="yellow", bold=True))
    else:
        click.echo(click.style(f"{issues} issue(s), {warnings} warning(s).", fg="red", bold=True))
    raise SystemExit(0 if issues == 0 else 1)
