"""Read the bundled markdown content: source listings, YAML frontmatter and skill lookup."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from .manifest import MANIFEST, SKILL_CATEGORIES
from .paths import get_global_config_dir, get_package_root, get_project_config_dir
from .types import ALL_CATEGORIES, Category, InstallTarget, ResolvedSkill, SkillInfo, SkillSource

logger = logging.getLogger(__name__)

_FRONTMATTER_RE = re.compile(r"\A---\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n)*", re.DOTALL)

SKILL_FILE = "SKILL.md"


def source_dir(category: Category, package_root: Path | None = None) -> Path:
    return (package_root or get_package_root()) / Category(category).value


def list_source_components(category: Category, package_root: Path | None = None) -> list[str]:
    """Return names of the components physically present in the package.

    Skills are subdirectories of ``skills/``; agents and commands are
    ``*.md`` files whose name is the file stem. A missing source directory
    yields an empty list.
    """
    category = Category(category)
    directory = source_dir(category, package_root)
    if not directory.is_dir():
        logger.warning("Source directory not found: %s", directory)
        return []

    if category is Category.SKILLS:
        names = [p.name for p in directory.iterdir() if p.is_dir() and not p.name.startswith(("_", "."))]
    else:
        names = [p.stem for p in directory.iterdir() if p.is_file() and p.suffix == ".md"]
    return sorted(names)


def source_path(category: Category, name: str, package_root: Path | None = None) -> Path:
    """Path of the thing that gets copied: the skill directory or the .md file."""
    category = Category(category)
    directory = source_dir(category, package_root)
    if category is Category.SKILLS:
        return directory / name
    return directory / f"{name}.md"


def descriptor_file(category: Category, name: str, package_root: Path | None = None) -> Path:
    """The markdown file carrying a component's frontmatter."""
    path = source_path(category, name, package_root)
    if Category(category) is Category.SKILLS:
        return path / SKILL_FILE
    return path


def parse_frontmatter(text: str) -> dict:
    """Parse the leading ``---`` YAML block of markdown text.

    Returns:
        The frontmatter mapping, or an empty dict if there is no block or
        it is not a valid YAML mapping.
    """
    match = _FRONTMATTER_RE.match(text)
    if not match:
        return {}
    try:
        data = yaml.safe_load(match.group(1))
    except yaml.YAMLError:
        logger.debug("Invalid frontmatter block")
        return {}
    return data if isinstance(data, dict) else {}


def read_frontmatter(path: Path) -> dict:
    """Like :func:`parse_frontmatter`, but reads *path*. Unreadable files give ``{}``."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError:
        return {}
    return parse_frontmatter(text)


def strip_frontmatter(text: str) -> str:
    return _FRONTMATTER_RE.sub("", text, count=1)


@dataclass
class DriftReport:
    """Differences between the manifest and the bundled files."""

    missing: list[str] = field(default_factory=list)
    unlisted: list[str] = field(default_factory=list)
    # frontmatter ``name`` disagrees with the manifest name
    mismatched: list[str] = field(default_factory=list)

    @property
    def clean(self) -> bool:
        return not self.missing and not self.unlisted and not self.mismatched


def check_manifest_drift(package_root: Path | None = None) -> DriftReport:
    """Compare manifest entries against what is on disk.

    ``missing`` holds manifest entries with no source file; ``unlisted``
    holds source files the manifest does not know about; ``mismatched``
    holds entries whose frontmatter declares a different ``name``. Files
    without a ``name`` in their frontmatter (commands) are not compared.
    """
    report = DriftReport()
    for category in ALL_CATEGORIES:
        declared = {c.name for c in MANIFEST[category]}
        present = set(list_source_components(category, package_root))
        report.missing.extend(f"{category.tag}:{n}" for n in sorted(declared - present))
        report.unlisted.extend(f"{category.tag}:{n}" for n in sorted(present - declared))
        for name in sorted(declared & present):
            declared_name = read_frontmatter(descriptor_file(category, name, package_root)).get("name")
            if declared_name is not None and str(declared_name) != name:
                report.mismatched.append(f"{category.tag}:{name}")
    return report


def skill_directories(
    project_root: str | Path | None = None,
    package_root: Path | None = None,
) -> dict[SkillSource, Path]:
    """Skill locations in lookup order: project, personal, bundled.

    The project location is only present when *project_root* is given.
    The personal location is the ``skills`` directory of the global
    OpenCode config dir, so it follows the same environment overrides.
    """
    directories: dict[SkillSource, Path] = {}
    if project_root is not None:
        directories[SkillSource.PROJECT] = get_project_config_dir(project_root, InstallTarget.OPENCODE) / "skills"
    directories[SkillSource.PERSONAL] = get_global_config_dir(InstallTarget.OPENCODE) / "skills"
    directories[SkillSource.TOOLKIT] = source_dir(Category.SKILLS, package_root)
    return directories


def split_source_prefix(name: str) -> tuple[SkillSource | None, str]:
    """Split ``personal:form-patterns`` into ``(SkillSource.PERSONAL, "form-patterns")``.

    Names without a known prefix come back unchanged with no source.
    """
    prefix, sep, rest = name.partition(":")
    if sep:
        for source in SkillSource:
            if prefix == source.value:
                return source, rest
    return None, name


def _is_plain_name(name: str) -> bool:
    return bool(name) and name not in (".", "..") and Path(name).name == name


def _skill_info(meta: dict, fallback_name: str, source: SkillSource, path: Path) -> SkillInfo:
    return SkillInfo(
        name=str(meta.get("name") or fallback_name),
        description=str(meta.get("description") or ""),
        category=str(meta.get("category") or "unknown"),
        source=source,
        path=path,
    )


def resolve_skill(
    name: str,
    project_root: str | Path | None = None,
    package_root: Path | None = None,
) -> ResolvedSkill | None:
    """Load a skill by name from the first location that has it.

    Lookup order is project, personal, then the bundled toolkit. A
    ``project:``, ``personal:`` or ``ux-toolkit:`` prefix restricts the
    search to that one location.

    Args:
        name: Skill directory name, optionally prefixed with a source.
        project_root: Project whose ``.opencode/skills`` is searched first.
            Without it the project location is skipped.
        package_root: Override for the bundled content location.

    Returns:
        The skill's metadata and its body with the frontmatter stripped,
        or None if no location holds a non-empty ``SKILL.md`` for it.
    """
    if not isinstance(name, str) or not name:
        return None
    pinned, base = split_source_prefix(name)
    if not _is_plain_name(base):
        return None

    directories = skill_directories(project_root, package_root)
    sources = [pinned] if pinned is not None else list(directories)
    for source in sources:
        directory = directories.get(source)
        if directory is None:
            continue
        path = directory / base / SKILL_FILE
        try:
            text = path.read_text(encoding="utf-8")
        except OSError:
            continue
        content = strip_frontmatter(text)
        if not content.strip():
            logger.debug("Skipping empty skill file %s", path)
            continue
        logger.debug("Resolved skill %s from %s", name, path)
        return ResolvedSkill(info=_skill_info(parse_frontmatter(text), base, source, path), content=content)
    return None


def find_skills(category: str | None = None, package_root: Path | None = None) -> list[SkillInfo]:
    """List the bundled and personal skills, keyed by frontmatter ``name``.

    A personal skill replaces a bundled one with the same name. Skill
    directories whose ``SKILL.md`` has no ``name`` are skipped. Skills
    without a ``category`` are reported under ``unknown``.

    Args:
        category: Keep only skills whose frontmatter ``category`` equals this.
        package_root: Override for the bundled content location.
    """
    directories = skill_directories(package_root=package_root)
    found: dict[str, SkillInfo] = {}
    for source in (SkillSource.TOOLKIT, SkillSource.PERSONAL):
        directory = directories[source]
        if not directory.is_dir():
            continue
        try:
            entries = sorted(directory.iterdir())
        except OSError as e:
            logger.warning("Could not read skills directory %s: %s", directory, e)
            continue
        for entry in entries:
            path = entry / SKILL_FILE
            if not path.is_file():
                continue
            meta = read_frontmatter(path)
            if not meta.get("name"):
                continue
            info = _skill_info(meta, "", source, path)
            found[info.name] = info

    skills = list(found.values())
    if category:
        skills = [s for s in skills if s.category == category]
    return skills


def group_by_category(skills: list[SkillInfo]) -> dict[str, list[SkillInfo]]:
    """Group skills by category, known categories first in their usual order."""
    grouped: dict[str, list[SkillInfo]] = {}
    for skill in skills:
        grouped.setdefault(skill.category, []).append(skill)

    def order(cat: str) -> tuple[int, str]:
        if cat in SKILL_CATEGORIES:
            return SKILL_CATEGORIES.index(cat), cat
        return len(SKILL_CATEGORIES), cat

    return {cat: grouped[cat] for cat in sorted(grouped, key=order)}
