"""Type definitions for ux-toolkit components, destinations and results."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path


class InstallTarget(str, Enum):
    """Host tool whose configuration directory receives the components."""

    OPENCODE = "opencode"
    CLAUDE = "claude"


class Category(str, Enum):
    """One of the three kinds of distributable component."""

    SKILLS = "skills"
    AGENTS = "agents"
    COMMANDS = "commands"

    @property
    def tag(self) -> str:
        """Singular prefix used in result entries, e.g. ``skill:ux-heuristics``."""
        return self.value[:-1]


ALL_CATEGORIES: tuple[Category, ...] = (Category.SKILLS, Category.AGENTS, Category.COMMANDS)


class SkillSource(str, Enum):
    """Where a skill was found when resolving it by name."""

    PROJECT = "project"
    PERSONAL = "personal"
    TOOLKIT = "ux-toolkit"


@dataclass(frozen=True)
class ComponentDescriptor:
    """A skill, agent or command shipped with the toolkit.

    ``group`` is the skill category (``core``, ``game``, ...) for skills and
    the mode (``analysis`` or ``fix``) for agents. Commands have none.
    """

    name: str
    description: str
    kind: Category
    group: str = ""

    @property
    def key(self) -> str:
        return f"{self.kind.tag}:{self.name}"


@dataclass(frozen=True)
class DestinationPaths:
    """Where each category lands inside one config directory."""

    base: Path
    skills: Path
    agents: Path
    commands: Path

    def for_category(self, category: Category) -> Path:
        return getattr(self, category.value)


@dataclass
class InstallResult:
    installed: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


@dataclass
class UninstallResult:
    removed: list[str] = field(default_factory=list)
    not_found: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


@dataclass
class ComponentStatus:
    name: str
    installed: bool
    path: Path | None = None
    modified_at: datetime | None = None


@dataclass
class CategoryStatus:
    installed: int
    total: int
    components: list[ComponentStatus] = field(default_factory=list)

    @property
    def missing(self) -> list[str]:
        return [c.name for c in self.components if not c.installed]


@dataclass
class TargetStatus:
    """Installation state of every manifest entry for one host."""

    target: InstallTarget
    available: bool
    config_dir: Path
    skills: CategoryStatus
    agents: CategoryStatus
    commands: CategoryStatus

    def for_category(self, category: Category) -> CategoryStatus:
        return getattr(self, category.value)

    @property
    def total_installed(self) -> int:
        return self.skills.installed + self.agents.installed + self.commands.installed

    @property
    def total_available(self) -> int:
        return self.skills.total + self.agents.total + self.commands.total


@dataclass
class StatusResult:
    opencode: TargetStatus
    claude: TargetStatus

    def for_target(self, target: InstallTarget) -> TargetStatus:
        return getattr(self, InstallTarget(target).value)


@dataclass(frozen=True)
class HostInfo:
    config_dir: Path
    exists: bool


@dataclass(frozen=True)
class PlatformInfo:
    platform: str
    python_version: str
    opencode: HostInfo
    claude: HostInfo


@dataclass(frozen=True)
class SkillInfo:
    """A skill as described by its ``SKILL.md`` frontmatter."""

    name: str
    description: str
    category: str
    source: SkillSource
    path: Path


@dataclass(frozen=True)
class ResolvedSkill:
    """A skill loaded for use: its metadata plus the body without frontmatter."""

    info: SkillInfo
    content: str
