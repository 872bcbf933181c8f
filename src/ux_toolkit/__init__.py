"""ux-toolkit: install UX review skills, agents and commands for AI coding assistants."""

from .core.content import find_skills, resolve_skill
from .core.installer import install, uninstall
from .core.manifest import AGENTS, COMMANDS, SKILLS
from .core.paths import (
    get_agent_path,
    get_claude_config_dir,
    get_command_path,
    get_destination_paths,
    get_global_config_dir,
    get_package_root,
    get_platform_info,
    get_project_config_dir,
    get_skill_path,
    is_claude_installed,
    is_opencode_installed,
)
from .core.status import get_status
from .core.types import (
    Category,
    CategoryStatus,
    ComponentDescriptor,
    ComponentStatus,
    DestinationPaths,
    InstallResult,
    InstallTarget,
    ResolvedSkill,
    SkillInfo,
    SkillSource,
    StatusResult,
    TargetStatus,
    UninstallResult,
)

__version__ = "1.0.0"

__all__ = [
    "AGENTS",
    "COMMANDS",
    "SKILLS",
    "Category",
    "CategoryStatus",
    "ComponentDescriptor",
    "ComponentStatus",
    "DestinationPaths",
    "InstallResult",
    "InstallTarget",
    "ResolvedSkill",
    "SkillInfo",
    "SkillSource",
    "StatusResult",
    "TargetStatus",
    "UninstallResult",
    "find_skills",
    "get_agent_path",
    "get_claude_config_dir",
    "get_command_path",
    "get_destination_paths",
    "get_global_config_dir",
    "get_package_root",
    "get_platform_info",
    "get_project_config_dir",
    "get_skill_path",
    "get_status",
    "install",
    "is_claude_installed",
    "is_opencode_installed",
    "resolve_skill",
    "uninstall",
]
