"""Catalog of every skill, agent and command bundled with ux-toolkit."""

from __future__ import annotations

from .types import ALL_CATEGORIES, Category, ComponentDescriptor

SKILL_CATEGORIES: tuple[str, ...] = (
    "core",
    "structure",
    "component",
    "interaction",
    "editor",
    "game",
    "data",
    "framework",
)

AGENT_MODES: tuple[str, ...] = ("analysis", "fix")


def _skill(name: str, description: str, category: str) -> ComponentDescriptor:
    return ComponentDescriptor(name, description, Category.SKILLS, category)


def _agent(name: str, description: str, mode: str) -> ComponentDescriptor:
    return ComponentDescriptor(name, description, Category.AGENTS, mode)


def _command(name: str, description: str) -> ComponentDescriptor:
    return ComponentDescriptor(name, description, Category.COMMANDS)


SKILLS: tuple[ComponentDescriptor, ...] = (
    # Core UX
    _skill("ux-heuristics", "Nielsen's 10 usability heuristics with evaluation methodology", "core"),
    _skill("wcag-accessibility", "WCAG 2.2 compliance checklist and ARIA patterns", "core"),
    _skill("visual-design-system", "Layout, typography, color theory, spacing systems", "core"),
    _skill("interaction-patterns", "Micro-interactions, loading states, feedback mechanisms", "core"),
    _skill("mobile-responsive-ux", "Touch targets, gestures, responsive patterns", "core"),
    # Page structure
    _skill("page-structure-patterns", "Base requirements for page states, layout, and structure", "structure"),
    _skill("list-page-patterns", "Filters, sorting, pagination, and grid/table displays", "structure"),
    _skill("detail-page-patterns", "Headers, tabs, multi-column layouts, related data", "structure"),
    _skill("navigation-patterns", "Sidebar, mobile drawer, breadcrumbs, app shell", "structure"),
    # Components
    _skill("modal-patterns", "Confirmation, edit, selector, and wizard modals", "component"),
    _skill("form-patterns", "Validation, field layouts, multi-step wizards", "component"),
    _skill("data-density-patterns", "Dense layouts, z-index, overflow, readability", "component"),
    _skill("toast-notification-patterns", "Toast notifications, alerts, and system feedback", "component"),
    # Interaction
    _skill(
        "keyboard-shortcuts-patterns",
        "Keyboard shortcuts, command palette (Cmd+K), power user navigation",
        "interaction",
    ),
    _skill("drag-drop-patterns", "Drag and drop interactions, visual feedback, drop zones", "interaction"),
    # Editor / workspace
    _skill(
        "editor-workspace-patterns",
        "Multi-tab editors, dirty state, real-time validation, workspaces",
        "editor",
    ),
    _skill(
        "comparison-patterns",
        "Side-by-side comparison, diff highlighting, multi-item comparison",
        "editor",
    ),
    _skill(
        "split-panel-patterns",
        "Resizable panels, dividers, collapsible sidebars, synchronized views",
        "editor",
    ),
    # Game / interactive
    _skill("canvas-grid-patterns", "Hex grids, tactical maps, pan/zoom, tokens, coordinate systems", "game"),
    _skill(
        "turn-based-ui-patterns",
        "Phase banners, turn indicators, action bars, game state feedback",
        "game",
    ),
    _skill(
        "playback-replay-patterns",
        "VCR controls, timeline scrubbing, speed selection, replay viewers",
        "game",
    ),
    _skill(
        "status-visualization-patterns",
        "Health bars, progress meters, heat gauges, pip displays, stat blocks",
        "game",
    ),
    # Data display
    _skill(
        "info-card-patterns",
        "Compact/standard/expanded cards, stat blocks, badges, entity displays",
        "data",
    ),
    _skill(
        "event-timeline-patterns",
        "Activity feeds, audit logs, chronological events, filtering, infinite scroll",
        "data",
    ),
    # Framework
    _skill("react-ux-patterns", "React/Next.js specific UX patterns", "framework"),
)

AGENTS: tuple[ComponentDescriptor, ...] = (
    # General purpose
    _agent("ux-auditor", "Full UX audit against heuristics (read-only)", "analysis"),
    _agent("ux-engineer", "UX analysis + implements fixes", "fix"),
    _agent("accessibility-auditor", "WCAG 2.2 compliance review (read-only)", "analysis"),
    _agent("accessibility-engineer", "Accessibility fixes", "fix"),
    _agent("visual-reviewer", "Design system consistency check", "analysis"),
    _agent("interaction-reviewer", "Micro-interactions and feedback review", "analysis"),
    # Page reviewers
    _agent("list-page-reviewer", "List/browse page UX review", "analysis"),
    _agent("detail-page-reviewer", "Detail/entity page UX review", "analysis"),
    _agent("navigation-reviewer", "Navigation and routing review", "analysis"),
    _agent("form-reviewer", "Form and input UX review", "analysis"),
    _agent("density-reviewer", "Data density and layout review", "analysis"),
    # Specialized
    _agent("editor-reviewer", "Editor/workspace UI with multi-tab, drag-drop, validation", "analysis"),
    _agent("comparison-reviewer", "Side-by-side comparison and diff UIs", "analysis"),
    _agent("settings-reviewer", "Settings, preferences, and configuration pages", "analysis"),
    # Game & interactive
    _agent("game-ui-reviewer", "Tactical maps, turn-based combat, status displays, hex grids", "analysis"),
    _agent("replay-reviewer", "Playback controls, timeline scrubbing, event feeds", "analysis"),
    _agent("card-reviewer", "Info cards, stat blocks, entity displays with density levels", "analysis"),
    _agent("panel-reviewer", "Resizable panels, collapsible sidebars, split views", "analysis"),
)

COMMANDS: tuple[ComponentDescriptor, ...] = (
    _command("ux-audit", "Comprehensive UX audit"),
    _command("a11y-check", "Quick accessibility scan"),
    _command("design-review", "Visual consistency check"),
    _command("screenshot-review", "Visual review from screenshot"),
)

MANIFEST: dict[Category, tuple[ComponentDescriptor, ...]] = {
    Category.SKILLS: SKILLS,
    Category.AGENTS: AGENTS,
    Category.COMMANDS: COMMANDS,
}


def component_names(category: Category) -> list[str]:
    """Return the manifest names for one category, in declaration order."""
    return [c.name for c in MANIFEST[Category(category)]]


def find_component(name: str) -> ComponentDescriptor | None:
    """Look up a component by name in any category (case-insensitive)."""
    wanted = name.lower()
    for category in ALL_CATEGORIES:
        for component in MANIFEST[category]:
            if component.name.lower() == wanted:
                return component
    return None


def total_components() -> int:
    return sum(len(entries) for entries in MANIFEST.values())
