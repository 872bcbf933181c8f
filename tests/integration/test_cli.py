"""Integration tests for the ux-toolkit CLI using click.testing.CliRunner."""

import logging
from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from ux_toolkit.cli.main import cli
from ux_toolkit.cli.options import ClickEchoHandler, configure_logging
from ux_toolkit.core.content import DriftReport
from ux_toolkit.core.manifest import total_components


class TestCLIHelp:
    def test_help(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        for command in ("install", "uninstall", "upgrade", "status", "doctor", "list", "info", "skill"):
            assert command in result.output
        assert "UX_TOOLKIT_CONFIG_DIR" in result.output

    def test_version(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "version" in result.output

    def test_unknown_command(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["frobnicate"])
        assert result.exit_code != 0


class TestInstall:
    def test_project_scope(self, project: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.chdir(project)
        runner = CliRunner()
        result = runner.invoke(cli, ["install", "--project", "--only=commands"])

        assert result.exit_code == 0, result.output
        assert "Installed 4 components" in result.output
        assert "+ command:ux-audit" in result.output
        assert (project / ".opencode" / "commands" / "ux-audit.md").is_file()

    def test_claude_global(self, claude_dir: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["install", "--claude", "--global", "--skill", "ux-heuristics"])

        assert result.exit_code == 0, result.output
        assert "Claude Code" in result.output
        assert (claude_dir / "skills" / "ux-heuristics" / "SKILL.md").is_file()
        assert not (claude_dir / "agents").exists()

    def test_defaults_to_opencode(self, opencode_dir: Path, claude_dir: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["install", "--command", "ux-audit"])

        assert result.exit_code == 0, result.output
        assert (opencode_dir / "commands" / "ux-audit.md").is_file()
        assert not claude_dir.exists()

    def test_only_claude_detected(self, opencode_dir: Path, claude_dir: Path):
        claude_dir.mkdir()
        runner = CliRunner()
        result = runner.invoke(cli, ["install", "--command", "ux-audit"])

        assert result.exit_code == 0, result.output
        assert "Detected Claude Code" in result.output
        assert (claude_dir / "commands" / "ux-audit.md").is_file()
        assert not opencode_dir.exists()

    def test_both_detected_install_both(self, opencode_dir: Path, claude_dir: Path):
        opencode_dir.mkdir()
        claude_dir.mkdir()
        runner = CliRunner()
        result = runner.invoke(cli, ["install", "--command", "ux-audit"], input="y\n")

        assert result.exit_code == 0, result.output
        assert (opencode_dir / "commands" / "ux-audit.md").is_file()
        assert (claude_dir / "commands" / "ux-audit.md").is_file()

    def test_both_detected_pick_one(self, opencode_dir: Path, claude_dir: Path):
        opencode_dir.mkdir()
        claude_dir.mkdir()
        runner = CliRunner()
        result = runner.invoke(cli, ["install", "--command", "ux-audit"], input="n\nclaude\n")

        assert result.exit_code == 0, result.output
        assert (claude_dir / "commands" / "ux-audit.md").is_file()
        assert not (opencode_dir / "commands").exists()

    def test_all_with_nothing_detected(self, opencode_dir: Path, claude_dir: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["install", "--all", "--only=commands"])

        assert result.exit_code == 0, result.output
        assert "No platforms detected" in result.output
        assert (opencode_dir / "commands" / "ux-audit.md").is_file()

    def test_all_with_both_detected(self, opencode_dir: Path, claude_dir: Path):
        opencode_dir.mkdir()
        claude_dir.mkdir()
        runner = CliRunner()
        result = runner.invoke(cli, ["install", "-a", "--only=commands"])

        assert result.exit_code == 0, result.output
        assert (opencode_dir / "commands" / "ux-audit.md").is_file()
        assert (claude_dir / "commands" / "ux-audit.md").is_file()

    def test_second_run_skips(self, opencode_dir: Path):
        runner = CliRunner()
        runner.invoke(cli, ["install", "--opencode", "--only=commands"])
        result = runner.invoke(cli, ["install", "--opencode", "--only=commands"])

        assert result.exit_code == 0, result.output
        assert "Skipped 4" in result.output
        assert "--force" in result.output

    def test_force(self, opencode_dir: Path):
        runner = CliRunner()
        runner.invoke(cli, ["install", "--opencode", "--only=commands"])
        result = runner.invoke(cli, ["install", "--opencode", "--only=commands", "-f"])

        assert result.exit_code == 0, result.output
        assert "Installed 4 components" in result.output

    def test_invalid_only_falls_back_to_all(self, opencode_dir: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["install", "--opencode", "--only=widgets"])

        assert result.exit_code == 0, result.output
        assert f"Installed {total_components()} components" in result.output

    def test_errors_exit_nonzero(self, opencode_dir: Path):
        def broken_copy(src, dst, *args, **kwargs):
            raise PermissionError("denied")

        runner = CliRunner()
        with patch("ux_toolkit.core.installer.shutil.copyfile", side_effect=broken_copy):
            result = runner.invoke(cli, ["install", "--opencode", "--only=commands"])

        assert result.exit_code == 1
        assert "Errors:" in result.output
        assert "command:ux-audit: denied" in result.output


class TestUpgrade:
    def test_overwrites(self, opencode_dir: Path):
        runner = CliRunner()
        runner.invoke(cli, ["install", "--opencode", "--only=commands"])
        target = opencode_dir / "commands" / "ux-audit.md"
        target.write_text("stale")

        result = runner.invoke(cli, ["upgrade", "--only=commands"])

        assert result.exit_code == 0, result.output
        assert "Upgraded 4 components" in result.output
        assert target.read_text() != "stale"


class TestUninstall:
    def test_removes(self, opencode_dir: Path):
        runner = CliRunner()
        runner.invoke(cli, ["install", "--opencode"])
        result = runner.invoke(cli, ["uninstall", "--opencode"])

        assert result.exit_code == 0, result.output
        assert f"Removed {total_components()} components" in result.output
        assert not (opencode_dir / "commands" / "ux-audit.md").exists()

    def test_nothing_to_remove(self, claude_dir: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["uninstall", "--claude", "-v"])

        assert result.exit_code == 0, result.output
        assert "Nothing to remove" in result.output
        assert "Not found" in result.output

    def test_project(self, project: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.chdir(project)
        runner = CliRunner()
        runner.invoke(cli, ["install", "-p", "--claude", "--only=agents"])
        result = runner.invoke(cli, ["uninstall", "-p", "--claude", "--agent", "ux-auditor"])

        assert result.exit_code == 0, result.output
        assert "agent:ux-auditor" in result.output
        assert not (project / ".claude" / "agents" / "ux-auditor.md").exists()
        assert (project / ".claude" / "agents" / "ux-engineer.md").exists()


class TestStatus:
    def test_not_detected(self, opencode_dir: Path, claude_dir: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["status"])

        assert result.exit_code == 0, result.output
        assert "Not installed (no config directory found)" in result.output

    def test_partial(self, opencode_dir: Path, claude_dir: Path):
        runner = CliRunner()
        runner.invoke(cli, ["install", "--opencode", "--skill", "ux-heuristics"])
        result = runner.invoke(cli, ["status", "-v"])

        assert result.exit_code == 0, result.output
        assert "1/25" in result.output
        assert "Partially installed" in result.output
        assert "Missing skills:" in result.output
        assert "wcag-accessibility" in result.output

    def test_full(self, opencode_dir: Path, claude_dir: Path):
        runner = CliRunner()
        runner.invoke(cli, ["install", "--opencode"])
        result = runner.invoke(cli, ["status"])

        assert "Fully installed" in result.output


class TestDoctor:
    def test_nothing_detected(self, opencode_dir: Path, claude_dir: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["doctor"])

        assert result.exit_code == 0, result.output
        assert "[PASS] Python" in result.output
        assert "[PASS] Bundled content" in result.output
        assert "not detected" in result.output
        assert "install OpenCode or Claude Code first" in result.output

    def test_fully_installed(self, opencode_dir: Path, claude_dir: Path):
        runner = CliRunner()
        runner.invoke(cli, ["install", "--opencode"])
        runner.invoke(cli, ["install", "--claude"])
        result = runner.invoke(cli, ["doctor"])

        assert result.exit_code == 0, result.output
        assert "Everything looks good!" in result.output

    def test_partial_suggests_fix(self, opencode_dir: Path, claude_dir: Path):
        runner = CliRunner()
        runner.invoke(cli, ["install", "--opencode", "--only=commands"])
        result = runner.invoke(cli, ["doctor"])

        assert "partial installation" in result.output
        assert "ux-toolkit install --opencode --global" in result.output

    def test_missing_bundled_content_fails(self, tmp_path: Path, opencode_dir: Path, claude_dir: Path):
        runner = CliRunner()
        with patch("ux_toolkit.cli.doctor.get_package_root", return_value=tmp_path / "empty"):
            result = runner.invoke(cli, ["doctor"])

        assert result.exit_code == 1
        assert "[FAIL] Bundled content" in result.output

    def test_frontmatter_name_mismatch_warns(self, opencode_dir: Path, claude_dir: Path):
        runner = CliRunner()
        drift = DriftReport(mismatched=["agent:ux-engineer"])
        with patch("ux_toolkit.cli.doctor.check_manifest_drift", return_value=drift):
            result = runner.invoke(cli, ["doctor"])

        assert result.exit_code == 0, result.output
        assert "frontmatter name differs from manifest: agent:ux-engineer" in result.output
        assert "Everything looks good!" not in result.output


class TestListAndInfo:
    def test_list(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["list"])

        assert result.exit_code == 0
        assert "ux-heuristics" in result.output
        assert "ux-auditor" in result.output
        assert "/ux-audit" in result.output

    def test_info(self, claude_dir: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("OPENCODE_CONFIG_DIR", "/somewhere/opencode")
        runner = CliRunner()
        result = runner.invoke(cli, ["info"])

        assert result.exit_code == 0, result.output
        assert "Environment Overrides" in result.output
        assert "OPENCODE_CONFIG_DIR" in result.output
        assert str(claude_dir) in result.output
        assert "Skills:   25" in result.output
        assert "Agents:   18" in result.output
        assert "Commands: 4" in result.output

    def test_info_without_overrides(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["info"])

        assert "Environment Overrides" not in result.output

    def test_list_by_category(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["list", "--category", "editor"])

        assert result.exit_code == 0, result.output
        assert "Skills (3):" in result.output
        assert "split-panel-patterns" in result.output
        assert "ux-heuristics" not in result.output
        assert "ux-auditor" not in result.output

    def test_list_by_category_includes_personal(self, opencode_dir: Path):
        skill = opencode_dir / "skills" / "my-editor-rules"
        skill.mkdir(parents=True)
        (skill / "SKILL.md").write_text("---\nname: my-editor-rules\ndescription: House rules\ncategory: editor\n---\nbody\n")
        runner = CliRunner()
        result = runner.invoke(cli, ["list", "-c", "editor"])

        assert "Skills (4):" in result.output
        assert "my-editor-rules" in result.output
        assert "[personal]" in result.output

    def test_list_unknown_category(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["list", "--category", "nonsense"])

        assert result.exit_code == 0
        assert "No skills in category 'nonsense'." in result.output


class TestSkill:
    def test_bundled(self, project: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["skill", "ux-heuristics", "--project-root", str(project)])

        assert result.exit_code == 0, result.output
        assert "ux-heuristics (from ux-toolkit)" in result.output
        assert "# Ux Heuristics" in result.output
        assert "category: core" not in result.output

    def test_project_overrides_bundled(self, project: Path):
        skill = project / ".opencode" / "skills" / "ux-heuristics"
        skill.mkdir(parents=True)
        (skill / "SKILL.md").write_text("---\nname: ux-heuristics\n---\n# Our heuristics\n")
        runner = CliRunner()
        result = runner.invoke(cli, ["skill", "ux-heuristics", "--project-root", str(project)])

        assert "(from project)" in result.output
        assert "# Our heuristics" in result.output

    def test_defaults_to_cwd(self, project: Path, monkeypatch: pytest.MonkeyPatch):
        skill = project / ".opencode" / "skills" / "local-only"
        skill.mkdir(parents=True)
        (skill / "SKILL.md").write_text("# Local\n")
        monkeypatch.chdir(project)
        runner = CliRunner()
        result = runner.invoke(cli, ["skill", "local-only"])

        assert result.exit_code == 0, result.output
        assert "local-only (from project)" in result.output

    def test_not_found(self, project: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["skill", "no-such-skill", "--project-root", str(project)])

        assert result.exit_code == 1
        assert "Skill 'no-such-skill' not found" in result.output


class TestLogging:
    def test_configures_only_package_logger(self):
        root_handlers = list(logging.getLogger().handlers)

        configure_logging(verbose=True)
        configure_logging(verbose=False)

        logger = logging.getLogger("ux_toolkit")
        assert logging.getLogger().handlers == root_handlers
        assert sum(isinstance(h, ClickEchoHandler) for h in logger.handlers) == 1
        assert logger.level == logging.WARNING

    def test_verbose_install_logs_each_component(self, project: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.chdir(project)
        runner = CliRunner()
        result = runner.invoke(cli, ["install", "--project", "--opencode", "--command", "ux-audit", "-v"])

        assert result.exit_code == 0, result.output
        assert "Installed command:ux-audit ->" in result.output
