"""
Tests for centralforge.cli
==========================

Tests use Typer's CliRunner. gpg is patched via the mock_gpg fixture.

Test Organization
-----------------
- TestVersionCommand: Tests for --version flag
- TestHelpOutput: Tests for help text
- TestSetupInvocation: Bare invocation runs the pipeline
- TestInitCommand: Starter file generation
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from typer.testing import CliRunner

from centralforge import __version__
from centralforge.cli import app


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI test runner."""
    return CliRunner()


# =============================================================================
# Version / Help Tests
# =============================================================================

class TestVersionCommand:
    """Tests for the --version flag."""

    def test_version_flag(self, runner: CliRunner, mock_gpg: MagicMock) -> None:
        """Test that --version shows the version without running setup."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.stdout
        mock_gpg.assert_not_called()

    def test_version_short_flag(self, runner: CliRunner) -> None:
        """Test that -V shows version."""
        result = runner.invoke(app, ["-V"])

        assert result.exit_code == 0
        assert __version__ in result.stdout


class TestHelpOutput:
    """Tests for help text."""

    def test_main_help(self, runner: CliRunner) -> None:
        """Test main help lists the options and init command."""
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        assert "centralforge" in result.stdout.lower()
        assert "init" in result.stdout
        assert "--no-keygen" in result.stdout

    def test_init_help(self, runner: CliRunner) -> None:
        """Test init help output."""
        result = runner.invoke(app, ["init", "--help"])

        assert result.exit_code == 0
        assert "--group-id" in result.stdout


# =============================================================================
# Setup Invocation Tests
# =============================================================================

class TestSetupInvocation:
    """Tests for running centralforge without a command."""

    def test_bare_invocation_uses_current_directory(
        self,
        runner: CliRunner,
        workspace: Path,
        mock_gpg: MagicMock,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Test no arguments runs every step in the working directory."""
        monkeypatch.chdir(workspace)

        result = runner.invoke(app, [])

        assert result.exit_code == 0
        assert (workspace / "target" / "pom.xml").exists()
        assert (workspace / "target" / "settings.xml").exists()
        assert (workspace / "sonatype-instructions.txt").exists()
        assert (workspace / "pgp-key-instructions.txt").exists()
        mock_gpg.assert_called_once()
        assert mock_gpg.call_args.kwargs["capture_output"] is False

    def test_dir_and_no_keygen(
        self, runner: CliRunner, workspace: Path, mock_gpg: MagicMock
    ) -> None:
        """Test --dir selects the workspace and --no-keygen skips gpg."""
        result = runner.invoke(app, ["--dir", str(workspace), "--no-keygen", "--quiet"])

        assert result.exit_code == 0
        assert (workspace / "target" / "pom.xml").exists()
        mock_gpg.assert_not_called()

    def test_gpg_options(
        self, runner: CliRunner, workspace: Path, mock_gpg: MagicMock
    ) -> None:
        """Test --gpg and --capture-gpg-output reach the gpg invocation."""
        result = runner.invoke(
            app,
            ["--dir", str(workspace), "--gpg", "gpg2", "--capture-gpg-output", "-q"],
        )

        assert result.exit_code == 0
        assert mock_gpg.call_args.args[0][0] == "gpg2"
        assert mock_gpg.call_args.kwargs["capture_output"] is True

    def test_failures_still_exit_zero(
        self, runner: CliRunner, tmp_path: Path, mock_gpg: MagicMock
    ) -> None:
        """Test an empty directory (every input missing) still exits 0."""
        result = runner.invoke(app, ["--dir", str(tmp_path)])

        assert result.exit_code == 0
        assert not (tmp_path / "target" / "pom.xml").exists()
        assert (tmp_path / "sonatype-instructions.txt").exists()
        mock_gpg.assert_not_called()

    def test_quiet_suppresses_progress(
        self, runner: CliRunner, workspace: Path, mock_gpg: MagicMock
    ) -> None:
        """Test --quiet hides the header panel."""
        result = runner.invoke(app, ["--dir", str(workspace), "--no-keygen", "-q"])

        assert result.exit_code == 0
        assert "Preparing Maven Central publishing" not in result.stdout


# =============================================================================
# Init Command Tests
# =============================================================================

class TestInitCommand:
    """Tests for the init command."""

    def test_init_with_yes(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test non-interactive init writes starter files."""
        result = runner.invoke(
            app,
            [
                "init",
                "--dir", str(tmp_path),
                "--group-id", "io.github.jane",
                "--artifact-id", "demo",
                "--email", "jane@example.com",
                "--yes",
            ],
        )

        assert result.exit_code == 0
        config = (tmp_path / "config.properties").read_text(encoding="utf-8")
        assert "project.groupId=io.github.jane" in config
        assert "pgp.email=jane@example.com" in config
        assert (tmp_path / "pom-template.xml").exists()
        assert (tmp_path / "settings-template.xml").exists()

    def test_init_does_not_run_setup(
        self, runner: CliRunner, tmp_path: Path, mock_gpg: MagicMock
    ) -> None:
        """Test the init command skips the setup pipeline."""
        result = runner.invoke(app, ["init", "--dir", str(tmp_path), "--yes"])

        assert result.exit_code == 0
        assert not (tmp_path / "target").exists()
        mock_gpg.assert_not_called()

    def test_init_refuses_existing_files(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test init exits 1 when starter files already exist."""
        runner.invoke(app, ["init", "--dir", str(tmp_path), "--yes"])

        result = runner.invoke(app, ["init", "--dir", str(tmp_path), "--yes"])

        assert result.exit_code == 1

    def test_init_force(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test --force overwrites existing starter files."""
        runner.invoke(app, ["init", "--dir", str(tmp_path), "--yes"])

        result = runner.invoke(
            app,
            ["init", "--dir", str(tmp_path), "--yes", "--force", "-g", "org.acme"],
        )

        assert result.exit_code == 0
        assert "project.groupId=org.acme" in (
            tmp_path / "config.properties"
        ).read_text(encoding="utf-8")

    def test_init_invalid_group_id(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test invalid coordinates exit 1 without writing files."""
        result = runner.invoke(
            app, ["init", "--dir", str(tmp_path), "--yes", "-g", "not a group"]
        )

        assert result.exit_code == 1
        assert not (tmp_path / "config.properties").exists()

    def test_init_then_setup(
        self, runner: CliRunner, tmp_path: Path, mock_gpg: MagicMock
    ) -> None:
        """Test init followed by a bare run renders complete files."""
        runner.invoke(
            app,
            ["init", "--dir", str(tmp_path), "--yes", "-g", "io.github.jane", "-a", "demo"],
        )

        result = runner.invoke(app, ["--dir", str(tmp_path), "-q"])

        assert result.exit_code == 0
        pom = (tmp_path / "target" / "pom.xml").read_text(encoding="utf-8")
        assert "<groupId>io.github.jane</groupId>" in pom
        assert "<artifactId>demo</artifactId>" in pom
        assert "{{" not in pom
