"""Tests for the sshconfig command line interface."""
import os
import stat
from pathlib import Path

import pytest
from typer.testing import CliRunner

from sshconfig import __version__
from sshconfig.cli import app
from sshconfig.config import load_config
from sshconfig.ssh_config import parse

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_settings(settings_dir: Path) -> Path:
    """Never touch the real settings file."""
    return settings_dir


def invoke(path: Path, *args: str):
    return runner.invoke(app, ["--file", str(path), *args])


class TestReading:
    """Commands that only read the config."""

    def test_version(self) -> None:
        """--version prints the version."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_show(self, sample_file: Path, sample_text: str) -> None:
        """show prints the canonical text."""
        result = invoke(sample_file, "show")
        assert result.exit_code == 0
        assert result.output == sample_text

    def test_show_missing_file(self, tmp_path: Path) -> None:
        """A missing file is an error."""
        result = invoke(tmp_path / "nope", "show")
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_hosts(self, sample_file: Path) -> None:
        """hosts lists every block with its details."""
        result = invoke(sample_file, "hosts")
        assert result.exit_code == 0
        assert "dev" in result.output
        assert "127.0.0.1" in result.output
        assert "*.google.com *.yahoo.com" in result.output

    def test_hosts_empty(self, tmp_path: Path) -> None:
        """An empty config says there are no hosts."""
        path = tmp_path / "config"
        path.write_text("User me\n")
        result = invoke(path, "hosts")
        assert result.exit_code == 0
        assert "No hosts" in result.output

    def test_host_by_hostname(self, sample_file: Path) -> None:
        """host finds a block by its HostName value."""
        result = invoke(sample_file, "host", "127.0.0.1")
        assert result.exit_code == 0
        assert "Host dev" in result.output
        assert "ubuntu" in result.output

    def test_host_missing(self, sample_file: Path) -> None:
        """Unknown hosts exit with status 1."""
        result = invoke(sample_file, "host", "mail.google.com")
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_get_global(self, sample_file: Path) -> None:
        """get prints a global value."""
        result = invoke(sample_file, "get", "VisualHostKey")
        assert result.exit_code == 0
        assert result.output == "yes\n"

    def test_get_host_param(self, sample_file: Path) -> None:
        """get --host prints a host's value."""
        result = invoke(sample_file, "get", "User", "--host", "dev")
        assert result.exit_code == 0
        assert result.output == "ubuntu\n"

    def test_get_missing(self, sample_file: Path) -> None:
        """A missing parameter exits with status 1."""
        result = invoke(sample_file, "get", "User")
        assert result.exit_code == 1
        assert "not set" in result.output


class TestWriting:
    """Commands that rewrite the config."""

    def test_set_existing_host_param(self, sample_file: Path, sample_text: str) -> None:
        """set changes a host param in place and keeps the file mode."""
        result = invoke(sample_file, "set", "User", "ec2-user", "--host", "dev")
        assert result.exit_code == 0
        assert "Updated" in result.output
        assert sample_file.read_text() == sample_text.replace("User ubuntu", "User ec2-user")
        assert stat.S_IMODE(os.stat(sample_file).st_mode) == 0o644

    def test_set_new_global_with_comment(self, sample_file: Path) -> None:
        """set appends a missing global with its comment."""
        result = invoke(sample_file, "set", "Compression", "yes", "-c", "Slow links")
        assert result.exit_code == 0
        assert "Added" in result.output
        assert "VisualHostKey yes\n\n# Slow links\nCompression yes\n" in sample_file.read_text()

    def test_set_creates_missing_file(self, tmp_path: Path) -> None:
        """set on a missing file creates it privately."""
        path = tmp_path / "config"
        result = invoke(path, "set", "VisualHostKey", "yes")
        assert result.exit_code == 0
        assert path.read_text() == (
            "\n# global configuration\nVisualHostKey yes\n\n# host-based configuration\n"
        )
        assert stat.S_IMODE(os.stat(path).st_mode) == 0o600

    def test_set_unknown_keyword_warns(self, sample_file: Path) -> None:
        """Keywords outside the catalog are written with a warning."""
        result = invoke(sample_file, "set", "Usr", "root")
        assert result.exit_code == 0
        assert "not a known ssh_config keyword" in result.output
        assert "\nUsr root\n" in sample_file.read_text()

    def test_set_host_keyword_refused(self, sample_file: Path, sample_text: str) -> None:
        """Host blocks cannot be created through set."""
        result = invoke(sample_file, "set", "Host", "new")
        assert result.exit_code == 1
        assert sample_file.read_text() == sample_text

    def test_set_in_missing_host(self, sample_file: Path, sample_text: str) -> None:
        """set --host on an unknown host changes nothing."""
        result = invoke(sample_file, "set", "User", "x", "--host", "nowhere")
        assert result.exit_code == 1
        assert sample_file.read_text() == sample_text

    def test_add_host(self, sample_file: Path, sample_text: str) -> None:
        """add-host appends a commented block."""
        result = invoke(sample_file, "add-host", "git.example.com", "-c", "My cool git server")
        assert result.exit_code == 0
        assert sample_file.read_text() == (
            sample_text + "\n# My cool git server\nHost git.example.com\n"
        )

    def test_add_existing_host_refused(self, sample_file: Path, sample_text: str) -> None:
        """add-host will not duplicate a hostname."""
        result = invoke(sample_file, "add-host", "dev")
        assert result.exit_code == 1
        assert "already exists" in result.output
        assert sample_file.read_text() == sample_text

    def test_writes_keep_end_of_file_comment_last(self, tmp_path: Path) -> None:
        """Appending after a dangling comment keeps the file stable."""
        path = tmp_path / "config"
        path.write_text("User a\n# note\n")
        assert invoke(path, "add-host", "x").exit_code == 0
        assert invoke(path, "set", "VisualHostKey", "yes").exit_code == 0

        text = path.read_text()
        assert text.endswith("\nHost x\n\n  # note\n")
        assert str(parse(text)) == text
        assert parse(text).get_param("VisualHostKey").comments == []

    def test_stamp_comment_is_used(self, sample_file: Path) -> None:
        """The stored stamp comment is attached when --comment is absent."""
        assert runner.invoke(app, ["stamp", "Managed by sshconfig"]).exit_code == 0
        result = invoke(sample_file, "add-host", "build")
        assert result.exit_code == 0
        assert sample_file.read_text().endswith("\n# Managed by sshconfig\nHost build\n")


class TestSettingsCommands:
    """Commands that change stored settings."""

    def test_use_sets_default_file(self, sample_file: Path, sample_text: str) -> None:
        """After use, commands read the chosen file without --file."""
        assert runner.invoke(app, ["use", str(sample_file)]).exit_code == 0
        assert load_config().ssh_config_path == str(sample_file.resolve())

        result = runner.invoke(app, ["show"])
        assert result.exit_code == 0
        assert result.output == sample_text

    def test_use_clear(self, sample_file: Path) -> None:
        """use --clear forgets the stored file."""
        runner.invoke(app, ["use", str(sample_file)])
        assert runner.invoke(app, ["use", "--clear"]).exit_code == 0
        assert load_config().ssh_config_path is None

    def test_stamp_clear(self) -> None:
        """stamp --clear removes the stored comment."""
        runner.invoke(app, ["stamp", "x"])
        result = runner.invoke(app, ["stamp", "--clear"])
        assert result.exit_code == 0
        assert "No stamp comment" in result.output
        assert load_config().stamp_comment is None
