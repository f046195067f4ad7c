"""
Pytest fixtures for sshconfig tests.

Provides:
- A canonical sample config with globals, a commented host and a pattern host
- Isolated application settings (no writes to the real ~/.config)
"""
from pathlib import Path

import pytest

SAMPLE_CONFIG = """
# global configuration
VisualHostKey yes

# host-based configuration

# dev
Host dev
  HostName 127.0.0.1
  User ubuntu
  Port 22

Host *.google.com *.yahoo.com
  User root
"""


@pytest.fixture
def sample_text() -> str:
    """Config text in the exact form the serializer produces."""
    return SAMPLE_CONFIG


@pytest.fixture
def sample_file(tmp_path: Path, sample_text: str) -> Path:
    """The sample config written to disk with mode 0644."""
    path = tmp_path / "config"
    path.write_text(sample_text)
    path.chmod(0o644)
    return path


@pytest.fixture
def settings_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the settings file at a temporary directory."""
    config_dir = tmp_path / "settings"
    monkeypatch.setattr("sshconfig.config.CONFIG_DIR", config_dir)
    monkeypatch.setattr("sshconfig.config.CONFIG_FILE", config_dir / "config.json")
    return config_dir
