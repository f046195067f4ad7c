"""Configuration storage for the sshconfig command line tool."""

import json
from dataclasses import asdict, dataclass
from pathlib import Path

from sshconfig.ssh_config import default_config_path
from sshconfig.writer import atomic_write

CONFIG_DIR = Path.home() / ".config" / "sshconfig"
CONFIG_FILE = CONFIG_DIR / "config.json"


@dataclass
class Config:
    """Application configuration."""

    ssh_config_path: str | None = None
    stamp_comment: str | None = None


def load_config() -> Config:
    """Load configuration from disk.

    Returns:
        Config object with loaded settings, or defaults if no config exists.
    """
    if not CONFIG_FILE.exists():
        return Config()

    try:
        with open(CONFIG_FILE, "r") as f:
            data = json.load(f)
            return Config(
                ssh_config_path=data.get("ssh_config_path"),
                stamp_comment=data.get("stamp_comment"),
            )
    except (json.JSONDecodeError, OSError, AttributeError):
        return Config()


def save_config(config: Config) -> None:
    """Save configuration to disk.

    Args:
        config: Config object to save.
    """
    CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)

    data = json.dumps(asdict(config), indent=2).encode()
    atomic_write(CONFIG_FILE, lambda f: f.write(data))


def get_ssh_config_path() -> Path:
    """Get the SSH config file to operate on.

    Returns:
        The configured path, or ~/.ssh/config if none is set.
    """
    path = load_config().ssh_config_path
    if path is None:
        return default_config_path()
    return Path(path).expanduser()


def set_ssh_config_path(path: str) -> None:
    """Set the default SSH config file.

    Args:
        path: Path to store; it is made absolute.
    """
    config = load_config()
    config.ssh_config_path = str(Path(path).expanduser().resolve())
    save_config(config)


def clear_ssh_config_path() -> None:
    """Go back to using ~/.ssh/config."""
    config = load_config()
    config.ssh_config_path = None
    save_config(config)


def set_stamp_comment(comment: str | None) -> None:
    """Set or clear the comment attached to entries written by the CLI.

    Args:
        comment: Comment text, or None to stop stamping entries.
    """
    config = load_config()
    config.stamp_comment = comment
    save_config(config)
