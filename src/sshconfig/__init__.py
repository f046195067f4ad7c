"""Parse, edit and atomically rewrite SSH client config files."""

__version__ = "0.1.0"

from sshconfig.ssh_config import (
    SSHConfig,
    SSHHost,
    SSHParam,
    new_host,
    new_param,
    parse,
    parse_file,
)
from sshconfig.writer import atomic_write

__all__ = [
    "SSHConfig",
    "SSHHost",
    "SSHParam",
    "__version__",
    "atomic_write",
    "new_host",
    "new_param",
    "parse",
    "parse_file",
]
