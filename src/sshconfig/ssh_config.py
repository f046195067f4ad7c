"""Parse, edit and rewrite SSH client config files (~/.ssh/config).

The model keeps comments attached to the directive that follows them, so a
file produced by this module parses and serializes back byte for byte.

Lookups return the stored objects themselves, not copies. Editing a returned
SSHParam or SSHHost edits the owning SSHConfig:

    config = parse_file()
    param = config.get_param(VISUAL_HOST_KEY)
    if param is not None:
        param.args = ["yes"]
    else:
        config.add_param(new_param(VISUAL_HOST_KEY, ["yes"]))
    config.write_to_path(Path.home() / ".ssh" / "config")
"""

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import BinaryIO, TextIO

from sshconfig.keywords import HOST, HOST_NAME
from sshconfig.lexer import (
    GLOBAL_CONFIGURATION_HEADER,
    HOST_CONFIGURATION_HEADER,
    LineKind,
    iter_lines,
)
from sshconfig.writer import WriteCounter, atomic_write

logger = logging.getLogger(__name__)

ENCODING = "utf-8"
ERRORS = "surrogateescape"
INDENT = "  "


def _render_comments(comments: list[str]) -> str:
    lines = []
    for comment in comments:
        if not comment.startswith("#"):
            comment = "# " + comment
        lines.append(comment + "\n")
    return "".join(lines)


@dataclass
class SSHParam:
    """A keyword and its arguments, e.g. ``User ubuntu``."""

    keyword: str
    args: list[str] = field(default_factory=list)
    comments: list[str] = field(default_factory=list)

    @property
    def value(self) -> str:
        """Return the first argument, or an empty string if there is none."""
        if self.args:
            return self.args[0]
        return ""

    @property
    def is_comment_only(self) -> bool:
        """True for the keyword-less holder of comments found at end of input."""
        return not self.keyword and not self.args

    def render(self) -> str:
        """Return the canonical text for this parameter.

        A commented parameter is preceded by a blank line. A parameter with
        neither keyword nor args holds only comments and renders as them.
        """
        text = ""
        if self.comments:
            text += "\n" + _render_comments(self.comments)
        if self.keyword or self.args:
            text += " ".join([self.keyword, *self.args]) + "\n"
        return text

    def __str__(self) -> str:
        return self.render()


def _insert_before_trailing_comments(params: list[SSHParam], param: SSHParam) -> None:
    # comments left at end of input must stay last to reparse in place
    if params and params[-1].is_comment_only:
        params.insert(len(params) - 1, param)
    else:
        params.append(param)


@dataclass
class SSHHost:
    """A ``Host <patterns...>`` block and the parameters scoped to it."""

    hostnames: list[str]
    comments: list[str] = field(default_factory=list)
    params: list[SSHParam] = field(default_factory=list)

    def get_param(self, keyword: str) -> SSHParam | None:
        """Return the first parameter with this keyword, or None."""
        for param in self.params:
            if param.keyword == keyword:
                return param
        return None

    def add_param(self, param: SSHParam) -> None:
        """Append a parameter to this host, ahead of any trailing comments."""
        _insert_before_trailing_comments(self.params, param)

    def matches(self, hostname: str) -> bool:
        """Check hostname against the Host patterns as literal strings."""
        return hostname in self.hostnames

    def render(self) -> str:
        """Return the canonical text for this host block.

        The block starts with a blank line; every non-blank line of its
        parameters is indented by two spaces.
        """
        text = "\n" + _render_comments(self.comments)
        text += " ".join([HOST, *self.hostnames]) + "\n"
        for param in self.params:
            for line in param.render().split("\n")[:-1]:
                if line:
                    line = INDENT + line
                text += line + "\n"
        return text

    def __str__(self) -> str:
        return self.render()


@dataclass
class SSHConfig:
    """A whole ssh_config file.

    Attributes:
        source: The raw bytes the config was parsed from, for diagnostics only.
        globals: Parameters that appear before the first Host block.
        hosts: Host blocks in file order.
    """

    source: bytes = b""
    globals: list[SSHParam] = field(default_factory=list)
    hosts: list[SSHHost] = field(default_factory=list)

    def get_param(self, keyword: str) -> SSHParam | None:
        """Return the first global parameter with this keyword, or None."""
        for param in self.globals:
            if param.keyword == keyword:
                return param
        return None

    def get_host(self, hostname: str) -> SSHHost | None:
        """Return the first host listing hostname among its patterns, or None.

        Patterns are compared literally: ``*.example.com`` is found by
        ``get_host("*.example.com")`` only.
        """
        for host in self.hosts:
            if host.matches(hostname):
                return host
        return None

    def find_by_hostname(self, hostname: str) -> SSHHost | None:
        """Return the first host known by hostname, or None.

        A host matches if hostname is one of its patterns or one of the
        arguments of its HostName parameter, so both an alias and the real
        address find the same block. Glob patterns are not expanded.
        """
        for host in self.hosts:
            if host.matches(hostname):
                return host
            param = host.get_param(HOST_NAME)
            if param is not None and hostname in param.args:
                return host
        return None

    def add_param(self, param: SSHParam) -> None:
        """Append a global parameter, ahead of any trailing comments."""
        _insert_before_trailing_comments(self.globals, param)

    def add_host(self, host: SSHHost) -> None:
        """Append a host block.

        Comments that ended the file before stay at the end: they move from
        the last section into the new host.
        """
        section = self.hosts[-1].params if self.hosts else self.globals
        if section and section[-1].is_comment_only:
            trailing = section.pop()
            if host.params and host.params[-1].is_comment_only:
                host.params[-1].comments[:0] = trailing.comments
            else:
                host.params.append(trailing)
        self.hosts.append(host)

    def render(self) -> str:
        """Return the canonical text for the whole file."""
        parts = ["\n", GLOBAL_CONFIGURATION_HEADER, "\n"]
        parts.extend(param.render() for param in self.globals)
        parts.extend(["\n", HOST_CONFIGURATION_HEADER, "\n"])
        parts.extend(host.render() for host in self.hosts)
        return "".join(parts)

    def __str__(self) -> str:
        return self.render()

    def write_to(self, writer: BinaryIO) -> int:
        """Write the canonical text to a binary writer.

        Returns:
            The number of bytes written.
        """
        counter = WriteCounter(writer)
        counter.write(self.render().encode(ENCODING, ERRORS))
        return counter.written

    def write_to_path(self, path: str | Path) -> int:
        """Atomically replace path with the canonical text.

        The file keeps its permission bits if it exists, otherwise it is
        created owner read/write only. See ``atomic_write``.

        Returns:
            The number of bytes written.
        """
        return atomic_write(path, self.write_to)


def new_param(
    keyword: str,
    args: list[str] | None = None,
    comments: list[str] | None = None,
) -> SSHParam:
    """Create a parameter from a keyword, its arguments and leading comments."""
    return SSHParam(keyword=keyword, args=list(args or []), comments=list(comments or []))


def new_host(hostnames: list[str], comments: list[str] | None = None) -> SSHHost:
    """Create a host block with no parameters."""
    return SSHHost(hostnames=list(hostnames), comments=list(comments or []))


class _Mode(Enum):
    GLOBAL = auto()
    IN_HOST = auto()


def _read_source(source: str | bytes | TextIO | BinaryIO) -> bytes:
    if hasattr(source, "read"):
        source = source.read()
    if isinstance(source, str):
        return source.encode(ENCODING, ERRORS)
    return bytes(source)


def parse(source: str | bytes | TextIO | BinaryIO) -> SSHConfig:
    """Parse ssh_config text into an SSHConfig.

    The whole input is read before parsing. Every line is accepted: anything
    that is not blank, a comment or a section banner becomes a parameter.
    Comments attach to the next directive. Comments left over at the end of
    input are kept as a keyword-less parameter in the current section.

    Args:
        source: Config text, raw bytes, or a readable stream of either.

    Returns:
        The parsed SSHConfig.

    Raises:
        OSError: If reading the stream fails.
    """
    data = _read_source(source)
    config = SSHConfig(source=data)

    mode = _Mode.GLOBAL
    comments: list[str] = []
    host: SSHHost | None = None

    for line in iter_lines(data.decode(ENCODING, ERRORS)):
        if line.kind is LineKind.COMMENT:
            comments.append(line.text)
            continue

        if line.kind is not LineKind.DIRECTIVE:
            continue

        param = SSHParam(keyword=line.keyword, args=line.args, comments=comments)
        comments = []

        if param.keyword == HOST:
            mode = _Mode.IN_HOST
            if host is not None:
                config.hosts.append(host)
            host = SSHHost(hostnames=param.args, comments=param.comments)
        elif mode is _Mode.GLOBAL:
            config.globals.append(param)
        else:
            host.params.append(param)

    if comments:
        trailing = SSHParam(keyword="", comments=comments)
        if mode is _Mode.GLOBAL:
            config.globals.append(trailing)
        else:
            host.params.append(trailing)

    if host is not None:
        config.hosts.append(host)

    logger.debug(
        "Parsed %d bytes: %d global params, %d hosts",
        len(data),
        len(config.globals),
        len(config.hosts),
    )
    return config


def default_config_path() -> Path:
    """Return the per-user SSH config path, ~/.ssh/config."""
    return Path.home() / ".ssh" / "config"


def parse_file(config_path: Path | None = None) -> SSHConfig:
    """Parse an SSH config file.

    Args:
        config_path: Path to SSH config file. Defaults to ~/.ssh/config.

    Returns:
        The parsed SSHConfig.

    Raises:
        OSError: If the file cannot be read.
    """
    if config_path is None:
        config_path = default_config_path()

    with open(config_path, "rb") as f:
        return parse(f)
