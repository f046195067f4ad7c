"""Line classifier for ssh_config files.

Every line of input falls into exactly one of four kinds:

- blank: nothing but whitespace, ignored
- banner: one of the two section headers this package writes, ignored
- comment: first non-whitespace character is ``#``
- directive: anything else, a keyword followed by zero or more arguments

Nothing is ever rejected. A malformed directive is still a directive.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterator

GLOBAL_CONFIGURATION_HEADER = "# global configuration"
HOST_CONFIGURATION_HEADER = "# host-based configuration"

BANNERS = frozenset({GLOBAL_CONFIGURATION_HEADER, HOST_CONFIGURATION_HEADER})


class LineKind(Enum):
    """Kinds of logical lines in an ssh_config file."""

    BLANK = auto()
    BANNER = auto()
    COMMENT = auto()
    DIRECTIVE = auto()


@dataclass
class Line:
    """A single classified line."""

    kind: LineKind
    text: str
    number: int = 0
    keyword: str = ""
    args: list[str] = field(default_factory=list)

    def __repr__(self) -> str:
        return f"Line({self.kind.name}, {self.text!r}, {self.number})"


def classify_line(raw: str, number: int = 0) -> Line:
    """Classify one newline-stripped line of text.

    Args:
        raw: The line, without its trailing newline.
        number: 1-based line number, kept for diagnostics.

    Returns:
        A Line. Comment lines keep the trimmed text including the ``#``;
        directive lines carry the whitespace-split keyword and args.
    """
    text = raw.strip()

    if not text:
        return Line(LineKind.BLANK, text, number)

    if text in BANNERS:
        return Line(LineKind.BANNER, text, number)

    if text.startswith("#"):
        return Line(LineKind.COMMENT, text, number)

    keyword, *args = text.split()
    return Line(LineKind.DIRECTIVE, text, number, keyword=keyword, args=args)


def iter_lines(text: str) -> Iterator[Line]:
    """Yield a classified Line for every line of text.

    Lines are split on ``\\n`` only; stripping removes any ``\\r`` left over
    from CRLF input.
    """
    for number, raw in enumerate(text.split("\n"), 1):
        yield classify_line(raw, number)
