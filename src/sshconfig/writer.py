"""Output helpers: a byte-counting writer and atomic file replacement."""

import logging
import os
import secrets
import stat
from pathlib import Path
from typing import BinaryIO, Callable, TypeVar

logger = logging.getLogger(__name__)

DEFAULT_MODE = 0o600

T = TypeVar("T")


class WriteCounter:
    """Wrap a binary writer and total the bytes it accepts."""

    def __init__(self, writer: BinaryIO):
        self.writer = writer
        self.written = 0

    def write(self, data: bytes) -> int:
        """Write all of data, retrying short writes.

        Raises:
            OSError: If the writer stops accepting data.
        """
        view = memoryview(data)
        while view:
            count = self.writer.write(view)
            if not count:
                raise OSError(
                    f"short write: {len(data) - len(view)} of {len(data)} bytes accepted"
                )
            self.written += count
            view = view[count:]
        return len(data)


def _existing_mode(path: Path, default_mode: int) -> int:
    """Return the permission bits of path, or default_mode if it doesn't exist."""
    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        return default_mode


def atomic_write(
    path: str | Path,
    write: Callable[[BinaryIO], T],
    default_mode: int = DEFAULT_MODE,
) -> T:
    """Replace a file atomically.

    The content is produced by ``write`` into a sibling temporary file named
    ``<path>.<random hex>``, which is synced to disk and then renamed over
    ``path``. The target keeps its current permission bits, or gets
    ``default_mode`` if it is new. If anything fails, the temporary file is
    removed, the error propagates, and ``path`` is left untouched.

    Args:
        path: Target file.
        write: Callable receiving the open binary temp file.
        default_mode: Mode for a target that does not exist yet.

    Returns:
        Whatever ``write`` returned.
    """
    path = Path(path)
    mode = _existing_mode(path, default_mode)
    tmp_path = path.with_name(f"{path.name}.{secrets.token_hex(8)}")

    fd = os.open(tmp_path, os.O_WRONLY | os.O_CREAT | os.O_EXCL, mode)
    try:
        try:
            f = os.fdopen(fd, "wb")
        except BaseException:
            os.close(fd)
            raise
        with f:
            # os.open honours the umask, the target mode must not
            os.fchmod(f.fileno(), mode)
            result = write(f)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_path, path)
    except BaseException:
        try:
            os.unlink(tmp_path)
        except FileNotFoundError:
            pass
        raise

    logger.debug("Replaced %s (mode %o)", path, mode)
    return result
