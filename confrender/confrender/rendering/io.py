"""File I/O helpers shared by rendering and property persistence."""

from __future__ import annotations

import errno
import os
import stat
import tempfile
from pathlib import Path


def read_text(path: Path) -> str:
    """Read a package file as UTF-8 text.

    Raises:
        OSError: If the file cannot be read
        UnicodeDecodeError: If the content is not valid UTF-8
    """
    return path.read_bytes().decode("utf-8")


def atomic_write_text(path: Path, text: str, mode: int = 0o644) -> None:
    """Replace a file's content atomically using a sibling temporary file.

    Symlinks are followed, so the link target is rewritten. An existing
    file keeps its permissions; mode only applies to newly created files.

    Args:
        path: Destination file path
        text: Text content to write
        mode: File permissions for new files (octal)

    Raises:
        PermissionError: If the existing file is not writable
    """
    target = path.resolve()
    try:
        existing_mode: int | None = stat.S_IMODE(target.stat().st_mode)
    except FileNotFoundError:
        existing_mode = None
    else:
        if not os.access(target, os.W_OK):
            raise PermissionError(errno.EACCES, os.strerror(errno.EACCES), str(target))

    fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", dir=str(target.parent))
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as tmp:
            tmp.write(text)
            tmp.flush()
            os.fsync(tmp.fileno())
        os.replace(tmp_name, target)
        os.chmod(target, mode if existing_mode is None else existing_mode)
    finally:
        if os.path.exists(tmp_name):
            try:
                os.remove(tmp_name)
            except OSError:
                pass
