"""
Filesystem helpers used when laying generated documents out on disk.
"""

from __future__ import annotations

import logging
import os
import tempfile
from contextlib import contextmanager
from pathlib import Path

from filelock import FileLock

logger = logging.getLogger(__name__)


def ensure_directory(path: Path | str) -> Path:
    """
    Ensure a directory exists, returning the resolved Path.
    """
    resolved = Path(path).expanduser().resolve()
    resolved.mkdir(parents=True, exist_ok=True)
    return resolved


@contextmanager
def file_lock(path: Path | str):
    """Hold a `<name>.lock` file next to the target while writing it."""
    target = Path(path).expanduser().resolve()
    lock_path = target.with_suffix(f"{target.suffix}.lock")
    lock_path.parent.mkdir(parents=True, exist_ok=True)
    with FileLock(str(lock_path)):
        yield


def _atomic_write_text(target: Path, content: str, encoding: str) -> None:
    """Stage content in a sibling temp file, then rename it over the target."""
    target.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=target.parent)
    try:
        with os.fdopen(fd, "w", encoding=encoding) as handle:
            handle.write(content)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(tmp_path, target)
    finally:
        try:
            os.unlink(tmp_path)
        except OSError:
            pass


def write_text_file(path: Path | str, content: str, encoding: str = "utf-8") -> Path:
    """
    Atomically write text to a file under a lock, creating parent directories.
    """
    target = Path(path).expanduser().resolve()
    with file_lock(target):
        _atomic_write_text(target, content, encoding=encoding)
    return target


def write_if_changed(path: Path | str, content: str, *, force: bool = False, encoding: str = "utf-8") -> bool:
    """
    Write content unless the file already holds exactly the same text.

    Returns:
        True if the file was written, False if it was left untouched.
    """
    target = Path(path).expanduser().resolve()
    if not force and target.is_file():
        try:
            if target.read_text(encoding=encoding) == content:
                logger.debug("Unchanged: %s", target)
                return False
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("Could not compare %s (%s); rewriting", target, exc)
    write_text_file(target, content, encoding=encoding)
    return True
