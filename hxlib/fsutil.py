"""Small path and file-descriptor helpers."""

from __future__ import annotations

import fcntl
import os


def basename(path: str) -> str:
    """Return the part of ``path`` after the last slash."""
    return path.rpartition("/")[2]


def set_blocking(fd: int, on: bool) -> None:
    """Put ``fd`` into blocking mode when ``on`` is true, non-blocking otherwise."""
    os.set_blocking(fd, bool(on))


def set_close_on_exec(fd: int, on: bool) -> None:
    """Clear FD_CLOEXEC on ``fd`` when ``on`` is true, set it otherwise."""
    os.set_inheritable(fd, bool(on))


def lock_write(fd: int) -> None:
    """Take a non-blocking exclusive lock on the whole file; raise OSError if held."""
    fcntl.lockf(fd, fcntl.LOCK_EX | fcntl.LOCK_NB, 0, 0, os.SEEK_SET)