"""Filesystem abstraction for testability.

The RealFileSystem implementation wraps standard library operations and
satisfies the FileSystem protocol structurally.
"""

from __future__ import annotations

import os
import shutil
import stat
import sys
from pathlib import Path
from typing import Any, BinaryIO, Callable

WRITE_BITS = stat.S_IWUSR | stat.S_IWGRP | stat.S_IWOTH


def _make_writable_and_retry(func: Callable[..., Any], path: str, exc: Any) -> None:
    """Error hook for rmtree: clear read-only bits and retry once.

    Only removals are retried. Any other failure, such as listing an
    unreadable directory, is raised unchanged. ``exc`` is the exception
    (``onexc``) or an ``exc_info`` tuple (``onerror``).
    """
    if func not in (os.unlink, os.remove, os.rmdir):
        raise exc[1] if isinstance(exc, tuple) else exc
    os.chmod(path, os.stat(path).st_mode | stat.S_IWUSR)
    func(path)


class RealFileSystem:
    """Production filesystem implementation.

    Wraps standard library Path, os and shutil operations.
    """

    def exists(self, path: Path) -> bool:
        """Check if a path exists."""
        return path.exists()

    def is_dir(self, path: Path) -> bool:
        """Check if a path is a directory."""
        return path.is_dir()

    def mkdir(self, path: Path, parents: bool = False, exist_ok: bool = False) -> None:
        """Create a directory."""
        path.mkdir(parents=parents, exist_ok=exist_ok)

    def open_write(self, path: Path) -> BinaryIO:
        """Create or truncate a file for binary writing."""
        return path.open("wb")

    def read_bytes(self, path: Path) -> bytes:
        """Read binary content from a file."""
        return path.read_bytes()

    def set_readonly(self, path: Path) -> None:
        """Clear user, group and other write bits."""
        mode = path.stat().st_mode
        path.chmod(stat.S_IMODE(mode) & ~WRITE_BITS)

    def rmtree(self, path: Path) -> None:
        """Remove a directory tree, retrying entries blocked by read-only bits."""
        if sys.version_info >= (3, 12):
            shutil.rmtree(path, onexc=_make_writable_and_retry)
        else:
            shutil.rmtree(path, onerror=_make_writable_and_retry)
