"""Protocol definitions for core abstractions.

Designing to interfaces keeps the materializer and the tree handle
independent of real disk access, so tests can substitute doubles.

All concrete implementations satisfy these protocols structurally (duck typing).
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, BinaryIO, Protocol, runtime_checkable

if TYPE_CHECKING:
    from tree_fs.models import TreeConfig
    from tree_fs.tree import Tree


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for filesystem operations used while building a tree."""

    def exists(self, path: Path) -> bool:
        """Check if a path exists.

        Args:
            path: Path to check.

        Returns:
            True if path exists, False otherwise.
        """
        ...

    def is_dir(self, path: Path) -> bool:
        """Check if a path is a directory.

        Args:
            path: Path to check.

        Returns:
            True if path is a directory, False otherwise.
        """
        ...

    def mkdir(self, path: Path, parents: bool = False, exist_ok: bool = False) -> None:
        """Create a directory.

        Args:
            path: Path to create.
            parents: Create parent directories if needed.
            exist_ok: Don't raise if directory exists.
        """
        ...

    def open_write(self, path: Path) -> BinaryIO:
        """Create or truncate a file and open it for binary writing.

        Args:
            path: Path to the file.

        Returns:
            Writable binary file object. The caller closes it.
        """
        ...

    def read_bytes(self, path: Path) -> bytes:
        """Read the full content of a file.

        Args:
            path: Path to the file.

        Returns:
            File content.

        Raises:
            FileNotFoundError: If file does not exist.
        """
        ...

    def set_readonly(self, path: Path) -> None:
        """Remove every write permission bit from a path.

        Args:
            path: Path to change.
        """
        ...

    def rmtree(self, path: Path) -> None:
        """Remove a directory tree, including read-only files.

        Args:
            path: Path to remove.
        """
        ...


@runtime_checkable
class TreeMaterializer(Protocol):
    """Protocol for turning a tree configuration into files on disk."""

    def materialize(self, config: TreeConfig) -> Tree:
        """Create every entry of a configuration.

        Args:
            config: The tree to create.

        Returns:
            Handle owning the created root.

        Raises:
            BuildError: On the first failing entry.
        """
        ...
