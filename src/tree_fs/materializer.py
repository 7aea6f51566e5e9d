"""Materialization of tree configurations onto disk."""

from __future__ import annotations

import logging
from pathlib import Path

from tree_fs.errors import (
    CopyFileError,
    CreateDirectoryError,
    CreateFileError,
    CreateRootDirectoryError,
    DuplicateEntryError,
    WriteFileError,
)
from tree_fs.filesystem import RealFileSystem
from tree_fs.models import (
    BinaryFileEntry,
    CopiedFileEntry,
    DirectoryEntry,
    EmptyFileEntry,
    Entry,
    TextFileEntry,
    TreeConfig,
)
from tree_fs.paths import resolve_entry_path
from tree_fs.protocols import FileSystem
from tree_fs.tree import Tree

logger = logging.getLogger(__name__)


class Materializer:
    """Creates the entries of a TreeConfig in declaration order.

    Failures are raised immediately. Entries created before the failing one
    are left in place; there is no rollback.

    Follows Separate Use from Creation: constructor requires all dependencies.
    Use factory method `create()` for production instantiation with defaults.
    """

    def __init__(self, filesystem: FileSystem) -> None:
        """Initialize materializer with required dependencies.

        Args:
            filesystem: Filesystem abstraction (required).
        """
        self.fs = filesystem

    @classmethod
    def create(cls, filesystem: FileSystem | None = None) -> Materializer:
        """Factory method for production instantiation.

        Args:
            filesystem: Optional filesystem abstraction (created if not provided).

        Returns:
            Configured Materializer instance.
        """
        return cls(filesystem=filesystem or RealFileSystem())

    def materialize(self, config: TreeConfig) -> Tree:
        """Create the root and every entry of a configuration.

        Existing paths are skipped unless ``override_existing`` is set. In
        ``strict`` mode a path declared twice, or already present on disk,
        raises instead.

        Args:
            config: The tree to create.

        Returns:
            Tree handle bound to the root and the auto-delete policy.

        Raises:
            CreateRootDirectoryError: If the root cannot be created.
            EmptyEntryNameError: If an entry path is empty.
            EntryOutsideDirectoryError: If an entry resolves outside the root.
            DuplicateEntryError: In strict mode, on a repeated or existing path.
            CreateDirectoryError: If a directory or parent cannot be created.
            CreateFileError: If a file cannot be opened for writing.
            WriteFileError: If file content or permissions cannot be written.
            CopyFileError: If a copy source cannot be read.
        """
        root = Path(config.root)
        self._ensure_root(root)

        declared: set[Path] = set()
        for index, entry in enumerate(config.entries):
            self._apply_entry(config, root, index, entry, declared)

        logger.info("Materialized tree at %s (%d entries)", root, len(config.entries))
        return Tree(root, auto_delete=config.auto_delete, filesystem=self.fs)

    def _ensure_root(self, root: Path) -> None:
        """Create the root directory and its ancestors if missing."""
        if self.fs.exists(root):
            if not self.fs.is_dir(root):
                raise CreateRootDirectoryError(root)
            return
        try:
            self.fs.mkdir(root, parents=True, exist_ok=True)
        except OSError as e:
            raise CreateRootDirectoryError(root) from e

    def _apply_entry(
        self,
        config: TreeConfig,
        root: Path,
        index: int,
        entry: Entry,
        declared: set[Path],
    ) -> None:
        """Create a single entry.

        Args:
            config: The tree being created.
            root: Tree root.
            index: Position of the entry.
            entry: The entry to create.
            declared: Resolved paths of the entries handled so far.
        """
        dest = resolve_entry_path(root, entry.path, index)

        if config.strict and dest in declared:
            raise DuplicateEntryError(entry.path)
        declared.add(dest)

        if self.fs.exists(dest):
            if config.strict:
                raise DuplicateEntryError(entry.path)
            if not config.override_existing:
                logger.debug("Skipping existing entry %s", dest)
                return

        # Read copy sources before touching the destination
        content = self._entry_content(entry, dest)
        self._ensure_parent(dest)

        if isinstance(entry, DirectoryEntry):
            self._create_directory(dest, exist_ok=config.override_existing)
        else:
            self._write_file(dest, content)
            if entry.readonly:
                self._set_readonly(dest)

        logger.debug("Created %s %s", entry.type, dest)

    def _entry_content(self, entry: Entry, dest: Path) -> bytes:
        """Get the bytes to write for an entry (empty for directories).

        Raises:
            WriteFileError: If text content cannot be encoded as UTF-8.
        """
        if isinstance(entry, TextFileEntry):
            try:
                return entry.content.encode("utf-8")
            except UnicodeEncodeError as e:
                raise WriteFileError(dest) from e
        if isinstance(entry, BinaryFileEntry):
            return entry.content
        if isinstance(entry, CopiedFileEntry):
            return self._read_source(entry.source)
        if isinstance(entry, (DirectoryEntry, EmptyFileEntry)):
            return b""
        raise TypeError(f"Unsupported entry type: {type(entry).__name__}")

    def _read_source(self, source: Path) -> bytes:
        """Read the content of a copy source.

        Raises:
            CopyFileError: Tagged with the source path.
        """
        if not source.is_absolute():
            raise CopyFileError(source)
        try:
            return self.fs.read_bytes(source)
        except OSError as e:
            raise CopyFileError(source) from e

    def _ensure_parent(self, dest: Path) -> None:
        """Create missing ancestors of an entry."""
        parent = dest.parent
        try:
            self.fs.mkdir(parent, parents=True, exist_ok=True)
        except OSError as e:
            raise CreateDirectoryError(parent) from e

    def _create_directory(self, dest: Path, exist_ok: bool) -> None:
        """Create a directory entry. Its ancestors already exist."""
        try:
            self.fs.mkdir(dest, exist_ok=exist_ok)
        except OSError as e:
            raise CreateDirectoryError(dest) from e

    def _write_file(self, dest: Path, content: bytes) -> None:
        """Create a file and write its full content.

        Opening and writing fail with distinct errors.
        """
        try:
            handle = self.fs.open_write(dest)
        except OSError as e:
            raise CreateFileError(dest) from e

        try:
            with handle:
                if content:
                    handle.write(content)
        except OSError as e:
            raise WriteFileError(dest) from e

    def _set_readonly(self, dest: Path) -> None:
        """Mark a written file read-only."""
        try:
            self.fs.set_readonly(dest)
        except OSError as e:
            raise WriteFileError(dest) from e


def materialize(config: TreeConfig, filesystem: FileSystem | None = None) -> Tree:
    """Materialize a configuration with a default Materializer.

    Args:
        config: The tree to create.
        filesystem: Optional filesystem abstraction.

    Returns:
        Tree handle for the created root.
    """
    return Materializer.create(filesystem).materialize(config)
