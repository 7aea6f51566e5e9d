"""Fluent builder for tree configurations."""

from __future__ import annotations

import os
from pathlib import Path

from tree_fs.materializer import Materializer
from tree_fs.models import (
    BinaryFileEntry,
    CopiedFileEntry,
    DirectoryEntry,
    EmptyFileEntry,
    Entry,
    Settings,
    TextFileEntry,
    TreeConfig,
    default_root,
)
from tree_fs.protocols import TreeMaterializer
from tree_fs.tree import Tree

PathLike = str | os.PathLike[str]


class TreeBuilder:
    """Accumulates entries and tree-level policy.

    Every method returns the builder so calls chain. Nothing touches the disk
    and nothing is validated until ``create()``.

    Example:
        tree = (
            TreeBuilder()
            .add_file("config/app.conf", "host = localhost")
            .add_empty_file("logs/app.log")
            .add_directory("data/raw")
            .add_readonly_file("secrets/api.key", "supersecretkey")
            .create()
        )

    Defaults: a fresh temp root, existing paths skipped, tree removed on close.
    """

    def __init__(self, root: PathLike | None = None) -> None:
        """Initialize an empty builder.

        Args:
            root: Tree root. A unique temp path is generated when omitted.
        """
        self._root = Path(root) if root is not None else default_root()
        self._override_existing = False
        self._auto_delete = True
        self._strict = False
        self._entries: list[Entry] = []

    @property
    def root(self) -> Path:
        """The configured root."""
        return self._root

    @property
    def entries(self) -> tuple[Entry, ...]:
        """Entries added so far, in order."""
        return tuple(self._entries)

    # ------------------------------------------------------------------
    # Tree-level policy
    # ------------------------------------------------------------------

    def root_folder(self, path: PathLike) -> TreeBuilder:
        """Set the root folder where the tree will be created."""
        self._root = Path(path)
        return self

    def override_existing(self, yes: bool = True) -> TreeBuilder:
        """Rewrite entries that already exist instead of skipping them."""
        self._override_existing = yes
        return self

    override_file = override_existing

    def auto_delete(self, yes: bool = True) -> TreeBuilder:
        """Remove the root when the tree handle is closed."""
        self._auto_delete = yes
        return self

    drop = auto_delete

    def strict(self, yes: bool = True) -> TreeBuilder:
        """Raise on duplicate or pre-existing entry paths."""
        self._strict = yes
        return self

    # ------------------------------------------------------------------
    # Entries
    # ------------------------------------------------------------------

    def add_file_with_settings(
        self, path: PathLike, content: str, settings: Settings | None
    ) -> TreeBuilder:
        """Add a text file with custom settings."""
        self._entries.append(TextFileEntry(path=path, content=content, settings=settings))
        return self

    def add_empty_file_with_settings(
        self, path: PathLike, settings: Settings | None
    ) -> TreeBuilder:
        """Add an empty file with custom settings."""
        self._entries.append(EmptyFileEntry(path=path, settings=settings))
        return self

    def add_directory_with_settings(
        self, path: PathLike, settings: Settings | None
    ) -> TreeBuilder:
        """Add a directory. Settings are accepted but never applied to directories."""
        self._entries.append(DirectoryEntry(path=path, settings=settings))
        return self

    def add_binary_file_with_settings(
        self, path: PathLike, data: bytes, settings: Settings | None
    ) -> TreeBuilder:
        """Add a binary file with custom settings."""
        self._entries.append(BinaryFileEntry(path=path, content=data, settings=settings))
        return self

    def add_copied_file_with_settings(
        self, path: PathLike, source: PathLike, settings: Settings | None
    ) -> TreeBuilder:
        """Add a file copied from an absolute source path, with custom settings."""
        self._entries.append(
            CopiedFileEntry(path=path, source=Path(source), settings=settings)
        )
        return self

    def add_file(self, path: PathLike, content: str) -> TreeBuilder:
        """Add a file with text content."""
        return self.add_file_with_settings(path, content, None)

    add = add_file
    add_text = add_file

    def add_empty_file(self, path: PathLike) -> TreeBuilder:
        """Add a zero-length file."""
        return self.add_empty_file_with_settings(path, None)

    add_empty = add_empty_file

    def add_directory(self, path: PathLike) -> TreeBuilder:
        """Add a directory."""
        return self.add_directory_with_settings(path, None)

    def add_binary_file(self, path: PathLike, data: bytes) -> TreeBuilder:
        """Add a file with raw byte content."""
        return self.add_binary_file_with_settings(path, data, None)

    def add_copied_file(self, path: PathLike, source: PathLike) -> TreeBuilder:
        """Add a file whose content is copied from ``source``."""
        return self.add_copied_file_with_settings(path, source, None)

    def add_readonly_file(self, path: PathLike, content: str) -> TreeBuilder:
        """Add a read-only text file."""
        return self.add_file_with_settings(path, content, Settings(readonly=True))

    def add_readonly_empty_file(self, path: PathLike) -> TreeBuilder:
        """Add a read-only empty file."""
        return self.add_empty_file_with_settings(path, Settings(readonly=True))

    # ------------------------------------------------------------------
    # Terminal operations
    # ------------------------------------------------------------------

    def to_config(self) -> TreeConfig:
        """Snapshot the builder as a TreeConfig.

        The snapshot is a deep copy; the builder can keep being used.
        """
        return TreeConfig(
            root=self._root,
            override_existing=self._override_existing,
            auto_delete=self._auto_delete,
            strict=self._strict,
            entries=[entry.model_copy(deep=True) for entry in self._entries],
        )

    def create(self, materializer: TreeMaterializer | None = None) -> Tree:
        """Materialize a snapshot of the builder.

        Args:
            materializer: Optional materializer (default: real filesystem).

        Returns:
            Tree handle for the created root.

        Raises:
            BuildError: On the first entry that cannot be created.
        """
        if materializer is None:
            materializer = Materializer.create()
        return materializer.materialize(self.to_config())

    build = create
