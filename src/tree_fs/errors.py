"""Error taxonomy for tree creation and declarative loading."""

from __future__ import annotations

from pathlib import Path

__all__ = [
    "BuildError",
    "CopyFileError",
    "CreateDirectoryError",
    "CreateFileError",
    "CreateRootDirectoryError",
    "DecodeError",
    "DeleteDirectoryError",
    "DuplicateEntryError",
    "EmptyEntryNameError",
    "EntryOutsideDirectoryError",
    "TreeFsError",
    "WriteFileError",
]


class TreeFsError(Exception):
    """Base class for all tree-fs errors."""

    pass


class BuildError(TreeFsError):
    """Error raised while materializing a tree.

    Attributes:
        path: The offending path (entry path, resolved path or copy source).
    """

    message = "Failed to build tree"

    def __init__(self, path: str | Path) -> None:
        self.path = path
        super().__init__(f"{self.message}: {path}")


class CreateRootDirectoryError(BuildError):
    """The tree root could not be created."""

    message = "Failed to create root directory"


class CreateDirectoryError(BuildError):
    """A directory entry or an entry's parent could not be created."""

    message = "Failed to create directory"


class DeleteDirectoryError(BuildError):
    """A tree root could not be removed."""

    message = "Failed to delete directory"


class CreateFileError(BuildError):
    """A file could not be opened for writing."""

    message = "Failed to create file"


class WriteFileError(BuildError):
    """A file was opened but its content could not be written."""

    message = "Failed to write file"


class CopyFileError(BuildError):
    """The source of a copied file could not be read.

    ``path`` is always the copy source, never the destination.
    """

    message = "Failed to copy file"


class EntryOutsideDirectoryError(BuildError):
    """An entry path resolves outside the tree root."""

    message = "Entry resolves outside the root directory"


class DuplicateEntryError(BuildError):
    """An entry path was already declared or already exists (strict mode)."""

    message = "Duplicate entry"


class EmptyEntryNameError(BuildError):
    """An entry has an empty path.

    Attributes:
        index: Position of the entry in the configuration.
    """

    def __init__(self, index: int) -> None:
        self.index = index
        self.path = ""
        Exception.__init__(self, f"Entry #{index} has an empty name")


class DecodeError(TreeFsError):
    """A declarative tree document could not be decoded.

    The underlying YAML or validation error is chained as ``__cause__``.
    """

    pass
