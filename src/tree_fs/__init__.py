"""Create file and directory trees for tests, from a builder or YAML."""

__version__ = "0.3.0"

from tree_fs.builder import TreeBuilder
from tree_fs.errors import (
    BuildError,
    CopyFileError,
    CreateDirectoryError,
    CreateFileError,
    CreateRootDirectoryError,
    DecodeError,
    DeleteDirectoryError,
    DuplicateEntryError,
    EmptyEntryNameError,
    EntryOutsideDirectoryError,
    TreeFsError,
    WriteFileError,
)
from tree_fs.loader import from_yaml_file, from_yaml_str, load_config_file, load_config_str
from tree_fs.materializer import Materializer, materialize
from tree_fs.models import (
    BinaryFileEntry,
    CopiedFileEntry,
    DirectoryEntry,
    EmptyFileEntry,
    Entry,
    Settings,
    TextFileEntry,
    TreeConfig,
)
from tree_fs.paths import new_unique_path, resolve_entry_path
from tree_fs.tree import Tree

__all__ = [
    "__version__",
    "BinaryFileEntry",
    "BuildError",
    "CopiedFileEntry",
    "CopyFileError",
    "CreateDirectoryError",
    "CreateFileError",
    "CreateRootDirectoryError",
    "DecodeError",
    "DeleteDirectoryError",
    "DirectoryEntry",
    "DuplicateEntryError",
    "EmptyEntryNameError",
    "EmptyFileEntry",
    "Entry",
    "EntryOutsideDirectoryError",
    "Materializer",
    "Settings",
    "TextFileEntry",
    "Tree",
    "TreeBuilder",
    "TreeConfig",
    "TreeFsError",
    "WriteFileError",
    "from_yaml_file",
    "from_yaml_str",
    "load_config_file",
    "load_config_str",
    "materialize",
    "new_unique_path",
    "resolve_entry_path",
]
