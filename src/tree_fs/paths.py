"""Lexical path resolution for tree entries.

Entry paths are resolved against the tree root without touching the
filesystem. Symbolic links are not followed, so an ancestor that is already
a symlink on disk can still lead outside the root.
"""

from __future__ import annotations

import os
import secrets
import string
from pathlib import Path

from tree_fs.errors import EmptyEntryNameError, EntryOutsideDirectoryError

# Characters used for generated directory names
NAME_ALPHABET = string.ascii_letters + string.digits

# Default prefix for generated temporary roots
DEFAULT_PREFIX = "tree-fs-"


def normalize(path: str | os.PathLike[str]) -> Path:
    """Collapse ``.``, ``..`` and redundant separators without I/O."""
    return Path(os.path.normpath(os.fspath(path)))


def is_within(root: str | os.PathLike[str], path: str | os.PathLike[str]) -> bool:
    """Check whether ``path`` is a strict descendant of ``root``.

    Both paths are normalized lexically first. A path equal to the root is
    not considered within it.
    """
    root_norm = normalize(root)
    path_norm = normalize(path)
    return root_norm in path_norm.parents


def resolve_entry_path(
    root: str | os.PathLike[str],
    relative: str | os.PathLike[str],
    index: int = 0,
) -> Path:
    """Resolve an entry path against the tree root.

    Args:
        root: The tree root.
        relative: Entry path, normally relative to the root. An absolute path
            is accepted only if it already lies under the root.
        index: Position of the entry, reported for empty names.

    Returns:
        The normalized, joined path.

    Raises:
        EmptyEntryNameError: If ``relative`` is empty.
        EntryOutsideDirectoryError: If the result escapes the root.
    """
    raw = os.fspath(relative)
    if not raw:
        raise EmptyEntryNameError(index)

    resolved = normalize(os.path.join(os.fspath(root), raw))
    if not is_within(root, resolved):
        raise EntryOutsideDirectoryError(raw)
    return resolved


def new_unique_path(
    base_dir: str | os.PathLike[str],
    prefix: str = DEFAULT_PREFIX,
    length: int = 10,
) -> Path:
    """Return a path under ``base_dir`` that does not exist yet.

    Args:
        base_dir: Directory the candidate is placed in.
        prefix: Prefix of the generated name.
        length: Number of random characters after the prefix.

    Returns:
        A non-existing path. Nothing is created.
    """
    base = Path(base_dir)
    while True:
        name = "".join(secrets.choice(NAME_ALPHABET) for _ in range(length))
        candidate = base / f"{prefix}{name}"
        if not candidate.exists():
            return candidate
