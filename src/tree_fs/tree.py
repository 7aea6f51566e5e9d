"""Scoped handle for a materialized tree."""

from __future__ import annotations

import logging
from pathlib import Path
from types import TracebackType

from tree_fs.errors import DeleteDirectoryError
from tree_fs.filesystem import RealFileSystem
from tree_fs.protocols import FileSystem

logger = logging.getLogger(__name__)


class Tree:
    """A materialized tree and the owner of its cleanup.

    Use it as a context manager, or call ``close()`` explicitly. When
    ``auto_delete`` is set, closing removes the root recursively. Closing is
    idempotent and never raises: cleanup must not hide the outcome of the
    code that used the tree.

    Example:
        with TreeBuilder().add_file("a.txt", "hi").create() as tree:
            assert (tree.root / "a.txt").read_text() == "hi"
    """

    def __init__(
        self,
        root: Path,
        auto_delete: bool = True,
        filesystem: FileSystem | None = None,
    ) -> None:
        """Initialize the handle.

        Args:
            root: Root directory of the materialized tree.
            auto_delete: Remove the root on close.
            filesystem: Filesystem abstraction used for removal.

        Note:
            Handles are normally returned by ``Materializer.materialize``.
        """
        self._root = Path(root)
        self._auto_delete = auto_delete
        self._fs = filesystem or RealFileSystem()
        self._closed = False

    @property
    def root(self) -> Path:
        """Root directory of the tree."""
        return self._root

    @property
    def auto_delete(self) -> bool:
        """Whether the root is removed on close."""
        return self._auto_delete

    @property
    def closed(self) -> bool:
        """Whether ``close()`` already ran."""
        return self._closed

    def keep(self) -> Tree:
        """Disable removal on close, e.g. to inspect a failing fixture."""
        self._auto_delete = False
        return self

    def close(self) -> None:
        """Release the tree, removing it when ``auto_delete`` is set.

        Only the first call has an effect. Removal failures, including a root
        already deleted by someone else, are logged and suppressed.
        """
        if self._closed:
            return
        self._closed = True

        if not self._auto_delete:
            return

        try:
            self._remove()
        except (DeleteDirectoryError, OSError) as e:
            logger.warning("Failed to delete directory %s: %s", self._root, e.__cause__ or e)

    def delete(self) -> None:
        """Remove the root now, ignoring ``auto_delete``.

        Unlike ``close()``, failures are raised. The handle is closed
        afterwards, so a later ``close()`` does nothing.

        Raises:
            DeleteDirectoryError: If the root cannot be removed.
        """
        if self._closed:
            return
        self._closed = True
        self._remove()

    def _remove(self) -> None:
        """Remove the root recursively. A missing root is not an error."""
        try:
            if not self._fs.exists(self._root):
                logger.debug("Tree root %s already removed", self._root)
                return
            self._fs.rmtree(self._root)
        except OSError as e:
            raise DeleteDirectoryError(self._root) from e
        logger.info("Removed tree %s", self._root)

    def __enter__(self) -> Tree:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"Tree(root={str(self._root)!r}, auto_delete={self._auto_delete}, {state})"
