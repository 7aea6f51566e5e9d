"""Application context for dependency injection.

This module separates object creation from object use, so CLI commands can
be tested with doubles instead of the real filesystem.
"""

from __future__ import annotations

from dataclasses import dataclass

from tree_fs.protocols import TreeMaterializer


@dataclass
class AppContext:
    """Container for application dependencies.

    Dependencies are typed using Protocol interfaces, not concrete classes.
    The filesystem is owned by the materializer and the trees it returns.
    """

    materializer: TreeMaterializer


def create_context() -> AppContext:
    """Factory for application dependencies.

    Use this in production code. For tests, construct AppContext directly
    with test doubles.

    Returns:
        Configured AppContext with all dependencies.
    """
    from tree_fs.materializer import Materializer

    return AppContext(materializer=Materializer.create())
