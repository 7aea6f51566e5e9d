"""Static checks for tree configurations.

The checks mirror what the materializer enforces per entry, but run without
any I/O and report every problem at once instead of stopping at the first.
"""

from __future__ import annotations

from pathlib import Path

from tree_fs.errors import EmptyEntryNameError, EntryOutsideDirectoryError
from tree_fs.models import TreeConfig
from tree_fs.paths import resolve_entry_path


class CheckResult:
    """Result of checking a tree configuration."""

    __slots__ = ("errors", "success", "warnings")

    def __init__(
        self, errors: list[str] | None = None, warnings: list[str] | None = None
    ) -> None:
        """Initialize check result.

        Args:
            errors: Problems that would make materialization fail.
            warnings: Problems that would make an entry be skipped.
        """
        self.errors = errors or []
        self.warnings = warnings or []
        self.success = len(self.errors) == 0


def check_config(config: TreeConfig) -> CheckResult:
    """Check entry names, root containment and duplicate paths.

    Duplicates are errors in strict mode. Otherwise the later entry would be
    skipped (or would rewrite the earlier one with ``override_existing``), so
    they are reported as warnings.

    Args:
        config: Configuration to check.

    Returns:
        CheckResult listing errors and warnings.

    Example:
        >>> from tree_fs.models import TextFileEntry, TreeConfig
        >>> config = TreeConfig(root="/tmp/t", entries=[TextFileEntry(path="../x", content="")])
        >>> check_config(config).errors
        ['Entry #0 resolves outside the root: ../x']
    """
    errors: list[str] = []
    warnings: list[str] = []
    seen: dict[Path, int] = {}

    for index, entry in enumerate(config.entries):
        try:
            dest = resolve_entry_path(config.root, entry.path, index)
        except EmptyEntryNameError:
            errors.append(f"Entry #{index} has an empty name")
            continue
        except EntryOutsideDirectoryError:
            errors.append(f"Entry #{index} resolves outside the root: {entry.path}")
            continue

        if dest in seen:
            message = (
                f"Entry #{index} duplicates entry #{seen[dest]}: {entry.path}"
            )
            if config.strict:
                errors.append(message)
            else:
                warnings.append(message)
            continue
        seen[dest] = index

        if entry.is_directory and entry.readonly:
            warnings.append(f"Entry #{index} is a directory; readonly is ignored: {entry.path}")

    return CheckResult(errors=errors, warnings=warnings)
