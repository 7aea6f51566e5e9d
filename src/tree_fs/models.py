"""Entry and tree configuration models.

A tree is described by a ``TreeConfig``: a root, tree-level policy flags and
an ordered list of entries. Each entry is one of five variants sharing a
``type`` discriminator, which is also the tag used by YAML documents.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Annotated, ClassVar, Literal, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from tree_fs.paths import new_unique_path

__all__ = [
    "BinaryFileEntry",
    "CopiedFileEntry",
    "DirectoryEntry",
    "EmptyFileEntry",
    "Entry",
    "Settings",
    "TextFileEntry",
    "TreeConfig",
    "default_root",
]


def default_root() -> Path:
    """Generate a fresh, non-existing root under the system temp directory."""
    return new_unique_path(tempfile.gettempdir())


class Settings(BaseModel):
    """Per-entry settings. Only applied to file entries."""

    model_config = ConfigDict(extra="forbid")

    readonly: bool = False

    def with_readonly(self, value: bool = True) -> Settings:
        """Return a copy with the read-only flag set."""
        return self.model_copy(update={"readonly": value})


class _EntryBase(BaseModel):
    """Fields shared by every entry variant."""

    model_config = ConfigDict(extra="forbid")

    is_directory: ClassVar[bool] = False

    path: str
    settings: Settings | None = None

    @field_validator("path", mode="before")
    @classmethod
    def _coerce_path(cls, value: object) -> object:
        if isinstance(value, os.PathLike):
            return os.fspath(value)
        return value

    @property
    def readonly(self) -> bool:
        """Whether the entry should be made read-only after creation."""
        return self.settings is not None and self.settings.readonly


class DirectoryEntry(_EntryBase):
    """A directory."""

    is_directory: ClassVar[bool] = True

    type: Literal["directory"] = "directory"


class EmptyFileEntry(_EntryBase):
    """A zero-length file."""

    type: Literal["empty_file"] = "empty_file"


class TextFileEntry(_EntryBase):
    """A file with text content, written as UTF-8."""

    type: Literal["text_file"] = "text_file"
    content: str


class BinaryFileEntry(_EntryBase):
    """A file with raw byte content."""

    type: Literal["binary_file"] = "binary_file"
    content: bytes


class CopiedFileEntry(_EntryBase):
    """A file whose content is copied from an absolute source path."""

    type: Literal["copied_file"] = "copied_file"
    source: Path


Entry = Annotated[
    Union[DirectoryEntry, EmptyFileEntry, TextFileEntry, BinaryFileEntry, CopiedFileEntry],
    Field(discriminator="type"),
]


class TreeConfig(BaseModel):
    """Everything needed to materialize a tree.

    Attributes:
        root: Directory all entries are resolved against. Created if missing.
        override_existing: Rewrite entries that already exist on disk instead
            of skipping them.
        auto_delete: Remove the root when the resulting handle is closed.
        strict: Raise on duplicate or pre-existing entry paths instead of
            skipping them.
        entries: Entries in creation order.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    root: Path = Field(default_factory=default_root)
    override_existing: bool = Field(
        default=False,
        validation_alias=AliasChoices("override_existing", "overrideExisting", "override_file"),
    )
    auto_delete: bool = Field(
        default=True,
        validation_alias=AliasChoices("auto_delete", "autoDelete", "drop"),
    )
    strict: bool = False
    entries: list[Entry] = Field(default_factory=list)
