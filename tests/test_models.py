"""Tests for entry and tree configuration models."""

from __future__ import annotations

import tempfile
from pathlib import Path

import pytest
from pydantic import TypeAdapter, ValidationError

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


class TestSettings:
    """Tests for Settings model."""

    def test_default_values(self) -> None:
        """Test Settings defaults to writable."""
        assert Settings().readonly is False

    def test_with_readonly_returns_copy(self) -> None:
        """Test with_readonly leaves the original untouched."""
        original = Settings()
        updated = original.with_readonly(True)

        assert updated.readonly is True
        assert original.readonly is False


class TestEntries:
    """Tests for the entry variants."""

    def test_type_tags(self) -> None:
        """Test each variant carries its discriminator."""
        assert DirectoryEntry(path="d").type == "directory"
        assert EmptyFileEntry(path="e").type == "empty_file"
        assert TextFileEntry(path="t", content="x").type == "text_file"
        assert BinaryFileEntry(path="b", content=b"x").type == "binary_file"
        assert CopiedFileEntry(path="c", source=Path("/src")).type == "copied_file"

    def test_path_accepts_pathlike(self) -> None:
        """Test Path objects are stored as strings."""
        entry = EmptyFileEntry(path=Path("a") / "b.txt")
        assert entry.path == str(Path("a/b.txt"))

    def test_readonly_property(self) -> None:
        """Test readonly reflects optional settings."""
        assert EmptyFileEntry(path="a").readonly is False
        assert EmptyFileEntry(path="a", settings=Settings(readonly=True)).readonly is True

    def test_only_directory_is_directory(self) -> None:
        """Test is_directory is set on the directory variant only."""
        assert DirectoryEntry(path="d").is_directory is True
        assert TextFileEntry(path="t", content="").is_directory is False

    def test_union_dispatches_on_type(self) -> None:
        """Test the discriminated union picks the right variant."""
        adapter = TypeAdapter(Entry)

        entry = adapter.validate_python({"path": "a", "type": "binary_file", "content": b"\x00"})

        assert isinstance(entry, BinaryFileEntry)
        assert entry.content == b"\x00"

    def test_union_requires_type(self) -> None:
        """Test entries without a type tag are rejected."""
        adapter = TypeAdapter(Entry)

        with pytest.raises(ValidationError):
            adapter.validate_python({"path": "a", "content": "x"})

    def test_unknown_field_rejected(self) -> None:
        """Test unknown keys are not silently dropped."""
        with pytest.raises(ValidationError):
            TextFileEntry.model_validate({"path": "a", "content": "x", "mode": 644})


class TestTreeConfig:
    """Tests for TreeConfig model."""

    def test_default_values(self) -> None:
        """Test TreeConfig has correct defaults."""
        config = TreeConfig()

        assert config.override_existing is False
        assert config.auto_delete is True
        assert config.strict is False
        assert config.entries == []
        assert config.root.parent == Path(tempfile.gettempdir())
        assert not config.root.exists()

    def test_default_roots_differ(self) -> None:
        """Test each config gets its own generated root."""
        assert TreeConfig().root != TreeConfig().root

    @pytest.mark.parametrize("key", ["override_existing", "overrideExisting", "override_file"])
    def test_override_aliases(self, key: str) -> None:
        """Test every accepted spelling of the override flag."""
        assert TreeConfig.model_validate({key: True}).override_existing is True

    @pytest.mark.parametrize("key", ["auto_delete", "autoDelete", "drop"])
    def test_auto_delete_aliases(self, key: str) -> None:
        """Test every accepted spelling of the auto-delete flag."""
        assert TreeConfig.model_validate({key: False}).auto_delete is False

    def test_entries_keep_order(self) -> None:
        """Test entries are decoded in declaration order."""
        config = TreeConfig.model_validate(
            {
                "root": "/t",
                "entries": [
                    {"path": "b", "type": "directory"},
                    {"path": "a", "type": "empty_file"},
                ],
            }
        )

        assert [e.path for e in config.entries] == ["b", "a"]
        assert config.root == Path("/t")
