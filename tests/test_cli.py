"""Tests for CLI commands using context injection.

Commands accept a _context parameter for dependency injection, enabling unit
tests without touching the real filesystem.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest
import typer

from tree_fs import cli
from tree_fs.context import AppContext, create_context
from tree_fs.errors import EntryOutsideDirectoryError
from tree_fs.materializer import Materializer


@pytest.fixture
def mock_tui(monkeypatch: pytest.MonkeyPatch) -> MagicMock:
    """Replace the module-level console output."""
    tui = MagicMock()
    monkeypatch.setattr(cli, "tui", tui)
    return tui


@pytest.fixture
def mock_context() -> AppContext:
    """Create an AppContext with a mock materializer."""
    return AppContext(materializer=MagicMock())


@pytest.fixture
def doc(tmp_path: Path) -> Path:
    """Write a small tree document."""
    path = tmp_path / "tree.yaml"
    path.write_text(
        "entries:\n"
        "  - path: a/b.txt\n"
        "    type: text_file\n"
        "    content: hi\n"
        "  - path: a/c\n"
        "    type: directory\n"
    )
    return path


def call_create(file: Path, context: AppContext | None = None, **options) -> None:
    """Call the create command with CLI defaults."""
    params = {"root": None, "keep": True, "override": False, "strict": False}
    params.update(options)
    cli.create(file=file, _context=context, **params)


class TestCreateCommand:
    """Tests for the create command."""

    def test_create_keeps_tree_by_default(
        self, mock_context: AppContext, mock_tui: MagicMock, doc: Path
    ) -> None:
        """Test the materialized config disables auto-delete."""
        # Act
        call_create(doc, mock_context)

        # Assert
        config = mock_context.materializer.materialize.call_args.args[0]
        assert config.auto_delete is False
        assert [e.path for e in config.entries] == ["a/b.txt", "a/c"]
        mock_tui.show_success.assert_called_once()

    def test_create_applies_options(
        self, mock_context: AppContext, mock_tui: MagicMock, doc: Path
    ) -> None:
        """Test --root, --override, --strict and --no-keep reach the config."""
        call_create(
            doc, mock_context, root=Path("/elsewhere"), keep=False, override=True, strict=True
        )

        config = mock_context.materializer.materialize.call_args.args[0]
        assert config.root == Path("/elsewhere")
        assert config.override_existing is True
        assert config.strict is True
        assert config.auto_delete is True
        mock_tui.show_info.assert_called_once()

    def test_create_build_error(
        self, mock_context: AppContext, mock_tui: MagicMock, doc: Path
    ) -> None:
        """Test build errors exit with status 1."""
        mock_context.materializer.materialize.side_effect = EntryOutsideDirectoryError("../x")

        with pytest.raises(typer.Exit) as exc_info:
            call_create(doc, mock_context)

        assert exc_info.value.exit_code == 1
        mock_tui.show_error.assert_called_once_with(
            "Entry resolves outside the root directory: ../x"
        )

    def test_create_decode_error(
        self, mock_context: AppContext, mock_tui: MagicMock, tmp_path: Path
    ) -> None:
        """Test an invalid document exits before materializing."""
        bad = tmp_path / "bad.yaml"
        bad.write_text("entries: [")

        with pytest.raises(typer.Exit):
            call_create(bad, mock_context)

        mock_context.materializer.materialize.assert_not_called()
        mock_tui.show_error.assert_called_once()

    def test_create_missing_file(
        self, mock_context: AppContext, mock_tui: MagicMock, tmp_path: Path
    ) -> None:
        """Test a missing document exits with status 1."""
        with pytest.raises(typer.Exit) as exc_info:
            call_create(tmp_path / "missing.yaml", mock_context)

        assert exc_info.value.exit_code == 1

    def test_create_real_tree(self, mock_tui: MagicMock, doc: Path, tmp_path: Path) -> None:
        """Test an end-to-end run with the real filesystem."""
        root = tmp_path / "out"

        call_create(doc, create_context(), root=root)

        assert (root / "a" / "b.txt").read_text() == "hi"
        assert (root / "a" / "c").is_dir()

    def test_create_no_keep_removes_tree(
        self, mock_tui: MagicMock, doc: Path, tmp_path: Path
    ) -> None:
        """Test --no-keep builds the tree and removes it again."""
        root = tmp_path / "smoke"
        context = AppContext(materializer=Materializer.create())

        call_create(doc, context, root=root, keep=False)

        assert not root.exists()


class TestCheckCommand:
    """Tests for the check command."""

    def test_check_valid(self, mock_tui: MagicMock, doc: Path) -> None:
        """Test a valid document reports success."""
        cli.check(file=doc)

        mock_tui.show_entries.assert_called_once()
        mock_tui.show_success.assert_called_once()
        mock_tui.show_error.assert_not_called()

    def test_check_problems(self, mock_tui: MagicMock, tmp_path: Path) -> None:
        """Test problems are printed and exit with status 1."""
        path = tmp_path / "bad.yaml"
        path.write_text(
            "root: /t\n"
            "entries:\n"
            "  - path: ../escape\n"
            "    type: empty_file\n"
        )

        with pytest.raises(typer.Exit) as exc_info:
            cli.check(file=path)

        assert exc_info.value.exit_code == 1
        mock_tui.show_error.assert_called_once_with(
            "Entry #0 resolves outside the root: ../escape"
        )

    def test_check_warnings(self, mock_tui: MagicMock, tmp_path: Path) -> None:
        """Test duplicates are warnings in tolerant mode."""
        path = tmp_path / "dup.yaml"
        path.write_text(
            "entries:\n"
            "  - path: a\n"
            "    type: empty_file\n"
            "  - path: a\n"
            "    type: empty_file\n"
        )

        cli.check(file=path)

        mock_tui.show_warning.assert_called_once()
        mock_tui.show_success.assert_called_once()


class TestVersionAndLogging:
    """Tests for the app callback helpers."""

    def test_version_callback(self, mock_tui: MagicMock) -> None:
        """Test --version prints and exits."""
        with pytest.raises(typer.Exit):
            cli.version_callback(True)

        mock_tui.console.print.assert_called_once_with(f"tree-fs v{cli.__version__}")

    def test_version_callback_noop(self, mock_tui: MagicMock) -> None:
        """Test the callback does nothing without the flag."""
        cli.version_callback(False)

        mock_tui.console.print.assert_not_called()

    def test_configure_logging_verbose(self) -> None:
        """Test --verbose enables debug logging."""
        import logging

        cli.configure_logging(True)
        try:
            assert logging.getLogger().level == logging.DEBUG
        finally:
            cli.configure_logging(False)

        assert logging.getLogger().level == logging.WARNING
