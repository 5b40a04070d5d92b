"""
Unit tests for destination resolution.
"""

import pytest
from pathlib import Path
from unittest.mock import patch

from funcsetup.core.directory import (
    binary_file_name,
    ensure_directory,
    resolve_destination,
)
from funcsetup.core.exceptions import DirectoryCreationError, Stage


class TestBinaryFileName:
    """Test binary_file_name function."""

    def test_default_name(self):
        assert binary_file_name() == "func"

    def test_custom_name(self):
        assert binary_file_name("kn-func") == "kn-func"

    def test_windows_adds_exe(self):
        assert binary_file_name(windows=True) == "func.exe"
        assert binary_file_name("kn-func", windows=True) == "kn-func.exe"

    def test_windows_keeps_existing_exe(self):
        assert binary_file_name("func.exe", windows=True) == "func.exe"

    def test_exe_not_added_elsewhere(self):
        assert binary_file_name("func", windows=False) == "func"


class TestEnsureDirectory:
    """Test ensure_directory function."""

    def test_creates_nested_directories(self, tmp_path):
        target = tmp_path / "a" / "b" / "c"

        result = ensure_directory(target)

        assert target.is_dir()
        assert result == target.absolute()

    def test_existing_directory(self, tmp_path):
        assert ensure_directory(tmp_path) == tmp_path.absolute()

    def test_creation_failure(self, tmp_path):
        """Test mkdir errors are reported with the OS message."""
        blocker = tmp_path / "file"
        blocker.write_text("not a directory")

        with pytest.raises(DirectoryCreationError) as exc_info:
            ensure_directory(blocker / "sub")

        assert exc_info.value.stage == Stage.RESOLVE_DESTINATION
        assert isinstance(exc_info.value.cause, OSError)
        assert str(exc_info.value.cause) in str(exc_info.value)

    def test_permission_denied(self, tmp_path):
        with patch.object(Path, "mkdir", side_effect=PermissionError("denied")):
            with pytest.raises(DirectoryCreationError, match="denied"):
                ensure_directory(tmp_path / "new")


class TestResolveDestination:
    """Test resolve_destination function."""

    def test_defaults_to_cwd(self, tmp_path):
        result = resolve_destination(cwd=tmp_path)
        assert result == tmp_path.absolute() / "func"

    def test_explicit_destination(self, tmp_path):
        target = tmp_path / "out"

        result = resolve_destination(str(target), cwd=tmp_path / "ignored")

        assert result == target / "func"
        assert target.is_dir()

    def test_relative_destination(self, tmp_path):
        result = resolve_destination("bin", cwd=tmp_path)

        assert result == tmp_path.absolute() / "bin" / "func"
        assert (tmp_path / "bin").is_dir()

    def test_windows_name(self, tmp_path):
        result = resolve_destination(str(tmp_path), name="kn", windows=True)
        assert result.name == "kn.exe"

    def test_result_is_absolute(self, tmp_path):
        assert resolve_destination(str(tmp_path)).is_absolute()
