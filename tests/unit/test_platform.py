"""Tests for the platform helpers module."""

import os
from unittest.mock import patch

from appmanifest_py.platform import (
    default_editor_command,
    editor_command,
    is_linux,
    is_macos,
    is_windows,
)


class TestIsMacos:
    def test_true_on_darwin(self) -> None:
        with patch("appmanifest_py.platform.sys") as mock_sys:
            mock_sys.platform = "darwin"
            assert is_macos() is True

    def test_false_on_linux(self) -> None:
        with patch("appmanifest_py.platform.sys") as mock_sys:
            mock_sys.platform = "linux"
            assert is_macos() is False


class TestIsLinux:
    def test_true_on_linux_variant(self) -> None:
        with patch("appmanifest_py.platform.sys") as mock_sys:
            mock_sys.platform = "linux2"
            assert is_linux() is True

    def test_false_on_darwin(self) -> None:
        with patch("appmanifest_py.platform.sys") as mock_sys:
            mock_sys.platform = "darwin"
            assert is_linux() is False


class TestIsWindows:
    def test_true_on_win32(self) -> None:
        with patch("appmanifest_py.platform.sys") as mock_sys:
            mock_sys.platform = "win32"
            assert is_windows() is True


class TestDefaultEditorCommand:
    def test_macos(self) -> None:
        with patch("appmanifest_py.platform.sys") as mock_sys:
            mock_sys.platform = "darwin"
            assert default_editor_command() == ["open", "-t"]

    def test_windows(self) -> None:
        with patch("appmanifest_py.platform.sys") as mock_sys:
            mock_sys.platform = "win32"
            assert default_editor_command() == ["notepad"]

    def test_linux(self) -> None:
        with patch("appmanifest_py.platform.sys") as mock_sys:
            mock_sys.platform = "linux"
            assert default_editor_command() == ["xdg-open"]


class TestEditorCommand:
    def test_configured_editor_wins(self) -> None:
        with patch.dict(os.environ, {"VISUAL": "vim", "EDITOR": "nano"}):
            assert editor_command("m.json", "code --wait") == [
                "code",
                "--wait",
                "m.json",
            ]

    def test_visual_before_editor(self) -> None:
        with patch.dict(os.environ, {"VISUAL": "vim", "EDITOR": "nano"}):
            assert editor_command("m.json") == ["vim", "m.json"]

    def test_editor_env(self) -> None:
        with patch.dict(os.environ, {"EDITOR": "nano"}, clear=True):
            assert editor_command("m.json") == ["nano", "m.json"]

    def test_platform_default(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            with patch("appmanifest_py.platform.sys") as mock_sys:
                mock_sys.platform = "linux"
                assert editor_command("m.json") == ["xdg-open", "m.json"]
