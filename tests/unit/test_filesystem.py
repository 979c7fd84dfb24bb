"""
Tests for the local file system.
"""

import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

import orjson
import pytest

from appmanifest_py.filesystem.local import LocalFileSystem
from appmanifest_py.manifest import FILE, ApplicationManifest


@pytest.fixture
def fs() -> LocalFileSystem:
    return LocalFileSystem(editor="myeditor --wait")


def test_combine(fs: LocalFileSystem) -> None:
    assert fs.combine("app", FILE) == Path("app") / FILE


def test_file_exists(fs: LocalFileSystem, tmp_path: Path) -> None:
    assert fs.file_exists(str(tmp_path), FILE) is False
    (tmp_path / FILE).write_text("{}")
    assert fs.file_exists(str(tmp_path), FILE) is True


def test_directory_is_not_a_manifest(fs: LocalFileSystem, tmp_path: Path) -> None:
    (tmp_path / FILE).mkdir()
    assert fs.file_exists(str(tmp_path), FILE) is False
    assert fs.directory_exists(str(tmp_path / FILE)) is True


def test_load_missing_returns_empty_manifest(
    fs: LocalFileSystem, tmp_path: Path
) -> None:
    assert fs.load_from_file(str(tmp_path), FILE) == ApplicationManifest()


def test_persist_creates_folder_and_writes_json(
    fs: LocalFileSystem, tmp_path: Path
) -> None:
    folder = tmp_path / "nested" / "app"
    manifest = ApplicationManifest(
        environment_assembly="Web.Env", linked_folders=["../core"]
    )

    fs.persist_to_file(manifest, str(folder), FILE)

    raw = (folder / FILE).read_bytes()
    assert raw.endswith(b"\n")
    assert orjson.loads(raw)["environment_assembly"] == "Web.Env"
    assert fs.load_from_file(str(folder), FILE) == manifest


def test_load_ignores_unknown_keys(fs: LocalFileSystem, tmp_path: Path) -> None:
    (tmp_path / FILE).write_text(
        '{"environment_class_name": "Web.Env.Setup", "assemblies": ["a"]}'
    )
    manifest = fs.load_from_file(str(tmp_path), FILE)
    assert manifest == ApplicationManifest(environment_class_name="Web.Env.Setup")


def test_load_non_object_returns_empty_manifest(
    fs: LocalFileSystem, tmp_path: Path
) -> None:
    (tmp_path / FILE).write_text("[1, 2, 3]")
    assert fs.load_from_file(str(tmp_path), FILE) == ApplicationManifest()


def test_load_malformed_json_raises(fs: LocalFileSystem, tmp_path: Path) -> None:
    (tmp_path / FILE).write_text("{not json")
    with pytest.raises(orjson.JSONDecodeError):
        fs.load_from_file(str(tmp_path), FILE)


@patch("appmanifest_py.filesystem.local.subprocess.run")
def test_open_in_editor(mock_run: MagicMock, fs: LocalFileSystem) -> None:
    assert fs.open_in_editor("app", FILE) is True
    mock_run.assert_called_once_with(
        ["myeditor", "--wait", str(Path("app") / FILE)], check=True
    )


@patch("appmanifest_py.filesystem.local.subprocess.run")
def test_open_in_editor_missing_binary(
    mock_run: MagicMock, fs: LocalFileSystem
) -> None:
    mock_run.side_effect = FileNotFoundError
    assert fs.open_in_editor("app", FILE) is False


@patch("appmanifest_py.filesystem.local.subprocess.run")
def test_open_in_editor_failure(mock_run: MagicMock, fs: LocalFileSystem) -> None:
    mock_run.side_effect = subprocess.CalledProcessError(1, ["myeditor"])
    assert fs.open_in_editor("app", FILE) is False
