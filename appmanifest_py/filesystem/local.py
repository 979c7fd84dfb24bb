"""
Local disk file system for appmanifest.

This module stores manifests as JSON files on the local disk and opens them
in the user's editor.
"""

import logging
import shlex
import subprocess
from pathlib import Path
from typing import Optional

import orjson  # High-performance JSON parser

from appmanifest_py.filesystem import FileSystem
from appmanifest_py.manifest import ApplicationManifest
from appmanifest_py.platform import editor_command

logger = logging.getLogger("appmanifest.filesystem.local")


class LocalFileSystem(FileSystem):
    """File system implementation backed by the local disk."""

    def __init__(self, editor: Optional[str] = None):
        """
        Initialize the local file system.

        Args:
            editor: Editor command line used by ``open_in_editor``. Falls back
                to ``$VISUAL``, ``$EDITOR`` and the platform default.
        """
        self.editor = editor

    def combine(self, folder: str, name: str) -> Path:
        return Path(folder) / name

    def file_exists(self, folder: str, name: str) -> bool:
        return self.combine(folder, name).is_file()

    def directory_exists(self, folder: str) -> bool:
        return Path(folder).is_dir()

    def load_from_file(self, folder: str, name: str) -> ApplicationManifest:
        path = self.combine(folder, name)
        if not path.exists():
            logger.debug(f"No manifest at {path}, starting from an empty one")
            return ApplicationManifest()

        logger.debug(f"Loading manifest from {path}")
        data = orjson.loads(path.read_bytes())
        return ApplicationManifest.from_dict(data)

    def persist_to_file(
        self, manifest: ApplicationManifest, folder: str, name: str
    ) -> None:
        path = self.combine(folder, name)
        path.parent.mkdir(parents=True, exist_ok=True)
        logger.debug(f"Writing manifest to {path}")
        options = orjson.OPT_INDENT_2 | orjson.OPT_APPEND_NEWLINE
        path.write_bytes(orjson.dumps(manifest.to_dict(), option=options))

    def open_in_editor(self, folder: str, name: str) -> bool:
        path = self.combine(folder, name)
        cmd = editor_command(str(path), self.editor)
        cmd_str = " ".join(shlex.quote(str(arg)) for arg in cmd)
        logger.info(f"Opening {path} with command: {cmd_str}")

        try:
            subprocess.run(cmd, check=True)
            return True
        except subprocess.CalledProcessError as e:
            logger.error(f"Editor exited with code {e.returncode} for {path}")
            return False
        except FileNotFoundError:
            logger.error(f"Editor command `{cmd[0]}` not found. Is it in your PATH?")
            return False
