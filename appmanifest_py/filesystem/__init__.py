"""
File system package for appmanifest.

This module provides the base class the manifest commands use to reach the
disk, so that they can be exercised against a substitute in tests.
"""

import abc
from pathlib import Path

from appmanifest_py.manifest import ApplicationManifest


class FileSystem(abc.ABC):
    """Base class for manifest storage."""

    @abc.abstractmethod
    def file_exists(self, folder: str, name: str) -> bool:
        """Return True if ``name`` exists inside ``folder``."""
        pass

    @abc.abstractmethod
    def directory_exists(self, folder: str) -> bool:
        """Return True if ``folder`` is an existing directory."""
        pass

    @abc.abstractmethod
    def load_from_file(self, folder: str, name: str) -> ApplicationManifest:
        """
        Load a manifest from ``folder``/``name``.

        Returns:
            The parsed manifest, or an empty one if the file does not exist
        """
        pass

    @abc.abstractmethod
    def persist_to_file(
        self, manifest: ApplicationManifest, folder: str, name: str
    ) -> None:
        """
        Write a manifest to ``folder``/``name``.

        Args:
            manifest: The manifest to write
            folder: Destination folder, created if missing
            name: File name inside the folder
        """
        pass

    @abc.abstractmethod
    def combine(self, folder: str, name: str) -> Path:
        """Return the path of ``name`` inside ``folder``."""
        pass

    @abc.abstractmethod
    def open_in_editor(self, folder: str, name: str) -> bool:
        """
        Open ``folder``/``name`` in a text editor.

        Returns:
            True if the editor ran successfully, False otherwise
        """
        pass
