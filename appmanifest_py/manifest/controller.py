"""
Create, modify and report on an application manifest.

The controller decides once per invocation, from what is on disk and the
requested flags, whether to create, overwrite, modify or reject, then prints
the resulting manifest.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from rich.console import Console

from appmanifest_py.filesystem import FileSystem
from appmanifest_py.manifest import FILE, ApplicationManifest
from appmanifest_py.manifest.links import list_current_links
from appmanifest_py.report import TwoColumnReport

logger = logging.getLogger("appmanifest.manifest")


@dataclass
class ManifestInput:
    """Parsed request for the manifest command."""

    folder: str
    open_flag: bool = False
    create_flag: bool = False  # creates, but does not overwrite
    force_flag: bool = False  # allows create to overwrite
    assembly_flag: Optional[str] = None
    environment_class_name_flag: Optional[str] = None


class ManifestController:
    """Runs the manifest command against a file system."""

    def __init__(self, file_system: FileSystem, console: Optional[Console] = None):
        self.file_system = file_system
        self.console = console or Console()

    def apply_changes(
        self, input: ManifestInput, manifest: ApplicationManifest
    ) -> bool:
        """
        Copy the non-empty field flags from ``input`` onto ``manifest``.

        Returns:
            True if any field was set, False otherwise
        """
        did_change = False

        if input.assembly_flag:
            manifest.environment_assembly = input.assembly_flag
            did_change = True

        if input.environment_class_name_flag:
            manifest.environment_class_name = input.environment_class_name_flag
            did_change = True

        return did_change

    def execute(self, input: ManifestInput) -> None:
        if self.file_system.file_exists(input.folder, FILE):
            if not input.create_flag:
                self._modify_and_list_existing_manifest(input)
            elif input.force_flag:
                self.create_manifest(input)
            else:
                self.write_cannot_overwrite_file_without_force(input.folder)
        elif input.create_flag:
            self.create_manifest(input)
        else:
            self.write_manifest_cannot_be_found(input.folder)

    def create_manifest(self, input: ManifestInput) -> None:
        """Build a fresh manifest from the flags alone and persist it."""
        logger.debug(f"Creating a new manifest in {input.folder}")
        manifest = ApplicationManifest()
        self.apply_changes(input, manifest)
        self._persist(input, manifest)

        self.write_manifest(input, manifest)
        self._open_if_requested(input)

    def _modify_and_list_existing_manifest(self, input: ManifestInput) -> None:
        manifest = self.file_system.load_from_file(input.folder, FILE)
        if self.apply_changes(input, manifest):
            self._persist(input, manifest)
        else:
            logger.debug("No changes requested, manifest left untouched")

        self.write_manifest(input, manifest)
        self._open_if_requested(input)

    def _open_if_requested(self, input: ManifestInput) -> None:
        if input.open_flag:
            self.file_system.open_in_editor(input.folder, FILE)

    def _persist(self, input: ManifestInput, manifest: ApplicationManifest) -> None:
        path = self.file_system.combine(input.folder, FILE)
        self.console.print()
        self.console.print(
            f"Persisted changes to {path}", soft_wrap=True, markup=False
        )
        self.console.print()

        self.file_system.persist_to_file(manifest, input.folder, FILE)

    def write_manifest(
        self, input: ManifestInput, manifest: ApplicationManifest
    ) -> None:
        path = self.file_system.combine(input.folder, FILE)
        report = TwoColumnReport(f"Application Manifest for {path}")
        report.add("environment_assembly", manifest.environment_assembly)
        report.add("environment_class_name", manifest.environment_class_name)
        report.add("configuration_file", manifest.configuration_file)

        report.write(self.console)

        self.console.print()
        self.console.print()

        list_current_links(input.folder, manifest, self.console)

    def write_manifest_cannot_be_found(self, folder: str) -> None:
        path = self.file_system.combine(folder, FILE)
        self.console.print(
            f"Application Manifest file at {path} does not exist",
            soft_wrap=True,
            markup=False,
        )

    def write_cannot_overwrite_file_without_force(self, folder: str) -> None:
        path = self.file_system.combine(folder, FILE)
        self.console.print(
            f"File {path} already exists, use the '-f' flag to overwrite "
            "the existing file",
            soft_wrap=True,
            markup=False,
        )
