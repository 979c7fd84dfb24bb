"""
Package links for appmanifest.

A link records a package folder, relative to the application folder, in the
application's manifest so that the package is picked up while developing.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from rich.console import Console

from appmanifest_py.filesystem import FileSystem
from appmanifest_py.manifest import FILE, ApplicationManifest

logger = logging.getLogger("appmanifest.links")


@dataclass
class LinkInput:
    """Parsed request for the link command."""

    app_folder: str
    package_folder: Optional[str] = None
    remove_flag: bool = False
    clean_all_flag: bool = False


def list_current_links(
    folder: str, manifest: ApplicationManifest, console: Console
) -> None:
    """Print the package folders linked to the application in ``folder``."""
    if manifest.linked_folders:
        console.print(f"  Links for {folder}", soft_wrap=True, markup=False)
        for linked in manifest.linked_folders:
            console.print(f"    {linked}", soft_wrap=True, markup=False)
    else:
        console.print(
            f"  No package links for {folder}", soft_wrap=True, markup=False
        )


def relative_link(package_folder: str, app_folder: str) -> str:
    """Return ``package_folder`` expressed relative to ``app_folder``."""
    package = Path(package_folder).expanduser().resolve()
    app = Path(app_folder).expanduser().resolve()
    return Path(os.path.relpath(package, app)).as_posix()


class LinkController:
    """Adds, removes and lists package links in an application manifest."""

    def __init__(self, file_system: FileSystem, console: Optional[Console] = None):
        self.file_system = file_system
        self.console = console or Console()

    def execute(self, input: LinkInput) -> None:
        manifest = self.file_system.load_from_file(input.app_folder, FILE)

        if input.clean_all_flag:
            if not manifest.linked_folders:
                list_current_links(input.app_folder, manifest, self.console)
                return
            manifest.remove_all_links()
            self._persist(input, manifest)
            self._say(
                f"Removed all package links from the application at {input.app_folder}"
            )
            return

        if not input.package_folder:
            list_current_links(input.app_folder, manifest, self.console)
            return

        link = relative_link(input.package_folder, input.app_folder)

        if input.remove_flag:
            if not manifest.remove_link(link):
                self._say(
                    f"{input.package_folder} is not linked to the application "
                    f"at {input.app_folder}"
                )
                return
            self._persist(input, manifest)
            self._say(
                f"Removed the link to {input.package_folder} from the application "
                f"at {input.app_folder}"
            )
            return

        if not self.file_system.directory_exists(input.package_folder):
            self._say(f"Package folder {input.package_folder} does not exist")
            return

        manifest.add_link(link)
        self._persist(input, manifest)
        self._say(
            f"Linked application {input.app_folder} to package {input.package_folder}"
        )

    def _persist(self, input: LinkInput, manifest: ApplicationManifest) -> None:
        logger.debug(f"Saving {len(manifest.linked_folders)} link(s)")
        self.file_system.persist_to_file(manifest, input.app_folder, FILE)

    def _say(self, message: str) -> None:
        self.console.print(message, soft_wrap=True, markup=False)
