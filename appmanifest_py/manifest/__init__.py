"""
Application manifest model for appmanifest.

The manifest is a flat record stored at ``<folder>/FILE`` describing how a web
application wires up its environment, plus the package folders linked into it.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

FILE = "application-manifest.json"


@dataclass
class ApplicationManifest:
    """The persisted application manifest."""

    environment_assembly: Optional[str] = None
    environment_class_name: Optional[str] = None
    configuration_file: Optional[str] = None
    linked_folders: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ApplicationManifest":
        """Construct a manifest from a parsed JSON document, ignoring unknown keys."""
        if not isinstance(data, dict):
            return cls()

        return cls(
            environment_assembly=data.get("environment_assembly"),
            environment_class_name=data.get("environment_class_name"),
            configuration_file=data.get("configuration_file"),
            linked_folders=[str(f) for f in data.get("linked_folders") or []],
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def add_link(self, folder: str) -> None:
        if folder not in self.linked_folders:
            self.linked_folders.append(folder)

    def remove_link(self, folder: str) -> bool:
        """Remove ``folder`` from the links and return whether it was linked."""
        if folder in self.linked_folders:
            self.linked_folders.remove(folder)
            return True
        return False

    def remove_all_links(self) -> None:
        self.linked_folders.clear()
