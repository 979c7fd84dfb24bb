"""
Configuration file support for appmanifest.

Loads settings from ``~/.config/appmanifest/config.yaml`` (or
``$XDG_CONFIG_HOME/appmanifest/config.yaml``) and exposes them as a typed
dataclass. The file holds the preferred editor and the folder aliases.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger("appmanifest.config")


def default_config_path() -> Path:
    """Return the default configuration file path.

    Uses ``$XDG_CONFIG_HOME/appmanifest/config.yaml`` when set, otherwise
    falls back to ``~/.config/appmanifest/config.yaml``.
    """
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "appmanifest" / "config.yaml"
    return Path.home() / ".config" / "appmanifest" / "config.yaml"


@dataclass
class ToolConfig:
    """Top-level configuration loaded from the YAML file."""

    editor: Optional[str] = None
    aliases: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ToolConfig":
        """Construct a ``ToolConfig`` from a parsed YAML dictionary."""
        if not isinstance(data, dict):
            return cls()

        aliases: Dict[str, str] = {}
        raw_aliases = data.get("aliases") or {}
        if isinstance(raw_aliases, dict):
            for name, folder in raw_aliases.items():
                if folder is None:
                    logger.warning("Skipping alias without a folder: %s", name)
                    continue
                aliases[str(name)] = str(folder)
        else:
            logger.warning("Ignoring invalid aliases section: %s", raw_aliases)

        editor = data.get("editor")
        return cls(editor=str(editor) if editor else None, aliases=aliases)

    @classmethod
    def from_file(cls, path: Path) -> "ToolConfig":
        """Read a YAML file and return a ``ToolConfig``.

        Returns an empty default config on any error.
        """
        try:
            with open(path, "r") as f:
                data = yaml.safe_load(f.read())
            if data is None:
                return cls()
            return cls.from_dict(data)
        except (IOError, yaml.YAMLError) as e:
            logger.error("Failed to load config from %s: %s", path, e)
            return cls()

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "ToolConfig":
        """Main entry point: load config from *config_path* or the default location.

        Returns an empty config if the file does not exist.
        """
        path = config_path or default_config_path()
        if not path.exists():
            return cls()
        return cls.from_file(path)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        if self.editor:
            data["editor"] = self.editor
        data["aliases"] = dict(sorted(self.aliases.items()))
        return data

    def save(self, config_path: Optional[Path] = None) -> Path:
        """Write the configuration back as YAML and return the path written."""
        path = config_path or default_config_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            yaml.safe_dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)
        logger.debug("Saved config to %s", path)
        return path

    def resolve_folder(self, folder: str) -> str:
        """Return the folder registered under the alias *folder*, or *folder* itself."""
        aliased = self.aliases.get(folder)
        if aliased is None:
            return folder
        resolved = str(Path(aliased).expanduser())
        logger.debug("Resolved alias %s to %s", folder, resolved)
        return resolved
