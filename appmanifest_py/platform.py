"""
Platform detection helpers for appmanifest.

Centralizes macOS, Linux and Windows differences so the rest of the codebase
can call simple functions instead of scattering ``sys.platform`` checks.
"""

import os
import shlex
import sys
from typing import List, Optional


def is_macos() -> bool:
    """Return True when running on macOS."""
    return sys.platform == "darwin"


def is_linux() -> bool:
    """Return True when running on Linux."""
    return sys.platform.startswith("linux")


def is_windows() -> bool:
    """Return True when running on Windows."""
    return sys.platform.startswith("win")


def default_editor_command() -> List[str]:
    """Return the platform-appropriate command that opens a file for editing."""
    if is_macos():
        return ["open", "-t"]
    if is_windows():
        return ["notepad"]
    return ["xdg-open"]


def editor_command(target: str, editor: Optional[str] = None) -> List[str]:
    """Return the command list to open *target* in an editor.

    The configured *editor* wins, then ``$VISUAL``, then ``$EDITOR``, then the
    platform default.
    """
    chosen = editor or os.environ.get("VISUAL") or os.environ.get("EDITOR")
    if chosen:
        return shlex.split(chosen) + [target]
    return default_editor_command() + [target]
