"""
appmanifest - create and edit application manifest files from the command line.

Wire up an application's environment, link packages, keep folder aliases handy.
"""

from importlib.metadata import version as _version

__version__ = _version("appmanifest")
