#!/usr/bin/env python3
"""
molcajete.errors - failures raised while reading, merging or writing settings
"""
from __future__ import annotations
from pathlib import Path
from typing import Optional


class SetupError(Exception):
    """Base class for settings pipeline failures."""

    def __init__(self, message: str, path: Optional[Path] = None):
        self.path = path
        super().__init__(message)


class MalformedConfigError(SetupError):
    """Existing settings file is not a JSON object. Never auto-repaired."""

    def __init__(self, path: Path, detail: str):
        self.detail = detail
        super().__init__(
            f"Settings file {path} is malformed: {detail}. "
            f"Fix or remove it by hand; it was left unchanged.",
            path,
        )


class AccessDeniedError(SetupError):
    """Read or write refused by the filesystem."""

    def __init__(self, path: Path, action: str = "access", directory: bool = False):
        self.action = action
        self.directory = directory
        hint = f"chmod u+rwx {path}" if directory else f"chmod u+rw {path}"
        super().__init__(
            f"Permission denied trying to {action} {path}. "
            f"Check ownership of the path (e.g. `{hint}`) and try again.",
            path,
        )


class SerializationError(SetupError):
    """Serialized settings could not be parsed back. Nothing was written."""


class DirectoryCreateError(SetupError):
    """Parent directory of the settings file could not be created."""


class ConfigIOError(SetupError):
    """Any other I/O failure on the settings file."""
