#!/usr/bin/env python3
"""
molcajete.storage.settings - read and atomically write the settings file

Design notes:
 - A missing file is not an error: read_config() returns None and the next
   write creates it.
 - A file that exists but is not a JSON object raises MalformedConfigError
   and is never repaired, moved or overwritten.
 - Writes go to a temp file next to the target and are moved into place with
   os.replace(), so readers see either the old or the new content.
 - Serialized text is parsed back before anything touches the disk.
"""
from __future__ import annotations
import os
import json
import stat
import logging
import tempfile
from pathlib import Path
from typing import Dict, Optional

from ..config import Config, DIR_MODE, PLUGINS_KEY, config_path
from ..errors import (
    AccessDeniedError,
    ConfigIOError,
    DirectoryCreateError,
    MalformedConfigError,
    SerializationError,
)

logger = logging.getLogger("molcajete.settings")


def read_config(path: Optional[Path] = None) -> Optional[Config]:
    """
    Load the settings file.

    Returns None when the file does not exist. Raises MalformedConfigError
    when it is not a JSON object (or its "plugins" value is not an object),
    AccessDeniedError when it cannot be opened for reading.
    """
    path = config_path(path)
    try:
        with open(path, "r", encoding="utf-8") as fh:
            raw = fh.read()
    except FileNotFoundError:
        logger.debug("no settings file at %s", path)
        return None
    except PermissionError as e:
        raise AccessDeniedError(path, "read") from e
    except UnicodeDecodeError as e:
        raise MalformedConfigError(path, f"not valid UTF-8 text ({e.reason} at byte {e.start})") from e
    except OSError as e:
        raise ConfigIOError(f"Could not read {path}: {e}", path) from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise MalformedConfigError(path, f"{e.msg} at line {e.lineno}, column {e.colno}") from e

    if not isinstance(data, dict):
        raise MalformedConfigError(path, f"top-level value must be an object, not {type(data).__name__}")
    plugins = data.get(PLUGINS_KEY)
    if plugins is not None and not isinstance(plugins, dict):
        raise MalformedConfigError(path, f'"{PLUGINS_KEY}" must be an object, not {type(plugins).__name__}')
    return data


def serialize_config(config: Config, path: Optional[Path] = None) -> str:
    """Render settings as 2-space indented JSON and verify it parses back."""
    try:
        text = json.dumps(config, indent=2, ensure_ascii=False, allow_nan=False) + "\n"
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Settings could not be serialized: {e}", path) from e
    try:
        parsed = json.loads(text)
    except ValueError as e:
        raise SerializationError(f"Serialized settings do not parse back: {e}", path) from e
    if not isinstance(parsed, dict):
        raise SerializationError("Serialized settings are not a JSON object", path)
    return text


def ensure_parent_dir(path: Path) -> None:
    parent = path.parent
    try:
        parent.mkdir(mode=DIR_MODE, parents=True, exist_ok=True)
    except PermissionError as e:
        raise AccessDeniedError(parent, "create", directory=True) from e
    except OSError as e:
        raise DirectoryCreateError(f"Could not create directory {parent}: {e}", parent) from e


def _discard_temp(name: Optional[str]) -> None:
    if not name:
        return
    try:
        os.remove(name)
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.warning("could not remove temporary file %s: %s", name, e)


def _existing_mode(path: Path) -> Optional[int]:
    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        return None


def _denied(path: Path, e: PermissionError) -> AccessDeniedError:
    # temp creation and rename need write access on the directory, not the file
    if e.filename and Path(e.filename) == path:
        return AccessDeniedError(path, "write")
    return AccessDeniedError(path.parent, "write to", directory=True)


def atomic_write_text(path: Path, text: str) -> None:
    """
    Write text to a temp sibling, fsync it, then rename it over path.

    An existing file keeps its permission bits; a new one is created 0600.
    """
    tmp_name = None
    try:
        mode = _existing_mode(path)
        with tempfile.NamedTemporaryFile(
            "w", delete=False, dir=str(path.parent),
            prefix=f".{path.name}.", suffix=".tmp", encoding="utf-8",
        ) as tmp:
            tmp_name = tmp.name
            tmp.write(text)
            tmp.flush()
            os.fsync(tmp.fileno())
        if mode is not None:
            os.chmod(tmp_name, mode)
        os.replace(tmp_name, path)
    except PermissionError as e:
        _discard_temp(tmp_name)
        raise _denied(path, e) from e
    except OSError as e:
        _discard_temp(tmp_name)
        raise ConfigIOError(f"Could not write {path}: {e}", path) from e
    except BaseException:
        _discard_temp(tmp_name)
        raise


def write_config(config: Config, path: Optional[Path] = None) -> Path:
    """
    Persist settings atomically.

    Nothing on disk changes unless the whole file is written and renamed into
    place. A symlinked settings file is updated through the link, which is
    left in place. Returns the path written.
    """
    path = config_path(path)
    text = serialize_config(config, path)
    ensure_parent_dir(path)
    target = Path(os.path.realpath(path)) if path.is_symlink() else path
    atomic_write_text(target, text)
    logger.debug("wrote %d bytes to %s", len(text.encode("utf-8")), path)
    return path


def configured_plugins(path: Optional[Path] = None) -> Dict[str, str]:
    """Return the "plugins" mapping of the current settings ({} if absent)."""
    cfg = read_config(path)
    if not cfg:
        return {}
    return dict(cfg.get(PLUGINS_KEY) or {})
