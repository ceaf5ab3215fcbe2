#!/usr/bin/env python3
"""
Path and identifier helpers for molcajete.

Settings file lives at ~/.claude/settings.json and looks like:
{
  "plugins": { "molcajete/git": "latest", "molcajete/res": "latest" },
  ...any other keys, kept as-is...
}

Paths are computed from Path.home() on every call so HOME can be redirected
(tests do this with monkeypatch).
"""
from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, Optional

Config = Dict[str, Any]

APP_DIR_NAME = ".claude"
SETTINGS_FILE = "settings.json"
PLUGINS_KEY = "plugins"
PLUGIN_NAMESPACE = "molcajete"
DEFAULT_VERSION = "latest"
DIR_MODE = 0o700


def app_dir() -> Path:
    return Path.home() / APP_DIR_NAME


def config_path(path: Optional[Path] = None) -> Path:
    """Resolve the settings file, defaulting to ~/.claude/settings.json."""
    if path is not None:
        return Path(path)
    return app_dir() / SETTINGS_FILE


def plugins_cache_dir() -> Path:
    return app_dir() / "plugins" / "cache"


def canonical_id(name: str) -> str:
    """
    Normalize a plugin identifier to "<namespace>/<name>".

    Names are case-insensitive. An identifier that already has a namespace
    ("molcajete/git", "other/tool") is only normalized, never re-prefixed.
    Returns "" for a blank name.
    """
    name = (name or "").strip().lower()
    if not name:
        return ""
    if "/" in name:
        return name
    return f"{PLUGIN_NAMESPACE}/{name}"
