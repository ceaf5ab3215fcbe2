#!/usr/bin/env python3
"""
Developer utilities for molcajete.

Commands:
- molcajete dev bump [major|minor|patch]
    Bumps "version" in the plugin manifest (default
    molcajete/.claude-plugin/plugin.json under the current directory).
    Only the version string is rewritten; the rest of the file is untouched.
- molcajete dev plugin-dir NAME
    Prints the directory a plugin was installed to inside the host plugin
    cache (~/.claude/plugins/cache), i.e. the parent of its skills/ folder.
"""
from __future__ import annotations
import re
from pathlib import Path
from typing import Optional, Tuple

from .config import plugins_cache_dir
from .storage.settings import atomic_write_text

CSI = '\033['; RESET = CSI+'0m'; GREEN = CSI+'32m'; RED = CSI+'31m'; CYAN = CSI+'36m'

DEFAULT_MANIFEST = Path("molcajete") / ".claude-plugin" / "plugin.json"
BUMP_PARTS = ("major", "minor", "patch")

_VERSION_RE = re.compile(r'("version"\s*:\s*")(\d+)\.(\d+)\.(\d+)(")')

def _ok(msg): print(GREEN + "✔ " + msg + RESET)
def _info(msg): print(CYAN + "• " + msg + RESET)
def _warn(msg): print(RED + "! " + msg + RESET)


def next_version(current: str, part: str = "patch") -> str:
    major, minor, patch = (int(x) for x in current.split("."))
    if part == "major":
        major, minor, patch = major + 1, 0, 0
    elif part == "minor":
        minor, patch = minor + 1, 0
    elif part == "patch":
        patch += 1
    else:
        raise ValueError(f"unknown version part '{part}' (use one of: {', '.join(BUMP_PARTS)})")
    return f"{major}.{minor}.{patch}"


def bump_version(manifest: Path, part: str = "patch") -> Tuple[str, str]:
    """Bump the manifest's semantic version in place. Returns (old, new)."""
    manifest = Path(manifest)
    text = manifest.read_text(encoding="utf-8")
    m = _VERSION_RE.search(text)
    if not m:
        raise ValueError(f'no "version": "X.Y.Z" entry found in {manifest}')
    current = f"{m.group(2)}.{m.group(3)}.{m.group(4)}"
    new = next_version(current, part)
    updated = text[:m.start()] + m.group(1) + new + m.group(5) + text[m.end():]
    atomic_write_text(manifest, updated)
    return current, new


def find_plugin_dir(name: str, cache_dir: Optional[Path] = None) -> Path:
    """
    Locate an installed plugin in the cache.

    Matches <cache>/.../<name>/.../skills and returns the parent of skills/.
    The walk is sorted so the first match is stable.
    """
    cache = Path(cache_dir) if cache_dir is not None else plugins_cache_dir()
    if not cache.is_dir():
        raise FileNotFoundError(f"plugins cache not found: {cache}")
    for skills in sorted(cache.rglob("skills")):
        if not skills.is_dir():
            continue
        # name must sit above the skills folder's parent (the version dir)
        if name in skills.relative_to(cache).parts[:-2]:
            return skills.parent
    raise LookupError(f"plugin '{name}' not found in {cache}")


def dev_bump(part: str = "patch", manifest: Optional[Path] = None) -> int:
    manifest = Path(manifest) if manifest else Path.cwd() / DEFAULT_MANIFEST
    _info(f"Manifest: {manifest}")
    try:
        old, new = bump_version(manifest, part)
    except FileNotFoundError:
        _warn(f"{manifest} not found. Run from the repository root or pass --file.")
        return 1
    except Exception as e:
        _warn(str(e))
        return 1
    _ok(f"{old} -> {new}")
    return 0
