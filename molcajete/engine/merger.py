#!/usr/bin/env python3
"""
Merge requested plugin activations into existing settings.

merge() is pure: it never touches the disk and never mutates its input.
Every key other than "plugins" is carried over untouched.
"""
from __future__ import annotations
import copy
from typing import Any, Dict, Iterable, List, Optional, Set

from ..config import Config, DEFAULT_VERSION, PLUGINS_KEY, canonical_id


def canonical_ids(requested: Iterable[str]) -> List[str]:
    """Canonicalize, drop blanks and duplicates, sort."""
    return sorted({cid for cid in (canonical_id(name) for name in requested) if cid})


def merge(existing: Optional[Config], requested: Iterable[str]) -> Config:
    """
    Return a new config with every requested plugin set to "latest".

    Re-activating a plugin that is already present updates it in place, so
    merging the same set twice gives the same result as merging it once.
    """
    ids = canonical_ids(requested)
    merged = copy.deepcopy(existing) if existing is not None else {}
    if not ids and existing is not None:
        return merged

    plugins = merged.get(PLUGINS_KEY)
    if not isinstance(plugins, dict):
        plugins = {}
    plugins = _fold_aliases(plugins, set(ids))
    for cid in ids:
        plugins[cid] = DEFAULT_VERSION
    merged[PLUGINS_KEY] = plugins
    return merged


def _fold_aliases(plugins: Dict[str, Any], ids: Set[str]) -> Dict[str, Any]:
    """
    Rename existing entries that are another spelling of a requested plugin
    ("molcajete/Git", "git") to its canonical id, keeping the first one's
    position. Entries for plugins not being requested are left alone.
    """
    folded: Dict[str, Any] = {}
    for key, version in plugins.items():
        cid = canonical_id(key) if isinstance(key, str) else key
        if cid in ids:
            folded.setdefault(cid, version)
        else:
            folded[key] = version
    return folded
