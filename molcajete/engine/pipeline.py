#!/usr/bin/env python3
"""
Setup pipeline: read settings, merge requested plugins, write settings back.

setup() is the single entry point the CLI calls. It never raises; every
failure comes back as a SetupResult with success=False and a message that
names the cause.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional

from ..config import config_path
from ..errors import SetupError
from ..storage.settings import read_config, write_config
from .merger import canonical_ids, merge

logger = logging.getLogger("molcajete.setup")


@dataclass
class SetupResult:
    """Outcome of a setup run."""

    success: bool
    message: str
    plugins: List[str] = field(default_factory=list)
    path: Optional[Path] = None
    error: Optional[Exception] = None


def _summary(ids: List[str], path: Path, created: bool) -> str:
    if not ids:
        if created:
            return f"No plugins requested; created {path} with no plugins"
        return f"No plugins requested; {path} is up to date"
    noun = "plugin" if len(ids) == 1 else "plugins"
    return f"Configured {len(ids)} {noun} ({', '.join(ids)}) in {path}"


def setup(requested: Iterable[str], path: Optional[Path] = None) -> SetupResult:
    ids: List[str] = []
    try:
        path = config_path(path)
        # a lone name, not an iterable of characters
        if isinstance(requested, str):
            requested = [requested]
        requested = list(requested)
        ids = canonical_ids(requested)
        existing = read_config(path)
        if existing is None:
            logger.info("settings file %s not found; it will be created", path)
        merged = merge(existing, requested)
        write_config(merged, path)
    except SetupError as e:
        logger.debug("setup failed: %s", e)
        return SetupResult(success=False, message=str(e), plugins=ids, path=path, error=e)
    except Exception as e:
        logger.exception("unexpected failure while updating %s", path)
        return SetupResult(
            success=False,
            message=f"Unexpected error while updating {path}: {e}",
            plugins=ids, path=path, error=e,
        )
    return SetupResult(success=True, message=_summary(ids, path, existing is None), plugins=ids, path=path)
