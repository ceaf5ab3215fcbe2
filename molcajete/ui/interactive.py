#!/usr/bin/env python3
"""
molcajete.ui.interactive - prompt for plugin names when none are given
"""
import re
from typing import Dict, List, Optional

import click

from ..config import canonical_id


def parse_selection(text: str) -> List[str]:
    """Split a comma and/or whitespace separated list of names."""
    return [part for part in re.split(r"[,\s]+", text or "") if part]


def prompt_for_plugins(configured: Optional[Dict[str, str]] = None) -> List[str]:
    """
    Ask the user which plugins to activate.

    Already-configured plugins are listed first so the user knows what is on.
    Returns an empty list when the user enters nothing.
    """
    configured = configured or {}
    click.echo("\n" + "=" * 60)
    click.echo(click.style("PLUGIN SETUP", bold=True))
    click.echo("=" * 60)
    if configured:
        click.echo("Already configured:")
        for cid, version in configured.items():
            click.echo(f"  • {cid} ({version})")
    else:
        click.echo("No plugins configured yet.")
    click.echo()

    text = click.prompt(
        click.style("Plugins to activate (e.g. git, res)", fg='yellow', bold=True),
        default="", show_default=False, type=str,
    )
    names = parse_selection(text)
    new = [n for n in names if canonical_id(n) not in configured]
    if names and not new:
        click.echo("All selected plugins are already configured.")
    return names
