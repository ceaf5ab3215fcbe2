#!/usr/bin/env python3
"""
molcajete.main - CLI entry point
"""
import click
import logging
import sys
from pathlib import Path

from molcajete import __version__
from molcajete.config import config_path
from molcajete.engine.pipeline import setup as run_setup
from molcajete.errors import SetupError
from molcajete.storage.settings import configured_plugins


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def cli(verbose):
    """molcajete - activate plugins in the host application's settings"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command("setup")
@click.argument("names", nargs=-1)
def setup_cmd(names):
    """Activate plugins NAMES (e.g. git res), keeping all other settings.

    With no NAMES, prompts for them interactively.
    """
    if not names:
        from molcajete.ui.interactive import prompt_for_plugins
        try:
            current = configured_plugins()
        except SetupError as e:
            click.echo(click.style(f"✗ {e}", fg='red'), err=True)
            sys.exit(1)
        names = prompt_for_plugins(current)
        if not names:
            click.echo("Nothing selected; settings left unchanged.")
            return

    result = run_setup(names)
    if not result.success:
        click.echo(click.style(f"✗ Setup failed: {result.message}", fg='red'), err=True)
        sys.exit(1)
    click.echo(click.style(f"✓ {result.message}", fg='green'))


@cli.command("plugins")
def list_plugins():
    """List plugins configured in the settings file."""
    try:
        plugins = configured_plugins()
    except SetupError as e:
        click.echo(click.style(f"✗ {e}", fg='red'), err=True)
        sys.exit(1)

    if not plugins:
        click.echo("No plugins configured. Add some with: molcajete setup <name>")
        return

    click.echo("\n" + "=" * 60)
    click.echo("CONFIGURED PLUGINS")
    click.echo("=" * 60)
    for cid, version in plugins.items():
        click.echo(f"{cid:<40} | {version}")
    click.echo("=" * 60)
    click.echo(f"Total: {len(plugins)} plugins\n")


@cli.command("config-path")
def show_config_path():
    """Print the settings file location."""
    click.echo(str(config_path()))


# ============================================================================
# Developer Commands
# ============================================================================

@cli.group()
def dev():
    """Developer utilities."""
    pass


@dev.command("bump")
@click.argument("part", type=click.Choice(['major', 'minor', 'patch']), default='patch')
@click.option("--file", "-f", "manifest", type=click.Path(dir_okay=False, path_type=Path), default=None,
              help="Plugin manifest (default: molcajete/.claude-plugin/plugin.json)")
def dev_bump_cmd(part, manifest):
    """Bump the plugin manifest version."""
    from molcajete.devtools import dev_bump
    sys.exit(dev_bump(part, manifest))


@dev.command("plugin-dir")
@click.argument("name")
@click.option("--cache", "-c", type=click.Path(file_okay=False, path_type=Path), default=None,
              help="Plugin cache directory (default: ~/.claude/plugins/cache)")
def dev_plugin_dir(name, cache):
    """Print where plugin NAME is installed."""
    from molcajete.devtools import find_plugin_dir
    try:
        click.echo(str(find_plugin_dir(name, cache)))
    except (FileNotFoundError, LookupError) as e:
        click.echo(f"ERROR: {e}", err=True)
        sys.exit(1)


def main():
    """Main entry point."""
    cli()


if __name__ == '__main__':
    main()
