"""
CLI entry point for favbrowse.

Modified: 2026-10-19
"""

import sys
import logging
import click
import yaml
from pathlib import Path
from typing import Optional
from favbrowse import __version__
from favbrowse.config.settings import Settings
from favbrowse.core.exceptions import FavbrowseError, ConfigurationError
from favbrowse.core.favorites import FavoritesRegistry
from favbrowse.core.projector import DetailProjector

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

config_option = click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Path to config file (default: ~/.config/favbrowse/config.yaml)",
)


def _load_settings(config_path: Optional[Path]) -> Settings:
    try:
        return Settings.load(config_path)
    except ConfigurationError as e:
        click.echo(f"✗ Configuration error: {e}", err=True)
        sys.exit(1)


def _configure_logging(settings: Settings) -> None:
    """Send logs to a file; the terminal belongs to the UI."""
    log_file = settings.log_file()
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        level=settings.logging.level.upper(),
        format=LOG_FORMAT,
        filename=str(log_file),
    )


@click.group()
@click.version_option(version=__version__)
def cli():
    """favbrowse - browse favorite directories in the terminal."""
    pass


@cli.command()
@config_option
def tui(config_path: Optional[Path]):
    """Launch the two-pane browser."""
    settings = _load_settings(config_path)

    try:
        import asyncio
        from favbrowse.tui.app import run_app

        _configure_logging(settings)
        favorites = FavoritesRegistry.from_settings(settings)

        app = asyncio.run(run_app(settings=settings, favorites=favorites))
    except KeyboardInterrupt:
        click.echo("\nGoodbye!")
        return
    except FavbrowseError as e:
        click.echo(f"✗ {e}", err=True)
        sys.exit(1)
    except Exception as e:
        click.echo(f"✗ TUI error: {e}", err=True)
        sys.exit(1)

    for item in app.selected_items:
        click.echo(f"Selected item: {item}")

    if app.return_code:
        sys.exit(app.return_code)


@cli.command(name="ls")
@click.argument("path", type=click.Path(path_type=Path))
@config_option
def list_directory(path: Path, config_path: Optional[Path]):
    """Print the details table for PATH without starting the UI."""
    settings = _load_settings(config_path)
    projector = DetailProjector(
        columns=settings.columns(),
        date_format=settings.display.date_format,
    )

    table = projector.project(str(path))
    for row in table.rows:
        click.echo(" ".join(row.cells).rstrip())

    if table.is_error:
        sys.exit(1)


@cli.command()
@config_option
def favorites(config_path: Optional[Path]):
    """List favorites in display order."""
    settings = _load_settings(config_path)

    try:
        registry = FavoritesRegistry.from_settings(settings)
    except ConfigurationError as e:
        click.echo(f"✗ Configuration error: {e}", err=True)
        sys.exit(1)

    width = max((len(label) for label in registry.labels()), default=0)
    for entry in registry:
        marker = "✓" if Path(entry.path).is_dir() else "✗"
        click.echo(f"{marker} {entry.label.ljust(width)}  {entry.path}")


@cli.command(name="config")
@config_option
def show_config(config_path: Optional[Path]):
    """Show the effective configuration."""
    settings = _load_settings(config_path)

    click.echo(f"favbrowse v{__version__}")
    click.echo(yaml.safe_dump(settings.to_dict(), sort_keys=False).rstrip())


if __name__ == "__main__":
    cli()
