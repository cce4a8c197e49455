"""Command line interface for readme-sync."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape as escape_markup

from readme_sync.config import ConfigError, SyncConfig, load_config
from readme_sync.core.models import SpliceError
from readme_sync.core.synchronizer import create_synchronizer_from_config


console = Console()
app = typer.Typer(help="readme-sync - regenerate a README's list of markdown documents")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _build_config(config_path: Optional[Path], **overrides) -> SyncConfig:
    if config_path is not None:
        return load_config(config_path, **overrides)
    return SyncConfig(**{k: v for k, v in overrides.items() if v is not None})


@app.command()
def sync(
    directory: Optional[Path] = typer.Argument(
        None, help="Directory holding the markdown documents (default: current directory)."
    ),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="README filename inside the directory"),
    mode: Optional[str] = typer.Option(None, "--mode", "-m", help="overwrite, section or table"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML configuration file"),
    sort: Optional[bool] = typer.Option(None, "--sort/--no-sort", help="Sort documents by filename"),
    escape: Optional[bool] = typer.Option(None, "--escape/--no-escape", help="Escape markdown in titles"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print the result instead of writing it"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Regenerate the document listing of a README."""
    _setup_logging(verbose)
    try:
        settings = _build_config(
            config,
            directory=directory,
            output=output,
            mode=mode,
            sort=sort,
            escape=escape,
        )
    except ConfigError as e:
        console.print(f"[red]Configuration error:[/red] {escape_markup(str(e))}")
        raise typer.Exit(code=2)

    synchronizer = create_synchronizer_from_config(settings)
    try:
        result = synchronizer.sync(dry_run=dry_run)
    except SpliceError as e:
        console.print(f"[red]❌ {escape_markup(str(e))}. {escape_markup(settings.output)} was not modified.[/red]")
        raise typer.Exit(code=1)

    for warning in result.warnings:
        console.print(f"[yellow]Warning: {escape_markup(warning.path.name)}: {escape_markup(warning.error)}[/yellow]")

    if dry_run:
        typer.echo(result.content, nl=False)
        return

    console.print(f"✅ {result.target.name} updated")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
