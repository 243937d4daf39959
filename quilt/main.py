"""Quilt CLI Main Entry Point

Quilt - stitches HTML pages together from layouts and fragments.

Usage:
    quilt -s site -o dist          # Render every page under site/ into dist/
    quilt                          # Use source/output from quilt.yaml
    quilt -c path/to/quilt.yaml    # Use specific config file
    quilt -s site -o dist --dry-run
    quilt --version                # Show version
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from ._version import __version__
from .builder import build
from .config import QuiltConfig, find_config_file, load_config
from .exceptions import ConfigError
from .utils import setup_logging

typer_app = typer.Typer(add_completion=False)


def _load(config_path: Optional[Path]) -> QuiltConfig:
    if config_path is None:
        config_path = find_config_file()
        if config_path is None:
            return QuiltConfig()
    return load_config(config_path)


@typer_app.command()
def cli(
    source: Optional[Path] = typer.Option(
        None, "-s", "--source", help="Source folder containing HTML templates."
    ),
    output: Optional[Path] = typer.Option(
        None, "-o", "--output", help="Destination folder for the rendered pages."
    ),
    config_path: Optional[Path] = typer.Option(
        None, "-c", "--config", help="Path to quilt.yaml file."
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run", help="Print rendered pages without writing them."
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose output."),
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
) -> None:
    """Render HTML pages using layouts and fragments."""
    if version:
        typer.echo(f"quilt {__version__}")
        raise typer.Exit()

    setup_logging(verbose)

    try:
        config = _load(config_path).with_overrides(source=source, output=output)
    except (ConfigError, FileNotFoundError) as exc:
        typer.secho(f"Error: {exc}", err=True, fg=typer.colors.RED)
        raise typer.Exit(code=2)

    if config.source is None or config.output is None:
        missing = "--source" if config.source is None else "--output"
        typer.secho(
            f"Error: Missing option '{missing}' (not set in quilt.yaml either).",
            err=True,
            fg=typer.colors.RED,
        )
        raise typer.Exit(code=2)

    report = build(config, dry_run=dry_run)

    if dry_run:
        for page in report.rendered:
            typer.secho(f"==> {page.destination}", bold=True)
            typer.echo(page.content)

    if not report.ok:
        typer.secho(f"Error: {report.failure}", err=True, fg=typer.colors.RED)
        raise typer.Exit(code=1)

    typer.echo(f"Rendered {len(report.rendered)} page(s) into {config.output}")


def app() -> None:
    """Entry point for the installed `quilt` script."""
    typer_app()


if __name__ == "__main__":
    app()
