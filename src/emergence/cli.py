"""Command-line entry points for emergence."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from emergence.client import AoC, validate_day
from emergence.config import Settings, load_settings
from emergence.errors import EmergenceError
from emergence.io.cache import cache_path_for
from emergence.util.logging import configure_logging
from emergence.util.paths import cache_root, default_cache_dir

app = typer.Typer(add_completion=False, help="Fetch and cache Advent of Code inputs")


def _resolve_year(year: Optional[int], settings: Settings) -> int:
    if year is not None:
        return year
    if settings.year is not None:
        return settings.year
    typer.echo("Provide --year or set 'year' in the settings file.", err=True)
    raise typer.Exit(code=2)


def _resolve_cache_dir(cache_dir: Optional[Path], settings: Settings) -> Path:
    if cache_dir is not None:
        return cache_root(cache_dir)
    if settings.cache_dir is not None:
        return cache_root(settings.cache_dir)
    return default_cache_dir()


@app.command()
def fetch(
    day: int = typer.Argument(..., help="Puzzle day (1-25)"),
    year: Optional[int] = typer.Option(None, "--year", "-y", help="Event year"),
    cache_dir: Optional[Path] = typer.Option(None, help="Cache directory (default ~/.aoc)"),
    token: Optional[str] = typer.Option(None, help="Session token (default $TOKEN or ./tokenfile)"),
    config: Optional[Path] = typer.Option(None, "--config", help="Settings file (YAML/TOML/JSON)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log cache and network activity"),
) -> None:
    """Print the input for a day, fetching it into the cache if needed."""

    try:
        settings = load_settings(config)
        logger = configure_logging(log_path=settings.log_path)
        if not verbose:
            logger.setLevel("WARNING")
        target_year = _resolve_year(year, settings)
        root = _resolve_cache_dir(cache_dir, settings)

        if token:
            aoc = AoC.with_path_and_token(target_year, root, token, service=settings.service)
        else:
            aoc = AoC.with_path(target_year, root, service=settings.service)
        text = aoc.read_or_fetch(day)
    except EmergenceError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    typer.echo(text, nl=False)


@app.command()
def path(
    day: int = typer.Argument(..., help="Puzzle day (1-25)"),
    year: Optional[int] = typer.Option(None, "--year", "-y", help="Event year"),
    cache_dir: Optional[Path] = typer.Option(None, help="Cache directory (default ~/.aoc)"),
    config: Optional[Path] = typer.Option(None, "--config", help="Settings file (YAML/TOML/JSON)"),
) -> None:
    """Print where the input for a day is (or would be) cached."""

    try:
        validate_day(day)
        settings = load_settings(config)
        root = _resolve_cache_dir(cache_dir, settings)
    except EmergenceError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    typer.echo(str(cache_path_for(_resolve_year(year, settings), day, root=root)))


def main() -> None:
    app()


__all__ = ["main", "app"]
