"""
Command line interface for the Infinity Spark world publisher.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Iterable, List, Optional

import typer
from rich.console import Console
from rich.table import Table

from . import __version__
from .config import ConfigError, SiteConfig, apply_overrides, get_overrides, load_config
from .pipeline import package_world
from .render import compose_index_document, index_statistics
from .util import write_text_file
from .web import build_deployment_guide, format_guide, generate_site_structure
from .worlds import World, WorldStoreError, find_world, load_worlds

console = Console()
app = typer.Typer(help="Publish Infinity Spark worlds as static HTML.")
logger = logging.getLogger(__name__)

LOG_LEVELS = ["critical", "error", "warning", "info", "debug"]


def _configure_logging(level_name: str) -> None:
    env_override = get_overrides().log_level
    level_str = (env_override or level_name or "info").upper()
    if level_str not in {lvl.upper() for lvl in LOG_LEVELS}:
        level_str = "INFO"
    logging.basicConfig(
        level=getattr(logging, level_str, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger.debug("Logging configured at %s", level_str)


def _resolve_file(value: Optional[Path]) -> Optional[Path]:
    """Ensure an input path exists and is a file; None passes through."""
    if value is None:
        return None
    resolved = value.expanduser().resolve()
    if not resolved.exists():
        raise typer.BadParameter(f"No file found at {resolved}")
    if not resolved.is_file():
        raise typer.BadParameter(f"Path must be a file, got directory: {resolved}")
    return resolved


def _load_site_or_exit(path: Optional[Path]) -> SiteConfig:
    try:
        site = load_config(path) if path else None
        return apply_overrides(site)
    except ConfigError as exc:
        console.print(f"[bold red]Configuration error:[/] {exc}")
        raise typer.Exit(code=1) from exc
    except ValueError as exc:
        console.print(f"[bold red]Invalid environment override:[/] {exc}")
        raise typer.Exit(code=1) from exc


def _load_worlds_or_exit(path: Path) -> List[World]:
    try:
        return load_worlds(path)
    except WorldStoreError as exc:
        console.print(f"[bold red]World store error:[/] {exc}")
        raise typer.Exit(code=1) from exc


def _find_world_or_exit(worlds: List[World], world_id: str) -> World:
    try:
        return find_world(worlds, world_id)
    except WorldStoreError as exc:
        console.print(f"[bold red]{exc}[/]")
        raise typer.Exit(code=1) from exc


def _print_rows(title: str, rows: Iterable[tuple[str, str]]) -> None:
    table = Table(title=title)
    table.add_column("Key")
    table.add_column("Value", overflow="fold")
    for key, value in rows:
        table.add_row(key, value)
    console.print(table)


_WORLDS_OPTION = typer.Option(
    ...,
    "--worlds",
    "-w",
    help="Path to the JSON world store.",
    callback=_resolve_file,
)
_CONFIG_OPTION = typer.Option(
    None,
    "--config",
    "-c",
    help="Path to a TOML site configuration (defaults to built-in branding).",
    callback=_resolve_file,
)


@app.callback(invoke_without_command=True)
def _root_command(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show infspark version and exit.",
    ),
    log_level: str = typer.Option(
        "info",
        "--log-level",
        help="Logging level (critical, error, warning, info, debug).",
        show_default=True,
        case_sensitive=False,
    ),
) -> None:
    """
    Default command when no subcommand is selected.
    """
    _configure_logging(log_level)

    if version:
        console.print(f"[bold green]infspark[/] {__version__}")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(
            "[bold yellow]infspark[/] is ready. Run [cyan]infspark build --worlds worlds.json[/] "
            "to publish every world.",
        )


@app.command()
def build(
    worlds: Path = _WORLDS_OPTION,
    config: Optional[Path] = _CONFIG_OPTION,
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Site directory (defaults to output_root from the config, then outputs/site).",
    ),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Rewrite documents even if their content is unchanged.",
    ),
) -> None:
    """
    Write the master index and one folder per world.
    """
    site = _load_site_or_exit(config)
    collection = _load_worlds_or_exit(worlds)
    logger.info("Building site for %d world(s)", len(collection))
    report = generate_site_structure(collection, site, output_root=output, force=force)
    _print_rows("Site Summary", report.summary_rows())
    for world_id in report.skipped:
        console.print(f"[yellow]Skipped[/] '{world_id}': not usable as a folder name.")
    if report.failures:
        console.print("[bold red]Some worlds could not be packaged:[/]")
        for world_id, reason in report.failures.items():
            console.print(f"- {world_id}: {reason}")
        raise typer.Exit(code=1)
    console.print("[bold green]Site up to date.[/]")


@app.command()
def deploy(
    worlds: Path = _WORLDS_OPTION,
    world_id: str = typer.Option(..., "--world", help="Id of the world to package."),
    config: Optional[Path] = _CONFIG_OPTION,
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Also save the generated document to this file.",
    ),
) -> None:
    """
    Package one world and show its URL, repository path and suggestions.
    """
    site = _load_site_or_exit(config)
    world = _find_world_or_exit(_load_worlds_or_exit(worlds), world_id)
    console.print(f"[yellow]Generating {world.title or world.id}...[/]")
    result = asyncio.run(package_world(world, site))
    _print_rows("Deployment Package", result.summary_rows())
    if not result.success:
        raise typer.Exit(code=1)

    if result.suggestions:
        console.print("[bold]Suggestions to improve this world:[/]")
        for suggestion in result.suggestions:
            console.print(f"- {suggestion}")
    if output:
        write_text_file(output, result.index_content)
        console.print(f"[green]Saved document to {output}[/]")


@app.command()
def index(
    worlds: Path = _WORLDS_OPTION,
    config: Optional[Path] = _CONFIG_OPTION,
    output: Path = typer.Option(..., "--output", "-o", help="File to write the master index to."),
) -> None:
    """
    Generate only the master index document.
    """
    site = _load_site_or_exit(config)
    collection = _load_worlds_or_exit(worlds)
    write_text_file(output, compose_index_document(collection, site))
    _print_rows("Index Summary", index_statistics(collection).summary_rows())
    console.print(f"[green]Saved index to {output}[/]")


@app.command()
def guide(
    worlds: Path = _WORLDS_OPTION,
    world_id: str = typer.Option(..., "--world", help="Id of the world to describe."),
    config: Optional[Path] = _CONFIG_OPTION,
) -> None:
    """
    Print manual publishing steps for one world.
    """
    site = _load_site_or_exit(config)
    world = _find_world_or_exit(_load_worlds_or_exit(worlds), world_id)
    console.print(format_guide(build_deployment_guide(world, site)), markup=False, highlight=False)


def main() -> None:
    """
    Entry-point used by the console script defined in pyproject.toml.
    """
    app()
