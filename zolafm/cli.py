"""CLI entry point for zolafm."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from zolafm.config import ZolaFmConfig, load_config
from zolafm.errors import ZolaFmError
from zolafm.pipeline import ConversionPipeline
from zolafm.timestamps import GitTimestampSource, UtcTimestampNormalizer

app = typer.Typer(
    name="zolafm",
    help="Convert a YAML-fronted markdown file into a Zola page with TOML frontmatter.",
    add_completion=False,
)

err_console = Console(stderr=True)

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=_LOG_LEVELS[level],
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_time=False, show_path=False)],
        force=True,
    )


def _resolve_config(
    config_path: str | None,
    mode: str | None,
    output_dir: str | None,
    log_level: str | None,
) -> ZolaFmConfig:
    """Load config from disk and apply CLI overrides on top."""
    cfg = load_config(config_path)
    update: dict = {}
    if mode is not None:
        update["mode"] = mode
    if log_level is not None:
        update["log_level"] = log_level
    if output_dir is not None:
        update["output"] = cfg.output.model_copy(update={"base_dir": output_dir})
    if update:
        # Round-trip through validation so bad overrides are rejected.
        cfg = ZolaFmConfig(**{**cfg.model_dump(), **update})
    return cfg


@app.command()
def convert(
    input_file: Annotated[Path, typer.Argument(help="Markdown file with YAML frontmatter")],
    mode: Annotated[
        str | None, typer.Option("--mode", "-m", help="generic (stdout) or blog (dated file)")
    ] = None,
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="YAML settings file (nothing is loaded without it)")
    ] = None,
    output_dir: Annotated[
        str | None, typer.Option("--output-dir", "-o", help="Base directory for blog output")
    ] = None,
    log_level: Annotated[
        str | None, typer.Option("--log-level", help="debug | info | warn | error")
    ] = None,
    dry_run: Annotated[
        bool, typer.Option("--dry-run", help="Print blog output instead of writing it")
    ] = False,
) -> None:
    """Convert INPUT_FILE and print it (generic) or write it under its dated path (blog)."""
    try:
        cfg = _resolve_config(config, mode, output_dir, log_level)
    except (ValueError, TypeError) as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    _setup_logging(cfg.log_level)

    pipeline = ConversionPipeline(cfg, GitTimestampSource(), UtcTimestampNormalizer())
    try:
        dest = pipeline.run(input_file, dry_run=dry_run)
    except ZolaFmError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    except (OSError, ValueError) as e:
        err_console.print(f"[red]Error:[/red] {input_file}: {escape(str(e))}")
        raise typer.Exit(1)

    if dest is not None:
        verb = "Would write" if dry_run else "Written to"
        err_console.print(f"[green]{verb}[/green] {dest}")


def main() -> None:
    app()
