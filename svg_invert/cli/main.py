"""svg-invert command-line entry point."""

from __future__ import annotations

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler

from svg_invert import __version__
from svg_invert.cli.commands import batch, colors, invert
from svg_invert.config import Config
from svg_invert.exceptions import ConfigError

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]

err_console = Console(stderr=True)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@click.group()
@click.version_option(__version__, prog_name="svg-invert")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    help="Logging verbosity (written to stderr)",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML config file (default: $SVG_INVERT_CONFIG or ~/.config/svg-invert/config.yaml)",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str, config_path: Path | None) -> None:
    """Invert the colors of SVG images for light and dark themes."""
    ctx.ensure_object(dict)
    log_level = log_level.upper()
    _configure_logging(log_level)

    try:
        config = Config.load(config_path)
    except ConfigError as e:
        err_console.print(f"[red]Config error:[/red] {e}")
        raise SystemExit(1) from e

    ctx.obj["config"] = config


cli.add_command(invert)
cli.add_command(batch)
cli.add_command(colors)


if __name__ == "__main__":
    cli()
