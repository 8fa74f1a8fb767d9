"""Invert command - invert a single SVG document."""

from __future__ import annotations

import logging
from typing import IO, Any

import click
from rich.console import Console

from svg_invert import invert_svg
from svg_invert.config import Config
from svg_invert.exceptions import SvgInvertError

logger = logging.getLogger(__name__)

# stdout may carry the SVG, so messages go to stderr
console = Console(stderr=True)


@click.command()
@click.argument("input_file", type=click.File("rb"), default="-")
@click.option(
    "-o",
    "--output",
    "output_file",
    type=click.File("wb", lazy=True),
    default="-",
    help="Output file (default: stdout)",
)
@click.option("--indent", is_flag=True, help="Pretty-print the output")
@click.option("--no-names", is_flag=True, help="Never emit color keywords, use hex instead")
@click.pass_context
def invert(
    ctx: click.Context,
    input_file: IO[Any],
    output_file: IO[Any],
    indent: bool,
    no_names: bool,
) -> None:
    """Invert the colors of one SVG document.

    INPUT_FILE: SVG file to read (default: stdin).
    """
    config = ctx.obj.get("config") or Config.load()
    if indent:
        config = config.replace(indent=True)
    if no_names:
        config = config.replace(named_colors=False)

    try:
        replaced = invert_svg(input_file, output_file, config=config)
    except SvgInvertError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1) from e

    logger.info("Inverted %d color value(s)", replaced)
