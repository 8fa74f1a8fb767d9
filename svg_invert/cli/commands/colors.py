"""Colors command - report the colors used in an SVG file."""

from __future__ import annotations

import json
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from svg_invert.colors import Sentinel, invert_color_text, parse_color
from svg_invert.config import Config
from svg_invert.exceptions import SvgInvertError
from svg_invert.svg import iter_color_locations, parse_svg

console = Console()


@click.command()
@click.argument("svg_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Output JSON instead of a table")
@click.pass_context
def colors(ctx: click.Context, svg_file: Path, as_json: bool) -> None:
    """Report color values in an SVG file and what they invert to."""
    config = ctx.obj.get("config") or Config.load()

    try:
        document = parse_svg(svg_file)
    except SvgInvertError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1) from e

    properties = config.style_properties if config.invert_styles else ()
    usage: dict[str, list[str]] = {}
    for location in iter_color_locations(document.getroot(), config.color_attributes, properties):
        usage.setdefault(location.value, []).append(location.label)

    rows = []
    for value, labels in usage.items():
        parsed = parse_color(value)
        kind = parsed.value.kind.value if isinstance(parsed.value, Sentinel) else parsed.notation.family.value
        rows.append(
            {
                "color": value,
                "inverted": invert_color_text(value, prefer_names=config.named_colors),
                "notation": kind,
                "uses": len(labels),
                "locations": sorted(set(labels)),
            }
        )

    if as_json:
        click.echo(json.dumps(rows, indent=2))
        return

    table = Table(title=f"Colors in {svg_file.name}")
    table.add_column("Color", style="cyan")
    table.add_column("Inverted", style="green")
    table.add_column("Notation", style="yellow")
    table.add_column("Uses", justify="right")
    table.add_column("Locations", style="dim")

    for row in rows:
        table.add_row(row["color"], row["inverted"], row["notation"], str(row["uses"]), ", ".join(row["locations"]))

    console.print(table)
    console.print(f"\n[bold]Total:[/bold] {len(rows)} distinct colors")
