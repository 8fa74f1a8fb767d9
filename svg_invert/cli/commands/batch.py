"""Batch command - invert multiple SVG files."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console
from rich.progress import Progress

from svg_invert import InversionResult, SvgInverter
from svg_invert.config import Config

console = Console()


def _read_batch_file(batch_file: Path) -> list[Path]:
    """Read input paths from a file, one per line. Blank lines and # comments are skipped."""
    paths: list[Path] = []
    with open(batch_file, encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith("#"):
                paths.append(Path(line))
    return paths


@click.command()
@click.argument("inputs", nargs=-1, type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--output-dir", "-o", type=click.Path(file_okay=False, path_type=Path), required=True, help="Output directory")
@click.option("--batch-file", type=click.Path(exists=True, dir_okay=False, path_type=Path), help="File containing list of inputs")
@click.option("--suffix", default="-inverted", help="Output filename suffix")
@click.option("--continue-on-error", is_flag=True, help="Continue processing on errors")
@click.pass_context
def batch(
    ctx: click.Context,
    inputs: tuple[Path, ...],
    output_dir: Path,
    batch_file: Path | None,
    suffix: str,
    continue_on_error: bool,
) -> None:
    """Invert multiple SVG files.

    INPUTS: Paths to SVG files (supports glob patterns via shell).

    One inverter is reused for every file, so colors shared between the
    files are only converted once.
    """
    config = ctx.obj.get("config") or Config.load()

    all_inputs: list[Path] = list(inputs)
    if batch_file:
        all_inputs.extend(_read_batch_file(batch_file))

    if not all_inputs:
        console.print("[red]Error:[/red] No input files specified")
        raise SystemExit(1)

    output_dir.mkdir(parents=True, exist_ok=True)

    inverter = SvgInverter(config=config)
    results: list[InversionResult] = []
    success_count = 0
    error_count = 0

    with Progress(console=console) as progress:
        task = progress.add_task("[green]Inverting...", total=len(all_inputs))

        for input_path in all_inputs:
            output_path = output_dir / f"{input_path.stem}{suffix}.svg"
            result = inverter.invert_file(input_path, output_path)
            results.append(result)
            progress.advance(task)

            if result.success:
                success_count += 1
                continue

            error_count += 1
            console.print(f"[red]Error in {input_path}:[/red] {'; '.join(result.errors)}")
            if not continue_on_error:
                raise SystemExit(1)

    replaced = sum(r.colors_replaced for r in results)

    # Summary
    console.print()
    console.print("[bold]Batch complete:[/bold]")
    console.print(f"  [green]Success:[/green] {success_count}")
    console.print(f"  [red]Failed:[/red] {error_count}")
    console.print(f"  [blue]Colors replaced:[/blue] {replaced} ({inverter.cache_size} distinct)")
    console.print(f"  [blue]Output:[/blue] {output_dir}")
