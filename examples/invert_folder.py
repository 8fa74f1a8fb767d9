#!/usr/bin/env python3
"""Example: Invert every SVG in a folder with one shared inverter.

Icon sets tend to reuse a small palette, so keeping a single SvgInverter
for the whole folder means each distinct color string is converted once.

Requirements:
    pip install svg-invert

Usage:
    python invert_folder.py icons/                 # writes icons/dark/*.svg
    python invert_folder.py icons/ -o out/ --hex   # never emit color keywords
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

from svg_invert import Config, InversionResult, SvgInverter


def invert_folder(folder: Path, output_dir: Path, config: Config) -> list[InversionResult]:
    """Invert all *.svg files in folder into output_dir."""
    output_dir.mkdir(parents=True, exist_ok=True)
    inverter = SvgInverter(config)
    results = [inverter.invert_file(path, output_dir / path.name) for path in sorted(folder.glob("*.svg"))]
    print(f"Distinct colors converted: {inverter.cache_size}")
    return results


def main() -> int:
    parser = argparse.ArgumentParser(description="Invert the colors of every SVG in a folder")
    parser.add_argument("folder", type=Path, help="Folder containing SVG files")
    parser.add_argument("-o", "--output-dir", type=Path, help="Output folder (default: FOLDER/dark)")
    parser.add_argument("--hex", action="store_true", help="Write hex instead of color keywords")
    args = parser.parse_args()

    if not args.folder.is_dir():
        print(f"Not a folder: {args.folder}", file=sys.stderr)
        return 1

    config = Config.load().replace(named_colors=not args.hex)
    start = time.time()
    results = invert_folder(args.folder, args.output_dir or args.folder / "dark", config)
    elapsed = time.time() - start

    failed = [r for r in results if not r.success]
    for result in failed:
        print(f"FAILED {result.input_path}: {'; '.join(result.errors)}", file=sys.stderr)

    replaced = sum(r.colors_replaced for r in results)
    print(f"Inverted {len(results) - len(failed)}/{len(results)} files, {replaced} colors in {elapsed:.2f}s")
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
