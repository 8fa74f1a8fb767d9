"""CLI commands for svg-invert."""

from svg_invert.cli.commands.batch import batch
from svg_invert.cli.commands.colors import colors
from svg_invert.cli.commands.invert import invert

__all__ = ["invert", "batch", "colors"]
