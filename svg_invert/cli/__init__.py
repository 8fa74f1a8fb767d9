"""Command-line interface for svg-invert."""

from svg_invert.cli.main import cli

__all__ = ["cli"]
