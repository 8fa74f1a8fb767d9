"""Unit tests for svg_invert.cli commands.

Tests cover CLI commands: invert, batch, colors, plus the global
--config and --version options. Tests use CliRunner for isolated command
invocation.
"""

import json
import logging
from pathlib import Path

import click
import pytest
from click.testing import CliRunner

from svg_invert import Config, __version__
from svg_invert.cli.main import cli


@pytest.fixture
def runner() -> CliRunner:
    """Create a CliRunner instance for testing CLI commands."""
    return CliRunner()


@pytest.fixture
def svg_folder(tmp_path: Path) -> Path:
    """Create a folder with two SVG files sharing a palette."""
    folder = tmp_path / "svgs"
    folder.mkdir()
    (folder / "one.svg").write_text('<svg><rect fill="#000"/><rect fill="white"/></svg>', encoding="utf-8")
    (folder / "two.svg").write_text('<svg><circle fill="#000" stroke="#fff"/></svg>', encoding="utf-8")
    return folder


class TestCliGroup:
    """Tests for the top-level command group."""

    def test_help_lists_commands(self, runner: CliRunner) -> None:
        """--help lists every subcommand."""
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "invert" in result.output
        assert "batch" in result.output
        assert "colors" in result.output

    def test_version(self, runner: CliRunner) -> None:
        """--version prints the package version."""
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_log_level_configures_root_logger(self, runner: CliRunner) -> None:
        """--log-level sets the root logger and INFO messages reach stderr."""
        root = logging.getLogger()
        previous = root.level
        try:
            result = runner.invoke(cli, ["--log-level", "info", "invert"], input=b'<svg fill="#000"/>')
            assert result.exit_code == 0, result.output
            assert root.level == logging.INFO
            assert "Inverted 1 color value(s)" in result.output
        finally:
            root.setLevel(previous)

    def test_context_carries_only_config(self, runner: CliRunner) -> None:
        """Subcommands receive the loaded Config and nothing else."""
        seen: dict = {}

        @cli.command("show-context", hidden=True)
        @click.pass_context
        def record(ctx: click.Context) -> None:
            seen.update(ctx.obj)

        try:
            result = runner.invoke(cli, ["show-context"])
        finally:
            cli.commands.pop("show-context", None)
        assert result.exit_code == 0, result.output
        assert set(seen) == {"config"}
        assert isinstance(seen["config"], Config)

    def test_invalid_config_exits_nonzero(self, runner: CliRunner, tmp_path: Path) -> None:
        """A broken config file stops the CLI."""
        config_file = tmp_path / "bad.yaml"
        config_file.write_text("unknown_key: 1\n", encoding="utf-8")
        result = runner.invoke(cli, ["--config", str(config_file), "invert"], input=b"<svg/>")
        assert result.exit_code == 1
        assert "Config error" in result.output


class TestInvertCommand:
    """Tests for the invert subcommand."""

    def test_stdin_to_stdout(self, runner: CliRunner) -> None:
        """Reads stdin and writes the inverted SVG to stdout."""
        result = runner.invoke(cli, ["invert"], input=b'<svg><rect fill="#000000" stroke="none"/></svg>')
        assert result.exit_code == 0, result.output
        assert result.stdout_bytes == b'<svg><rect fill="#ffffff" stroke="none" /></svg>'

    def test_file_to_file(self, runner: CliRunner, temp_svg: Path, tmp_path: Path) -> None:
        """Input and output paths are honored."""
        output_path = tmp_path / "dark.svg"
        result = runner.invoke(cli, ["invert", str(temp_svg), "-o", str(output_path)])
        assert result.exit_code == 0, result.output
        text = output_path.read_text(encoding="utf-8")
        assert 'fill="#ffffff"' in text
        assert 'stroke="none"' in text

    def test_indent_and_no_names(self, runner: CliRunner) -> None:
        """--indent pretty-prints and --no-names emits hex."""
        result = runner.invoke(cli, ["invert", "--indent", "--no-names"], input=b'<svg><rect fill="black"/></svg>')
        assert result.exit_code == 0, result.output
        assert result.stdout_bytes == b'<svg>\n  <rect fill="#fff" />\n</svg>'

    def test_config_file_applies(self, runner: CliRunner, tmp_path: Path) -> None:
        """--config restricts the attribute set."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("color_attributes: [stroke]\n", encoding="utf-8")
        result = runner.invoke(
            cli,
            ["--config", str(config_file), "invert"],
            input=b'<svg fill="#000" stroke="#000"/>',
        )
        assert result.exit_code == 0, result.output
        assert result.stdout_bytes == b'<svg fill="#000" stroke="#fff" />'

    def test_malformed_input_fails_without_output(
        self, runner: CliRunner, tmp_path: Path, malformed_svg_content: str
    ) -> None:
        """Parse errors exit 1 and never create the output file."""
        bad = tmp_path / "bad.svg"
        bad.write_text(malformed_svg_content, encoding="utf-8")
        output_path = tmp_path / "out.svg"
        result = runner.invoke(cli, ["invert", str(bad), "-o", str(output_path)])
        assert result.exit_code == 1
        assert "Error" in result.output
        assert not output_path.exists()


class TestBatchCommand:
    """Tests for the batch subcommand."""

    def test_batch_inverts_every_file(self, runner: CliRunner, svg_folder: Path, tmp_path: Path) -> None:
        """Each input gets a suffixed output file."""
        out_dir = tmp_path / "out"
        result = runner.invoke(
            cli,
            ["batch", str(svg_folder / "one.svg"), str(svg_folder / "two.svg"), "-o", str(out_dir)],
        )
        assert result.exit_code == 0, result.output
        assert "Batch complete" in result.output
        assert (out_dir / "one-inverted.svg").read_text(encoding="utf-8") == (
            '<svg><rect fill="#fff" /><rect fill="black" /></svg>'
        )
        assert (out_dir / "two-inverted.svg").read_text(encoding="utf-8") == (
            '<svg><circle fill="#fff" stroke="#000" /></svg>'
        )

    def test_batch_file_and_suffix(self, runner: CliRunner, svg_folder: Path, tmp_path: Path) -> None:
        """Inputs can come from a list file; comments are skipped."""
        list_file = tmp_path / "inputs.txt"
        list_file.write_text(f"# palette\n{svg_folder / 'two.svg'}\n\n", encoding="utf-8")
        out_dir = tmp_path / "out"
        result = runner.invoke(
            cli,
            ["batch", "--batch-file", str(list_file), "-o", str(out_dir), "--suffix", "_dark"],
        )
        assert result.exit_code == 0, result.output
        assert (out_dir / "two_dark.svg").exists()

    def test_batch_without_inputs_fails(self, runner: CliRunner, tmp_path: Path) -> None:
        """No inputs is an error."""
        result = runner.invoke(cli, ["batch", "-o", str(tmp_path / "out")])
        assert result.exit_code == 1
        assert "No input files" in result.output

    def test_batch_stops_on_error(
        self, runner: CliRunner, svg_folder: Path, tmp_path: Path, malformed_svg_content: str
    ) -> None:
        """Without --continue-on-error the first failure exits 1."""
        bad = svg_folder / "bad.svg"
        bad.write_text(malformed_svg_content, encoding="utf-8")
        out_dir = tmp_path / "out"
        result = runner.invoke(cli, ["batch", str(bad), str(svg_folder / "one.svg"), "-o", str(out_dir)])
        assert result.exit_code == 1
        assert not (out_dir / "one-inverted.svg").exists()

    def test_batch_continue_on_error(
        self, runner: CliRunner, svg_folder: Path, tmp_path: Path, malformed_svg_content: str
    ) -> None:
        """--continue-on-error processes the remaining files."""
        bad = svg_folder / "bad.svg"
        bad.write_text(malformed_svg_content, encoding="utf-8")
        out_dir = tmp_path / "out"
        result = runner.invoke(
            cli,
            ["batch", str(bad), str(svg_folder / "one.svg"), "-o", str(out_dir), "--continue-on-error"],
        )
        assert result.exit_code == 0, result.output
        assert (out_dir / "one-inverted.svg").exists()
        assert "Failed" in result.output


class TestColorsCommand:
    """Tests for the colors subcommand."""

    def test_colors_json(self, runner: CliRunner, temp_svg: Path) -> None:
        """--json reports every distinct color with its inversion."""
        result = runner.invoke(cli, ["colors", str(temp_svg), "--json"])
        assert result.exit_code == 0, result.output
        rows = {row["color"]: row for row in json.loads(result.output)}
        assert set(rows) == {"#000000", "none", "white", "#f00"}
        assert rows["#000000"]["inverted"] == "#ffffff"
        assert rows["#000000"]["notation"] == "hex6"
        assert rows["none"]["inverted"] == "none"
        assert rows["none"]["notation"] == "none"
        assert rows["white"]["locations"] == ["circle@fill"]

    def test_colors_table(self, runner: CliRunner, temp_svg: Path) -> None:
        """The default output is a table with a total line."""
        result = runner.invoke(cli, ["colors", str(temp_svg)])
        assert result.exit_code == 0, result.output
        assert "distinct colors" in result.output

    def test_colors_malformed(self, runner: CliRunner, tmp_path: Path, malformed_svg_content: str) -> None:
        """Unparseable files exit 1."""
        bad = tmp_path / "bad.svg"
        bad.write_text(malformed_svg_content, encoding="utf-8")
        result = runner.invoke(cli, ["colors", str(bad)])
        assert result.exit_code == 1
