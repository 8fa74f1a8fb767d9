"""Unit tests for svg_invert.config module."""

from pathlib import Path
from textwrap import dedent

import pytest

from svg_invert.config import CONFIG_ENV_VAR, DEFAULT_COLOR_ATTRIBUTES, Config
from svg_invert.exceptions import ConfigError


class TestConfigDefaults:
    """Tests for built-in defaults."""

    def test_default_attribute_set(self) -> None:
        """Defaults cover the SVG color presentation attributes."""
        config = Config()
        assert config.color_attributes == (
            "fill",
            "stroke",
            "stop-color",
            "flood-color",
            "color",
            "lighting-color",
        )
        assert config.style_properties == DEFAULT_COLOR_ATTRIBUTES
        assert config.invert_styles is True
        assert config.named_colors is True
        assert config.indent is False

    def test_load_without_any_file_returns_defaults(self) -> None:
        """No explicit path, env var or user file means defaults."""
        assert Config.load() == Config()

    def test_replace_returns_new_instance(self) -> None:
        """replace() leaves the original untouched."""
        config = Config()
        changed = config.replace(indent=True)
        assert changed.indent is True
        assert config.indent is False


class TestConfigLoading:
    """Tests for YAML loading and lookup order."""

    def test_load_explicit_path(self, tmp_path: Path) -> None:
        """Values from an explicit file override defaults."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            dedent("""
                color_attributes: [fill, stroke]
                named_colors: false
            """),
            encoding="utf-8",
        )
        config = Config.load(config_file)
        assert config.color_attributes == ("fill", "stroke")
        assert config.named_colors is False
        assert config.style_properties == DEFAULT_COLOR_ATTRIBUTES

    def test_load_from_env_var(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """SVG_INVERT_CONFIG points at the config file."""
        config_file = tmp_path / "env.yaml"
        config_file.write_text("indent: true\n", encoding="utf-8")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(config_file))
        assert Config.load().indent is True

    def test_load_from_xdg_config_home(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """The per-user config file is picked up when present."""
        config_dir = tmp_path / "xdg" / "svg-invert"
        config_dir.mkdir(parents=True)
        (config_dir / "config.yaml").write_text("invert_styles: false\n", encoding="utf-8")
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
        assert Config.load().invert_styles is False

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        """An empty YAML document is the same as no settings."""
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("", encoding="utf-8")
        assert Config.load(config_file) == Config()

    def test_missing_explicit_file_raises(self, tmp_path: Path) -> None:
        """A named file that does not exist is an error."""
        with pytest.raises(ConfigError, match="Cannot read config file"):
            Config.load(tmp_path / "nope.yaml")

    def test_invalid_yaml_raises(self, tmp_path: Path) -> None:
        """YAML syntax errors are reported as ConfigError."""
        config_file = tmp_path / "bad.yaml"
        config_file.write_text("color_attributes: [fill\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            Config.load(config_file)

    def test_unknown_key_raises(self, tmp_path: Path) -> None:
        """Typos in key names are not silently ignored."""
        config_file = tmp_path / "typo.yaml"
        config_file.write_text("colour_attributes: [fill]\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="colour_attributes"):
            Config.load(config_file)

    @pytest.mark.parametrize(
        "data",
        [
            {"color_attributes": "fill"},
            {"style_properties": [1, 2]},
            {"named_colors": "yes"},
            {"indent": 1},
        ],
    )
    def test_wrong_types_raise(self, data: dict) -> None:
        """Values must have the documented types."""
        with pytest.raises(ConfigError):
            Config.from_dict(data)

    def test_non_mapping_raises(self) -> None:
        """The top level must be a mapping."""
        with pytest.raises(ConfigError, match="mapping"):
            Config.from_dict(["fill"])  # type: ignore[arg-type]

    def test_to_dict_roundtrip(self) -> None:
        """to_dict output is accepted by from_dict."""
        config = Config(color_attributes=("fill",), indent=True)
        assert Config.from_dict(config.to_dict()) == config
