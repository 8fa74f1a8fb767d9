"""Configuration for svg-invert.

Settings come from a YAML file. The lookup order is an explicit path, then
the ``SVG_INVERT_CONFIG`` environment variable, then
``$XDG_CONFIG_HOME/svg-invert/config.yaml`` (``~/.config`` by default).
With no file, the built-in defaults apply.

Example config::

    color_attributes: [fill, stroke, stop-color, flood-color, color, lighting-color]
    style_properties: [fill, stroke]
    invert_styles: true
    named_colors: true
    indent: false
"""

from __future__ import annotations

import dataclasses
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from svg_invert.exceptions import ConfigError

CONFIG_ENV_VAR = "SVG_INVERT_CONFIG"

DEFAULT_COLOR_ATTRIBUTES: tuple[str, ...] = (
    "fill",
    "stroke",
    "stop-color",
    "flood-color",
    "color",
    "lighting-color",
)


@dataclass(frozen=True)
class Config:
    """Inversion settings.

    Attributes:
        color_attributes: Attribute names holding a single color value.
        style_properties: Property names inside ``style`` holding a color.
        invert_styles: Rewrite inline ``style`` declarations.
        named_colors: Emit color keywords when the inverted value has one.
        indent: Pretty-print the output document.
    """

    color_attributes: tuple[str, ...] = DEFAULT_COLOR_ATTRIBUTES
    style_properties: tuple[str, ...] = DEFAULT_COLOR_ATTRIBUTES
    invert_styles: bool = True
    named_colors: bool = True
    indent: bool = False

    @classmethod
    def load(cls, path: str | Path | None = None) -> Config:
        """Load configuration from the first file found, or return defaults.

        Raises:
            ConfigError: If an explicitly named file is missing or invalid
        """
        config_path = cls._resolve_path(path)
        if config_path is None:
            return cls()
        return cls.from_file(config_path)

    @classmethod
    def from_file(cls, path: str | Path) -> Config:
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Cannot read config file: {e}", path=str(path)) from e

        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in config file: {e}", path=str(path)) from e

        return cls.from_dict(data or {}, source=str(path))

    @classmethod
    def from_dict(cls, data: dict[str, Any], source: str | None = None) -> Config:
        if not isinstance(data, dict):
            raise ConfigError("Config must be a mapping", path=source)

        known = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(unknown)}", path=source)

        values: dict[str, Any] = {}
        for key in ("color_attributes", "style_properties"):
            if key in data:
                values[key] = _name_list(key, data[key], source)
        for key in ("invert_styles", "named_colors", "indent"):
            if key in data:
                if not isinstance(data[key], bool):
                    raise ConfigError(f"'{key}' must be true or false", path=source)
                values[key] = data[key]

        return cls(**values)

    @staticmethod
    def _resolve_path(path: str | Path | None) -> Path | None:
        if path is not None:
            return Path(path)

        env_path = os.environ.get(CONFIG_ENV_VAR)
        if env_path:
            return Path(env_path)

        config_home = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
        default = Path(config_home) / "svg-invert" / "config.yaml"
        return default if default.is_file() else None

    def replace(self, **changes: Any) -> Config:
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        data = dataclasses.asdict(self)
        data["color_attributes"] = list(self.color_attributes)
        data["style_properties"] = list(self.style_properties)
        return data


def _name_list(key: str, value: Any, source: str | None) -> tuple[str, ...]:
    if not isinstance(value, list) or not all(isinstance(item, str) and item.strip() for item in value):
        raise ConfigError(f"'{key}' must be a list of names", path=source)
    return tuple(item.strip() for item in value)
