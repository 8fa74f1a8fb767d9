"""Exception hierarchy for svg-invert.

Only structural problems are errors: a document that is not well-formed XML,
an output stream that cannot be written, or a broken configuration file.
Unrecognized color text is never an error, it is passed through unchanged.
"""

from __future__ import annotations

from typing import Any


class SvgInvertError(Exception):
    """Base exception for all svg-invert errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        extra = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return f"{self.message} ({extra})"


class SVGParseError(SvgInvertError):
    """Input is not a well-formed XML/SVG document."""

    def __init__(
        self,
        message: str,
        source: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = dict(details or {})
        if source is not None:
            details["source"] = source
        super().__init__(message, details)
        self.source = source


class SVGWriteError(SvgInvertError):
    """The output stream could not be written."""


class ConfigError(SvgInvertError):
    """Configuration file is unreadable or has invalid values."""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message, {"path": path} if path else None)
        self.path = path
