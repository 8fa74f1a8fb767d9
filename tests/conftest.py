"""Pytest configuration and shared fixtures for svg-invert tests."""

from collections.abc import Generator
from pathlib import Path

import pytest

# Paths
PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep the user's own config file out of every test."""
    monkeypatch.delenv("SVG_INVERT_CONFIG", raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg-config"))


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def simple_svg_content() -> str:
    """Return a small SVG using hex, named and sentinel colors."""
    return """<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100" viewBox="0 0 100 100">
  <rect x="10" y="10" width="80" height="80" fill="#000000" stroke="none"/>
  <circle cx="50" cy="50" r="30" fill="white" stroke="#f00"/>
</svg>"""


@pytest.fixture
def styled_svg_content() -> str:
    """Return SVG with colors inside inline style attributes."""
    return """<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100">
  <path d="M 0 0 L 10 10" style="fill:#ff0000;stroke-width:2"/>
  <g style="stroke: rgb(255, 0, 0); opacity: 0.5;">
    <text x="10" y="50" style="font-family: Arial; color: black">Label</text>
  </g>
</svg>"""


@pytest.fixture
def gradient_svg_content() -> str:
    """Return SVG with gradient stops, filters and a paint server reference."""
    return (
        '<svg xmlns="http://www.w3.org/2000/svg" '
        'xmlns:xlink="http://www.w3.org/1999/xlink" width="200" height="100">\n'
        "  <defs>\n"
        '    <linearGradient id="grad">\n'
        '      <stop offset="0" stop-color="#ffffff"/>\n'
        '      <stop offset="1" stop-color="hsl(0, 100%, 50%)"/>\n'
        "    </linearGradient>\n"
        '    <filter id="shadow"><feFlood flood-color="rgba(0,0,0,0.5)"/></filter>\n'
        "  </defs>\n"
        '  <rect width="200" height="100" fill="url(#grad)" filter="url(#shadow)"/>\n'
        '  <use xlink:href="#grad" data-color="#ff0000"/>\n'
        "</svg>"
    )


@pytest.fixture
def malformed_svg_content() -> str:
    """Return malformed SVG for error testing."""
    return """<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg">
  <rect fill="#000">
</svg>"""


@pytest.fixture
def temp_svg(tmp_path: Path, simple_svg_content: str) -> Generator[Path, None, None]:
    """Create a temporary SVG file for testing."""
    svg_path = tmp_path / "test.svg"
    svg_path.write_text(simple_svg_content, encoding="utf-8")
    yield svg_path


# Skip markers for slow tests
slow = pytest.mark.slow


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
