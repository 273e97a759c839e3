"""
Pytest configuration and fixtures for font2css tests.
"""

import tempfile
from pathlib import Path

import pytest

from font2css.core.models import FontEntry

# Font files only need to exist; their bytes are never parsed
FAKE_FONT_BYTES = b"\x00\x01\x00\x00\x00\x0b\x00\x80"


@pytest.fixture
def temp_dir():
    """Create temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def font_dir(temp_dir):
    """Create a directory of font files, including a nested family folder."""
    fonts = temp_dir / "fonts"
    (fonts / "roboto").mkdir(parents=True)

    for name in [
        "OpenSans-Bold.ttf",
        "Lobster.woff",
        "roboto/Roboto-Black-Italic.woff2",
        "roboto/Roboto-Italic.woff2",
    ]:
        (fonts / name).write_bytes(FAKE_FONT_BYTES)

    (fonts / "README.txt").write_text("not a font")
    return fonts


@pytest.fixture
def buffer_entry():
    """Create a buffer entry for a bold italic font."""
    return FontEntry("/src/fonts/Roboto-Bold-Italic.woff2", FAKE_FONT_BYTES)
