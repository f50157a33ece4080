"""
Pytest configuration and fixtures for IconRandomizer tests.
"""

import io
import sys
from pathlib import Path

import pytest
from PIL import Image

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from iconrandomizer.core import state


def make_png_bytes(color=(255, 0, 0, 255), size=(64, 64)):
    buffer = io.BytesIO()
    Image.new("RGBA", size, color).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def server_root(tmp_path):
    """A host root directory laid out as <root>/plugins/iconrandomizer."""
    return tmp_path


@pytest.fixture
def data_dir(server_root):
    return server_root / "plugins" / "iconrandomizer"


@pytest.fixture
def write_png():
    """Write a valid PNG to the given path and return the path."""
    def _write(path, color=(255, 0, 0, 255), size=(64, 64)):
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(make_png_bytes(color, size))
        return path
    return _write


@pytest.fixture
def write_corrupt_png():
    """Write a file named like a PNG whose contents are not an image."""
    def _write(path):
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"\x89PNG\r\n\x1a\nthis is not really a png")
        return path
    return _write


@pytest.fixture
def write_config(data_dir):
    """Write config.properties into the plugin data directory."""
    def _write(text):
        data_dir.mkdir(parents=True, exist_ok=True)
        path = data_dir / "config.properties"
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture(autouse=True)
def reset_server_state():
    state.reset()
    yield
    state.reset()
