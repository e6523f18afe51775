"""Shared fixtures."""

from pathlib import Path

import pytest
from PIL import Image


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def red_cornered_png(tmp_path: Path) -> Path:
    """400x300 image, red except for a blue block in the middle."""

    image = Image.new("RGB", (400, 300), (255, 0, 0))
    image.paste((0, 0, 255), (100, 75, 300, 225))
    path = tmp_path / "holiday.photo.png"
    image.save(path, format="PNG")
    return path
