"""Tests for letterbox padding."""

from PIL import Image

from thumbnail_padder.colors import ColorSample
from thumbnail_padder.render import TARGET_RESOLUTION, Resolution, letterbox_image


def test_letterbox_size() -> None:
    image = Image.new("RGB", (800, 600), (255, 0, 0))
    output = letterbox_image(image, ColorSample(0, 0, 0))
    assert output.size == (TARGET_RESOLUTION.width, TARGET_RESOLUTION.height)


def test_letterbox_pads_sides_of_tall_image() -> None:
    image = Image.new("RGB", (300, 600), (255, 255, 255))
    output = letterbox_image(image, ColorSample(0, 128, 0), Resolution(width=160, height=90))
    assert output.getpixel((0, 45)) == (0, 128, 0)
    assert output.getpixel((159, 45)) == (0, 128, 0)
    assert output.getpixel((80, 45)) == (255, 255, 255)
