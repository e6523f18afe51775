"""Tests for frame composition and encoding."""

import io

import pytest
from PIL import Image

from thumbnail_padder.colors import ColorSample
from thumbnail_padder.render import (
    EncodingError,
    compute_fit,
    encode_frame,
    new_frame,
    render_frame,
)


def test_render_overwrites_previous_frame() -> None:
    frame = new_frame()
    source = Image.new("RGB", (100, 100), (255, 255, 255))
    fit = compute_fit(100, 100, frame.width, frame.height)

    render_frame(frame, source, fit, ColorSample(255, 0, 0))
    render_frame(frame, source, fit, ColorSample(0, 0, 255))

    assert frame.getpixel((0, 0)) == (0, 0, 255)
    assert frame.getpixel((1279, 719)) == (0, 0, 255)
    assert frame.getpixel((640, 360)) == (255, 255, 255)


def test_transparent_source_shows_padding() -> None:
    frame = new_frame()
    source = Image.new("RGBA", (1280, 720), (255, 255, 255, 0))
    render_frame(frame, source, compute_fit(1280, 720, 1280, 720), ColorSample(0, 255, 0))
    assert frame.getpixel((640, 360)) == (0, 255, 0)


def test_encode_frame_produces_jpeg() -> None:
    frame = new_frame()
    data = encode_frame(frame)
    with Image.open(io.BytesIO(data)) as decoded:
        assert decoded.format == "JPEG"
        assert decoded.size == (1280, 720)


def test_encode_empty_frame_fails() -> None:
    with pytest.raises(EncodingError):
        encode_frame(Image.new("RGB", (0, 0)))
    with pytest.raises(EncodingError):
        encode_frame(None)
