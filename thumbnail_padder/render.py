"""Frame composition with 16:9 letterbox padding."""

from __future__ import annotations

import io
from dataclasses import dataclass

from PIL import Image

from thumbnail_padder.colors import ColorSample, ThumbnailError

JPEG_QUALITY = 90


class EncodingError(ThumbnailError, RuntimeError):
    """The frame could not be serialized."""


@dataclass(frozen=True)
class Resolution:
    """Pixel resolution container."""

    width: int
    height: int


TARGET_RESOLUTION = Resolution(width=1280, height=720)


@dataclass(frozen=True)
class Fit:
    """Scaled size and centering offsets of a source inside a frame."""

    draw_w: float
    draw_h: float
    offset_x: float
    offset_y: float

    def box(self, frame_w: int, frame_h: int) -> tuple[int, int, int, int]:
        """Integer (left, top, width, height) rectangle inside the frame."""

        width = min(frame_w, max(1, round(self.draw_w)))
        height = min(frame_h, max(1, round(self.draw_h)))
        left = min(frame_w - width, max(0, round(self.offset_x)))
        top = min(frame_h - height, max(0, round(self.offset_y)))
        return left, top, width, height


def compute_fit(source_w: float, source_h: float, target_w: float, target_h: float) -> Fit:
    """Scale the source to fit the target without distortion, centered."""

    if source_w <= 0 or source_h <= 0 or target_w <= 0 or target_h <= 0:
        raise ValueError(
            f"Dimensions must be positive: {source_w}x{source_h} -> {target_w}x{target_h}"
        )

    source_ratio = source_w / source_h
    target_ratio = target_w / target_h

    if source_ratio > target_ratio:
        draw_w = float(target_w)
        draw_h = target_w / source_ratio
        return Fit(draw_w, draw_h, 0.0, (target_h - draw_h) / 2)
    if source_ratio < target_ratio:
        draw_h = float(target_h)
        draw_w = target_h * source_ratio
        return Fit(draw_w, draw_h, (target_w - draw_w) / 2, 0.0)
    return Fit(float(target_w), float(target_h), 0.0, 0.0)


def new_frame(resolution: Resolution = TARGET_RESOLUTION) -> Image.Image:
    return Image.new("RGB", (resolution.width, resolution.height))


def render_frame(
    frame: Image.Image,
    source: Image.Image,
    fit: Fit,
    padding_color: ColorSample,
) -> None:
    """Fill the frame with the padding color, then draw the source into it."""

    frame.paste(padding_color.as_tuple(), (0, 0, frame.width, frame.height))

    left, top, width, height = fit.box(frame.width, frame.height)
    if source.mode not in ("RGB", "RGBA"):
        source = source.convert("RGBA")
    resized = source.resize((width, height), Image.Resampling.LANCZOS)
    if resized.mode == "RGBA":
        frame.paste(resized, (left, top), resized)
    else:
        frame.paste(resized, (left, top))


def encode_frame(frame: Image.Image | None, quality: int = JPEG_QUALITY) -> bytes:
    """Serialize the frame as JPEG bytes."""

    if frame is None or frame.width <= 0 or frame.height <= 0:
        raise EncodingError("Frame is empty; nothing to encode.")
    buffer = io.BytesIO()
    try:
        frame.convert("RGB").save(buffer, format="JPEG", quality=quality)
    except (OSError, ValueError) as exc:
        raise EncodingError(f"JPEG encoding failed: {exc}") from exc
    return buffer.getvalue()


def letterbox_image(
    image: Image.Image,
    padding_color: ColorSample,
    resolution: Resolution = TARGET_RESOLUTION,
) -> Image.Image:
    """Pad image to target resolution without cropping."""

    fit = compute_fit(image.width, image.height, resolution.width, resolution.height)
    frame = new_frame(resolution)
    render_frame(frame, image, fit, padding_color)
    return frame
