"""Background color detection from a decoded image."""

from __future__ import annotations

from PIL import Image

from thumbnail_padder.colors import BLACK, ColorSample, ThumbnailError

SAMPLE_MODES = ("corner", "downsample", "edge_mean")


class ExtractionError(ThumbnailError, RuntimeError):
    """The image could not be sampled for a background color."""


def extract_background(image: Image.Image, mode: str = "corner") -> ColorSample:
    """Infer the padding color of an image.

    ``corner`` reads the pixel at (0, 0) at full resolution, ``downsample``
    averages the whole image into a single pixel, and ``edge_mean`` averages
    the border pixels. A fully transparent corner reads as black; the
    averaging modes composite transparent areas onto black first.
    """

    if mode not in SAMPLE_MODES:
        raise ValueError(f"Unknown sample mode: {mode}")
    if image is None or image.width <= 0 or image.height <= 0:
        raise ExtractionError("Image has no pixels to sample.")

    try:
        if mode == "corner":
            red, green, blue, alpha = image.crop((0, 0, 1, 1)).convert("RGBA").getpixel((0, 0))
            if alpha == 0:
                return BLACK
            return ColorSample(red, green, blue)
        rgb = _flatten(image)
        if mode == "downsample":
            red, green, blue = rgb.resize((1, 1), Image.Resampling.BOX).getpixel((0, 0))
            return ColorSample(red, green, blue)
        return _average_edge_color(rgb)
    except (OSError, ValueError) as exc:
        raise ExtractionError(f"Could not sample image: {exc}") from exc


def _flatten(image: Image.Image) -> Image.Image:
    """Composite onto black and drop alpha."""

    rgba = image.convert("RGBA")
    background = Image.new("RGB", rgba.size, (0, 0, 0))
    background.paste(rgba, mask=rgba.getchannel("A"))
    return background


def _average_edge_color(rgb: Image.Image) -> ColorSample:
    """Compute average edge color for padding."""

    pixels = rgb.load()
    width, height = rgb.size
    samples: list[tuple[int, int, int]] = []
    for x in range(width):
        samples.append(pixels[x, 0])
        samples.append(pixels[x, height - 1])
    for y in range(height):
        samples.append(pixels[0, y])
        samples.append(pixels[width - 1, y])
    red, green, blue = (sum(channel) // len(samples) for channel in zip(*samples))
    return ColorSample(red, green, blue)
