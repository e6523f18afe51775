"""Asynchronous file reading and image decoding."""

from __future__ import annotations

import io
import mimetypes
from pathlib import Path

import anyio
from PIL import Image, ImageOps

from thumbnail_padder.colors import ThumbnailError


class ValidationError(ThumbnailError, ValueError):
    """The selected file is not an image."""


class ReadError(ThumbnailError, OSError):
    """The selected file could not be read."""


class DecodeError(ThumbnailError, ValueError):
    """The file contents are not a decodable image."""


def validate_media_type(path: Path, media_type: str | None = None) -> str:
    """Return the media type of a file, requiring an ``image/*`` type."""

    if not media_type:
        media_type, _encoding = mimetypes.guess_type(path.name)
    if not media_type or not media_type.startswith("image/"):
        raise ValidationError(f"Please select a valid image file: {path.name}")
    return media_type


async def read_file(path: Path) -> bytes:
    """Read the whole file into memory."""

    try:
        return await anyio.Path(path).read_bytes()
    except OSError as exc:
        raise ReadError(f"Failed to read the file {path}: {exc}") from exc


async def decode_image(data: bytes) -> Image.Image:
    """Decode image bytes in a worker thread."""

    if not data:
        raise DecodeError("Failed to load the image: file is empty.")
    return await anyio.to_thread.run_sync(_decode, data)


def _decode(data: bytes) -> Image.Image:
    try:
        with Image.open(io.BytesIO(data)) as opened:
            opened.load()
            image = ImageOps.exif_transpose(opened)
            if "A" in image.getbands() or "transparency" in image.info:
                return image.convert("RGBA")
            return image.convert("RGB")
    except Exception as exc:  # noqa: BLE001
        raise DecodeError(f"Failed to load the image: {exc}") from exc
