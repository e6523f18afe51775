"""Session state and orchestration of upload, recolor, restore and download."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Callable

import anyio
from PIL import Image

from thumbnail_padder.colors import BLACK, ColorSample, sample_to_hex, to_sample_or_black
from thumbnail_padder.extract import ExtractionError, extract_background
from thumbnail_padder.loader import (
    DecodeError,
    ReadError,
    ValidationError,
    decode_image,
    read_file,
    validate_media_type,
)
from thumbnail_padder.render import (
    TARGET_RESOLUTION,
    EncodingError,
    compute_fit,
    encode_frame,
    new_frame,
    render_frame,
)
from thumbnail_padder.utils import thumbnail_filename

LOGGER = logging.getLogger("thumbnail_padder.session")

PREVIEW_ALERT = "Could not generate thumbnail preview."
DOWNLOAD_ALERT = "Could not prepare the image for download."


@dataclass(frozen=True)
class SessionState:
    """Snapshot of the loaded image, its colors and the rendered thumbnail.

    The default instance is the empty session. Every transition returns a new
    snapshot; the source image itself is never modified.
    """

    source: Image.Image | None = field(default=None, compare=False, repr=False)
    source_name: str | None = None
    extracted_color: ColorSample | None = None
    current_color: ColorSample | None = None
    thumbnail: bytes | None = field(default=None, repr=False)
    preview_visible: bool = False

    @property
    def is_loaded(self) -> bool:
        return self.source is not None

    @property
    def restore_visible(self) -> bool:
        if not self.is_loaded:
            return False
        return self.current_color != self.extracted_color

    @property
    def download_name(self) -> str:
        return thumbnail_filename(self.source_name)


@dataclass(frozen=True)
class TransitionResult:
    state: SessionState
    alerts: tuple[str, ...] = ()


def render_state(state: SessionState) -> TransitionResult:
    """Compose the frame for the current color and refresh the thumbnail."""

    if state.source is None or state.current_color is None:
        return TransitionResult(state)

    frame = new_frame(TARGET_RESOLUTION)
    fit = compute_fit(state.source.width, state.source.height, frame.width, frame.height)
    render_frame(frame, state.source, fit, state.current_color)
    try:
        thumbnail = encode_frame(frame)
    except EncodingError as exc:
        LOGGER.error("Error generating thumbnail: %s", exc)
        hidden = replace(state, thumbnail=None, preview_visible=False)
        return TransitionResult(hidden, alerts=(PREVIEW_ALERT,))
    return TransitionResult(replace(state, thumbnail=thumbnail, preview_visible=True))


def load_image(
    state: SessionState,
    image: Image.Image,
    name: str | None,
    sample_mode: str = "corner",
) -> TransitionResult:
    """Replace the session with a freshly decoded image."""

    try:
        extracted = extract_background(image, mode=sample_mode)
    except ExtractionError as exc:
        LOGGER.warning("Could not extract color, defaulting to black: %s", exc)
        extracted = BLACK

    loaded = SessionState(
        source=image,
        source_name=name,
        extracted_color=extracted,
        current_color=extracted,
    )
    return render_state(loaded)


def change_color(state: SessionState, color: str | ColorSample) -> TransitionResult:
    """Set a user-chosen padding color and re-render."""

    if not state.is_loaded:
        return TransitionResult(state)
    if not isinstance(color, ColorSample):
        color = to_sample_or_black(color)
    return render_state(replace(state, current_color=color))


def restore(state: SessionState) -> TransitionResult:
    """Go back to the color extracted from the image."""

    if not state.is_loaded:
        return TransitionResult(state)
    return change_color(state, state.extracted_color)


class SessionController:
    """Drives a session from user events.

    File reading and decoding are awaited in sequence. Each upload takes a
    generation number and its result is dropped if a newer upload started in
    the meantime.
    """

    def __init__(
        self,
        sample_mode: str = "corner",
        on_alert: Callable[[str], None] | None = None,
    ) -> None:
        self.sample_mode = sample_mode
        self.on_alert = on_alert
        self.state = SessionState()
        self._generation = 0

    def _apply(self, result: TransitionResult) -> SessionState:
        self.state = result.state
        for message in result.alerts:
            self._alert(message)
        return self.state

    def _alert(self, message: str) -> None:
        LOGGER.error("%s", message)
        if self.on_alert is not None:
            self.on_alert(message)

    async def upload(self, path: Path | str, media_type: str | None = None) -> bool:
        """Load an image file; returns whether the session now shows it."""

        path = Path(path)
        try:
            validate_media_type(path, media_type)
        except ValidationError as exc:
            self._alert(str(exc))
            return False

        self._generation += 1
        generation = self._generation
        try:
            data = await read_file(path)
            image = await decode_image(data)
        except (ReadError, DecodeError) as exc:
            if generation != self._generation:
                LOGGER.debug("Ignoring failure of superseded upload %s: %s", path.name, exc)
                return False
            self._alert(str(exc))
            return False

        if generation != self._generation:
            LOGGER.debug("Discarding stale upload of %s", path.name)
            return False

        self._apply(load_image(self.state, image, path.name, self.sample_mode))
        LOGGER.info(
            "Loaded %s (%sx%s), padding color %s",
            path.name,
            image.width,
            image.height,
            sample_to_hex(self.state.extracted_color),
        )
        return True

    def change_color(self, color: str | ColorSample) -> SessionState:
        return self._apply(change_color(self.state, color))

    def restore(self) -> SessionState:
        return self._apply(restore(self.state))

    async def download(self, out_dir: Path | str) -> Path | None:
        """Write the current thumbnail as ``thumbnail-<name>.jpg``."""

        state = self.state
        if state.thumbnail is None:
            self._alert(DOWNLOAD_ALERT)
            return None

        target = Path(out_dir) / state.download_name
        try:
            await anyio.Path(target.parent).mkdir(parents=True, exist_ok=True)
            await anyio.Path(target).write_bytes(state.thumbnail)
        except OSError as exc:
            LOGGER.error("Failed to write %s: %s", target, exc)
            self._alert(DOWNLOAD_ALERT)
            return None
        LOGGER.info("Saved thumbnail to %s", target)
        return target
