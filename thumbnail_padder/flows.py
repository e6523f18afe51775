"""Prefect flow orchestration."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from prefect import flow

from thumbnail_padder.colors import sample_to_hex
from thumbnail_padder.session import SessionController

LOGGER = logging.getLogger("thumbnail_padder.flow")


@dataclass(frozen=True)
class FlowOutcome:
    thumbnail_path: Path | None
    extracted_color: str | None
    padding_color: str | None
    alerts: list[str] = field(default_factory=list)


@flow(name="build_thumbnail_flow")
async def build_thumbnail_flow(
    input_path: Path,
    out_dir: Path,
    color: str | None = None,
    sample_mode: str = "corner",
    media_type: str | None = None,
) -> FlowOutcome:
    """Load an image, optionally override its padding color, and save the thumbnail."""

    alerts: list[str] = []
    controller = SessionController(sample_mode=sample_mode, on_alert=alerts.append)

    if not await controller.upload(input_path, media_type=media_type):
        return FlowOutcome(
            thumbnail_path=None, extracted_color=None, padding_color=None, alerts=alerts
        )

    state = controller.state
    LOGGER.info("Extracted padding color %s", sample_to_hex(state.extracted_color))
    if color:
        state = controller.change_color(color)
        LOGGER.info("Padding color overridden with %s", sample_to_hex(state.current_color))

    thumbnail_path = await controller.download(out_dir)
    if thumbnail_path is None:
        LOGGER.error("No thumbnail written for %s", input_path)

    return FlowOutcome(
        thumbnail_path=thumbnail_path,
        extracted_color=sample_to_hex(state.extracted_color),
        padding_color=sample_to_hex(state.current_color),
        alerts=alerts,
    )
