"""CLI entrypoint for Thumbnail Padder."""

from __future__ import annotations

import argparse
import logging
import sys
from functools import partial
from pathlib import Path

import anyio
from dotenv import find_dotenv, load_dotenv

from thumbnail_padder.config import Settings
from thumbnail_padder.extract import SAMPLE_MODES
from thumbnail_padder.flows import build_thumbnail_flow


def build_parser(settings: Settings | None = None) -> argparse.ArgumentParser:
    settings = settings or Settings()
    parser = argparse.ArgumentParser(description="Pad an image into a 1280x720 thumbnail")
    parser.add_argument("--input", required=True, help="Input image path")
    parser.add_argument("--out", default=str(settings.out_dir), help="Output directory")
    parser.add_argument("--color", default=None, help="Padding color override, e.g. #00ff00")
    parser.add_argument(
        "--sample-mode",
        default=settings.sample_mode,
        choices=list(SAMPLE_MODES),
        help="How the padding color is detected",
    )
    parser.add_argument(
        "--media-type",
        default=None,
        help="Declared media type; guessed from the file name when omitted",
    )
    return parser


def main() -> None:
    load_dotenv(find_dotenv(usecwd=True))
    settings = Settings.from_env()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )

    parser = build_parser(settings)
    args = parser.parse_args()

    flow_runner = partial(
        build_thumbnail_flow,
        input_path=Path(args.input),
        out_dir=Path(args.out),
        color=args.color,
        sample_mode=args.sample_mode,
        media_type=args.media_type,
    )
    outcome = anyio.run(flow_runner)

    if outcome.thumbnail_path is None:
        sys.exit(1)
    print(outcome.thumbnail_path)


if __name__ == "__main__":
    main()
