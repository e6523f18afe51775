"""Tests for download naming and log level parsing."""

import logging

import pytest

from thumbnail_padder.utils import parse_log_level, thumbnail_filename


def test_thumbnail_filename_strips_extension() -> None:
    assert thumbnail_filename("photo.png") == "thumbnail-photo.jpg"
    assert thumbnail_filename("holiday.photo.png") == "thumbnail-holiday.jpg"
    assert thumbnail_filename("/tmp/shots/cat.jpeg") == "thumbnail-cat.jpg"


def test_thumbnail_filename_falls_back_to_image() -> None:
    assert thumbnail_filename(None) == "thumbnail-image.jpg"
    assert thumbnail_filename(".hidden") == "thumbnail-image.jpg"


def test_parse_log_level() -> None:
    assert parse_log_level("debug") == logging.DEBUG
    assert parse_log_level(None) == logging.INFO
    with pytest.raises(ValueError):
        parse_log_level("chatty")
