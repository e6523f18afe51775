"""Tests for color text conversion."""

import logging

import pytest

from thumbnail_padder.colors import (
    BLACK,
    ColorSample,
    FormatError,
    parse_hex,
    parse_sample_text,
    sample_to_css,
    sample_to_hex,
    to_sample,
    to_sample_or_black,
)


def test_rgb_text_to_hex() -> None:
    assert sample_to_hex(parse_sample_text("rgb(18,52,86)")) == "#123456"


def test_hex_is_lowercase_and_padded() -> None:
    assert sample_to_hex(ColorSample(255, 0, 0)) == "#ff0000"
    assert sample_to_hex(ColorSample(1, 2, 3)) == "#010203"
    assert len(sample_to_hex(ColorSample(0, 0, 0))) == 7


def test_parse_sample_text_uses_first_three_integers() -> None:
    assert parse_sample_text("rgba(12, 34, 56, 0.5)") == ColorSample(12, 34, 56)
    assert parse_sample_text("rgb(300, 0, 0)") == ColorSample(255, 0, 0)


def test_parse_sample_text_needs_three_channels() -> None:
    with pytest.raises(FormatError):
        parse_sample_text("rgb(12, 34)")


def test_parse_hex_short_and_long_forms() -> None:
    assert parse_hex("#00FF00") == ColorSample(0, 255, 0)
    assert parse_hex("#0f0") == ColorSample(0, 255, 0)
    with pytest.raises(FormatError):
        parse_hex("#12345")


def test_both_forms_compare_equal() -> None:
    assert to_sample("#ff0000") == to_sample(sample_to_css(ColorSample(255, 0, 0)))


def test_malformed_text_falls_back_to_black(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="thumbnail_padder.colors"):
        assert to_sample_or_black("not a color") == BLACK
    assert "defaulting to black" in caplog.text
