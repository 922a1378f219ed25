import logging
import math

import pytest

from core.vector import Color, format_color


def test_full_and_empty_colors():
    assert format_color(Color(1.0, 1.0, 1.0), 1) == "255 255 255"
    assert format_color(Color(0.0, 0.0, 0.0), 1) == "0 0 0"


def test_averages_over_samples():
    # 2.0 / 4 = 0.5 -> int(128.0)
    assert Color(2.0, 4.0, 0.4).format_color(4) == "128 255 25"


def test_clamps_out_of_range_channels():
    assert Color(-1.0, 5.0, 0.999).format_color(1) == "0 255 255"
    assert Color(math.inf, -math.inf, 0.5).format_color(1) == "255 0 128"


def test_nan_channel_quantizes_to_zero(caplog):
    caplog.set_level(logging.DEBUG, logger="core.vector")
    assert Color(math.nan, 1.0, 0.0).format_color(1) == "0 255 0"
    assert "nan" in caplog.text


def test_zero_samples_does_not_raise():
    # 1/0 -> inf -> 255; 0/0 -> nan -> 0
    assert Color(1.0, 0.0, -1.0).format_color(0) == "255 0 0"


@pytest.mark.parametrize("spp", [1, 10, 100])
def test_output_is_three_integers(spp):
    parts = Color(0.3 * spp, 0.6 * spp, 0.9 * spp).format_color(spp).split(" ")
    assert len(parts) == 3
    assert all(0 <= int(p) <= 255 for p in parts)
